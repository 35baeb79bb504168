"""
Модуль для работы с конфигурацией проекта

Функции:
- Загрузка config.yaml (+ профили: config.prod.yaml, config.test.yaml)
- ENV-переопределения (префикс KOREAN_ANALYSER_, вложенность через __)
- Загрузка .env
- Настройка логирования по запросу приложения (configure_logging)
"""

import os
import yaml
from pathlib import Path
from typing import Dict, Any, List, Optional
from dotenv import load_dotenv
import logging
from datetime import datetime

logger = logging.getLogger(__name__)

ENV_PREFIX = 'KOREAN_ANALYSER_'
PROFILE_ENV = 'KOREAN_ANALYSER_ENV'


class Config:
    """Класс для работы с конфигурацией проекта

    Создание экземпляра только читает настройки; корневое логирование
    настраивается явным вызовом configure_logging().
    """

    def __init__(self, config_path: Optional[str] = None):
        """
        Инициализация конфигурации

        Args:
            config_path: Путь к файлу конфигурации
        """
        if config_path:
            self.config_path = Path(config_path)
        else:
            # Ищем config.yaml в текущей директории, затем в родительских
            current_dir = Path.cwd()
            config_path = current_dir / "config.yaml"
            while not config_path.exists() and current_dir.parent != current_dir:
                current_dir = current_dir.parent
                config_path = current_dir / "config.yaml"
            self.config_path = config_path

        self.config_data: Dict[str, Any] = {}
        self.env_data: Dict[str, Any] = {}

        self._load_env()
        self._load_config()
        try:
            self._apply_env_overrides()
            self._normalize()
        except Exception as e:
            logger.warning(f"Проблема при применении ENV/нормализации: {e}")

    def _load_env(self):
        """Загружает переменные окружения из .env файла"""
        try:
            load_dotenv()
            self.env_data = {
                PROFILE_ENV: os.getenv(PROFILE_ENV),
                'KIWI_MODEL_PATH': os.getenv('KIWI_MODEL_PATH'),
            }
            logger.debug("Переменные окружения загружены из .env (если есть)")
        except Exception as e:
            logger.error(f"Ошибка загрузки переменных окружения: {e}")

    def _resolve_config_path(self) -> Path:
        env = (os.getenv(PROFILE_ENV) or '').lower().strip()
        root = self.config_path.parent if self.config_path else Path.cwd()
        if env == 'production':
            candidate = root / 'config.prod.yaml'
        elif env == 'testing':
            candidate = root / 'config.test.yaml'
        else:
            candidate = root / 'config.yaml'
        if candidate.exists():
            return candidate
        # Фолбэк на исходный путь
        return self.config_path

    def _load_config(self):
        """Загружает конфигурацию из YAML файла поверх значений по умолчанию"""
        defaults = self._get_default_config()
        try:
            # Выбор файла с учётом профиля окружения
            self.config_path = self._resolve_config_path()
            if self.config_path.exists():
                with open(self.config_path, 'r', encoding='utf-8') as f:
                    loaded = yaml.safe_load(f) or {}
                self.config_data = _deep_merge(defaults, loaded)
                logger.info(f"Конфигурация загружена: {self.config_path}")
            else:
                logger.debug(f"Файл конфигурации {self.config_path} не найден, используются значения по умолчанию")
                self.config_data = defaults
        except Exception as e:
            logger.error(f"Ошибка загрузки конфигурации: {e}")
            self.config_data = defaults

    def _set_nested(self, data: Dict[str, Any], dotted: str, value: Any) -> None:
        cur = data
        keys = dotted.split('.')
        for k in keys[:-1]:
            if k not in cur or not isinstance(cur[k], dict):
                cur[k] = {}
            cur = cur[k]
        cur[keys[-1]] = value

    def _apply_env_overrides(self) -> None:
        """Переопределяет конфиг значениями из ENV (KOREAN_ANALYSER_*)."""
        for key, val in os.environ.items():
            if not key.startswith(ENV_PREFIX) or key == PROFILE_ENV:
                continue
            # Вложенность разделяется двойным подчёркиванием
            dotted = key[len(ENV_PREFIX):].replace('__', '.').lower()
            self._set_nested(self.config_data, dotted, _parse_env_value(val))
        if os.getenv(PROFILE_ENV):
            logger.info(f"Активирован профиль: {os.getenv(PROFILE_ENV)}")

    def _normalize(self) -> None:
        """Приводит значения к виду, который ожидает AnalyzerConfiguration.

        Допустимость имён здесь не проверяется: неизвестный режим или тег
        приводит к ValueError при создании AnalyzerConfiguration.
        """
        mode = self.get('analyzer.decompound_mode')
        if isinstance(mode, str):
            self._set_nested(self.config_data, 'analyzer.decompound_mode', mode.strip().upper())

        stop_tags = self.get('analyzer.stop_tags')
        if isinstance(stop_tags, str):
            # ENV-переопределение приходит строкой через запятую
            self._set_nested(self.config_data, 'analyzer.stop_tags',
                             [t.strip() for t in stop_tags.split(',') if t.strip()])

    def configure_logging(self, force: bool = False) -> None:
        """Инициализирует/переинициализирует корневое логирование по config.

        Вызывается приложением или тестами явно; библиотека сама корневой
        логгер не трогает. Повторный вызов с теми же параметрами ничего не
        делает, если не передан force=True.
        """
        root = logging.getLogger()

        # Раздельные уровни для консоли и файла
        console_level_name = str(self.get_console_logging_level()).upper()
        file_level_name = str(self.get_file_logging_level()).upper()
        console_level = getattr(logging, console_level_name, logging.INFO)
        file_level = getattr(logging, file_level_name, logging.DEBUG)

        desired_fmt = self.get_logging_format()
        desired_file = self.get_logging_file() if self.is_logging_to_file_enabled() else None

        if getattr(root, "_korean_analyser_configured", False) and not force:
            # Проверим, не изменились ли параметры
            if (
                getattr(root, "_korean_analyser_console_level", None) == console_level_name and
                getattr(root, "_korean_analyser_file_level", None) == file_level_name and
                getattr(root, "_korean_analyser_format", None) == desired_fmt and
                getattr(root, "_korean_analyser_file", None) == desired_file
            ):
                return

        handlers: List[logging.Handler] = []
        console = logging.StreamHandler()
        console.setLevel(console_level)
        console.setFormatter(logging.Formatter(desired_fmt))
        handlers.append(console)

        if desired_file:
            # Очищаем старые логи перед созданием нового
            self.cleanup_old_log_files()
            log_file = Path(desired_file)
            try:
                log_file.parent.mkdir(parents=True, exist_ok=True)
                fh = logging.FileHandler(log_file, encoding='utf-8')
                fh.setLevel(file_level)
                fh.setFormatter(logging.Formatter(desired_fmt))
                handlers.append(fh)
            except OSError as e:
                logger.debug(f"Не удалось открыть файл лога: {e}")

        root_level = min(console_level, file_level) if desired_file else console_level
        logging.basicConfig(level=root_level, handlers=handlers, format=desired_fmt, force=True)
        setattr(root, "_korean_analyser_configured", True)
        setattr(root, "_korean_analyser_console_level", console_level_name)
        setattr(root, "_korean_analyser_file_level", file_level_name)
        setattr(root, "_korean_analyser_format", desired_fmt)
        setattr(root, "_korean_analyser_file", desired_file)

    def _get_default_config(self) -> Dict[str, Any]:
        """Возвращает конфигурацию по умолчанию"""
        return {
            'analyzer': {
                # Пресет BASIC или CUSTOM для значений ниже
                'mode': "BASIC",
                'decompound_mode': "MIXED",
                'stop_tags': [
                    "E", "IC", "J", "MAJ", "MM", "SP", "SSC", "SSO",
                    "SE", "XPN", "XSA", "XSN", "XSV", "UNA", "NA", "VSV",
                ],
                'output_unknown_unigrams': False,
                'user_dictionary': None,
            },
            'engine': {
                'type': "kiwi",
                'num_workers': None,
                'model_type': None,
                'model_path': None,
                'load_default_dict': True,
                'integrate_allomorph': True,
                # Сколько экземпляров Kiwi (по одному на словарь) держать в памяти
                'max_instances': 2,
            },
            'export': {
                'results_folder': "data/results",
                'sheet_name': "Terms",
            },
            'logging': {
                'level': "INFO",
                'format': "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
                'log_to_file': False,
                'log_file': "logs/korean_analyser.log",
                'max_log_files': 10,
            },
        }

    def get(self, key: str, default: Any = None) -> Any:
        """
        Получает значение из конфигурации

        Args:
            key: Ключ в формате 'section.subsection.parameter'
            default: Значение по умолчанию

        Returns:
            Значение параметра или default
        """
        try:
            value = self.config_data
            for k in key.split('.'):
                value = value[k]
            return value
        except (KeyError, TypeError):
            return default

    def get_env(self, key: str, default: Any = None) -> Any:
        """Получает значение, загруженное из окружения"""
        value = self.env_data.get(key)
        return default if value is None else value

    # --- analyzer ---
    def get_analyzer_config(self) -> Dict[str, Any]:
        return self.config_data.get('analyzer', {})

    def get_analyzer_mode(self) -> str:
        return self.get('analyzer.mode', "BASIC")

    def get_decompound_mode(self) -> str:
        return self.get('analyzer.decompound_mode', "MIXED")

    def get_stop_tags(self) -> List[str]:
        return list(self.get('analyzer.stop_tags', []) or [])

    def is_output_unknown_unigrams_enabled(self) -> bool:
        return bool(self.get('analyzer.output_unknown_unigrams', False))

    def get_user_dictionary_path(self) -> Optional[str]:
        path = self.get('analyzer.user_dictionary')
        return os.path.expanduser(path) if path else None

    # --- engine ---
    def get_engine_config(self) -> Dict[str, Any]:
        """Настройки движка; model_path по умолчанию берётся из KIWI_MODEL_PATH"""
        engine_cfg = dict(self.config_data.get('engine', {}) or {})
        if not engine_cfg.get('model_path'):
            engine_cfg['model_path'] = self.get_env('KIWI_MODEL_PATH')
        return engine_cfg

    # --- export ---
    def get_results_folder(self) -> str:
        """Получает папку для результатов"""
        return self.get('export.results_folder', "data/results")

    def get_export_sheet_name(self) -> str:
        """Получает название листа Excel с термами"""
        return self.get('export.sheet_name', "Terms")

    # --- logging ---
    def get_logging_config(self) -> Dict[str, Any]:
        """Получает конфигурацию логирования"""
        return self.config_data.get('logging', {})

    def get_console_logging_level(self) -> str:
        """Получает уровень логирования для консоли"""
        # Поддержка формата logging.level для обратной совместимости
        return self.get('logging.console_level', self.get('logging.level', "INFO"))

    def get_file_logging_level(self) -> str:
        """Получает уровень логирования для файла"""
        return self.get('logging.file_level', "DEBUG")

    def get_logging_format(self) -> str:
        """Получает формат логов"""
        return self.get('logging.format', "%(asctime)s - %(name)s - %(levelname)s - %(message)s")

    def is_logging_to_file_enabled(self) -> bool:
        """Проверяет, включено ли логирование в файл"""
        return bool(self.get('logging.log_to_file', False))

    def get_logging_file(self) -> str:
        """Получает путь к файлу логов; {timestamp} заменяется меткой времени сессии"""
        template = self.get('logging.log_file', "logs/korean_analyser.log")
        if "{timestamp}" in template:
            return template.replace("{timestamp}", datetime.now().strftime("%Y%m%d_%H%M%S"))
        return template

    def get_max_log_files(self) -> int:
        """Получает максимальное количество файлов логов для хранения"""
        return int(self.get('logging.max_log_files', 10))

    def cleanup_old_log_files(self) -> None:
        """Удаляет старые файлы логов, оставляя только последние max_log_files"""
        logs_dir = Path(self.get_logging_file()).parent
        if not logs_dir.exists():
            return
        # Сортируем по времени модификации (самые новые последними)
        log_files = sorted(logs_dir.glob("korean_analyser_*.log"), key=lambda f: f.stat().st_mtime)
        max_files = self.get_max_log_files()
        for old_file in log_files[:-max_files] if len(log_files) > max_files else []:
            try:
                old_file.unlink()
                logger.debug(f"Удален старый лог файл: {old_file}")
            except OSError as e:
                logger.debug(f"Не удалось удалить лог файл {old_file}: {e}")


def _parse_env_value(val: str) -> Any:
    """Приводит строку из ENV к bool/int/float, если возможно."""
    if val.lower() in ('true', 'false'):
        return val.lower() == 'true'
    if val.lower() in ('null', 'none'):
        return None
    try:
        return float(val) if '.' in val else int(val)
    except ValueError:
        return val


def _deep_merge(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    merged = dict(base)
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = _deep_merge(merged[key], value)
        else:
            merged[key] = value
    return merged


# Глобальный экземпляр конфигурации
config = Config()
