"""
Сервис морфологической токенизации корейского текста.

Каждый вызов открывает свою сессию движка и своё состояние коллектора,
поэтому один экземпляр сервиса можно использовать из нескольких потоков.
"""

import logging
from typing import Any, Dict, Iterable, List, Optional

from .components.analyzer_config import AnalyzerConfiguration
from .components.token_collector import TokenCollector
from .exceptions import SessionInitializationError, StreamReadError
from .interfaces.text_processor import AnalyzedTerm, TokenizationServiceInterface
from .models.base_model import BaseSegmentationEngine, EngineSession
from .models.model_factory import EngineFactory

logger = logging.getLogger(__name__)


class TokenizationService(TokenizationServiceInterface):
    """
    Фасад над движком сегментации и коллектором токенов.

    analyze_for_terms() пробрасывает ошибки; analyze_for_string() логирует их
    и возвращает None.
    """

    def __init__(
        self,
        configuration: Optional[AnalyzerConfiguration] = None,
        engine: Optional[BaseSegmentationEngine] = None,
    ):
        """
        Инициализация сервиса

        Args:
            configuration: Настройки анализатора (по умолчанию пресет BASIC)
            engine: Движок сегментации (по умолчанию создаётся по конфигурации проекта)
        """
        self.configuration = configuration or AnalyzerConfiguration.from_mode()
        if engine is None:
            from .config import config
            engine = EngineFactory.create_or_fail(config.get_engine_config())
        self.engine = engine

    def analyze_for_terms(self, text: str) -> List[AnalyzedTerm]:
        """
        Разбирает текст в упорядоченный список термов.

        Args:
            text: Текст для анализа

        Returns:
            Термы, упорядоченные по позиции

        Raises:
            SessionInitializationError: если движок не удалось открыть
            StreamReadError: при сбое потока токенов
        """
        session = self._open_session(text)
        try:
            return TokenCollector().collect(session)
        except StreamReadError as e:
            logger.error(f"TokenizationService.analyze_for_terms() :::: {e}", exc_info=True)
            raise

    def analyze_for_string(self, text: str) -> Optional[str]:
        """
        Разбирает текст в строку поверхностных форм через пробел.

        Args:
            text: Текст для анализа

        Returns:
            Строка форм ("" для пустого текста) или None при ошибке
        """
        try:
            terms = self.analyze_for_terms(text)
        except Exception as e:
            logger.error(f"TokenizationService.analyze_for_string() :::: {e}")
            return None
        ordered = sorted(terms, key=lambda t: t.position)
        return " ".join(t.surface for t in ordered).strip()

    def analyze_many(self, texts: Iterable[str]) -> List[List[AnalyzedTerm]]:
        """Анализирует каждый текст отдельно; первая ошибка пробрасывается."""
        return [self.analyze_for_terms(text) for text in texts]

    def get_model_info(self) -> Dict[str, Any]:
        return {
            "configuration": self.configuration.describe(),
            "engine": self.engine.get_model_info(),
        }

    def _open_session(self, text: str) -> EngineSession:
        try:
            return self.engine.open_session(self.configuration, text)
        except SessionInitializationError as e:
            logger.error(f"Не удалось открыть сессию сегментации :::: {e}", exc_info=True)
            raise
        except Exception as e:
            logger.error(f"Не удалось открыть сессию сегментации :::: {e}", exc_info=True)
            raise SessionInitializationError(f"Сбой открытия движка сегментации: {e}") from e
