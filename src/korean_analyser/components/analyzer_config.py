"""
Конфигурация анализатора: разбиение составных слов, стоп-теги, политика
униграмм для неизвестных слов и необязательный пользовательский словарь.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from importlib import resources
from typing import Any, FrozenSet, Iterable, Optional, Union

from ..exceptions import UserDictionaryError
from .pos_tags import POSTag
from .user_dictionary import UserDictionary

logger = logging.getLogger(__name__)

# Встроенный словарь, путь относительно корня пакета
USER_DICT_RESOURCE = "resources/userdict/userdict_ko.txt"


class DecompoundMode(str, Enum):
    """Способ выдачи составных токенов."""
    NONE = "NONE"          # только составное слово
    DISCARD = "DISCARD"    # только части
    MIXED = "MIXED"        # составное слово, затем его части

    @classmethod
    def resolve(cls, value: Union["DecompoundMode", str]) -> "DecompoundMode":
        if isinstance(value, cls):
            return value
        try:
            return cls[str(value).strip().upper()]
        except KeyError:
            raise ValueError(f"Неизвестный режим разбиения составных слов: {value!r}") from None


class AnalyzerMode(str, Enum):
    """
    Именованные пресеты.

    BASIC - DecompoundMode.MIXED, BASIC_STOP_TAGS, outputUnknownUnigrams=False,
    встроенный пользовательский словарь.
    """
    BASIC = "BASIC"


BASIC_STOP_TAGS: FrozenSet[POSTag] = frozenset({
    POSTag.E,
    POSTag.IC,
    POSTag.J,
    POSTag.MAJ,
    POSTag.MM,
    POSTag.SP,
    POSTag.SSC,
    POSTag.SSO,
    POSTag.SE,
    POSTag.XPN,
    POSTag.XSA,
    POSTag.XSN,
    POSTag.XSV,
    POSTag.UNA,
    POSTag.NA,
    POSTag.VSV,
})


@dataclass(frozen=True)
class AnalyzerConfiguration:
    """
    Неизменяемые настройки анализа, общие для всех вызовов сервиса.

    Явный конструктор принимает все четыре значения как есть и не выполняет
    ввода-вывода; для пресетов используйте from_mode() или from_config().
    """

    user_dictionary: Optional[UserDictionary]
    decompound_mode: DecompoundMode
    stop_tags: FrozenSet[POSTag] = field(default_factory=frozenset)
    output_unknown_unigrams: bool = False

    def __post_init__(self):
        # Имена из YAML или переданные строками приводятся к перечислениям
        object.__setattr__(self, "decompound_mode", DecompoundMode.resolve(self.decompound_mode))
        object.__setattr__(self, "stop_tags", frozenset(POSTag.resolve(t) for t in self.stop_tags))
        object.__setattr__(self, "output_unknown_unigrams", bool(self.output_unknown_unigrams))

    @classmethod
    def from_mode(cls, mode: Union[AnalyzerMode, str] = AnalyzerMode.BASIC) -> "AnalyzerConfiguration":
        """
        Создаёт конфигурацию по пресету.

        Если встроенный словарь не открывается, ошибка логируется и
        конфигурация создаётся без пользовательского словаря.
        """
        if not isinstance(mode, AnalyzerMode):
            mode = AnalyzerMode(str(mode).strip().upper())
        user_dictionary = load_bundled_user_dictionary()
        if mode is AnalyzerMode.BASIC:
            return cls(
                user_dictionary=user_dictionary,
                decompound_mode=DecompoundMode.MIXED,
                stop_tags=BASIC_STOP_TAGS,
                output_unknown_unigrams=False,
            )
        raise ValueError(f"Неподдерживаемый режим анализатора: {mode}")

    @classmethod
    def from_config(cls, cfg: Optional[Any] = None) -> "AnalyzerConfiguration":
        """
        Создаёт конфигурацию из секции ``analyzer`` конфигурации проекта.

        Args:
            cfg: Экземпляр Config (по умолчанию глобальный config)

        Raises:
            ValueError: при неизвестном режиме, режиме разбиения или теге
            OSError: если указанный словарь нельзя прочитать
        """
        if cfg is None:
            from ..config import config as cfg
        mode = str(cfg.get_analyzer_mode()).upper()
        if mode != "CUSTOM":
            return cls.from_mode(mode)

        dict_path = cfg.get_user_dictionary_path()
        user_dictionary = UserDictionary.open(dict_path) if dict_path else None
        return cls(
            user_dictionary=user_dictionary,
            decompound_mode=cfg.get_decompound_mode(),
            stop_tags=cfg.get_stop_tags(),
            output_unknown_unigrams=cfg.is_output_unknown_unigrams_enabled(),
        )

    def with_stop_tags(self, stop_tags: Iterable[Union[POSTag, str]]) -> "AnalyzerConfiguration":
        """Возвращает копию с другим набором стоп-тегов."""
        return AnalyzerConfiguration(
            user_dictionary=self.user_dictionary,
            decompound_mode=self.decompound_mode,
            stop_tags=frozenset(stop_tags),
            output_unknown_unigrams=self.output_unknown_unigrams,
        )

    def describe(self) -> dict:
        return {
            "decompound_mode": self.decompound_mode.value,
            "stop_tags": sorted(t.value for t in self.stop_tags),
            "output_unknown_unigrams": self.output_unknown_unigrams,
            "user_dictionary": self.user_dictionary.source if self.user_dictionary else None,
            "user_dictionary_entries": len(self.user_dictionary) if self.user_dictionary else 0,
        }


def load_bundled_user_dictionary() -> Optional[UserDictionary]:
    """Открывает словарь из пакета или возвращает None при ошибке."""
    try:
        resource = resources.files("korean_analyser").joinpath(USER_DICT_RESOURCE)
        with resource.open("r", encoding="utf-8") as f:
            return UserDictionary.from_lines(f, source=f"korean_analyser/{USER_DICT_RESOURCE}")
    except (OSError, UserDictionaryError) as e:
        logger.error(f"Не удалось открыть пользовательский словарь {USER_DICT_RESOURCE}, продолжаем без него: {e}")
        return None
