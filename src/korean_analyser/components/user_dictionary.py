"""
Пользовательский словарь с дополнительными записями морфем.

Формат: текст UTF-8, одна запись на строку, поля через пробельные символы
``surface [TAG] [score]``. Пустые строки и комментарии ``#`` пропускаются.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Iterator, Tuple, Union

from ..exceptions import UserDictionaryError

logger = logging.getLogger(__name__)

DEFAULT_ENTRY_TAG = "NNP"
DEFAULT_ENTRY_SCORE = 0.0


@dataclass(frozen=True)
class UserDictionaryEntry:
    """Одна запись словаря."""
    surface: str
    tag: str = DEFAULT_ENTRY_TAG
    score: float = DEFAULT_ENTRY_SCORE


@dataclass(frozen=True)
class UserDictionary:
    """Неизменяемый набор записей, который можно разделять между анализаторами."""

    entries: Tuple[UserDictionaryEntry, ...] = ()
    source: str = "<memory>"

    @classmethod
    def open(cls, path: Union[str, Path]) -> "UserDictionary":
        """
        Читает файл словаря.

        Args:
            path: Путь к файлу словаря

        Returns:
            Загруженный словарь

        Raises:
            OSError: если файл нельзя прочитать
            UserDictionaryError: если строка некорректна
        """
        path = Path(path)
        with open(path, "r", encoding="utf-8") as f:
            dictionary = cls.from_lines(f, source=str(path))
        logger.info(f"Пользовательский словарь загружен: {path} ({len(dictionary)} записей)")
        return dictionary

    @classmethod
    def from_lines(cls, lines: Iterable[str], source: str = "<memory>") -> "UserDictionary":
        """Разбирает строки словаря; формат описан в документации модуля."""
        entries = []
        for lineno, raw in enumerate(lines, 1):
            line = raw.split("#", 1)[0].strip()
            if not line:
                continue
            entries.append(_parse_entry(line, lineno, source))
        return cls(entries=tuple(entries), source=source)

    def __len__(self) -> int:
        return len(self.entries)

    def __iter__(self) -> Iterator[UserDictionaryEntry]:
        return iter(self.entries)


def _parse_entry(line: str, lineno: int, source: str) -> UserDictionaryEntry:
    fields = line.split()
    if len(fields) > 3:
        raise UserDictionaryError(
            f"{source}:{lineno}: ожидается 'surface [TAG] [score]', получено полей: {len(fields)}"
        )
    surface = fields[0]
    tag = fields[1] if len(fields) > 1 else DEFAULT_ENTRY_TAG
    score = DEFAULT_ENTRY_SCORE
    if len(fields) > 2:
        try:
            score = float(fields[2])
        except ValueError:
            raise UserDictionaryError(f"{source}:{lineno}: вес не является числом: {fields[2]!r}") from None
    return UserDictionaryEntry(surface=surface, tag=tag, score=score)
