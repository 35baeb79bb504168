"""
Фильтры токенов, применяемые внутри сессии движка.

Каждый фильтр принимает и возвращает итерируемое RawToken, поэтому сессии
собирают их в цепочку, как анализатор собирает фильтры токенов.
"""

from dataclasses import replace
from typing import AbstractSet, Iterable, Iterator

from .base_model import RawToken


def stop_tag_filter(tokens: Iterable[RawToken], stop_tags: AbstractSet[str]) -> Iterator[RawToken]:
    """
    Отбрасывает токены, левая часть речи которых входит в стоп-теги.

    Приращения позиций отброшенных токенов добавляются к следующему
    оставленному токену, поэтому в позициях остаются пропуски.
    """
    skipped = 0
    for token in tokens:
        if token.left_pos in stop_tags:
            skipped += token.position_increment
            continue
        if skipped:
            token = replace(token, position_increment=token.position_increment + skipped)
            skipped = 0
        yield token


def reading_form_filter(tokens: Iterable[RawToken]) -> Iterator[RawToken]:
    """Заменяет текст терма его чтением, если оно есть."""
    for token in tokens:
        if token.reading:
            token = replace(token, term=token.reading)
        yield token


def lower_case_filter(tokens: Iterable[RawToken]) -> Iterator[RawToken]:
    for token in tokens:
        lowered = token.term.lower()
        if lowered != token.term:
            token = replace(token, term=lowered)
        yield token
