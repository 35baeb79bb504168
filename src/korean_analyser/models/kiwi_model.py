"""
Движок сегментации на основе kiwipiepy.

Морфемы Kiwi перегруппировываются в токены анализатора:
- морфемы с общим диапазоном (стяжённые формы, например 했 = 하 + 었)
  дают один токен INFLECT;
- подряд идущие существительные дают токен COMPOUND, выдаваемый согласно
  режиму разбиения составных слов;
- неизвестные слова можно разбить на односимвольные униграммы.
Затем сессия применяет фильтры стоп-тегов, чтений и нижнего регистра.
"""

from __future__ import annotations

import logging
import threading
from collections import OrderedDict
from dataclasses import dataclass
from typing import Any, Dict, Iterable, Iterator, List, Optional, Sequence

import hanja
import kiwipiepy
from kiwipiepy import Kiwi

from ..components.analyzer_config import AnalyzerConfiguration, DecompoundMode
from ..components.pos_tags import POSTag, POSType
from ..components.user_dictionary import UserDictionary
from ..exceptions import SessionInitializationError
from .base_model import (
    TOKEN_TYPE_NUMBER,
    TOKEN_TYPE_PUNCTUATION,
    TOKEN_TYPE_WORD,
    BaseSegmentationEngine,
    BufferedSession,
    RawToken,
)
from .token_filters import lower_case_filter, reading_form_filter, stop_tag_filter

logger = logging.getLogger(__name__)

DEFAULT_MAX_INSTANCES = 2

_EXPLICIT_TAGS = {
    "SP": POSTag.SC,
    "SS": POSTag.SY,
    "SO": POSTag.SY,
    "SW": POSTag.SY,
    "SB": POSTag.SY,
    "UN": POSTag.UNA,
    "XSM": POSTag.XSA,
    # Добавленный к слову согласный (했어용 -> ㅇ) ведёт себя как окончание
    "Z_CODA": POSTag.E,
    # Сайсиот между частями сложного слова - не окончание и не символ
    "Z_SIOT": POSTag.UNKNOWN,
}

_PUNCTUATION_TAGS = {POSTag.SF, POSTag.SC, POSTag.SE, POSTag.SSO, POSTag.SSC, POSTag.SY, POSTag.SP}
_COMPOUND_HEAD_TAGS = {POSTag.NNG, POSTag.NNP}
_COMPOUND_TAIL_TAGS = {POSTag.NNG, POSTag.NNP, POSTag.XSN}


def map_kiwi_tag(tag: str) -> POSTag:
    """Переводит тег Kiwi (например 'JKS', 'VV-R', 'W_URL') в набор частей речи."""
    base = tag.split("-", 1)[0].upper()
    if base in _EXPLICIT_TAGS:
        return _EXPLICIT_TAGS[base]
    if base.startswith("J"):
        return POSTag.J
    if base.startswith("E"):
        return POSTag.E
    if base.startswith("W_"):
        return POSTag.SY
    if base.startswith("USER"):
        return POSTag.NNP
    try:
        return POSTag[base]
    except KeyError:
        return POSTag.UNKNOWN


def token_type_for(tag: POSTag) -> str:
    if tag is POSTag.SN:
        return TOKEN_TYPE_NUMBER
    if tag in _PUNCTUATION_TAGS:
        return TOKEN_TYPE_PUNCTUATION
    return TOKEN_TYPE_WORD


def hanja_reading(surface: str) -> Optional[str]:
    """Хангыльное чтение иероглифов или None, если чтение неизвестно."""
    reading = hanja.translate(surface, "substitution")
    return reading if reading and reading != surface else None


@dataclass
class _Unit:
    """Морфемы, покрывающие один участок текста."""
    start: int
    end: int
    tags: List[POSTag]

    @property
    def is_single(self) -> bool:
        return len(self.tags) == 1


def group_morphemes(morphemes: Iterable[Any]) -> List[_Unit]:
    """
    Группирует морфемы Kiwi с пересекающимися диапазонами.

    Морфемы нулевой длины (например, опущенная связка) присоединяются к
    группе, покрывающей их позицию; группа нулевой длины в конце отбрасывается.
    """
    units: List[_Unit] = []
    for m in morphemes:
        start, end = m.start, m.start + m.len
        tag = map_kiwi_tag(m.tag)
        if units:
            current = units[-1]
            pending_zero = current.start == current.end and start == current.end
            if start < current.end or pending_zero:
                current.end = max(current.end, end)
                current.tags.append(tag)
                continue
        units.append(_Unit(start=start, end=end, tags=[tag]))
    return [u for u in units if u.end > u.start]


class KiwiSession(BufferedSession):
    """Один анализ одного текста на общем экземпляре Kiwi."""

    def __init__(self, kiwi: Kiwi, lock: threading.Lock, configuration: AnalyzerConfiguration, text: str) -> None:
        super().__init__(text)
        self._kiwi = kiwi
        self._lock = lock
        self._configuration = configuration
        self._stop_tags = frozenset(t.value for t in configuration.stop_tags)

    def _produce(self) -> Iterator[RawToken]:
        if not self.text:
            return
        with self._lock:
            morphemes = self._kiwi.tokenize(self.text)
        tokens = self._build_tokens(group_morphemes(morphemes))
        tokens = stop_tag_filter(tokens, self._stop_tags)
        tokens = reading_form_filter(tokens)
        yield from lower_case_filter(tokens)

    def _build_tokens(self, units: Sequence[_Unit]) -> Iterator[RawToken]:
        i = 0
        while i < len(units):
            run_end = self._compound_run_end(units, i)
            if run_end - i > 1:
                yield from self._compound_tokens(units[i:run_end])
                i = run_end
                continue
            yield from self._unit_tokens(units[i])
            i += 1

    @staticmethod
    def _compound_run_end(units: Sequence[_Unit], i: int) -> int:
        first = units[i]
        if not first.is_single or first.tags[0] not in _COMPOUND_HEAD_TAGS:
            return i + 1
        j = i + 1
        while j < len(units):
            unit = units[j]
            if not unit.is_single or unit.tags[0] not in _COMPOUND_TAIL_TAGS or unit.start != units[j - 1].end:
                break
            j += 1
        return j

    def _compound_tokens(self, parts: Sequence[_Unit]) -> Iterator[RawToken]:
        mode = self._configuration.decompound_mode
        start, end = parts[0].start, parts[-1].end
        compound = RawToken(
            term=self.text[start:end],
            start_offset=start,
            end_offset=end,
            position_increment=1,
            token_type=TOKEN_TYPE_WORD,
            pos_type=POSType.COMPOUND.value,
            left_pos=parts[0].tags[0].value,
            right_pos=parts[-1].tags[0].value,
        )
        if mode is DecompoundMode.NONE:
            yield compound
            return
        if mode is DecompoundMode.MIXED:
            yield compound
        for index, part in enumerate(parts):
            increment = 0 if (mode is DecompoundMode.MIXED and index == 0) else 1
            yield self._morpheme_token(part, increment)

    def _unit_tokens(self, unit: _Unit) -> Iterator[RawToken]:
        if not unit.is_single:
            yield RawToken(
                term=self.text[unit.start:unit.end],
                start_offset=unit.start,
                end_offset=unit.end,
                token_type=token_type_for(unit.tags[0]),
                pos_type=POSType.INFLECT.value,
                left_pos=unit.tags[0].value,
                right_pos=unit.tags[-1].value,
            )
            return
        tag = unit.tags[0]
        if tag is POSTag.UNA and self._configuration.output_unknown_unigrams and unit.end - unit.start > 1:
            for offset in range(unit.start, unit.end):
                yield RawToken(
                    term=self.text[offset],
                    start_offset=offset,
                    end_offset=offset + 1,
                    token_type=TOKEN_TYPE_WORD,
                    left_pos=tag.value,
                    right_pos=tag.value,
                )
            return
        yield self._morpheme_token(unit, 1)

    def _morpheme_token(self, unit: _Unit, increment: int) -> RawToken:
        tag = unit.tags[0]
        surface = self.text[unit.start:unit.end]
        # Чтение есть только у иероглифов; хангыль уже фонетичен
        return RawToken(
            term=surface,
            start_offset=unit.start,
            end_offset=unit.end,
            position_increment=increment,
            token_type=token_type_for(tag),
            pos_type=POSType.MORPHEME.value,
            left_pos=tag.value,
            right_pos=tag.value,
            reading=hanja_reading(surface) if tag is POSTag.SH else None,
        )


class KiwiSegmentationEngine(BaseSegmentationEngine):
    """
    Движок, хранящий экземпляры Kiwi для разных пользовательских словарей.

    Экземпляры создаются лениво и используются всеми сессиями. Кэш ограничен
    max_instances: при переполнении вытесняется давно не использованный
    экземпляр. Создание и токенизация сериализуются блокировкой.
    """

    def __init__(
        self,
        num_workers: Optional[int] = None,
        model_type: Optional[str] = None,
        model_path: Optional[str] = None,
        load_default_dict: bool = True,
        integrate_allomorph: bool = True,
        max_instances: int = DEFAULT_MAX_INSTANCES,
    ) -> None:
        if max_instances < 1:
            raise ValueError(f"max_instances должен быть не меньше 1, получено {max_instances}")
        self.num_workers = num_workers
        self.model_type = model_type
        self.model_path = model_path
        self.load_default_dict = load_default_dict
        self.integrate_allomorph = integrate_allomorph
        self.max_instances = max_instances
        self._instances: "OrderedDict[Optional[UserDictionary], Kiwi]" = OrderedDict()
        self._lock = threading.Lock()

    def open_session(self, configuration: AnalyzerConfiguration, text: str) -> KiwiSession:
        if not isinstance(text, str):
            raise SessionInitializationError(f"Текст должен быть строкой, получено {type(text).__name__}")
        kiwi = self._get_kiwi(configuration.user_dictionary)
        return KiwiSession(kiwi, self._lock, configuration, text)

    def _get_kiwi(self, user_dictionary: Optional[UserDictionary]) -> Kiwi:
        with self._lock:
            kiwi = self._instances.get(user_dictionary)
            if kiwi is not None:
                self._instances.move_to_end(user_dictionary)
                return kiwi
            kiwi = self._build_kiwi(user_dictionary)
            self._instances[user_dictionary] = kiwi
            while len(self._instances) > self.max_instances:
                evicted, _ = self._instances.popitem(last=False)
                logger.info(f"Экземпляр Kiwi выгружен из кэша: {evicted.source if evicted else 'без словаря'}")
            return kiwi

    def _build_kiwi(self, user_dictionary: Optional[UserDictionary]) -> Kiwi:
        options: Dict[str, Any] = {
            "load_default_dict": self.load_default_dict,
            "integrate_allomorph": self.integrate_allomorph,
        }
        if self.num_workers is not None:
            options["num_workers"] = self.num_workers
        if self.model_type:
            options["model_type"] = self.model_type
        if self.model_path:
            options["model_path"] = self.model_path
        try:
            kiwi = Kiwi(**options)
        except Exception as e:
            raise SessionInitializationError(f"Не удалось загрузить модель Kiwi: {e}") from e

        if user_dictionary is not None:
            for entry in user_dictionary:
                try:
                    added = kiwi.add_user_word(entry.surface, entry.tag, entry.score)
                except Exception as e:
                    raise SessionInitializationError(
                        f"Некорректная запись словаря {entry.surface!r}/{entry.tag} "
                        f"в {user_dictionary.source}: {e}"
                    ) from e
                if not added:
                    logger.debug(f"Слово уже есть в словаре Kiwi: {entry.surface}/{entry.tag}")
            logger.info(f"Kiwi загружен с пользовательским словарём {user_dictionary.source} "
                        f"({len(user_dictionary)} записей)")
        else:
            logger.info("Kiwi загружен без пользовательского словаря")
        return kiwi

    def unload(self) -> None:
        with self._lock:
            self._instances.clear()

    def get_model_info(self) -> Dict[str, Any]:
        return {
            "name": "kiwipiepy",
            "type": "kiwi",
            "version": kiwipiepy.__version__,
            "model_type": self.model_type,
            "loaded": bool(self._instances),
            "instances": len(self._instances),
            "max_instances": self.max_instances,
        }
