"""
Базовые интерфейсы и структуры данных движков сегментации.

Движок открывает одну сессию на пару (конфигурация, текст). Сессия - это
поэтапный поток токенов: reset(), increment_token() до возврата False,
end(), close(). Текущий токен доступен через единый объект атрибутов,
который перезаписывается при каждом шаге.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Dict, Iterable, Iterator, Optional

from ..exceptions import StreamReadError

if TYPE_CHECKING:
    from ..components.analyzer_config import AnalyzerConfiguration

TOKEN_TYPE_WORD = "word"
TOKEN_TYPE_PUNCTUATION = "punctuation"
TOKEN_TYPE_NUMBER = "number"


@dataclass(frozen=True)
class RawToken:
    """Токен, выданный конвейером движка, до попадания в атрибуты сессии."""
    term: str
    start_offset: int
    end_offset: int
    position_increment: int = 1
    token_type: str = TOKEN_TYPE_WORD
    pos_type: str = "MORPHEME"
    left_pos: str = "UNKNOWN"
    right_pos: str = "UNKNOWN"
    reading: Optional[str] = None


@dataclass
class TokenAttributes:
    """Изменяемое представление текущего токена сессии."""
    term: str = ""
    position_increment: int = 1
    start_offset: int = 0
    end_offset: int = 0
    token_type: str = TOKEN_TYPE_WORD
    pos_type: str = "MORPHEME"
    left_pos: str = "UNKNOWN"
    right_pos: str = "UNKNOWN"
    reading: Optional[str] = None

    def load(self, token: RawToken) -> None:
        self.term = token.term
        self.position_increment = token.position_increment
        self.start_offset = token.start_offset
        self.end_offset = token.end_offset
        self.token_type = token.token_type
        self.pos_type = token.pos_type
        self.left_pos = token.left_pos
        self.right_pos = token.right_pos
        self.reading = token.reading

    def clear(self) -> None:
        self.load(RawToken(term="", start_offset=0, end_offset=0))


class EngineSession(ABC):
    """Поток токенов, привязанный к одной конфигурации и одному тексту."""

    @property
    @abstractmethod
    def attributes(self) -> TokenAttributes:
        """Объект атрибутов, общий для всех шагов."""
        pass

    @abstractmethod
    def reset(self) -> None:
        """Готовит поток к новому проходу."""
        pass

    @abstractmethod
    def increment_token(self) -> bool:
        """Переходит к следующему токену; False, если поток исчерпан."""
        pass

    @abstractmethod
    def end(self) -> None:
        """Завершает поток после последнего токена."""
        pass

    @abstractmethod
    def close(self) -> None:
        """Освобождает сессию. Повторный вызов безопасен."""
        pass

    def __enter__(self) -> "EngineSession":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()


class BufferedSession(EngineSession):
    """
    Сессия поверх генератора токенов.

    Подклассы реализуют _produce(); генератор создаётся в reset() и читается
    лениво, поэтому ошибки движка проявляются в increment_token().
    """

    def __init__(self, text: str) -> None:
        self.text = text
        self._attributes = TokenAttributes()
        self._iterator: Optional[Iterator[RawToken]] = None
        self._closed = False

    @property
    def attributes(self) -> TokenAttributes:
        return self._attributes

    @property
    def closed(self) -> bool:
        return self._closed

    @abstractmethod
    def _produce(self) -> Iterable[RawToken]:
        """Выдаёт отфильтрованные токены self.text в порядке выдачи."""
        pass

    def reset(self) -> None:
        if self._closed:
            raise StreamReadError("reset() вызван для закрытой сессии")
        self._attributes.clear()
        self._iterator = iter(self._produce())

    def increment_token(self) -> bool:
        if self._iterator is None:
            raise StreamReadError("increment_token() вызван до reset()")
        try:
            token = next(self._iterator)
        except StopIteration:
            return False
        except StreamReadError:
            raise
        except Exception as e:
            raise StreamReadError(f"Сбой потока токенов: {e}") from e
        self._attributes.load(token)
        return True

    def end(self) -> None:
        # Конечное смещение указывает за конец прочитанного текста
        final_offset = len(self.text)
        self._attributes.clear()
        self._attributes.start_offset = final_offset
        self._attributes.end_offset = final_offset
        self._attributes.position_increment = 0

    def close(self) -> None:
        self._iterator = None
        self._closed = True


class BaseSegmentationEngine(ABC):
    """Базовый интерфейс движка сегментации."""

    @abstractmethod
    def open_session(self, configuration: "AnalyzerConfiguration", text: str) -> EngineSession:
        """
        Открывает сессию для заданной конфигурации и текста.

        Raises:
            SessionInitializationError: если движок не удалось инициализировать
        """
        pass

    @abstractmethod
    def get_model_info(self) -> Dict[str, Any]:
        """Возвращает информацию о движке (имя, тип, состояние)."""
        pass
