"""
Компонент, вычитывающий сессию движка в проанализированные термы.

Текущая позиция и выходной список локальны для каждого вызова collect(),
поэтому один коллектор (или один сервис) можно использовать из нескольких потоков.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, List

from ..exceptions import StreamReadError
from ..interfaces.text_processor import AnalyzedTerm

if TYPE_CHECKING:
    from ..models.base_model import EngineSession

logger = logging.getLogger(__name__)


class TokenCollector:
    """Строит упорядоченный список AnalyzedTerm из потока токенов."""

    def collect(self, session: "EngineSession") -> List[AnalyzedTerm]:
        """
        Вычитывает сессию до конца.

        Приращение позиции 0 ставит терм на позицию предыдущего. Сессия
        закрывается при любом исходе.

        Args:
            session: Только что открытая сессия движка

        Returns:
            Термы в порядке выдачи

        Raises:
            StreamReadError: при сбое потока или закрытия; частичный результат отбрасывается
        """
        try:
            terms = self._drain(session)
        except StreamReadError:
            self._close(session, failed=True)
            raise
        except Exception as e:
            self._close(session, failed=True)
            raise StreamReadError(f"Ошибка сбора токенов: {e}") from e
        self._close(session, failed=False)
        return terms

    def _drain(self, session: "EngineSession") -> List[AnalyzedTerm]:
        attrs = session.attributes
        session.reset()

        position = 0
        terms: List[AnalyzedTerm] = []
        while session.increment_token():
            position += attrs.position_increment
            terms.append(AnalyzedTerm(
                surface=attrs.term,
                position=position,
                start_offset=attrs.start_offset,
                end_offset=attrs.end_offset,
                token_type=attrs.token_type,
                pos_type=attrs.pos_type,
                left_pos=attrs.left_pos,
                right_pos=attrs.right_pos,
                reading=attrs.reading,
            ))

        session.end()
        logger.debug(f"Собрано термов: {len(terms)} (последняя позиция={position})")
        return terms

    @staticmethod
    def _close(session: "EngineSession", failed: bool) -> None:
        """Закрывает сессию; при уже случившемся сбое ошибка закрытия только логируется."""
        try:
            session.close()
        except Exception as e:
            logger.error(f"Не удалось закрыть сессию движка: {e}")
            if not failed:
                raise StreamReadError(f"Ошибка закрытия сессии: {e}") from e
