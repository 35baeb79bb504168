"""
Абстрактные интерфейсы компонентов корейского анализатора.

Определяет сущность результата и контракты сервиса токенизации и
экспортёров, чтобы реализации можно было заменять.
"""

from abc import ABC, abstractmethod
from dataclasses import asdict, dataclass
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence, Union


@dataclass(frozen=True)
class AnalyzedTerm:
    """Одна выделенная морфема и её атрибуты."""
    surface: str
    position: int
    start_offset: int
    end_offset: int
    token_type: str
    pos_type: str
    left_pos: str
    right_pos: str
    reading: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


class TokenizationServiceInterface(ABC):
    """Интерфейс сервиса морфологической токенизации."""

    @abstractmethod
    def analyze_for_terms(self, text: str) -> List[AnalyzedTerm]:
        """Возвращает упорядоченный список термов; ошибки пробрасываются."""
        pass

    @abstractmethod
    def analyze_for_string(self, text: str) -> Optional[str]:
        """Возвращает поверхностные формы через пробел или None при ошибке."""
        pass


class TermExporterInterface(ABC):
    """Интерфейс экспорта проанализированных термов."""

    @abstractmethod
    def export_to_excel(self, terms: Sequence[AnalyzedTerm], filepath: Union[str, Path]) -> Optional[Path]:
        """Экспортирует термы в книгу Excel."""
        pass

    @abstractmethod
    def export_to_csv(self, terms: Sequence[AnalyzedTerm], filepath: Union[str, Path]) -> Optional[Path]:
        """Экспортирует термы в CSV."""
        pass

    @abstractmethod
    def export_to_json(self, terms: Sequence[AnalyzedTerm], filepath: Union[str, Path]) -> Optional[Path]:
        """Экспортирует термы в JSON."""
        pass
