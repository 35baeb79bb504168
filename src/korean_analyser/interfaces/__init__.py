"""
Интерфейсы компонентов корейского анализатора.
"""

from .text_processor import (
    AnalyzedTerm,
    TokenizationServiceInterface,
    TermExporterInterface,
)

__all__ = [
    'AnalyzedTerm',
    'TokenizationServiceInterface',
    'TermExporterInterface',
]
