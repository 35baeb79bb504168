"""
Korean Analyser - настраиваемая морфологическая токенизация корейского текста

Возможности:
- Морфологический анализ корейского текста в размеченные термы
- Политики разбиения составных слов, стоп-тегов и неизвестных слов
- Пользовательские словари
- Экспорт термов в Excel, CSV и JSON
"""

__version__ = "0.1.0"

from .components.analyzer_config import AnalyzerConfiguration, AnalyzerMode, DecompoundMode
from .components.pos_tags import POSTag, POSType
from .components.user_dictionary import UserDictionary
from .exceptions import (
    KoreanAnalyserError,
    SessionInitializationError,
    StreamReadError,
    UserDictionaryError,
)
from .interfaces.text_processor import AnalyzedTerm
from .tokenization_service import TokenizationService

__all__ = [
    "AnalyzedTerm",
    "AnalyzerConfiguration",
    "AnalyzerMode",
    "DecompoundMode",
    "POSTag",
    "POSType",
    "UserDictionary",
    "TokenizationService",
    "KoreanAnalyserError",
    "SessionInitializationError",
    "StreamReadError",
    "UserDictionaryError",
]
