"""
Компоненты корейского анализатора.

Каждый компонент отвечает за одну задачу:
- POSTag / POSType - набор частей речи
- UserDictionary - пользовательские записи словаря
- AnalyzerConfiguration - настройки анализа и пресеты
- TokenCollector - превращает поток токенов в проанализированные термы
- TermExporter - экспорт в Excel / CSV / JSON
"""

from .pos_tags import POSTag, POSType
from .user_dictionary import UserDictionary, UserDictionaryEntry
from .analyzer_config import (
    AnalyzerConfiguration,
    AnalyzerMode,
    BASIC_STOP_TAGS,
    DecompoundMode,
)
from .token_collector import TokenCollector
from .exporter import TermExporter

__all__ = [
    'POSTag',
    'POSType',
    'UserDictionary',
    'UserDictionaryEntry',
    'AnalyzerConfiguration',
    'AnalyzerMode',
    'BASIC_STOP_TAGS',
    'DecompoundMode',
    'TokenCollector',
    'TermExporter',
]
