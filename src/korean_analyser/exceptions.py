"""
Исключения корейского анализатора.

Ошибка загрузки встроенного словаря при создании конфигурации исключением
не является: она логируется, и конфигурация создаётся без словаря.
"""


class KoreanAnalyserError(RuntimeError):
    """Базовый класс ошибок библиотеки."""


class UserDictionaryError(KoreanAnalyserError, ValueError):
    """Некорректный текст пользовательского словаря."""


class SessionInitializationError(KoreanAnalyserError):
    """Движок сегментации не удалось открыть для пары (конфигурация, текст)."""


class StreamReadError(KoreanAnalyserError):
    """Сбой при чтении токенов из открытой сессии."""
