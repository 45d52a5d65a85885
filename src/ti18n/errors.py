"""
Errors - исключения ti18n.

Бросаются только ошибки конфигурации вызывающего кода.
Пробелы в данных (нет локали, нет ключа) кодируются в возвращаемой строке.
"""

from typing import List, Optional


class Ti18nError(Exception):
    """Базовое исключение ti18n."""


class LanguageNotSetError(Ti18nError):
    """translate() вызван до set_language()."""

    def __init__(self, message: str = ""):
        super().__init__(
            message or "No global language set. Call set_language() first "
                       "or use translate_to() with an explicit locale."
        )


class UnknownLocaleError(Ti18nError, KeyError):
    """Локаль не загружена в каталог."""

    def __init__(self, locale: str, available: Optional[List[str]] = None):
        self.locale = locale
        self.available = list(available or [])
        super().__init__(
            f"Locale '{locale}' is not loaded. "
            f"Available: {self.available}"
        )

    def __str__(self) -> str:
        # KeyError.__str__ оборачивает сообщение в кавычки
        return self.args[0]
