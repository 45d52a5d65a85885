"""
ti18n - минимальная библиотека интернационализации.

Модули:
- keys: форматирование ключей "i18n::key" и camelCase-имена
- catalog: реестр локалей и канонического набора ключей
- validator: отчёты о покрытии словарей
- translator: перевод ключей и подстановка {name}
- core: фасад Ti18n
- manager: CLI для проверки покрытия JSON-каталогов
"""

from typing import Optional

from .catalog import LocaleCatalog, LocaleData
from .config import (
    DEFAULT_HEADER,
    DEFAULT_SEPARATOR,
    CountryCodeMapping,
    Ti18nConfig,
)
from .core import Ti18n
from .errors import LanguageNotSetError, Ti18nError, UnknownLocaleError
from .keys import KeyFormatter, to_camel_case
from .translator import MISSING_KEY, MISSING_LOCALE, Translator, substitute
from .validator import CoverageReport, compute_coverage

__version__ = "2.2.4"


def create_default(config: Optional[Ti18nConfig] = None) -> Ti18n:
    """Возвращает новый экземпляр с конфигурацией по умолчанию."""
    return Ti18n(config or Ti18nConfig())


__all__ = [
    "Ti18n",
    "Ti18nConfig",
    "CountryCodeMapping",
    "CoverageReport",
    "KeyFormatter",
    "LocaleCatalog",
    "LocaleData",
    "Translator",
    "Ti18nError",
    "LanguageNotSetError",
    "UnknownLocaleError",
    "DEFAULT_HEADER",
    "DEFAULT_SEPARATOR",
    "MISSING_KEY",
    "MISSING_LOCALE",
    "compute_coverage",
    "create_default",
    "substitute",
    "to_camel_case",
]
