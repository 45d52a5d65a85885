#!/usr/bin/env python3
"""
Catalog - реестр локалей.

Хранит для каждой локали:
- languages: таблица названий языков {"de": "German"}
- dictionary: словарь переводов {"greeting": "Hello, {name}!"}

А также канонический набор ключей и отчёты о покрытии.

Данные принимаются уже распарсенными (dict из JSON и т.п.).
Каталог копирует входные структуры и никогда не ссылается на объекты
вызывающего кода.
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Iterable, List, Mapping, Optional

from .validator import CoverageReport, compute_coverage

logger = logging.getLogger(__name__)


@dataclass
class LocaleData:
    """Данные одной локали."""
    languages: Dict[str, str] = field(default_factory=dict)
    dictionary: Dict[str, str] = field(default_factory=dict)

    @classmethod
    def from_raw(cls, data: Any) -> "LocaleData":
        """
        Создаёт LocaleData из распарсенных данных.

        Поддерживаем оба формата: LocaleData и dict
        {"languages": {...}, "dictionary": {...}}. Отсутствующие таблицы
        заменяются пустыми. Нестроковые значения приводятся к str,
        None - к пустой строке.
        """
        if data is None:
            return cls()
        if isinstance(data, LocaleData):
            languages, dictionary = data.languages, data.dictionary
        else:
            languages, dictionary = data.get("languages"), data.get("dictionary")
        return cls(
            languages=_string_table(languages, "languages"),
            dictionary=_string_table(dictionary, "dictionary"),
        )


def _string_table(table: Optional[Mapping[Any, Any]], name: str) -> Dict[str, str]:
    result = {}
    for key, value in (table or {}).items():
        if not isinstance(value, str):
            logger.warning("%s['%s']: значение %r не строка, приведено к str", name, key, value)
            value = "" if value is None else str(value)
        result[str(key)] = value
    return result


class LocaleCatalog:
    """
    Реестр локалей, канонических ключей и отчётов о покрытии.

    Отчёт локали пересчитывается при загрузке локали и при замене
    канонического набора. Если набор пуст, отчёты не строятся.
    """

    def __init__(self, keys: Optional[Iterable[str]] = None):
        self._locales: Dict[str, LocaleData] = {}
        self._keys: List[str] = []
        self._reports: Dict[str, CoverageReport] = {}
        self._keys_listeners: List[Callable[[List[str]], None]] = []

        if keys:
            self.set_canonical_keys(keys)

    # =========================================================================
    # КАНОНИЧЕСКИЕ КЛЮЧИ
    # =========================================================================

    def on_keys_changed(self, listener: Callable[[List[str]], None]):
        """Регистрирует обработчик замены канонического набора."""
        self._keys_listeners.append(listener)
        listener(list(self._keys))

    def set_canonical_keys(self, keys: Iterable[str]):
        """
        Заменяет канонический набор целиком и перепроверяет все локали.

        Args:
            keys: Ключи в порядке отчётности
        """
        self._keys = list(keys)

        for listener in self._keys_listeners:
            listener(list(self._keys))

        for locale in self.get_locales():
            self.validate_locale(locale)

    def get_defined_keys(self) -> List[str]:
        return list(self._keys)

    # =========================================================================
    # ЗАГРУЗКА ЛОКАЛЕЙ
    # =========================================================================

    def load_locale(self, locale: str, data: Any):
        """
        Загружает данные локали, полностью заменяя предыдущие.

        Никогда не падает на неполных данных: отсутствующие таблицы
        считаются пустыми, пробелы в переводах попадают в лог.
        """
        if data is None:
            logger.warning("Нет данных для локали '%s', загружены пустые таблицы", locale)

        self._locales[locale] = LocaleData.from_raw(data)
        logger.debug("Локаль '%s' загружена: %d ключей",
                     locale, len(self._locales[locale].dictionary))

        if self._keys:
            report = self.validate_locale(locale)
            if report and report.missing_keys:
                logger.warning(
                    "Локаль '%s': не хватает %d переводов (покрытие %.1f%%)",
                    locale, len(report.missing_keys), report.coverage * 100,
                )

    def load_locales(self, resources: Mapping[str, Any]):
        """Загружает несколько локалей: {locale: data}."""
        for locale, data in resources.items():
            self.load_locale(locale, data)

    def get_locales(self) -> List[str]:
        return list(self._locales)

    def has_locale(self, locale: str) -> bool:
        return locale in self._locales

    def get_locale_data(self, locale: str) -> Optional[LocaleData]:
        return self._locales.get(locale)

    # =========================================================================
    # ПОКРЫТИЕ
    # =========================================================================

    def validate_locale(self, locale: str) -> Optional[CoverageReport]:
        """
        Пересчитывает и кеширует отчёт о покрытии локали.

        Returns:
            CoverageReport или None, если канонический набор пуст
            или локаль не загружена
        """
        if not self._keys or locale not in self._locales:
            return None

        report = compute_coverage(locale, self._keys,
                                  self._locales[locale].dictionary.keys())
        self._reports[locale] = report
        return report.copy()

    def get_coverage_report(self, locale: str) -> Optional[CoverageReport]:
        report = self._reports.get(locale)
        return report.copy() if report else None

    def get_all_coverage_reports(self) -> Dict[str, CoverageReport]:
        """Снимок всех отчётов; изменения снимка не влияют на каталог."""
        return {locale: report.copy() for locale, report in self._reports.items()}
