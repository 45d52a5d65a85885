#!/usr/bin/env python3
"""
Translator - перевод ключей с префиксом и подстановка параметров.

Политика ошибок:
- Нет локали / нет ключа -> строка-маркер, исключение не бросается:
    "i18n::greeting::de::error-missing-locale"
    "i18n::greeting::en::error-missing-key"
- translate() без set_language() -> LanguageNotSetError
- set_language() с незагруженной локалью -> UnknownLocaleError

Параметры принимаются как Mapping, как объект с полями
(SimpleNamespace, namedtuple, dataclass, класс со __slots__) или как
последовательность пар (имя, значение). Остальное -> TypeError.
"""

import dataclasses
import logging
import re
from collections.abc import Iterable, Mapping
from typing import Any, List, Optional, Tuple

from .catalog import LocaleCatalog
from .config import CountryCodeMapping, UNKNOWN_COUNTRY_CODE
from .errors import LanguageNotSetError, UnknownLocaleError
from .keys import KeyFormatter

logger = logging.getLogger(__name__)

MISSING_LOCALE = "error-missing-locale"
MISSING_KEY = "error-missing-key"

_PARAMS_SHAPES = ("params must be a mapping, an object with fields "
                  "(namedtuple, dataclass, __slots__) or a sequence of (name, value) pairs")


def _slot_names(obj: Any) -> List[str]:
    names = []
    for klass in type(obj).__mro__:
        slots = klass.__dict__.get("__slots__", ())
        if isinstance(slots, str):
            slots = (slots,)
        for name in slots:
            if name not in ("__dict__", "__weakref__") and name not in names:
                names.append(name)
    return names


def _object_pairs(params: Any) -> Optional[Iterable[Tuple[str, Any]]]:
    """Поля объекта-записи или None, если это не объект."""
    if hasattr(params, "_asdict"):
        # namedtuple
        return params._asdict().items()
    if dataclasses.is_dataclass(params) and not isinstance(params, type):
        return [(f.name, getattr(params, f.name)) for f in dataclasses.fields(params)]
    if hasattr(params, "__dict__"):
        return vars(params).items()
    slots = _slot_names(params)
    if slots:
        return [(name, getattr(params, name)) for name in slots if hasattr(params, name)]
    return None


def normalize_params(params: Any) -> List[Tuple[str, str]]:
    """
    Приводит параметры к списку пар (имя, строковое значение).

    Порядок сохраняется. Неподдерживаемая форма -> TypeError.
    """
    if params is None:
        return []
    if isinstance(params, Mapping):
        pairs = params.items()
    else:
        pairs = _object_pairs(params)

    if pairs is None:
        if isinstance(params, (str, bytes)) or not isinstance(params, Iterable):
            raise TypeError(_PARAMS_SHAPES + f", got {type(params).__name__}")
        pairs = []
        for item in params:
            if not isinstance(item, (tuple, list)) or len(item) != 2:
                raise TypeError(_PARAMS_SHAPES + f", got item {item!r}")
            pairs.append(item)

    return [(str(name), str(value)) for name, value in pairs]


def substitute(template: str, params: Any = None) -> str:
    """
    Заменяет каждое вхождение {name} на значение параметра.

    Замена буквальная и однопроходная: подставленные значения повторно
    не обрабатываются. Неизвестные {name} в шаблоне остаются как есть.
    """
    values = dict(normalize_params(params))
    if not values:
        return template

    tokens = sorted((f"{{{name}}}" for name in values), key=len, reverse=True)
    pattern = re.compile("|".join(re.escape(token) for token in tokens))
    return pattern.sub(lambda m: values[m.group(0)[1:-1]], template)


class Translator:
    """Перевод ключей по данным каталога."""

    def __init__(self, catalog: LocaleCatalog, formatter: KeyFormatter,
                 country_code_mappings: Optional[Iterable[CountryCodeMapping]] = None):
        self.catalog = catalog
        self.formatter = formatter
        self.country_code_mappings: List[CountryCodeMapping] = [
            CountryCodeMapping.coerce(m) for m in (country_code_mappings or [])
        ]
        self._language: Optional[str] = None

    # =========================================================================
    # ТЕКУЩИЙ ЯЗЫК
    # =========================================================================

    def set_language(self, locale: Optional[str]):
        """
        Устанавливает язык по умолчанию для translate().

        None сбрасывает язык. Незагруженная локаль -> UnknownLocaleError,
        текущее значение при этом не меняется.
        """
        if locale is not None and not self.catalog.has_locale(locale):
            raise UnknownLocaleError(locale, self.catalog.get_locales())
        self._language = locale
        logger.debug("Язык по умолчанию: %s", locale)

    def get_language(self) -> Optional[str]:
        return self._language

    # =========================================================================
    # ПЕРЕВОД
    # =========================================================================

    def translate_to(self, key: str, locale: str, params: Any = None) -> str:
        """
        Переводит ключ в указанную локаль.

        Args:
            key: Ключ с префиксом ("i18n::welcome")
            locale: Целевая локаль
            params: Параметры для подстановки {name}

        Returns:
            Перевод, исходная строка (если это не ключ) или строка-маркер ошибки
        """
        # Не ключ перевода - возвращаем как есть
        if not self.formatter.is_namespaced(key):
            return key

        bare_key = self.formatter.split_key(key)
        if bare_key is None:
            return key

        sep = self.formatter.separator
        data = self.catalog.get_locale_data(locale)
        if data is None:
            return f"{key}{sep}{locale}{sep}{MISSING_LOCALE}"

        template = data.dictionary.get(bare_key)
        if not template:
            return f"{key}{sep}{locale}{sep}{MISSING_KEY}"

        return substitute(template, params)

    def translate(self, key: str, params: Any = None) -> str:
        """Переводит ключ в язык, установленный через set_language()."""
        if self._language is None:
            raise LanguageNotSetError()
        return self.translate_to(key, self._language, params)

    # =========================================================================
    # ЯЗЫКИ И СТРАНЫ
    # =========================================================================

    def get_language_name(self, code: str, locale: str) -> str:
        """Название языка code на языке locale ("de" на "fr" -> "Allemand")."""
        data = self.catalog.get_locale_data(locale)
        if data is None:
            return f"Internationalization '{locale}' not found"
        return data.languages.get(code) or code

    def add_country_code_mapping(self, mapping: CountryCodeMapping):
        self.country_code_mappings.append(CountryCodeMapping.coerce(mapping))

    def add_country_code_mappings(self, mappings: Iterable[CountryCodeMapping]):
        for mapping in mappings:
            self.add_country_code_mapping(mapping)

    def locale_to_country_code(self, locale: str) -> str:
        """Код страны для локали; первое совпадение побеждает, иначе "XX"."""
        for mapping in self.country_code_mappings:
            if mapping.locale == locale:
                return mapping.code or UNKNOWN_COUNTRY_CODE
        return UNKNOWN_COUNTRY_CODE
