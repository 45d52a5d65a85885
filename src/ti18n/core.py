"""
Ti18n - фасад: каталог локалей + форматирование ключей + перевод.

Использование:
    i18n = Ti18n(keys=["greeting", "user-name"])
    i18n.load_locale("en", {"dictionary": {"greeting": "Hello, {name}!"}})

    i18n.translate_to(i18n.create_key("greeting"), "en", {"name": "Al"})
    i18n.keys["userName"]   # "i18n::user-name"

    i18n.set_language("en")
    i18n.translate(i18n.keys["greeting"], name="Al")
"""

from types import MappingProxyType
from typing import Any, Dict, Iterable, List, Mapping, Optional

from .catalog import LocaleCatalog
from .config import CountryCodeMapping, Ti18nConfig
from .keys import KeyFormatter
from .translator import Translator, normalize_params
from .validator import CoverageReport


class Ti18n:
    """Экземпляр библиотеки интернационализации."""

    def __init__(self, config: Optional[Ti18nConfig] = None, *,
                 header: str = "", separator: str = "",
                 keys: Optional[Iterable[str]] = None,
                 country_code_mappings: Optional[Iterable[CountryCodeMapping]] = None):
        """
        Аргументы:
            config: готовая конфигурация. Именованные аргументы
                    переопределяют её поля.
            header: префикс ключей ("i18n").
            separator: разделитель ("::").
            keys: канонический набор ключей.
            country_code_mappings: соответствия локаль -> код страны.
        """
        config = config or Ti18nConfig()
        self.config = Ti18nConfig(
            header=header or config.header,
            separator=separator or config.separator,
            keys=list(keys) if keys is not None else config.keys,
            country_code_mappings=(list(country_code_mappings)
                                   if country_code_mappings is not None
                                   else config.country_code_mappings),
        )

        self.formatter = KeyFormatter(self.config.header, self.config.separator)
        self.catalog = LocaleCatalog()
        self.translator = Translator(self.catalog, self.formatter,
                                     self.config.country_code_mappings)

        self._key_names: Mapping[str, str] = MappingProxyType({})
        self.catalog.on_keys_changed(self._rebuild_key_names)
        if self.config.keys:
            self.catalog.set_canonical_keys(self.config.keys)

    def _rebuild_key_names(self, keys: List[str]):
        self._key_names = MappingProxyType(self.formatter.derive_key_names(keys))

    @property
    def header(self) -> str:
        return self.formatter.header

    @property
    def separator(self) -> str:
        return self.formatter.separator

    @property
    def keys(self) -> Mapping[str, str]:
        """camelCase имя -> ключ с префиксом (только чтение)."""
        return self._key_names

    # ------------------------------------------------------------------
    # Каталог
    # ------------------------------------------------------------------

    def load_keys(self, keys: Iterable[str]):
        self.catalog.set_canonical_keys(keys)

    set_canonical_keys = load_keys

    def get_defined_keys(self) -> List[str]:
        return self.catalog.get_defined_keys()

    def load_locale(self, locale: str, data: Any):
        self.catalog.load_locale(locale, data)

    def load_locales(self, resources: Mapping[str, Any]):
        self.catalog.load_locales(resources)

    def get_locales(self) -> List[str]:
        return self.catalog.get_locales()

    def has_locale(self, locale: str) -> bool:
        return self.catalog.has_locale(locale)

    def validate_locale(self, locale: str) -> Optional[CoverageReport]:
        return self.catalog.validate_locale(locale)

    def get_coverage_report(self, locale: str) -> Optional[CoverageReport]:
        return self.catalog.get_coverage_report(locale)

    def get_all_coverage_reports(self) -> Dict[str, CoverageReport]:
        return self.catalog.get_all_coverage_reports()

    # ------------------------------------------------------------------
    # Ключи
    # ------------------------------------------------------------------

    def create_key(self, key: str) -> str:
        return self.formatter.format_key(key)

    format_key = create_key

    def is_translation_key(self, key: str) -> bool:
        return self.formatter.is_namespaced(key)

    is_namespaced = is_translation_key

    def create_all_keys(self) -> Dict[str, str]:
        """Dict[bare_key, namespaced_key] для канонического набора."""
        return self.formatter.derive_all_keys(self.catalog.get_defined_keys())

    derive_all_keys = create_all_keys

    def name_property_for(self, key: str) -> str:
        return self.formatter.name_property_for(key)

    # ------------------------------------------------------------------
    # Перевод
    # ------------------------------------------------------------------

    def set_language(self, locale: Optional[str]):
        self.translator.set_language(locale)

    def get_language(self) -> Optional[str]:
        return self.translator.get_language()

    def translate_to(self, key: str, locale: str, params: Any = None, **kwargs) -> str:
        return self.translator.translate_to(key, locale, _merge_params(params, kwargs))

    def translate(self, key: str, params: Any = None, **kwargs) -> str:
        return self.translator.translate(key, _merge_params(params, kwargs))

    def get_language_name(self, code: str, locale: str) -> str:
        return self.translator.get_language_name(code, locale)

    def locale_to_country_code(self, locale: str) -> str:
        return self.translator.locale_to_country_code(locale)

    def add_country_code_mapping(self, mapping: CountryCodeMapping):
        self.translator.add_country_code_mapping(mapping)

    def add_country_code_mappings(self, mappings: Iterable[CountryCodeMapping]):
        self.translator.add_country_code_mappings(mappings)


def _merge_params(params: Any, kwargs: Dict[str, Any]) -> Any:
    # Именованные аргументы дописываются после params
    if not kwargs:
        return params
    if params is None:
        return kwargs
    return normalize_params(params) + list(kwargs.items())
