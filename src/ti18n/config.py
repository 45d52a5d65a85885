"""
Config - конфигурация экземпляра ti18n.

Заголовок и разделитель фиксируются при создании экземпляра.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Optional, Union

# Префикс ключей перевода по умолчанию
DEFAULT_HEADER = "i18n"

# Разделитель между префиксом и ключом
DEFAULT_SEPARATOR = "::"

# Код страны для неизвестных локалей
UNKNOWN_COUNTRY_CODE = "XX"


@dataclass
class CountryCodeMapping:
    """Соответствие локали коду страны (en -> US)."""
    locale: str
    code: str

    @classmethod
    def coerce(cls, value: Union["CountryCodeMapping", Dict[str, str]]) -> "CountryCodeMapping":
        if isinstance(value, cls):
            return cls(value.locale, value.code)
        return cls(locale=value.get("locale", ""), code=value.get("code", ""))


@dataclass
class Ti18nConfig:
    """Конфигурация ti18n."""
    header: str = DEFAULT_HEADER            # Префикс: "i18n" в "i18n::greeting"
    separator: str = DEFAULT_SEPARATOR      # Разделитель: "::"
    keys: List[str] = field(default_factory=list)   # Канонический набор ключей
    country_code_mappings: List[CountryCodeMapping] = field(default_factory=list)

    def __post_init__(self):
        # Пустые значения означают "по умолчанию"
        self.header = self.header or DEFAULT_HEADER
        self.separator = self.separator or DEFAULT_SEPARATOR
        self.keys = list(self.keys or [])
        self.country_code_mappings = _coerce_mappings(self.country_code_mappings)

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> "Ti18nConfig":
        """
        Создаёт конфигурацию из распарсенного JSON.

        Поддерживаются ключи header, separator, keys и
        country_code_mappings (или countryCodeMappings).
        """
        data = data or {}
        mappings = data.get("country_code_mappings",
                            data.get("countryCodeMappings", []))
        return cls(
            header=data.get("header", DEFAULT_HEADER),
            separator=data.get("separator", DEFAULT_SEPARATOR),
            keys=data.get("keys", []),
            country_code_mappings=mappings,
        )


def _coerce_mappings(mappings: Optional[Iterable]) -> List[CountryCodeMapping]:
    return [CountryCodeMapping.coerce(m) for m in (mappings or [])]
