"""
Keys - форматирование ключей перевода.

Голый ключ ("greeting") используется в словарях и каноническом наборе.
Ключ с префиксом ("i18n::greeting") - единственная форма, которую
принимает перевод.

Дополнительно строит camelCase-имена для ключей:
    user-name          -> userName
    last_login_time    -> lastLoginTime
    auth.login.success -> authLoginSuccess
"""

import logging
import re
from typing import Dict, Iterable, Optional

from .config import DEFAULT_HEADER, DEFAULT_SEPARATOR

logger = logging.getLogger(__name__)

_SEGMENT_DELIMITERS = re.compile(r"[-_.]")


def to_camel_case(bare_key: str) -> str:
    """
    Преобразует kebab-case, snake_case или dot.case в camelCase.

    Первый сегмент не меняется, у остальных заглавной становится
    только первая буква.
    """
    first, *rest = _SEGMENT_DELIMITERS.split(bare_key)
    return first + "".join(seg[:1].upper() + seg[1:] for seg in rest)


class KeyFormatter:
    """Преобразование между голыми ключами и ключами с префиксом."""

    def __init__(self, header: str = DEFAULT_HEADER,
                 separator: str = DEFAULT_SEPARATOR):
        self.header = header
        self.separator = separator

    def format_key(self, bare_key: str) -> str:
        """Возвращает ключ с префиксом: header + separator + bare_key."""
        return f"{self.header}{self.separator}{bare_key}"

    def is_namespaced(self, candidate: str) -> bool:
        """Проверка только по префиксу, без разбора структуры."""
        return candidate.startswith(self.header)

    def split_key(self, namespaced_key: str) -> Optional[str]:
        """
        Извлекает голый ключ из ключа с префиксом.

        Делит строку по первому разделителю. Всё после него, включая
        последующие разделители, считается голым ключом.

        Returns:
            Голый ключ или None, если ключ сформирован неверно
        """
        head, sep, bare_key = namespaced_key.partition(self.separator)
        if not sep or head != self.header:
            return None
        return bare_key

    def derive_all_keys(self, keys: Iterable[str]) -> Dict[str, str]:
        """Dict[bare_key, namespaced_key] в порядке канонического набора."""
        return {key: self.format_key(key) for key in keys}

    def name_property_for(self, bare_key: str) -> str:
        return to_camel_case(bare_key)

    def derive_key_names(self, keys: Iterable[str]) -> Dict[str, str]:
        """
        Строит Dict[camelCase имя, namespaced_key].

        При совпадении имён у двух ключей побеждает последний,
        о перезаписи пишется предупреждение в лог.
        """
        names: Dict[str, str] = {}
        owners: Dict[str, str] = {}
        for key in keys:
            name = self.name_property_for(key)
            previous = owners.get(name)
            if previous is not None and previous != key:
                logger.warning(
                    "Ключи '%s' и '%s' дают одинаковое имя '%s', "
                    "используется '%s'", previous, key, name, key,
                )
            owners[name] = key
            names[name] = self.format_key(key)
        return names
