#!/usr/bin/env python3
"""
Manager - CLI для проверки JSON-каталогов переводов.

Команды:
  coverage   Отчёт о покрытии каждой локали каноническим набором ключей
  keys       Таблица ключей: голый ключ, camelCase имя, ключ с префиксом
  translate  Перевод одного ключа

Формат файлов:
  locales/{locale}.json  {"languages": {...}, "dictionary": {...}}
  keys.json              ["greeting", "farewell", ...]
  config.json            {"header": "i18n", "separator": "::", ...}

Использование:
  python -m ti18n.manager coverage --locales-dir locales --keys keys.json
  python -m ti18n.manager keys --keys keys.json
  python -m ti18n.manager translate greeting --locale en --locales-dir locales
"""

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional

from .config import Ti18nConfig
from .core import Ti18n
from .validator import print_reports, save_reports

logger = logging.getLogger(__name__)


def read_json(path: Path) -> Any:
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Файл не найден: {path}")
    with open(path, "r", encoding="utf-8") as f:
        return json.load(f)


def load_locale_files(locales_dir: Path) -> Dict[str, Any]:
    """
    Загружает все {locale}.json из директории.

    Файлы, начинающиеся с "_", пропускаются (метаданные).

    Returns:
        Dict[locale, распарсенные данные] в алфавитном порядке локалей
    """
    locales_dir = Path(locales_dir)
    if not locales_dir.is_dir():
        raise FileNotFoundError(f"Директория не найдена: {locales_dir}")

    resources = {}
    for path in sorted(locales_dir.glob("*.json")):
        if path.stem.startswith("_"):
            continue
        resources[path.stem] = read_json(path)
    logger.debug("Загружено локалей из %s: %d", locales_dir, len(resources))
    return resources


def load_keys_file(path: Path) -> List[str]:
    data = read_json(path)
    if isinstance(data, dict):
        data = data.get("keys", [])
    return [str(key) for key in data]


def build_i18n(args) -> Ti18n:
    """Создаёт Ti18n из --config и --keys."""
    config = Ti18nConfig.from_dict(read_json(args.config)) if args.config else Ti18nConfig()
    i18n = Ti18n(config)
    if getattr(args, "keys", ""):
        i18n.load_keys(load_keys_file(Path(args.keys)))
    return i18n


def parse_params(raw: Optional[List[str]]) -> Dict[str, str]:
    """["name=Al", "count=3"] -> {"name": "Al", "count": "3"}"""
    params = {}
    for item in raw or []:
        name, sep, value = item.partition("=")
        if not sep:
            raise ValueError(f"Параметр должен иметь вид name=value: '{item}'")
        params[name] = value
    return params


def cmd_coverage(args) -> int:
    """Команда: отчёт о покрытии."""
    i18n = build_i18n(args)
    i18n.load_locales(load_locale_files(Path(args.locales_dir)))

    reports = i18n.get_all_coverage_reports()
    print_reports(reports, total_keys=len(i18n.get_defined_keys()))

    if args.output:
        save_reports(reports, Path(args.output))
        print(f"  Отчёт сохранён: {args.output}")

    if args.strict and any(not r.is_complete for r in reports.values()):
        return 1
    return 0


def cmd_keys(args) -> int:
    """Команда: таблица ключей."""
    i18n = build_i18n(args)
    names = {key: i18n.name_property_for(key) for key in i18n.get_defined_keys()}

    print(f"\n  {'Ключ':<30} {'Имя':<30} Ключ перевода")
    print(f"  {'-'*30} {'-'*30} {'-'*30}")
    for key, namespaced in i18n.create_all_keys().items():
        print(f"  {key:<30} {names[key]:<30} {namespaced}")
    print()
    return 0


def cmd_translate(args) -> int:
    """Команда: перевод одного ключа."""
    i18n = build_i18n(args)
    i18n.load_locales(load_locale_files(Path(args.locales_dir)))

    key = args.key
    if not i18n.is_translation_key(key):
        key = i18n.create_key(key)

    print(i18n.translate_to(key, args.locale, parse_params(args.param)))
    return 0


def build_parser() -> argparse.ArgumentParser:
    """Строит парсер аргументов."""
    parser = argparse.ArgumentParser(
        prog="ti18n",
        description="Проверка и использование JSON-каталогов переводов",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Примеры:
  # Покрытие, код возврата 1 при неполных локалях
  python -m ti18n.manager coverage --locales-dir locales --keys keys.json --strict

  # Перевод с параметрами
  python -m ti18n.manager translate welcome --locale en --locales-dir locales --param name=Al
        """
    )
    parser.add_argument("--verbose", "-v", action="store_true",
                        help="Подробный лог")

    subparsers = parser.add_subparsers(dest="command", help="Команда")

    # === coverage ===
    p_cov = subparsers.add_parser("coverage", help="Отчёт о покрытии")
    p_cov.add_argument("--locales-dir", default="locales",
                       help="Директория каталогов")
    p_cov.add_argument("--keys", required=True,
                       help="JSON-файл с каноническим набором ключей")
    p_cov.add_argument("--config", default="", help="JSON-файл конфигурации")
    p_cov.add_argument("--output", default="",
                       help="Путь для сохранения отчёта (JSON)")
    p_cov.add_argument("--strict", action="store_true",
                       help="Код возврата 1, если есть неполные локали")

    # === keys ===
    p_keys = subparsers.add_parser("keys", help="Таблица ключей")
    p_keys.add_argument("--keys", required=True,
                        help="JSON-файл с каноническим набором ключей")
    p_keys.add_argument("--config", default="", help="JSON-файл конфигурации")

    # === translate ===
    p_trans = subparsers.add_parser("translate", help="Перевести ключ")
    p_trans.add_argument("key", help="Ключ (голый или с префиксом)")
    p_trans.add_argument("--locale", required=True, help="Целевая локаль")
    p_trans.add_argument("--locales-dir", default="locales",
                         help="Директория каталогов")
    p_trans.add_argument("--config", default="", help="JSON-файл конфигурации")
    p_trans.add_argument("--param", action="append", default=[],
                         help="Параметр name=value (можно несколько)")

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Точка входа CLI."""
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if not args.command:
        parser.print_help()
        return 1

    commands = {
        "coverage": cmd_coverage,
        "keys": cmd_keys,
        "translate": cmd_translate,
    }

    try:
        return commands[args.command](args)
    except (FileNotFoundError, ValueError) as e:
        print(f"  Ошибка: {e}", file=sys.stderr)
        return 2


if __name__ == "__main__":
    sys.exit(main())
