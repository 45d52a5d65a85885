#!/usr/bin/env python3
"""
Validator - проверка покрытия словаря локали каноническим набором ключей.

Для каждой локали считается:
- missing_keys: ключи из канонического набора, которых нет в словаре
- extra_keys: ключи словаря, которых нет в каноническом наборе
- coverage: доля переведённых ключей (0.0 - 1.0)

Пустой канонический набор означает полное покрытие (coverage = 1.0).
"""

import json
from dataclasses import dataclass, field, asdict
from pathlib import Path
from typing import Dict, Iterable, List, Sequence


@dataclass
class CoverageReport:
    """Отчёт о покрытии одной локали."""
    locale: str
    missing_keys: List[str] = field(default_factory=list)
    extra_keys: List[str] = field(default_factory=list)
    coverage: float = 1.0

    @property
    def is_complete(self) -> bool:
        return not self.missing_keys

    @property
    def coverage_percent(self) -> float:
        return round(self.coverage * 100, 1)

    def copy(self) -> "CoverageReport":
        return CoverageReport(
            locale=self.locale,
            missing_keys=list(self.missing_keys),
            extra_keys=list(self.extra_keys),
            coverage=self.coverage,
        )

    def to_dict(self) -> Dict:
        return asdict(self)


def compute_coverage(locale: str, keys: Sequence[str],
                     dictionary_keys: Iterable[str]) -> CoverageReport:
    """
    Сравнивает канонический набор ключей со словарём локали.

    Args:
        locale: Код локали
        keys: Канонический набор (порядок сохраняется в missing_keys)
        dictionary_keys: Ключи словаря (порядок сохраняется в extra_keys)

    Returns:
        CoverageReport
    """
    dictionary_keys = list(dictionary_keys)
    present = set(dictionary_keys)
    canonical = set(keys)

    missing = [key for key in keys if key not in present]
    extra = [key for key in dictionary_keys if key not in canonical]

    total = len(keys)
    coverage = (total - len(missing)) / total if total > 0 else 1.0

    return CoverageReport(
        locale=locale,
        missing_keys=missing,
        extra_keys=extra,
        coverage=coverage,
    )


def progress_bar(percent: float, width: int = 20) -> str:
    filled = int(round(percent / 100 * width))
    filled = max(0, min(width, filled))
    return "█" * filled + "░" * (width - filled)


def print_reports(reports: Dict[str, CoverageReport], total_keys: int):
    """Выводит отчёты о покрытии в консоль."""
    print(f"\n{'='*60}")
    print(f"  ПОКРЫТИЕ ПЕРЕВОДОВ")
    print(f"  Ключей в каноническом наборе: {total_keys}")
    print(f"{'='*60}\n")

    if not reports:
        print("  Нет отчётов: канонический набор пуст или локали не загружены.")
        return

    for locale, report in reports.items():
        emoji = "✅" if report.is_complete else "❌"
        bar = progress_bar(report.coverage_percent)
        print(f"  {emoji} [{locale}] {bar} {report.coverage_percent}%")
        if report.missing_keys:
            print(f"      Не переведено ({len(report.missing_keys)}): "
                  f"{', '.join(report.missing_keys[:10])}")
        if report.extra_keys:
            print(f"      Лишние ключи ({len(report.extra_keys)}): "
                  f"{', '.join(report.extra_keys[:10])}")

    print(f"\n{'='*60}\n")


def save_reports(reports: Dict[str, CoverageReport], output_path: Path):
    """Сохраняет отчёты в JSON: {locale: report}."""
    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    data = {locale: report.to_dict() for locale, report in reports.items()}
    with open(output_path, "w", encoding="utf-8") as f:
        json.dump(data, f, ensure_ascii=False, indent=2)
