"""Tests for coverage computation and report output."""

import json

import pytest

from ti18n.validator import CoverageReport, compute_coverage, progress_bar, print_reports, save_reports


class TestComputeCoverage:

    def test_full_coverage(self):
        report = compute_coverage("en", ["a", "b"], ["a", "b"])
        assert report.coverage == 1
        assert report.missing_keys == []
        assert report.extra_keys == []
        assert report.is_complete

    def test_partial_coverage(self):
        report = compute_coverage("es", ["greeting", "farewell"], ["greeting"])
        assert report == CoverageReport("es", ["farewell"], [], 0.5)
        assert not report.is_complete

    @pytest.mark.parametrize("n,m", [(1, 0), (4, 1), (4, 3), (5, 5)])
    def test_coverage_is_m_over_n(self, n, m):
        keys = [f"k{i}" for i in range(n)]
        report = compute_coverage("xx", keys, keys[:m])
        assert report.coverage == pytest.approx(m / n)
        assert len(report.missing_keys) == n - m

    def test_missing_keys_keep_canonical_order(self):
        report = compute_coverage("xx", ["c", "a", "b"], [])
        assert report.missing_keys == ["c", "a", "b"]

    def test_extra_keys_keep_dictionary_order(self):
        report = compute_coverage("xx", ["a"], ["z", "a", "y"])
        assert report.extra_keys == ["z", "y"]

    def test_empty_canonical_set_is_full_coverage(self):
        report = compute_coverage("xx", [], ["anything"])
        assert report.coverage == 1
        assert report.extra_keys == ["anything"]


class TestCoverageReport:

    def test_coverage_percent(self):
        report = CoverageReport("es", ["welcome"], [], 0.75)
        assert report.coverage_percent == 75.0

    def test_copy_is_independent(self):
        report = CoverageReport("es", ["welcome"], ["x"], 0.75)
        clone = report.copy()
        clone.missing_keys.append("other")
        assert report.missing_keys == ["welcome"]

    def test_to_dict(self):
        data = CoverageReport("es", ["welcome"], [], 0.75).to_dict()
        assert data == {"locale": "es", "missing_keys": ["welcome"],
                        "extra_keys": [], "coverage": 0.75}


class TestOutput:

    def test_progress_bar(self):
        assert progress_bar(50, width=10) == "█████░░░░░"
        assert progress_bar(0, width=4) == "░░░░"
        assert progress_bar(100, width=4) == "████"

    def test_print_reports(self, capsys):
        print_reports({"es": CoverageReport("es", ["welcome"], [], 0.75)}, total_keys=4)
        out = capsys.readouterr().out
        assert "[es]" in out
        assert "75.0%" in out
        assert "welcome" in out

    def test_save_reports(self, tmp_path):
        path = tmp_path / "out" / "coverage.json"
        save_reports({"es": CoverageReport("es", ["welcome"], [], 0.75)}, path)
        data = json.loads(path.read_text(encoding="utf-8"))
        assert data["es"]["missing_keys"] == ["welcome"]
