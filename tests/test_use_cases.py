"""
Tests for the generate and analyze use cases.
"""

import os
import random
from datetime import datetime
from pathlib import Path

import pytest

from tokenscope.core.errors import DataFileNotFoundError
from tokenscope.core.models.token import Category
from tokenscope.core.use_cases.analyze import analyze_file, run_analysis
from tokenscope.core.use_cases.generate import run_generate

STAMP = datetime(2024, 5, 6, 7, 8, 9)


class TestRunGenerate:
    def test_writes_data_file(self, settings, rng, reporter, work_dir: Path):
        result = run_generate(settings, rng, reporter, now=STAMP)
        assert result.ok
        path = Path(result.generation.path)
        assert path == work_dir / "data" / "generated_data_2024-05-06_07-08-09.txt"
        assert path.stat().st_size >= settings.target_size
        assert reporter.infos == [f"Generating file at: {path}"]

    def test_to_dict(self, settings, rng):
        result = run_generate(settings, rng, now=STAMP)
        data = result.to_dict()
        assert data["size_bytes"] == result.generation.size_bytes
        assert data["token_count"] > 0

    def test_unwritable_data_dir_is_error(self, settings, rng, work_dir: Path):
        # a regular file where the data directory should be
        (work_dir / "data").write_text("not a dir")
        result = run_generate(settings, rng, now=STAMP)
        assert not result.ok
        assert result.error
        assert result.to_dict() == {"error": result.error}


class TestRunAnalysis:
    def _data_file(self, work_dir: Path, name: str, content: str, mtime: float | None = None) -> Path:
        data = work_dir / "data"
        data.mkdir(exist_ok=True)
        path = data / name
        path.write_text(content, encoding="utf-8")
        if mtime is not None:
            os.utime(path, (mtime, mtime))
        return path

    def test_report_content(self, settings, reporter, work_dir: Path, base_dir: Path):
        self._data_file(work_dir, "generated_data_a.txt", "42,,hello,  abc123 ,   ,!!,-3.140000")
        result = run_analysis(settings, reporter, now=STAMP)
        assert result.ok, result.error

        summary = result.summary
        report = Path(summary.report_path)
        assert report == base_dir / "output" / "analysis_2024-05-06_07-08-09.txt"

        text = report.read_text(encoding="utf-8")
        assert text == (
            "Processing file: generated_data_a.txt\n"
            "Total items found: 7\n"
            "Analysis Date: 2024-05-06 07:08:09\n"
            + "=" * 53 + "\n"
            "\n"
            "Item: 42\nType: Integer\n\n"
            "Item: hello\nType: Alphabetical String\n\n"
            "Item: abc123\nType: Alphanumeric\n\n"
            "Item: !!\nType: Unknown\n\n"
            "Item: -3.140000\nType: Real Number\n\n"
        )

        assert summary.field_count == 7
        assert summary.item_count == 5
        assert summary.skipped_count == 2
        assert summary.category_counts[Category.INTEGER] == 1
        assert Category.EMPTY not in summary.category_counts

    def test_mirrors_report(self, settings, reporter, work_dir: Path):
        self._data_file(work_dir, "generated_data_a.txt", "x1,2")
        result = run_analysis(settings, reporter, now=STAMP)
        report_text = Path(result.summary.report_path).read_text(encoding="utf-8")
        # the file has one extra blank line after the divider
        assert reporter.mirrored == report_text.replace("=" * 53 + "\n\n", "=" * 53 + "\n", 1)
        assert reporter.infos == ["File Reader Starting..."]

    def test_picks_newest(self, settings, work_dir: Path):
        self._data_file(work_dir, "generated_data_2024-01-01_00-00-00.txt", "old", mtime=2_000)
        self._data_file(work_dir, "generated_data_2024-01-02_00-00-00.txt", "new", mtime=1_000)
        result = run_analysis(settings, now=STAMP)
        assert Path(result.summary.source_path).name == "generated_data_2024-01-01_00-00-00.txt"

    def test_missing_data_dir(self, settings, reporter, base_dir: Path):
        result = run_analysis(settings, reporter, now=STAMP)
        assert not result.ok
        assert "Data directory not found" in result.error
        assert not (base_dir / "output").exists()

    def test_no_data_files(self, settings, work_dir: Path):
        (work_dir / "data").mkdir()
        result = run_analysis(settings, now=STAMP)
        assert result.error == "No data files found in the data directory."

    def test_bom_and_invalid_bytes(self, settings, work_dir: Path):
        data = work_dir / "data"
        data.mkdir()
        (data / "generated_data_a.txt").write_bytes(b"\xef\xbb\xbf42,ab\xff,7")
        result = run_analysis(settings, now=STAMP)
        assert result.ok
        text = Path(result.summary.report_path).read_text(encoding="utf-8")
        assert "Item: 42\nType: Integer" in text
        assert "Item: 7\nType: Integer" in text
        assert result.summary.field_count == 3


def test_analyze_file_missing_source(tmp_path: Path):
    with pytest.raises(DataFileNotFoundError, match="File not found"):
        analyze_file(tmp_path / "missing.txt", tmp_path / "report.txt")
    assert not (tmp_path / "report.txt").exists()


def test_generate_then_analyze(settings, reporter, work_dir: Path):
    gen = run_generate(settings, random.Random(11), now=STAMP)
    assert gen.ok
    result = run_analysis(settings, reporter, now=STAMP)
    assert result.ok
    assert result.summary.field_count == gen.generation.token_count
    assert result.summary.item_count == gen.generation.token_count
