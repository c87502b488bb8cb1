"""
Unit tests for the benchmark name directory.
"""

import json

import pytest

from infrastructure.benchmarks import (
    DEFAULT_BENCHMARKS_FILE,
    InMemoryBenchmarkDirectory,
    load_benchmark_names,
)

pytestmark = pytest.mark.unit


class TestLoadBenchmarkNames:
    """Tests for load_benchmark_names()."""

    def test_bundled_list(self):
        names = load_benchmark_names()
        assert DEFAULT_BENCHMARKS_FILE.exists()
        assert "Fran" in names
        assert "Barbara Ann" in names

    def test_custom_file(self, tmp_path):
        path = tmp_path / "benchmarks.json"
        path.write_text(json.dumps(["Murph", "DT"]))
        assert load_benchmark_names(path) == ["Murph", "DT"]

    def test_missing_file_is_empty(self, tmp_path):
        assert load_benchmark_names(tmp_path / "missing.json") == []

    def test_malformed_file_raises(self, tmp_path):
        path = tmp_path / "benchmarks.json"
        path.write_text(json.dumps({"names": ["Murph"]}))
        with pytest.raises(ValueError):
            load_benchmark_names(path)


class TestInMemoryBenchmarkDirectory:
    """Tests for InMemoryBenchmarkDirectory."""

    def test_lookup_is_case_and_whitespace_insensitive(self):
        directory = InMemoryBenchmarkDirectory(["Fran", "Barbara Ann"])
        assert directory.find("  FRAN ") == "Fran"
        assert directory.find("barbara ann") == "Barbara Ann"

    def test_partial_names_do_not_match(self):
        directory = InMemoryBenchmarkDirectory(["Fran"])
        assert directory.find("Frankie") is None
        assert directory.find("") is None

    def test_duplicates_and_blanks_are_ignored(self):
        directory = InMemoryBenchmarkDirectory(["Grace", "grace", "  "])
        assert len(directory) == 1
        assert directory.find("GRACE") == "Grace"

    def test_from_file(self):
        directory = InMemoryBenchmarkDirectory.from_file()
        assert directory.find("helen") == "Helen"
