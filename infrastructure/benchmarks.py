"""
In-memory implementation of BenchmarkDirectory.

Benchmark names come from a static JSON list (a file of strings). The default
list ships with the package in infrastructure/data/benchmark_workouts.json.
"""
import json
import logging
import pathlib
from typing import Dict, Iterable, List, Optional, Union

logger = logging.getLogger(__name__)

DEFAULT_BENCHMARKS_FILE = pathlib.Path(__file__).resolve().parent / "data" / "benchmark_workouts.json"


def _normalize(name: str) -> str:
    """Normalize a workout name for matching."""
    return name.strip().casefold()


def load_benchmark_names(path: Optional[Union[str, pathlib.Path]] = None) -> List[str]:
    """
    Load benchmark names from a JSON list file.

    A missing file yields an empty list; a malformed one raises ValueError.
    """
    benchmarks_file = pathlib.Path(path) if path else DEFAULT_BENCHMARKS_FILE
    if not benchmarks_file.exists():
        logger.warning(f"Benchmarks file not found: {benchmarks_file}")
        return []
    with open(benchmarks_file, "r", encoding="utf-8") as f:
        names = json.load(f)
    if not isinstance(names, list) or not all(isinstance(n, str) for n in names):
        raise ValueError(f"{benchmarks_file} must contain a JSON list of names")
    return names


class InMemoryBenchmarkDirectory:
    """
    In-memory implementation of BenchmarkDirectory.

    Doesn't require Supabase since it uses a static name list.
    """

    def __init__(self, names: Iterable[str] = ()):
        self._by_key: Dict[str, str] = {}
        for name in names:
            if name.strip():
                self._by_key.setdefault(_normalize(name), name.strip())

    @classmethod
    def from_file(cls, path: Optional[Union[str, pathlib.Path]] = None) -> "InMemoryBenchmarkDirectory":
        return cls(load_benchmark_names(path))

    def find(self, name: str) -> Optional[str]:
        if not name:
            return None
        return self._by_key.get(_normalize(name))

    def __len__(self) -> int:
        return len(self._by_key)
