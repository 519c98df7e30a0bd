"""Micro-benchmarks for the slug pipeline.

Times slugify over a fixed set of inputs and compares it with a naive
regex-only baseline.
"""

from __future__ import annotations

import logging
import re
import time
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from typing import Any

from slugger.options import SlugOptions
from slugger.pipeline import slugify

logger = logging.getLogger(__name__)

DEFAULT_CASES: tuple[str, ...] = (
    "Hello World",
    "This is a longer string with special characters !@#$%^&*()",
    "Café & Restaurant - Price: $29.99",
    "How to Build a REST API with Node.js in 2024",
    "Straße München Ñoño niño",
    "   Multiple   Spaces   and---Separators___Here   ",
    "Lorem ipsum dolor sit amet, consectetur adipiscing elit. " * 10,
)

CUSTOM_OPTIONS = SlugOptions(
    separator="_",
    lowercase=False,
    max_length=50,
    replacements={"&": "and", "$": "dollar"},
)

_NON_ALNUM = re.compile(r"[^a-z0-9]")
_HYPHEN_RUN = re.compile(r"-+")
_EDGE_HYPHEN = re.compile(r"^-|-$")


def baseline_slugify(text: str) -> str:
    """Lowercase, replace non-alphanumerics and collapse hyphens; nothing else."""
    slug = _NON_ALNUM.sub("-", text.lower())
    slug = _HYPHEN_RUN.sub("-", slug)
    return _EDGE_HYPHEN.sub("", slug)


@dataclass
class BenchmarkResult:
    """Timing for one benchmarked function."""

    name: str
    iterations: int
    operations: int
    total_ms: float

    @property
    def avg_ms(self) -> float:
        return self.total_ms / self.operations if self.operations else 0.0

    @property
    def ops_per_second(self) -> float:
        return 1000 / self.avg_ms if self.avg_ms else 0.0

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "name": self.name,
            "iterations": self.iterations,
            "operations": self.operations,
            "total_ms": round(self.total_ms, 2),
            "avg_ms": round(self.avg_ms, 4),
            "ops_per_second": round(self.ops_per_second),
        }


def run_benchmark(
    name: str,
    fn: Callable[[str], str],
    cases: Sequence[str] = DEFAULT_CASES,
    iterations: int = 10000,
    warmup: int = 100,
) -> BenchmarkResult:
    """Run ``fn`` over every case ``iterations`` times after a warmup.

    Args:
        name: Label for the result.
        fn: Function taking one input string.
        cases: Inputs fed to ``fn`` on every iteration.
        iterations: Timed passes over ``cases``.
        warmup: Untimed passes before measuring.

    Returns:
        BenchmarkResult with the total wall time in milliseconds.
    """
    logger.debug("Benchmark %s: %d warmup, %d timed iterations", name, warmup, iterations)
    for _ in range(warmup):
        for case in cases:
            fn(case)

    start = time.perf_counter()
    for _ in range(iterations):
        for case in cases:
            fn(case)
    total_ms = (time.perf_counter() - start) * 1000

    result = BenchmarkResult(
        name=name,
        iterations=iterations,
        operations=iterations * len(cases),
        total_ms=total_ms,
    )
    logger.info("%s: %.4fms per operation", name, result.avg_ms)
    return result


def run_default_suite(iterations: int = 10000, warmup: int = 100) -> list[BenchmarkResult]:
    """Benchmark default options, custom options and the regex baseline."""
    suite: list[tuple[str, Callable[[str], str]]] = [
        ("slugify (default options)", slugify),
        ("slugify (custom options)", lambda text: slugify(text, CUSTOM_OPTIONS)),
        ("baseline (simple replace)", baseline_slugify),
    ]
    return [
        run_benchmark(name, fn, iterations=iterations, warmup=warmup) for name, fn in suite
    ]
