# SPDX-License-Identifier: MIT
"""Stress and benchmark harnesses for identifier generation.

These runs are diagnostics rather than correctness checks: they measure how
many identifiers repeat or fail verification over a large sample and how
throughput and memory evolve as the sample grows.
"""

from __future__ import annotations

import csv
import time
from pathlib import Path
from typing import Iterable

import logfire
import psutil
from pydantic import TypeAdapter

from .generator import ForgeIdGenerator
from .models import BenchmarkPoint, StressReport

DEFAULT_CHECKPOINTS: tuple[int, ...] = tuple(range(100_000, 1_000_001, 100_000))
BENCHMARK_JSON = "benchmark.json"
BENCHMARK_CSV = "benchmark.csv"


def _rss_mb() -> float:
    """Return the resident memory of this process in MiB."""
    return psutil.Process().memory_info().rss / 1024 / 1024


def run_stress_test(
    generator: ForgeIdGenerator, total: int = 1_000_000, progress_step: int = 100_000
) -> StressReport:
    """Generate ``total`` identifiers and tally duplicates and invalid ones.

    Args:
        generator: Generator under test.
        total: Number of identifiers to produce.
        progress_step: Emit a progress record every ``progress_step`` ids.

    Returns:
        Summary of the run.

    Raises:
        ValueError: If ``total`` is negative or ``progress_step`` not positive.
    """
    if total < 0:
        raise ValueError("total must not be negative")
    if progress_step < 1:
        raise ValueError("progress_step must be positive")
    seen: set[str] = set()
    duplicates = 0
    invalid = 0
    started = time.perf_counter()
    with logfire.span("diagnostics.stress_test", attributes={"total": total}):
        for index in range(1, total + 1):
            identifier = generator.generate()
            if identifier in seen:
                duplicates += 1
            else:
                seen.add(identifier)
            if not generator.verify(identifier):
                invalid += 1
            if index % progress_step == 0:
                logfire.info(
                    "Stress progress",
                    keys=index,
                    duplicates=duplicates,
                    invalid=invalid,
                    seconds=round(time.perf_counter() - started, 2),
                    ram_mb=round(_rss_mb(), 2),
                )
    report = StressReport(
        total=total,
        unique=len(seen),
        duplicates=duplicates,
        invalid=invalid,
        seconds=time.perf_counter() - started,
    )
    if duplicates or invalid:
        logfire.warning(
            "Stress test found problems", duplicates=duplicates, invalid=invalid
        )
    return report


def run_benchmark(
    generator: ForgeIdGenerator,
    checkpoints: Iterable[int] = DEFAULT_CHECKPOINTS,
    output_dir: Path | str | None = None,
) -> list[BenchmarkPoint]:
    """Generate identifiers and record time and memory at ``checkpoints``.

    Args:
        generator: Generator under test.
        checkpoints: Identifier counts at which a measurement is taken.
        output_dir: Directory receiving ``benchmark.json`` and
            ``benchmark.csv``; nothing is written when ``None``.

    Returns:
        One measurement per checkpoint, in ascending order.
    """
    marks = sorted(set(checkpoints))
    if any(mark < 1 for mark in marks):
        raise ValueError("checkpoints must be positive")
    points: list[BenchmarkPoint] = []
    ids: set[str] = set()
    started = time.perf_counter()
    with logfire.span("diagnostics.benchmark", attributes={"checkpoints": marks}):
        index = 0
        for mark in marks:
            while index < mark:
                ids.add(generator.generate())
                index += 1
            point = BenchmarkPoint(
                keys=mark,
                seconds=round(time.perf_counter() - started, 2),
                ram_mb=round(_rss_mb(), 2),
            )
            logfire.info("Benchmark checkpoint", **point.model_dump())
            points.append(point)
    if output_dir is not None:
        write_benchmark(points, Path(output_dir))
    return points


def write_benchmark(points: list[BenchmarkPoint], output_dir: Path) -> None:
    """Write ``points`` as JSON and CSV files into ``output_dir``."""
    output_dir.mkdir(parents=True, exist_ok=True)
    json_path = output_dir / BENCHMARK_JSON
    json_path.write_bytes(TypeAdapter(list[BenchmarkPoint]).dump_json(points, indent=2))
    csv_path = output_dir / BENCHMARK_CSV
    with csv_path.open("w", encoding="utf-8", newline="") as handle:
        writer = csv.writer(handle)
        writer.writerow(["keys", "seconds", "ramMB"])
        for point in points:
            writer.writerow([point.keys, point.seconds, point.ram_mb])
    logfire.info("Benchmark written", json=str(json_path), csv=str(csv_path))


def format_report(report: StressReport) -> list[str]:
    """Return human-readable summary lines for ``report``."""
    return [
        f"Done: {report.total:,} keys",
        f"Total time: {report.seconds:.2f}s ({report.per_second:,.0f} ids/s)",
        f"Unique: {report.unique:,}",
        f"Duplicates: {report.duplicates}",
        f"Invalid: {report.invalid}",
    ]


__all__ = [
    "BENCHMARK_CSV",
    "BENCHMARK_JSON",
    "DEFAULT_CHECKPOINTS",
    "format_report",
    "run_benchmark",
    "run_stress_test",
    "write_benchmark",
]
