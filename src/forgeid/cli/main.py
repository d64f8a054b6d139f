# SPDX-License-Identifier: MIT
"""Command-line interface for generating and checking identifiers."""

from __future__ import annotations

import argparse
import logging
import os
import platform
import sys
from importlib.metadata import PackageNotFoundError, version
from pathlib import Path
from typing import Any, Callable, Sequence

import logfire
from pydantic import SecretStr

from ..constants import ENV_PREFIX
from ..diagnostics import (
    DEFAULT_CHECKPOINTS,
    format_report,
    run_benchmark,
    run_stress_test,
)
from ..formatting import STYLES
from ..generator import ForgeIdGenerator
from ..observability.monitoring import init_logfire
from ..runtime.settings import Settings, load_settings

LOG_LEVELS = ["fatal", "error", "warn", "notice", "info", "debug", "trace"]
STYLE_CHOICES = [style for style in STYLES if style]

# Module logger for CLI diagnostics mirroring
logger = logging.getLogger(__name__)


def _print_version() -> None:
    """Print the installed package version."""
    try:
        pkg_version = version("forgeid")
    except PackageNotFoundError:  # pragma: no cover - fallback for source checkouts
        pkg_version = "unknown"
    line = f"forgeid {pkg_version}"
    print(line)
    logger.info(line)


def _print_diagnostics() -> None:
    """Output basic environment information for health checks."""
    _print_version()
    print(f"Python {platform.python_version()}")
    print(f"Platform {platform.platform()}")
    present = sorted(name for name in os.environ if name.startswith(ENV_PREFIX))
    if present:
        print("Configured env vars: " + ", ".join(present))
    else:
        print("No FORGEID_* env vars set; using defaults")
    if f"{ENV_PREFIX}SECRET" not in os.environ:
        print("Warning: using the built-in default secret")


def _configure_logging(args: argparse.Namespace, settings: Settings) -> None:
    """Configure Logfire based on verbosity flags."""
    level = settings.log_level.lower()
    base = LOG_LEVELS.index(level) if level in LOG_LEVELS else 2
    index = base + args.verbose - args.quiet
    index = max(0, min(len(LOG_LEVELS) - 1, index))
    init_logfire(settings.logfire_token, LOG_LEVELS[index])  # type: ignore[arg-type]


def _cmd_generate(
    args: argparse.Namespace, generator: ForgeIdGenerator, settings: Settings
) -> int:
    """Print ``args.count`` new identifiers."""
    prefix = settings.default_prefix if args.prefix is None else args.prefix
    style = settings.default_style if args.style is None else args.style
    with logfire.span("cli.generate", attributes={"count": args.count}):
        for _ in range(args.count):
            print(generator.generate(prefix, style))
    return 0


def _cmd_verify(
    args: argparse.Namespace, generator: ForgeIdGenerator, _settings: Settings
) -> int:
    """Report whether each identifier verifies; non-zero if any fails."""
    failures = 0
    for identifier in args.ids:
        ok = generator.verify(identifier)
        failures += not ok
        print(f"{identifier}\t{'valid' if ok else 'invalid'}")
    if failures:
        logfire.info("Verification failed", failures=failures, total=len(args.ids))
    return 1 if failures else 0


def _cmd_format(
    args: argparse.Namespace, generator: ForgeIdGenerator, _settings: Settings
) -> int:
    """Print ``args.id`` regrouped in the requested style."""
    print(generator.format(args.id, args.style))
    return 0


def _cmd_stress(
    args: argparse.Namespace, generator: ForgeIdGenerator, _settings: Settings
) -> int:
    """Run the stress test and print its summary."""
    report = run_stress_test(generator, args.total, args.progress_step)
    for line in format_report(report):
        print(line)
    return 1 if report.duplicates or report.invalid else 0


def _cmd_benchmark(
    args: argparse.Namespace, generator: ForgeIdGenerator, _settings: Settings
) -> int:
    """Run the benchmark and print each checkpoint."""
    points = run_benchmark(generator, args.steps, args.output_dir)
    for point in points:
        print(
            f"{point.keys:,} keys | Time: {point.seconds:.2f}s"
            f" | RAM: {point.ram_mb:.2f} MB"
        )
    return 0


def _add_common_args(parser: argparse.ArgumentParser) -> argparse.ArgumentParser:
    """Add CLI options shared across subcommands."""
    parser.add_argument(
        "--config",
        type=str,
        default=None,
        help="Path to YAML configuration file",
    )
    parser.add_argument(
        "--secret",
        type=str,
        default=None,
        help=(
            "Signing secret. Prefer the FORGEID_SECRET env variable, which keeps"
            " the value out of the process list."
        ),
    )
    parser.add_argument(
        "--epoch-year",
        type=int,
        default=None,
        help="Year at which payloads have the base length",
    )
    parser.add_argument(
        "--base-length",
        type=int,
        default=None,
        help="Payload length at the epoch year",
    )
    parser.add_argument(
        "--growth-interval",
        type=int,
        default=None,
        help="Years between one-character payload length increments",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="count",
        default=0,
        help="Increase logging verbosity (repeatable)",
    )
    parser.add_argument(
        "-q",
        "--quiet",
        action="count",
        default=0,
        help="Decrease logging verbosity (repeatable)",
    )
    return parser


def _add_generate_subparser(
    subparsers: argparse._SubParsersAction[argparse.ArgumentParser],
    common: argparse.ArgumentParser,
) -> argparse.ArgumentParser:
    """Create the ``generate`` subcommand parser."""
    parser = subparsers.add_parser(
        "generate",
        parents=[common],
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
        help="Generate new identifiers",
    )
    parser.add_argument("--prefix", default=None, help="Alphanumeric prefix")
    parser.add_argument(
        "--style", choices=STYLE_CHOICES, default=None, help="Presentation style"
    )
    parser.add_argument(
        "--count", type=int, default=1, help="Number of identifiers to generate"
    )
    parser.set_defaults(func=_cmd_generate)
    return parser


def _add_verify_subparser(
    subparsers: argparse._SubParsersAction[argparse.ArgumentParser],
    common: argparse.ArgumentParser,
) -> argparse.ArgumentParser:
    """Create the ``verify`` subcommand parser."""
    parser = subparsers.add_parser(
        "verify",
        parents=[common],
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
        help="Check identifier signatures",
        description="Exit status is 1 when any identifier fails verification.",
    )
    parser.add_argument("ids", nargs="+", help="Identifiers to verify")
    parser.set_defaults(func=_cmd_verify)
    return parser


def _add_format_subparser(
    subparsers: argparse._SubParsersAction[argparse.ArgumentParser],
    common: argparse.ArgumentParser,
) -> argparse.ArgumentParser:
    """Create the ``format`` subcommand parser."""
    parser = subparsers.add_parser(
        "format",
        parents=[common],
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
        help="Regroup an existing identifier",
    )
    parser.add_argument("id", help="Identifier to reformat")
    parser.add_argument(
        "--style", choices=STYLE_CHOICES, required=True, help="Presentation style"
    )
    parser.set_defaults(func=_cmd_format)
    return parser


def _add_stress_subparser(
    subparsers: argparse._SubParsersAction[argparse.ArgumentParser],
    common: argparse.ArgumentParser,
) -> argparse.ArgumentParser:
    """Create the ``stress`` subcommand parser."""
    parser = subparsers.add_parser(
        "stress",
        parents=[common],
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
        help="Count duplicates and verification failures over many identifiers",
    )
    parser.add_argument(
        "--total", type=int, default=1_000_000, help="Identifiers to generate"
    )
    parser.add_argument(
        "--progress-step",
        type=int,
        default=100_000,
        help="Identifiers between progress records",
    )
    parser.set_defaults(func=_cmd_stress)
    return parser


def _add_benchmark_subparser(
    subparsers: argparse._SubParsersAction[argparse.ArgumentParser],
    common: argparse.ArgumentParser,
) -> argparse.ArgumentParser:
    """Create the ``benchmark`` subcommand parser."""
    parser = subparsers.add_parser(
        "benchmark",
        parents=[common],
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
        help="Measure time and memory at identifier count checkpoints",
    )
    parser.add_argument(
        "--steps",
        type=int,
        nargs="+",
        default=list(DEFAULT_CHECKPOINTS),
        help="Checkpoint identifier counts",
    )
    parser.add_argument(
        "--output-dir",
        type=Path,
        default=Path("benchmark"),
        help="Directory receiving benchmark.json and benchmark.csv",
    )
    parser.set_defaults(func=_cmd_benchmark)
    return parser


def _build_parser() -> argparse.ArgumentParser:
    """Return an argument parser configured with subcommands."""
    parser = argparse.ArgumentParser(
        prog="forgeid",
        description=(
            "Generate short identifiers sealed with a keyed signature and "
            "verify them later without a lookup store."
        ),
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )
    parser.add_argument(
        "--version",
        action="store_true",
        help="Print the forgeid version and exit.",
    )
    parser.add_argument(
        "--diagnostics",
        action="store_true",
        help="Print environment diagnostics and exit.",
    )
    common = _add_common_args(
        argparse.ArgumentParser(
            add_help=False, formatter_class=argparse.ArgumentDefaultsHelpFormatter
        )
    )
    subparsers = parser.add_subparsers(dest="command")
    _add_generate_subparser(subparsers, common)
    _add_verify_subparser(subparsers, common)
    _add_format_subparser(subparsers, common)
    _add_stress_subparser(subparsers, common)
    _add_benchmark_subparser(subparsers, common)
    return parser


def _apply_args_to_settings(args: argparse.Namespace, settings: Settings) -> Settings:
    """Return ``settings`` with fields overridden by CLI arguments."""
    arg_mapping: dict[str, tuple[str, Callable[[Any], Any] | None]] = {
        "secret": ("secret", SecretStr),
        "epoch_year": ("epoch_year", None),
        "base_length": ("base_length", None),
        "growth_interval": ("growth_interval_years", None),
    }
    updates: dict[str, Any] = {}
    for arg_name, (attr, converter) in arg_mapping.items():
        value = getattr(args, arg_name, None)
        if value is not None:  # branch: override settings when flag provided
            updates[attr] = converter(value) if converter else value
    # Range checks happen when the generator validates its configuration.
    return settings.model_copy(update=updates) if updates else settings


def main(argv: Sequence[str] | None = None) -> None:
    """Parse arguments and dispatch to the requested subcommand."""
    parser = _build_parser()
    args = parser.parse_args(argv)
    if args.version:
        _print_version()
        return
    if args.diagnostics:
        _print_diagnostics()
        return
    if args.command is None:
        parser.print_help()
        raise SystemExit(1)
    try:
        settings = _apply_args_to_settings(args, load_settings(args.config))
        _configure_logging(args, settings)
        generator = ForgeIdGenerator.from_settings(settings)
    except (RuntimeError, ValueError) as exc:
        print(f"forgeid: {exc}", file=sys.stderr)
        raise SystemExit(2) from exc
    try:
        code = args.func(args, generator, settings)
    except ValueError as exc:
        print(f"forgeid: {exc}", file=sys.stderr)
        raise SystemExit(2) from exc
    finally:
        logfire.force_flush()
    if code:
        raise SystemExit(code)


if __name__ == "__main__":
    # Allow module to be executed as a standalone script
    main()
