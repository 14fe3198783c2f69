"""
Module: cli

Purpose:
    Command-line entry point. Builds a VerifierConfig from arguments,
    runs the suite and prints a report.

Exit status:
    0  every selected property passed
    1  at least one property found a violation
    2  at least one property hit an infrastructure error, or the
       arguments were invalid

Usage:
    migration-verifier ../vite-app . --seed 1234
    migration-verifier SOURCE TARGET --property dependency_completeness --json
    migration-verifier SOURCE TARGET --presence-dir src/components \\
        --presence-dir src/assets --defer-prefix @/assets
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from dataclasses import replace
from pathlib import Path
from typing import List, Optional, Sequence

from migration_verifier import __version__
from migration_verifier.config import DEFAULT_SAMPLE_COUNT, ProjectLayout, VerifierConfig
from migration_verifier.core.models import PropertyOutcome, VerificationReport
from migration_verifier.properties import PROPERTIES, run_suite

logger = logging.getLogger("migration_verifier")

EXIT_OK = 0
EXIT_VIOLATION = 1
EXIT_ERROR = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="migration-verifier",
        description="Verify that a target project tree is a faithful migration of a source tree.",
    )
    parser.add_argument("source", type=Path, help="Source (migration origin) project root")
    parser.add_argument("target", type=Path, help="Target (migration destination) project root")
    parser.add_argument(
        "--samples", type=int, default=DEFAULT_SAMPLE_COUNT,
        help=f"Draws per property (default {DEFAULT_SAMPLE_COUNT})",
    )
    parser.add_argument("--seed", type=int, default=None, help="Random seed for reproducible runs")
    parser.add_argument(
        "--property", dest="properties", action="append", choices=list(PROPERTIES),
        help="Run only this property (repeatable)",
    )
    parser.add_argument(
        "--presence-dir", dest="presence_dirs", action="append",
        help="Subtree checked by file_presence (repeatable, default src/components)",
    )
    parser.add_argument(
        "--defer-prefix", dest="deferred_prefixes", action="append", default=[],
        help="Skip import references with this prefix (repeatable)",
    )
    parser.add_argument("--scope-prefix", default=None, help="Dependency scope prefix (default @radix-ui/)")
    parser.add_argument("--no-shrink", action="store_true", help="Report the first failing draw as-is")
    parser.add_argument("--json", action="store_true", help="Print the report as JSON")
    parser.add_argument("-v", "--verbose", action="count", default=0, help="More logging (-vv for debug)")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def config_from_args(args: argparse.Namespace) -> VerifierConfig:
    """
    Build a VerifierConfig from parsed arguments.

    Raises:
        ValueError: If the resulting configuration is invalid
    """
    layout = ProjectLayout()
    overrides = {}
    if args.presence_dirs:
        overrides["presence_dirs"] = tuple(args.presence_dirs)
    if args.deferred_prefixes:
        overrides["deferred_prefixes"] = tuple(args.deferred_prefixes)
    if args.scope_prefix is not None:
        overrides["scope_prefix"] = args.scope_prefix
    if overrides:
        layout = replace(layout, **overrides)

    return VerifierConfig.from_paths(
        args.source,
        args.target,
        sample_count=args.samples,
        seed=args.seed,
        shrink=not args.no_shrink,
        layout=layout,
    )


def format_report(report: VerificationReport) -> str:
    """Render a report as plain text, one block per property."""
    lines: List[str] = [f"seed: {report.seed}"]
    for result in report.results:
        if result.outcome is PropertyOutcome.PASSED:
            note = "vacuous" if result.vacuous else f"{result.samples_drawn} samples / {result.universe_size} elements"
            lines.append(f"PASS   {result.name} ({note})")
        elif result.outcome is PropertyOutcome.VIOLATED:
            v = result.violation
            lines.append(f"FAIL   {result.name}")
            lines.append(f"       element: {v.element}")
            lines.append(f"       reason:  {v.description}")
            lines.append(f"       replay:  --seed {v.seed} (draw {v.draw_index}, universe index {v.universe_index})")
        else:
            lines.append(f"ERROR  {result.name}")
            lines.append(f"       {result.error_type}: {result.error}")
    lines.append("OK" if report.passed else "FAILED")
    return "\n".join(lines)


def exit_code(report: VerificationReport) -> int:
    if report.errors:
        return EXIT_ERROR
    if not report.passed:
        return EXIT_VIOLATION
    return EXIT_OK


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    level = logging.WARNING
    if args.verbose == 1:
        level = logging.INFO
    elif args.verbose >= 2:
        level = logging.DEBUG
    logging.basicConfig(level=level, format="%(asctime)s | %(levelname)s | %(message)s")

    try:
        config = config_from_args(args)
    except ValueError as e:
        logger.error(f"Invalid configuration: {e}")
        return EXIT_ERROR

    report = run_suite(config, args.properties)

    if args.json:
        print(json.dumps(report.to_dict(), indent=2))
    else:
        print(format_report(report))
    return exit_code(report)


if __name__ == "__main__":
    sys.exit(main())
