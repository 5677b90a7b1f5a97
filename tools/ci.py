#!/usr/bin/env python3
# Copyright 2026 LoxScan Contributors
# SPDX-License-Identifier: Apache-2.0

"""Run the LoxScan CI checks locally: format, lint, type check, tests, and build.

Pass step names (e.g. ``lint tests``) to run a subset.
"""

import argparse
import pathlib
import subprocess
import sys
import time

from yachalk import chalk

# ###############
# Public Interface
# ###############

STEPS: dict[str, list[str]] = {
    "format": ["uv", "run", "ruff", "format", "--check", "src/", "tests/", "tools/"],
    "lint": ["uv", "run", "ruff", "check", "src/", "tests/", "tools/"],
    "types": ["uv", "run", "ty", "check", "src/"],
    "tests": ["uv", "run", "pytest", "--cov=loxscan", "--cov-report=term-missing"],
    "build": ["uv", "build"],
}


def main(argv: list[str] | None = None) -> int:
    """Run the selected CI steps and print a summary; return the process exit code."""
    parser = argparse.ArgumentParser(prog="ci", description="Run LoxScan CI checks.")
    parser.add_argument("steps", nargs="*", metavar="STEP", help=f"steps to run (default: all): {', '.join(STEPS)}")
    args = parser.parse_args(argv)
    unknown = [name for name in args.steps if name not in STEPS]
    if unknown:
        parser.error(f"unknown step(s): {', '.join(unknown)}")

    selected = args.steps or list(STEPS)
    results = [_run_step(name, STEPS[name]) for name in selected]
    _print_summary(results)
    return 0 if all(passed for _, passed, _ in results) else 1


# ################
# Implementation
# ################


def _run_step(name: str, cmd: list[str]) -> tuple[str, bool, float]:
    _print_banner(name)
    start = time.monotonic()
    proc = subprocess.run(cmd, cwd=pathlib.Path(__file__).parent.parent)
    return name, proc.returncode == 0, time.monotonic() - start


def _print_banner(title: str) -> None:
    sep = chalk.blue("=" * 60)
    print(f"\n{sep}\n{chalk.blue(title)}\n{sep}")


def _print_summary(results: list[tuple[str, bool, float]]) -> None:
    _print_banner("Summary")
    for name, passed, elapsed in results:
        paint = chalk.green if passed else chalk.red
        print(paint(f"  {'PASS' if passed else 'FAIL'}  {name} ({elapsed:.1f}s)"))
    print()


if __name__ == "__main__":
    sys.exit(main())
