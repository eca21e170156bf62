#!/usr/bin/env python3
# Copyright 2026 smlcheck Contributors
# SPDX-License-Identifier: Apache-2.0

"""Run all CI checks locally: format, lint, type check, tests, and build."""

import subprocess
import sys
import time
from pathlib import Path

from yachalk import chalk

# ###############
# Public Interface
# ###############

STEPS: list[tuple[str, list[str]]] = [
    ("Format check", ["uv", "run", "ruff", "format", "--check", "src/", "tests/"]),
    ("Lint", ["uv", "run", "ruff", "check", "src/", "tests/"]),
    ("Type check", ["uv", "run", "ty", "check", "src/"]),
    ("Tests", ["uv", "run", "pytest", "--cov=smlcheck", "--cov-report=term-missing"]),
    ("Build", ["uv", "build"]),
]


def main(argv: list[str] | None = None) -> int:
    """Run the selected CI steps (all by default) and report results.

    Args:
        argv: Optional step names to run, matched case-insensitively against
            the start of each step name (e.g. ``lint tests``).
    """
    selected = _select_steps(argv if argv is not None else sys.argv[1:])
    if not selected:
        print(chalk.red("No CI step matches the given names."), file=sys.stderr)
        return 2

    results: list[tuple[str, bool, float]] = []
    for name, cmd in selected:
        sep = chalk.blue("=" * 60)
        print(f"\n{sep}")
        print(chalk.blue(name))
        print(sep)
        start = time.monotonic()
        proc = subprocess.run(cmd, cwd=_repo_root())
        results.append((name, proc.returncode == 0, time.monotonic() - start))

    _print_summary(results)
    return 0 if all(passed for _, passed, _ in results) else 1


# ################
# Implementation
# ################


def _select_steps(names: list[str]) -> list[tuple[str, list[str]]]:
    if not names:
        return list(STEPS)
    wanted = [n.lower() for n in names]
    return [step for step in STEPS if any(step[0].lower().startswith(w) for w in wanted)]


def _print_summary(results: list[tuple[str, bool, float]]) -> None:
    sep = "=" * 60
    print(f"\n{chalk.blue(sep)}")
    print(chalk.blue("  Summary"))
    print(chalk.blue(sep))
    for name, passed, elapsed in results:
        color = chalk.green if passed else chalk.red
        status = "PASS" if passed else "FAIL"
        print(color(f"  {status}  {name} ({elapsed:.1f}s)"))
    print()


def _repo_root() -> Path:
    return Path(__file__).resolve().parent.parent


if __name__ == "__main__":
    sys.exit(main())
