#!/usr/bin/env python3
from __future__ import annotations

import argparse
import math
import sys
from dataclasses import dataclass
from typing import Callable, List, Optional, Sequence, Tuple

from approxtrig.api import ENTRY_POINTS, get_tier, list_tiers
from approxtrig.core.constants import TWO_PI
from approxtrig.core.errors import UnknownTierError


NUMBER_OF_TESTS = 200
MIN_TEST = -TWO_PI
MAX_TEST = TWO_PI


@dataclass(frozen=True)
class AccuracyReport:
    name: str
    digits: int
    max_error: float
    worst_x: float
    failures: Tuple[int, ...]  # sample indices where the bound was exceeded

    @property
    def passed(self) -> bool:
        return not self.failures

    @property
    def bound(self) -> float:
        return 10.0 ** (-self.digits)


def sample_points(n: int = NUMBER_OF_TESTS, lo: float = MIN_TEST, hi: float = MAX_TEST) -> List[float]:
    """n evenly spaced points lo + i*(hi - lo)/n, i = 0..n-1."""
    if n < 1:
        raise ValueError("n must be at least 1")
    step = (hi - lo) / n
    return [lo + i * step for i in range(n)]


def check_accuracy(
    reference: Callable[[float], float],
    approx: Callable[[float], float],
    digits: int,
    xs: Sequence[float],
    name: str = "",
) -> AccuracyReport:
    max_error = 10.0 ** (-digits)
    worst_err = 0.0
    worst_x = xs[0] if xs else 0.0
    failures = []
    for i, x in enumerate(xs):
        diff = abs(reference(x) - approx(x))
        if diff > worst_err:
            worst_err = diff
            worst_x = x
        if diff > max_error:
            failures.append(i)
    return AccuracyReport(
        name=name or getattr(approx, "__name__", "?"),
        digits=digits,
        max_error=worst_err,
        worst_x=worst_x,
        failures=tuple(failures),
    )


def run_suite(keys: Sequence[str], xs: Sequence[float]) -> List[AccuracyReport]:
    reports = []
    for key in keys:
        digits = int(get_tier(key).digits)
        cos_fn, _ = ENTRY_POINTS[key]
        reports.append(check_accuracy(math.cos, cos_fn, digits, xs))
    for key in keys:
        digits = int(get_tier(key).digits)
        _, sin_fn = ENTRY_POINTS[key]
        reports.append(check_accuracy(math.sin, sin_fn, digits, xs))
    return reports


def run_default_suite() -> List[AccuracyReport]:
    return run_suite(list_tiers(), sample_points())


def format_report(r: AccuracyReport) -> str:
    status = "ok" if r.passed else f"FAIL ({len(r.failures)} samples, first i={r.failures[0]})"
    return (
        f"{r.name:<8} | digits {r.digits:>2} | bound {r.bound:.0e} | "
        f"max err {r.max_error:.3e} at x={r.worst_x:+.6f} | {status}"
    )


def main(argv: Optional[List[str]] = None) -> int:
    p = argparse.ArgumentParser(description="Check every entry point against math.cos/math.sin.")
    p.add_argument("--samples", type=int, default=NUMBER_OF_TESTS,
                   help=f"Number of evenly spaced samples over [-2pi, 2pi) (default: {NUMBER_OF_TESTS}).")
    p.add_argument("--tier", action="append", default=[], help="Tier key to check (repeatable, default: all).")
    p.add_argument("--out-txt", type=str, default="", help="Optional text file to save the output.")
    args = p.parse_args(argv)

    if args.samples < 1:
        print("Error: Number of samples must be at least 1.", file=sys.stderr)
        return 1

    keys = args.tier or list_tiers()
    try:
        for key in keys:
            get_tier(key)
    except UnknownTierError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    reports = run_suite(keys, sample_points(args.samples))

    lines = [f"Accuracy over {args.samples} samples in [-2pi, 2pi)", "=" * 95]
    lines.extend(format_report(r) for r in reports)
    failed = [r for r in reports if not r.passed]
    lines.append("-" * 95)
    lines.append(f"{len(reports) - len(failed)}/{len(reports)} checks passed")

    output_text = "\n".join(lines)
    print(output_text)

    if args.out_txt:
        with open(args.out_txt, "w", encoding="utf-8") as f:
            f.write(output_text + "\n")
        print(f"\nSaved results to {args.out_txt}")

    return 1 if failed else 0


if __name__ == "__main__":
    sys.exit(main())
