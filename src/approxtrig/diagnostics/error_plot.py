#!/usr/bin/env python3
from __future__ import annotations

import argparse
import math
import sys
from typing import Callable, List, Optional

from approxtrig.api import ENTRY_POINTS, get_tier, list_tiers
from approxtrig.core.constants import TWO_PI
from approxtrig.core.errors import UnknownTierError


def _need_numpy():
    try:
        import numpy as np
        return np
    except ImportError as e:
        raise RuntimeError('Need numpy. Install: pip install "approxtrig[diagnostics]"') from e


def _need_matplotlib():
    try:
        import matplotlib.pyplot as plt
        return plt
    except ImportError as e:
        raise RuntimeError('Need matplotlib. Install: pip install "approxtrig[diagnostics]"') from e


def error_curve(fn: Callable[[float], float], ref: Callable[[float], float], xs):
    """Absolute error |fn(x) - ref(x)| sampled on xs, as a numpy array."""
    np = _need_numpy()
    return np.array([abs(fn(float(x)) - ref(float(x))) for x in xs])


def main(argv: Optional[List[str]] = None) -> int:
    p = argparse.ArgumentParser(description="Plot the absolute error of each tier over [-2pi, 2pi].")
    p.add_argument("--fn", choices=["cos", "sin"], default="cos")
    p.add_argument("--tier", action="append", default=[], help="Tier key to plot (repeatable, default: all).")
    p.add_argument("--points", type=int, default=4001, help="Grid size (default: 4001).")
    p.add_argument("--out", type=str, default="", help="Save the figure to this path instead of showing it.")
    args = p.parse_args(argv)

    keys = args.tier or list_tiers()
    try:
        tiers = [get_tier(k) for k in keys]
    except UnknownTierError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    if args.points < 2:
        print("Error: Grid size must be at least 2.", file=sys.stderr)
        return 1

    np = _need_numpy()
    plt = _need_matplotlib()

    ref = math.cos if args.fn == "cos" else math.sin
    idx = 0 if args.fn == "cos" else 1
    xs = np.linspace(-TWO_PI, TWO_PI, args.points)

    fig, ax = plt.subplots(figsize=(10, 5))
    for tier in tiers:
        fn = ENTRY_POINTS[tier.key][idx]
        # log scale cannot show exact zeros
        err = np.maximum(error_curve(fn, ref, xs), 1e-18)
        ax.semilogy(xs, err, lw=0.8, label=f"{fn.__name__} ({tier.digits} digits)")
        ax.axhline(tier.tolerance, ls="--", lw=0.6, color="0.4")

    for k in range(-4, 5):
        ax.axvline(k * math.pi / 2, lw=0.4, color="0.8")
    ax.set_xlabel("x (radians)")
    ax.set_ylabel(f"|{args.fn}_T(x) - {args.fn}(x)|")
    ax.set_title(f"Absolute error of {args.fn} approximations")
    ax.legend(loc="lower right")
    fig.tight_layout()

    if args.out:
        fig.savefig(args.out, dpi=150)
        print(f"Saved plot to {args.out}")
    else:
        plt.show()
    return 0


if __name__ == "__main__":
    sys.exit(main())
