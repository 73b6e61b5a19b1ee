# design/minimax_polys.py

from __future__ import annotations

import argparse
import math
import sys
from typing import Callable, List, Optional, Sequence, Tuple

from approxtrig.engines.poly import horner_even
from approxtrig.engines.tiers import ALL_TIERS


def _need_numpy():
    try:
        import numpy as np
        return np
    except ImportError as e:
        raise RuntimeError('Need numpy. Install: pip install "approxtrig[design]"') from e


def _need_scipy():
    try:
        import scipy.optimize as opt
        return opt
    except ImportError as e:
        raise RuntimeError('Need scipy. Install: pip install "approxtrig[design]"') from e


def optimize_minimax_even(
    func: Callable,
    interval: Tuple[float, float],
    n_terms: int,
    num_points: int = 10000
) -> Tuple[List[float], List[int], float]:
    """
    Finds the minimax polynomial approximation using ONLY even powers.
    Returns (coefficients, powers, max_error).
    """
    if n_terms < 1:
        raise ValueError("n_terms must be at least 1")
    np = _need_numpy()
    opt = _need_scipy()

    powers = [2 * i for i in range(n_terms)]

    x = np.linspace(interval[0], interval[1], num_points)
    y = func(x)

    A = np.vstack([x**p for p in powers]).T

    # 1. Initial Guess: Least Squares Fit
    c_init, _, _, _ = np.linalg.lstsq(A, y, rcond=None)

    # 2. Objective Function: Maximum Absolute Error (L-infinity norm)
    def cost(c) -> float:
        return float(np.max(np.abs(y - A @ c)))

    # 3. Optimize to find the Minimax coefficients
    res = opt.minimize(
        cost,
        c_init,
        method='Powell',
        options={'xtol': 1e-14, 'ftol': 1e-14, 'maxiter': 20000}
    )

    # Powell can wander off a good least-squares start
    best = res.x if cost(res.x) <= cost(c_init) else c_init
    return [float(c) for c in best], powers, cost(best)


def max_error_of(
    coefficients: Sequence[float],
    interval: Tuple[float, float] = (0.0, math.pi / 2.0),
    num_points: int = 10000,
) -> float:
    """Worst |cos(x) - P(x)| on a uniform grid, P evaluated with the library kernel."""
    if num_points < 2:
        raise ValueError("num_points must be at least 2")
    lo, hi = interval
    step = (hi - lo) / (num_points - 1)
    worst = 0.0
    for k in range(num_points):
        x = lo + k * step
        worst = max(worst, abs(math.cos(x) - horner_even(x, coefficients)))
    return worst


def _table(lines: List[str], coeffs: Sequence[float], powers: Sequence[int]) -> None:
    lines.append("-" * 95)
    lines.append(f"{'Power':<8} | {'Hex-Float (IEEE 754)':<25} | {'Decimal Coefficient'}")
    lines.append("-" * 95)
    for c, p in zip(coeffs, powers):
        lines.append(f"x^{p:<6} | {float(c).hex():<25} | {c:+.18f}")


def main(argv: Optional[List[str]] = None) -> int:
    p = argparse.ArgumentParser(description="Compute minimax even-polynomial approximations of cos on [0, pi/2].")
    p.add_argument("--terms", type=int, default=4, help="Number of even-power terms (default: 4).")
    p.add_argument("--points", type=int, default=10000, help="Grid size for the fit (default: 10000).")
    p.add_argument("--compare", action="store_true", help="Also print the shipped tier with the same number of terms.")
    p.add_argument("--out-txt", type=str, default="", help="Optional text file to save the output.")
    args = p.parse_args(argv)

    if args.terms < 1:
        print("Error: Number of terms must be at least 1.", file=sys.stderr)
        return 1
    if args.points < 2:
        print("Error: Grid size must be at least 2.", file=sys.stderr)
        return 1

    np = _need_numpy()

    interval = (0.0, math.pi / 2.0)
    coeffs, powers, err = optimize_minimax_even(np.cos, interval, args.terms, args.points)

    lines = []
    lines.append(f"Minimax Even-Polynomial Approximation of cos(x) ({args.terms} terms, degree {powers[-1]})")
    lines.append("=" * 95)
    lines.append("\n--- Function: cos(x) on [0, pi/2] ---")
    lines.append(f"Maximum Absolute Error: {err:.8e}  (~{-math.log10(err):.1f} digits)" if err > 0
                 else "Maximum Absolute Error: 0")
    _table(lines, coeffs, powers)

    if args.compare:
        shipped = [t for t in ALL_TIERS.values() if t.terms == args.terms]
        if not shipped:
            lines.append(f"\nNo shipped tier has {args.terms} terms.")
        for tier in shipped:
            shipped_err = max_error_of(tier.coefficients, interval, args.points)
            lines.append(f"\n--- Shipped tier {tier.key} ({tier.digits} digits) ---")
            lines.append(f"Maximum Absolute Error: {shipped_err:.8e}")
            _table(lines, tier.coefficients, powers)

    output_text = "\n".join(lines)

    print(output_text)

    if args.out_txt:
        with open(args.out_txt, "w", encoding="utf-8") as f:
            f.write(output_text + "\n")
        print(f"\nSaved results to {args.out_txt}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
