from __future__ import annotations

import argparse
import importlib
import inspect
import math
import sys


def _run_module_main(modpath: str, argv: list[str]) -> int:
    """
    Import module and run its main().

    Supports:
      - main(argv: list[str] | None = None) -> int|None
      - main() -> int|None
    """
    mod = importlib.import_module(modpath)
    if not hasattr(mod, "main"):
        raise SystemExit(f"Module {modpath} has no main()")
    fn = getattr(mod, "main")

    sig = inspect.signature(fn)
    if len(sig.parameters) == 0:
        rv = fn()
    else:
        rv = fn(argv)
    return int(rv or 0)


def cmd_eval(argv: list[str]) -> int:
    import approxtrig
    from approxtrig.api import ENTRY_POINTS

    p = argparse.ArgumentParser(prog="approxtrig eval", description="Evaluate cos/sin approximations at one point.")
    p.add_argument("fn", choices=["cos", "sin"])
    p.add_argument("x", type=float, help="Angle in radians")
    p.add_argument("--tier", default=None, help="Tier key (default: all tiers)")
    args = p.parse_args(argv)

    try:
        tiers = [approxtrig.get_tier(args.tier)] if args.tier else [approxtrig.get_tier(k) for k in approxtrig.list_tiers()]
    except approxtrig.UnknownTierError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    idx = 0 if args.fn == "cos" else 1
    exact = math.cos(args.x) if args.fn == "cos" else math.sin(args.x)

    print(f"x = {args.x!r}")
    print(f"math.{args.fn}(x) = {exact:+.17f}")
    for tier in tiers:
        fn = ENTRY_POINTS[tier.key][idx]
        try:
            v = fn(args.x)
        except approxtrig.ArithmeticDomainError as e:
            print(f"Error: {e}", file=sys.stderr)
            return 1
        print(f"  {fn.__name__:<8} = {v:+.17f}   abs err = {abs(v - exact):.3e}   (bound {tier.tolerance:.0e})")
    return 0


def cmd_tiers(argv: list[str]) -> int:
    import approxtrig

    p = argparse.ArgumentParser(prog="approxtrig tiers", description="List the accuracy tiers.")
    p.parse_args(argv)

    print(f"{'Tier':<6} {'Digits':>6} {'Terms':>6} {'Bound':>8}   Entry points")
    for key in approxtrig.list_tiers():
        info = approxtrig.tier_info(key)
        print(f"{key:<6} {info['digits']:>6} {info['terms']:>6} {info['tolerance']:>8.0e}   {info['cos']}, {info['sin']}")
    return 0


def main(argv: list[str] | None = None) -> int:
    argv = list(sys.argv[1:] if argv is None else argv)

    p = argparse.ArgumentParser(prog="approxtrig", description="Polynomial sine/cosine approximations.")
    sub = p.add_subparsers(dest="cmd", required=True)

    sub.add_parser("eval", help="Evaluate an approximation at one point.", add_help=False)
    sub.add_parser("tiers", help="List the accuracy tiers.", add_help=False)

    pdiag = sub.add_parser("diag", help="Run a diagnostic tool.")
    pdiag.add_argument("tool", choices=["accuracy", "error-plot"], help="Which diagnostic to run")

    pdesign = sub.add_parser("design", help="Run a design tool.")
    pdesign.add_argument("tool", choices=["minimax"], help="Which design tool to run")

    args, rest = p.parse_known_args(argv)

    if args.cmd == "eval":
        return cmd_eval(rest)

    if args.cmd == "tiers":
        return cmd_tiers(rest)

    if args.cmd == "diag":
        tool_map = {
            "accuracy": "approxtrig.diagnostics.accuracy",
            "error-plot": "approxtrig.diagnostics.error_plot",
        }
        return _run_module_main(tool_map[args.tool], rest)

    if args.cmd == "design":
        tool_map = {
            "minimax": "approxtrig.design.minimax_polys",
        }
        return _run_module_main(tool_map[args.tool], rest)

    raise RuntimeError("unreachable")


if __name__ == "__main__":
    raise SystemExit(main())
