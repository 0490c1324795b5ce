"""Command line access to curve configs: ``python -m rampcurve``."""

from __future__ import annotations

import argparse
import json
import sys

from .config import load_curve_config
from .diagnostics import curve_diagnostics, sample_curve
from .factory import build_curve


def _build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(prog="rampcurve", description="Evaluate interpolation curves described in JSON.")
    sub = ap.add_subparsers(dest="command", required=True)

    p = sub.add_parser("sample", help="Print evenly spaced samples of a curve")
    p.add_argument("config", help="Path to a curve JSON file")
    p.add_argument("--start", type=float, required=True)
    p.add_argument("--stop", type=float, required=True)
    p.add_argument("--num", type=int, default=11)

    p = sub.add_parser("eval", help="Evaluate a curve at the given points")
    p.add_argument("config", help="Path to a curve JSON file")
    p.add_argument("x", type=float, nargs="+")

    p = sub.add_parser("check", help="Report saturation and monotonicity diagnostics")
    p.add_argument("config", help="Path to a curve JSON file")
    p.add_argument("--num", type=int, default=257)

    p = sub.add_parser("plot", help="Write a plot of the curve (requires matplotlib)")
    p.add_argument("config", help="Path to a curve JSON file")
    p.add_argument("output", help="Image path")
    p.add_argument("--num", type=int, default=257)
    p.add_argument("--title", default=None)
    return ap


def _run(args: argparse.Namespace) -> int:
    curve = build_curve(load_curve_config(args.config))

    if args.command == "sample":
        xs, ys = sample_curve(curve, args.start, args.stop, args.num)
        for x, y in zip(xs, ys):
            print(f"{float(x)!r}\t{float(y)!r}")
        return 0

    if args.command == "eval":
        for x in args.x:
            print(f"{x!r}\t{curve.eval(x)!r}\t{str(curve.exceeds_domain(x)).lower()}")
        return 0

    if args.command == "check":
        diag = curve_diagnostics(curve, num=args.num)
        print(json.dumps(diag, indent=2, sort_keys=True))
        return 0 if diag["all_checks_pass"] else 1

    from .plotting import plot_curve

    print(plot_curve(curve, args.output, num=args.num, title=args.title))
    return 0


def main(argv: list[str] | None = None) -> int:
    args = _build_parser().parse_args(argv)
    try:
        return _run(args)
    except (ValueError, OSError, RuntimeError) as exc:
        print(f"error: {exc}", file=sys.stderr, flush=True)
        return 2


if __name__ == "__main__":
    raise SystemExit(main())
