"""Render interpolation curves to image files."""

from __future__ import annotations

from pathlib import Path

from .diagnostics import sample_curve
from .interpolation_api import Interpolator


def plot_curve(
    interp: Interpolator,
    path: str | Path,
    *,
    num: int = 257,
    title: str | None = None,
) -> str:
    """Plot ``interp`` over its domain plus a 10% margin on each side.

    Returns the path of the written image.
    """
    try:
        import matplotlib

        matplotlib.use("Agg")
        import matplotlib.pyplot as plt
    except Exception as exc:  # pragma: no cover
        raise RuntimeError("Plotting requires matplotlib") from exc

    dom = interp.get_domain()
    pad = 0.1 * dom.length
    xs, ys = sample_curve(interp, dom.low - pad, dom.high + pad, num)

    out = Path(path)
    out.parent.mkdir(parents=True, exist_ok=True)

    fig, ax = plt.subplots(figsize=(6, 4))
    try:
        ax.plot(xs, ys, lw=1.5)
        ax.axvline(dom.low, color="0.6", ls="--", lw=0.8)
        ax.axvline(dom.high, color="0.6", ls="--", lw=0.8)
        ax.set_xlabel("x")
        ax.set_ylabel("f(x)")
        if title:
            ax.set_title(title)
        fig.tight_layout()
        fig.savefig(out, dpi=120)
    finally:
        plt.close(fig)
    return str(out)
