from __future__ import annotations

from pathlib import Path
from typing import Literal

import numpy as np

from ..types import VaRResult

Style = Literal["pretty", "minimal"]


def _mpl_context(style: Style):
    import matplotlib as mpl

    if style == "minimal":
        return mpl.rc_context({})

    return mpl.rc_context(
        {
            "axes.grid": True,
            "axes.axisbelow": True,
            "grid.alpha": 0.18,
            "grid.linewidth": 0.8,
            "axes.spines.top": False,
            "axes.spines.right": False,
            "axes.titlesize": 11,
            "axes.titleweight": "semibold",
            "axes.labelsize": 10,
            "xtick.labelsize": 9,
            "ytick.labelsize": 9,
            "figure.dpi": 120,
        }
    )


def plot_change_distribution(
    res: VaRResult,
    *,
    bins: int = 50,
    title: str | None = None,
    style: Style = "pretty",
    figsize: tuple[float, float] = (9, 5),
    show: bool = True,
    savepath: str | Path | None = None,
    dpi: int = 150,
):
    """
    Histogram of portfolio changes with a dashed marker at the VaR change.

    Returns ``(fig, ax)``.
    """
    try:
        import matplotlib.pyplot as plt
    except ModuleNotFoundError as e:
        raise ModuleNotFoundError(
            "plot_change_distribution requires matplotlib. "
            "Install it with: pip install matplotlib"
        ) from e

    changes = np.asarray(res.changes, dtype=float)

    with _mpl_context(style):
        fig, ax = plt.subplots(figsize=figsize, constrained_layout=True)
        ax.hist(changes, bins=bins, alpha=0.8, edgecolor="white", linewidth=0.5)
        ax.axvline(
            res.var,
            color="tab:red",
            linestyle=(0, (4, 3)),
            linewidth=1.6,
            label=res.report,
        )

        ax.set_title(title or "Distribution of portfolio changes", loc="left")
        ax.set_xlabel("Change in portfolio value")
        ax.set_ylabel("Frequency")
        ax.legend(frameon=False, fontsize=9)

        if savepath is not None:
            savepath = Path(savepath)
            savepath.parent.mkdir(parents=True, exist_ok=True)
            fig.savefig(savepath, dpi=dpi, bbox_inches="tight")

        if show:
            plt.show()

        return fig, ax
