"""Distribution visualization utilities.

Provides ``plot_distribution``, a bar chart of the probability mass every
outcome of one or more discrete distributions carries.
"""

from __future__ import annotations

from typing import Any, List, Optional, Sequence, Tuple, Union

import numpy as np

from probspace.core.types import Distribution

# ---------------------------------------------------------------------------
# Colorblind-safe palette (Wong 2011)
# ---------------------------------------------------------------------------
COLORBLIND_SAFE_PALETTE: List[str] = [
    "#0072B2",  # blue
    "#E69F00",  # orange
    "#009E73",  # green
    "#CC79A7",  # pink
    "#56B4E9",  # sky blue
    "#D55E00",  # vermilion
    "#F0E442",  # yellow
    "#000000",  # black
]


def _get_color(index: int) -> str:
    """Return a color from the colorblind-safe palette (wraps around)."""
    return COLORBLIND_SAFE_PALETTE[index % len(COLORBLIND_SAFE_PALETTE)]


def _domain_order(dists: Sequence[Distribution], sort: bool) -> List[Any]:
    """Outcomes of the first domain, then any others not yet seen."""
    seen = {}
    for d in dists:
        for o in d.domain:
            seen.setdefault(o, None)
    order = list(seen)
    if sort:
        order.sort()
    return order


def plot_distribution(
    dists: Any,
    labels: Optional[Union[str, Sequence[str]]] = None,
    *,
    sort: bool = False,
    title: Optional[str] = None,
    xlabel: Optional[str] = None,
    ylabel: Optional[str] = None,
    ax: Optional[Any] = None,
    figsize: Tuple[float, float] = (8, 5),
    save_path: Optional[str] = None,
) -> Any:
    """Plot the probability mass of one or more distributions as grouped bars.

    Parameters
    ----------
    dists : Distribution or list of Distribution
        Distributions to draw.  Every domain element gets a bar slot,
        including outcomes without mass.
    labels : str or list of str, optional
        Legend labels for each distribution.  Defaults to ``repr(dist)``.
    sort : bool
        Sort the outcome axis; outcomes must then be mutually orderable.
    title, xlabel, ylabel : str, optional
        Axis labels / title.
    ax : matplotlib Axes, optional
        Pre-existing axes to draw on.
    figsize : tuple
        Figure size when creating a new figure.
    save_path : str, optional
        If given, save the figure to this path.

    Returns
    -------
    matplotlib Figure if one was created, otherwise the given Axes.
    """
    import matplotlib.pyplot as plt

    if not isinstance(dists, (list, tuple)):
        dists = [dists]
    if labels is None:
        labels = [repr(d) for d in dists]
    elif isinstance(labels, str):
        labels = [labels]
    if len(labels) < len(dists):
        labels = list(labels) + [repr(d) for d in dists[len(labels):]]

    created_fig = False
    if ax is None:
        fig, ax = plt.subplots(figsize=figsize)
        created_fig = True
    else:
        fig = ax.figure

    order = _domain_order(dists, sort)
    xs = np.arange(len(order))
    width = 0.8 / len(dists)

    for idx, (dist, label) in enumerate(zip(dists, labels)):
        masses = [
            dist.probability_of(o) if o in dist.domain else 0.0 for o in order
        ]
        ax.bar(
            xs + idx * width - 0.4 + width / 2,
            masses,
            width=width,
            color=_get_color(idx),
            label=label,
        )

    ax.set_xticks(xs)
    ax.set_xticklabels([str(o) for o in order])
    ax.set_xlabel(xlabel or "Outcome")
    ax.set_ylabel(ylabel or "Probability")
    if title:
        ax.set_title(title)
    ax.legend(frameon=False)
    ax.spines["top"].set_visible(False)
    ax.spines["right"].set_visible(False)

    fig.tight_layout()

    if save_path is not None:
        fig.savefig(save_path, dpi=150, bbox_inches="tight")

    if created_fig:
        return fig
    return ax
