"""Tests for probspace.viz.distributions."""

import os

import matplotlib
import pytest

matplotlib.use("Agg")

import matplotlib.pyplot as plt

from probspace.core.space import HashSpace, SortedSpace
from probspace.distributions.discrete import DiscreteDistribution, uniform_discrete
from probspace.viz.distributions import COLORBLIND_SAFE_PALETTE, plot_distribution


# ------------------------------------------------------------------ helpers --

def _die():
    return uniform_discrete(SortedSpace(range(1, 7)))


def _loaded():
    d = DiscreteDistribution(SortedSpace(range(1, 7)))
    d.add_outcome(6, 0.5)
    d.add_outcome(1, 0.5)
    return d


@pytest.fixture(autouse=True)
def _close_figures():
    yield
    plt.close("all")


# ----------------------------------------------------------- smoke tests --


class TestPlotDistribution:
    def test_single(self):
        fig = plot_distribution(_die(), labels="fair die")
        assert fig is not None
        ax = fig.axes[0]
        assert len(ax.patches) == 6

    def test_comparison_mode(self):
        fig = plot_distribution([_die(), _loaded()], labels=["fair", "loaded"])
        # every domain element gets a slot for every distribution
        assert len(fig.axes[0].patches) == 12

    def test_bar_heights_are_masses(self):
        fig = plot_distribution(_loaded())
        heights = [p.get_height() for p in fig.axes[0].patches]
        assert heights == pytest.approx([0.5, 0, 0, 0, 0, 0.5])

    def test_existing_axes(self):
        _, ax = plt.subplots()
        result = plot_distribution(_die(), ax=ax, title="die")
        assert result is ax
        assert ax.get_title() == "die"

    def test_sorted_axis(self):
        d = uniform_discrete(HashSpace([3, 1, 2]))
        fig = plot_distribution(d, sort=True)
        labels = [t.get_text() for t in fig.axes[0].get_xticklabels()]
        assert labels == ["1", "2", "3"]

    def test_save_path(self, tmp_path):
        path = os.path.join(tmp_path, "die.png")
        plot_distribution(_die(), save_path=path)
        assert os.path.exists(path)

    def test_palette(self):
        assert len(COLORBLIND_SAFE_PALETTE) == 8
