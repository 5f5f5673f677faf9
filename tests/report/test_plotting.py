"""
Tests for scatter-plus-lines figures.
"""

import pytest

import matplotlib.pyplot as plt
from matplotlib.axes import Axes
from matplotlib.figure import Figure

from pylinefit.fitting import ParameterGrid, fit_grid_search, fit_normal_equations
from pylinefit.report import ReportConfig, plot_comparison, plot_fit
from pylinefit.report.solvers import _run
from pylinefit.simulation import generate


@pytest.fixture
def sample():
    return generate(40, (0, 10), 2.0, 3.0, 1.0, rng=7)


@pytest.fixture(autouse=True)
def close_figures():
    yield
    plt.close('all')


class TestPlotFit:

    def test_returns_axes(self, sample):
        ax = plot_fit(sample)
        assert isinstance(ax, Axes)
        # true line only
        assert len(ax.get_lines()) == 1
        assert ax.get_title() == 'n = 40, σ = 1'

    def test_overlays_each_fit(self, sample):
        fits = (fit_grid_search(*sample, backend='cpu'), fit_normal_equations(*sample))
        ax = plot_fit(sample, fits)
        assert len(ax.get_lines()) == 3
        labels = [t.get_text() for t in ax.get_legend().get_texts()]
        assert any(label.startswith('grid search') for label in labels)
        assert any(label.startswith('normal equations') for label in labels)

    def test_single_fit_and_custom_label(self, sample):
        ax = plot_fit(sample, fit_normal_equations(*sample), labels=['closed form'])
        labels = [t.get_text() for t in ax.get_legend().get_texts()]
        assert 'closed form' in labels

    def test_draws_on_given_axes(self, sample):
        fig, ax = plt.subplots()
        assert plot_fit(sample, ax=ax) is ax

    def test_label_count_mismatch(self, sample):
        with pytest.raises(ValueError, match="labels"):
            plot_fit(sample, fit_normal_equations(*sample), labels=['a', 'b'])


class TestPlotComparison:

    def test_one_panel_per_cell(self, small_config):
        fig = plot_comparison(_run(small_config))
        assert isinstance(fig, Figure)
        assert len(fig.axes) == 4

    def test_saves_png(self, small_config, tmp_path):
        path = tmp_path / "fig.png"
        _run(small_config).plot(path)
        with open(path, 'rb') as f:
            assert f.read(8) == b'\x89PNG\r\n\x1a\n'

    def test_repeated_noise_level_fills_every_panel(self):
        config = ReportConfig.build(
            sample_sizes=(10,),
            noise_levels=(1.0, 1.0),
            grid=ParameterGrid.linspace(-10.0, 10.0, 41),
            seed=1,
            backend='cpu',
        )
        fig = plot_comparison(_run(config))
        assert len(fig.axes) == 2
        # true line plus two fits on each panel
        assert [len(ax.get_lines()) for ax in fig.axes] == [3, 3]
