"""
Tests for the two-parameter grid iteration and RSS kernels.
"""

import numpy as np
import pytest

from pylinefit.core.compute.grid import (
    first_argmin,
    grid_product,
    on_boundary,
    rss,
    rss_surface,
)
from pylinefit.core.compute.timing import Timer


class TestGridProduct:

    def test_row_major_order(self):
        pairs = list(grid_product([0.0, 1.0], [5.0, 6.0, 7.0]))
        assert pairs == [
            (0, 0, 0.0, 5.0), (0, 1, 0.0, 6.0), (0, 2, 0.0, 7.0),
            (1, 0, 1.0, 5.0), (1, 1, 1.0, 6.0), (1, 2, 1.0, 7.0),
        ]

    def test_length_is_product(self):
        assert len(list(grid_product(np.arange(4.0), np.arange(7.0)))) == 28

    def test_empty_sequence_yields_nothing(self):
        assert list(grid_product([], [1.0, 2.0])) == []

    def test_values_are_python_floats(self):
        _, _, a, b = next(grid_product(np.array([1.5]), np.array([2])))
        assert type(a) is float and type(b) is float


class TestRSS:

    def test_exact_line_has_zero_rss(self, exact_line):
        x, y = exact_line
        assert rss(x, y, 0.0, 2.0) == 0.0

    def test_known_value(self):
        x = np.array([0.0, 1.0])
        y = np.array([1.0, 1.0])
        # line y = 0: residuals (1, 1)
        assert rss(x, y, 0.0, 0.0) == 2.0

    def test_surface_matches_pointwise(self, line_data):
        x, y = line_data
        b0 = np.linspace(-1.0, 3.0, 7)
        b1 = np.linspace(0.0, 5.0, 5)
        surface = rss_surface(x, y, b0, b1)
        assert surface.shape == (7, 5)
        for i, j, a, b in grid_product(b0, b1):
            assert surface[i, j] == pytest.approx(rss(x, y, a, b), rel=1e-12)


class TestFirstArgmin:

    def test_unique_minimum(self):
        surface = np.array([[3.0, 2.0], [0.5, 4.0]])
        assert first_argmin(surface) == (1, 0)

    def test_ties_resolve_row_major(self):
        surface = np.array([[5.0, 1.0, 1.0], [1.0, 1.0, 9.0]])
        assert first_argmin(surface) == (0, 1)

    def test_returns_python_ints(self):
        i, j = first_argmin(np.array([[1.0]]))
        assert type(i) is int and type(j) is int


class TestOnBoundary:

    @pytest.mark.parametrize("ij", [(0, 2), (4, 2), (2, 0), (2, 4), (0, 0), (4, 4)])
    def test_edges(self, ij):
        assert on_boundary(*ij, (5, 5))

    def test_interior(self):
        assert not on_boundary(2, 2, (5, 5))

    def test_single_candidate_axis_is_not_boundary(self):
        assert not on_boundary(0, 2, (1, 5))
        assert on_boundary(0, 4, (1, 5))


class TestTimer:

    def test_sections_recorded(self):
        timer = Timer()
        timer.start()
        with timer.section('a'):
            pass
        with timer.section('a'):
            pass
        timer.stop()
        result = timer.result()
        assert 'total_seconds' in result
        assert result['a'] >= 0.0

    def test_result_before_stop_raises(self):
        timer = Timer()
        timer.start()
        with pytest.raises(RuntimeError):
            timer.result()

    def test_stop_before_start_raises(self):
        with pytest.raises(RuntimeError):
            Timer().stop()

    def test_result_lists_total_first(self):
        timer = Timer()
        timer.start()
        with timer.section('surface'):
            pass
        timer.stop()
        assert list(timer.result()) == ['total_seconds', 'surface']
