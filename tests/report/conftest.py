"""Shared fixtures for report tests."""

import matplotlib
matplotlib.use("Agg")

import pytest

from pylinefit.fitting import ParameterGrid
from pylinefit.report import ReportConfig


@pytest.fixture
def small_config():
    return ReportConfig.build(
        sample_sizes=(10, 50),
        noise_levels=(1.0, 6.0),
        grid=ParameterGrid.linspace(-10.0, 10.0, 81),
        seed=1,
        backend='cpu',
    )
