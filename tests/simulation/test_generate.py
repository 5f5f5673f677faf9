"""
Tests for the synthetic sample generator.
"""

import numpy as np
import pytest

from pylinefit.core.exceptions import ValidationError
from pylinefit.simulation import Sample, SimulationDesign, generate, simulate


class TestGenerateBasic:

    def test_returns_sample_that_unpacks(self):
        sample = generate(50, (0, 10), 2.0, 3.0, 1.0, rng=1)
        assert isinstance(sample, Sample)
        x, y = sample
        assert x.shape == (50,)
        assert y.shape == (50,)
        assert len(sample) == 50

    def test_x_within_range(self):
        x, _ = generate(1000, (-2.0, 5.0), 0.0, 1.0, 1.0, rng=3)
        assert x.min() >= -2.0
        assert x.max() < 5.0

    def test_zero_noise_lies_on_line(self):
        x, y = generate(20, (0, 1), 2.0, 3.0, 0.0, rng=0)
        np.testing.assert_allclose(y, 2.0 + 3.0 * x, rtol=0, atol=1e-12)

    def test_single_point(self):
        x, y = generate(1, (0, 1), 2.0, 3.0, 1.0, rng=0)
        assert x.shape == (1,)

    def test_true_params_recorded(self):
        sample = generate(5, (0, 1), 2.0, 3.0, 1.5, rng=0)
        assert sample.true_params == (2.0, 3.0)
        assert sample.noise_sd == 1.5
        np.testing.assert_allclose(sample.true_line([0.0, 1.0]), [2.0, 5.0])

    def test_noise_has_requested_spread(self):
        x, y = generate(20000, (0, 10), 2.0, 3.0, 2.0, rng=11)
        noise = y - (2.0 + 3.0 * x)
        assert abs(noise.mean()) < 0.1
        assert noise.std() == pytest.approx(2.0, rel=0.05)


class TestReproducibility:

    def test_same_seed_same_sample(self):
        a = generate(30, (0, 10), 2.0, 3.0, 1.0, rng=123)
        b = generate(30, (0, 10), 2.0, 3.0, 1.0, rng=123)
        np.testing.assert_array_equal(a.x, b.x)
        np.testing.assert_array_equal(a.y, b.y)

    def test_different_seed_different_sample(self):
        a = generate(30, (0, 10), 2.0, 3.0, 1.0, rng=1)
        b = generate(30, (0, 10), 2.0, 3.0, 1.0, rng=2)
        assert not np.array_equal(a.x, b.x)

    def test_generator_is_advanced(self):
        gen = np.random.default_rng(5)
        a = generate(10, (0, 1), 0.0, 1.0, 1.0, rng=gen)
        b = generate(10, (0, 1), 0.0, 1.0, 1.0, rng=gen)
        assert not np.array_equal(a.x, b.x)

    def test_global_state_untouched(self):
        np.random.seed(0)
        expected = np.random.random()
        np.random.seed(0)
        generate(100, (0, 1), 0.0, 1.0, 1.0, rng=9)
        assert np.random.random() == expected

    def test_noise_level_only_rescales_noise(self):
        """Same seed, different noise_sd: same x, proportional noise."""
        low = generate(40, (0, 10), 2.0, 3.0, 1.0, rng=8)
        high = generate(40, (0, 10), 2.0, 3.0, 6.0, rng=8)
        np.testing.assert_array_equal(low.x, high.x)
        noise_low = low.y - (2.0 + 3.0 * low.x)
        noise_high = high.y - (2.0 + 3.0 * high.x)
        np.testing.assert_allclose(noise_high, 6.0 * noise_low, rtol=1e-9, atol=1e-9)


class TestValidation:

    @pytest.mark.parametrize("n", [0, -5])
    def test_rejects_small_n(self, n):
        with pytest.raises(ValidationError, match="n: must be >= 1"):
            generate(n, (0, 1), 0.0, 1.0, 1.0, rng=0)

    def test_rejects_non_integer_n(self):
        with pytest.raises(ValidationError, match="expected an integer"):
            generate(10.5, (0, 1), 0.0, 1.0, 1.0, rng=0)

    @pytest.mark.parametrize("x_range", [(1, 1), (5, 0), (0, float("inf"))])
    def test_rejects_bad_range(self, x_range):
        with pytest.raises(ValidationError, match="x_range"):
            generate(10, x_range, 0.0, 1.0, 1.0, rng=0)

    def test_rejects_negative_noise(self):
        with pytest.raises(ValidationError, match="noise_sd"):
            generate(10, (0, 1), 0.0, 1.0, -1.0, rng=0)

    def test_rejects_before_drawing(self):
        gen = np.random.default_rng(4)
        state = gen.bit_generator.state
        with pytest.raises(ValidationError):
            generate(0, (0, 1), 0.0, 1.0, 1.0, rng=gen)
        assert gen.bit_generator.state == state


class TestSimulationDesign:

    def test_build_normalizes_types(self):
        design = SimulationDesign.build(10, (0, 10), 2, 3, 1)
        assert design.x_range == (0.0, 10.0)
        assert isinstance(design.intercept, float)

    def test_simulate_matches_generate(self):
        design = SimulationDesign.build(25, (0, 10), 2.0, 3.0, 1.0)
        a = simulate(design, rng=17)
        b = generate(25, (0, 10), 2.0, 3.0, 1.0, rng=17)
        np.testing.assert_array_equal(a.y, b.y)

    def test_with_noise_and_size(self):
        design = SimulationDesign.build(10, (0, 10), 2.0, 3.0, 1.0)
        assert design.with_noise(6.0).noise_sd == 6.0
        assert design.with_size(100).n == 100
        with pytest.raises(ValidationError):
            design.with_size(0)
