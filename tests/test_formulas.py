"""Tests for named distribution formulas and combinatorics."""

import math

import numpy as np
import pytest

from probspace.distributions.discrete import degenerate, fully_supported, support
from probspace.distributions.formulas import (
    Bernoulli,
    Binomial,
    Geometric,
    Multinomial,
    Poisson,
    Uniform,
    choose,
    combination,
    factorial,
)
from probspace.inference.sampling import simulate
from probspace.inference.statistics import expectation, variance


# ---------------------------------------------------------------------------
# Combinatorics
# ---------------------------------------------------------------------------


class TestCombinatorics:
    def test_factorial_small(self):
        assert factorial(0) == 1
        assert factorial(4) == 24

    def test_factorial_is_exact(self):
        result = factorial(80)
        assert isinstance(result, int)
        assert result == math.factorial(80)

    def test_combination(self):
        assert combination(80, 4) == 1581580
        assert combination(5, 0) == 1
        assert combination(5, 5) == 1

    def test_choose_alias(self):
        assert choose(10, 3) == combination(10, 3) == 120

    def test_invalid_arguments(self):
        with pytest.raises(ValueError):
            factorial(-1)
        with pytest.raises(ValueError):
            factorial(2.5)
        with pytest.raises(ValueError):
            combination(3, 5)
        with pytest.raises(ValueError):
            combination(3, -1)


# ---------------------------------------------------------------------------
# Univariate families
# ---------------------------------------------------------------------------


class TestBernoulli:
    def test_pmf(self):
        b = Bernoulli(0.3)
        assert b.pmf(1) == pytest.approx(0.3)
        assert b(0) == pytest.approx(0.7)

    def test_invalid_p(self):
        with pytest.raises(ValueError):
            Bernoulli(-0.1)
        with pytest.raises(ValueError):
            Bernoulli(1.1)

    def test_to_distribution(self):
        d = Bernoulli(0.25).to_distribution()
        assert fully_supported(d)
        assert d.probability_of(1) == pytest.approx(0.25)
        assert expectation(d, float) == pytest.approx(0.25)

    def test_certain_trial_is_degenerate(self):
        d = Bernoulli(1.0).to_distribution()
        assert degenerate(d)
        assert d.probability_of(0) == 0.0

    def test_repr(self):
        assert "Bernoulli" in repr(Bernoulli(0.5))


class TestBinomial:
    def test_pmf(self):
        assert Binomial(4, 0.5).pmf(2) == pytest.approx(0.375)
        assert Binomial(3, 0.2)(0) == pytest.approx(0.8 ** 3)

    def test_vectorised_pmf(self):
        table = Binomial(2, 0.5).pmf(np.array([0, 1, 2]))
        np.testing.assert_array_almost_equal(table, [0.25, 0.5, 0.25])

    def test_to_distribution_moments(self):
        d = Binomial(10, 0.3).to_distribution()
        assert fully_supported(d)
        assert expectation(d, float) == pytest.approx(3.0, abs=1e-4)
        assert variance(d, float) == pytest.approx(2.1, abs=1e-3)

    @pytest.mark.parametrize("n, p", [(100, 0.5), (400, 0.5), (200, 0.05)])
    def test_wide_range_is_fully_supported(self, n, p):
        d = Binomial(n, p).to_distribution()
        assert fully_supported(d)
        assert support(d) == pytest.approx(1.0, abs=1e-9)
        assert expectation(d, float) == pytest.approx(n * p, abs=1e-6)

    def test_tabulated_distribution_can_be_simulated(self):
        d = Binomial(100, 0.5).to_distribution()
        assert simulate(d, rng=0) in d.domain

    def test_invalid(self):
        with pytest.raises(ValueError):
            Binomial(-1, 0.5)
        with pytest.raises(ValueError):
            Binomial(3, 2.0)


class TestGeometric:
    def test_pmf(self):
        g = Geometric(0.5)
        assert g.pmf(1) == pytest.approx(0.5)
        assert g(2) == pytest.approx(0.25)
        assert g.pmf(0) == 0.0

    def test_unbounded(self):
        with pytest.raises(TypeError):
            Geometric(0.5).to_distribution()

    def test_zero_p(self):
        with pytest.raises(ValueError):
            Geometric(0.0)


class TestPoisson:
    def test_pmf(self):
        assert Poisson(3.0).pmf(0) == pytest.approx(np.exp(-3.0), rel=1e-6)
        assert Poisson(2.0)(2) == pytest.approx(2 * np.exp(-2.0))

    def test_cdf(self):
        assert Poisson(2.0).cdf(100) == pytest.approx(1.0, abs=1e-10)

    def test_mean_and_variance(self):
        p = Poisson(7.0)
        assert p.mean() == pytest.approx(7.0)
        assert p.variance() == pytest.approx(7.0)

    def test_sample_reproducible(self):
        a = Poisson(4.0).sample(50, seed=9)
        b = Poisson(4.0).sample(50, seed=9)
        np.testing.assert_array_equal(a, b)
        assert np.all(a >= 0)

    def test_invalid_mu(self):
        with pytest.raises(ValueError):
            Poisson(0)
        with pytest.raises(ValueError):
            Poisson(-1)


class TestUniform:
    def test_pmf(self):
        u = Uniform(4)
        for k in range(1, 5):
            assert u(k) == pytest.approx(0.25)
        assert u.pmf(5) == 0.0

    def test_to_distribution(self):
        d = Uniform(6).to_distribution()
        assert d.support() == [1, 2, 3, 4, 5, 6]
        assert expectation(d, float) == pytest.approx(3.5)

    def test_invalid(self):
        with pytest.raises(ValueError):
            Uniform(0)

    def test_named_formulas_agree(self):
        """B(2, 0.5)(0) == G(0.5)(2) == U(4)(1)."""
        assert Binomial(2, 0.5)(0) == pytest.approx(Geometric(0.5)(2))
        assert Geometric(0.5)(2) == pytest.approx(Uniform(4)(1))


# ---------------------------------------------------------------------------
# Multinomial
# ---------------------------------------------------------------------------


class TestMultinomial:
    def test_pmf(self):
        m = Multinomial(0.2, 0.3, 0.5)
        # 3! / (1! 0! 2!) * 0.2 * 0.5^2
        assert m.pmf(1, 0, 2) == pytest.approx(0.15)
        assert m(1, 1, 1) == pytest.approx(6 * 0.2 * 0.3 * 0.5)

    def test_two_categories_match_binomial(self):
        m = Multinomial(0.3, 0.7)
        assert m(2, 3) == pytest.approx(Binomial(5, 0.3)(2))

    def test_partition_length_mismatch(self):
        with pytest.raises(ValueError, match="invalid partition"):
            Multinomial(0.5, 0.5).pmf(1, 2, 3)

    def test_zero_partition(self):
        with pytest.raises(ValueError, match="can't be zero"):
            Multinomial(0.5, 0.5).pmf(0, 0)

    def test_probabilities_must_sum_to_one(self):
        with pytest.raises(ValueError):
            Multinomial(0.3, 0.3)
        with pytest.raises(ValueError):
            Multinomial(-0.5, 1.5)
        with pytest.raises(ValueError):
            Multinomial()
