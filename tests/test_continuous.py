"""Tests for probform.distributions.continuous."""

import math

import numpy as np
import pytest
from scipy import stats

from probform.core.exceptions import DomainError
from probform.core.limits import Interval
from probform.core.types import ContinuousDistribution
from probform.distributions.continuous import Logistic


# ---------------------------------------------------------------- Logistic --


class TestLogistic:
    """Tests for the Logistic distribution."""

    def test_defaults_are_standard(self):
        d = Logistic()
        assert d.mu == 0.0
        assert d.s == 1.0
        assert d.pdf(0) == 0.25
        assert d.cdf(0) == 0.5

    def test_is_continuous_distribution(self):
        assert isinstance(Logistic(), ContinuousDistribution)

    def test_mean_variance(self):
        d = Logistic(3.0, 2.0)
        assert d.mean() == 3.0
        assert d.variance() == pytest.approx(4.0 * math.pi**2 / 3)
        assert d.std() == pytest.approx(2.0 * math.pi / math.sqrt(3))

    def test_median_mode(self):
        d = Logistic(-1.5, 0.2)
        assert d.median() == -1.5
        assert d.mode() == -1.5

    def test_pdf_matches_scipy(self):
        d = Logistic(1.0, 2.0)
        xs = np.linspace(-5, 7, 50)
        np.testing.assert_allclose(d.pdf(xs), stats.logistic.pdf(xs, 1.0, 2.0))

    def test_cdf_matches_scipy(self):
        d = Logistic(1.0, 2.0)
        xs = np.linspace(-5, 7, 50)
        np.testing.assert_allclose(d.cdf(xs), stats.logistic.cdf(xs, 1.0, 2.0))

    def test_quantile_matches_scipy(self):
        d = Logistic(0.0, 1.0)
        qs = np.array([0.01, 0.1, 0.25, 0.5, 0.75, 0.9, 0.99])
        np.testing.assert_allclose(d.quantile(qs), stats.logistic.ppf(qs, 0.0, 1.0))

    def test_params_coerced_to_float(self):
        d = Logistic(2, 3)
        assert isinstance(d.mu, float)
        assert isinstance(d.s, float)

    # -- edge case: invalid parameters --

    @pytest.mark.parametrize("s", [0, -1, math.inf, math.nan])
    def test_bad_scale_raises(self, s):
        with pytest.raises(DomainError) as excinfo:
            Logistic(0.0, s)
        assert excinfo.value.parameter == "s"

    def test_bad_location_raises(self):
        with pytest.raises(DomainError, match="mu must not be NaN"):
            Logistic(math.nan, 1.0)

    def test_quantile_out_of_range_raises(self):
        with pytest.raises(DomainError, match="p must be <= 1"):
            Logistic().quantile(1.01)

    # -- limits introspection --

    def test_limits_table(self):
        assert Logistic.LIMITS["s"] == "(0,∞)"
        limits = Logistic.limits()
        assert limits["s"] == Interval(0.0, math.inf)
        assert limits["x"] == Interval()
        assert limits["p"] == Interval(0.0, 1.0, True, True)

    def test_check_classmethod(self):
        Logistic.check(x=1.0, mu=0.0, s=2.0)
        with pytest.raises(DomainError):
            Logistic.check(s=-2.0)

    # -- dunder --

    def test_equality_and_hash(self):
        assert Logistic(1, 2) == Logistic(1.0, 2.0)
        assert Logistic(1, 2) != Logistic(1, 3)
        assert len({Logistic(1, 2), Logistic(1.0, 2.0)}) == 1

    def test_eq_returns_notimplemented(self):
        assert Logistic().__eq__("not a distribution") is NotImplemented

    def test_repr(self):
        assert repr(Logistic(1, 2)) == "Logistic(mu=1.0, s=2.0)"


class TestGenericHarness:
    """Every distribution can be exercised from its limits table alone."""

    @pytest.mark.parametrize("cls", [Logistic])
    def test_lower_bound_of_each_open_parameter_is_rejected(self, cls):
        for name, interval in cls.limits().items():
            if math.isinf(interval.lower) or interval.lower_closed:
                continue
            with pytest.raises(DomainError) as excinfo:
                cls.check(**{name: interval.lower})
            assert excinfo.value.parameter == name
