"""Tests for probform.core.context."""

import threading
import warnings

import pytest

from probform.core.context import EvaluationContext, current_fp_errors
from probform.distributions import logistic


class TestEvaluationContext:
    """Tests for the EvaluationContext context manager."""

    def test_inactive_by_default(self):
        assert not EvaluationContext.is_active()
        assert EvaluationContext.get_active_context() is None
        assert current_fp_errors() == "ignore"

    def test_enter_and_exit(self):
        with EvaluationContext("warn") as ctx:
            assert EvaluationContext.is_active()
            assert EvaluationContext.get_active_context() is ctx
            assert current_fp_errors() == "warn"
        assert not EvaluationContext.is_active()

    def test_nesting_restores_outer(self):
        with EvaluationContext("warn") as outer:
            with EvaluationContext("raise"):
                assert current_fp_errors() == "raise"
            assert EvaluationContext.get_active_context() is outer
            assert current_fp_errors() == "warn"

    def test_exit_on_exception(self):
        with pytest.raises(KeyError):
            with EvaluationContext("raise"):
                raise KeyError("boom")
        assert not EvaluationContext.is_active()

    def test_same_instance_nested(self):
        ctx = EvaluationContext("warn")
        with ctx:
            with EvaluationContext("raise"):
                with ctx:
                    assert current_fp_errors() == "warn"
                assert current_fp_errors() == "raise"
            assert EvaluationContext.get_active_context() is ctx
        assert not EvaluationContext.is_active()

    def test_exit_out_of_order_raises(self):
        outer = EvaluationContext("warn")
        inner = EvaluationContext("raise")
        outer.__enter__()
        inner.__enter__()
        with pytest.raises(RuntimeError, match="out of order"):
            outer.__exit__(None, None, None)
        inner.__exit__(None, None, None)
        outer.__exit__(None, None, None)
        assert not EvaluationContext.is_active()

    def test_shared_instance_across_threads(self):
        ctx = EvaluationContext("raise")
        barrier = threading.Barrier(2)
        errors, seen = [], []

        def worker():
            try:
                with ctx:
                    barrier.wait(timeout=5)
                    seen.append(current_fp_errors())
                    barrier.wait(timeout=5)
                seen.append(EvaluationContext.is_active())
            except Exception as exc:  # pragma: no cover - reported below
                errors.append(exc)

        threads = [threading.Thread(target=worker) for _ in range(2)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()
        assert errors == []
        assert sorted(seen, key=str) == [False, False, "raise", "raise"]

    def test_reusable_after_exit(self):
        ctx = EvaluationContext("raise")
        with ctx:
            pass
        with ctx:
            assert EvaluationContext.get_active_context() is ctx

    def test_invalid_policy(self):
        with pytest.raises(ValueError, match="fp_errors must be one of"):
            EvaluationContext("explode")

    def test_repr(self):
        assert repr(EvaluationContext("warn")) == "EvaluationContext(fp_errors='warn')"

    def test_other_threads_unaffected(self):
        seen = []
        with EvaluationContext("raise"):
            thread = threading.Thread(target=lambda: seen.append(current_fp_errors()))
            thread.start()
            thread.join()
        assert seen == ["ignore"]


class TestPolicies:
    """The active policy governs overflow inside the formulas."""

    def test_ignore_saturates_silently(self):
        with warnings.catch_warnings():
            warnings.simplefilter("error")
            assert logistic.cdf(-1000.0, 0.0, 1.0) == 0.0

    def test_warn_emits_runtime_warning(self):
        with EvaluationContext("warn"):
            with pytest.warns(RuntimeWarning, match="overflow"):
                assert logistic.cdf(-1000.0, 0.0, 1.0) == 0.0

    def test_raise(self):
        with EvaluationContext("raise"):
            with pytest.raises(FloatingPointError):
                logistic.cdf(-1000.0, 0.0, 1.0)

    def test_raise_leaves_ordinary_inputs_alone(self):
        with EvaluationContext("raise"):
            assert logistic.pdf(0, 0, 1) == 0.25
            assert logistic.cdf(0, 0, 1) == 0.5
