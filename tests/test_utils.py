import math

import numpy as np
import pytest

from zipfdist.utils import EPSILON, expxm1bx, log1pxbx


def test_series_at_zero() -> None:
    assert expxm1bx(0.0) == 1.0
    assert log1pxbx(0.0) == 1.0


@pytest.mark.parametrize("x", [1e-9, -1e-9, 1e-6, -1e-6, EPSILON, -EPSILON])
def test_series_matches_closed_form(x) -> None:
    assert expxm1bx(x) == pytest.approx(math.expm1(x) / x, rel=1e-15)
    assert log1pxbx(x) == pytest.approx(math.log1p(x) / x, rel=1e-15)


def test_continuous_across_switch_over() -> None:
    below = EPSILON * (1 - 1e-9)
    above = EPSILON * (1 + 1e-9)
    assert expxm1bx(below) == pytest.approx(expxm1bx(above), rel=1e-13)
    assert log1pxbx(below) == pytest.approx(log1pxbx(above), rel=1e-13)


@pytest.mark.parametrize("x", [0.5, -0.5, 3.0, -0.9])
def test_large_arguments(x) -> None:
    assert expxm1bx(x) == pytest.approx((math.exp(x) - 1) / x)
    assert log1pxbx(x) == pytest.approx(math.log(1 + x) / x)


def test_keeps_single_precision() -> None:
    assert isinstance(expxm1bx(np.float32(1e-6)), np.float32)
    assert isinstance(log1pxbx(np.float32(0.25)), np.float32)
