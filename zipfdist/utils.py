from typing import TypeVar

import numpy as np

R = TypeVar("R", float, np.floating)

# series below are good to (EPSILON)^4 / 24, about 16 decimal places
EPSILON = 2e-5


def expxm1bx(x: R) -> R:
    """(exp(x) - 1) / x"""
    if abs(x) > EPSILON:
        return np.expm1(x) / x
    return 1.0 + x / 2.0 * (1.0 + x / 3.0 * (1.0 + x / 4.0))


def log1pxbx(x: R) -> R:
    """log(1 + x) / x"""
    if abs(x) > EPSILON:
        return np.log1p(x) / x
    return 1.0 - x * ((1 / 2.0) - x * ((1 / 3.0) - x * (1 / 4.0)))
