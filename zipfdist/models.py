import sys
from dataclasses import dataclass
from typing import Any, Type

import numpy as np


@dataclass(frozen=True)
class ZipfParams:
    n: int
    s: float
    q: float


def is_integer_type(tp: Any) -> bool:
    if tp is bool:
        return False
    if tp is int:
        return True
    try:
        return bool(np.issubdtype(tp, np.integer))
    except TypeError:
        return False


def is_real_type(tp: Any) -> bool:
    if tp is float:
        return True
    try:
        return bool(np.issubdtype(tp, np.floating))
    except TypeError:
        return False


def check_types(result_type: Type[Any], real_type: Type[Any]) -> None:
    if not is_integer_type(result_type):
        raise TypeError(f"result_type must be an integer type, got {result_type!r}")
    if not is_real_type(real_type):
        raise TypeError(f"real_type must be a floating point type, got {real_type!r}")


def max_value(result_type: Type[Any]) -> int:
    if result_type is int:
        return sys.maxsize
    return int(np.iinfo(result_type).max)


def mantissa_bits(real_type: Type[Any]) -> int:
    if real_type is float:
        return sys.float_info.mant_dig
    return int(np.finfo(real_type).nmant) + 1
