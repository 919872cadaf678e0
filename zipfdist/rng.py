from typing import Any, Type

import numpy as np
from typing_extensions import Protocol

from zipfdist.models import mantissa_bits


class BitGenerator(Protocol):
    """
    Uniform random bit source consumed by the samplers. ``random.Random`` instances
    and the ``random`` module itself satisfy this protocol. Generator state belongs
    to the caller and is advanced by every draw.
    """

    def getrandbits(self, k: int) -> int: ...


class NumpyBitGenerator:
    """
    Expose a ``numpy.random.Generator`` as a :class:`BitGenerator`.

    :param generator: numpy generator, e.g. ``numpy.random.default_rng(seed)``.
    """

    chunk = 32

    def __init__(self, generator: np.random.Generator):
        self.generator = generator

    def getrandbits(self, k: int) -> int:
        if k < 0:
            raise ValueError("number of bits must be non-negative")
        value = 0
        remain = k
        while remain > 0:
            width = min(remain, self.chunk)
            bits = int(self.generator.integers(0, 1 << width, dtype=np.uint64))
            value = (value << width) | bits
            remain -= width
        return value


def uniform_real(rng: BitGenerator, low: Any, high: Any, real_type: Type[Any] = float) -> Any:
    # [low, high), one full mantissa of entropy per draw
    bits = mantissa_bits(real_type)
    unit = real_type(rng.getrandbits(bits)) * real_type(2.0**-bits)
    return low + (high - low) * unit


def uniform_below(rng: BitGenerator, n: int) -> int:
    if n <= 0:
        raise ValueError("upper bound must be positive")
    k = n.bit_length()
    r = rng.getrandbits(k)
    while r >= n:
        r = rng.getrandbits(k)
    return r
