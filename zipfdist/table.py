import logging
from typing import Any, List, Type

import numpy as np

from zipfdist.alias import AliasTable
from zipfdist.errors import ParameterRangeError
from zipfdist.models import ZipfParams, check_types, max_value
from zipfdist.rng import BitGenerator

logger = logging.getLogger(__name__)

DEFAULT_MAX_TABLE_SIZE = 1 << 26


class ZipfTableDistribution:
    """
    Same API as :class:`zipfdist.ZipfDistribution`, backed by a precomputed table of the
    unnormalized weights ``(q+i)^-s`` and an alias table built from it.

    Draws are cheaper than rejection-inversion for small ``n`` (about 25% for n=30, 10% for
    n=300, tied around n=1000) but the table costs O(n) memory and setup time, and stops
    fitting in cache well before n reaches a million.

    :param n: largest value of the support, required.
    :param s: exponent.
    :param q: Hurwicz deformation, must be greater than -0.5.
    :param result_type: integer type of the draws, ``int`` or a numpy integer type.
    :param real_type: floating point type of the table, ``float`` or a numpy floating type.
    :param max_table_size: refuse to build tables with more than this many entries.
    """

    def __init__(
        self,
        n: int,
        s: float = 1.0,
        q: float = 0.0,
        *,
        result_type: Type[Any] = int,
        real_type: Type[Any] = float,
        max_table_size: int = DEFAULT_MAX_TABLE_SIZE,
    ):
        check_types(result_type, real_type)
        if -0.5 >= q:
            raise ParameterRangeError("Parameter q must be greater than -0.5")
        limit = min(max_value(result_type), max_table_size)
        if n < 1 or n > limit:
            raise ParameterRangeError(f"Parameter n must be in [1, {limit}], got {n}")

        self.result_type = result_type
        self.real_type = real_type
        self._n = int(n)
        self._s = real_type(s)
        self._q = real_type(q)
        self._pmf = self._init_pmf()
        self._dist = AliasTable(self._pmf[1:].tolist(), real_type)
        logger.debug(
            "zipf table n=%d s=%s q=%s total weight=%s",
            self._n,
            self._s,
            self._q,
            self._pmf.sum(),
        )

    def _init_pmf(self) -> np.ndarray:
        dtype = np.float64 if self.real_type is float else self.real_type
        pmf = np.zeros(self._n + 1, dtype=dtype)
        # index 0 is never drawn
        pmf[1:] = np.power(self._q + np.arange(1, self._n + 1, dtype=dtype), -self._s)
        pmf.flags.writeable = False
        return pmf

    def draw(self, rng: BitGenerator) -> Any:
        return self.result_type(self._dist.sample(rng) + 1)

    __call__ = draw

    def sample(self, rng: BitGenerator, size: int) -> List[Any]:
        return [self.draw(rng) for _ in range(size)]

    def reset(self) -> None:
        return

    def pmf(self) -> np.ndarray:
        return self._pmf

    def probabilities(self) -> np.ndarray:
        return self._pmf / self._pmf.sum()

    def s(self) -> Any:
        return self._s

    def q(self) -> Any:
        return self._q

    def min(self) -> Any:
        return self.result_type(1)

    def max(self) -> Any:
        return self.result_type(self._n)

    def params(self) -> ZipfParams:
        return ZipfParams(self._n, float(self._s), float(self._q))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ZipfTableDistribution):
            return NotImplemented
        return (
            self.params() == other.params()
            and self.result_type is other.result_type
            and self.real_type is other.real_type
        )

    def __hash__(self) -> int:
        return hash((ZipfTableDistribution, self.params()))

    def __repr__(self) -> str:
        return f"ZipfTableDistribution(n={self._n}, s={float(self._s)}, q={float(self._q)})"
