import logging
import math
from typing import Any, List, Optional, Type

import numpy as np

from zipfdist.errors import ParameterRangeError, RejectionLimitError
from zipfdist.models import ZipfParams, check_types, max_value
from zipfdist.rng import BitGenerator, uniform_real
from zipfdist.utils import EPSILON, expxm1bx, log1pxbx

logger = logging.getLogger(__name__)


class ZipfDistribution:
    """
    Zipf (zeta) distribution over ``[1, n]`` inclusive, following the power law
    ``1/(k+q)^s`` with exponent ``s`` and Hurwicz q-deformation ``q``.

    Variates are generated by rejection-inversion (Hörmann & Derflinger, "Rejection-inversion
    to generate variates from monotone discrete distributions", ACM TOMACS 6.3, 1996), so
    memory and setup cost do not depend on ``n``.

    :param n: largest value of the support. Default is None which means the largest value
        representable by ``result_type``.
    :param s: exponent.
    :param q: Hurwicz deformation, must be greater than -0.5.
    :param result_type: integer type of the draws, ``int`` or a numpy integer type.
    :param real_type: floating point type used for all computation, ``float`` or a numpy floating type.
    :param max_rejections: give up a draw with :class:`RejectionLimitError` after this many rejected
        candidates. Default is None which means retry until acceptance.
    """

    def __init__(
        self,
        n: Optional[int] = None,
        s: float = 1.0,
        q: float = 0.0,
        *,
        result_type: Type[Any] = int,
        real_type: Type[Any] = float,
        max_rejections: Optional[int] = None,
    ):
        check_types(result_type, real_type)
        if -0.5 >= q:
            raise ParameterRangeError("Parameter q must be greater than -0.5")
        limit = max_value(result_type)
        if n is None:
            n = limit
        if n < 1 or n > limit:
            raise ParameterRangeError(f"Parameter n must be in [1, {limit}], got {n}")
        if max_rejections is not None and max_rejections < 1:
            raise ParameterRangeError("max_rejections must be positive")

        self.result_type = result_type
        self.real_type = real_type
        self.max_rejections = max_rejections
        self._n = int(n)
        self._s = real_type(s)
        self._q = real_type(q)
        self._oms = real_type(1.0) - self._s
        # s numerically indistinguishable from 1
        self._spole = abs(self._oms) < EPSILON
        self._rvs = real_type(0.0) if self._spole else real_type(1.0) / self._oms
        self._h_x1 = self.H(1.5) - self.h(1.0)
        self._h_n = self.H(self._n + 0.5)
        self._cut = 1.0 - self.H_inv(self._h_x1)
        logger.debug(
            "zipf distribution n=%d s=%s q=%s pole=%s H(x1)=%s H(n)=%s cut=%s",
            self._n,
            self._s,
            self._q,
            self._spole,
            self._h_x1,
            self._h_n,
            self._cut,
        )

    def h(self, x: Any) -> Any:
        """
        The hat function h(x) = 1/(x+q)^s
        """
        return np.power(x + self._q, -self._s)

    def H(self, x: Any) -> Any:
        """
        Integral of h(x). For s away from 1 this is the closed form

            H(x) = (x+q)^(1-s) / (1-s)

        and near the pole it is evaluated as

            H(x) = log(x+q) * (exp((1-s) log(x+q)) - 1) / ((1-s) log(x+q))

        which is continuous across s == 1. Shifting the numerator by (1+q)^(1-s)
        underflows once q grows past 10 or so, so no shift is applied.
        """
        if not self._spole:
            return np.power(x + self._q, self._oms) / self._oms
        log_xpq = np.log(x + self._q)
        return log_xpq * expxm1bx(self._oms * log_xpq)

    def H_inv(self, y: Any) -> Any:
        """
        Inverse of H(x), split into the same two regimes:

            H^-1(y) = (y(1-s))^(1/(1-s)) - q
            H^-1(y) = exp(y * log(1 + (1-s)y) / ((1-s)y)) - q
        """
        if not self._spole:
            return np.power(y * self._oms, self._rvs) - self._q
        return np.exp(y * log1pxbx(self._oms * y)) - self._q

    def draw(self, rng: BitGenerator) -> Any:
        rejected = 0
        while True:
            u = uniform_real(rng, self._h_x1, self._h_n, self.real_type)
            x = self.H_inv(u)
            k = math.floor(x + 0.5)
            # rounding at either edge must not leave the support
            if k < 1:
                k = 1
            elif k > self._n:
                k = self._n
            if k - x <= self._cut:
                return self.result_type(k)
            if u >= self.H(k + 0.5) - self.h(k):
                return self.result_type(k)
            rejected += 1
            if self.max_rejections is not None and rejected >= self.max_rejections:
                raise RejectionLimitError(rejected)

    __call__ = draw

    def sample(self, rng: BitGenerator, size: int) -> List[Any]:
        return [self.draw(rng) for _ in range(size)]

    def reset(self) -> None:
        return

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
        if not isinstance(other, ZipfDistribution):
            return NotImplemented
        return (
            self.params() == other.params()
            and self.result_type is other.result_type
            and self.real_type is other.real_type
        )

    def __hash__(self) -> int:
        return hash((ZipfDistribution, self.params()))

    def __repr__(self) -> str:
        return f"ZipfDistribution(n={self._n}, s={float(self._s)}, q={float(self._q)})"
