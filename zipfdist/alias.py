from typing import Any, List, Sequence, Type

from zipfdist.rng import BitGenerator, uniform_below, uniform_real


class AliasTable:
    """
    Vose alias table over a finite set of non-negative weights. Construction is O(n),
    every draw costs one uniform index and one uniform real.
    """

    def __init__(self, weights: Sequence[float], real_type: Type[Any] = float):
        n = len(weights)
        total = sum(weights)
        if n == 0 or not total > 0:
            raise ValueError("weights must contain at least one positive value")
        self.real_type = real_type
        probs: List[float] = [w * n / total for w in weights]
        alias: List[int] = list(range(n))
        small: List[int] = []  # p < 1
        large: List[int] = []  # p >= 1
        for i, p in enumerate(probs):
            if p < 1.0:
                small.append(i)
            else:
                large.append(i)

        while small and large:
            s = small.pop()
            l = large.pop()
            alias[s] = l
            probs[l] = (probs[l] + probs[s]) - 1.0
            if probs[l] < 1.0:
                small.append(l)
            else:
                large.append(l)

        # whatever is left is 1 up to rounding error
        for i in large + small:
            probs[i] = 1.0

        self.probs = probs
        self.alias = alias

    def __len__(self) -> int:
        return len(self.probs)

    def sample(self, rng: BitGenerator) -> int:
        i = uniform_below(rng, len(self.probs))
        if uniform_real(rng, 0.0, 1.0, self.real_type) < self.probs[i]:
            return i
        return self.alias[i]
