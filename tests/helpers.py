import numpy as np


class FixedBits:
    """Bit source that always returns the same fraction of the requested range."""

    def __init__(self, unit: float):
        self.unit = unit
        self.calls = 0

    def getrandbits(self, k: int) -> int:
        self.calls += 1
        return int(self.unit * (1 << k))


def merge_tail(observed, expected, minimum=5.0):
    """Fold the cells of a decreasing expectation whose count is below minimum into one bin."""
    observed = np.asarray(observed, dtype=float)
    expected = np.asarray(expected, dtype=float)
    small = np.flatnonzero(expected < minimum)
    if len(small) == 0:
        return observed, expected
    cut = max(int(small[0]), 1)
    if expected[cut:].sum() < minimum:
        cut -= 1
    obs = np.append(observed[:cut], observed[cut:].sum())
    exp = np.append(expected[:cut], expected[cut:].sum())
    return obs, exp
