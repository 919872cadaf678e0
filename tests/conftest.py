import random

import numpy as np
import pytest

from zipfdist import NumpyBitGenerator


@pytest.fixture(params=["random", "numpy"])
def rng(request):
    if request.param == "random":
        return random.Random(20190524)
    return NumpyBitGenerator(np.random.default_rng(20190524))
