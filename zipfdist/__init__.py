from zipfdist.errors import ParameterRangeError, RejectionLimitError, ZipfError
from zipfdist.models import ZipfParams
from zipfdist.rng import BitGenerator, NumpyBitGenerator
from zipfdist.table import ZipfTableDistribution
from zipfdist.zipf import ZipfDistribution

__all__ = [
    "BitGenerator",
    "NumpyBitGenerator",
    "ParameterRangeError",
    "RejectionLimitError",
    "ZipfDistribution",
    "ZipfError",
    "ZipfParams",
    "ZipfTableDistribution",
]
