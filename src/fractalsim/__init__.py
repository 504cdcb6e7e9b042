from importlib.metadata import version

try:
    __version__ = version("fractalsim")
except Exception:
    __version__ = "0.0.0"

from .errors import NumericalError, PreconditionError, ValidationError  # noqa
from .models import (  # noqa
    FBM,
    FGN,
    fbm_autocov,
    fbm_batch,
    fbm_covariance_matrix,
    fbm_regular_replicates,
    fbm_replicates,
    fgn_autocov,
    rand_cholesky,
    rand_fft,
    rand_fgn,
)

__all__ = [
    "FBM",
    "FGN",
    "fbm_batch",
    "fbm_replicates",
    "fbm_regular_replicates",
    "fgn_autocov",
    "fbm_autocov",
    "fbm_covariance_matrix",
    "rand_cholesky",
    "rand_fft",
    "rand_fgn",
    "ValidationError",
    "PreconditionError",
    "NumericalError",
]
