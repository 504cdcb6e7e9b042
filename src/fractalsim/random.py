"""
Standard-normal variate sources
===============================
The generators never touch NumPy's global RNG.  They draw from an object with
a ``standard_normal(size)`` method, which every :class:`numpy.random.Generator`
already provides, so a seed, a ``SeedSequence`` or a ready-made generator can
be passed wherever an ``rng=`` argument is accepted.
"""

from __future__ import annotations

from typing import Protocol, Union, runtime_checkable

import numpy as np

__all__ = ["NormalSource", "RandomLike", "as_source"]


@runtime_checkable
class NormalSource(Protocol):
    """Anything producing ``size`` independent N(0, 1) draws."""

    def standard_normal(self, size: int) -> np.ndarray:  # pragma: no cover
        ...


RandomLike = Union[None, int, np.random.SeedSequence, NormalSource]


def as_source(rng: RandomLike = None) -> NormalSource:
    """Return a :class:`NormalSource` for *rng*.

    ``None`` gives a freshly seeded generator from OS entropy, integers and
    ``SeedSequence`` objects are passed to :func:`numpy.random.default_rng`,
    and existing sources are returned unchanged.
    """

    if rng is None or isinstance(rng, (int, np.integer, np.random.SeedSequence)):
        return np.random.default_rng(rng)
    if isinstance(rng, NormalSource):
        return rng
    raise TypeError(
        f"rng must be None, an int seed, a SeedSequence or expose standard_normal(); "
        f"got {type(rng).__name__}"
    )
