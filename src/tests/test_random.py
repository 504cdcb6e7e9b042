import numpy as np
import pytest

from fractalsim.random import NormalSource, as_source


def test_seed_gives_generator():
    a = as_source(7).standard_normal(5)
    b = as_source(np.random.SeedSequence(7)).standard_normal(5)
    np.testing.assert_array_equal(a, b)
    assert isinstance(as_source(None), np.random.Generator)


def test_existing_source_passed_through():
    rng = np.random.default_rng(1)
    assert as_source(rng) is rng
    assert isinstance(rng, NormalSource)


def test_rejects_unknown_objects():
    with pytest.raises(TypeError, match="standard_normal"):
        as_source("seed")
