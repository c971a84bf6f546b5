"""
Pytest Configuration and Fixtures
"""

import numpy as np
import pytest

from lorentz_kernel.pkgs.lorentz_core import (
    LorentzAlgebra, LorentzGroup, SpinorRepresentation, MINKOWSKI_METRIC,
)


@pytest.fixture
def rng():
    """Reproducible random number generator."""
    return np.random.default_rng(42)


@pytest.fixture
def algebra():
    return LorentzAlgebra()


@pytest.fixture
def group():
    return LorentzGroup()


@pytest.fixture
def spinor():
    return SpinorRepresentation()


@pytest.fixture
def eta():
    return np.array(MINKOWSKI_METRIC)


@pytest.fixture
def interval():
    """Spacetime interval -t^2 + x^2 + y^2 + z^2."""
    def _interval(x) -> float:
        return float(-x[0] ** 2 + x[1] ** 2 + x[2] ** 2 + x[3] ** 2)
    return _interval
