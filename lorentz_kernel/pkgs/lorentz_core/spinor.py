# -*- coding: utf-8 -*-
"""
SL(2,C) spinor representation of the Lorentz group.

A 4-vector x is encoded as the Hermitian matrix X = x^mu sigma_mu, with
det X = t^2 - |x|^2. An SL(2,C) matrix A acts by X -> A X A^dagger, which
preserves det X and therefore realises a restricted Lorentz transformation;
A and -A give the same one (double cover).

Conventions relative to the 4x4 picture:
- boost_matrix(xi) along an axis reproduces exp(xi K_i)
- rotation_matrix(theta) = exp(+i theta.sigma/2) reproduces the vector
  rotation by -theta
"""

import logging
import math
import numpy as np
from typing import Sequence

from .common import DEGENERATE_EPS, EVENT_SPINOR_CREATED
from .utils import as_vector, cosh_sinh, freeze, norm3, scaled

logger = logging.getLogger(__name__)

# sigma_0 = I, sigma_1, sigma_2, sigma_3
PAULI = freeze(np.array([
    [[1, 0], [0, 1]],
    [[0, 1], [1, 0]],
    [[0, -1j], [1j, 0]],
    [[1, 0], [0, -1]],
], dtype=np.complex128))

# sigma_bar = (I, -sigma)
PAULI_BAR = freeze(np.concatenate([PAULI[:1], -PAULI[1:]]))


def _identity2() -> np.ndarray:
    return np.eye(2, dtype=np.complex128)


class SpinorRepresentation:
    """Two-component spinor picture of boosts and rotations."""

    def __init__(self, observer=None):
        self.observer = observer
        self.sigma = PAULI
        self.sigma_bar = PAULI_BAR
        logger.debug("SpinorRepresentation SL(2,C) initialized")
        if observer is not None:
            observer.publish(EVENT_SPINOR_CREATED, {"group": "SL(2,C)"})

    def get_sigma(self, mu: int) -> np.ndarray:
        if mu not in (0, 1, 2, 3):
            raise ValueError(f"Index must be 0-3, got {mu}")
        return self.sigma[mu].copy()

    def get_sigma_bar(self, mu: int) -> np.ndarray:
        if mu not in (0, 1, 2, 3):
            raise ValueError(f"Index must be 0-3, got {mu}")
        return self.sigma_bar[mu].copy()

    def _n_dot_sigma(self, n: np.ndarray) -> np.ndarray:
        return np.tensordot(n, self.sigma[1:], axes=1)

    def boost_matrix(self, rapidity: Sequence[float]) -> np.ndarray:
        """
        A = cosh(|xi|/2) I + sinh(|xi|/2) n.sigma, n = xi/|xi|.

        Past float64 range the hyperbolic entries are inf; entries that are
        exactly zero stay zero.
        """
        xi = as_vector(rapidity, 3, "rapidity")
        mag = norm3(xi)
        if mag < DEGENERATE_EPS:
            return _identity2()
        c, s = cosh_sinh(mag / 2)
        P = self._n_dot_sigma(xi / mag)
        # real and imaginary parts built separately so inf never meets 0j
        A = np.zeros((2, 2), dtype=np.complex128)
        A.real = scaled(c, np.eye(2)) + scaled(s, P.real)
        A.imag = scaled(s, P.imag)
        return A

    def rotation_matrix(self, angles: Sequence[float]) -> np.ndarray:
        """U = cos(|theta|/2) I + i sin(|theta|/2) n.sigma, n = theta/|theta|."""
        theta = as_vector(angles, 3, "angles")
        mag = norm3(theta)
        if mag < DEGENERATE_EPS:
            return _identity2()
        n = theta / mag
        return math.cos(mag / 2) * _identity2() + 1j * math.sin(mag / 2) * self._n_dot_sigma(n)

    def vector_to_matrix(self, x: Sequence[float]) -> np.ndarray:
        """X = x^mu sigma_mu (Hermitian)."""
        return np.tensordot(as_vector(x, 4, "4-vector"), self.sigma, axes=1)

    def matrix_to_vector(self, X: np.ndarray) -> np.ndarray:
        """x^mu = Re tr(sigma_mu X) / 2."""
        X = np.asarray(X, dtype=np.complex128)
        return np.array([0.5 * np.trace(self.sigma[mu] @ X).real for mu in range(4)])

    def transform_vector(self, A: np.ndarray, x: Sequence[float]) -> np.ndarray:
        """Act on a 4-vector through X -> A X A^dagger."""
        A = np.asarray(A, dtype=np.complex128)
        X = self.vector_to_matrix(x)
        return self.matrix_to_vector(A @ X @ A.conj().T)

    def to_lorentz_matrix(self, A: np.ndarray) -> np.ndarray:
        """Lambda^mu_nu = Re tr(sigma_mu A sigma_nu A^dagger) / 2."""
        A = np.asarray(A, dtype=np.complex128)
        A_dag = A.conj().T
        L = np.empty((4, 4), dtype=np.float64)
        for mu in range(4):
            for nu in range(4):
                L[mu, nu] = 0.5 * np.trace(self.sigma[mu] @ A @ self.sigma[nu] @ A_dag).real
        return L
