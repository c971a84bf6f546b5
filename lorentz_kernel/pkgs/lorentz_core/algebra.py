# -*- coding: utf-8 -*-
"""
Lorentz Lie algebra so(3,1)
===========================

Six generators, basis order T = [K_1, K_2, K_3, J_1, J_2, J_3], with

    [J_i, J_j] =  e_ijk J_k
    [K_i, K_j] = -e_ijk J_k
    [J_i, K_j] =  e_ijk K_k

The structure constants are a fixed table; commutators are computed from the
matrices and labelled against the closure rules above.
"""

import itertools
import logging
import numpy as np
from typing import List, Optional, Tuple

from .common import (
    CommutatorResult, EVENT_ALGEBRA_CREATED, EVENT_COMMUTATOR, METRIC_TOL,
)
from .generators import BoostGenerator, Generator, RotationGenerator
from .utils import commutator, freeze, is_zero

logger = logging.getLogger(__name__)

N_GENERATORS = 6


def levi_civita(i: int, j: int, k: int) -> int:
    """e_ijk for spatial indices 0, 1, 2."""
    if (i, j, k) in ((0, 1, 2), (1, 2, 0), (2, 0, 1)):
        return 1
    if (i, j, k) in ((0, 2, 1), (2, 1, 0), (1, 0, 2)):
        return -1
    return 0


def _build_structure_constants() -> np.ndarray:
    # (a, b, c, f^c_ab); the antisymmetric partner f^c_ba = -f^c_ab is filled in
    entries = (
        (3, 4, 5, 1),    # [J_1, J_2] =  J_3
        (4, 5, 3, 1),    # [J_2, J_3] =  J_1
        (5, 3, 4, 1),    # [J_3, J_1] =  J_2
        (0, 1, 5, -1),   # [K_1, K_2] = -J_3
        (1, 2, 3, -1),   # [K_2, K_3] = -J_1
        (2, 0, 4, -1),   # [K_3, K_1] = -J_2
        (3, 1, 2, 1),    # [J_1, K_2] =  K_3
        (3, 2, 1, -1),   # [J_1, K_3] = -K_2
        (4, 0, 2, -1),   # [J_2, K_1] = -K_3
        (4, 2, 0, 1),    # [J_2, K_3] =  K_1
        (5, 0, 1, 1),    # [J_3, K_1] =  K_2
        (5, 1, 0, -1),   # [J_3, K_2] = -K_1
    )
    f = np.zeros((N_GENERATORS,) * 3, dtype=np.int64)
    for a, b, c, value in entries:
        f[a, b, c] = value
        f[b, a, c] = -value
    return freeze(f)


STRUCTURE_CONSTANTS = _build_structure_constants()


class LorentzAlgebra:
    """
    Lorentz Lie algebra so(3,1) in the 4x4 defining representation.

    The six generators are built once and never modified. An optional
    observer (anything with ``publish(event, data)``) receives audit events;
    it has no influence on any returned value.
    """

    def __init__(self, observer=None, tol: float = METRIC_TOL):
        self.observer = observer
        self.tol = tol
        self.K: Tuple[Generator, ...] = tuple(BoostGenerator(i) for i in range(3))
        self.J: Tuple[Generator, ...] = tuple(RotationGenerator(i) for i in range(3))
        logger.debug("LorentzAlgebra so(3,1) initialized")
        self._emit(EVENT_ALGEBRA_CREATED, {"generators": [g.name for g in self.generators]})

    @property
    def generators(self) -> Tuple[Generator, ...]:
        """Ordered basis [K_1, K_2, K_3, J_1, J_2, J_3]."""
        return self.K + self.J

    def _emit(self, event: str, data) -> None:
        if self.observer is not None:
            self.observer.publish(event, data)

    # ------------------------------------------------------------------
    # Commutators
    # ------------------------------------------------------------------

    def commutator(self, A: Generator, B: Generator) -> CommutatorResult:
        """Compute [A, B] = AB - BA and identify it with a signed generator."""
        result = commutator(A.matrix, B.matrix)
        structure = self._identify(A, B, result)
        self._emit(EVENT_COMMUTATOR, {"generators": [A.name, B.name], "structure": structure})
        return CommutatorResult(result=freeze(result), generators=(A.name, B.name), structure=structure)

    def _identify(self, A: Generator, B: Generator, result: np.ndarray) -> str:
        head = f"[{A.name}, {B.name}]"
        if is_zero(result, self.tol):
            return f"{head} = 0"

        a_boost = isinstance(A, BoostGenerator)
        b_boost = isinstance(B, BoostGenerator)
        # Both of the same kind close onto rotations, mixed pairs onto boosts
        sign = -1 if (a_boost and b_boost) else 1
        prefix = "J" if a_boost == b_boost else "K"

        for k in range(3):
            coeff = sign * levi_civita(A.axis, B.axis, k)
            if coeff != 0:
                return f"{head} = {'' if coeff > 0 else '-'}{prefix}_{k + 1}"
        return f"{head} = ?"

    def verify_jacobi_identity(self, A: Generator, B: Generator, C: Generator) -> bool:
        """[A, [B, C]] + [B, [C, A]] + [C, [A, B]] = 0 elementwise."""
        a, b, c = A.matrix, B.matrix, C.matrix
        total = (
            commutator(a, commutator(b, c))
            + commutator(b, commutator(c, a))
            + commutator(c, commutator(a, b))
        )
        return is_zero(total, self.tol)

    def verify_closure(self) -> bool:
        """Every ordered pair [T_a, T_b] equals sum_c f[a][b][c] T_c."""
        basis = np.stack([g.matrix for g in self.generators])
        for a, b in itertools.product(range(N_GENERATORS), repeat=2):
            expected = np.tensordot(STRUCTURE_CONSTANTS[a, b], basis, axes=1)
            actual = commutator(basis[a], basis[b])
            if not is_zero(actual - expected, self.tol):
                logger.warning(f"Closure failed for pair ({a}, {b})")
                return False
        return True

    # ------------------------------------------------------------------
    # Invariants
    # ------------------------------------------------------------------

    def get_structure_constants(self) -> np.ndarray:
        """f[a][b][c] with [T_a, T_b] = sum_c f[a][b][c] T_c."""
        return STRUCTURE_CONSTANTS.copy()

    def get_casimir_operator(self) -> np.ndarray:
        """C = J^2 - K^2."""
        C = np.zeros((4, 4), dtype=np.float64)
        for J in self.J:
            C += J.matrix @ J.matrix
        for K in self.K:
            C -= K.matrix @ K.matrix
        return C

    def adjoint_representation(self) -> List[np.ndarray]:
        """Six 6x6 matrices (ad T_a)[c, b] = f[a][b][c]."""
        return [STRUCTURE_CONSTANTS[a].T.astype(np.float64) for a in range(N_GENERATORS)]

    def generator(self, name: str) -> Optional[Generator]:
        """Look up a generator by name, e.g. ``"J_3"``."""
        for g in self.generators:
            if g.name == name:
                return g
        return None
