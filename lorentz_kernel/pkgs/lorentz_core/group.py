# -*- coding: utf-8 -*-
"""
Lorentz group O(3,1)
====================

Finite transformations preserving x^T eta x with eta = diag(-1, 1, 1, 1).
Elements are parameterised by three rapidities and three rotation angles,
or built from a velocity in units of c.

The group splits into four components by det(Lambda) = +/-1 and the sign of
Lambda^0_0:

    SO+(3,1)  proper, orthochronous (restricted Lorentz group)
    SO-(3,1)  proper, non-orthochronous
    O+(3,1)   improper, orthochronous
    O-(3,1)   improper, non-orthochronous
"""

import logging
import math
import numpy as np
from typing import Optional, Sequence

from .algebra import LorentzAlgebra
from .common import (
    EVENT_ELEMENT_CREATED, EVENT_GROUP_CREATED, EVENT_TRANSFORMATION_VALIDATED,
    METRIC_TOL, SuperluminalVelocityError, TransformationClass,
)
from .element import GroupElement
from .utils import MINKOWSKI_METRIC, as_matrix4, as_vector, det4_cofactor, norm3

logger = logging.getLogger(__name__)

COMPONENT_LABELS = {
    (True, True): "SO+(3,1) - Proper orthochronous (restricted Lorentz group)",
    (True, False): "SO-(3,1) - Proper non-orthochronous",
    (False, True): "O+(3,1) - Improper orthochronous",
    (False, False): "O-(3,1) - Improper non-orthochronous",
}


class LorentzGroup:
    """Lorentz group with its so(3,1) algebra; every method is a pure function."""

    def __init__(self, observer=None, tol: float = METRIC_TOL):
        self.observer = observer
        self.tol = tol
        self.algebra = LorentzAlgebra(observer=observer, tol=tol)
        logger.debug("LorentzGroup SO(3,1) initialized")
        self._emit(EVENT_GROUP_CREATED, {"group": "SO(3,1)", "tol": tol})

    def _emit(self, event: str, data) -> None:
        if self.observer is not None:
            self.observer.publish(event, data)

    # ------------------------------------------------------------------
    # Element construction
    # ------------------------------------------------------------------

    def create_element(self, boost_rapidity: Optional[Sequence[float]] = None,
                       rotation_angle: Optional[Sequence[float]] = None) -> GroupElement:
        element = GroupElement.from_parameters(self.algebra, boost_rapidity, rotation_angle)
        self._emit(EVENT_ELEMENT_CREATED, {
            "boost_rapidity": list(element.boost_rapidity),
            "rotation_angle": list(element.rotation_angle),
            "digest": element.digest(),
        })
        return element

    def boost(self, rapidity: Sequence[float], direction: Optional[Sequence[float]] = None) -> GroupElement:
        """
        Pure boost.

        Without ``direction`` the rapidity components are used per axis.
        With it, |rapidity| is redirected along the normalised direction.
        """
        xi = as_vector(rapidity, 3, "rapidity")
        if direction is not None:
            n = as_vector(direction, 3, "direction")
            n_mag = norm3(n)
            if n_mag == 0.0:
                raise ValueError("Boost direction must be non-zero")
            xi = n / n_mag * norm3(xi)
        return self.create_element(boost_rapidity=xi)

    def rotation(self, angles: Sequence[float]) -> GroupElement:
        return self.create_element(rotation_angle=angles)

    def boost_from_velocity(self, beta: Sequence[float]) -> GroupElement:
        """
        Boost with velocity beta (units of c): xi = atanh(|beta|) along beta/|beta|.

        The rapidity vector goes through ``create_element``, i.e. a product of
        per-axis boosts K_z K_y K_x. For beta along a single axis this is the
        pure boost with gamma = 1/sqrt(1 - beta^2); for oblique beta the
        product also carries a Wigner rotation, so ``get_gamma``/``get_beta``
        do not return the input velocity.
        """
        b = as_vector(beta, 3, "beta")
        b_mag = norm3(b)
        if b_mag >= 1.0:
            raise SuperluminalVelocityError(f"Velocity must be less than c, got |beta|={b_mag}")

        if b_mag > 0.0:
            rapidity = b / b_mag * math.atanh(b_mag)
        else:
            rapidity = np.zeros(3)
        return self.create_element(boost_rapidity=rapidity)

    def parity(self) -> GroupElement:
        """Spatial inversion P = diag(1, -1, -1, -1)."""
        return GroupElement.from_matrix(np.diag([1.0, -1.0, -1.0, -1.0]))

    def time_reversal(self) -> GroupElement:
        """T = diag(-1, 1, 1, 1)."""
        return GroupElement.from_matrix(np.diag([-1.0, 1.0, 1.0, 1.0]))

    # ------------------------------------------------------------------
    # Validation and classification
    # ------------------------------------------------------------------

    def is_valid_transformation(self, M) -> bool:
        """Check Lambda^T eta Lambda = eta elementwise within tolerance."""
        L = as_matrix4(M)
        deviation = L.T @ MINKOWSKI_METRIC @ L - MINKOWSKI_METRIC
        valid = bool(np.all(np.abs(deviation) <= self.tol))
        self._emit(EVENT_TRANSFORMATION_VALIDATED, {"valid": valid, "max_deviation": float(np.abs(deviation).max())})
        return valid

    def classify_transformation(self, M) -> TransformationClass:
        L = as_matrix4(M)
        det = det4_cofactor(L)
        is_proper = bool(abs(det - 1.0) < self.tol)
        is_orthochronous = bool(L[0, 0] >= 1.0 - self.tol)
        return TransformationClass(
            is_proper=is_proper,
            is_orthochronous=is_orthochronous,
            type=COMPONENT_LABELS[(is_proper, is_orthochronous)],
        )
