# -*- coding: utf-8 -*-
"""
so(3,1) Lie Algebra Generators
==============================

Basis generators of the Lorentz algebra in the defining 4x4 representation
acting on (t, x, y, z) with metric eta = diag(-1, 1, 1, 1).

- Boost K_i: (K_i)[0, i+1] = (K_i)[i+1, 0] = 1
- Rotation J_i: for the cyclic triple (i, j, k), (J_i)[j, k] = -1 and
  (J_i)[k, j] = +1

A generator is one of two variants, BoostGenerator or RotationGenerator,
each carrying only its axis index. The variant decides the closed-form
exponential, so there is no tag to branch on after construction.
"""

import logging
import math
import numpy as np
import torch
from dataclasses import dataclass, field
from typing import ClassVar, Union

from .common import AXES, GeneratorType
from .utils import cosh_sinh, freeze, identity4, scaled

logger = logging.getLogger(__name__)

# (i, j, k) spatial index triples, offset by one for the time row
_CYCLIC = ((1, 2, 3), (2, 3, 1), (3, 1, 2))


@dataclass(frozen=True)
class Generator:
    """Base class for so(3,1) basis generators; identity is (variant, axis)."""

    type: ClassVar[GeneratorType]
    prefix: ClassVar[str]

    axis: int
    matrix: np.ndarray = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        if self.axis not in (0, 1, 2):
            raise ValueError(f"Generator axis must be 0, 1 or 2, got {self.axis}")
        object.__setattr__(self, "matrix", freeze(self._build_matrix()))
        logger.debug(f"Built generator {self.name}")

    def _build_matrix(self) -> np.ndarray:
        raise NotImplementedError

    def exponentiate(self, parameter: float) -> np.ndarray:
        """Finite transformation exp(parameter * G) as a 4x4 array."""
        raise NotImplementedError

    @property
    def name(self) -> str:
        return f"{self.prefix}_{self.axis + 1}"

    @property
    def axis_label(self) -> str:
        return AXES[self.axis]

    def get_matrix(self) -> np.ndarray:
        return self.matrix.copy()

    def to_torch(self) -> torch.Tensor:
        return torch.from_numpy(self.get_matrix())

    @staticmethod
    def from_spec(type: Union[GeneratorType, str], axis: Union[int, str]) -> "Generator":
        """
        Build a generator from a tag and an axis.

        Args:
            type: GeneratorType or its value ("boost" / "rotation")
            axis: index 0-2 or label "x" / "y" / "z"
        """
        gen_type = GeneratorType(type)
        if isinstance(axis, str):
            if axis not in AXES:
                raise ValueError(f"Unknown axis {axis!r}; expected one of {AXES}")
            axis = AXES.index(axis)
        return _VARIANTS[gen_type](axis)


@dataclass(frozen=True)
class BoostGenerator(Generator):
    """K_i: hyperbolic rotation in the t-x_i plane."""

    type: ClassVar[GeneratorType] = GeneratorType.BOOST
    prefix: ClassVar[str] = "K"

    def _build_matrix(self) -> np.ndarray:
        M = np.zeros((4, 4), dtype=np.float64)
        i = self.axis + 1
        M[0, i] = 1.0
        M[i, 0] = 1.0
        return M

    def exponentiate(self, rapidity: float) -> np.ndarray:
        # exp(xi K) = I + sinh(xi) K + (cosh(xi) - 1) K^2
        # Beyond |xi| ~ 710 the hyperbolic entries are inf; the others stay exact
        K = self.matrix
        c, s = cosh_sinh(rapidity)
        return identity4() + scaled(s, K) + scaled(c - 1.0, K @ K)


@dataclass(frozen=True)
class RotationGenerator(Generator):
    """J_i: rotation in the x_j-x_k plane."""

    type: ClassVar[GeneratorType] = GeneratorType.ROTATION
    prefix: ClassVar[str] = "J"

    def _build_matrix(self) -> np.ndarray:
        M = np.zeros((4, 4), dtype=np.float64)
        _, j, k = _CYCLIC[self.axis]
        M[j, k] = -1.0
        M[k, j] = 1.0
        return M

    def exponentiate(self, angle: float) -> np.ndarray:
        # exp(theta J) = I + sin(theta) J + (1 - cos(theta)) J^2
        J = self.matrix
        return identity4() + math.sin(angle) * J + (1.0 - math.cos(angle)) * (J @ J)


_VARIANTS = {
    GeneratorType.BOOST: BoostGenerator,
    GeneratorType.ROTATION: RotationGenerator,
}
