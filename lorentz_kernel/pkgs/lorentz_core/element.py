"""
Elements of the Lorentz group.

A GroupElement is an immutable 4x4 transformation Lambda. Parametric
elements also remember the rapidity and rotation-angle vectors that built
them; elements obtained from a raw matrix (composition, inversion, discrete
symmetries) carry zero parameter vectors, and only their matrix is
authoritative.
"""
import hashlib
import logging
import numpy as np
import torch
from dataclasses import dataclass, field
from typing import Optional, Sequence, Tuple, Union

from .common import DEGENERATE_EPS
from .utils import MINKOWSKI_METRIC, as_matrix4, as_vector, freeze, identity4

logger = logging.getLogger(__name__)

Vector3 = Tuple[float, float, float]
_ZERO3: Vector3 = (0.0, 0.0, 0.0)


@dataclass(frozen=True, eq=False)
class GroupElement:
    """Lorentz transformation Lambda with Lambda^T eta Lambda = eta."""

    matrix: np.ndarray
    boost_rapidity: Vector3 = field(default=_ZERO3)
    rotation_angle: Vector3 = field(default=_ZERO3)

    def __post_init__(self):
        object.__setattr__(self, "matrix", freeze(as_matrix4(self.matrix)))

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------

    @classmethod
    def from_parameters(cls, algebra, boost_rapidity: Optional[Sequence[float]] = None,
                        rotation_angle: Optional[Sequence[float]] = None) -> "GroupElement":
        """
        Build Lambda from the exponentials of the six generators.

        Boosts are applied first (x, y, z), then rotations (x, y, z); each
        factor multiplies the running product from the left. Omitted
        vectors are zero.
        """
        xi = as_vector(_ZERO3 if boost_rapidity is None else boost_rapidity, 3, "boost_rapidity")
        theta = as_vector(_ZERO3 if rotation_angle is None else rotation_angle, 3, "rotation_angle")

        # The first factor is taken as is, so a single overflowing boost
        # stays inf on its hyperbolic entries instead of turning into nan
        factors = [gen.exponentiate(float(value))
                   for gen, value in zip(algebra.K + algebra.J, np.concatenate([xi, theta]))
                   if abs(value) > DEGENERATE_EPS]
        result = identity4()
        for i, factor in enumerate(factors):
            result = factor if i == 0 else factor @ result
        logger.debug(f"Element from {len(factors)} generator exponentials")

        return cls(matrix=result,
                   boost_rapidity=tuple(float(v) for v in xi),
                   rotation_angle=tuple(float(v) for v in theta))

    @classmethod
    def from_matrix(cls, matrix) -> "GroupElement":
        """Wrap a raw 4x4 matrix; parameter vectors are left at zero."""
        logger.debug("Element from raw matrix")
        return cls(matrix=matrix)

    # ------------------------------------------------------------------
    # Group operations
    # ------------------------------------------------------------------

    def transform(self, x: Sequence[float]) -> np.ndarray:
        """x' = Lambda x for a single 4-vector."""
        return self.matrix @ as_vector(x, 4, "4-vector")

    def transform_batch(self, x: Union[np.ndarray, torch.Tensor]) -> Union[np.ndarray, torch.Tensor]:
        """
        Apply Lambda to a batch of 4-vectors.

        Args:
            x: array or tensor of shape (N, 4) or (..., 4)

        Returns:
            Same type and shape as x
        """
        if x.shape[-1] != 4:
            raise ValueError(f"Expected trailing dimension 4, got shape {tuple(x.shape)}")
        if isinstance(x, torch.Tensor):
            L = torch.as_tensor(self.get_matrix(), dtype=x.dtype, device=x.device)
            return x @ L.T
        return np.asarray(x, dtype=np.float64) @ self.matrix.T

    def compose(self, other: "GroupElement") -> "GroupElement":
        """Lambda_self . Lambda_other: ``other`` acts first, then ``self``."""
        return GroupElement.from_matrix(self.matrix @ other.matrix)

    def inverse(self) -> "GroupElement":
        """Lambda^-1 = eta Lambda^T eta."""
        eta = MINKOWSKI_METRIC
        return GroupElement.from_matrix(eta @ self.matrix.T @ eta)

    # ------------------------------------------------------------------
    # Accessors
    # ------------------------------------------------------------------

    def get_matrix(self) -> np.ndarray:
        return self.matrix.copy()

    def to_torch(self) -> torch.Tensor:
        return torch.from_numpy(self.get_matrix())

    def get_gamma(self) -> float:
        """Lorentz factor; meaningful for pure boosts."""
        return float(self.matrix[0, 0])

    def get_beta(self) -> np.ndarray:
        """Velocity Lambda^0_i / Lambda^0_0; meaningful for pure boosts."""
        return self.matrix[0, 1:4] / self.matrix[0, 0]

    def digest(self) -> str:
        """sha256 of the matrix bytes, used in audit records."""
        return hashlib.sha256(np.ascontiguousarray(self.matrix).tobytes()).hexdigest()
