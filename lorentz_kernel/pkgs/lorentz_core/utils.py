"""
Matrix and kinematic utilities for the Lorentz core.

Fixed-size helpers (4x4 real matrices, 3- and 4-vectors) shared by the
algebra and group classes, plus the scalar conversions between velocity,
rapidity and Lorentz factor.
"""
import math
import numpy as np
from typing import Sequence, Tuple

from .common import DEGENERATE_EPS, SuperluminalVelocityError


def freeze(a: np.ndarray) -> np.ndarray:
    """Return a read-only copy of ``a``."""
    out = np.array(a, copy=True)
    out.flags.writeable = False
    return out


MINKOWSKI_METRIC = freeze(np.diag([-1.0, 1.0, 1.0, 1.0]))


def identity4() -> np.ndarray:
    return np.eye(4, dtype=np.float64)


def as_vector(v: Sequence[float], n: int, name: str = "vector") -> np.ndarray:
    """Coerce ``v`` to a float64 array of length ``n``."""
    arr = np.asarray(v, dtype=np.float64)
    if arr.shape != (n,):
        raise ValueError(f"{name} must have {n} components, got shape {arr.shape}")
    return arr


def as_matrix4(M) -> np.ndarray:
    arr = np.asarray(M, dtype=np.float64)
    if arr.shape != (4, 4):
        raise ValueError(f"Expected a 4x4 matrix, got shape {arr.shape}")
    return arr


def norm3(v: np.ndarray) -> float:
    return math.sqrt(float(np.dot(v, v)))


def commutator(A: np.ndarray, B: np.ndarray) -> np.ndarray:
    """[A, B] = AB - BA"""
    return A @ B - B @ A


def is_zero(M: np.ndarray, tol: float) -> bool:
    return bool(np.all(np.abs(M) <= tol))


def cosh_sinh(x: float) -> Tuple[float, float]:
    """(cosh x, sinh x); past float64 range these are +/-inf instead of raising."""
    with np.errstate(over="ignore"):
        return float(np.cosh(x)), float(np.sinh(x))


def scaled(s: float, M: np.ndarray) -> np.ndarray:
    """s * M with the zero entries of M left at zero, also for infinite s."""
    with np.errstate(invalid="ignore", over="ignore"):
        return np.where(M != 0, s * M, 0.0)


def minor3(M: np.ndarray, row: int, col: int) -> float:
    """Determinant of M with ``row`` and ``col`` removed (M is 4x4)."""
    s = np.delete(np.delete(M, row, axis=0), col, axis=1)
    return float(
        s[0, 0] * (s[1, 1] * s[2, 2] - s[1, 2] * s[2, 1])
        - s[0, 1] * (s[1, 0] * s[2, 2] - s[1, 2] * s[2, 0])
        + s[0, 2] * (s[1, 0] * s[2, 1] - s[1, 1] * s[2, 0])
    )


def det4_cofactor(M: np.ndarray) -> float:
    """4x4 determinant by cofactor expansion along the first row."""
    return sum((-1) ** j * M[0, j] * minor3(M, 0, j) for j in range(4))


# =============================================================================
# Kinematics
# =============================================================================

def rapidity_from_beta(beta: float) -> float:
    """xi = atanh(beta), |beta| < 1."""
    if abs(beta) >= 1.0:
        raise SuperluminalVelocityError(f"Beta must be less than 1, got {beta}")
    return math.atanh(beta)


def beta_from_rapidity(xi: float) -> float:
    return math.tanh(xi)


def gamma_from_rapidity(xi: float) -> float:
    return cosh_sinh(xi)[0]


def wigner_angle(beta1: Sequence[float], beta2: Sequence[float]) -> float:
    """
    Approximate Wigner (Thomas) rotation angle for two successive boosts.

        theta_W ~ (g1 - 1)(g2 - 1) / (g1 + g2) * |beta1 x beta2|

    Zero when either velocity vanishes or the boosts are collinear.
    """
    b1 = as_vector(beta1, 3, "beta1")
    b2 = as_vector(beta2, 3, "beta2")
    b1_mag, b2_mag = norm3(b1), norm3(b2)
    if b1_mag >= 1.0 or b2_mag >= 1.0:
        raise SuperluminalVelocityError(f"Velocities must be less than c, got |beta1|={b1_mag}, |beta2|={b2_mag}")
    if b1_mag < DEGENERATE_EPS or b2_mag < DEGENERATE_EPS:
        return 0.0

    cross_mag = norm3(np.cross(b1, b2))
    if cross_mag < DEGENERATE_EPS:
        return 0.0

    g1 = 1.0 / math.sqrt(1.0 - b1_mag * b1_mag)
    g2 = 1.0 / math.sqrt(1.0 - b2_mag * b2_mag)
    return (g1 - 1.0) * (g2 - 1.0) / (g1 + g2) * cross_mag
