"""
Common data structures, constants and errors used across the Lorentz core.

Contains the generator tag enum, the result records returned by the algebra
and group classes, the observer event names and the kernel's error types.
"""
import numpy as np
from enum import Enum
from dataclasses import dataclass
from typing import Tuple

# Tolerance for metric preservation, Jacobi sums and zero-commutator tests
METRIC_TOL = 1e-10
# Rapidities/angles below this contribute the identity
DEGENERATE_EPS = 1e-15

AXES = ("x", "y", "z")

# Observer event names
EVENT_ALGEBRA_CREATED = "algebra.created"
EVENT_COMMUTATOR = "algebra.commutator"
EVENT_GROUP_CREATED = "group.created"
EVENT_ELEMENT_CREATED = "element.created"
EVENT_TRANSFORMATION_VALIDATED = "transformation.validated"
EVENT_SPINOR_CREATED = "spinor.created"

KERNEL_EVENTS = (
    EVENT_ALGEBRA_CREATED,
    EVENT_COMMUTATOR,
    EVENT_GROUP_CREATED,
    EVENT_ELEMENT_CREATED,
    EVENT_TRANSFORMATION_VALIDATED,
    EVENT_SPINOR_CREATED,
)


class GeneratorType(Enum):
    """Tag of an so(3,1) basis generator."""
    BOOST = "boost"
    ROTATION = "rotation"


class LorentzKernelError(Exception):
    """Base class for errors raised by the Lorentz kernel."""


class SuperluminalVelocityError(LorentzKernelError, ValueError):
    """Velocity with |beta| >= 1 cannot be turned into a boost."""


@dataclass(frozen=True)
class CommutatorResult:
    """Matrix [A, B] plus the generator it was identified with."""
    result: np.ndarray
    generators: Tuple[str, str]
    structure: str


@dataclass(frozen=True)
class TransformationClass:
    """Topological component of O(3,1) a matrix belongs to."""
    is_proper: bool
    is_orthochronous: bool
    type: str
