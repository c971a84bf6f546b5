"""
Lorentz-group algebraic kernel.

Generators of so(3,1), the Lie algebra with its structure constants, finite
group elements built through the exponential map, and the SL(2,C) spinor
picture of the same transformations.
"""

# Shared types and errors
from .common import (
    GeneratorType, CommutatorResult, TransformationClass,
    LorentzKernelError, SuperluminalVelocityError,
    METRIC_TOL, KERNEL_EVENTS,
)

# Generators and algebra
from .generators import Generator, BoostGenerator, RotationGenerator
from .algebra import LorentzAlgebra, STRUCTURE_CONSTANTS, levi_civita

# Group
from .element import GroupElement
from .group import LorentzGroup

# Spinors
from .spinor import SpinorRepresentation, PAULI, PAULI_BAR

# Kinematics
from .utils import (
    MINKOWSKI_METRIC, rapidity_from_beta, beta_from_rapidity,
    gamma_from_rapidity, wigner_angle,
)

__all__ = [
    # Common
    'GeneratorType', 'CommutatorResult', 'TransformationClass',
    'LorentzKernelError', 'SuperluminalVelocityError',
    'METRIC_TOL', 'KERNEL_EVENTS',
    # Generators / algebra
    'Generator', 'BoostGenerator', 'RotationGenerator',
    'LorentzAlgebra', 'STRUCTURE_CONSTANTS', 'levi_civita',
    # Group
    'GroupElement', 'LorentzGroup',
    # Spinors
    'SpinorRepresentation', 'PAULI', 'PAULI_BAR',
    # Kinematics
    'MINKOWSKI_METRIC', 'rapidity_from_beta', 'beta_from_rapidity',
    'gamma_from_rapidity', 'wigner_angle',
]
