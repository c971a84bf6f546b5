"""Lorentz Kernel - so(3,1) algebra, Lorentz group elements and SL(2,C) spinors."""

__version__ = "0.1.0"

# Core kernel
from .pkgs.lorentz_core import (
    GeneratorType, Generator, BoostGenerator, RotationGenerator,
    LorentzAlgebra, LorentzGroup, GroupElement, SpinorRepresentation,
    CommutatorResult, TransformationClass,
    LorentzKernelError, SuperluminalVelocityError,
    MINKOWSKI_METRIC, STRUCTURE_CONSTANTS,
    rapidity_from_beta, beta_from_rapidity, gamma_from_rapidity, wigner_angle,
)

# Observability
from .pkgs.observability import setup_logging, EventBus, HashChain, MetricsCollector

# High-level service
from .pkgs.kernel_runtime import KernelService, KernelConfig

__all__ = [
    # Core kernel
    'GeneratorType', 'Generator', 'BoostGenerator', 'RotationGenerator',
    'LorentzAlgebra', 'LorentzGroup', 'GroupElement', 'SpinorRepresentation',
    'CommutatorResult', 'TransformationClass',
    'LorentzKernelError', 'SuperluminalVelocityError',
    'MINKOWSKI_METRIC', 'STRUCTURE_CONSTANTS',
    'rapidity_from_beta', 'beta_from_rapidity', 'gamma_from_rapidity', 'wigner_angle',

    # Observability
    'setup_logging', 'EventBus', 'HashChain', 'MetricsCollector',

    # High-level interface
    'KernelService', 'KernelConfig',
]
