"""Service runtime around the Lorentz core."""

from .schemas import (
    KernelConfig, BoostRequest, RotationRequest, ClassifyRequest,
    ClassificationResult, ElementResult, AlgebraReport, SpinorRequest, SpinorResult,
)
from .service import KernelService

__all__ = [
    'KernelConfig', 'BoostRequest', 'RotationRequest', 'ClassifyRequest',
    'ClassificationResult', 'ElementResult', 'AlgebraReport',
    'SpinorRequest', 'SpinorResult',
    'KernelService',
]
