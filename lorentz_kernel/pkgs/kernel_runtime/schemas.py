"""Pydantic schemas for the kernel service and its configuration."""

from typing import Dict, List, Literal, Optional

from pydantic import BaseModel, conlist, model_validator

Vector3 = conlist(float, min_length=3, max_length=3)
Vector4 = conlist(float, min_length=4, max_length=4)
Matrix4 = conlist(Vector4, min_length=4, max_length=4)


class KernelConfig(BaseModel):
    """Service configuration, usually loaded from YAML."""
    log_level: str = "INFO"
    log_format: str = "structured"
    tolerance: float = 1e-10
    audit: bool = False
    precision: int = 12


class BoostRequest(BaseModel):
    """Boost given either by rapidity (optionally redirected) or by velocity."""
    rapidity: Optional[Vector3] = None
    velocity: Optional[Vector3] = None
    direction: Optional[Vector3] = None

    @model_validator(mode="after")
    def _one_parameterisation(self):
        if (self.rapidity is None) == (self.velocity is None):
            raise ValueError("Exactly one of 'rapidity' or 'velocity' must be given")
        if self.velocity is not None and self.direction is not None:
            raise ValueError("'direction' only applies to rapidity boosts")
        return self


class RotationRequest(BaseModel):
    angles: Vector3


class ClassifyRequest(BaseModel):
    matrix: Matrix4


class ClassificationResult(BaseModel):
    is_valid: bool
    is_proper: bool
    is_orthochronous: bool
    type: str


class ElementResult(BaseModel):
    matrix: List[List[float]]
    gamma: float
    beta: List[float]
    boost_rapidity: List[float]
    rotation_angle: List[float]
    classification: ClassificationResult
    digest: str


class AlgebraReport(BaseModel):
    closure: bool
    jacobi: bool
    triples_checked: int
    commutators: Dict[str, str] = {}
    casimir: List[List[float]]


class SpinorRequest(BaseModel):
    kind: Literal["boost", "rotation"]
    parameters: Vector3
    vector: Optional[Vector4] = None


class SpinorResult(BaseModel):
    real: List[List[float]]
    imag: List[List[float]]
    lorentz_matrix: List[List[float]]
    transformed: Optional[List[float]] = None
