"""Kernel service that wraps the Lorentz group and spinor picture behind request/response schemas."""

import itertools
import logging
from typing import Any, Dict, Optional, Union

import numpy as np

from ..lorentz_core import (
    KERNEL_EVENTS, GroupElement, LorentzGroup, SpinorRepresentation,
    SuperluminalVelocityError,
)
from ..observability import EventBus, HashChain, MetricsCollector, setup_logging
from .schemas import (
    AlgebraReport, BoostRequest, ClassificationResult, ClassifyRequest,
    ElementResult, KernelConfig, RotationRequest, SpinorRequest, SpinorResult,
)

logger = logging.getLogger(__name__)


class KernelService:
    """High-level interface used by the CLI and by callers that want plain data back."""

    def __init__(self, cfg: Optional[Union[KernelConfig, Dict[str, Any]]] = None):
        if isinstance(cfg, KernelConfig):
            self.cfg = cfg
        else:
            self.cfg = KernelConfig(**(cfg or {}))
        setup_logging(self.cfg.log_level, self.cfg.log_format)

        self.bus = EventBus()
        self.audit: Optional[HashChain] = None
        if self.cfg.audit:
            self.audit = HashChain("KernelService")
            self.audit.attach(self.bus, KERNEL_EVENTS)

        self.metrics = MetricsCollector()
        self.group = LorentzGroup(observer=self.bus, tol=self.cfg.tolerance)
        self.spinor_rep = SpinorRepresentation(observer=self.bus)
        logger.info(f"KernelService initialized (tolerance={self.cfg.tolerance}, audit={self.cfg.audit})")

    def _rounded(self, a) -> list:
        return np.round(np.asarray(a, dtype=np.float64), self.cfg.precision).tolist()

    def _classification(self, M) -> ClassificationResult:
        cls = self.group.classify_transformation(M)
        return ClassificationResult(
            is_valid=self.group.is_valid_transformation(M),
            is_proper=cls.is_proper,
            is_orthochronous=cls.is_orthochronous,
            type=cls.type,
        )

    def _element_result(self, element: GroupElement) -> ElementResult:
        return ElementResult(
            matrix=self._rounded(element.matrix),
            gamma=round(element.get_gamma(), self.cfg.precision),
            beta=self._rounded(element.get_beta()),
            boost_rapidity=list(element.boost_rapidity),
            rotation_angle=list(element.rotation_angle),
            classification=self._classification(element.matrix),
            digest=element.digest(),
        )

    # ------------------------------------------------------------------
    # Operations
    # ------------------------------------------------------------------

    def boost(self, req: BoostRequest) -> ElementResult:
        logger.info(f"Boost request: {req.model_dump(exclude_none=True)}")
        with self.metrics.timed("boost"):
            try:
                if req.velocity is not None:
                    element = self.group.boost_from_velocity(req.velocity)
                else:
                    element = self.group.boost(req.rapidity, req.direction)
            except SuperluminalVelocityError as e:
                self.metrics.increment_counter("domain_errors")
                logger.error(f"Rejected boost: {e}")
                raise
        self.metrics.increment_counter("boosts")
        return self._element_result(element)

    def rotate(self, req: RotationRequest) -> ElementResult:
        logger.info(f"Rotation request: {req.angles}")
        with self.metrics.timed("rotation"):
            element = self.group.rotation(req.angles)
        self.metrics.increment_counter("rotations")
        return self._element_result(element)

    def classify(self, req: ClassifyRequest) -> ClassificationResult:
        with self.metrics.timed("classify"):
            result = self._classification(req.matrix)
        self.metrics.increment_counter("classifications")
        logger.info(f"Classified matrix as {result.type} (valid={result.is_valid})")
        return result

    def verify_algebra(self) -> AlgebraReport:
        """Check closure, the Jacobi identity on all triples, and list the commutators."""
        algebra = self.group.algebra
        basis = algebra.generators
        with self.metrics.timed("verify_algebra"):
            closure = algebra.verify_closure()
            triples = list(itertools.product(basis, repeat=3))
            failed = [t for t in triples if not algebra.verify_jacobi_identity(*t)]
            commutators = {
                f"{A.name},{B.name}": algebra.commutator(A, B).structure
                for A, B in itertools.combinations(basis, 2)
            }
        for A, B, C in failed:
            logger.error(f"Jacobi identity failed for ({A.name}, {B.name}, {C.name})")
        self.metrics.increment_counter("algebra_checks")
        return AlgebraReport(
            closure=closure,
            jacobi=not failed,
            triples_checked=len(triples),
            commutators=commutators,
            casimir=self._rounded(algebra.get_casimir_operator()),
        )

    def spinor(self, req: SpinorRequest) -> SpinorResult:
        with self.metrics.timed("spinor"):
            if req.kind == "boost":
                A = self.spinor_rep.boost_matrix(req.parameters)
            else:
                A = self.spinor_rep.rotation_matrix(req.parameters)
            transformed = None
            if req.vector is not None:
                transformed = self._rounded(self.spinor_rep.transform_vector(A, req.vector))
        self.metrics.increment_counter("spinor_maps")
        return SpinorResult(
            real=self._rounded(A.real),
            imag=self._rounded(A.imag),
            lorentz_matrix=self._rounded(self.spinor_rep.to_lorentz_matrix(A)),
            transformed=transformed,
        )

    def audit_summary(self) -> Dict[str, Any]:
        summary: Dict[str, Any] = {
            "enabled": self.audit is not None,
            "metrics": self.metrics.get_all_metrics(),
            "events": self.bus.get_event_counts(),
        }
        if self.audit is not None:
            check = self.audit.verify()
            summary.update(records=check.total_records, valid=check.valid, last_hash=self.audit.last_hash)
        return summary
