"""Observability infrastructure: logging, audit events, hash chain and metrics."""

from .logging import setup_logging
from .events import EventBus
from .audit import HashChain, ProofRecord, ChainVerification, GENESIS_HASH
from .metrics import MetricsCollector

__all__ = [
    'setup_logging',
    'EventBus',
    'HashChain', 'ProofRecord', 'ChainVerification', 'GENESIS_HASH',
    'MetricsCollector',
]
