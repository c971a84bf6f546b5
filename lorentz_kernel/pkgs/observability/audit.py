"""
Hash-chained audit trail for kernel events.

Each record stores the sha256 of its payload and of its predecessor, so any
edit to a stored record breaks the chain. Attach a HashChain to an EventBus
to record what the kernel constructs and validates; detaching it (or never
creating one) leaves every computed result unchanged.
"""
import hashlib
import json
import logging
import uuid
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Callable, Dict, Iterable, List, Optional

import numpy as np

logger = logging.getLogger(__name__)

GENESIS_HASH = "0" * 64


def sha256_hex(text: str) -> str:
    return hashlib.sha256(text.encode("utf-8")).hexdigest()


def _jsonable(obj: Any) -> Any:
    if isinstance(obj, np.ndarray):
        return obj.tolist()
    if isinstance(obj, (np.integer, np.floating, np.bool_)):
        return obj.item()
    return str(obj)


def canonical_json(obj: Any) -> str:
    return json.dumps(obj, sort_keys=True, separators=(",", ":"), default=_jsonable)


@dataclass(frozen=True)
class ProofRecord:
    id: str
    timestamp: str
    event: str
    payload: str
    payload_hash: str
    previous_hash: str
    chain_hash: str


@dataclass
class ChainVerification:
    valid: bool
    total_records: int
    valid_records: int
    broken_links: List[int] = field(default_factory=list)
    first_error: Optional[str] = None


def _chain_hash(record_id: str, timestamp: str, event: str, payload_hash: str, previous_hash: str) -> str:
    return sha256_hex(canonical_json({
        "id": record_id,
        "timestamp": timestamp,
        "event": event,
        "payload_hash": payload_hash,
        "previous_hash": previous_hash,
    }))


class HashChain:
    """Append-only sequence of linked ProofRecords."""

    def __init__(self, chain_id: Optional[str] = None):
        self.chain_id = chain_id or f"CHAIN-{uuid.uuid4().hex[:8]}"
        self.records: List[ProofRecord] = []
        self._last_hash = GENESIS_HASH
        self._subscriptions: Dict[str, Callable[[Any], None]] = {}

    @property
    def last_hash(self) -> str:
        return self._last_hash

    def add_record(self, event: str, payload: Any = None) -> ProofRecord:
        record_id = f"{self.chain_id}-REC-{len(self.records) + 1:08d}"
        timestamp = datetime.now(timezone.utc).isoformat()
        body = canonical_json(payload)
        payload_hash = sha256_hex(body)
        chain_hash = _chain_hash(record_id, timestamp, event, payload_hash, self._last_hash)

        record = ProofRecord(
            id=record_id,
            timestamp=timestamp,
            event=event,
            payload=body,
            payload_hash=payload_hash,
            previous_hash=self._last_hash,
            chain_hash=chain_hash,
        )
        self.records.append(record)
        self._last_hash = chain_hash
        return record

    def verify(self) -> ChainVerification:
        """Recompute every hash and check the links."""
        broken: List[int] = []
        first_error = None
        previous = GENESIS_HASH

        for i, rec in enumerate(self.records):
            error = None
            if rec.previous_hash != previous:
                error = f"Record {i}: previous hash does not match"
            elif sha256_hex(rec.payload) != rec.payload_hash:
                error = f"Record {i}: payload hash mismatch"
            elif _chain_hash(rec.id, rec.timestamp, rec.event, rec.payload_hash, rec.previous_hash) != rec.chain_hash:
                error = f"Record {i}: chain hash mismatch"

            if error:
                broken.append(i)
                first_error = first_error or error
            previous = rec.chain_hash

        if broken:
            logger.warning(f"Hash chain {self.chain_id} broken at records {broken}")
        return ChainVerification(
            valid=not broken,
            total_records=len(self.records),
            valid_records=len(self.records) - len(broken),
            broken_links=broken,
            first_error=first_error,
        )

    # ------------------------------------------------------------------
    # EventBus wiring
    # ------------------------------------------------------------------

    def attach(self, bus, events: Iterable[str]) -> None:
        for event in events:
            if event in self._subscriptions:
                continue
            callback = self._recorder(event)
            self._subscriptions[event] = callback
            bus.subscribe(event, callback)

    def detach(self, bus) -> None:
        for event, callback in self._subscriptions.items():
            bus.unsubscribe(event, callback)
        self._subscriptions.clear()

    def _recorder(self, event: str) -> Callable[[Any], None]:
        def _record(data: Any) -> None:
            self.add_record(event, data)
        return _record
