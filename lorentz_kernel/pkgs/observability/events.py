"""Event bus used as the kernel's optional audit observer."""

from collections import Counter
from typing import Any, Callable, Dict, List, Optional
import logging

logger = logging.getLogger(__name__)

KernelCallback = Callable[[Any], None]


class EventBus:
    """
    Publish/subscribe bus for kernel events.

    LorentzAlgebra, LorentzGroup and SpinorRepresentation publish
    construction and validation events here (``algebra.created``,
    ``element.created``, ``transformation.validated``, ...) when a bus is
    injected as their observer. A failing subscriber is logged, counted
    and skipped; it never changes what the kernel returns.

    The bus counts how often each event was published and how many
    subscriber calls failed, so an audit report can show what the kernel
    did even when nothing is subscribed.
    """

    def __init__(self):
        self.listeners: Dict[str, List[KernelCallback]] = {}
        self.published: Counter = Counter()
        self.failures: Counter = Counter()

    def subscribe(self, event_type: str, callback: KernelCallback):
        self.listeners.setdefault(event_type, []).append(callback)
        logger.debug(f"Observer subscribed to {event_type}")

    def unsubscribe(self, event_type: str, callback: KernelCallback):
        callbacks = self.listeners.get(event_type, [])
        if callback in callbacks:
            callbacks.remove(callback)
            logger.debug(f"Observer unsubscribed from {event_type}")
        else:
            logger.warning(f"No such observer on {event_type}")

    def publish(self, event_type: str, data: Any = None) -> int:
        """Deliver ``data`` to every subscriber; returns how many succeeded."""
        self.published[event_type] += 1
        delivered = 0
        for callback in list(self.listeners.get(event_type, [])):
            try:
                callback(data)
                delivered += 1
            except Exception as e:
                self.failures[event_type] += 1
                logger.error(f"Observer failed on {event_type}: {e}")
        return delivered

    def clear_listeners(self, event_type: Optional[str] = None):
        if event_type:
            self.listeners.pop(event_type, None)
        else:
            self.listeners.clear()

    def get_listener_count(self, event_type: str) -> int:
        return len(self.listeners.get(event_type, []))

    def get_event_counts(self) -> Dict[str, Dict[str, int]]:
        """Per-event publish and subscriber-failure counts."""
        return {
            event: {"published": count, "failures": self.failures[event]}
            for event, count in sorted(self.published.items())
        }
