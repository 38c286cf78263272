"""
event_manager.py
----------------
Typed notifications from the asset loader plus the dispatcher that carries
them. A stage subscribes through its own loader, so subscriptions never
outlive the stage that made them.
"""

from dataclasses import dataclass
from typing import Callable, Dict, List, Type

from tap_to_claim.core.debug.debug_logger import DebugLogger


# ===========================================================
# Loader Events
# ===========================================================

@dataclass(frozen=True)
class BaseEvent:
    pass


@dataclass(frozen=True)
class LoadProgressEvent(BaseEvent):
    """Sent after every finished file. ``fraction`` = done / declared."""
    fraction: float


@dataclass(frozen=True)
class FileCompleteEvent(BaseEvent):
    key: str
    kind: str


@dataclass(frozen=True)
class FileErrorEvent(BaseEvent):
    """Sent just before the loader raises AssetLoadError."""
    key: str
    path: str
    reason: str


@dataclass(frozen=True)
class LoadCompleteEvent(BaseEvent):
    """Sent once, when the queue runs empty."""
    total: int


Listener = Callable[[BaseEvent], None]


# ===========================================================
# Event Manager
# ===========================================================

class EventManager:
    """Event class -> ordered listeners. Exact type match only."""

    def __init__(self):
        self._listeners: Dict[Type[BaseEvent], List[Listener]] = {}

    def subscribe(self, event_type: Type[BaseEvent], callback: Listener) -> None:
        """Add ``callback`` for ``event_type``; subscribing twice is a no-op."""
        listeners = self._listeners.setdefault(event_type, [])
        if callback not in listeners:
            listeners.append(callback)
            DebugLogger.trace(f"{_name(callback)} listens to {event_type.__name__}", category="loading")

    def dispatch(self, event: BaseEvent) -> None:
        """
        Call every listener of ``type(event)`` in subscription order.

        A listener that raises is logged and skipped; the rest still run.
        """
        for callback in tuple(self._listeners.get(type(event), ())):
            try:
                callback(event)
            except Exception as e:
                DebugLogger.warn(f"Listener {_name(callback)} failed on {event}: {e}", category="loading")

    def clear_all(self) -> None:
        self._listeners.clear()

    def get_subscriber_count(self, event_type: Type[BaseEvent] = None) -> int:
        if event_type is not None:
            return len(self._listeners.get(event_type, ()))
        return sum(map(len, self._listeners.values()))


def _name(callback) -> str:
    return getattr(callback, "__qualname__", None) or repr(callback)
