"""
Event System - synchronous observer primitives.

Provides:
- Signal: observer list with connect/disconnect/emit
- Subscription: disposable handle returned by Signal.connect()

Usage:
    from multiselect.core.events import Signal

    changed = Signal("changed")
    handle = changed.connect(on_changed)
    changed.emit()
    handle.dispose()
"""
from .observer import Signal, Subscription


__all__ = ["Signal", "Subscription"]
