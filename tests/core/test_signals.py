import pytest
from unittest.mock import MagicMock
from multiselect.core.events import Signal, Subscription

def test_signal_event():
    """Verify Signal connect/emit/disconnect behavior."""
    sig = Signal("test_signal")
    mock_handler = MagicMock()

    sig.connect(mock_handler)
    sig.emit("data", 123)

    mock_handler.assert_called_once_with("data", 123)

    sig.disconnect(mock_handler)
    sig.emit("data2")
    assert mock_handler.call_count == 1

def test_connect_twice_registers_once():
    sig = Signal("dup")
    handler = MagicMock()

    sig.connect(handler)
    sig.connect(handler)
    sig.emit()

    assert handler.call_count == 1
    assert sig.subscriber_count == 1

def test_subscription_dispose_is_idempotent():
    sig = Signal("handle")
    handler = MagicMock()

    handle = sig.connect(handler)
    assert isinstance(handle, Subscription)
    assert handle.is_active

    handle.dispose()
    handle.dispose()
    sig.emit()

    handler.assert_not_called()
    assert not handle.is_active

def test_subscription_as_context_manager():
    sig = Signal("ctx")
    handler = MagicMock()

    with sig.connect(handler):
        sig.emit(1)

    sig.emit(2)
    handler.assert_called_once_with(1)

def test_subscriber_error_does_not_stop_broadcast(log_messages):
    sig = Signal("faulty")
    received = []

    def broken():
        raise RuntimeError("boom")

    sig.connect(broken)
    sig.connect(lambda: received.append("ok"))

    sig.emit()

    assert received == ["ok"]
    assert any("Signal 'faulty' error" in m and "boom" in m for m in log_messages)

def test_subscriber_can_disconnect_during_emit():
    sig = Signal("self_remove")
    calls = []

    def once():
        calls.append("once")
        sig.disconnect(once)

    sig.connect(once)
    sig.connect(lambda: calls.append("other"))

    sig.emit()
    sig.emit()

    assert calls == ["once", "other", "other"]

def test_clear_drops_all_subscribers():
    sig = Signal("clear")
    handler = MagicMock()
    handle = sig.connect(handler)

    sig.clear()
    sig.emit()

    handler.assert_not_called()
    assert sig.subscriber_count == 0
    assert not handle.is_active
