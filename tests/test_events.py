import pytest

from villagesim.events import Signal


def test_emit_passes_arguments_to_handler():
    signal = Signal()
    received = []
    signal.connect(lambda *args: received.append(args))
    signal.emit("wood", 5)
    assert received == [("wood", 5)]


def test_handlers_called_in_connection_order():
    signal = Signal()
    order = []
    signal.connect(lambda: order.append("first"))
    signal.connect(lambda: order.append("second"))
    signal.emit()
    assert order == ["first", "second"]


def test_connecting_twice_calls_once():
    signal = Signal()
    calls = []

    def handler():
        calls.append(1)

    signal.connect(handler)
    signal.connect(handler)
    signal.emit()
    assert calls == [1]
    assert len(signal) == 1


def test_disconnect_stops_delivery():
    signal = Signal()
    calls = []

    def handler():
        calls.append(1)

    signal.connect(handler)
    signal.disconnect(handler)
    signal.emit()
    assert calls == []
    assert handler not in signal


def test_disconnect_unknown_handler_raises():
    signal = Signal()
    with pytest.raises(ValueError):
        signal.disconnect(print)


def test_handler_may_disconnect_itself_during_emit():
    signal = Signal()
    calls = []

    def once():
        calls.append("once")
        signal.disconnect(once)

    def always():
        calls.append("always")

    signal.connect(once)
    signal.connect(always)
    signal.emit()
    assert len(signal) == 1
    assert (once in signal) is False
    assert (always in signal) is True
    signal.emit()
    assert calls == ["once", "always", "always"]