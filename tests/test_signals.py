import pytest

from colorecho.signals import Signal


def test_emit_calls_slots_in_order_with_args():
    calls = []
    signal = Signal("moved")
    signal.connect(lambda x, y: calls.append(("a", x, y)))
    signal.connect(lambda x, y: calls.append(("b", x, y)))
    signal.emit(3, 4)
    assert calls == [("a", 3, 4), ("b", 3, 4)]


def test_emit_without_slots_does_nothing():
    signal = Signal()
    signal.emit()
    assert len(signal) == 0


def test_disconnect_removes_slot():
    calls = []

    def slot():
        calls.append(1)

    signal = Signal()
    signal.connect(slot)
    assert len(signal) == 1
    signal.disconnect(slot)
    assert len(signal) == 0
    signal.emit()
    assert calls == []


def test_disconnect_unknown_slot_raises():
    signal = Signal()
    with pytest.raises(ValueError):
        signal.disconnect(print)


def test_connect_non_callable_raises():
    signal = Signal()
    with pytest.raises(TypeError):
        signal.connect(42)


def test_same_slot_connected_twice_runs_twice():
    calls = []

    def slot(value):
        calls.append(value)

    signal = Signal()
    signal.connect(slot)
    signal.connect(slot)
    signal.emit("x")
    assert calls == ["x", "x"]
    signal.disconnect(slot)
    assert len(signal) == 1


def test_slot_disconnecting_during_emit_does_not_break_iteration():
    calls = []
    signal = Signal()

    def first():
        calls.append("first")
        signal.disconnect(first)

    signal.connect(first)
    signal.connect(lambda: calls.append("second"))
    signal.emit()
    signal.emit()
    assert calls == ["first", "second", "second"]