import pytest

from skyflap.data_models import Mode
from skyflap.state_machine import StateMachine


def test_full_cycle():
    machine = StateMachine()
    assert machine.mode is Mode.IDLE
    assert machine.transition(Mode.PLAYING)
    assert machine.transition(Mode.TERMINAL)
    assert machine.transition(Mode.IDLE)
    assert machine.mode is Mode.IDLE


@pytest.mark.parametrize("start, target", [
    (Mode.IDLE, Mode.TERMINAL),
    (Mode.PLAYING, Mode.IDLE),
    (Mode.TERMINAL, Mode.PLAYING),
    (Mode.IDLE, Mode.IDLE),
])
def test_illegal_transitions_are_refused(start, target):
    machine = StateMachine(start)
    assert not machine.can_transition(target)
    assert not machine.transition(target)
    assert machine.mode is start


def test_listeners_see_each_change():
    machine = StateMachine()
    seen = []
    machine.add_listener(lambda old, new: seen.append((old, new)))
    machine.transition(Mode.PLAYING)
    machine.transition(Mode.IDLE)  # refused
    machine.transition(Mode.TERMINAL)
    assert seen == [(Mode.IDLE, Mode.PLAYING), (Mode.PLAYING, Mode.TERMINAL)]


def test_failing_listener_does_not_block_transition():
    machine = StateMachine()
    seen = []

    def broken(old, new):
        raise RuntimeError("boom")

    machine.add_listener(broken)
    machine.add_listener(lambda old, new: seen.append(new))
    assert machine.transition(Mode.PLAYING)
    assert machine.mode is Mode.PLAYING
    assert seen == [Mode.PLAYING]


def test_remove_listener():
    machine = StateMachine()
    seen = []
    listener = lambda old, new: seen.append(new)  # noqa: E731
    machine.add_listener(listener)
    machine.remove_listener(listener)
    machine.remove_listener(listener)
    machine.transition(Mode.PLAYING)
    assert seen == []
