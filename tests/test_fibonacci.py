"""Tests for fibonacci module."""

import pandas as pd
import pytest

from lazy_sequences.fibonacci import (
    INITIAL_STATE,
    FibonacciSequence,
    FibonacciState,
    fibonacci_generator,
    fibonacci_step,
)
from lazy_sequences.models import ControlSignal, Produced


def fib(n):
    a, b = 0, 1
    for _ in range(n):
        a, b = b, a + b
    return a


def test_first_seven_values():
    """Test seven plain advances give the start of the sequence."""
    sequence = FibonacciSequence()

    values = [sequence.advance().value for _ in range(7)]

    assert values == [0, 1, 1, 2, 3, 5, 8]


def test_reset_applies_after_emission():
    """Test a reset returns the value already due, then restarts."""
    sequence = FibonacciSequence()
    for _ in range(7):
        sequence.advance()

    assert sequence.advance(True) == Produced(13)
    assert [sequence.advance().value for _ in range(3)] == [0, 1, 1]


def test_nth_value_matches_recurrence():
    """Test the n-th value equals fib(n)."""
    sequence = FibonacciSequence()

    for n in range(200):
        assert sequence.advance().value == fib(n)


def test_never_done():
    """Test the sequence does not terminate."""
    sequence = FibonacciSequence()

    assert not any(sequence.advance().done for _ in range(1000))


@pytest.mark.parametrize("k", [0, 1, 5, 30])
def test_reset_at_any_call(k):
    """Test a reset at call k gives 0 then 1 on the next two calls."""
    sequence = FibonacciSequence()
    for _ in range(k):
        sequence.advance()

    sequence.advance(ControlSignal.RESET)

    assert sequence.advance().value == 0
    assert sequence.advance().value == 1


@pytest.mark.parametrize("control", [None, False, 0, 0.0, "", []])
def test_falsy_control_is_noop(control):
    """Test falsy control values leave the sequence unchanged."""
    plain = FibonacciSequence()
    signalled = FibonacciSequence()

    expected = [plain.advance().value for _ in range(10)]
    actual = [signalled.advance(control).value for _ in range(10)]

    assert actual == expected


@pytest.mark.parametrize(
    "control",
    [1.0, "rewind", [1], object(), pd.Series([True]).all()],
)
def test_any_truthy_control_resets(control):
    """Test truthy control values of any type restart the sequence."""
    sequence = FibonacciSequence()
    for _ in range(7):
        sequence.advance()

    assert sequence.advance(control).value == 13
    assert [sequence.advance().value for _ in range(2)] == [0, 1]


class NoTruthValue:
    def __bool__(self):
        raise TypeError("no truth value")


@pytest.mark.parametrize("control", [pd.Series([1, 2]), NoTruthValue()])
def test_control_without_truth_value_is_ignored(control):
    """Test controls that cannot be tested for truth do not raise."""
    sequence = FibonacciSequence()
    for _ in range(3):
        sequence.advance()

    assert sequence.advance(control).value == 2
    assert sequence.advance().value == 3


def test_independent_instances_are_deterministic():
    """Test two instances fed the same controls produce the same output."""
    controls = [None, None, True, None, None, None, True, None]
    first = FibonacciSequence()
    second = FibonacciSequence()

    assert [first.advance(c).value for c in controls] == [
        second.advance(c).value for c in controls
    ]


def test_custom_initial_state():
    """Test a custom starting pair and reset back to it."""
    sequence = FibonacciSequence(initial=(2, 1))

    assert [sequence.advance().value for _ in range(5)] == [2, 1, 3, 4, 7]
    sequence.advance(True)
    assert sequence.advance().value == 2


@pytest.mark.parametrize("initial", [(0, 1, 2), ("a", "b"), 5, None, (1j, 2j)])
def test_invalid_initial_state(initial):
    """Test a malformed starting state is rejected."""
    with pytest.raises(ValueError):
        FibonacciSequence(initial=initial)


def test_float_initial_state():
    """Test real-valued starting terms are accepted."""
    sequence = FibonacciSequence(initial=(0.5, 0.5))

    assert [sequence.advance().value for _ in range(4)] == [0.5, 0.5, 1.0, 1.5]


def test_step_function_is_pure():
    """Test the step function depends only on its arguments."""
    state = FibonacciState(5, 8)

    assert fibonacci_step(state) == (FibonacciState(8, 13), Produced(5))
    assert fibonacci_step(state, True) == (INITIAL_STATE, Produced(5))
    assert state == FibonacciState(5, 8)


def test_python_iterator_protocol():
    """Test next() and send() work on the producer."""
    sequence = FibonacciSequence()

    assert iter(sequence) is sequence
    assert [next(sequence) for _ in range(4)] == [0, 1, 1, 2]
    assert sequence.send(True) == 3
    assert next(sequence) == 0


def test_native_generator_resets_on_send():
    """Test the native generator restarts on the value returned by send()."""
    gen = fibonacci_generator()

    assert [next(gen) for _ in range(7)] == [0, 1, 1, 2, 3, 5, 8]
    assert gen.send(True) == 0
    assert [next(gen) for _ in range(3)] == [1, 1, 2]


def test_reset_reported_to_injected_logger():
    """Test a logger exposing only debug() receives the reset message."""

    class RecordingLogger:
        def __init__(self):
            self.messages = []

        def debug(self, message):
            self.messages.append(message)

    recorder = RecordingLogger()
    sequence = FibonacciSequence(logger=recorder)
    sequence.advance()
    sequence.advance()

    sequence.advance(True)

    assert recorder.messages == ["Sequence reset after emitting 1"]
