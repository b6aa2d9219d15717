"""Resumable Fibonacci sequence."""

import logging
from collections.abc import Sequence
from numbers import Real
from typing import Any, Generator, NamedTuple, Optional, Tuple

from .models import ControlSignal, IterationResult, Produced
from .protocols import LoggerProtocol
from .sequence_interface import LazySequence, interpret_control


class FibonacciState(NamedTuple):
    """Two most recent terms of the recurrence."""

    prev: Real
    curr: Real


INITIAL_STATE = FibonacciState(0, 1)


def fibonacci_step(
    state: FibonacciState,
    control: Optional[Any] = None,
    initial: FibonacciState = INITIAL_STATE,
) -> Tuple[FibonacciState, Produced[Real]]:
    """
    Compute one step of the recurrence.

    The emitted value is ``state.prev``. A reset signal replaces the next
    state with ``initial`` after the value has been computed, so it only
    affects later steps.

    Args:
        state: State before this step
        control: Control value supplied for this step
        initial: State to restore on reset

    Returns:
        Tuple of (state for the next step, result for this step)
    """
    output = state.prev
    next_state = FibonacciState(state.curr, state.prev + state.curr)

    if interpret_control(control) is ControlSignal.RESET:
        next_state = initial

    return next_state, Produced(output)


class FibonacciSequence(LazySequence[Real]):
    """
    Infinite Fibonacci producer that can be reset between steps.

    Passing a reset signal to ``advance`` returns the value already due and
    restarts the sequence from the initial state on the following call.
    """

    def __init__(
        self,
        initial: Tuple[Real, Real] = INITIAL_STATE,
        logger: Optional[LoggerProtocol] = None,
    ):
        """
        Initialize sequence.

        Args:
            initial: Pair of starting terms ``(prev, curr)``
            logger: Logger instance (defaults to module logger)
        """
        if (
            not isinstance(initial, Sequence)
            or len(initial) != 2
            or not all(isinstance(term, Real) for term in initial)
        ):
            raise ValueError("initial must be a pair of real numbers")
        self._initial = FibonacciState(*initial)
        self._state = self._initial
        self._logger = logger or logging.getLogger(__name__)

    def advance(self, control: Optional[Any] = None) -> IterationResult[Real]:
        self._state, result = fibonacci_step(self._state, control, self._initial)
        if self._state is self._initial:
            self._logger.debug(f"Sequence reset after emitting {result.value}")
        return result


def fibonacci_generator(
    initial: Tuple[Real, Real] = INITIAL_STATE,
) -> Generator[Real, Optional[bool], None]:
    """
    Native generator version of the resettable Fibonacci sequence.

    ``send(True)`` delivers the flag to the paused ``yield``, so the value it
    returns is already the restarted sequence (``0``). The generator must be
    primed with ``next()`` before the first ``send``.
    """
    prev, curr = initial
    while True:
        current = prev
        prev, curr = curr, current + curr
        reset = yield current
        if reset:
            prev, curr = initial
