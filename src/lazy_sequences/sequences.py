"""Bounded and counting sequence producers."""

import logging
from typing import Any, Optional, Sequence, TypeVar

from .models import EXHAUSTED, ControlSignal, IterationResult, Produced
from .protocols import LoggerProtocol
from .sequence_interface import LazySequence, interpret_control

T = TypeVar("T")


class ArraySequence(LazySequence[T]):
    """
    Walks a finite ordered collection one item at a time.

    Once the last item has been produced every further call returns
    ``EXHAUSTED``. Control values are ignored.
    """

    def __init__(self, items: Sequence[T], logger: Optional[LoggerProtocol] = None):
        """
        Initialize sequence.

        Args:
            items: Ordered collection to walk
            logger: Logger instance (defaults to module logger)
        """
        self._items = items
        self._next_index = 0
        self._logger = logger or logging.getLogger(__name__)

    @property
    def remaining(self) -> int:
        """Number of items not yet produced."""
        return len(self._items) - self._next_index

    def advance(self, control: Optional[Any] = None) -> IterationResult[T]:
        if self._next_index >= len(self._items):
            return EXHAUSTED

        value = self._items[self._next_index]
        self._next_index += 1
        if self._next_index == len(self._items):
            self._logger.debug(f"Produced last of {len(self._items)} items")
        return Produced(value)


class CounterSequence(LazySequence[int]):
    """Infinite id counter: ``start, start + step, start + 2 * step, ...``"""

    def __init__(self, start: int = 0, step: int = 1, logger: Optional[LoggerProtocol] = None):
        if step == 0:
            raise ValueError("step must be non-zero")
        self.start = start
        self.step = step
        self._next_id = start
        self._logger = logger or logging.getLogger(__name__)

    def advance(self, control: Optional[Any] = None) -> IterationResult[int]:
        output = self._next_id
        self._next_id += self.step

        # Reset lands after the current id has been handed out
        if interpret_control(control) is ControlSignal.RESET:
            self._logger.debug(f"Counter reset to {self.start} after emitting {output}")
            self._next_id = self.start

        return Produced(output)
