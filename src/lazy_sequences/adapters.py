"""Adapters from native Python iterables to the advance contract."""

import logging
from typing import Any, Iterable, Iterator, Optional, TypeVar

from .models import EXHAUSTED, IterationResult, Produced
from .protocols import LoggerProtocol
from .sequence_interface import LazySequence

T = TypeVar("T")


class IterableSequence(LazySequence[T]):
    """
    Exposes any iterable through ``advance``.

    Works with lists, strings, generator objects and any object that
    defines ``__iter__``. When the source is a generator, control values are
    forwarded with ``send()``; other sources ignore them.

    Single Responsibility: Turn StopIteration into a sticky EXHAUSTED result.
    """

    def __init__(self, source: Iterable[T], logger: Optional[LoggerProtocol] = None):
        """
        Initialize adapter.

        Args:
            source: Iterable to pull values from
            logger: Logger instance (defaults to module logger)
        """
        self._iterator: Iterator[T] = iter(source)
        self._exhausted = False
        self._started = False
        self._logger = logger or logging.getLogger(__name__)

    def advance(self, control: Optional[Any] = None) -> IterationResult[T]:
        if self._exhausted:
            return EXHAUSTED

        try:
            # A generator cannot receive a value before its first yield
            if control is not None and self._started and hasattr(self._iterator, "send"):
                value = self._iterator.send(control)
            else:
                value = next(self._iterator)
        except StopIteration:
            self._exhausted = True
            self._logger.debug("Source iterable exhausted")
            return EXHAUSTED

        self._started = True
        return Produced(value)


def delegate(*iterables: Iterable[T]) -> Iterator[T]:
    """
    Generator that yields every item of each iterable in turn.

    Args:
        iterables: Sources to delegate to

    Yields:
        Items of the first iterable, then the second, and so on
    """
    for iterable in iterables:
        yield from iterable
