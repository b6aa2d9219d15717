"""Abstract interface for lazy sequence producers."""

import logging
from abc import ABC, abstractmethod
from typing import Any, Generic, Optional, TypeVar

from .models import ControlSignal, Exhausted, IterationResult

T = TypeVar("T")

logger = logging.getLogger(__name__)


def interpret_control(control: Optional[Any]) -> Optional[ControlSignal]:
    """Map a caller-supplied control value to a known signal.

    Args:
        control: Value passed to ``advance``. ``ControlSignal`` members are
            used as-is, any other truthy value means reset, and anything
            falsy means no signal.

    Returns:
        The recognised signal, or None. Values without a truth value
        (such as multi-element arrays) are ignored.
    """
    try:
        requested = bool(control)
    except (ValueError, TypeError):
        logger.debug(f"Ignoring control value with no truth value: {control!r}")
        return None

    if not requested:
        return None
    if isinstance(control, ControlSignal):
        return control
    if not isinstance(control, bool):
        logger.debug(f"Treating truthy control value {control!r} as reset")
    return ControlSignal.RESET


class LazySequence(ABC, Generic[T]):
    """Abstract base class for producers that compute values on demand.

    Subclasses implement ``advance``. The base class makes every producer
    usable with ``for`` loops, ``next()`` and ``send()``.
    """

    @abstractmethod
    def advance(self, control: Optional[Any] = None) -> IterationResult[T]:
        """Produce the next result.

        Exactly one result is returned per call. A producer that has no more
        values returns ``EXHAUSTED`` instead of raising.

        Args:
            control: Optional control value (see ``interpret_control``)

        Returns:
            ``Produced(value)`` or ``EXHAUSTED``
        """
        pass

    def __iter__(self) -> "LazySequence[T]":
        return self

    def __next__(self) -> T:
        return self.send(None)

    def send(self, control: Optional[Any]) -> T:
        """Advance with a control value and return the produced value.

        Raises:
            StopIteration: If the producer is exhausted
        """
        result = self.advance(control)
        if isinstance(result, Exhausted):
            raise StopIteration
        return result.value
