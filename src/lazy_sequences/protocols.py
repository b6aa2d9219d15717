"""Protocol definitions for dependency inversion."""

from typing import Any, Optional, Protocol, TypeVar

from .models import IterationResult

T_co = TypeVar("T_co", covariant=True)


class SequenceProducer(Protocol[T_co]):
    """Protocol for pull-based sequence producers."""

    def advance(self, control: Optional[Any] = None) -> "IterationResult[T_co]":
        """Produce the next result, optionally steered by a control value."""
        ...


class LoggerProtocol(Protocol):
    """Protocol for the logger producers report resets and exhaustion to."""

    def debug(self, message: str) -> None:
        """Log debug message."""
        ...
