"""Result and control types shared by every sequence producer."""

from dataclasses import dataclass
from enum import Enum
from typing import Generic, TypeVar, Union

T = TypeVar("T")


class ControlSignal(str, Enum):
    """Control values a caller can pass to ``advance``."""

    RESET = "reset"


@dataclass(frozen=True)
class Produced(Generic[T]):
    """A value emitted by a producer."""

    value: T

    @property
    def done(self) -> bool:
        return False


@dataclass(frozen=True)
class Exhausted:
    """End-of-sequence marker. Carries no value."""

    @property
    def done(self) -> bool:
        return True


EXHAUSTED = Exhausted()

IterationResult = Union[Produced[T], Exhausted]
