"""Lazy Sequences - pull-based producers with a uniform advance contract."""

__version__ = "0.1.0"

from .adapters import IterableSequence, delegate
from .drivers import drain, forward, take, to_frame
from .fibonacci import (
    INITIAL_STATE,
    FibonacciSequence,
    FibonacciState,
    fibonacci_generator,
    fibonacci_step,
)
from .models import EXHAUSTED, ControlSignal, Exhausted, IterationResult, Produced
from .protocols import LoggerProtocol, SequenceProducer
from .sequence_interface import LazySequence, interpret_control
from .sequences import ArraySequence, CounterSequence

__all__ = [
    # Models
    "Produced",
    "Exhausted",
    "EXHAUSTED",
    "IterationResult",
    "ControlSignal",
    # Protocols
    "SequenceProducer",
    "LoggerProtocol",
    "LazySequence",
    "interpret_control",
    # Producers
    "FibonacciSequence",
    "FibonacciState",
    "INITIAL_STATE",
    "fibonacci_step",
    "fibonacci_generator",
    "ArraySequence",
    "CounterSequence",
    "IterableSequence",
    "delegate",
    # Drivers
    "take",
    "drain",
    "forward",
    "to_frame",
]
