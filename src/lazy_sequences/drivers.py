"""Caller-side loops that pull values from a producer."""

import logging
from typing import Any, Callable, List, Mapping, Optional

import pandas as pd

from .models import Exhausted
from .protocols import SequenceProducer

logger = logging.getLogger(__name__)


def take(
    producer: SequenceProducer,
    n: int,
    controls: Optional[Mapping[int, Any]] = None,
) -> List:
    """
    Pull up to ``n`` values from a producer.

    Args:
        producer: Producer to pull from
        n: Maximum number of values
        controls: Control value to pass at a given call index (0-based)

    Returns:
        Values in the order produced. Shorter than ``n`` if the producer
        was exhausted first.
    """
    if n < 0:
        raise ValueError("n must not be negative")
    controls = controls or {}

    values = []
    for index in range(n):
        result = producer.advance(controls.get(index))
        if isinstance(result, Exhausted):
            break
        values.append(result.value)
    return values


def drain(producer: SequenceProducer, limit: Optional[int] = None) -> List:
    """
    Pull values until the producer is exhausted.

    Args:
        producer: Producer to pull from
        limit: Upper bound on values pulled. Infinite producers need one.

    Returns:
        All values produced
    """
    if limit is not None and limit < 0:
        raise ValueError("limit must not be negative")

    values = []
    while limit is None or len(values) < limit:
        result = producer.advance()
        if isinstance(result, Exhausted):
            break
        values.append(result.value)
    return values


def forward(producer: SequenceProducer, sink: Callable[[Any], None], n: int) -> int:
    """
    Pass up to ``n`` produced values to ``sink``.

    Returns:
        Number of values forwarded
    """
    forwarded = 0
    for value in take(producer, n):
        sink(value)
        forwarded += 1
    logger.debug(f"Forwarded {forwarded} values")
    return forwarded


def to_frame(producer: SequenceProducer, n: int) -> pd.DataFrame:
    """
    Collect up to ``n`` values into a DataFrame.

    Returns:
        DataFrame with ``step`` (0-based call index) and ``value`` columns.
        ``value`` keeps the original Python objects, so large integers stay
        exact.
    """
    values = take(producer, n)
    df = pd.DataFrame(
        {
            "step": range(len(values)),
            "value": pd.Series(values, dtype="object"),
        }
    )
    logger.info(f"Collected {len(df)} values into DataFrame")
    return df
