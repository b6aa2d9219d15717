"""Main entry point: walk through every producer in the package."""

import logging
import sys

import pandas as pd

from .adapters import IterableSequence, delegate
from .config import get_demo_config
from .drivers import drain, take, to_frame
from .fibonacci import FibonacciSequence, fibonacci_generator
from .sequences import ArraySequence, CounterSequence

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    handlers=[logging.StreamHandler(sys.stdout)],
)

logger = logging.getLogger(__name__)


def setup_logging(verbose: bool = False, level: str = "INFO"):
    """Configure logging level.

    Args:
        verbose: Enable verbose logging (overrides level)
        level: Level name to use otherwise
    """
    if verbose:
        logging.getLogger().setLevel(logging.DEBUG)
    else:
        logging.getLogger().setLevel(level)


def run_walkthrough() -> pd.DataFrame:
    """Run each producer and return one summary row per demo."""
    rows = []

    it = ArraySequence(["yo", "ya"])
    rows.append(("array", [it.advance(), it.advance(), it.advance()]))

    rows.append(("counter", take(CounterSequence(), 3)))

    class Countdown:
        def __iter__(self):
            yield 1
            yield 2
            yield 3

    rows.append(("iterable object", drain(IterableSequence(Countdown()))))
    rows.append(("spread string", drain(IterableSequence("abc"))))
    rows.append(("delegation", take(IterableSequence(delegate(["x", "y", "z"])), 2)))

    sequence = FibonacciSequence()
    rows.append(("fibonacci", take(sequence, 7)))
    rows.append(("fibonacci reset", take(sequence, 4, controls={0: True})))

    gen = fibonacci_generator()
    native = [next(gen) for _ in range(7)]
    native.append(gen.send(True))
    rows.append(("native send reset", native))

    return pd.DataFrame(rows, columns=["demo", "output"])


def main():
    """Main execution function."""
    try:
        config = get_demo_config()
        setup_logging(level=config.log_level)

        logger.info("Starting lazy sequences walkthrough")
        logger.info("=" * 80)

        summary = run_walkthrough()
        print(summary.to_string(index=False))

        print(f"\nFirst {config.demo_count} Fibonacci sequence numbers:")
        sequence = FibonacciSequence()
        frame = to_frame(sequence, config.demo_count)
        for value in frame["value"]:
            print(value)

        logger.info("Walkthrough completed successfully")

    except Exception as e:
        logger.error(f"Error during execution: {e}", exc_info=True)
        sys.exit(1)


if __name__ == "__main__":
    main()
