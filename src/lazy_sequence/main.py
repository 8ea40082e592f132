"""Main entry point for the lazy sequence demo."""

import logging
import sys
from typing import List

from .config import SequenceConfig, get_sequence_config
from .exceptions import LazySequenceError
from .generator import LazyGenerator
from .producers import (
    fibonacci,
    fibonacci_state_machine,
    two_segment,
    two_segment_state_machine,
)
from .sinks import DataFrameSink

logger = logging.getLogger(__name__)


def setup_logging(level: str = "INFO"):
    """Configure logging.

    Args:
        level: Root logging level name
    """
    logging.basicConfig(
        level=getattr(logging, level, logging.INFO),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[logging.StreamHandler(sys.stdout)],
    )


def build_generator(config: SequenceConfig) -> LazyGenerator[int]:
    """Create the generator selected by the configuration."""
    if config.producer == "fibonacci":
        if config.style == "state_machine":
            return fibonacci_state_machine(config.count)
        return fibonacci(config.count)

    if config.style == "state_machine":
        return two_segment_state_machine(config.start)
    return two_segment(config.start)


def drain(generator: LazyGenerator[int]) -> List[int]:
    """Output loop: print each value as it is taken from the generator."""
    values = []
    while not generator.is_exhausted():
        value = generator.take_value()
        print(value)
        values.append(value)
    return values


def main() -> int:
    """Main execution function."""
    try:
        config = get_sequence_config()
        setup_logging(config.log_level)

        logger.info(f"Producer: {config.producer} ({config.style})")

        with build_generator(config) as generator:
            if config.output == "table":
                df = DataFrameSink().collect(generator, config.batch_size)
                print(df.to_string(index=False))
            else:
                drain(generator)

            stats = generator.statistics
            logger.info(
                f"Produced {stats.values_produced} values in {stats.resumes} resumes "
                f"({stats.elapsed_time * 1000:.3f} ms inside the producer)"
            )
        return 0

    except KeyboardInterrupt:
        logger.warning("Execution interrupted by user")
        return 130
    except (LazySequenceError, ValueError) as e:
        logger.error(f"Error during execution: {e}", exc_info=True)
        return 1


if __name__ == "__main__":
    sys.exit(main())
