"""Configuration management for the application."""

import os
from dataclasses import dataclass

from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()

PRODUCERS = ("fibonacci", "two_segment")
STYLES = ("native", "state_machine")
OUTPUTS = ("lines", "table")


@dataclass
class SequenceConfig:
    """Sequence generation parameters."""

    producer: str = "fibonacci"
    style: str = "native"
    count: int = 10
    start: int = 5
    batch_size: int = 4
    output: str = "lines"
    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> "SequenceConfig":
        """Load sequence configuration from environment variables.

        Reads SEQUENCE_PRODUCER, SEQUENCE_STYLE, SEQUENCE_COUNT,
        SEQUENCE_START, SEQUENCE_BATCH_SIZE, SEQUENCE_OUTPUT and LOG_LEVEL.
        """
        return cls(
            producer=os.getenv("SEQUENCE_PRODUCER", "fibonacci").lower(),
            style=os.getenv("SEQUENCE_STYLE", "native").lower(),
            count=int(os.getenv("SEQUENCE_COUNT", "10")),
            start=int(os.getenv("SEQUENCE_START", "5")),
            batch_size=int(os.getenv("SEQUENCE_BATCH_SIZE", "4")),
            output=os.getenv("SEQUENCE_OUTPUT", "lines").lower(),
            log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
        )

    def __post_init__(self):
        """Validate configuration after initialization."""
        if self.producer not in PRODUCERS:
            raise ValueError(
                f"Unknown producer: {self.producer}. Valid options: {', '.join(PRODUCERS)}"
            )
        if self.style not in STYLES:
            raise ValueError(
                f"Unknown style: {self.style}. Valid options: {', '.join(STYLES)}"
            )
        if self.output not in OUTPUTS:
            raise ValueError(
                f"Unknown output: {self.output}. Valid options: {', '.join(OUTPUTS)}"
            )
        if self.count < 0:
            raise ValueError("count must be non-negative")
        if self.batch_size <= 0:
            raise ValueError("batch_size must be positive")


def get_sequence_config() -> SequenceConfig:
    """Get sequence configuration."""
    return SequenceConfig.from_env()
