"""Data models for generator state and statistics."""

from dataclasses import dataclass
from enum import Enum


class GeneratorStatus(str, Enum):
    """Lifecycle state of a generator."""

    NOT_STARTED = "not_started"
    SUSPENDED = "suspended"
    VALUE_READY = "value_ready"
    COMPLETED = "completed"
    FAILED = "failed"
    CLOSED = "closed"

    @property
    def is_terminal(self) -> bool:
        """True once no further values will ever be produced."""
        return self in (
            GeneratorStatus.COMPLETED,
            GeneratorStatus.FAILED,
            GeneratorStatus.CLOSED,
        )


@dataclass
class GeneratorStatistics:
    """Counters collected while a generator is driven."""

    values_produced: int = 0
    values_taken: int = 0
    resumes: int = 0
    elapsed_time: float = 0.0
