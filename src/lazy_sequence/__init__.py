"""Lazy Sequence - pull-driven generators with suspend-at-yield semantics."""

__version__ = "0.1.0"

from .exceptions import (
    InvalidProducerError,
    LazySequenceError,
    ProducerFailure,
    ResourceTeardownFailure,
    UsageError,
)
from .generator import LazyGenerator, producer
from .models import GeneratorStatistics, GeneratorStatus
from .producers import (
    FibonacciStateMachine,
    TwoSegmentStateMachine,
    fibonacci,
    fibonacci_state_machine,
    two_segment,
    two_segment_state_machine,
)
from .sinks import DataFrameSink, ValueBatcher
from .state_machine import Emit, StateMachineProducer

__all__ = [
    # Core
    "LazyGenerator",
    "producer",
    # State machines
    "Emit",
    "StateMachineProducer",
    # Models
    "GeneratorStatus",
    "GeneratorStatistics",
    # Errors
    "LazySequenceError",
    "ProducerFailure",
    "UsageError",
    "ResourceTeardownFailure",
    "InvalidProducerError",
    # Producers
    "fibonacci",
    "fibonacci_state_machine",
    "two_segment",
    "two_segment_state_machine",
    "FibonacciStateMachine",
    "TwoSegmentStateMachine",
    # Sinks
    "ValueBatcher",
    "DataFrameSink",
]
