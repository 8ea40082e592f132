"""Sequence producers, each in native and state machine form."""

from enum import IntEnum
from typing import Iterator, Optional

from .generator import LazyGenerator, producer
from .state_machine import Emit, StateMachineProducer


def _require_non_negative(field_name: str, value: int) -> None:
    if value < 0:
        raise ValueError(f"{field_name} must be non-negative, got {value}")


def _fibonacci_steps(count: int) -> Iterator[int]:
    a, b = 1, 1
    for _ in range(count):
        yield a
        a += b
        a, b = b, a


@producer
def fibonacci(count: int) -> Iterator[int]:
    """
    Emit the first ``count`` Fibonacci numbers: 1, 1, 2, 3, 5, ...

    Args:
        count: Number of values to emit

    Returns:
        LazyGenerator over the sequence
    """
    _require_non_negative("count", count)
    return _fibonacci_steps(count)


def _two_segment_steps(x: int, first_count: int, second_count: int) -> Iterator[int]:
    for _ in range(first_count):
        yield x
    for _ in range(second_count):
        yield x - 2


@producer
def two_segment(x: int, first_count: int = 3, second_count: int = 2) -> Iterator[int]:
    """
    Emit ``x`` first_count times, then ``x - 2`` second_count times.

    Args:
        x: Value emitted by the first segment
        first_count: Emissions in the first segment
        second_count: Emissions in the second segment

    Returns:
        LazyGenerator over the sequence
    """
    _require_non_negative("first_count", first_count)
    _require_non_negative("second_count", second_count)
    return _two_segment_steps(x, first_count, second_count)


class FibonacciStateMachine(StateMachineProducer[int]):
    """Fibonacci producer with its loop state held in ``a``, ``b`` and ``index``."""

    class ResumePoint(IntEnum):
        START = 0
        AFTER_EMIT = 1

    def __init__(self, count: int):
        super().__init__()
        _require_non_negative("count", count)
        self.count = count
        self.a = 1
        self.b = 1
        self.index = 0
        self.resume_point = self.ResumePoint.START

    def step(self) -> Optional[Emit[int]]:
        if self.resume_point == self.ResumePoint.AFTER_EMIT:
            self.a += self.b
            self.a, self.b = self.b, self.a
            self.index += 1

        if self.index >= self.count:
            return None

        self.resume_point = self.ResumePoint.AFTER_EMIT
        return Emit(self.a)


class TwoSegmentStateMachine(StateMachineProducer[int]):
    """
    Two sequential emit loops written as a state machine.

    The resume point records which loop is active, so resuming after the
    first loop is done continues in the second one.
    """

    class ResumePoint(IntEnum):
        FIRST_SEGMENT = 0
        SECOND_SEGMENT = 1
        DONE = 2

    def __init__(self, x: int, first_count: int = 3, second_count: int = 2):
        super().__init__()
        _require_non_negative("first_count", first_count)
        _require_non_negative("second_count", second_count)
        self.x = x
        self.first_count = first_count
        self.second_count = second_count
        self.first_emitted = 0
        self.second_emitted = 0
        self.resume_point = self.ResumePoint.FIRST_SEGMENT

    def step(self) -> Optional[Emit[int]]:
        if self.resume_point == self.ResumePoint.FIRST_SEGMENT:
            if self.first_emitted < self.first_count:
                self.first_emitted += 1
                return Emit(self.x)
            self.resume_point = self.ResumePoint.SECOND_SEGMENT

        if self.resume_point == self.ResumePoint.SECOND_SEGMENT:
            if self.second_emitted < self.second_count:
                self.second_emitted += 1
                return Emit(self.x - 2)
            self.resume_point = self.ResumePoint.DONE

        return None


def fibonacci_state_machine(count: int) -> LazyGenerator[int]:
    """State machine counterpart of fibonacci()."""
    return LazyGenerator(FibonacciStateMachine(count), name="fibonacci")


def two_segment_state_machine(
    x: int, first_count: int = 3, second_count: int = 2
) -> LazyGenerator[int]:
    """State machine counterpart of two_segment()."""
    return LazyGenerator(
        TwoSegmentStateMachine(x, first_count, second_count), name="two_segment"
    )
