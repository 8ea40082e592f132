"""Tests for producers module."""

import pytest

from lazy_sequence.generator import LazyGenerator
from lazy_sequence.producers import (
    FibonacciStateMachine,
    TwoSegmentStateMachine,
    fibonacci,
    fibonacci_state_machine,
    two_segment,
    two_segment_state_machine,
)

FIBONACCI_FACTORIES = [fibonacci, fibonacci_state_machine]
TWO_SEGMENT_FACTORIES = [two_segment, two_segment_state_machine]


@pytest.mark.parametrize("factory", FIBONACCI_FACTORIES)
def test_fibonacci_first_five(factory):
    """Test five paired checks and takes, then exhaustion on the sixth check."""
    generator = factory(5)
    assert isinstance(generator, LazyGenerator)

    values = []
    for _ in range(5):
        assert generator.is_exhausted() is False
        values.append(generator.take_value())

    assert values == [1, 1, 2, 3, 5]
    assert generator.is_exhausted() is True


@pytest.mark.parametrize("factory", FIBONACCI_FACTORIES)
def test_fibonacci_longer_sequence(factory):
    """Test a longer run of the sequence."""
    assert list(factory(10)) == [1, 1, 2, 3, 5, 8, 13, 21, 34, 55]


@pytest.mark.parametrize("factory", FIBONACCI_FACTORIES)
def test_fibonacci_zero_count(factory):
    """Test that a zero count is an empty sequence."""
    generator = factory(0)
    assert generator.is_exhausted()
    assert generator.completed


@pytest.mark.parametrize("factory", FIBONACCI_FACTORIES)
def test_fibonacci_negative_count(factory):
    """Test that a negative count is rejected at construction."""
    with pytest.raises(ValueError, match="count must be non-negative"):
        factory(-1)


def test_fibonacci_generator_name():
    """Test that both forms report the same name."""
    assert fibonacci(1).name == "fibonacci"
    assert fibonacci_state_machine(1).name == "fibonacci"


def test_fibonacci_state_machine_keeps_pair():
    """Test that the state machine holds the (a, b) pair between resumes."""
    machine = FibonacciStateMachine(5)

    assert next(machine) == 1
    assert (machine.a, machine.b) == (1, 1)
    assert next(machine) == 1
    assert next(machine) == 2
    assert (machine.a, machine.b) == (2, 3)


@pytest.mark.parametrize("factory", TWO_SEGMENT_FACTORIES)
def test_two_segment_resumes_into_second_segment(factory):
    """Test that resuming after the first segment enters the second one."""
    generator = factory(7)

    first = [next(generator) for _ in range(3)]
    assert first == [7, 7, 7]

    assert list(generator) == [5, 5]
    assert generator.completed


@pytest.mark.parametrize("factory", TWO_SEGMENT_FACTORIES)
def test_two_segment_custom_counts(factory):
    """Test segment lengths, including an empty first segment."""
    assert list(factory(4, first_count=1, second_count=3)) == [4, 2, 2, 2]
    assert list(factory(4, first_count=0, second_count=2)) == [2, 2]
    assert list(factory(4, first_count=2, second_count=0)) == [4, 4]


@pytest.mark.parametrize("factory", TWO_SEGMENT_FACTORIES)
def test_two_segment_negative_counts(factory):
    """Test that negative segment lengths are rejected."""
    with pytest.raises(ValueError, match="first_count"):
        factory(1, first_count=-1)
    with pytest.raises(ValueError, match="second_count"):
        factory(1, second_count=-2)


def test_two_segment_state_machine_resume_points():
    """Test the recorded emit site as the machine advances."""
    machine = TwoSegmentStateMachine(9)
    points = TwoSegmentStateMachine.ResumePoint

    for _ in range(3):
        next(machine)
    assert machine.resume_point == points.FIRST_SEGMENT

    assert next(machine) == 7
    assert machine.resume_point == points.SECOND_SEGMENT

    assert list(machine) == [7]
    assert machine.resume_point == points.DONE
