"""Explicit state machine producers.

A StateMachineProducer keeps the producer's live variables as attributes and
an enumerated resume point recording which emit site runs next. Each call to
step() continues from that resume point up to the next emit site.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Generic, Iterator, Optional, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class Emit(Generic[T]):
    """A value handed over at an emit point."""

    value: T


class StateMachineProducer(ABC, Generic[T]):
    """
    Base class for hand-written producers.

    Subclasses set ``resume_point`` to a member of their own IntEnum and
    implement step(). The base class adapts step() to the iterator protocol
    driven by LazyGenerator and guarantees release() runs exactly once,
    whether the producer completes, fails, or is abandoned.
    """

    def __init__(self):
        self.resume_point: int = 0
        self._finished = False
        self._released = False
        self.release_error: Optional[Exception] = None

    @abstractmethod
    def step(self) -> Optional[Emit[T]]:
        """Run from the current resume point to the next emit site.

        Returns:
            Emit(value) to hand over a value and suspend, None when no emit
            site remains
        """
        pass

    def release(self) -> None:
        """Release resources held by the paused computation."""
        pass

    @property
    def finished(self) -> bool:
        return self._finished

    def __iter__(self) -> Iterator[T]:
        return self

    def __next__(self) -> T:
        if self._finished:
            raise StopIteration

        try:
            emission = self.step()
        except StopIteration as e:
            self.close()
            raise RuntimeError(
                f"{type(self).__name__}.step() raised StopIteration"
            ) from e
        except BaseException:
            self.close()
            raise

        if emission is None:
            self.close()
            raise StopIteration
        return emission.value

    def close(self) -> None:
        """Stop the machine and release its resources once.

        An exception from release() is kept on ``release_error`` rather than
        raised, so it never replaces the outcome of step().
        """
        self._finished = True
        if self._released:
            return
        self._released = True
        try:
            self.release()
        except Exception as e:
            self.release_error = e
