"""Pull-driven generator core.

A LazyGenerator owns one paused computation (its execution state) and drives
it forward one emit point at a time, only when the consumer asks for it.
Consumers check is_exhausted() before every take_value().
"""

import logging
import time
from functools import wraps
from typing import Any, Callable, Generic, Iterable, Optional, TypeVar

from .exceptions import (
    InvalidProducerError,
    ProducerFailure,
    ResourceTeardownFailure,
    UsageError,
)
from .models import GeneratorStatistics, GeneratorStatus
from .protocols import LoggerProtocol, Producer

T = TypeVar("T")


class LazyGenerator(Generic[T]):
    """
    Lazy, pull-driven sequence backed by a suspendable producer.

    The execution state is either a native Python generator object or a
    StateMachineProducer. It is owned exclusively by this object and
    released by close(), on leaving a ``with`` block, or when the generator
    is garbage collected.
    """

    def __init__(
        self,
        execution_state: Producer[T],
        name: Optional[str] = None,
        logger: Optional[LoggerProtocol] = None,
    ):
        """
        Initialize the generator in the not-started state.

        Args:
            execution_state: Iterator to drive (native generator or state machine)
            name: Name used in logs and error messages
            logger: Logger instance (defaults to module logger)

        Raises:
            InvalidProducerError: If execution_state is not an iterator
        """
        if not hasattr(execution_state, "__next__"):
            raise InvalidProducerError(
                f"Expected an iterator as execution state, got {type(execution_state).__name__}"
            )

        self._execution_state: Optional[Producer[T]] = execution_state
        self._name = (
            name
            or getattr(execution_state, "__name__", None)
            or type(execution_state).__name__
        )
        self._logger = logger or logging.getLogger(__name__)

        self._status = GeneratorStatus.NOT_STARTED
        self._pending_value: Optional[T] = None
        self._value_ready = False
        self._return_value: Any = None
        self._failure: Optional[ProducerFailure] = None
        self._teardown_failure: Optional[ResourceTeardownFailure] = None
        self._statistics = GeneratorStatistics()

    @classmethod
    def from_iterable(
        cls, iterable: Iterable[T], name: Optional[str] = None
    ) -> "LazyGenerator[T]":
        """Wrap any iterable as a lazy generator."""
        return cls(iter(iterable), name=name or type(iterable).__name__)

    @property
    def name(self) -> str:
        return self._name

    @property
    def status(self) -> GeneratorStatus:
        return self._status

    @property
    def value_ready(self) -> bool:
        return self._value_ready

    @property
    def completed(self) -> bool:
        return self._status is GeneratorStatus.COMPLETED

    @property
    def failure(self) -> Optional[BaseException]:
        """The exception the producer raised, if it failed."""
        return self._failure.cause if self._failure else None

    @property
    def teardown_failure(self) -> Optional[ResourceTeardownFailure]:
        return self._teardown_failure

    @property
    def return_value(self) -> Any:
        """Value returned by a native producer when it completed."""
        return self._return_value

    @property
    def statistics(self) -> GeneratorStatistics:
        return self._statistics

    def is_exhausted(self) -> bool:
        """
        Report whether the generator has no more values.

        Resumes the producer at most once, and only when no value is
        buffered. Repeated calls without take_value() are idempotent.

        Returns:
            False when a value is buffered, True when completed or closed

        Raises:
            ProducerFailure: If the producer failed, now or on an earlier resume
        """
        if self._value_ready:
            return False

        if self._status is GeneratorStatus.FAILED:
            self._raise_failure()

        if self._status.is_terminal:
            return True

        self._resume()

        if self._status is GeneratorStatus.FAILED:
            self._raise_failure()

        return not self._value_ready

    def has_next(self) -> bool:
        """Return True when a value can be taken."""
        return not self.is_exhausted()

    def take_value(self) -> T:
        """
        Take the buffered value, transferring it to the caller.

        Returns:
            The value most recently emitted by the producer

        Raises:
            UsageError: If no value is buffered
        """
        if not self._value_ready:
            raise UsageError(
                f"No value buffered in {self._name} (status: {self._status.value}). "
                f"Call is_exhausted() first."
            )

        value = self._pending_value
        self._pending_value = None
        self._value_ready = False
        self._status = GeneratorStatus.SUSPENDED
        self._statistics.values_taken += 1
        return value

    def close(self) -> None:
        """
        Abandon the generator and release its execution state.

        Safe to call at any point and more than once. A failure while
        releasing is logged and kept on ``teardown_failure``, never raised.
        """
        self._close(quiet=False)

    def _close(self, quiet: bool) -> None:
        execution_state = self._execution_state
        if execution_state is None:
            return

        self._execution_state = None
        was_started = self._status is not GeneratorStatus.NOT_STARTED
        self._pending_value = None
        self._value_ready = False
        self._status = GeneratorStatus.CLOSED

        close_method = getattr(execution_state, "close", None)
        if close_method is not None:
            try:
                close_method()
            except Exception as e:
                self._record_teardown_failure(e)
                return

        if self._collect_release_error(execution_state):
            return

        if self._logger:
            if was_started:
                log = self._logger.debug if quiet else self._logger.info
                log(
                    f"Abandoned {self._name} after "
                    f"{self._statistics.values_produced} values"
                )
            else:
                self._logger.debug(f"Closed {self._name} before it started")

    def _resume(self) -> None:
        """Run the producer to its next emit point, completion, or failure."""
        self._statistics.resumes += 1
        if self._logger:
            self._logger.debug(
                f"Resuming {self._name} (resume {self._statistics.resumes})"
            )

        execution_state = self._execution_state
        start_time = time.perf_counter()
        try:
            value = next(execution_state)
        except StopIteration as e:
            self._return_value = e.value
            self._status = GeneratorStatus.COMPLETED
            self._execution_state = None
            self._collect_release_error(execution_state)
            if self._logger:
                self._logger.info(
                    f"{self._name} completed after "
                    f"{self._statistics.values_produced} values"
                )
        except Exception as e:
            failure = ProducerFailure(e, self._name)
            failure.__cause__ = e
            self._failure = failure
            self._status = GeneratorStatus.FAILED
            self._execution_state = None
            self._collect_release_error(execution_state)
            if self._logger:
                self._logger.warning(f"{failure}")
        else:
            self._pending_value = value
            self._value_ready = True
            self._status = GeneratorStatus.VALUE_READY
            self._statistics.values_produced += 1
            if self._logger:
                self._logger.debug(f"{self._name} emitted {value!r}")
        finally:
            self._statistics.elapsed_time += time.perf_counter() - start_time

    def _record_teardown_failure(self, error: Exception) -> None:
        self._teardown_failure = ResourceTeardownFailure(error, self._name)
        self._teardown_failure.__cause__ = error
        if self._logger:
            self._logger.error(f"{self._teardown_failure}", exc_info=error)

    def _collect_release_error(self, execution_state: Producer[T]) -> bool:
        """Surface a release error a state machine kept instead of raising."""
        error = getattr(execution_state, "release_error", None)
        if error is None or self._teardown_failure is not None:
            return False
        self._record_teardown_failure(error)
        return True

    def _raise_failure(self) -> None:
        raise self._failure.with_traceback(None)

    def __iter__(self) -> "LazyGenerator[T]":
        return self

    def __next__(self) -> T:
        if self.is_exhausted():
            raise StopIteration
        return self.take_value()

    def __enter__(self):
        """Context manager entry."""
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Context manager exit."""
        self.close()

    def __del__(self):
        if getattr(self, "_execution_state", None) is not None:
            self._close(quiet=True)

    def __repr__(self) -> str:
        return f"<LazyGenerator {self._name} status={self._status.value}>"


def producer(
    func: Optional[Callable[..., Producer[T]]] = None, *, name: Optional[str] = None
):
    """
    Turn a producer definition into a factory of LazyGenerator objects.

    The definition is a generator function or any callable returning an
    iterator, such as a StateMachineProducer factory. Usable bare (``@producer``) or
    with a name (``@producer(name="fib")``).
    """

    def decorator(fn: Callable[..., Producer[T]]) -> Callable[..., LazyGenerator[T]]:
        @wraps(fn)
        def factory(*args, **kwargs) -> LazyGenerator[T]:
            return LazyGenerator(fn(*args, **kwargs), name=name or fn.__name__)

        return factory

    if func is not None:
        return decorator(func)
    return decorator
