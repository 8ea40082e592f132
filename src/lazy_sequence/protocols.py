"""Protocol definitions for producers and collaborators."""

from typing import Iterator, Protocol, TypeVar, Union

T_co = TypeVar("T_co", covariant=True)


class Producer(Protocol[T_co]):
    """Protocol for execution states the generator core can drive.

    Native Python generators and StateMachineProducer both satisfy it.
    """

    def __next__(self) -> T_co:
        """Run until the next emit point and return the emitted value."""
        ...

    def __iter__(self) -> Iterator[T_co]:
        ...


class LoggerProtocol(Protocol):
    """Protocol for logging."""

    def info(self, message: str) -> None:
        """Log info message."""
        ...

    def debug(self, message: str) -> None:
        """Log debug message."""
        ...

    def warning(self, message: str) -> None:
        """Log warning message."""
        ...

    def error(self, message: str, exc_info: Union[bool, BaseException] = False) -> None:
        """Log error message."""
        ...
