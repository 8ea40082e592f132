"""Exception types raised by the lazy sequence runtime."""

from typing import Optional


class LazySequenceError(Exception):
    """Base class for all lazy sequence errors."""

    pass


class ProducerFailure(LazySequenceError):
    """Raised when a producer raised instead of emitting or completing.

    The original exception is kept on ``cause`` and chained as ``__cause__``.
    """

    def __init__(self, cause: BaseException, generator_name: Optional[str] = None):
        self.cause = cause
        self.generator_name = generator_name
        name = generator_name or "generator"
        super().__init__(f"Producer of {name} failed: {type(cause).__name__}: {cause}")


class UsageError(LazySequenceError, RuntimeError):
    """Raised when take_value() is called with no value buffered."""

    pass


class ResourceTeardownFailure(LazySequenceError):
    """Failure while releasing a paused computation.

    Never raised from close(); it is logged and stored on the generator.
    """

    def __init__(self, cause: BaseException, generator_name: Optional[str] = None):
        self.cause = cause
        self.generator_name = generator_name
        name = generator_name or "generator"
        super().__init__(f"Failed to release {name}: {type(cause).__name__}: {cause}")


class InvalidProducerError(LazySequenceError, TypeError):
    """Raised when a producer payload is not an iterator."""

    pass
