"""Errors raised when a task is wired up wrongly."""


class ParallelError(Exception):
    """Base class for misconfigured tasks; these are never swallowed by a handler."""

    default_message = "[parallel]: error"

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message if message is not None else self.default_message)


class NotAFunctionError(ParallelError):
    """The task target is not callable."""

    default_message = "[parallel]: f is not a function"


class ArgInputLengthNotMatchError(ParallelError):
    """The arguments given do not fit the callable's parameters."""

    default_message = "[parallel]: arg input length not match"


class ResOutOfRangeError(ParallelError):
    """The number of result slots differs from the number of returned values."""

    default_message = "[parallel]: res out of range"


class ResTypeNotASlotError(ParallelError):
    """A result target is not a Result slot."""

    default_message = "[parallel]: res type is not a result slot"


class ResNilError(ParallelError):
    """A result target is None."""

    default_message = "[parallel]: res is nil"