"""Errors raised by the problem_details package."""


class ProblemDetailsError(Exception):
    """Base class for all problem_details errors."""


class InvalidExtensionKey(ProblemDetailsError, ValueError):
    """An extension was given a key reserved by a standard Problem member.

    Args:
        key: The rejected extension key.
    """

    def __init__(self, key: str) -> None:
        self.key: str = key
        super(InvalidExtensionKey, self).__init__(
            f'{key} is reserved by existing attributes in the problem class',
        )


class InvalidExtensionValue(ProblemDetailsError, ValueError):
    """An extension value could not be encoded as part of a Problem document."""


class UnsupportedOperation(ProblemDetailsError, NotImplementedError):
    """The requested operation is not supported (e.g. deserializing a Problem)."""
