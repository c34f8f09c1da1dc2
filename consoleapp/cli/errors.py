"""
Custom exceptions for the consoleapp command-line layer.

Malformed tokens never raise; they are reported as parse warnings. The
exceptions here signal contract violations by the calling code.
"""


class ConsoleAppError(Exception):
    """Base exception for all console application errors."""

    pass


class ArgumentIndexError(ConsoleAppError, IndexError):
    """Raised when a raw argument or value is accessed outside its bounds.

    Subclasses ``IndexError`` so callers relying on the builtin semantics
    keep working.
    """

    def __init__(self, collection: str, index: int, length: int) -> None:
        self.collection = collection
        self.index = index
        self.length = length
        super().__init__(
            f"{collection} index {index} out of range for length {length}"
        )
