from __future__ import annotations

from typing import Optional, Sized


class CrispError(Exception):
    """ Base class for all Crisp errors"""

    kind = "Error"

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return f"{self.kind}: {self.message}"


class CrispArgumentError(CrispError):
    """ Raised when the number of arguments passed to a callable is incorrect.

    `minimum` or `maximum` is None when that side is unbounded.
    """

    kind = "ArgumentError"

    def __init__(self, minimum: Optional[int], maximum: Optional[int]):
        self.minimum = minimum
        self.maximum = maximum
        if minimum == maximum:
            message = f"{minimum} arguments expected."
        elif maximum is None:
            message = f"{minimum}+ arguments expected."
        elif minimum is None:
            message = f"Up to {maximum} arguments expected."
        else:
            message = f"{minimum} to {maximum} arguments expected."
        super().__init__(message)


class CrispTypeError(CrispError):
    """ Raised when a value does not have the type an operation requires"""

    kind = "TypeError"

    def __init__(self, expected: str):
        self.expected = expected
        super().__init__(f"Expected {expected}.")


class CrispParseError(CrispError):
    """ Raised when the token stream is malformed"""

    kind = "ParseError"


class CrispUnresolvedReference(CrispError):
    """ Raised when a symbol is used before it is bound"""

    kind = "UnresolvedReferenceError"

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Unresolved symbol `{name}`.")


class CrispStandardError(CrispError):
    """ Raised for any other runtime failure"""

    kind = "StandardError"


class CrispExit(SystemExit):
    """ Raised by `exit` and the assertion builtins to stop the program.

    Derives from SystemExit, so `except Exception` does not intercept it and an
    uncaught instance terminates the process with `code`.
    """

    def __init__(self, code: int = 0):
        super().__init__(code)


def check_arity(args: Sized, minimum: Optional[int], maximum: Optional[int]) -> None:
    """Raise CrispArgumentError unless minimum <= len(args) <= maximum."""
    n = len(args)
    if (minimum is not None and n < minimum) or (maximum is not None and n > maximum):
        raise CrispArgumentError(minimum, maximum)
