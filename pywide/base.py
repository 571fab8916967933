from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Optional

class ErrorKind(Enum):
    DIVIDE_BY_ZERO = 0
    OVERFLOW = 1
    UNDERFLOW = 2
    NUMBER_FORMAT = 3
    INVALID_FLOAT = 4

class WideIntError(Exception):
    """base for every failure reported by the integer types"""
    kind: ErrorKind

    def __init__(self, reason: str):
        super().__init__(reason)
        self.reason = reason

class DivideByZeroError(WideIntError, ZeroDivisionError):
    kind = ErrorKind.DIVIDE_BY_ZERO

class IntOverflowError(WideIntError, OverflowError):
    kind = ErrorKind.OVERFLOW

class IntUnderflowError(WideIntError, OverflowError):
    kind = ErrorKind.UNDERFLOW

class NumberFormatError(WideIntError, ValueError):
    kind = ErrorKind.NUMBER_FORMAT

class InvalidFloatError(WideIntError, ValueError):
    kind = ErrorKind.INVALID_FLOAT

@dataclass(frozen=True)
class Result:
    """
    explicit outcome of a fallible call, either a value or the error it raised
    """
    value: Any = None
    error: Optional[WideIntError] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def kind(self) -> Optional[ErrorKind]:
        return self.error.kind if self.error is not None else None

    def unwrap(self):
        if self.error is not None:
            raise self.error
        return self.value

    def unwrap_or(self, default):
        return default if self.error is not None else self.value

def attempt(fn: Callable, *args, **kwargs) -> Result:
    try:
        return Result(value=fn(*args, **kwargs))
    except WideIntError as e:
        return Result(error=e)
