import pytest

from pywide.base import (
    DivideByZeroError, ErrorKind, IntOverflowError, IntUnderflowError,
    InvalidFloatError, NumberFormatError, Result, WideIntError, attempt,
)


class TestErrors:

    @pytest.mark.parametrize("error, builtin, kind", [
        (DivideByZeroError, ZeroDivisionError, ErrorKind.DIVIDE_BY_ZERO),
        (IntOverflowError, OverflowError, ErrorKind.OVERFLOW),
        (IntUnderflowError, OverflowError, ErrorKind.UNDERFLOW),
        (NumberFormatError, ValueError, ErrorKind.NUMBER_FORMAT),
        (InvalidFloatError, ValueError, ErrorKind.INVALID_FLOAT),
    ])
    def test_hierarchy(self, error, builtin, kind):
        e = error("boom")
        assert isinstance(e, WideIntError)
        assert isinstance(e, builtin)
        assert e.kind is kind
        assert e.reason == "boom"
        assert str(e) == "boom"


class TestResult:

    def test_attempt_success(self):
        result = attempt(lambda a, b: a + b, 1, b=2)
        assert result.ok
        assert result.kind is None
        assert result.unwrap() == 3

    def test_attempt_failure(self):
        def fail():
            raise IntUnderflowError("too small")
        result = attempt(fail)
        assert not result.ok
        assert result.kind is ErrorKind.UNDERFLOW
        assert result.unwrap_or(0) == 0
        with pytest.raises(IntUnderflowError):
            result.unwrap()

    def test_other_exceptions_propagate(self):
        def broken():
            raise KeyError("x")
        with pytest.raises(KeyError):
            attempt(broken)

    def test_result_is_frozen(self):
        with pytest.raises(Exception):
            Result(value=1).value = 2
