from typing import Any, NamedTuple

from .base import DivideByZeroError
from .log import get_logger

logger = get_logger(__name__)

class DivMod(NamedTuple):
    quotient: Any
    modulus: Any

def div_mod(dividend, divisor) -> DivMod:
    """
    Truncating division of two WideInt values of the same width. Mixed
    operands (Python ints, narrower widths) go through `WideInt.div_mod`.

    Binary restoring long division on the magnitudes: the divisor is first
    shifted up until it reaches the modulus (or the sign bit), then each
    candidate quotient bit is tried from the top down. The quotient is
    rounded toward zero and the modulus takes the sign of the dividend, so
    quotient * divisor + modulus == dividend. MIN divided by -1 wraps to MIN.
    """
    cls = type(dividend)
    if divisor.is_zero():
        logger.debug(f"{cls.__name__}: division of {dividend:#x} by zero")
        raise DivideByZeroError(f"{cls.__name__} division by zero")
    if divisor == cls.ONE:
        return DivMod(dividend, cls.ZERO)

    dividend_neg = dividend.is_neg()
    div_sign = dividend_neg != divisor.is_neg()
    # magnitudes are compared unsigned, so |MIN| == MIN still works
    modulus = -dividend if dividend_neg else dividend
    divisor = abs(divisor)

    mask = cls.ONE
    while not divisor.is_neg() and divisor.ult(modulus):
        divisor = divisor << 1
        mask = mask << 1

    quotient = cls.ZERO
    while not mask.is_zero():
        if not modulus.ult(divisor):
            quotient = quotient | mask
            modulus = modulus - divisor
        divisor = divisor.ushr(1)
        mask = mask.ushr(1)

    if div_sign:
        quotient = -quotient
    if dividend_neg:
        modulus = -modulus
    return DivMod(quotient, modulus)
