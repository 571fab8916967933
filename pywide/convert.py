import math
from numbers import Real

from .base import IntOverflowError, InvalidFloatError
from .log import get_logger
from .util.type import Word
from .wide import WideInt

logger = get_logger(__name__)

# largest integer a double holds exactly, 2^53 - 1
MAX_SAFE_FLOAT = 9007199254740991.0

def sign_extend(cls, value):
    """Widen `value` into `cls`, one half-width step at a time."""
    if not isinstance(value, (Word, WideInt)):
        raise TypeError(f"cannot convert {type(value).__name__} to {cls.__name__}")
    if value.BITS >= cls.BITS:
        raise ValueError(f"cannot widen a {value.BITS}-bit value to {cls.BITS} bits")
    if value.BITS < cls.HALF_BITS:
        value = cls.Half.of(value)
    return cls(value >> (cls.HALF_BITS - 1), value)

def to_half(value):
    """
    Return the low half of `value`, failing with IntOverflowError unless the
    high half is exactly the sign-extension of the low half.
    """
    low = value.low
    if value.high != low >> (value.HALF_BITS - 1):
        logger.debug(f"{type(value).__name__}: {value:#x} does not fit in {value.HALF_BITS} bits")
        raise IntOverflowError(f"{type(value).__name__} value does not fit in {value.HALF_BITS} bits")
    return low

def narrow(value, target):
    if target.BITS > value.BITS:
        raise ValueError(f"cannot narrow a {value.BITS}-bit value to {target.BITS} bits")
    while value.BITS > target.BITS:
        value = to_half(value)
    return value

def from_float(cls, val: float):
    """
    Truncate a float toward zero into `cls`. Only floats whose integral part is
    exactly representable (|x| <= 2^53 - 1) are accepted.
    """
    if not isinstance(val, Real):
        raise TypeError(f"cannot convert {type(val).__name__} to {cls.__name__}")
    try:
        f = float(val)
    except OverflowError as e:
        logger.debug(f"{cls.__name__}: {type(val).__name__} too large for a float")
        raise InvalidFloatError(f"{type(val).__name__} value is too large to convert to {cls.__name__}") from e
    if math.isnan(f) or math.isinf(f):
        logger.debug(f"{cls.__name__}: rejected non-finite float {f}")
        raise InvalidFloatError(f"cannot convert {f} to {cls.__name__}")
    magnitude = abs(f)
    magnitude -= math.fmod(magnitude, 1.0)
    if magnitude > MAX_SAFE_FLOAT:
        logger.debug(f"{cls.__name__}: float {f} exceeds the exact integer range")
        raise InvalidFloatError(f"{f} is outside the exactly representable integer range")

    result = cls.ZERO
    bit = cls.ONE
    while magnitude > 0:
        remainder = math.fmod(magnitude, 2.0)
        if remainder:
            result = result | bit
        magnitude = (magnitude - remainder) / 2
        bit = bit << 1
    return -result if f < 0 else result
