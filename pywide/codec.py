"""
Decimal string codec for the wide integer types.

Parsing walks the digits from the least significant end with a growing
place value, checking every partial sum for wraparound. Formatting peels
digits off the magnitude with repeated truncating division, either one digit
per division or a chunk of `digits_per_chunk` digits per division.
"""
from functools import lru_cache
from typing import List, Optional

from .base import IntOverflowError, IntUnderflowError, NumberFormatError
from .config import DEFAULT_CODEC, CodecConfig
from .division import div_mod
from .log import get_logger
from .util.type import Word
from .wide import lookup

logger = get_logger(__name__)

DIGITS = "0123456789"

def _times_ten(value):
    return (value << 3) + (value << 1)

def _small(value) -> int:
    """Python int of a value known to fit a native word."""
    return value.narrow(Word).signed

@lru_cache(maxsize=None)
def _ten(cls):
    return cls.of(Word(10))

@lru_cache(maxsize=None)
def multiplier_limit(cls):
    """Largest place value that can still be multiplied by ten."""
    return div_mod(cls.MAX, _ten(cls)).quotient

@lru_cache(maxsize=None)
def chunk_base(cls, digits: int):
    base = cls.ONE
    for _ in range(digits):
        base = _times_ten(base)
    return base

@lru_cache(maxsize=None)
def min_decimal(cls) -> str:
    """Decimal text of cls.MIN, whose magnitude does not fit the width."""
    text = _format_chunked(cls.MAX, DEFAULT_CODEC.digits_per_chunk)
    # |MIN| = MAX + 1 is a power of two, so its last digit never carries
    return "-" + text[:-1] + DIGITS[DIGITS.index(text[-1]) + 1]

def to_str(value, config: Optional[CodecConfig] = None) -> str:
    config = config or DEFAULT_CODEC
    cls = type(value)
    if value.is_zero():
        return "0"
    if value == cls.MIN:
        return min_decimal(cls)
    negative = value.is_neg()
    magnitude = -value if negative else value
    if config.use_chunks(cls.BITS):
        text = _format_chunked(magnitude, config.digits_per_chunk)
    else:
        text = _format_digits(magnitude)
    return "-" + text if negative else text

def _format_digits(value) -> str:
    ten = _ten(type(value))
    digits: List[str] = []
    while not value.is_zero():
        value, digit = div_mod(value, ten)
        digits.append(DIGITS[_small(digit)])
    return "".join(reversed(digits)) or "0"

def _chunk_text(chunk, digits: int) -> str:
    if digits <= 9:
        return str(_small(chunk)).zfill(digits)
    int64 = lookup(64)
    if chunk.BITS > int64.BITS:
        chunk = chunk.narrow(int64)
    return _format_digits(chunk).zfill(digits)

def _format_chunked(value, digits: int) -> str:
    base = chunk_base(type(value), digits)
    chunks: List[str] = []
    while not value.is_zero():
        value, chunk = div_mod(value, base)
        chunks.append(_chunk_text(chunk, digits))
    if not chunks:
        return "0"
    # only the most significant chunk goes unpadded
    chunks[-1] = chunks[-1].lstrip("0")
    return "".join(reversed(chunks))

def _out_of_range(cls, text: str, negative: bool):
    if negative:
        logger.debug(f"{cls.__name__}: {text!r} underflows")
        raise IntUnderflowError(f"{text!r} is below the {cls.BITS}-bit range")
    logger.debug(f"{cls.__name__}: {text!r} overflows")
    raise IntOverflowError(f"{text!r} is above the {cls.BITS}-bit range")

def parse_string(cls, text: str, config: Optional[CodecConfig] = None):
    config = config or DEFAULT_CODEC
    if not isinstance(text, str):
        raise TypeError(f"expected str, got {type(text).__name__}")
    body = text.strip()
    negative = body.startswith("-")
    if negative or (config.allow_leading_plus and body.startswith("+")):
        body = body[1:]
    if not body:
        logger.debug(f"{cls.__name__}: no digits in {text!r}")
        raise NumberFormatError(f"no digits in {text!r}")

    limit = multiplier_limit(cls)
    value = cls.ZERO
    multiplier = cls.ONE
    exhausted = False
    for ch in reversed(body):
        digit = DIGITS.find(ch)
        if digit < 0:
            logger.debug(f"{cls.__name__}: invalid digit {ch!r} in {text!r}")
            raise NumberFormatError(f"invalid digit {ch!r} in {text!r}")
        if digit:
            if exhausted:
                _out_of_range(cls, text, negative)
            for _ in range(digit):
                if negative:
                    value = value - multiplier
                    if not value.is_neg() and not value.is_zero():
                        _out_of_range(cls, text, negative)
                else:
                    value = value + multiplier
                    if value.is_neg():
                        _out_of_range(cls, text, negative)
        if not exhausted:
            if multiplier.compare(limit) > 0:
                exhausted = True
            else:
                multiplier = _times_ten(multiplier)
    return value
