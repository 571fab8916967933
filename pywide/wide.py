from functools import total_ordering
from typing import Dict, Optional, Tuple, Type

from .base import IntOverflowError, Result, attempt
from .util.type import Word

WIDTH_REGISTRY: Dict[int, Type['WideInt']] = {}

# Help registry
def width(bits: int, half):
    """
    Bind a WideInt subclass to `bits`, built as a pair of `half` words.
    The half type must already be complete (a Word or a registered width).
    """
    def wrapper(cls):
        if half.BITS * 2 != bits:
            raise ValueError(f"{cls.__name__}: {bits} bits cannot be built from {half.BITS}-bit halves")
        if bits in WIDTH_REGISTRY:
            raise ValueError(f"{bits} bits already registered as {WIDTH_REGISTRY[bits].__name__}")
        cls.BITS = bits
        cls.HALF_BITS = half.BITS
        cls.Half = half
        cls._QUARTER_BITS = half.BITS // 2
        cls._QUARTER_MASK = (half.ONE << cls._QUARTER_BITS) - half.ONE
        cls.ZERO = cls(half.ZERO, half.ZERO)
        cls.ONE = cls(half.ZERO, half.ONE)
        cls.MIN = cls(half.MIN, half.ZERO)
        cls.MAX = cls(half.MAX, ~half.ZERO)
        WIDTH_REGISTRY[bits] = cls
        return cls
    return wrapper

def lookup(bits: int) -> Type['WideInt']:
    cls = WIDTH_REGISTRY.get(bits)
    if cls is None:
        raise ValueError(f"no integer type registered for {bits} bits")
    return cls

def _umul_full(x, y, quarter_bits: int, quarter_mask):
    """
    Full unsigned product of two half words, returned as (high, low) half words.
    Each operand is split into quarter-width halves so that every partial
    product fits a half word exactly.
    """
    x0, x1 = x & quarter_mask, x.ushr(quarter_bits)
    y0, y1 = y & quarter_mask, y.ushr(quarter_bits)
    part00 = x0 * y0
    part01 = x0 * y1
    part10 = x1 * y0
    part11 = x1 * y1

    low, high = part00, part11
    for part in (part01, part10):
        total = low + (part << quarter_bits)
        high = high + part.ushr(quarter_bits)
        if total.ult(low):
            high = high + 1
        low = total
    return high, low

@total_ordering
class WideInt:
    """
    Two's-complement integer of BITS bits stored as a (high, low) pair of
    half-width words. value = high * 2^HALF_BITS + unsigned(low).

    Concrete widths are declared with the `width` decorator. Every operation
    is written once here in terms of the half type's own operations, so a
    512-bit add is two 256-bit adds and a carry test, and so on down to Word.
    """
    __slots__ = ('_high', '_low')

    BITS: int = 0
    HALF_BITS: int = 0
    Half = None

    def __init__(self, high, low):
        half = self.Half
        if half is None:
            raise TypeError(f"{type(self).__name__} has no registered width")
        if not isinstance(high, half) or not isinstance(low, half):
            raise TypeError(f"{type(self).__name__} needs two {half.__name__} halves")
        self._high = high
        self._low = low

    # construction

    @classmethod
    def make(cls, high, low) -> 'WideInt':
        return cls(cls._half_from(high), cls._half_from(low))

    @classmethod
    def _half_from(cls, val):
        half = cls.Half
        if isinstance(val, half):
            return val
        if isinstance(val, int):
            # low words are often written as unsigned patterns
            if -(1 << (cls.HALF_BITS - 1)) <= val < (1 << cls.HALF_BITS):
                return half.wrap_int(val)
            raise IntOverflowError(f"{val} does not fit in a {cls.HALF_BITS}-bit word")
        return half.of(val)

    @classmethod
    def from_int(cls, val: int) -> 'WideInt':
        limit = 1 << (cls.BITS - 1)
        if not -limit <= val < limit:
            raise IntOverflowError(f"{val} does not fit in {cls.BITS} bits")
        return cls._split(val)

    @classmethod
    def wrap_int(cls, val: int) -> 'WideInt':
        val &= (1 << cls.BITS) - 1
        if val >> (cls.BITS - 1):
            val -= 1 << cls.BITS
        return cls._split(val)

    @classmethod
    def _split(cls, val: int) -> 'WideInt':
        h = cls.HALF_BITS
        return cls(cls.Half.from_int(val >> h), cls.Half.wrap_int(val & ((1 << h) - 1)))

    @classmethod
    def of(cls, val) -> 'WideInt':
        """Sign-extend an int, a Word or any narrower width into this width."""
        if isinstance(val, cls):
            return val
        if isinstance(val, int):
            return cls.from_int(val)
        from .convert import sign_extend
        return sign_extend(cls, val)

    @classmethod
    def parse_string(cls, text: str, config=None) -> 'WideInt':
        from .codec import parse_string
        return parse_string(cls, text, config)

    @classmethod
    def from_float(cls, val: float) -> 'WideInt':
        from .convert import from_float
        return from_float(cls, val)

    @classmethod
    def try_parse(cls, text: str, config=None) -> Result:
        return attempt(cls.parse_string, text, config)

    @classmethod
    def try_from_float(cls, val: float) -> Result:
        return attempt(cls.from_float, val)

    def copy(self) -> 'WideInt':
        return type(self)(self._high, self._low)

    # fields

    @property
    def high(self):
        return self._high

    @property
    def low(self):
        return self._low

    @property
    def value(self) -> int:
        """unsigned bit pattern as a Python int"""
        return self.signed & ((1 << self.BITS) - 1)

    @property
    def signed(self) -> int:
        return (self._high.signed << self.HALF_BITS) | self._low.value

    # operand coercion

    def _coerce(self, other) -> Optional['WideInt']:
        cls = type(self)
        if isinstance(other, cls):
            return other
        if isinstance(other, int):
            return cls.from_int(other)
        if isinstance(other, (Word, WideInt)) and other.BITS < cls.BITS:
            return cls.of(other)
        return None

    def _pair(self, other) -> Tuple['WideInt', 'WideInt']:
        if type(other) is type(self):
            return self, other
        if isinstance(other, WideInt) and other.BITS > self.BITS:
            return type(other).of(self), other
        o = self._coerce(other)
        if o is None:
            raise TypeError(f"unsupported operand for {type(self).__name__}: {type(other).__name__}")
        return self, o

    # predicates

    def is_neg(self) -> bool:
        return self._high.is_neg()

    def is_zero(self) -> bool:
        return self._high.is_zero() and self._low.is_zero()

    def compare(self, other) -> int:
        a, b = self._pair(other)
        c = a._high.compare(b._high)
        return c if c else a._low.ucompare(b._low)

    def ucompare(self, other) -> int:
        a, b = self._pair(other)
        c = a._high.ucompare(b._high)
        return c if c else a._low.ucompare(b._low)

    def ult(self, other) -> bool:
        return self.ucompare(other) < 0

    def __eq__(self, other):
        if isinstance(other, WideInt) and other.BITS > self.BITS:
            return NotImplemented
        try:
            o = self._coerce(other)
        except IntOverflowError:
            return False
        if o is None:
            return NotImplemented
        return self._high == o._high and self._low == o._low

    def __lt__(self, other):
        if isinstance(other, WideInt) and other.BITS > self.BITS:
            return NotImplemented
        try:
            o = self._coerce(other)
        except IntOverflowError:
            # an int beyond the range sorts past every value
            return other > 0
        if o is None:
            return NotImplemented
        return self.compare(o) < 0

    def __hash__(self):
        return hash(self.signed)

    def __bool__(self):
        return not self.is_zero()

    # arithmetic

    def __add__(self, other):
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        low = self._low + other._low
        high = self._high + other._high
        if low.ult(self._low):
            high = high + self.Half.ONE
        return type(self)(high, low)

    __radd__ = __add__

    def __sub__(self, other):
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        low = self._low - other._low
        high = self._high - other._high
        if self._low.ult(other._low):
            high = high - self.Half.ONE
        return type(self)(high, low)

    def __rsub__(self, other):
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        return other.__sub__(self)

    def __neg__(self):
        high = ~self._high
        low = -self._low
        if low.is_zero():
            high = high + self.Half.ONE
        return type(self)(high, low)

    def __pos__(self):
        return self

    def __abs__(self):
        return -self if self.is_neg() else self

    def __mul__(self, other):
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        high, low = _umul_full(self._low, other._low, self._QUARTER_BITS, self._QUARTER_MASK)
        high = high + self._low * other._high + self._high * other._low
        return type(self)(high, low)

    __rmul__ = __mul__

    def div_mod(self, other):
        """Truncating division; returns DivMod(quotient, modulus)."""
        from .division import div_mod
        return div_mod(*self._pair(other))

    def try_div_mod(self, other) -> Result:
        return attempt(self.div_mod, other)

    def __floordiv__(self, other):
        from .division import div_mod
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        return div_mod(self, other).quotient

    def __rfloordiv__(self, other):
        from .division import div_mod
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        return div_mod(other, self).quotient

    def __mod__(self, other):
        from .division import div_mod
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        return div_mod(self, other).modulus

    def __rmod__(self, other):
        from .division import div_mod
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        return div_mod(other, self).modulus

    def __divmod__(self, other):
        from .division import div_mod
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        return tuple(div_mod(self, other))

    def __rdivmod__(self, other):
        from .division import div_mod
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        return tuple(div_mod(other, self))

    # bitwise

    def __invert__(self):
        return type(self)(~self._high, ~self._low)

    def __and__(self, other):
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        return type(self)(self._high & other._high, self._low & other._low)

    __rand__ = __and__

    def __or__(self, other):
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        return type(self)(self._high | other._high, self._low | other._low)

    __ror__ = __or__

    def __xor__(self, other):
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        return type(self)(self._high ^ other._high, self._low ^ other._low)

    __rxor__ = __xor__

    def __lshift__(self, amount):
        b = int(amount) % self.BITS
        if b == 0:
            return self
        h = self.HALF_BITS
        if b < h:
            high = (self._high << b) | self._low.ushr(h - b)
            low = self._low << b
        else:
            high = self._low << (b - h)
            low = self.Half.ZERO
        return type(self)(high, low)

    def __rshift__(self, amount):
        b = int(amount) % self.BITS
        if b == 0:
            return self
        h = self.HALF_BITS
        if b < h:
            low = self._low.ushr(b) | (self._high << (h - b))
            high = self._high >> b
        else:
            low = self._high >> (b - h)
            high = self._high >> (h - 1)
        return type(self)(high, low)

    def ushr(self, amount) -> 'WideInt':
        b = int(amount) % self.BITS
        if b == 0:
            return self
        h = self.HALF_BITS
        if b < h:
            low = self._low.ushr(b) | (self._high << (h - b))
            high = self._high.ushr(b)
        else:
            low = self._high.ushr(b - h)
            high = self.Half.ZERO
        return type(self)(high, low)

    # conversions

    def to_half(self):
        from .convert import to_half
        return to_half(self)

    def narrow(self, target):
        from .convert import narrow
        return narrow(self, target)

    def try_narrow(self, target) -> Result:
        return attempt(self.narrow, target)

    def widen(self, target) -> 'WideInt':
        return target.of(self)

    def to_str(self, config=None) -> str:
        from .codec import to_str
        return to_str(self, config)

    def __int__(self):
        return self.signed

    def __index__(self):
        return self.signed

    def __float__(self):
        return float(self.signed)

    def __repr__(self):
        return f"{type(self).__name__}({self.to_str()})"

    def __str__(self):
        return self.to_str()

    def __format__(self, format_spec):
        if not format_spec:
            return self.to_str()
        return format(self.signed, format_spec)
