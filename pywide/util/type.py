from functools import total_ordering

from ..base import IntOverflowError

MASK = 0xFFFFFFFF
INT32_MAX = 0x7FFFFFFF
SIGN_BIT = 0x80000000

@total_ordering
class Word:
    """
    Native signed 32-bit word, the base case every wider integer is built on.
    Stores the raw bit pattern; all arithmetic wraps mod 2^32.
    """
    __slots__ = ('_val',)

    BITS = 32

    def __init__(self, val=0):
        if isinstance(val, Word):
            self._val = val._val
        else:
            self._val = int(val) & MASK

    @classmethod
    def from_int(cls, val: int) -> 'Word':
        if not -SIGN_BIT <= val <= INT32_MAX:
            raise IntOverflowError(f"{val} does not fit in {cls.BITS} bits")
        return cls(val)

    @classmethod
    def wrap_int(cls, val: int) -> 'Word':
        return cls(val)

    @classmethod
    def of(cls, val) -> 'Word':
        if isinstance(val, Word):
            return val
        if isinstance(val, int):
            return cls.from_int(val)
        raise TypeError(f"cannot convert {type(val).__name__} to Word")

    @property
    def value(self) -> int:
        return self._val

    @property
    def signed(self) -> int:
        val = self._val
        return val - 0x100000000 if val > INT32_MAX else val

    def _other(self, other):
        if isinstance(other, Word):
            return other._val
        if isinstance(other, int):
            return other
        return None

    def __add__(self, other):
        o = self._other(other)
        if o is None:
            return NotImplemented
        return Word(self._val + o)

    __radd__ = __add__

    def __sub__(self, other):
        o = self._other(other)
        if o is None:
            return NotImplemented
        return Word(self._val - o)

    def __rsub__(self, other):
        o = self._other(other)
        if o is None:
            return NotImplemented
        return Word(o - self._val)

    def __mul__(self, other):
        o = self._other(other)
        if o is None:
            return NotImplemented
        return Word(self._val * o)

    __rmul__ = __mul__

    def __and__(self, other):
        o = self._other(other)
        if o is None:
            return NotImplemented
        return Word(self._val & o)

    __rand__ = __and__

    def __or__(self, other):
        o = self._other(other)
        if o is None:
            return NotImplemented
        return Word(self._val | o)

    __ror__ = __or__

    def __xor__(self, other):
        o = self._other(other)
        if o is None:
            return NotImplemented
        return Word(self._val ^ o)

    __rxor__ = __xor__

    def __invert__(self):
        return Word(~self._val)

    def __neg__(self):
        return Word(-self._val)

    def __pos__(self):
        return self

    def __lshift__(self, other):
        shift = int(other) & 0x1F # shift amount is 5 bits
        return Word(self._val << shift)

    def __rshift__(self, other):
        shift = int(other) & 0x1F
        return Word(self.signed >> shift)

    def ushr(self, other) -> 'Word':
        shift = int(other) & 0x1F
        return Word(self._val >> shift)

    def is_neg(self) -> bool:
        return bool(self._val & SIGN_BIT)

    def is_zero(self) -> bool:
        return self._val == 0

    def compare(self, other) -> int:
        a, b = self.signed, Word(other).signed
        return (a > b) - (a < b)

    def ucompare(self, other) -> int:
        a, b = self._val, Word(other)._val
        return (a > b) - (a < b)

    def ult(self, other) -> bool:
        return self._val < Word(other)._val

    def __eq__(self, other):
        if isinstance(other, Word):
            return self._val == other._val
        if isinstance(other, int):
            return self.signed == other
        return NotImplemented

    def __lt__(self, other):
        if isinstance(other, Word):
            return self.signed < other.signed
        if isinstance(other, int):
            return self.signed < other
        return NotImplemented

    def __bool__(self):
        return self._val != 0

    def __int__(self):
        return self.signed

    def __index__(self):
        return self.signed

    def __hash__(self):
        return hash(self.signed)

    def to_str(self) -> str:
        return str(self.signed)

    def __repr__(self):
        return f"0x{hex32(self._val)}"

    def __str__(self):
        return self.to_str()

    def __format__(self, format_spec):
        return format(self.signed, format_spec)

Word.ZERO = Word(0)
Word.ONE = Word(1)
Word.MIN = Word(SIGN_BIT)
Word.MAX = Word(INT32_MAX)

def hex32(val: int) -> str:
    return f"{int(val) & MASK:08x}"
