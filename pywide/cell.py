from .util.type import Word
from .wide import WideInt

class Cell:
    """
    Mutable storage location holding one fixed-width value. Values themselves
    never change; increment and decrement replace the value held here.
    Not synchronized.
    """
    def __init__(self, value):
        if not isinstance(value, (Word, WideInt)):
            raise TypeError(f"Cell holds Word or WideInt values, not {type(value).__name__}")
        self._value = value

    @property
    def kind(self) -> type:
        return type(self._value)

    def get(self):
        return self._value

    def set(self, value):
        self._value = self.kind.of(value)

    def pre_inc(self):
        self._value = self._value + 1
        return self._value

    def post_inc(self):
        old = self._value
        self._value = old + 1
        return old

    def pre_dec(self):
        self._value = self._value - 1
        return self._value

    def post_dec(self):
        old = self._value
        self._value = old - 1
        return old

    def __repr__(self):
        return f"Cell({self._value!r})"
