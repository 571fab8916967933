from .util.type import Word
from .wide import WideInt, width

@width(64, half=Word)
class Int64(WideInt):
    """64-bit integer made of two native words."""
    __slots__ = ()

@width(128, half=Int64)
class Int128(WideInt):
    __slots__ = ()

@width(256, half=Int128)
class Int256(WideInt):
    __slots__ = ()

@width(512, half=Int256)
class Int512(WideInt):
    __slots__ = ()
