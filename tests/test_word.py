"""
Tests for the native 32-bit word every wide integer bottoms out at.
"""

import pytest

from pywide.base import IntOverflowError
from pywide.util.type import Word, hex32


class TestWordRepresentation:

    def test_wraps_to_32_bits(self):
        assert Word(0xFFFFFFFF).signed == -1
        assert Word(-1).value == 0xFFFFFFFF
        assert Word(1 << 32).value == 0

    def test_constants(self):
        assert Word.MIN.signed == -(1 << 31)
        assert Word.MAX.signed == (1 << 31) - 1
        assert Word.ZERO.is_zero()
        assert int(Word.ONE) == 1

    def test_from_int_is_range_checked(self):
        assert Word.from_int(-(1 << 31)) == Word.MIN
        with pytest.raises(IntOverflowError):
            Word.from_int(1 << 31)
        with pytest.raises(IntOverflowError):
            Word.from_int(-(1 << 31) - 1)

    def test_of_rejects_other_types(self):
        with pytest.raises(TypeError):
            Word.of("1")

    def test_helpers(self):
        assert hex32(-1) == "ffffffff"
        assert repr(Word(10)) == "0x0000000a"
        assert str(Word(-10)) == "-10"
        assert f"{Word(255):x}" == "ff"


class TestWordArithmetic:

    def test_add_wraps(self):
        assert Word.MAX + 1 == Word.MIN
        assert 1 + Word(2) == Word(3)

    def test_sub_and_neg(self):
        assert Word.MIN - 1 == Word.MAX
        assert 10 - Word(3) == Word(7)
        assert -Word.MIN == Word.MIN
        assert -Word(5) == -5

    def test_mul_wraps(self):
        assert Word(0x10000) * Word(0x10000) == 0
        assert Word(-3) * 7 == -21

    def test_bitwise(self):
        assert Word(0b1100) & Word(0b1010) == 0b1000
        assert Word(0b1100) | Word(0b1010) == 0b1110
        assert Word(0b1100) ^ Word(0b1010) == 0b0110
        assert ~Word(0) == -1


class TestWordShiftsAndOrdering:

    def test_shift_amount_is_mod_32(self):
        assert Word(1) << 32 == Word(1)
        assert Word(1) << 33 == Word(2)

    def test_right_shifts(self):
        assert Word(-8) >> 1 == -4
        assert Word(-8).ushr(1).value == 0x7FFFFFFC
        assert Word(-1) >> 31 == -1
        assert Word(-1).ushr(31) == 1

    def test_signed_and_unsigned_compare(self):
        assert Word(-1).compare(Word(1)) == -1
        assert Word(-1).ucompare(Word(1)) == 1
        assert Word(3).compare(Word(3)) == 0
        assert Word(1).ult(Word(-1))
        assert Word(-1) < Word(0)
        assert Word(2) >= 2

    def test_predicates(self):
        assert Word(-1).is_neg()
        assert not Word(0).is_neg()
        assert not Word(0)
        assert hash(Word(-7)) == hash(-7)
