import pytest

from pywide.cell import Cell
from pywide.util.type import Word
from pywide.widths import Int64, Int128


class TestCell:

    def test_pre_and_post_increment(self):
        cell = Cell(Int128.from_int(5))
        assert cell.post_inc() == 5
        assert cell.get() == 6
        assert cell.pre_inc() == 7
        assert cell.get() == 7

    def test_pre_and_post_decrement(self):
        cell = Cell(Int64.ZERO)
        assert cell.pre_dec() == -1
        assert cell.post_dec() == -1
        assert cell.get() == -2

    def test_wraps_at_limits(self):
        cell = Cell(Int64.MAX)
        cell.pre_inc()
        assert cell.get() == Int64.MIN
        word = Cell(Word.MIN)
        word.post_dec()
        assert word.get() == Word.MAX

    def test_old_values_are_untouched(self):
        start = Int64.from_int(1)
        cell = Cell(start)
        cell.pre_inc()
        assert start == 1

    def test_set_keeps_width(self):
        cell = Cell(Int128.ZERO)
        cell.set(Int64.from_int(-9))
        assert type(cell.get()) is Int128
        assert cell.get() == -9
        cell.set(12)
        assert cell.kind is Int128 and cell.get() == 12

    def test_rejects_plain_ints(self):
        with pytest.raises(TypeError):
            Cell(3)
