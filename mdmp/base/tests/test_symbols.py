# Licensed under the GPLv3 - see LICENSE
import pytest

from ..symbols import Symbol, SymbolTable


class TestSymbolTable:
    def setup_method(self):
        self.table = SymbolTable('Color', (('RED', 1),
                                           ('GREEN', 2),
                                           ('CRIMSON', 1)))
        self.flags = SymbolTable('Access', (('READ', 1),
                                            ('WRITE', 2),
                                            ('EXECUTE', 4),
                                            ('ALL', 7)), flags=True)

    def test_lookup(self):
        red = self.table(1)
        assert isinstance(red, Symbol)
        assert red == 1
        assert red.name == 'RED'
        assert red.known
        assert str(red) == 'RED'
        assert repr(red) == '<Color.RED: 0x1>'
        assert self.table.to_symbol(2) == 'GREEN'
        assert self.table.from_symbol('GREEN') == 2
        assert self.table.from_symbol(red) == 1

    def test_unknown(self):
        unknown = self.table(0x1234)
        assert unknown == 0x1234
        assert unknown.name is None
        assert not unknown.known
        assert str(unknown) == '0x1234'
        assert repr(unknown) == '<Color: 0x1234>'
        assert self.table.to_symbol(0x1234) is None
        with pytest.raises(KeyError):
            self.table.from_symbol('BLUE')

    @pytest.mark.parametrize('raw', (0, 1, 3, 0xffffffff, 1 << 63))
    def test_totality(self, raw):
        symbol = self.table(raw)
        assert int(symbol) == raw
        assert hash(symbol) == hash(raw)
        assert symbol.name is None or isinstance(symbol.name, str)

    def test_aliases(self):
        assert self.table.names_of(1) == ('RED', 'CRIMSON')
        assert self.table.names_of(5) == ()
        assert self.table.from_symbol('CRIMSON') == 1

    def test_symbol_in_dict(self):
        d = {1: 'one'}
        assert d[self.table(1)] == 'one'
        assert self.table(1) + 1 == 2

    def test_cache_cleared(self):
        assert self.table.to_symbol(3) is None
        self.table['BLUE'] = 3
        assert self.table.to_symbol(3) == 'BLUE'
        del self.table['BLUE']
        assert self.table.to_symbol(3) is None
        self.table.update(BLACK=0)
        assert self.table(0).name == 'BLACK'

    def test_merge(self):
        extra = SymbolTable('More', (('BLUE', 3),))
        merged = self.table | extra
        assert merged.name == 'Color'
        assert merged(3).name == 'BLUE'
        assert merged(1).name == 'RED'
        assert 'BLUE' not in self.table

    def test_copy(self):
        copy = self.flags.copy()
        assert copy == self.flags
        assert copy.name == 'Access'
        assert copy.is_flags
        copy['NONE'] = 0
        assert 'NONE' not in self.flags

    def test_decompose(self):
        assert self.flags.decompose(3) == (('READ', 'WRITE'), 0)
        assert self.flags.decompose(7) == (('READ', 'WRITE', 'EXECUTE',
                                            'ALL'), 0)
        assert self.flags.decompose(0x11) == (('READ',), 0x10)
        assert self.flags.decompose(0) == ((), 0)

    def test_repr(self):
        assert repr(self.table) == '<SymbolTable Color (3 names)>'


def test_symbol_without_table():
    symbol = Symbol(5)
    assert symbol == 5
    assert symbol.name is None
    assert repr(symbol) == '<Symbol: 0x5>'
