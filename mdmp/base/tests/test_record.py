# Licensed under the GPLv3 - see LICENSE
import io
import struct

import numpy as np
import pytest
from numpy.testing import assert_array_equal

from ..errors import DecodeError, OutOfBoundsError
from ..record import RecordBase, decode, location_view, read_array, read_list
from ..symbols import Symbol, SymbolTable


COLORS = SymbolTable('Color', (('RED', 1), ('GREEN', 2)))


class Pair(RecordBase):
    _dtype = np.dtype([('a', '<u4'),
                       ('b', '<u2'),
                       ('c', '<u2')])
    _symbols = {'b': COLORS}


class Nested(RecordBase):
    _dtype = np.dtype([('x', '<u8'),
                       ('pair', Pair._dtype),
                       ('pairs', Pair._dtype, (2,)),
                       ('raw', 'V4'),
                       ('values', '<u2', (3,))])
    _subrecords = {'pair': Pair, 'pairs': Pair}


class TestPair:
    def setup_class(self):
        self.data = struct.pack('<IHH', 0x12345678, 1, 7)
        self.pair = Pair.frombuffer(self.data)

    def test_basics(self):
        assert Pair.nbytes == 8
        assert self.pair.nbytes == 8
        assert self.pair.byteorder == '<'
        assert self.pair.keys() == ('a', 'b', 'c')
        assert 'a' in self.pair
        assert 'd' not in self.pair
        assert list(self.pair) == ['a', 'b', 'c']

    def test_values(self):
        assert self.pair['a'] == 0x12345678
        assert type(self.pair['a']) is int
        b = self.pair['b']
        assert isinstance(b, Symbol)
        assert b == 1
        assert b.name == 'RED'
        assert self.pair['c'] == 7
        assert self.pair.get('d') is None
        with pytest.raises(KeyError):
            self.pair['d']

    def test_immutable(self):
        with pytest.raises(ValueError):
            self.pair.words['a'] = 1

    def test_nbytes_fixed(self):
        self.pair.nbytes = 8
        with pytest.raises(ValueError):
            self.pair.nbytes = 9

    def test_big_endian(self):
        data = struct.pack('>IHH', 0x12345678, 1, 7)
        pair = Pair.frombuffer(data, byteorder='>')
        assert pair.byteorder == '>'
        assert pair['a'] == 0x12345678
        assert pair['b'].name == 'RED'
        assert pair.tobytes() == data
        # Same values, different encoding.
        assert pair != self.pair
        assert dict(pair.items()) == dict(self.pair.items())

    def test_offset(self):
        pair = Pair.frombuffer(b'\xff' * 4 + self.data, 4)
        assert pair == self.pair

    def test_short_buffer(self):
        with pytest.raises(OutOfBoundsError):
            Pair.frombuffer(self.data[:-1])
        with pytest.raises(OutOfBoundsError):
            Pair.frombuffer(self.data, 1)

    def test_deterministic(self):
        assert Pair.frombuffer(self.data) == Pair.frombuffer(self.data)

    def test_fromvalues(self):
        pair = Pair.fromvalues(**self.pair)
        assert pair == self.pair
        assert pair.tobytes() == self.data
        pair2 = Pair.fromvalues(a=1)
        assert pair2['b'] == 0 and pair2['c'] == 0
        pair3 = Pair.fromvalues(byteorder='>', **self.pair)
        assert pair3.tobytes() == struct.pack('>IHH', 0x12345678, 1, 7)
        with pytest.raises(KeyError):
            Pair.fromvalues(d=1)

    def test_fromfile(self):
        fh = io.BytesIO(self.data + self.data[:4])
        assert Pair.fromfile(fh) == self.pair
        with pytest.raises(OutOfBoundsError):
            Pair.fromfile(fh)

    def test_fromlocation(self):
        buffer = b'\x00' * 4 + self.data + b'\x00' * 4
        assert Pair.fromlocation(buffer, (8, 4)) == self.pair
        assert Pair.fromlocation(buffer, (12, 4)) == self.pair
        with pytest.raises(OutOfBoundsError):
            Pair.fromlocation(buffer, (7, 4))
        with pytest.raises(OutOfBoundsError):
            Pair.fromlocation(buffer, (8, 12))

    def test_decode(self):
        pair, nbytes = decode(Pair, self.data)
        assert pair == self.pair
        assert nbytes == 8

    def test_repr(self):
        r = repr(self.pair)
        assert r.startswith('<Pair a: 305419896')
        assert 'Color.RED' in r


class TestNested:
    def setup_class(self):
        self.pair1 = Pair.fromvalues(a=1, b=2, c=3)
        self.pair2 = Pair.fromvalues(a=4, b=5, c=6)
        self.nested = Nested.fromvalues(x=1 << 40, pair=self.pair1,
                                        pairs=[self.pair1, self.pair2],
                                        raw=b'ab', values=[1, 2, 3])

    def test_size(self):
        assert Nested.nbytes == 8 + 8 + 16 + 4 + 6

    def test_subrecords(self):
        assert self.nested['x'] == 1 << 40
        pair = self.nested['pair']
        assert isinstance(pair, Pair)
        assert pair == self.pair1
        assert pair['b'].name == 'GREEN'
        pairs = self.nested['pairs']
        assert pairs == (self.pair1, self.pair2)

    def test_raw_and_arrays(self):
        assert self.nested['raw'] == b'ab\x00\x00'
        assert_array_equal(self.nested['values'], [1, 2, 3])

    def test_roundtrip(self):
        data = self.nested.tobytes()
        assert len(data) == Nested.nbytes
        nested = Nested.frombuffer(data)
        assert nested == self.nested
        assert Nested.fromvalues(**nested) == nested

    def test_big_endian_subrecord(self):
        data = Nested.fromvalues(byteorder='>', **self.nested).tobytes()
        nested = Nested.frombuffer(data, byteorder='>')
        assert nested['pair']['a'] == 1
        assert nested['pair'].byteorder == '>'
        assert nested['pairs'][1]['c'] == 6


class TestLists:
    def setup_class(self):
        self.pairs = [Pair.fromvalues(a=i, b=1, c=i+1) for i in range(3)]
        self.raw = b''.join(pair.tobytes() for pair in self.pairs)

    def test_location_view(self):
        buffer = bytes(range(10))
        region, rva = location_view(buffer, (3, 5))
        assert bytes(region) == b'\x05\x06\x07'
        assert rva == 5
        with pytest.raises(OutOfBoundsError):
            location_view(buffer, (6, 5))

    def test_read_array(self):
        pairs = read_array(Pair, b'\x00' + self.raw, 1, 3)
        assert pairs == tuple(self.pairs)
        assert read_array(Pair, self.raw, 0, 0) == ()
        with pytest.raises(OutOfBoundsError):
            read_array(Pair, self.raw, 0, 4)

    def test_read_array_huge_count(self):
        with pytest.raises(OutOfBoundsError):
            read_array(Pair, self.raw, 0, 0xffffffff)

    def test_read_list(self):
        data = struct.pack('<I', 3) + self.raw
        assert read_list(Pair, data) == tuple(self.pairs)
        assert read_list(Pair, data, (len(data), 0)) == tuple(self.pairs)

    def test_read_list_big_endian(self):
        data = struct.pack('>I', 1) + Pair.fromvalues(
            byteorder='>', a=5).tobytes()
        pairs = read_list(Pair, data, byteorder='>')
        assert len(pairs) == 1
        assert pairs[0]['a'] == 5

    def test_read_list_padded_count(self):
        data = struct.pack('<II', 3, 0) + self.raw
        assert read_list(Pair, data, (len(data), 0)) == tuple(self.pairs)

    def test_read_list_too_small(self):
        data = struct.pack('<I', 3) + self.raw
        with pytest.raises(DecodeError):
            read_list(Pair, data, (len(data) - 8, 0))
        with pytest.raises(OutOfBoundsError):
            read_list(Pair, data[:-1])
