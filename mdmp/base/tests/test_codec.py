# Licensed under the GPLv3 - see LICENSE
import struct

import numpy as np
import pytest
from numpy.testing import assert_array_equal

from ..codec import byteorder_char, buffer_nbytes, check_bounds, read, read_bytes
from ..errors import DecodeError, OutOfBoundsError


class TestRead:
    def setup_class(self):
        self.data = bytes(range(16))

    def test_little_endian(self):
        value, nbytes = read(self.data, 0, 'u4')
        assert value == 0x03020100
        assert type(value) is int
        assert nbytes == 4

    @pytest.mark.parametrize('byteorder', ('>', 'big'))
    def test_big_endian(self, byteorder):
        value, nbytes = read(self.data, 0, 'u4', byteorder)
        assert value == 0x00010203
        assert nbytes == 4

    def test_byteorder_overrides_dtype(self):
        assert read(self.data, 2, '>u2', '<')[0] == 0x0302
        assert read(self.data, 2, '<u2', '>')[0] == 0x0203

    def test_u8(self):
        data = struct.pack('<Q', 0x0123456789abcdef)
        assert read(data, 0, 'u8')[0] == 0x0123456789abcdef
        assert read(data[::-1], 0, 'u8', '>')[0] == 0x0123456789abcdef

    def test_count(self):
        value, nbytes = read(self.data, 4, 'u2', count=3)
        assert_array_equal(value, [0x0504, 0x0706, 0x0908])
        assert nbytes == 6
        assert not value.flags.writeable

    def test_bounds(self):
        assert read(self.data, 12, 'u4')[0] == 0x0f0e0d0c
        with pytest.raises(OutOfBoundsError) as exc:
            read(self.data, 13, 'u4')
        assert exc.value.offset == 13
        with pytest.raises(OutOfBoundsError):
            read(self.data, -1, 'u1')
        with pytest.raises(OutOfBoundsError):
            read(self.data, 10, 'u2', count=4)

    def test_error_hierarchy(self):
        with pytest.raises(EOFError):
            read(self.data, 16, 'u1')
        with pytest.raises(DecodeError):
            read(self.data, 16, 'u1')
        with pytest.raises(ValueError):
            read(self.data, 16, 'u1')

    @pytest.mark.parametrize('convert', (bytes, bytearray, memoryview,
                                         lambda d: np.frombuffer(d, 'u1')))
    def test_buffer_types(self, convert):
        buffer = convert(self.data)
        assert buffer_nbytes(buffer) == 16
        assert read(buffer, 8, 'u4')[0] == 0x0b0a0908

    def test_value_is_copy(self):
        data = bytearray(self.data)
        raw, nbytes = read_bytes(data, 2, 3)
        data[2] = 255
        assert raw == b'\x02\x03\x04'
        assert nbytes == 3


def test_check_bounds():
    data = b'\x00' * 8
    assert check_bounds(data, 8, 0) == 8
    assert check_bounds(data, 0, 8) == 0
    with pytest.raises(OutOfBoundsError):
        check_bounds(data, 1, 8)
    with pytest.raises(OutOfBoundsError):
        check_bounds(data, 0, -1)


def test_byteorder_char():
    assert byteorder_char('little') == '<'
    assert byteorder_char('<') == '<'
    assert byteorder_char('big') == '>'
    with pytest.raises(ValueError):
        byteorder_char('middle')
    with pytest.raises(ValueError):
        byteorder_char(None)
