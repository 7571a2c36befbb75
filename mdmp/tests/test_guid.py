# Licensed under the GPLv3 - see LICENSE
import struct

import pytest

from ..guid import GUID


class TestGUID:
    def setup_class(self):
        self.data = struct.pack('<IHH8B', 10, 11, 12, 1, 2, 3, 4, 5, 6, 7, 8)
        self.guid = GUID.frombuffer(self.data)

    def test_size(self):
        assert GUID.nbytes == 16

    def test_hyphenated(self):
        assert str(self.guid) == '0000000a-000b-000c-0102-030405060708'
        assert self.guid.hyphenated == str(self.guid)
        assert repr(self.guid) == (
            '<GUID 0000000a-000b-000c-0102-030405060708>')

    def test_compact(self):
        assert self.guid.compact == '0000000A000B000C0102030405060708'

    def test_fromvalues(self):
        guid = GUID.fromvalues(data1=10, data2=11, data3=12,
                               data4=[1, 2, 3, 4, 5, 6, 7, 8])
        assert guid == self.guid
        assert guid.tobytes() == self.data

    def test_endianness_naive(self):
        guid = GUID.frombuffer(self.data, byteorder='>')
        assert str(guid) == '0a000000-0b00-0c00-0102-030405060708'
        big = GUID.fromvalues(byteorder='>', **self.guid)
        assert str(big) == str(self.guid)

    def test_null(self):
        assert GUID.fromvalues().is_null()
        assert not self.guid.is_null()
        assert str(GUID.fromvalues()) == (
            '00000000-0000-0000-0000-000000000000')
