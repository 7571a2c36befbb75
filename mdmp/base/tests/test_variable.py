# Licensed under the GPLv3 - see LICENSE
import struct

import numpy as np
import pytest

from ..errors import DecodeError, MissingTerminatorError, OutOfBoundsError
from ..variable import LengthPrefixedBase, RemainderRecordBase


class Blob(LengthPrefixedBase):
    pass


class Wide(LengthPrefixedBase):
    _unit = 2


class Terminated(LengthPrefixedBase):
    _terminator = b'\x00'

    def decode_payload(self, payload):
        return payload.decode('ascii')


class Tail(RemainderRecordBase):
    _dtype = np.dtype([('kind', '<u4')])


class TestLengthPrefixed:
    def test_decode(self):
        data = b'\xff' + struct.pack('<I', 3) + b'abcdef'
        blob = Blob.frombuffer(data, 1)
        assert blob.value == b'abc'
        assert blob.nbytes == 7

    def test_big_endian(self):
        data = struct.pack('>I', 2) + b'ab'
        blob = Blob.frombuffer(data, byteorder='>')
        assert blob.value == b'ab'
        assert blob.tobytes() == data

    def test_empty(self):
        blob = Blob.frombuffer(struct.pack('<I', 0))
        assert blob.value == b''

    def test_beyond_buffer(self):
        with pytest.raises(OutOfBoundsError):
            Blob.frombuffer(struct.pack('<I', 4) + b'abc')
        with pytest.raises(OutOfBoundsError):
            Blob.frombuffer(b'\x01\x00')

    def test_unit(self):
        with pytest.raises(DecodeError):
            Wide.frombuffer(struct.pack('<I', 3) + b'abc')
        assert Wide.frombuffer(struct.pack('<I', 2) + b'ab').value == b'ab'

    def test_terminator(self):
        data = struct.pack('<I', 2) + b'ok\x00'
        terminated = Terminated.frombuffer(data)
        assert terminated.value == 'ok'
        assert terminated.nbytes == 7
        assert terminated.tobytes() == data
        with pytest.raises(MissingTerminatorError):
            Terminated.frombuffer(data[:-1])
        with pytest.raises(MissingTerminatorError):
            Terminated.frombuffer(data[:-1] + b'!')

    def test_fromvalue(self):
        blob = Blob.fromvalue(b'xyz')
        assert blob.tobytes() == struct.pack('<I', 3) + b'xyz'
        assert Blob.frombuffer(blob.tobytes()) == blob


class TestRemainder:
    def setup_class(self):
        self.data = struct.pack('<I', 5) + b'trailing'

    def test_fromlocation(self):
        tail = Tail.fromlocation(b'\x00' + self.data, (len(self.data), 1))
        assert tail['kind'] == 5
        assert tail.trailing == b'trailing'
        assert tail.fixed_nbytes == 4
        assert tail.nbytes == 12

    def test_region_limits_trailing(self):
        tail = Tail.fromlocation(self.data, (6, 0))
        assert tail.trailing == b'tr'

    def test_frombuffer(self):
        assert Tail.frombuffer(self.data).trailing == b'trailing'
        assert Tail.frombuffer(self.data, nbytes=4).trailing == b''

    def test_too_small(self):
        with pytest.raises(OutOfBoundsError):
            Tail.fromlocation(self.data, (3, 0))
        with pytest.raises(OutOfBoundsError):
            Tail.fromlocation(self.data, (13, 0))

    def test_fromvalues(self):
        tail = Tail.fromvalues(kind=5, trailing=b'trailing')
        assert tail.tobytes() == self.data
        assert tail == Tail.frombuffer(self.data)
        assert tail != Tail.fromvalues(kind=5, trailing=b'other')
