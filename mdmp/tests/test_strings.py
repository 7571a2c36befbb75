# Licensed under the GPLv3 - see LICENSE
import struct

import pytest

from ..base.errors import DecodeError, MissingTerminatorError, OutOfBoundsError
from ..strings import (MinidumpString, MinidumpUTF8String, read_string,
                       read_utf8_string)


class TestUTF16:
    def test_decode(self):
        data = b'\x00' * 4 + struct.pack('<I', 10) + 'héllo'.encode(
            'utf-16-le') + b'\x00\x00'
        string = MinidumpString.frombuffer(data, 4)
        assert string.value == 'héllo'
        assert string.nbytes == 14
        assert read_string(data, 4) == 'héllo'

    def test_no_terminator_needed(self):
        data = struct.pack('<I', 4) + 'ab'.encode('utf-16-le')
        assert read_string(data, 0) == 'ab'

    def test_big_endian(self):
        data = struct.pack('>I', 4) + 'ab'.encode('utf-16-be')
        assert read_string(data, 0, byteorder='>') == 'ab'

    def test_odd_length(self):
        data = struct.pack('<I', 3) + b'abc'
        with pytest.raises(DecodeError):
            read_string(data, 0)

    def test_beyond_buffer(self):
        data = struct.pack('<I', 100) + 'ab'.encode('utf-16-le')
        with pytest.raises(OutOfBoundsError):
            read_string(data, 0)

    def test_fromvalue(self):
        string = MinidumpString.fromvalue('C:\\Windows\\ntdll.dll')
        data = string.tobytes()
        assert data[:4] == struct.pack('<I', 40)
        assert MinidumpString.frombuffer(data) == string
        assert str(string) == 'C:\\Windows\\ntdll.dll'


class TestUTF8:
    def test_hello(self):
        data = struct.pack('<I', 5) + b'hello\x00'
        string = MinidumpUTF8String.frombuffer(data)
        assert string.value == 'hello'
        assert string.nbytes == 10
        assert read_utf8_string(data, 0) == 'hello'

    def test_missing_terminator(self):
        data = struct.pack('<I', 5) + b'hello'
        with pytest.raises(MissingTerminatorError):
            read_utf8_string(data, 0)
        with pytest.raises(DecodeError):
            read_utf8_string(data, 0)

    def test_wrong_terminator(self):
        data = struct.pack('<I', 5) + b'hello!'
        with pytest.raises(MissingTerminatorError):
            read_utf8_string(data, 0)

    def test_multibyte(self):
        text = 'crash ☹'
        data = MinidumpUTF8String.fromvalue(text).tobytes()
        assert data.endswith(b'\x00')
        assert read_utf8_string(data, 0) == text
