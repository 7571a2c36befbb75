# Licensed under the GPLv3 - see LICENSE
import struct

import pytest

from ..base.errors import DecodeError, OutOfBoundsError
from ..codeview import (
    CvInfoPdb70, CvInfoPdb20, CvInfoElf, CvInfoUnknown, ImageDebugMisc,
    read_debug_record, debug_identifier, build_id_to_guid)
from ..guid import GUID


def place(blob, offset=16):
    """Put a blob in a buffer, returning buffer and (size, rva) location."""
    return b'\xee' * offset + blob + b'\xee' * 8, (len(blob), offset)


class TestPdb70:
    def setup_class(self):
        self.guid = GUID.fromvalues(data1=0x12345678, data2=0x9abc,
                                    data3=0xdef0, data4=list(range(8)))
        self.blob = (struct.pack('<I', 0x53445352) + self.guid.tobytes()
                     + struct.pack('<I', 0x2a) + b'app.pdb\x00')

    def test_decode(self):
        data, location = place(self.blob)
        record = read_debug_record(data, location)
        assert type(record) is CvInfoPdb70
        assert record['cv_signature'].name == 'CV_SIGNATURE_RSDS'
        assert record['signature'] == self.guid
        assert record['age'] == 0x2a
        assert record.pdb_file_name == 'app.pdb'
        assert record.fixed_nbytes == 24
        assert record.nbytes == len(self.blob)

    def test_identifier(self):
        data, location = place(self.blob)
        record = read_debug_record(data, location)
        assert record.identifier == '123456789ABCDEF000010203040506072A'
        assert debug_identifier(record) == record.identifier

    def test_fromvalues(self):
        record = CvInfoPdb70.fromvalues(signature=self.guid, age=0x2a,
                                        trailing=b'app.pdb\x00')
        assert record.tobytes() == self.blob

    def test_wrong_signature(self):
        blob = b'NB10' + self.blob[4:]
        with pytest.raises(DecodeError):
            CvInfoPdb70.frombuffer(blob)

    def test_too_short(self):
        data, location = place(self.blob[:20])
        with pytest.raises(OutOfBoundsError):
            read_debug_record(data, location)


class TestPdb20:
    def test_decode(self):
        blob = struct.pack('<4I', 0x3031424e, 0, 0x5a5b5c5d, 1) + b'x.pdb\x00'
        data, location = place(blob)
        record = read_debug_record(data, location)
        assert type(record) is CvInfoPdb20
        assert record['signature'] == 0x5a5b5c5d
        assert record.pdb_file_name == 'x.pdb'
        assert record.identifier == '5A5B5C5D1'


class TestElf:
    def test_long_build_id(self):
        build_id = bytes(range(20))
        data, location = place(struct.pack('<I', 0x4270454c) + build_id)
        record = read_debug_record(data, location)
        assert type(record) is CvInfoElf
        assert record.build_id == build_id
        assert record.guid.compact == '030201000504070608090A0B0C0D0E0F'
        assert record.identifier == '030201000504070608090A0B0C0D0E0F0'

    def test_short_build_id(self):
        guid = build_id_to_guid(b'\x01\x02\x03\x04')
        assert guid['data1'] == 0x04030201
        assert guid['data2'] == 0
        assert not guid.is_null()

    def test_big_endian(self):
        guid = build_id_to_guid(bytes(range(16)), byteorder='>')
        assert guid['data1'] == 0x00010203


class TestOther:
    def test_unknown_signature(self):
        blob = struct.pack('<I', 0x12345678) + b'whatever'
        data, location = place(blob)
        record = read_debug_record(data, location)
        assert type(record) is CvInfoUnknown
        assert record['cv_signature'] == 0x12345678
        assert not record['cv_signature'].known
        assert record.trailing == b'whatever'
        assert record.identifier is None

    def test_empty(self):
        assert read_debug_record(b'\x00' * 32, (0, 0)) is None
        assert debug_identifier(None) is None

    @pytest.mark.parametrize('size', (1, 3))
    def test_too_small_for_signature(self, size):
        with pytest.raises(OutOfBoundsError):
            read_debug_record(b'RSDS' * 4, (size, 0))

    def test_beyond_buffer(self):
        with pytest.raises(OutOfBoundsError):
            read_debug_record(b'RSDS' * 4, (64, 8))


class TestImageDebugMisc:
    def test_ascii(self):
        blob = struct.pack('<IIB3x', 1, 20, 0) + b'app.dbg\x00'
        data, location = place(blob)
        record = ImageDebugMisc.fromlocation(data, location)
        assert record['data_type'] == 1
        assert record.data == b'app.dbg\x00'
        assert record.data_string == 'app.dbg'

    def test_unicode(self):
        name = 'a.dbg\x00'.encode('utf-16-le')
        blob = struct.pack('<IIB3x', 1, 12 + len(name), 1) + name + b'junk'
        data, location = place(blob)
        record = ImageDebugMisc.fromlocation(data, location)
        assert record.data == name
        assert record.data_string == 'a.dbg'
