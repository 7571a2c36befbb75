# Licensed under the GPLv3 - see LICENSE
import struct

import numpy as np
import pytest

from ..errors import DecodeError, OutOfBoundsError, TruncatedRecordWarning
from ..versioned import VersionedRecordBase, extend_dtype


class Info(VersionedRecordBase):
    _versions = {}
    _discriminator = 'size'
    _discriminator_key = 'size'


class Info1(Info):
    _version = 1
    _dtype = np.dtype([('size', '<u4'),
                       ('a', '<u4')])


class Info2(Info):
    _version = 2
    _dtype = extend_dtype(Info1._dtype, [('b', '<u4')])


class Info3(Info):
    _version = 3
    _dtype = extend_dtype(Info2._dtype, [('c', '<u8')])


class Versioned(VersionedRecordBase):
    _versions = {}
    _discriminator = 'version'
    _discriminator_key = 'version'


class Versioned1(Versioned):
    _version = 1
    _dtype = np.dtype([('version', '<u4'),
                       ('a', '<u4')])


class Versioned3(Versioned):
    _version = 3
    _dtype = extend_dtype(Versioned1._dtype, [('b', '<u4')])


class Entry(VersionedRecordBase):
    _versions = {}
    _discriminator = 'size'


class Entry1(Entry):
    _version = 1
    _dtype = np.dtype([('a', '<u4')])


class Entry2(Entry):
    _version = 2
    _dtype = np.dtype([('a', '<u4'), ('b', '<u4')])


def test_extend_dtype():
    assert Info2._dtype.names == ('size', 'a', 'b')
    assert Info2.nbytes == 12
    assert Info3.nbytes == 20
    assert Info._versions == {1: Info1, 2: Info2, 3: Info3}


def test_layouts_are_monotonic():
    versions = sorted(Info._versions)
    for low, high in zip(versions[:-1], versions[1:]):
        low_dtype = Info._versions[low]._dtype
        high_dtype = Info._versions[high]._dtype
        assert high_dtype.names[:len(low_dtype.names)] == low_dtype.names
        assert high_dtype.itemsize > low_dtype.itemsize


def test_duplicate_version():
    with pytest.raises(ValueError):
        class Info2Again(Info):
            _version = 2
            _dtype = Info2._dtype

    assert Info._versions[2] is Info2


class TestSizeDiscriminator:
    def test_exact(self):
        data = struct.pack('<III', 12, 1, 2)
        info = Info.frombuffer(data)
        assert type(info) is Info2
        assert info.version == 2
        assert info['b'] == 2
        assert info.truncated is False
        assert info.declared_size == 12

    def test_between_versions(self):
        data = struct.pack('<III', 16, 1, 2) + b'\x00' * 4
        info = Info.frombuffer(data)
        assert type(info) is Info2
        assert info.declared_size == 16

    def test_beyond_known(self):
        data = struct.pack('<IIIQ', 40, 1, 2, 3) + b'\x00' * 20
        info = Info.frombuffer(data)
        assert type(info) is Info3
        assert info['c'] == 3
        assert info.declared_size == 40

    def test_offset(self):
        data = b'\x00' * 3 + struct.pack('<II', 8, 5)
        info = Info.frombuffer(data, 3)
        assert type(info) is Info1
        assert info['a'] == 5

    def test_truncated(self):
        data = struct.pack('<III', 20, 1, 2)
        with pytest.warns(TruncatedRecordWarning):
            info = Info.frombuffer(data)
        assert type(info) is Info2
        assert info.truncated
        assert info.declared_size == 20
        assert 'truncated' in repr(info)

    def test_truncated_by_size(self):
        data = struct.pack('<IIIQ', 20, 1, 2, 3)
        with pytest.warns(TruncatedRecordWarning):
            info = Info.frombuffer(data, size=12)
        assert type(info) is Info2

    def test_fromlocation(self):
        data = b'\x00' * 4 + struct.pack('<IIIQ', 20, 1, 2, 3)
        info = Info.fromlocation(data, (20, 4))
        assert type(info) is Info3
        with pytest.warns(TruncatedRecordWarning):
            info = Info.fromlocation(data, (16, 4))
        assert type(info) is Info2

    def test_too_small(self):
        with pytest.raises(DecodeError):
            Info.frombuffer(struct.pack('<II', 4, 1))
        with pytest.raises(OutOfBoundsError):
            Info.frombuffer(struct.pack('<I', 8))

    def test_specific_version(self):
        data = struct.pack('<III', 12, 1, 2)
        info = Info1.frombuffer(data)
        assert type(info) is Info1
        assert info['a'] == 1

    def test_big_endian(self):
        data = struct.pack('>III', 12, 1, 2)
        info = Info.frombuffer(data, byteorder='>')
        assert type(info) is Info2
        assert info.byteorder == '>'
        assert info['b'] == 2

    def test_roundtrip(self):
        info = Info.frombuffer(struct.pack('<III', 12, 1, 2))
        assert Info.frombuffer(info.tobytes()) == info


class TestVersionDiscriminator:
    @pytest.mark.parametrize('version, cls', ((1, Versioned1),
                                              (2, Versioned1),
                                              (3, Versioned3),
                                              (7, Versioned3)))
    def test_select(self, version, cls):
        data = struct.pack('<III', version, 1, 2)
        record = Versioned.frombuffer(data)
        assert type(record) is cls
        assert record.discriminator == version
        assert record.declared_size is None

    def test_unknown_low_version(self):
        with pytest.raises(DecodeError):
            Versioned.frombuffer(struct.pack('<III', 0, 1, 2))


class TestExternalDiscriminator:
    def test_given(self):
        data = struct.pack('<II', 1, 2)
        assert type(Entry.frombuffer(data, discriminator=8)) is Entry2
        assert type(Entry.frombuffer(data, discriminator=4)) is Entry1
        assert type(Entry.frombuffer(data, discriminator=6)) is Entry1

    @pytest.mark.parametrize('data', (struct.pack('<II', 1, 2), b''))
    def test_required(self, data):
        with pytest.raises(TypeError):
            Entry.frombuffer(data)
        with pytest.raises(TypeError):
            Entry.fromlocation(data, (len(data), 0))

    def test_version_class_needs_none(self):
        record = Entry2.frombuffer(struct.pack('<II', 1, 2))
        assert record['b'] == 2
        assert record.discriminator is None
