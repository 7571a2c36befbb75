# Licensed under the GPLv3 - see LICENSE
import struct

import pytest
from astropy.time import Time

from ..base.errors import DecodeError, OutOfBoundsError
from ..header import (MINIDUMP_SIGNATURE, MINIDUMP_VERSION, Header,
                      Directory, LocationDescriptor, LocationDescriptor64,
                      MemoryDescriptor, MemoryDescriptor64, read_directory,
                      detect_byteorder)


def make_file(byteorder='<', stream_count=1):
    header = struct.pack(byteorder + 'IIIIIIQ', MINIDUMP_SIGNATURE,
                         0x1234a793, stream_count, 32, 0, 1500000000, 0x2)
    directory = b''.join(
        struct.pack(byteorder + 'III', 7 + i, 56, 0x100 + i * 56)
        for i in range(stream_count))
    return header + directory


class TestHeader:
    def setup_class(self):
        self.data = make_file()
        self.header = Header.frombuffer(self.data)

    def test_sizes(self):
        assert Header.nbytes == 32
        assert Directory.nbytes == 12
        assert LocationDescriptor.nbytes == 8
        assert LocationDescriptor64.nbytes == 16
        assert MemoryDescriptor.nbytes == 16
        assert MemoryDescriptor64.nbytes == 16

    def test_decode(self):
        header = self.header
        assert header['signature'] == 0x504d444d
        assert header['stream_count'] == 1
        assert header['stream_directory_rva'] == 32
        assert header['version'] & 0xffff == MINIDUMP_VERSION
        assert header.implementation_version == 0x1234
        assert header['flags'].name == 'MiniDumpWithFullMemory'

    def test_time(self):
        assert isinstance(self.header.time, Time)
        assert self.header.time.isot == '2017-07-14T02:40:00.000'
        assert Header.fromvalues().time is None

    def test_directory(self):
        entries = read_directory(self.data, self.header)
        assert len(entries) == 1
        entry = entries[0]
        assert entry['stream_type'] == 7
        assert entry['stream_type'].name == 'SystemInfoStream'
        assert entry['location']['data_size'] == 56
        assert entry['location']['rva'] == 0x100
        assert 'SystemInfoStream' in repr(entry)

    def test_directory_beyond_buffer(self):
        with pytest.raises(OutOfBoundsError):
            read_directory(self.data[:-1], self.header)
        header = Header.fromvalues(stream_count=1000,
                                   stream_directory_rva=32)
        with pytest.raises(OutOfBoundsError):
            read_directory(self.data, header)

    def test_one_byte_short(self):
        with pytest.raises(OutOfBoundsError):
            Header.frombuffer(self.data[:31])

    def test_bad_signature(self):
        data = b'MDMQ' + self.data[4:]
        with pytest.raises(DecodeError):
            Header.frombuffer(data)
        header = Header.frombuffer(data, verify=False)
        assert header['stream_count'] == 1

    def test_bad_version(self):
        data = self.data[:4] + struct.pack('<I', 42898) + self.data[8:]
        with pytest.raises(DecodeError):
            Header.frombuffer(data)

    def test_fromvalues(self):
        header = Header.fromvalues(stream_count=1, stream_directory_rva=32,
                                   time_date_stamp=1500000000, flags=2)
        assert header['signature'] == MINIDUMP_SIGNATURE
        assert header['version'] == MINIDUMP_VERSION
        assert Header.frombuffer(header.tobytes()) == header
        assert Header.fromvalues(**self.header) == self.header

    def test_big_endian(self):
        data = make_file('>', 2)
        assert data[:4] == b'PMDM'
        assert detect_byteorder(data) == '>'
        header = Header.frombuffer(data, byteorder='>')
        assert header['stream_count'] == 2
        entries = read_directory(data, header)
        assert [entry['stream_type'] for entry in entries] == [7, 8]
        assert entries[1]['location']['rva'] == 0x100 + 56


def test_detect_byteorder():
    assert detect_byteorder(make_file()) == '<'
    with pytest.raises(DecodeError):
        detect_byteorder(b'ELF\x7f' + b'\x00' * 28)


class TestDescriptors:
    def test_memory_descriptor(self):
        location = LocationDescriptor.fromvalues(data_size=0x100, rva=0x40)
        descriptor = MemoryDescriptor.fromvalues(
            start_of_memory_range=0x7fff0000, memory=location)
        assert descriptor['memory'] == location
        assert descriptor.end_of_memory_range == 0x7fff0100
        assert repr(location) == '<LocationDescriptor 256 bytes at 64>'

    def test_memory_descriptor64(self):
        descriptor = MemoryDescriptor64.fromvalues(
            start_of_memory_range=1 << 40, data_size=0x1000)
        assert descriptor.end_of_memory_range == (1 << 40) + 0x1000

    def test_location64(self):
        location = LocationDescriptor64.fromvalues(data_size=1 << 33,
                                                   rva=1 << 32)
        assert location['rva'] == 1 << 32
        assert location['data_size'] == 1 << 33
