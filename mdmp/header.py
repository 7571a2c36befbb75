# Licensed under the GPLv3 - see LICENSE
"""
Definitions for the file header, the stream directory, and descriptors.

The header is found at the start of the file and points to the stream
directory, an array of `Directory` entries each giving the type and location
of a stream.  Locations are always relative to the start of the file, never
to the structure containing them.

Usage is like::

    >>> from mdmp.header import Header, read_directory
    >>> header = Header.frombuffer(data)                # doctest: +SKIP
    >>> for entry in read_directory(data, header):      # doctest: +SKIP
    ...     print(entry['stream_type'], entry['location']['data_size'])
"""
import numpy as np

from .base.errors import DecodeError
from .base.record import RecordBase, read_array
from .base.utils import unix_time
from .constants.streams import STREAM_TYPES
from .constants.system import MINIDUMP_TYPES


__all__ = ['MINIDUMP_SIGNATURE', 'MINIDUMP_VERSION', 'LocationDescriptor',
           'LocationDescriptor64', 'MemoryDescriptor', 'MemoryDescriptor64',
           'Header', 'Directory', 'read_directory', 'detect_byteorder']


MINIDUMP_SIGNATURE = 0x504d444d
"""Header signature, 'MDMP' when read as little-endian bytes."""

MINIDUMP_VERSION = 42899
"""Format version, in the low 16 bits of the header version."""


class LocationDescriptor(RecordBase):
    """Size and absolute offset (RVA) of a region of the file."""

    _dtype = np.dtype([('data_size', '<u4'),
                       ('rva', '<u4')])

    def __repr__(self):
        return "<{} {} bytes at {}>".format(
            self.__class__.__name__, self['data_size'], self['rva'])


class LocationDescriptor64(LocationDescriptor):
    """Size and absolute offset of a region, for files beyond 4 GiB."""

    _dtype = np.dtype([('data_size', '<u8'),
                       ('rva', '<u8')])


class MemoryDescriptor(RecordBase):
    """Address range of captured memory and where its contents are stored."""

    _dtype = np.dtype([('start_of_memory_range', '<u8'),
                       ('memory', LocationDescriptor._dtype)])
    _subrecords = {'memory': LocationDescriptor}

    @property
    def end_of_memory_range(self):
        """Address just beyond the captured range."""
        return self['start_of_memory_range'] + self['memory']['data_size']


class MemoryDescriptor64(RecordBase):
    """Address range of captured memory in a 64-bit memory list.

    The contents are not located by the descriptor itself, but follow those
    of the previous descriptor, starting at the list's ``base_rva``.
    """

    _dtype = np.dtype([('start_of_memory_range', '<u8'),
                       ('data_size', '<u8')])

    @property
    def end_of_memory_range(self):
        """Address just beyond the captured range."""
        return self['start_of_memory_range'] + self['data_size']


class Header(RecordBase):
    """Minidump file header.

    Parameters
    ----------
    words : `~numpy.ndarray` or None
        Zero-dimensional array with the header's dtype.
    verify : bool, optional
        Whether to check the signature and version.  Default: `True`.

    Raises
    ------
    DecodeError
        If verification is requested and the signature or version does
        not match those of a minidump.
    """

    _dtype = np.dtype([('signature', '<u4'),
                       ('version', '<u4'),
                       ('stream_count', '<u4'),
                       ('stream_directory_rva', '<u4'),
                       ('checksum', '<u4'),
                       ('time_date_stamp', '<u4'),
                       ('flags', '<u8')])
    _symbols = {'flags': MINIDUMP_TYPES}

    def verify(self):
        super().verify()
        if self['signature'] != MINIDUMP_SIGNATURE:
            raise DecodeError("header signature {:#010x} is not that of a "
                              "minidump".format(self['signature']), offset=0)
        if self['version'] & 0xffff != MINIDUMP_VERSION:
            raise DecodeError("header version {} is not {}".format(
                self['version'] & 0xffff, MINIDUMP_VERSION), offset=4)

    @classmethod
    def fromvalues(cls, byteorder='<', verify=True, **kwargs):
        """Initialise a header from values.

        The signature and version default to those of a minidump.
        """
        kwargs.setdefault('signature', MINIDUMP_SIGNATURE)
        kwargs.setdefault('version', MINIDUMP_VERSION)
        return super().fromvalues(byteorder=byteorder, verify=verify,
                                  **kwargs)

    @property
    def implementation_version(self):
        """Producer-specific high 16 bits of the version."""
        return self['version'] >> 16

    @property
    def time(self):
        """Time the dump was written, or `None` if not set."""
        return unix_time(self['time_date_stamp'])


class Directory(RecordBase):
    """Stream directory entry, giving the type and location of a stream."""

    _dtype = np.dtype([('stream_type', '<u4'),
                       ('location', LocationDescriptor._dtype)])
    _subrecords = {'location': LocationDescriptor}
    _symbols = {'stream_type': STREAM_TYPES}

    def __repr__(self):
        location = self['location']
        return "<{} {!r}: {} bytes at {}>".format(
            self.__class__.__name__, self['stream_type'],
            location['data_size'], location['rva'])


def read_directory(buffer, header, verify=True):
    """Decode the stream directory pointed to by a header.

    Parameters
    ----------
    buffer : buffer-protocol object
        Contents of the whole file.
    header : `Header`
        Header of the file; also sets the byte order.

    Returns
    -------
    entries : tuple of `Directory`

    Raises
    ------
    OutOfBoundsError
        If the directory does not fit in the buffer.
    """
    return read_array(Directory, buffer, header['stream_directory_rva'],
                      header['stream_count'], byteorder=header.byteorder,
                      verify=verify)


def detect_byteorder(buffer):
    """Determine the byte order of a file from its header signature.

    Producers write files in the byte order of the machine the dump was
    taken on, so the signature reads as 'MDMP' or 'PMDM'.

    Returns
    -------
    byteorder : '<' or '>'

    Raises
    ------
    DecodeError
        If the signature matches neither.
    """
    signature = bytes(memoryview(buffer).cast('B')[:4])
    if signature == b'MDMP':
        return '<'
    if signature == b'PMDM':
        return '>'
    raise DecodeError(f"signature {signature!r} is not that of a minidump",
                      offset=0)
