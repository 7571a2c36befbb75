# Licensed under the GPLv3 - see LICENSE
"""
Definitions for the streams added by Mozilla for macOS.

The macOS crash info stream collects the ``__crash_info`` sections that
system libraries fill in when they abort.  The stream starts with a header
that locates up to `MAC_CRASH_INFOS_MAX` records.  Each record has a fixed
part, whose layout depends on its version, followed by NUL-separated UTF-8
strings filling the rest of the region the record is stored in.
"""
import numpy as np

from .base.record import RecordBase, location_view
from .base.versioned import VersionedRecordBase, extend_dtype
from .constants.streams import STREAM_TYPES
from .header import LocationDescriptor
from .strings import read_string


__all__ = ['MAC_CRASH_INFOS_MAX', 'MAC_CRASH_INFO_STRINGS',
           'MacCrashInfoHeader', 'MacCrashInfoRecord', 'MacCrashInfoRecord1',
           'MacCrashInfoRecord2', 'MacCrashInfoRecord3',
           'MacCrashInfoRecord4', 'MacCrashInfoRecord5', 'MacBootargs',
           'read_mac_crash_info']


MAC_CRASH_INFOS_MAX = 20

MAC_CRASH_INFO_STRINGS = ('module_path', 'message', 'signature_string',
                          'backtrace', 'message2')
"""Names of the strings following the fixed part of a crash info record."""


class MacCrashInfoHeader(RecordBase):
    """Header of the macOS crash info stream."""

    _dtype = np.dtype([('stream_type', '<u4'),
                       ('record_count', '<u4'),
                       ('record_start_size', '<u4'),
                       ('records', LocationDescriptor._dtype,
                        (MAC_CRASH_INFOS_MAX,))])
    _subrecords = {'records': LocationDescriptor}
    _symbols = {'stream_type': STREAM_TYPES}

    @property
    def locations(self):
        """Locations of the records actually present."""
        count = min(self['record_count'], MAC_CRASH_INFOS_MAX)
        return self['records'][:count]


class MacCrashInfoRecord(VersionedRecordBase):
    """Crash information provided by one module.

    Use ``MacCrashInfoRecord.fromlocation`` to decode the version given by
    the ``version`` field, together with the strings that follow.
    """
    _versions = {}
    _discriminator = 'version'
    _discriminator_key = 'version'
    _symbols = {'stream_type': STREAM_TYPES}

    def __init__(self, words, trailing=b'', verify=True):
        self.trailing = bytes(trailing)
        super().__init__(words, verify=verify)

    @classmethod
    def fromlocation(cls, buffer, location, byteorder='<', verify=True,
                     start_size=None):
        """Decode the record in the region described by ``location``.

        Parameters
        ----------
        start_size : int, optional
            Offset of the strings relative to the start of the record, as
            given by the header's ``record_start_size``.  Default: the size
            of the fixed part of the version decoded.
        """
        region, _ = location_view(buffer, location)
        record = cls.frombuffer(region, byteorder=byteorder, verify=verify)
        if start_size is None or start_size < record.nbytes:
            start_size = record.nbytes
        record.trailing = bytes(region[start_size:])
        return record

    @classmethod
    def fromvalues(cls, trailing=b'', byteorder='<', verify=True, **kwargs):
        """Initialise a record from values and (encoded) strings.

        The version defaults to that of the class.
        """
        if cls._version is not None:
            kwargs.setdefault('version', cls._version)
        record = super().fromvalues(byteorder=byteorder, verify=verify,
                                    **kwargs)
        record.trailing = bytes(trailing)
        return record

    @property
    def strings(self):
        """The strings following the fixed part, as a dict."""
        values = self.trailing.split(b'\x00')
        return {name: (values[i].decode('utf-8', errors='replace')
                       if i < len(values) else '')
                for i, name in enumerate(MAC_CRASH_INFO_STRINGS)}

    def __getattr__(self, attr):
        if attr in MAC_CRASH_INFO_STRINGS:
            return self.strings[attr]
        raise AttributeError(f"{self.__class__.__name__!r} object has no "
                             f"attribute {attr!r}")

    def tobytes(self):
        return super().tobytes() + self.trailing

    def __eq__(self, other):
        return super().__eq__(other) and self.trailing == other.trailing


class MacCrashInfoRecord1(MacCrashInfoRecord):
    _version = 1
    _dtype = np.dtype([('stream_type', '<u4'),
                       ('version', '<u8'),
                       ('thread', '<u8'),
                       ('dialog_mode', '<u8')])


class MacCrashInfoRecord2(MacCrashInfoRecord):
    _version = 2
    _dtype = MacCrashInfoRecord1._dtype


class MacCrashInfoRecord3(MacCrashInfoRecord):
    _version = 3
    _dtype = MacCrashInfoRecord1._dtype


class MacCrashInfoRecord4(MacCrashInfoRecord):
    _version = 4
    _dtype = MacCrashInfoRecord1._dtype


class MacCrashInfoRecord5(MacCrashInfoRecord):
    _version = 5
    _dtype = extend_dtype(MacCrashInfoRecord4._dtype, [
        ('abort_cause', '<u8')])


class MacBootargs(RecordBase):
    """The macOS boot arguments stream."""

    _dtype = np.dtype([('stream_type', '<u4'),
                       ('bootargs', '<u8')])
    _symbols = {'stream_type': STREAM_TYPES}

    def read_bootargs(self, buffer):
        """Decode the boot arguments, or `None` if absent."""
        rva = self['bootargs']
        return read_string(buffer, rva, self.byteorder) if rva else None


def read_mac_crash_info(buffer, location, byteorder='<', verify=True):
    """Decode the macOS crash info stream.

    Returns
    -------
    header : `MacCrashInfoHeader`
    records : tuple of `MacCrashInfoRecord` subclass instances
    """
    header = MacCrashInfoHeader.fromlocation(buffer, location,
                                             byteorder=byteorder,
                                             verify=verify)
    return header, tuple(
        MacCrashInfoRecord.fromlocation(
            buffer, record_location, byteorder=byteorder, verify=verify,
            start_size=header['record_start_size'])
        for record_location in header.locations)
