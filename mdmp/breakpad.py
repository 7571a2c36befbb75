# Licensed under the GPLv3 - see LICENSE
"""
Definitions for the streams added by Breakpad.

Breakpad defines stream types with prefix 0x4767 ('Gg').  Most of its Linux
streams (``/proc`` contents, ``/etc/lsb-release``, etc.) are simply the raw
text of the corresponding files and need no decoding; the structured ones
are defined here.
"""
import numpy as np

from .base.record import RecordBase, read_array
from .base.utils import decode_utf16_array
from .constants.system import ASSERTION_TYPES, BREAKPAD_INFO_VALIDITY
from .strings import read_string


__all__ = ['BreakpadInfo', 'AssertionInfo', 'LinkMap', 'DsoDebug']


class BreakpadInfo(RecordBase):
    """Identifiers of the thread that wrote the dump and the one that asked.

    Whether each identifier is valid is given by ``validity``; the
    properties `dump_thread_id` and `requesting_thread_id` return `None`
    for invalid identifiers.
    """

    _dtype = np.dtype([('validity', '<u4'),
                       ('dump_thread_id', '<u4'),
                       ('requesting_thread_id', '<u4')])
    _symbols = {'validity': BREAKPAD_INFO_VALIDITY}

    def _valid(self, key, flag):
        return self[key] if self['validity'] & flag else None

    @property
    def dump_thread_id(self):
        return self._valid('dump_thread_id', 1)

    @property
    def requesting_thread_id(self):
        return self._valid('requesting_thread_id', 2)


class AssertionInfo(RecordBase):
    """Information on a failed assertion or an invalid parameter."""

    _dtype = np.dtype([('expression', '<u2', (128,)),
                       ('function', '<u2', (128,)),
                       ('file', '<u2', (128,)),
                       ('line', '<u4'),
                       ('type', '<u4')])
    _symbols = {'type': ASSERTION_TYPES}

    def _convert(self, item, value):
        if item in ('expression', 'function', 'file'):
            return decode_utf16_array(value)
        return super()._convert(item, value)


class LinkMap(RecordBase):
    """Entry of the dynamic linker's list of loaded objects."""

    _dtype = np.dtype([('addr', '<u8'),
                       ('name', '<u4'),
                       ('padding', '<u4'),
                       ('ld', '<u8')])

    def read_name(self, buffer):
        """Decode the name of the loaded object."""
        return read_string(buffer, self['name'], byteorder=self.byteorder)


class DsoDebug(RecordBase):
    """Contents of the dynamic linker's debug structure (``r_debug``)."""

    _dtype = np.dtype([('version', '<u4'),
                       ('map', '<u4'),
                       ('dso_count', '<u4'),
                       ('padding', '<u4'),
                       ('brk', '<u8'),
                       ('ldbase', '<u8'),
                       ('dynamic', '<u8')])

    def read_link_maps(self, buffer, verify=True):
        """Decode the list of loaded objects.

        Returns
        -------
        link_maps : tuple of `LinkMap`
        """
        return read_array(LinkMap, buffer, self['map'], self['dso_count'],
                          byteorder=self.byteorder, verify=verify)
