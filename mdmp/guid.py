# Licensed under the GPLv3 - see LICENSE
"""Globally unique identifiers and their textual forms.

A GUID is stored as a 32-bit, two 16-bit, and eight 8-bit fields.  Two
textual conventions are in use: the hyphenated lower-case form shown by
debuggers, and the compact upper-case form used by symbol servers.  Both
format the integer fields as decoded; no byte-order normalisation is done,
so a GUID read with the wrong byte order formats differently.
"""
import numpy as np

from .base.record import RecordBase


__all__ = ['GUID']


class GUID(RecordBase):
    """Globally unique identifier.

    Parameters
    ----------
    words : `~numpy.ndarray` or None
        Zero-dimensional array with the GUID's dtype.
    verify : bool, optional
        Whether to do basic verification of integrity.  Default: `True`.

    Examples
    --------
    >>> guid = GUID.fromvalues(data1=10, data2=11, data3=12,
    ...                        data4=[1, 2, 3, 4, 5, 6, 7, 8])
    >>> str(guid)
    '0000000a-000b-000c-0102-030405060708'
    >>> guid.compact
    '0000000A000B000C0102030405060708'
    """

    _dtype = np.dtype([('data1', '<u4'),
                       ('data2', '<u2'),
                       ('data3', '<u2'),
                       ('data4', 'u1', (8,))])

    @property
    def hyphenated(self):
        """Debugger form, e.g., '0000000a-000b-000c-0102-030405060708'."""
        data4 = bytes(self['data4'])
        return '{:08x}-{:04x}-{:04x}-{}-{}'.format(
            self['data1'], self['data2'], self['data3'],
            data4[:2].hex(), data4[2:].hex())

    @property
    def compact(self):
        """Symbol-server form, e.g., '0000000A000B000C0102030405060708'."""
        return '{:08X}{:04X}{:04X}{}'.format(
            self['data1'], self['data2'], self['data3'],
            bytes(self['data4']).hex().upper())

    def is_null(self):
        """Whether all fields are zero."""
        return not any(self.words.tobytes())

    def __str__(self):
        return self.hyphenated

    def __repr__(self):
        return f"<{self.__class__.__name__} {self.hyphenated}>"
