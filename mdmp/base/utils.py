# Licensed under the GPLv3 - see LICENSE
"""Utilities shared by the record definitions."""
import numpy as np
from astropy.time import Time
from astropy.utils import classproperty


__all__ = ['fixedvalue', 'unix_time', 'filetime_to_time',
           'FILETIME_UNIX_EPOCH', 'decode_utf16_array']


FILETIME_UNIX_EPOCH = 116444736000000000
"""Windows FILETIME (100 ns ticks since 1601-01-01) of 1970-01-01."""


class fixedvalue(classproperty):
    """Property that is fixed for all instances of a class.

    Based on `astropy.utils.decorators.classproperty`, but with
    a setter that passes if the value is identical to the fixed
    value, and otherwise raises a `ValueError`.
    """
    def __set__(self, instance, value):
        fixed_value = self.__get__(instance, type(instance))
        if value != fixed_value:
            raise ValueError('fixed property can only be set to {}.'
                             .format(fixed_value))


def unix_time(seconds):
    """Convert seconds since 1970-01-01 (as in ``time_date_stamp``) to Time.

    Returns `None` for a zero time stamp, which producers use for "unknown".
    """
    if not seconds:
        return None
    return Time(seconds, format='unix', scale='utc')


def filetime_to_time(filetime):
    """Convert a Windows FILETIME to `~astropy.time.Time`.

    A FILETIME counts 100 ns intervals since 1601-01-01.  Returns `None`
    for zero, which is used for "not set".
    """
    if not filetime:
        return None
    ticks = int(filetime) - FILETIME_UNIX_EPOCH
    # Split in integer and fractional seconds to keep full precision.
    seconds, remainder = divmod(ticks, 10_000_000)
    return Time(seconds, remainder / 1e7, format='unix', scale='utc')


def decode_utf16_array(array):
    """Decode a fixed-size UTF-16 code unit array up to the first NUL.

    Parameters
    ----------
    array : `~numpy.ndarray` of unsigned 16-bit integers
        Code units, in any byte order.
    """
    units = np.asanyarray(array).astype('<u2')
    nul = np.flatnonzero(units == 0)
    if nul.size:
        units = units[:nul[0]]
    return units.tobytes().decode('utf-16-le', errors='replace')
