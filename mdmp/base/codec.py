# Licensed under the GPLv3 - see LICENSE
"""Primitive reads of fixed-width values from an in-memory buffer.

All functions take an absolute ``offset`` and an explicit ``byteorder``;
the byte order of the machine running the decoder is never used.  Values
returned are copies, so they remain valid after the buffer is released.
"""
from operator import index

import numpy as np

from .errors import OutOfBoundsError


__all__ = ['byteorder_char', 'buffer_nbytes', 'check_bounds',
           'read', 'read_bytes']


_BYTEORDERS = {'<': '<', 'little': '<', '>': '>', 'big': '>'}


def byteorder_char(byteorder):
    """Normalise a byte order specification to '<' or '>'.

    Parameters
    ----------
    byteorder : str
        One of '<', 'little', '>', or 'big'.
    """
    try:
        return _BYTEORDERS[byteorder]
    except (KeyError, TypeError):
        raise ValueError(f"byteorder should be one of {set(_BYTEORDERS)}, "
                         f"not {byteorder!r}") from None


def buffer_nbytes(buffer):
    """Number of bytes in a buffer-protocol object."""
    return memoryview(buffer).nbytes


def check_bounds(buffer, offset, nbytes):
    """Check that ``nbytes`` bytes can be read at ``offset``.

    Raises
    ------
    OutOfBoundsError
        If the offset is negative or the read would extend past the end.
    """
    offset = index(offset)
    nbytes = index(nbytes)
    size = buffer_nbytes(buffer)
    if offset < 0 or nbytes < 0 or offset + nbytes > size:
        raise OutOfBoundsError(
            f"cannot read {nbytes} bytes at offset {offset} from a buffer "
            f"of {size} bytes", offset=offset)
    return offset


def read_bytes(buffer, offset, nbytes):
    """Copy ``nbytes`` raw bytes starting at ``offset``.

    Returns
    -------
    value : bytes
    nbytes : int
        Number of bytes consumed.
    """
    offset = check_bounds(buffer, offset, nbytes)
    return bytes(memoryview(buffer).cast('B')[offset:offset+nbytes]), nbytes


def read(buffer, offset, dtype, byteorder='<', count=None):
    """Read a fixed-width value (or an array of them) at ``offset``.

    Parameters
    ----------
    buffer : buffer-protocol object
        Data to read from.
    offset : int
        Absolute offset of the value in ``buffer``.
    dtype : str or `~numpy.dtype`
        Type of the value, e.g., 'u4' or 'u8'.  Any byte order given in the
        type itself is overridden by ``byteorder``.
    byteorder : str, optional
        Byte order of the data, '<' (default) or '>'.
    count : int, optional
        If given, read an array of ``count`` values.

    Returns
    -------
    value : int or `~numpy.ndarray`
        Python integer for scalars; read-only array if ``count`` is given.
    nbytes : int
        Number of bytes consumed.
    """
    dtype = np.dtype(dtype).newbyteorder(byteorder_char(byteorder))
    n = 1 if count is None else index(count)
    nbytes = dtype.itemsize * n
    raw, _ = read_bytes(buffer, offset, nbytes)
    value = np.frombuffer(raw, dtype=dtype, count=n)
    if count is None:
        return value[0].item(), nbytes
    return value, nbytes
