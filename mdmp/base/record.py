# Licensed under the GPLv3 - see LICENSE
"""
Base definitions for fixed-layout minidump records.

Defines a `RecordBase` class that holds the bytes of a record as a read-only
zero-dimensional `numpy` structured array, providing access to the fields
via a dict-like interface.  Layouts are captured using a `numpy.dtype`
without alignment, so that field order, widths and explicit padding match
the external C definitions exactly.  Dtypes are defined as little-endian;
big-endian data are read with the byte-swapped version of the same dtype.
"""
from operator import index

import numpy as np

from .codec import byteorder_char, check_bounds, read, read_bytes
from .errors import DecodeError, OutOfBoundsError
from .utils import fixedvalue


__all__ = ['RecordBase', 'decode', 'read_array', 'read_list',
           'location_view']


class RecordBase:
    """Base class for all records with a fixed layout.

    Generally, the actual class should define:

      _dtype : `~numpy.dtype` describing the layout (little-endian, packed).

    and may define:

      _subrecords : dict of field name to `RecordBase` subclass, used to
          return nested structures as typed records.

      _symbols : dict of field name to `~mdmp.base.symbols.SymbolTable`,
          used to return codes as `~mdmp.base.symbols.Symbol` instances.

    Parameters
    ----------
    words : `~numpy.ndarray` or None
        Zero-dimensional array with dtype ``cls._dtype`` (in either byte
        order).  If `None`, set to zeros (and skip verification).
    verify : bool, optional
        Whether to do basic verification of integrity.  Default: `True`.
    """

    _dtype = np.dtype([])
    _subrecords = {}
    _symbols = {}

    def __init__(self, words, verify=True):
        if words is None:
            words = np.zeros((), self._dtype)
            words.flags['WRITEABLE'] = False
            verify = False
        self.words = words
        if verify:
            self.verify()

    def verify(self):
        """Verify that the words have the layout of this record."""
        assert self.words.shape == ()
        assert self.words.dtype in (self._dtype,
                                    self._dtype.newbyteorder('>'))

    @fixedvalue
    def nbytes(cls):
        """Size of the record in bytes."""
        return cls._dtype.itemsize

    @property
    def byteorder(self):
        """Byte order of the underlying data, '<' or '>'."""
        return '<' if self.words.dtype == self._dtype else '>'

    @classmethod
    def frombuffer(cls, buffer, offset=0, byteorder='<', verify=True,
                   **kwargs):
        """Decode the record at ``offset`` in ``buffer``.

        Parameters
        ----------
        buffer : buffer-protocol object
            Data to decode, e.g., `bytes` or a memory map of a whole file.
        offset : int, optional
            Absolute offset of the record in ``buffer``.  Default: 0.
        byteorder : str, optional
            Byte order of the data, '<' (default) or '>'.
        verify : bool, optional
            Whether to do basic verification of integrity.  Default: `True`.
        **kwargs
            Any further arguments needed for initialisation.

        Raises
        ------
        OutOfBoundsError
            If the buffer does not hold ``cls.nbytes`` bytes at ``offset``.
        """
        dtype = cls._dtype.newbyteorder(byteorder_char(byteorder))
        raw, _ = read_bytes(buffer, offset, dtype.itemsize)
        words = np.ndarray(shape=(), dtype=dtype, buffer=raw)
        return cls(words, verify=verify, **kwargs)

    @classmethod
    def fromfile(cls, fh, byteorder='<', verify=True, **kwargs):
        """Read the record from the current position of a filehandle.

        Arguments are the same as for class initialisation.  The record
        constructed will be immutable.
        """
        s = fh.read(cls._dtype.itemsize)
        if len(s) < cls._dtype.itemsize:
            raise OutOfBoundsError(f'reached EOF while reading '
                                   f'{cls.__name__}')
        return cls.frombuffer(s, byteorder=byteorder, verify=verify,
                              **kwargs)

    @classmethod
    def fromlocation(cls, buffer, location, byteorder='<', verify=True,
                     **kwargs):
        """Decode the record pointed to by a location descriptor.

        The record has to fit within the region described by ``location``.

        Parameters
        ----------
        location : `~mdmp.header.LocationDescriptor` or tuple
            Location descriptor, or a (``data_size``, ``rva``) pair.
        """
        region, rva = location_view(buffer, location)
        try:
            return cls.frombuffer(region, byteorder=byteorder,
                                  verify=verify, **kwargs)
        except OutOfBoundsError as exc:
            raise OutOfBoundsError(
                f'{cls.__name__} needs {cls._dtype.itemsize} bytes but '
                f'location at {rva} holds only {len(region)}',
                offset=rva) from exc

    @classmethod
    def fromvalues(cls, byteorder='<', verify=True, **kwargs):
        """Initialise a record from field values.

        Here, the values must be given as keyword arguments, i.e., for any
        ``record = cls.frombuffer(<data>)``,
        ``cls.fromvalues(**record) == record``.  Fields not given are zero.

        Nested records can be given as record instances; raw (union) regions
        as `bytes`, which are zero-padded as needed.
        """
        dtype = cls._dtype.newbyteorder(byteorder_char(byteorder))
        words = np.zeros((), dtype)
        for key, value in kwargs.items():
            if key not in dtype.names:
                raise KeyError(f"{cls.__name__} does not contain {key}")
            field = dtype.fields[key][0]
            if isinstance(value, RecordBase):
                value = value.words
            elif (isinstance(value, (tuple, list))
                  and value and isinstance(value[0], RecordBase)):
                value = np.array([v.words for v in value])
            elif isinstance(value, bytes) and field.kind == 'V':
                value = np.void(value.ljust(field.itemsize, b'\x00'))
            words[key] = value
        words.flags['WRITEABLE'] = False
        return cls(words, verify=verify)

    def tobytes(self):
        """Encode the record."""
        return self.words.tobytes()

    def __getitem__(self, item):
        """Get the value of a particular field of the record."""
        try:
            value = self.words[item]
        except (ValueError, KeyError, IndexError):
            raise KeyError("{0} does not contain {1}"
                           .format(self.__class__.__name__, item)) from None
        return self._convert(item, value)

    def _convert(self, item, value):
        subrecord = self._subrecords.get(item)
        if subrecord is not None:
            if value.ndim == 0:
                return subrecord(value, verify=False)
            return tuple(subrecord(value[i, ...], verify=False)
                         for i in range(value.shape[0]))

        if value.dtype.kind == 'V' and value.dtype.names is None:
            return value.tobytes()

        if value.ndim == 0:
            value = value.item()
            table = self._symbols.get(item)
            return value if table is None else table(value)

        return value

    def keys(self):
        """All fields defined for this record."""
        return self._dtype.names

    def get(self, key, default=None):
        try:
            return self[key]
        except KeyError:
            return default

    def items(self):
        return [(key, self[key]) for key in self.keys()]

    def __iter__(self):
        return iter(self.keys())

    def __contains__(self, key):
        return key in self.keys()

    def __eq__(self, other):
        return (type(self) is type(other)
                and self.words.dtype == other.words.dtype
                and self.words.tobytes() == other.words.tobytes())

    def _repr_value(self, key, value):
        if isinstance(value, np.ndarray) and value.size > 8:
            return f"array({value[:4].tolist()} ... [{value.size}])"
        if isinstance(value, bytes) and len(value) > 16:
            return f"{value[:16]!r}... [{len(value)}]"
        if isinstance(value, RecordBase):
            return f"<{value.__class__.__name__}>"
        return repr(value)

    def __repr__(self):
        name = self.__class__.__name__
        outs = [f"{k}: {self._repr_value(k, self[k])}" for k in self.keys()]
        return "<{} {}>".format(name, (",\n  " + " "*len(name)).join(outs))


def decode(cls, buffer, offset=0, **kwargs):
    """Decode a record and report the number of bytes consumed.

    Parameters
    ----------
    cls : type
        Record class, i.e., a subclass of `RecordBase` or any class with a
        ``frombuffer`` class method and ``nbytes`` attribute.
    buffer : buffer-protocol object
        Data to decode.
    offset : int, optional
        Absolute offset of the record.
    **kwargs
        Passed on to ``cls.frombuffer``.

    Returns
    -------
    record : instance of ``cls``
    nbytes : int
        Number of bytes consumed.
    """
    record = cls.frombuffer(buffer, offset, **kwargs)
    return record, record.nbytes


def location_view(buffer, location):
    """Get a view of the region of ``buffer`` described by a location.

    Parameters
    ----------
    buffer : buffer-protocol object
    location : `~mdmp.header.LocationDescriptor` or tuple
        Location descriptor (32 or 64 bit), or (``data_size``, ``rva``).

    Returns
    -------
    region : `memoryview`
        The bytes of the region.
    rva : int
        The absolute offset of the region.

    Raises
    ------
    OutOfBoundsError
        If the region extends beyond the end of the buffer.
    """
    if isinstance(location, RecordBase):
        data_size, rva = location['data_size'], location['rva']
    else:
        data_size, rva = location
    rva = check_bounds(buffer, rva, data_size)
    view = memoryview(buffer).cast('B')
    return view[rva:rva+index(data_size)], rva


def read_array(cls, buffer, offset, count, byteorder='<', verify=True):
    """Decode ``count`` consecutive records starting at ``offset``.

    The whole array is checked to fit in the buffer before anything is
    decoded, so a corrupt count cannot cause excessive work.

    Returns
    -------
    records : tuple
    """
    count = index(count)
    check_bounds(buffer, offset, cls._dtype.itemsize * count)
    return tuple(cls.frombuffer(buffer, offset + i * cls._dtype.itemsize,
                                byteorder=byteorder, verify=verify)
                 for i in range(count))


def read_list(cls, buffer, offset=0, byteorder='<', count_dtype='u4',
              verify=True):
    """Decode a list stream: an entry count followed by the entries.

    This is the layout of, e.g., the thread, module, and memory lists.
    Some producers pad the 32-bit count to 8 bytes; this is detected by
    comparing with ``size`` where given via a location descriptor.

    Parameters
    ----------
    cls : type
        Class of the entries.
    buffer : buffer-protocol object
    offset : int or location descriptor
        Absolute offset of the list, or a location descriptor, in which
        case the list should fit within the described region.
    count_dtype : str, optional
        Type of the count.  Default: 'u4'.

    Returns
    -------
    records : tuple
    """
    size = None
    if isinstance(offset, (RecordBase, tuple)):
        region, offset = location_view(buffer, offset)
        size = len(region)

    count, nbytes = read(buffer, offset, count_dtype, byteorder)
    needed = nbytes + count * cls._dtype.itemsize
    if size is not None:
        if size == needed + 4 and nbytes == 4:
            # Padded count, as written by some producers.
            nbytes += 4
        elif size < needed:
            raise DecodeError(f"list of {count} {cls.__name__} needs "
                              f"{needed} bytes but only {size} are given",
                              offset=offset)
    return read_array(cls, buffer, offset + nbytes, count,
                      byteorder=byteorder, verify=verify)
