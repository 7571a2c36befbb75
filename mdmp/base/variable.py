# Licensed under the GPLv3 - see LICENSE
"""
Base definitions for records with a variable-length trailing part.

Two layouts are supported:

- length-prefixed, where a 32-bit byte count precedes the payload, possibly
  followed by a required terminator (`LengthPrefixedBase`);
- remainder-consumes-rest, where fixed fields are followed by a blob filling
  the rest of the region given by an enclosing location descriptor, without
  any internal length field (`RemainderRecordBase`).

In both cases, a length that would extend beyond the available data is an
error; the payload is never silently clipped.
"""
from astropy.utils import lazyproperty

from .codec import byteorder_char, buffer_nbytes, read, read_bytes
from .errors import DecodeError, MissingTerminatorError, OutOfBoundsError
from .record import RecordBase, location_view
from .utils import fixedvalue


__all__ = ['LengthPrefixedBase', 'RemainderRecordBase']


class LengthPrefixedBase:
    """Base for a payload preceded by its length in bytes.

    Subclasses should define:

      _terminator : bytes that must follow the payload, or `None`.

      _unit : int; the payload length has to be a multiple of it.

      decode_payload(payload) : method turning the raw payload into a value.

    Parameters
    ----------
    payload : bytes
        Raw payload, without length and terminator.
    byteorder : str, optional
        Byte order the payload was stored in.  Default: '<'.
    """
    _length_dtype = 'u4'
    _terminator = None
    _unit = 1

    def __init__(self, payload, byteorder='<'):
        self.payload = bytes(payload)
        self.byteorder = byteorder_char(byteorder)

    @property
    def nbytes(self):
        """Number of bytes consumed, including length and terminator."""
        return (4 + len(self.payload)
                + (len(self._terminator) if self._terminator else 0))

    @lazyproperty
    def value(self):
        """Decoded payload."""
        return self.decode_payload(self.payload)

    def decode_payload(self, payload):
        return payload

    @classmethod
    def frombuffer(cls, buffer, offset=0, byteorder='<'):
        """Decode the length-prefixed payload at ``offset``.

        Raises
        ------
        OutOfBoundsError
            If the length or the payload extend beyond the buffer.
        MissingTerminatorError
            If a required terminator does not follow the payload.
        DecodeError
            If the length is not a multiple of the payload unit.
        """
        length, nbytes = read(buffer, offset, cls._length_dtype, byteorder)
        if length % cls._unit:
            raise DecodeError(f"{cls.__name__} length {length} is not a "
                              f"multiple of {cls._unit}", offset=offset)
        payload, _ = read_bytes(buffer, offset + nbytes, length)
        if cls._terminator is not None:
            end = offset + nbytes + length
            terminator = bytes(memoryview(buffer).cast('B')[
                end:end+len(cls._terminator)])
            if terminator != cls._terminator:
                raise MissingTerminatorError(
                    f"{cls.__name__} of length {length} at offset {offset} "
                    f"is not followed by {cls._terminator!r}", offset=end)
        return cls(payload, byteorder=byteorder)

    @classmethod
    def fromvalue(cls, value, byteorder='<'):
        """Create an instance from a decoded value."""
        return cls(cls.encode_value(value, byteorder), byteorder=byteorder)

    @staticmethod
    def encode_value(value, byteorder):
        return bytes(value)

    def tobytes(self):
        """Encode including length prefix and terminator."""
        length = len(self.payload).to_bytes(
            4, 'little' if self.byteorder == '<' else 'big')
        return length + self.payload + (self._terminator or b'')

    def __eq__(self, other):
        return type(self) is type(other) and self.payload == other.payload

    def __str__(self):
        return str(self.value)

    def __repr__(self):
        return f"<{self.__class__.__name__} {self.value!r}>"


class RemainderRecordBase(RecordBase):
    """Base for records of fixed fields followed by a trailing blob.

    The length of the trailing blob is not part of the record, but follows
    from the size of the region it was stored in, typically given by an
    enclosing location descriptor.

    Parameters
    ----------
    words : `~numpy.ndarray` or None
        The fixed fields, as for `~mdmp.base.record.RecordBase`.
    trailing : bytes, optional
        The trailing blob.
    verify : bool, optional
        Whether to do basic verification of integrity.  Default: `True`.
    """

    def __init__(self, words, trailing=b'', verify=True):
        self.trailing = bytes(trailing)
        super().__init__(words, verify=verify)

    @fixedvalue
    def fixed_nbytes(cls):
        """Size of the fixed part of the record."""
        return cls._dtype.itemsize

    @property
    def nbytes(self):
        """Total size of the record, including the trailing blob."""
        return self._dtype.itemsize + len(self.trailing)

    @classmethod
    def fromlocation(cls, buffer, location, byteorder='<', verify=True):
        """Decode the record filling the region described by ``location``.

        Raises
        ------
        OutOfBoundsError
            If the region extends beyond the buffer, or is too small to hold
            the fixed part of the record.
        """
        region, rva = location_view(buffer, location)
        fixed = cls._dtype.itemsize
        if len(region) < fixed:
            raise OutOfBoundsError(
                f"{cls.__name__} needs at least {fixed} bytes but location "
                f"at {rva} holds only {len(region)}", offset=rva)
        record = RecordBase.frombuffer.__func__(
            cls, region[:fixed], byteorder=byteorder, verify=False)
        record.trailing = bytes(region[fixed:])
        if verify:
            record.verify()
        return record

    @classmethod
    def frombuffer(cls, buffer, offset=0, byteorder='<', verify=True,
                   nbytes=None):
        """Decode the record at ``offset``.

        Parameters
        ----------
        nbytes : int, optional
            Total size of the record.  Default: the rest of the buffer.
        """
        if nbytes is None:
            nbytes = buffer_nbytes(buffer) - offset
        return cls.fromlocation(buffer, (nbytes, offset),
                                byteorder=byteorder, verify=verify)

    @classmethod
    def fromvalues(cls, trailing=b'', byteorder='<', verify=True, **kwargs):
        record = super().fromvalues(byteorder=byteorder, verify=False,
                                    **kwargs)
        record.trailing = bytes(trailing)
        if verify:
            record.verify()
        return record

    def tobytes(self):
        return self.words.tobytes() + self.trailing

    def __eq__(self, other):
        return super().__eq__(other) and self.trailing == other.trailing
