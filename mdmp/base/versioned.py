# Licensed under the GPLv3 - see LICENSE
"""
Base definitions for families of versioned records.

A family consists of records whose layouts grow monotonically: each version
has the fields of the previous one, followed by new fields.  Which version
is actually present is indicated by a discriminator, either the size of the
record (e.g., ``size_of_info``) or an explicit version number.  Decoding
through the family class reads the discriminator from the common prefix and
returns an instance of the appropriate version class, never reading beyond
the declared size, and falling back to a lower version (with a
`~mdmp.base.errors.TruncatedRecordWarning`) if the buffer holds less than
the discriminator claims.
"""
import warnings

import numpy as np

from .codec import buffer_nbytes, byteorder_char
from .errors import DecodeError, OutOfBoundsError, TruncatedRecordWarning
from .record import RecordBase, location_view


__all__ = ['extend_dtype', 'VersionedRecordMeta', 'VersionedRecordBase']


def extend_dtype(dtype, fields):
    """Create a dtype holding all fields of ``dtype`` followed by ``fields``.

    Parameters
    ----------
    dtype : `~numpy.dtype`
        Layout of the previous version.
    fields : list of tuple
        Additional fields, as for the `~numpy.dtype` constructor.
    """
    return np.dtype([(name, dtype.fields[name][0]) for name in dtype.names]
                    + list(fields))


class VersionedRecordMeta(type):
    """Registry of the versions of a record family.

    The family class should define a ``_versions`` dict; any subclass that
    defines ``_version`` is automatically registered in it.  Checks for
    conflicts before registering.
    """
    def __init__(cls, name, bases, dct):
        super().__init__(name, bases, dct)
        if '_versions' in dct:
            return

        version = dct.get('_version')
        if version is None:
            return

        if version in cls._versions:
            raise ValueError("version {0} already registered for {1}"
                             .format(version, cls._versions[version]))
        previous = [v for v in cls._versions if v < version]
        if previous:
            # Layouts must extend that of the previous version.
            before = cls._versions[max(previous)]._dtype
            assert cls._dtype.names[:len(before.names)] == before.names
        cls._versions[version] = cls


class VersionedRecordBase(RecordBase, metaclass=VersionedRecordMeta):
    """Base class for families of versioned records.

    The family class should define:

      _versions : dict, filled with version number -> version class.

      _discriminator : 'size' or 'version', telling whether the
          discriminator gives the number of bytes or a version number.

      _discriminator_key : name of the field holding the discriminator,
          or `None` if it has to be passed in (e.g., from an enclosing
          stream header).

    Each version class should define ``_version`` and ``_dtype``, the latter
    usually created with `extend_dtype` from the previous version's.

    Decoded records have attributes ``truncated``, which is `True` if the
    version was lowered because the buffer was too short, and
    ``discriminator``, the value used to select the version.
    """
    _versions = {}
    _version = None
    _discriminator = 'size'
    _discriminator_key = None

    truncated = False
    discriminator = None

    @property
    def version(self):
        """Version of the record that was decoded."""
        return self._version

    @property
    def declared_size(self):
        """Size claimed by the record, or `None` for version families."""
        if self._discriminator != 'size':
            return None
        return self.discriminator

    @classmethod
    def select_version(cls, discriminator):
        """The version class indicated by a discriminator value.

        For size discriminators, this is the largest version that fits in
        the given size; for version numbers, the largest known version not
        beyond the one given (later versions may have fields not modeled).

        Raises
        ------
        DecodeError
            If the discriminator indicates less than the lowest version.
        """
        if cls._discriminator == 'size':
            candidates = [v for v, c in cls._versions.items()
                          if c._dtype.itemsize <= discriminator]
        else:
            candidates = [v for v in cls._versions if v <= discriminator]

        if not candidates:
            raise DecodeError("{0} {1} of {2} is smaller than that of the "
                              "lowest version".format(
                                  cls.__name__, cls._discriminator,
                                  discriminator))
        return cls._versions[max(candidates)]

    @classmethod
    def frombuffer(cls, buffer, offset=0, byteorder='<', verify=True,
                   discriminator=None, size=None):
        """Decode a record of the family at ``offset`` in ``buffer``.

        If called on a specific version class, decode just that version.

        Parameters
        ----------
        buffer : buffer-protocol object
            Data to decode.
        offset : int, optional
            Absolute offset of the record in ``buffer``.  Default: 0.
        byteorder : str, optional
            Byte order of the data, '<' (default) or '>'.
        verify : bool, optional
            Whether to do basic verification of integrity.  Default: `True`.
        discriminator : int, optional
            Size or version, if not stored in the record itself.
        size : int, optional
            Number of bytes available for the record, e.g., from an
            enclosing location descriptor.  Default: rest of buffer.

        Raises
        ------
        OutOfBoundsError
            If the buffer does not hold even the lowest version.
        DecodeError
            If the discriminator indicates less than the lowest version.
        TypeError
            If no discriminator is given for a record that does not store
            its own.
        """
        if cls._version is not None:
            record = super().frombuffer(buffer, offset, byteorder=byteorder,
                                        verify=verify)
            if discriminator is not None:
                record.discriminator = discriminator
            return record

        if discriminator is None and cls._discriminator_key is None:
            raise TypeError(f"{cls.__name__} does not store its "
                            f"{cls._discriminator}, so a discriminator "
                            f"must be given.")

        byteorder = byteorder_char(byteorder)
        first = cls._versions[min(cls._versions)]
        # The common prefix should always be present.
        available = buffer_nbytes(buffer) - offset
        if size is not None:
            available = min(available, size)
        if first.nbytes > available:
            raise OutOfBoundsError(
                f"{cls.__name__} needs at least {first.nbytes} bytes but "
                f"only {available} are available", offset=offset)

        prefix = first.frombuffer(buffer, offset, byteorder=byteorder,
                                  verify=False)
        if discriminator is None:
            discriminator = prefix[cls._discriminator_key]

        version_cls = cls.select_version(discriminator)
        truncated = False
        while version_cls.nbytes > available:
            truncated = True
            version_cls = cls._versions[max(
                v for v in cls._versions if v < version_cls._version)]

        if truncated:
            warnings.warn("{0} at offset {1} indicates {2} {3} but only {4} "
                          "bytes are present; decoded as version {5}."
                          .format(cls.__name__, offset, cls._discriminator,
                                  discriminator, available,
                                  version_cls._version),
                          TruncatedRecordWarning)

        record = version_cls.frombuffer(buffer, offset, byteorder=byteorder,
                                        verify=verify)
        record.truncated = truncated
        record.discriminator = discriminator
        return record

    @classmethod
    def fromlocation(cls, buffer, location, byteorder='<', verify=True,
                     discriminator=None):
        """Decode the record within the region described by ``location``."""
        region, _ = location_view(buffer, location)
        return cls.frombuffer(region, byteorder=byteorder, verify=verify,
                              discriminator=discriminator)

    def __repr__(self):
        out = super().__repr__()
        if self.truncated:
            out = out[:-1] + " (truncated)>"
        return out
