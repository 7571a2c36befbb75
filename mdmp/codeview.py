# Licensed under the GPLv3 - see LICENSE
"""
Debug records referred to by modules.

A module's ``cv_record`` points to a CodeView record, whose layout is given
by a 4-byte signature at its start: 'RSDS' for PDB 7.0 files, 'NB10' for
PDB 2.0 files, and 'BpEL' for the ELF build identifiers that Breakpad-style
producers write.  Each is a fixed part followed by a variable part filling
the rest of the region given by the location descriptor.  `read_debug_record`
dispatches on the signature; records with other signatures are returned as
`CvInfoUnknown`, with their bytes preserved.

A module's ``misc_record`` points to an `ImageDebugMisc` record instead.
"""
import numpy as np

from .base.codec import read
from .base.errors import DecodeError, OutOfBoundsError
from .base.record import location_view
from .base.variable import RemainderRecordBase
from .constants.system import CV_SIGNATURES
from .guid import GUID


__all__ = ['CvInfoBase', 'CvInfoPdb70', 'CvInfoPdb20', 'CvInfoElf',
           'CvInfoUnknown', 'ImageDebugMisc', 'read_debug_record',
           'debug_identifier', 'build_id_to_guid', 'CV_RECORD_CLASSES']


def _nul_terminated(data):
    return data.split(b'\x00', 1)[0].decode('utf-8', errors='replace')


def build_id_to_guid(build_id, byteorder='<'):
    """Convert an ELF build identifier to a GUID.

    The first 16 bytes of the identifier (zero-padded if shorter) are
    interpreted as a GUID, as done by Breakpad for its module identifiers.

    Parameters
    ----------
    build_id : bytes
    byteorder : str, optional
        Byte order used to interpret the GUID fields.  Default: '<'.
    """
    return GUID.frombuffer(bytes(build_id[:16]).ljust(16, b'\x00'),
                           byteorder=byteorder)


class CvInfoBase(RemainderRecordBase):
    """Base for CodeView records, which start with a signature.

    Subclasses define ``_cv_signature``, which is checked on verification.
    """
    _cv_signature = None
    _symbols = {'cv_signature': CV_SIGNATURES}

    def verify(self):
        super().verify()
        if (self._cv_signature is not None
                and self['cv_signature'] != self._cv_signature):
            raise DecodeError("{} signature {:#010x} should be {:#010x}"
                              .format(self.__class__.__name__,
                                      self['cv_signature'],
                                      self._cv_signature))

    @classmethod
    def fromvalues(cls, trailing=b'', byteorder='<', verify=True, **kwargs):
        if cls._cv_signature is not None:
            kwargs.setdefault('cv_signature', cls._cv_signature)
        return super().fromvalues(trailing=trailing, byteorder=byteorder,
                                  verify=verify, **kwargs)


class CvInfoPdb70(CvInfoBase):
    """CodeView record for a PDB 7.0 file ('RSDS').

    The variable part holds the NUL-terminated UTF-8 name of the PDB file.
    """
    _cv_signature = CV_SIGNATURES['CV_SIGNATURE_RSDS']
    _dtype = np.dtype([('cv_signature', '<u4'),
                       ('signature', GUID._dtype),
                       ('age', '<u4')])
    _subrecords = {'signature': GUID}

    @property
    def pdb_file_name(self):
        return _nul_terminated(self.trailing)

    @property
    def identifier(self):
        return '{}{:X}'.format(self['signature'].compact, self['age'])


class CvInfoPdb20(CvInfoBase):
    """CodeView record for a PDB 2.0 file ('NB10')."""
    _cv_signature = CV_SIGNATURES['CV_SIGNATURE_NB10']
    _dtype = np.dtype([('cv_signature', '<u4'),
                       ('cv_offset', '<u4'),
                       ('signature', '<u4'),
                       ('age', '<u4')])

    @property
    def pdb_file_name(self):
        return _nul_terminated(self.trailing)

    @property
    def identifier(self):
        return '{:08X}{:X}'.format(self['signature'], self['age'])


class CvInfoElf(CvInfoBase):
    """Breakpad record holding the build identifier of an ELF file ('BpEL').

    The variable part is the build identifier itself, of any length.
    """
    _cv_signature = CV_SIGNATURES['CV_SIGNATURE_ELF']
    _dtype = np.dtype([('cv_signature', '<u4')])

    @property
    def build_id(self):
        return self.trailing

    @property
    def guid(self):
        """Build identifier converted to a GUID."""
        return build_id_to_guid(self.build_id, byteorder=self.byteorder)

    @property
    def identifier(self):
        # ELF files have no age; Breakpad uses zero.
        return self.guid.compact + '0'


class CvInfoUnknown(CvInfoBase):
    """CodeView record with a signature that is not understood."""
    _dtype = np.dtype([('cv_signature', '<u4')])

    @property
    def identifier(self):
        return None


CV_RECORD_CLASSES = {cls._cv_signature: cls
                     for cls in (CvInfoPdb70, CvInfoPdb20, CvInfoElf)}
"""CodeView record classes, by their signature."""


class ImageDebugMisc(RemainderRecordBase):
    """Miscellaneous debug record, which may hold the name of a DBG file."""
    _dtype = np.dtype([('data_type', '<u4'),
                       ('length', '<u4'),
                       ('unicode', 'u1'),
                       ('reserved', 'u1', (3,))])

    @property
    def data(self):
        """The data, clipped to the record's own length if it is smaller."""
        length = self['length'] - self.fixed_nbytes
        return self.trailing[:length] if length >= 0 else self.trailing

    @property
    def data_string(self):
        """The data decoded as a NUL-terminated string."""
        data = self.data
        if not self['unicode']:
            return _nul_terminated(data)
        text = data[:len(data) & ~1].decode(
            'utf-16-le' if self.byteorder == '<' else 'utf-16-be',
            errors='replace')
        return text.split('\x00', 1)[0]


def read_debug_record(buffer, location, byteorder='<', verify=True):
    """Decode the CodeView record described by a location descriptor.

    Parameters
    ----------
    buffer : buffer-protocol object
        Contents of the whole file.
    location : `~mdmp.header.LocationDescriptor` or tuple
        Location of the record, e.g., a module's ``cv_record``.
    byteorder : str, optional
        Byte order of the data, '<' (default) or '>'.

    Returns
    -------
    record : `CvInfoBase` subclass instance, or `None`
        `None` if the location is empty.  An instance of `CvInfoUnknown`
        if the signature is not recognized.

    Raises
    ------
    OutOfBoundsError
        If the region extends beyond the buffer, or is too small for the
        fixed part of the record.
    """
    region, rva = location_view(buffer, location)
    if len(region) == 0:
        return None
    if len(region) < 4:
        raise OutOfBoundsError(f"debug record at {rva} of {len(region)} "
                               f"bytes is too small to hold a signature",
                               offset=rva)
    signature, _ = read(region, 0, 'u4', byteorder)
    cls = CV_RECORD_CLASSES.get(signature, CvInfoUnknown)
    return cls.fromlocation(buffer, location, byteorder=byteorder,
                            verify=verify)


def debug_identifier(record):
    """Identifier used by symbol servers to find the debug file.

    For PDB 7.0 files, the compact GUID followed by the age in hexadecimal;
    for PDB 2.0 files, the signature and age; and for ELF files, the build
    identifier converted to a GUID, followed by a zero age.

    Returns
    -------
    identifier : str or `None`
        `None` if no identifier can be constructed.
    """
    if record is None:
        return None
    return record.identifier
