# Licensed under the GPLv3 - see LICENSE
"""
Definitions of the records found in the streams defined with the format.

Most streams are lists: either a count followed by the entries (threads,
modules, memory ranges, thread names), for which
`~mdmp.base.record.read_list` can be used, or a header giving its own size,
the size of each entry, and the number of entries (unloaded modules, memory
info, thread info, handles), for which `read_sized_list` is used.  In the
latter, entries can be larger than the layout known here; any extra bytes
are skipped.

Records refer to strings and further records by absolute offset.  Methods
that follow such references take the buffer holding the whole file as
argument, and decode the referred-to data only on request, so that a
corrupt reference does not affect the record itself.
"""
import numpy as np
from astropy import units as u

from .base.codec import check_bounds
from .base.errors import DecodeError
from .base.record import RecordBase, location_view, read_array
from .base.utils import filetime_to_time, unix_time
from .base.versioned import VersionedRecordBase, extend_dtype
from .codeview import ImageDebugMisc, read_debug_record
from .constants import exception_code_table, exception_flags_table
from .constants.system import (
    FILE_FLAGS, FILE_OS, FILE_TYPES, MEMORY_PROTECTIONS, MEMORY_STATES,
    MEMORY_TYPES, THREAD_DUMP_FLAGS, VS_FFI_SIGNATURE)
from .header import (LocationDescriptor, MemoryDescriptor,
                     MemoryDescriptor64)
from .strings import read_string


__all__ = ['Thread', 'ThreadEx', 'VSFixedFileInfo', 'Module',
           'UnloadedModuleListHeader', 'UnloadedModule', 'ExceptionRecord',
           'ExceptionStream', 'MemoryInfoListHeader', 'MemoryInfo',
           'ThreadInfoListHeader', 'ThreadInfo', 'HandleDataStream',
           'HandleDescriptor', 'HandleDescriptor1', 'HandleDescriptor2',
           'ThreadName', 'Memory64ListHeader', 'read_sized_list',
           'read_handle_data', 'read_memory64_list',
           'EXCEPTION_MAXIMUM_PARAMETERS']


EXCEPTION_MAXIMUM_PARAMETERS = 15


class Thread(RecordBase):
    """Entry of the thread list."""

    _dtype = np.dtype([('thread_id', '<u4'),
                       ('suspend_count', '<u4'),
                       ('priority_class', '<u4'),
                       ('priority', '<u4'),
                       ('teb', '<u8'),
                       ('stack', MemoryDescriptor._dtype),
                       ('thread_context', LocationDescriptor._dtype)])
    _subrecords = {'stack': MemoryDescriptor,
                   'thread_context': LocationDescriptor}

    def read_context(self, buffer, architecture, verify=True):
        """Decode the thread's CPU context.

        Parameters
        ----------
        buffer : buffer-protocol object
            Contents of the whole file.
        architecture : `~mdmp.base.symbols.Symbol`, str, or int
            Architecture tag, most easily obtained from
            `mdmp.system_info.SystemInfo.context_architecture`.  Plain
            integers are interpreted as non-Windows selectors.
        verify : bool, optional
            Whether to check the selector in the context flags.
        """
        from .context import read_context
        return read_context(buffer, self['thread_context'], architecture,
                            byteorder=self.byteorder, verify=verify)

    def read_stack(self, buffer):
        """Copy the captured stack memory of the thread."""
        region, _ = location_view(buffer, self['stack']['memory'])
        return bytes(region)


class ThreadEx(Thread):
    """Entry of the extended thread list, which adds the backing store."""

    _dtype = extend_dtype(Thread._dtype, [
        ('backing_store', MemoryDescriptor._dtype)])
    _subrecords = dict(Thread._subrecords, backing_store=MemoryDescriptor)


class VSFixedFileInfo(RecordBase):
    """Version information of a module.

    All fields are zero if the module had no version information; use
    `is_valid` to check.
    """

    _dtype = np.dtype([('signature', '<u4'),
                       ('struc_version', '<u4'),
                       ('file_version_hi', '<u4'),
                       ('file_version_lo', '<u4'),
                       ('product_version_hi', '<u4'),
                       ('product_version_lo', '<u4'),
                       ('file_flags_mask', '<u4'),
                       ('file_flags', '<u4'),
                       ('file_os', '<u4'),
                       ('file_type', '<u4'),
                       ('file_subtype', '<u4'),
                       ('file_date_hi', '<u4'),
                       ('file_date_lo', '<u4')])
    _symbols = {'file_flags': FILE_FLAGS,
                'file_os': FILE_OS,
                'file_type': FILE_TYPES}

    @property
    def is_valid(self):
        return self['signature'] == VS_FFI_SIGNATURE

    def _version(self, prefix):
        hi, lo = self[prefix + '_hi'], self[prefix + '_lo']
        return (hi >> 16, hi & 0xffff, lo >> 16, lo & 0xffff)

    @property
    def file_version(self):
        """File version as a tuple of four integers."""
        return self._version('file_version')

    @property
    def product_version(self):
        """Product version as a tuple of four integers."""
        return self._version('product_version')


class _NamedModuleMixin:
    """Helpers for records with ``module_name_rva`` and a time stamp."""

    def read_name(self, buffer):
        """Decode the name of the module."""
        return read_string(buffer, self['module_name_rva'],
                           byteorder=self.byteorder)

    @property
    def time(self):
        """Link time of the module, or `None` if not set."""
        return unix_time(self['time_date_stamp'])

    @property
    def end_of_image(self):
        return self['base_of_image'] + self['size_of_image']

    def contains(self, address):
        """Whether an address falls within the module's image."""
        return self['base_of_image'] <= address < self.end_of_image


class Module(_NamedModuleMixin, RecordBase):
    """Entry of the module list."""

    _dtype = np.dtype([('base_of_image', '<u8'),
                       ('size_of_image', '<u4'),
                       ('checksum', '<u4'),
                       ('time_date_stamp', '<u4'),
                       ('module_name_rva', '<u4'),
                       ('version_info', VSFixedFileInfo._dtype),
                       ('cv_record', LocationDescriptor._dtype),
                       ('misc_record', LocationDescriptor._dtype),
                       ('reserved0', '<u8'),
                       ('reserved1', '<u8')])
    _subrecords = {'version_info': VSFixedFileInfo,
                   'cv_record': LocationDescriptor,
                   'misc_record': LocationDescriptor}

    def read_debug_record(self, buffer, verify=True):
        """Decode the CodeView record, or `None` if there is none."""
        return read_debug_record(buffer, self['cv_record'],
                                 byteorder=self.byteorder, verify=verify)

    def read_misc_record(self, buffer, verify=True):
        """Decode the miscellaneous debug record, or `None` if absent."""
        location = self['misc_record']
        if location['data_size'] == 0:
            return None
        return ImageDebugMisc.fromlocation(buffer, location,
                                           byteorder=self.byteorder,
                                           verify=verify)


class UnloadedModuleListHeader(RecordBase):
    """Header of the unloaded module list."""

    _dtype = np.dtype([('size_of_header', '<u4'),
                       ('size_of_entry', '<u4'),
                       ('number_of_entries', '<u4')])


class UnloadedModule(_NamedModuleMixin, RecordBase):
    """Entry of the unloaded module list."""

    _dtype = np.dtype([('base_of_image', '<u8'),
                       ('size_of_image', '<u4'),
                       ('checksum', '<u4'),
                       ('time_date_stamp', '<u4'),
                       ('module_name_rva', '<u4')])


class ExceptionRecord(RecordBase):
    """Description of an exception.

    The meaning of the exception code and flags depends on the platform the
    dump was written on; use `code_symbol` and `flags_symbol` to name them.
    """

    _dtype = np.dtype([('exception_code', '<u4'),
                       ('exception_flags', '<u4'),
                       ('exception_record', '<u8'),
                       ('exception_address', '<u8'),
                       ('number_parameters', '<u4'),
                       ('unused_alignment', '<u4'),
                       ('exception_information', '<u8',
                        (EXCEPTION_MAXIMUM_PARAMETERS,))])

    @property
    def parameters(self):
        """The exception information words actually used."""
        n = min(self['number_parameters'], EXCEPTION_MAXIMUM_PARAMETERS)
        return self['exception_information'][:n]

    def code_symbol(self, platform_id):
        """Exception code, named as appropriate for the platform."""
        return exception_code_table(platform_id)(self['exception_code'])

    def flags_symbol(self, platform_id, processor_architecture=None):
        """Exception flags, named as appropriate for platform and code.

        Returns a plain integer if no names are known.
        """
        table = exception_flags_table(platform_id, self['exception_code'],
                                      processor_architecture)
        flags = self['exception_flags']
        return flags if table is None else table(flags)


class ExceptionStream(RecordBase):
    """The exception stream: thread, exception, and CPU context."""

    _dtype = np.dtype([('thread_id', '<u4'),
                       ('alignment', '<u4'),
                       ('exception_record', ExceptionRecord._dtype),
                       ('thread_context', LocationDescriptor._dtype)])
    _subrecords = {'exception_record': ExceptionRecord,
                   'thread_context': LocationDescriptor}

    read_context = Thread.read_context


class MemoryInfoListHeader(RecordBase):
    """Header of the memory info list."""

    _dtype = np.dtype([('size_of_header', '<u4'),
                       ('size_of_entry', '<u4'),
                       ('number_of_entries', '<u8')])


class MemoryInfo(RecordBase):
    """State of a region of the address space."""

    _dtype = np.dtype([('base_address', '<u8'),
                       ('allocation_base', '<u8'),
                       ('allocation_protect', '<u4'),
                       ('alignment1', '<u4'),
                       ('region_size', '<u8'),
                       ('state', '<u4'),
                       ('protect', '<u4'),
                       ('type', '<u4'),
                       ('alignment2', '<u4')])
    _symbols = {'allocation_protect': MEMORY_PROTECTIONS,
                'protect': MEMORY_PROTECTIONS,
                'state': MEMORY_STATES,
                'type': MEMORY_TYPES}

    @property
    def is_executable(self):
        return bool(self['protect'] & 0xf0)

    @property
    def is_writable(self):
        return bool(self['protect'] & 0xcc)


class ThreadInfoListHeader(RecordBase):
    """Header of the thread info list."""

    _dtype = np.dtype([('size_of_header', '<u4'),
                       ('size_of_entry', '<u4'),
                       ('number_of_entries', '<u4')])


class ThreadInfo(RecordBase):
    """Entry of the thread info list."""

    _dtype = np.dtype([('thread_id', '<u4'),
                       ('dump_flags', '<u4'),
                       ('dump_error', '<u4'),
                       ('exit_status', '<u4'),
                       ('create_time', '<u8'),
                       ('exit_time', '<u8'),
                       ('kernel_time', '<u8'),
                       ('user_time', '<u8'),
                       ('start_address', '<u8'),
                       ('affinity', '<u8')])
    _symbols = {'dump_flags': THREAD_DUMP_FLAGS}

    @property
    def created(self):
        """Time the thread was created, or `None` if not set."""
        return filetime_to_time(self['create_time'])

    @property
    def exited(self):
        """Time the thread exited, or `None` if not set."""
        return filetime_to_time(self['exit_time'])

    @property
    def kernel_duration(self):
        return (self['kernel_time'] * 100 * u.ns).to(u.s)

    @property
    def user_duration(self):
        return (self['user_time'] * 100 * u.ns).to(u.s)


class HandleDataStream(RecordBase):
    """Header of the handle data stream."""

    _dtype = np.dtype([('size_of_header', '<u4'),
                       ('size_of_descriptor', '<u4'),
                       ('number_of_descriptors', '<u4'),
                       ('reserved', '<u4')])


class HandleDescriptor(VersionedRecordBase):
    """Description of a handle.

    There are two versions, distinguished by the descriptor size given in
    the stream header, which has to be passed in as ``discriminator``.
    """
    _versions = {}
    _discriminator = 'size'

    def read_type_name(self, buffer):
        """Decode the name of the handle type, or `None` if absent."""
        rva = self['type_name_rva']
        return read_string(buffer, rva, self.byteorder) if rva else None

    def read_object_name(self, buffer):
        """Decode the name of the object, or `None` if absent."""
        rva = self['object_name_rva']
        return read_string(buffer, rva, self.byteorder) if rva else None


class HandleDescriptor1(HandleDescriptor):
    _version = 1
    _dtype = np.dtype([('handle', '<u8'),
                       ('type_name_rva', '<u4'),
                       ('object_name_rva', '<u4'),
                       ('attributes', '<u4'),
                       ('granted_access', '<u4'),
                       ('handle_count', '<u4'),
                       ('pointer_count', '<u4')])


class HandleDescriptor2(HandleDescriptor):
    _version = 2
    _dtype = extend_dtype(HandleDescriptor1._dtype, [
        ('object_info_rva', '<u4'),
        ('reserved0', '<u4')])


class ThreadName(RecordBase):
    """Entry of the thread names list."""

    _dtype = np.dtype([('thread_id', '<u4'),
                       ('thread_name_rva', '<u8')])

    def read_name(self, buffer):
        """Decode the name of the thread."""
        return read_string(buffer, self['thread_name_rva'],
                           byteorder=self.byteorder)


class Memory64ListHeader(RecordBase):
    """Header of the 64-bit memory list.

    The descriptors follow the header; the memory they describe is stored
    contiguously, starting at ``base_rva``.
    """

    _dtype = np.dtype([('number_of_memory_ranges', '<u8'),
                       ('base_rva', '<u8')])


def read_sized_list(header_cls, entry_cls, buffer, location, byteorder='<',
                    verify=True):
    """Decode a list that starts with a header giving sizes and count.

    Parameters
    ----------
    header_cls : type
        Class of the header, which should have fields ``size_of_header``,
        ``size_of_entry``, and ``number_of_entries``.
    entry_cls : type
        Class of the entries.
    buffer : buffer-protocol object
        Contents of the whole file.
    location : `~mdmp.header.LocationDescriptor` or tuple
        Location of the list.

    Returns
    -------
    header : instance of ``header_cls``
    entries : tuple of ``entry_cls`` instances

    Raises
    ------
    DecodeError
        If the header or entry sizes are smaller than the known layouts.
    OutOfBoundsError
        If the entries extend beyond the region of the list.
    """
    region, rva = location_view(buffer, location)
    header = header_cls.fromlocation(buffer, location, byteorder=byteorder,
                                     verify=verify)
    size_of_header = header['size_of_header']
    size_of_entry = header['size_of_entry']
    count = header['number_of_entries']
    if size_of_header < header_cls._dtype.itemsize:
        raise DecodeError(f"{header_cls.__name__} size {size_of_header} is "
                          f"smaller than {header_cls._dtype.itemsize}",
                          offset=rva)
    if size_of_entry < entry_cls._dtype.itemsize:
        raise DecodeError(f"{entry_cls.__name__} size {size_of_entry} is "
                          f"smaller than {entry_cls._dtype.itemsize}",
                          offset=rva)
    check_bounds(region, size_of_header, size_of_entry * count)
    if size_of_entry == entry_cls._dtype.itemsize:
        return header, read_array(entry_cls, buffer, rva + size_of_header,
                                  count, byteorder=byteorder, verify=verify)

    return header, tuple(
        entry_cls.frombuffer(buffer, rva + size_of_header + i * size_of_entry,
                             byteorder=byteorder, verify=verify)
        for i in range(count))


def read_handle_data(buffer, location, byteorder='<', verify=True):
    """Decode the handle data stream.

    The version of the descriptors follows from the descriptor size given
    in the stream header.

    Returns
    -------
    header : `HandleDataStream`
    descriptors : tuple of `HandleDescriptor1` or `HandleDescriptor2`
    """
    region, rva = location_view(buffer, location)
    header = HandleDataStream.fromlocation(buffer, location,
                                           byteorder=byteorder, verify=verify)
    size = header['size_of_descriptor']
    count = header['number_of_descriptors']
    first = header['size_of_header']
    version_cls = HandleDescriptor.select_version(size)
    check_bounds(region, first, size * count)
    descriptors = []
    for i in range(count):
        descriptor = version_cls.frombuffer(
            buffer, rva + first + i * size, byteorder=byteorder,
            verify=verify, discriminator=size)
        descriptors.append(descriptor)
    return header, tuple(descriptors)


def read_memory64_list(buffer, location, byteorder='<', verify=True):
    """Decode the 64-bit memory list.

    Returns
    -------
    header : `Memory64ListHeader`
    ranges : tuple of (`~mdmp.header.MemoryDescriptor64`, rva) pairs
        Each descriptor with the absolute offset of its memory.

    Raises
    ------
    OutOfBoundsError
        If the descriptors extend beyond the list, or the memory they
        describe beyond the buffer.
    """
    region, rva = location_view(buffer, location)
    header = Memory64ListHeader.fromlocation(buffer, location,
                                             byteorder=byteorder,
                                             verify=verify)
    count = header['number_of_memory_ranges']
    check_bounds(region, header.nbytes,
                 MemoryDescriptor64._dtype.itemsize * count)
    descriptors = read_array(MemoryDescriptor64, buffer, rva + header.nbytes,
                             count, byteorder=byteorder, verify=verify)
    ranges = []
    offset = header['base_rva']
    for descriptor in descriptors:
        ranges.append((descriptor, offset))
        offset += descriptor['data_size']
    check_bounds(buffer, header['base_rva'], offset - header['base_rva'])
    return header, tuple(ranges)
