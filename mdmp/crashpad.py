# Licensed under the GPLv3 - see LICENSE
"""
Definitions for the stream added by Crashpad.

The Crashpad info stream holds identifiers of the report and client, and
refers to dictionaries of annotations for the process as a whole and for
each module.  All strings are `~mdmp.strings.MinidumpUTF8String`; the values
of annotation objects are byte arrays, with an interpretation given by the
annotation type.
"""
import numpy as np

from .base.record import RecordBase, read_list
from .base.variable import LengthPrefixedBase
from .constants.system import ANNOTATION_TYPES
from .guid import GUID
from .header import LocationDescriptor
from .strings import read_utf8_string


__all__ = ['CrashpadInfo', 'SimpleStringDictionaryEntry',
           'ModuleCrashpadInfoLink', 'ModuleCrashpadInfo', 'Annotation',
           'ByteArray', 'read_simple_string_dictionary', 'read_rva_list',
           'read_annotation_list', 'read_annotations',
           'read_module_crashpad_info']


class ByteArray(LengthPrefixedBase):
    """Bytes preceded by their length."""
    pass


class RVA(RecordBase):
    _dtype = np.dtype([('rva', '<u4')])


class SimpleStringDictionaryEntry(RecordBase):
    """Key and value of a string dictionary, as offsets of UTF-8 strings."""

    _dtype = np.dtype([('key', '<u4'),
                       ('value', '<u4')])

    def read(self, buffer):
        """Decode key and value."""
        return (read_utf8_string(buffer, self['key'], self.byteorder),
                read_utf8_string(buffer, self['value'], self.byteorder))


class Annotation(RecordBase):
    """Annotation object: a name, a type, and a value."""

    _dtype = np.dtype([('name', '<u4'),
                       ('type', '<u2'),
                       ('reserved', '<u2'),
                       ('value', '<u4')])
    _symbols = {'type': ANNOTATION_TYPES}

    def read_name(self, buffer):
        return read_utf8_string(buffer, self['name'], self.byteorder)

    def read_value(self, buffer):
        """Decode the value.

        Returns a `str` for string annotations, and `bytes` otherwise.
        """
        value = ByteArray.frombuffer(buffer, self['value'],
                                     byteorder=self.byteorder).value
        if self['type'] == ANNOTATION_TYPES['STRING']:
            return value.decode('utf-8', errors='replace')
        return value


class CrashpadInfo(RecordBase):
    """The Crashpad info stream."""

    _dtype = np.dtype([('version', '<u4'),
                       ('report_id', GUID._dtype),
                       ('client_id', GUID._dtype),
                       ('simple_annotations', LocationDescriptor._dtype),
                       ('module_list', LocationDescriptor._dtype)])
    _subrecords = {'report_id': GUID,
                   'client_id': GUID,
                   'simple_annotations': LocationDescriptor,
                   'module_list': LocationDescriptor}

    def read_simple_annotations(self, buffer):
        return read_simple_string_dictionary(
            buffer, self['simple_annotations'], byteorder=self.byteorder)

    def read_module_list(self, buffer):
        return read_module_crashpad_info(buffer, self['module_list'],
                                         byteorder=self.byteorder)


class ModuleCrashpadInfoLink(RecordBase):
    """Link between a module in the module list and its Crashpad info."""

    _dtype = np.dtype([('minidump_module_list_index', '<u4'),
                       ('location', LocationDescriptor._dtype)])
    _subrecords = {'location': LocationDescriptor}


class ModuleCrashpadInfo(RecordBase):
    """Annotations of one module."""

    _dtype = np.dtype([('version', '<u4'),
                       ('list_annotations', LocationDescriptor._dtype),
                       ('simple_annotations', LocationDescriptor._dtype),
                       ('annotation_objects', LocationDescriptor._dtype)])
    _subrecords = {'list_annotations': LocationDescriptor,
                   'simple_annotations': LocationDescriptor,
                   'annotation_objects': LocationDescriptor}

    def read_list_annotations(self, buffer):
        """Decode the list annotations, as a list of `str`."""
        return [read_utf8_string(buffer, rva, self.byteorder)
                for rva in read_rva_list(buffer, self['list_annotations'],
                                         byteorder=self.byteorder)]

    def read_simple_annotations(self, buffer):
        return read_simple_string_dictionary(
            buffer, self['simple_annotations'], byteorder=self.byteorder)

    def read_annotation_objects(self, buffer):
        return read_annotations(buffer, self['annotation_objects'],
                                byteorder=self.byteorder)


def _is_empty(location):
    if isinstance(location, tuple):
        return location[0] == 0
    return location['data_size'] == 0


def read_simple_string_dictionary(buffer, location, byteorder='<'):
    """Decode a dictionary of UTF-8 strings.

    Parameters
    ----------
    buffer : buffer-protocol object
        Contents of the whole file.
    location : `~mdmp.header.LocationDescriptor`
        Location of the dictionary.  Empty locations give an empty dict.

    Returns
    -------
    dictionary : dict
    """
    if _is_empty(location):
        return {}
    entries = read_list(SimpleStringDictionaryEntry, buffer, location,
                        byteorder=byteorder)
    return dict(entry.read(buffer) for entry in entries)


def read_rva_list(buffer, location, byteorder='<'):
    """Decode a count followed by that number of offsets."""
    if _is_empty(location):
        return []
    return [entry['rva'] for entry in read_list(RVA, buffer, location,
                                                 byteorder=byteorder)]


def read_annotation_list(buffer, location, byteorder='<'):
    """Decode a list of annotation objects.

    Returns
    -------
    annotations : tuple of `Annotation`
    """
    if _is_empty(location):
        return ()
    return read_list(Annotation, buffer, location, byteorder=byteorder)


def read_annotations(buffer, location, byteorder='<'):
    """Decode a list of annotation objects into a dict of name to value."""
    return {annotation.read_name(buffer): annotation.read_value(buffer)
            for annotation in read_annotation_list(buffer, location,
                                                   byteorder=byteorder)}


def read_module_crashpad_info(buffer, location, byteorder='<'):
    """Decode the list of per-module Crashpad info.

    Returns
    -------
    infos : dict
        With the index of the module in the module list as key, and the
        `ModuleCrashpadInfo` as value.
    """
    if _is_empty(location):
        return {}
    links = read_list(ModuleCrashpadInfoLink, buffer, location,
                      byteorder=byteorder)
    return {link['minidump_module_list_index']:
            ModuleCrashpadInfo.fromlocation(buffer, link['location'],
                                            byteorder=byteorder)
            for link in links}
