# Licensed under the GPLv3 - see LICENSE
"""
Definitions for the misc info stream.

The misc info record comes in five versions, each extending the previous
one, distinguished by the size stored in its first field.  Decoding through
`MiscInfo` gives an instance of the highest version that both the size and
the available data allow::

    >>> from mdmp.misc_info import MiscInfo
    >>> info = MiscInfo.fromlocation(data, entry['location'])  # doctest: +SKIP
    >>> info.version, info.get('build_string')                  # doctest: +SKIP
    (5, 'x.y.z')

Which fields hold valid data is given by ``flags1``.
"""
import numpy as np
from astropy.time import Time

from .base.record import RecordBase
from .base.utils import decode_utf16_array, unix_time
from .base.versioned import VersionedRecordBase, extend_dtype
from .constants.system import MISC_INFO_FLAGS


__all__ = ['SystemTime', 'TimeZoneInformation', 'XStateFeature',
           'XStateConfigFeatureMscInfo', 'MiscInfo', 'MiscInfo1',
           'MiscInfo2', 'MiscInfo3', 'MiscInfo4', 'MiscInfo5']


class SystemTime(RecordBase):
    """Calendar date and time, as used in time zone information."""

    _dtype = np.dtype([('year', '<u2'),
                       ('month', '<u2'),
                       ('day_of_week', '<u2'),
                       ('day', '<u2'),
                       ('hour', '<u2'),
                       ('minute', '<u2'),
                       ('second', '<u2'),
                       ('milliseconds', '<u2')])

    @property
    def time(self):
        """The date and time as `~astropy.time.Time`.

        `None` if the year is zero, which is used for unset dates and for
        recurring transition dates in time zone information.
        """
        if self['year'] == 0:
            return None
        return Time('{:04d}-{:02d}-{:02d}T{:02d}:{:02d}:{:02d}.{:03d}'.format(
            self['year'], self['month'], self['day'], self['hour'],
            self['minute'], self['second'], self['milliseconds']),
            format='isot', scale='utc')


class TimeZoneInformation(RecordBase):
    """Time zone of the machine the dump was taken on.

    Biases are in minutes, with local time = UTC - bias.
    """

    _dtype = np.dtype([('bias', '<i4'),
                       ('standard_name', '<u2', (32,)),
                       ('standard_date', SystemTime._dtype),
                       ('standard_bias', '<i4'),
                       ('daylight_name', '<u2', (32,)),
                       ('daylight_date', SystemTime._dtype),
                       ('daylight_bias', '<i4')])
    _subrecords = {'standard_date': SystemTime,
                   'daylight_date': SystemTime}

    @property
    def standard_name(self):
        return decode_utf16_array(self['standard_name'])

    @property
    def daylight_name(self):
        return decode_utf16_array(self['daylight_name'])


class XStateFeature(RecordBase):
    """Offset and size of one extended processor state component."""

    _dtype = np.dtype([('offset', '<u4'),
                       ('size', '<u4')])


class XStateConfigFeatureMscInfo(RecordBase):
    """Layout of the extended processor state (XSAVE area)."""

    _dtype = np.dtype([('size_of_info', '<u4'),
                       ('context_size', '<u4'),
                       ('enabled_features', '<u8'),
                       ('features', XStateFeature._dtype, (64,))])
    _subrecords = {'features': XStateFeature}

    @property
    def enabled(self):
        """Features that are enabled, as a dict of index to feature."""
        mask = self['enabled_features']
        features = self['features']
        return {i: features[i] for i in range(64) if mask & (1 << i)}


class MiscInfo(VersionedRecordBase):
    """Miscellaneous process and system information.

    Use ``MiscInfo.frombuffer`` or ``MiscInfo.fromlocation`` to decode the
    version given by ``size_of_info``.
    """
    _versions = {}
    _discriminator = 'size'
    _discriminator_key = 'size_of_info'
    _symbols = {'flags1': MISC_INFO_FLAGS}
    _subrecords = {'time_zone': TimeZoneInformation,
                   'xstate_data': XStateConfigFeatureMscInfo}

    @property
    def process_created(self):
        """Time the process was created, or `None` if not set."""
        return unix_time(self['process_create_time'])

    def _convert(self, item, value):
        if item in ('build_string', 'dbg_bld_str'):
            return decode_utf16_array(value)
        return super()._convert(item, value)

    @classmethod
    def fromvalues(cls, byteorder='<', verify=True, **kwargs):
        """Initialise a record from values.

        The size defaults to that of the version.
        """
        if cls._version is not None:
            kwargs.setdefault('size_of_info', cls._dtype.itemsize)
        for key in ('build_string', 'dbg_bld_str'):
            if isinstance(kwargs.get(key), str):
                size = cls._dtype.fields[key][0].shape[0]
                kwargs[key] = np.frombuffer(
                    kwargs[key].encode('utf-16-le')[:2*size].ljust(
                        2*size, b'\x00'), '<u2')
        return super().fromvalues(byteorder=byteorder, verify=verify,
                                  **kwargs)


class MiscInfo1(MiscInfo):
    _version = 1
    _dtype = np.dtype([('size_of_info', '<u4'),
                       ('flags1', '<u4'),
                       ('process_id', '<u4'),
                       ('process_create_time', '<u4'),
                       ('process_user_time', '<u4'),
                       ('process_kernel_time', '<u4')])


class MiscInfo2(MiscInfo):
    _version = 2
    _dtype = extend_dtype(MiscInfo1._dtype, [
        ('processor_max_mhz', '<u4'),
        ('processor_current_mhz', '<u4'),
        ('processor_mhz_limit', '<u4'),
        ('processor_max_idle_state', '<u4'),
        ('processor_current_idle_state', '<u4')])


class MiscInfo3(MiscInfo):
    _version = 3
    _dtype = extend_dtype(MiscInfo2._dtype, [
        ('process_integrity_level', '<u4'),
        ('process_execute_flags', '<u4'),
        ('protected_process', '<u4'),
        ('time_zone_id', '<u4'),
        ('time_zone', TimeZoneInformation._dtype)])


class MiscInfo4(MiscInfo):
    _version = 4
    _dtype = extend_dtype(MiscInfo3._dtype, [
        ('build_string', '<u2', (260,)),
        ('dbg_bld_str', '<u2', (40,))])


class MiscInfo5(MiscInfo):
    _version = 5
    _dtype = extend_dtype(MiscInfo4._dtype, [
        ('xstate_data', XStateConfigFeatureMscInfo._dtype),
        ('process_cookie', '<u4')])
