# Licensed under the GPLv3 - see LICENSE
import struct

import pytest

from ..base.errors import (DecodeError, OutOfBoundsError,
                           TruncatedRecordWarning)
from ..constants.system import MISC_INFO_FLAGS
from ..misc_info import (MiscInfo, MiscInfo1, MiscInfo2, MiscInfo3,
                         MiscInfo4, MiscInfo5, SystemTime,
                         TimeZoneInformation, XStateConfigFeatureMscInfo)


@pytest.mark.parametrize('cls, nbytes', (
    (MiscInfo1, 24), (MiscInfo2, 44), (MiscInfo3, 232), (MiscInfo4, 832),
    (MiscInfo5, 1364), (SystemTime, 16), (TimeZoneInformation, 172),
    (XStateConfigFeatureMscInfo, 528)))
def test_sizes(cls, nbytes):
    assert cls.nbytes == nbytes


@pytest.mark.parametrize('cls', (MiscInfo1, MiscInfo2, MiscInfo3,
                                 MiscInfo4, MiscInfo5))
def test_versions(cls):
    data = cls.fromvalues(process_id=1234).tobytes()
    assert struct.unpack('<I', data[:4])[0] == cls.nbytes
    info = MiscInfo.frombuffer(data)
    assert type(info) is cls
    assert info.version == cls._version
    assert info.declared_size == cls.nbytes
    assert info['process_id'] == 1234
    assert not info.truncated


def test_version_1():
    info = MiscInfo1.fromvalues(flags1=0x3, process_id=42,
                                process_create_time=1500000000)
    info = MiscInfo.frombuffer(info.tobytes())
    assert info.process_created.isot == '2017-07-14T02:40:00.000'
    names, rest = MISC_INFO_FLAGS.decompose(info['flags1'])
    assert names == ('MINIDUMP_MISC1_PROCESS_ID',
                     'MINIDUMP_MISC1_PROCESS_TIMES')
    assert rest == 0
    assert 'build_string' not in info
    assert info.get('build_string') is None
    with pytest.raises(KeyError):
        info['build_string']


def test_strings():
    info = MiscInfo4.fromvalues(build_string='10.0.19041.1 (vb_release)',
                                dbg_bld_str='dbghelp.dll')
    info = MiscInfo.frombuffer(info.tobytes())
    assert info['build_string'] == '10.0.19041.1 (vb_release)'
    assert info['dbg_bld_str'] == 'dbghelp.dll'


def test_time_zone():
    tz = TimeZoneInformation.fromvalues(
        bias=-60, standard_bias=0, daylight_bias=-60,
        daylight_date=SystemTime.fromvalues(year=0, month=3, day=5, hour=2))
    info = MiscInfo3.fromvalues(flags1=0x40, time_zone_id=1, time_zone=tz)
    info = MiscInfo.frombuffer(info.tobytes())
    assert info['time_zone'] == tz
    assert info['time_zone']['bias'] == -60
    assert info['time_zone']['daylight_date'].time is None
    assert info['time_zone'].standard_name == ''


def test_system_time():
    st = SystemTime.fromvalues(year=2020, month=2, day=29, hour=23,
                               minute=59, second=58, milliseconds=125)
    assert st.time.isot == '2020-02-29T23:59:58.125'


def test_xstate():
    info = MiscInfo5.fromvalues(process_cookie=0xabcdef)
    data = bytearray(info.tobytes())
    # enabled_features at 832 + 8; feature 2 offset and size at 832 + 16 + 16.
    struct.pack_into('<Q', data, 840, 0b101)
    struct.pack_into('<II', data, 848 + 16, 576, 256)
    info = MiscInfo.frombuffer(bytes(data))
    assert info['process_cookie'] == 0xabcdef
    enabled = info['xstate_data'].enabled
    assert sorted(enabled) == [0, 2]
    assert enabled[2]['offset'] == 576
    assert enabled[2]['size'] == 256


def test_larger_than_known():
    data = MiscInfo5.fromvalues(size_of_info=1400).tobytes() + b'\x00' * 36
    info = MiscInfo.frombuffer(data)
    assert type(info) is MiscInfo5
    assert info.declared_size == 1400


def test_truncated():
    data = MiscInfo4.fromvalues().tobytes()[:300]
    with pytest.warns(TruncatedRecordWarning):
        info = MiscInfo.frombuffer(data)
    assert type(info) is MiscInfo3
    assert info.truncated
    assert info.declared_size == 832


def test_location_limits_size():
    data = MiscInfo4.fromvalues().tobytes()
    with pytest.warns(TruncatedRecordWarning):
        info = MiscInfo.fromlocation(data, (232, 0))
    assert type(info) is MiscInfo3


def test_too_small():
    data = MiscInfo1.fromvalues(size_of_info=16).tobytes()
    with pytest.raises(DecodeError):
        MiscInfo.frombuffer(data)
    with pytest.raises(OutOfBoundsError):
        MiscInfo.frombuffer(data[:16])
