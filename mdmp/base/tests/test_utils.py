# Licensed under the GPLv3 - see LICENSE
import numpy as np
import pytest
from astropy.time import Time

from ..utils import (FILETIME_UNIX_EPOCH, decode_utf16_array,
                     filetime_to_time, unix_time)


def test_unix_time():
    assert unix_time(0) is None
    time = unix_time(86400)
    assert isinstance(time, Time)
    assert time.isot == '1970-01-02T00:00:00.000'


def test_filetime():
    assert filetime_to_time(0) is None
    assert filetime_to_time(FILETIME_UNIX_EPOCH).isot == (
        '1970-01-01T00:00:00.000')
    time = filetime_to_time(FILETIME_UNIX_EPOCH + 15_000_000)
    assert abs(time.unix - 1.5) < 1e-6
    # 2000-01-01 is 125911584000000000 in FILETIME ticks.
    assert filetime_to_time(125911584000000000).isot == (
        '2000-01-01T00:00:00.000')


@pytest.mark.parametrize('dtype', ('<u2', '>u2'))
def test_decode_utf16_array(dtype):
    array = np.array([72, 105, 0, 65, 0], dtype)
    assert decode_utf16_array(array) == 'Hi'
    assert decode_utf16_array(np.array([0x263a, 33], dtype)) == '☺!'
    assert decode_utf16_array(np.zeros(4, dtype)) == ''
