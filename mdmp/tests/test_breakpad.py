# Licensed under the GPLv3 - see LICENSE
import numpy as np
import pytest

from ..base.errors import OutOfBoundsError
from ..breakpad import BreakpadInfo, AssertionInfo, LinkMap, DsoDebug
from ..strings import MinidumpString


def utf16(text, size=128):
    return np.frombuffer(text.encode('utf-16-le').ljust(2*size, b'\x00'),
                         '<u2')


@pytest.mark.parametrize('cls, nbytes', (
    (BreakpadInfo, 12), (AssertionInfo, 776), (LinkMap, 24),
    (DsoDebug, 40)))
def test_sizes(cls, nbytes):
    assert cls.nbytes == nbytes


class TestBreakpadInfo:
    def test_both_valid(self):
        info = BreakpadInfo.fromvalues(validity=3, dump_thread_id=10,
                                       requesting_thread_id=11)
        info = BreakpadInfo.frombuffer(info.tobytes())
        assert info.dump_thread_id == 10
        assert info.requesting_thread_id == 11
        assert info['validity'].table.decompose(info['validity']) == (
            ('MD_BREAKPAD_INFO_VALID_DUMP_THREAD_ID',
             'MD_BREAKPAD_INFO_VALID_REQUESTING_THREAD_ID'), 0)

    def test_partially_valid(self):
        info = BreakpadInfo.fromvalues(validity=1, dump_thread_id=10,
                                       requesting_thread_id=11)
        assert info.dump_thread_id == 10
        assert info.requesting_thread_id is None
        # The raw field is still available.
        assert info['requesting_thread_id'] == 11


class TestAssertionInfo:
    def test_decode(self):
        info = AssertionInfo.fromvalues(
            expression=utf16('x != nullptr'), function=utf16('main'),
            file=utf16('main.cc'), line=42, type=1)
        info = AssertionInfo.frombuffer(info.tobytes())
        assert info['expression'] == 'x != nullptr'
        assert info['function'] == 'main'
        assert info['file'] == 'main.cc'
        assert info['line'] == 42
        assert info['type'].name == 'MD_ASSERTION_INFO_TYPE_INVALID_PARAMETER'

    def test_empty(self):
        info = AssertionInfo.fromvalues()
        assert info['expression'] == ''
        assert info['type'].name == 'MD_ASSERTION_INFO_TYPE_UNKNOWN'


class TestDsoDebug:
    def setup_class(self):
        data = bytearray(16)
        names = []
        for name in ('libc.so.6', 'ld-linux.so.2'):
            names.append(len(data))
            data += MinidumpString.fromvalue(name).tobytes()
        self.maps = [LinkMap.fromvalues(addr=0x7f0000000000 + i * 0x100000,
                                        name=rva, ld=0x1000 * (i + 1))
                     for i, rva in enumerate(names)]
        map_rva = len(data)
        for link_map in self.maps:
            data += link_map.tobytes()
        self.debug = DsoDebug.fromvalues(version=1, map=map_rva, dso_count=2,
                                         brk=0x2000, ldbase=0x7f1000000000,
                                         dynamic=0x600e28)
        self.data = bytes(data)

    def test_link_maps(self):
        maps = self.debug.read_link_maps(self.data)
        assert maps == tuple(self.maps)
        assert [m.read_name(self.data) for m in maps] == [
            'libc.so.6', 'ld-linux.so.2']
        assert maps[1]['addr'] == 0x7f0000100000

    def test_count_too_large(self):
        debug = DsoDebug.fromvalues(map=self.debug['map'], dso_count=100)
        with pytest.raises(OutOfBoundsError):
            debug.read_link_maps(self.data)
