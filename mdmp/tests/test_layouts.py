# Licensed under the GPLv3 - see LICENSE
"""Checks common to all fixed-layout records."""
import pytest

from ..base.errors import OutOfBoundsError
from ..base.record import RecordBase
from ..breakpad import AssertionInfo, BreakpadInfo, DsoDebug, LinkMap
from ..codeview import (CvInfoElf, CvInfoPdb20, CvInfoPdb70, CvInfoUnknown,
                        ImageDebugMisc)
from ..context.arm import (ContextARM, ContextARM64, ContextARM64Old,
                           FloatingSaveAreaARM, FloatingSaveAreaARM64Old)
from ..context.mips import ContextMIPS, ContextMIPS64, FloatingSaveAreaMIPS
from ..context.ppc import (ContextPPC, ContextPPC64, FloatingSaveAreaPPC,
                           VectorSaveAreaPPC)
from ..context.sparc import ContextSPARC, FloatingSaveAreaSPARC
from ..context.x86 import ContextAMD64, ContextX86, FloatingSaveAreaX86
from ..crashpad import (Annotation, CrashpadInfo, ModuleCrashpadInfo,
                        ModuleCrashpadInfoLink, RVA,
                        SimpleStringDictionaryEntry)
from ..guid import GUID
from ..header import (Directory, Header, LocationDescriptor,
                      LocationDescriptor64, MemoryDescriptor,
                      MemoryDescriptor64)
from ..misc_info import (MiscInfo1, MiscInfo2, MiscInfo3, MiscInfo4,
                         MiscInfo5, SystemTime, TimeZoneInformation,
                         XStateConfigFeatureMscInfo, XStateFeature)
from ..mozilla import (MacBootargs, MacCrashInfoHeader, MacCrashInfoRecord1,
                       MacCrashInfoRecord2, MacCrashInfoRecord3,
                       MacCrashInfoRecord4, MacCrashInfoRecord5)
from ..records import (
    Thread, ThreadEx, VSFixedFileInfo, Module, UnloadedModuleListHeader,
    UnloadedModule, ExceptionRecord, ExceptionStream, MemoryInfoListHeader,
    MemoryInfo, ThreadInfoListHeader, ThreadInfo, HandleDataStream,
    HandleDescriptor1, HandleDescriptor2, ThreadName, Memory64ListHeader)
from ..system_info import (ARMCpuInfo, OtherCpuInfo, SystemInfo,
                           X86CpuInfo)


RECORD_CLASSES = (
    LocationDescriptor, LocationDescriptor64, MemoryDescriptor,
    MemoryDescriptor64, Header, Directory,
    Thread, ThreadEx, VSFixedFileInfo, Module, UnloadedModuleListHeader,
    UnloadedModule, ExceptionRecord, ExceptionStream, MemoryInfoListHeader,
    MemoryInfo, ThreadInfoListHeader, ThreadInfo, HandleDataStream,
    HandleDescriptor1, HandleDescriptor2, ThreadName, Memory64ListHeader,
    MacCrashInfoHeader, MacCrashInfoRecord1, MacCrashInfoRecord2,
    MacCrashInfoRecord3, MacCrashInfoRecord4, MacCrashInfoRecord5,
    MacBootargs, GUID,
    CvInfoPdb70, CvInfoPdb20, CvInfoElf, CvInfoUnknown, ImageDebugMisc,
    X86CpuInfo, ARMCpuInfo, OtherCpuInfo, SystemInfo,
    SystemTime, TimeZoneInformation, XStateFeature,
    XStateConfigFeatureMscInfo, MiscInfo1, MiscInfo2, MiscInfo3, MiscInfo4,
    MiscInfo5,
    RVA, SimpleStringDictionaryEntry, Annotation, CrashpadInfo,
    ModuleCrashpadInfoLink, ModuleCrashpadInfo,
    BreakpadInfo, AssertionInfo, LinkMap, DsoDebug,
    FloatingSaveAreaX86, ContextX86, ContextAMD64, FloatingSaveAreaARM,
    ContextARM, ContextARM64, FloatingSaveAreaARM64Old, ContextARM64Old,
    FloatingSaveAreaPPC, VectorSaveAreaPPC, ContextPPC, ContextPPC64,
    FloatingSaveAreaSPARC, ContextSPARC, FloatingSaveAreaMIPS, ContextMIPS,
    ContextMIPS64)


def all_subclasses(cls):
    for subclass in cls.__subclasses__():
        yield subclass
        yield from all_subclasses(subclass)


def test_all_records_covered():
    found = {cls for cls in all_subclasses(RecordBase)
             if cls.__module__.startswith('mdmp.')
             and '.tests' not in cls.__module__
             and cls._dtype.itemsize > 0}
    assert found == set(RECORD_CLASSES)


@pytest.mark.parametrize('cls', RECORD_CLASSES)
class TestLayout:
    @pytest.mark.parametrize('byteorder', ('<', '>'))
    def test_roundtrip(self, cls, byteorder):
        record = cls.fromvalues(byteorder=byteorder)
        data = record.tobytes()
        assert len(data) == cls._dtype.itemsize
        decoded = cls.frombuffer(data, byteorder=byteorder)
        assert decoded == record
        assert decoded.byteorder == byteorder
        assert decoded.tobytes() == data

    def test_truncated(self, cls):
        data = cls.fromvalues().tobytes()
        with pytest.raises(OutOfBoundsError):
            cls.frombuffer(data[:-1])
        with pytest.raises(OutOfBoundsError):
            cls.frombuffer(data, offset=1)

    def test_arbitrary_bytes(self, cls):
        data = bytes(i % 251 for i in range(cls._dtype.itemsize))
        first = cls.frombuffer(data, verify=False)
        second = cls.frombuffer(data, verify=False)
        assert first == second
        assert first.nbytes == second.nbytes
        assert first.tobytes() == data
        # Decoding never depends on anything beyond the record.
        longer = cls.frombuffer(b'\x00' + data, offset=1, verify=False)
        assert longer.words.tobytes() == data
