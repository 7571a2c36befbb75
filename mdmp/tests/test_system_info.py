# Licensed under the GPLv3 - see LICENSE
import numpy as np
import pytest

from ..base.errors import UnrecognizedArchitectureError
from ..constants.cpu import (CONTEXT_ARCHITECTURES,
                             WINDOWS_CONTEXT_ARCHITECTURES)
from ..strings import MinidumpString
from ..system_info import SystemInfo, X86CpuInfo, ARMCpuInfo, OtherCpuInfo


def test_sizes():
    assert SystemInfo.nbytes == 56
    assert X86CpuInfo.nbytes == 24
    assert ARMCpuInfo.nbytes == 24
    assert OtherCpuInfo.nbytes == 16


class TestX86:
    def setup_class(self):
        cpu = X86CpuInfo.fromvalues(
            vendor_id=np.frombuffer(b'GenuineIntel', '<u4'),
            version_information=0x000906ea,
            feature_information=0x1 | 0x2000000)
        self.csd = MinidumpString.fromvalue('Service Pack 1').tobytes()
        self.info = SystemInfo.fromvalues(
            processor_architecture=9, processor_level=6,
            number_of_processors=8, product_type=1, major_version=10,
            minor_version=0, build_number=19041, platform_id=2,
            csd_version_rva=SystemInfo.nbytes, cpu=cpu.tobytes())
        self.data = self.info.tobytes() + self.csd

    def test_basics(self):
        info = SystemInfo.frombuffer(self.data)
        assert info == self.info
        assert (info['processor_architecture'].name
                == 'PROCESSOR_ARCHITECTURE_AMD64')
        assert info['platform_id'].name == 'VER_PLATFORM_WIN32_NT'
        assert info['product_type'].name == 'VER_NT_WORKSTATION'
        assert info['number_of_processors'] == 8
        assert info.os_version == (10, 0, 19041)
        assert info.is_windows
        assert info.context_architectures is WINDOWS_CONTEXT_ARCHITECTURES

    def test_cpu_info(self):
        cpu = self.info.cpu_info
        assert type(cpu) is X86CpuInfo
        assert cpu.vendor == 'GenuineIntel'
        assert cpu.family == 6
        assert cpu.model == 0x9e
        assert cpu.stepping == 0xa
        names, rest = cpu['feature_information'].table.decompose(
            cpu['feature_information'])
        assert rest == 0
        assert len(names) == 2

    def test_csd_version(self):
        assert self.info.read_csd_version(self.data) == 'Service Pack 1'
        assert SystemInfo.fromvalues().read_csd_version(self.data) is None

    def test_family_extension(self):
        cpu = X86CpuInfo.fromvalues(version_information=0x00a10f11)
        assert cpu.family == 0xf + 0xa
        assert cpu.model == 0x11


class TestOthers:
    @pytest.mark.parametrize('architecture', (5, 12, 0x8003))
    def test_arm(self, architecture):
        cpu = ARMCpuInfo.fromvalues(cpuid=0x410fd034, elf_hwcaps=0)
        info = SystemInfo.fromvalues(processor_architecture=architecture,
                                     platform_id=0x8201, cpu=cpu.tobytes())
        assert type(info.cpu_info) is ARMCpuInfo
        assert info.cpu_info.implementer == 0x41
        assert info.cpu_info.part == 0xd03
        assert not info.is_windows
        assert info.context_architectures is CONTEXT_ARCHITECTURES

    @pytest.mark.parametrize('architecture', (0, 10))
    def test_x86_variants(self, architecture):
        info = SystemInfo.fromvalues(processor_architecture=architecture)
        assert type(info.cpu_info) is X86CpuInfo

    def test_other(self):
        cpu = np.array([0x1234, 0x5678], '<u8').tobytes()
        info = SystemInfo.fromvalues(processor_architecture=0x8002,
                                     cpu=cpu)
        assert type(info.cpu_info) is OtherCpuInfo
        assert list(info.cpu_info['processor_features']) == [0x1234, 0x5678]

    def test_big_endian(self):
        info = SystemInfo.fromvalues(byteorder='>', processor_architecture=9,
                                     major_version=10)
        data = info.tobytes()
        assert data[:2] == b'\x00\x09'
        decoded = SystemInfo.frombuffer(data, byteorder='>')
        assert decoded['major_version'] == 10
        assert decoded.byteorder == '>'
        assert type(decoded.cpu_info) is X86CpuInfo
        assert decoded.cpu_info.byteorder == '>'


class TestContextArchitecture:
    @pytest.mark.parametrize('architecture, platform_id, name', (
        (0, 2, 'CONTEXT_X86'),
        (10, 2, 'CONTEXT_X86'),
        (9, 2, 'CONTEXT_AMD64'),
        (9, 0x8201, 'CONTEXT_AMD64'),
        (12, 0x8102, 'CONTEXT_ARM64'),
        (0x8003, 0x8203, 'CONTEXT_ARM64_OLD'),
        (5, 0x8201, 'CONTEXT_ARM'),
        (3, 0x8101, 'CONTEXT_PPC'),
        (0x8002, 0x8201, 'CONTEXT_PPC64'),
        (0x8001, 0x8000, 'CONTEXT_SPARC'),
        (1, 0x8201, 'CONTEXT_MIPS')))
    def test_tag(self, architecture, platform_id, name):
        info = SystemInfo.fromvalues(processor_architecture=architecture,
                                     platform_id=platform_id)
        tag = info.context_architecture
        assert tag.name == name
        assert tag == CONTEXT_ARCHITECTURES[name]

    def test_shared_selector(self):
        # 0x00080000 means MIPS64 for Breakpad but IA64 for Windows.
        linux = SystemInfo.fromvalues(processor_architecture=0x8004,
                                      platform_id=0x8201)
        tag = linux.context_architecture
        assert tag == 0x00080000
        assert tag.name == 'CONTEXT_MIPS64'
        windows = SystemInfo.fromvalues(processor_architecture=6,
                                        platform_id=2)
        tag = windows.context_architecture
        assert tag == 0x00080000
        assert tag.name == 'CONTEXT_IA64'
        assert tag.table is WINDOWS_CONTEXT_ARCHITECTURES

    @pytest.mark.parametrize('architecture, platform_id', (
        (6, 0x8201), (0x8004, 2), (0xffff, 2), (0x8005, 0x8201)))
    def test_unrecognized(self, architecture, platform_id):
        info = SystemInfo.fromvalues(processor_architecture=architecture,
                                     platform_id=platform_id)
        with pytest.raises(UnrecognizedArchitectureError):
            info.context_architecture
