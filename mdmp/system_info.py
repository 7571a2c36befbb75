# Licensed under the GPLv3 - see LICENSE
"""
Definitions for the system info stream.

The system info describes the operating system and processor of the machine
the dump was taken on.  It ends in a 24-byte union with processor-specific
information, whose interpretation is selected by the processor architecture
and is decoded only when `SystemInfo.cpu_info` is accessed.
"""
import numpy as np
from astropy.utils import lazyproperty

from .base.errors import UnrecognizedArchitectureError
from .base.record import RecordBase
from .constants.cpu import CONTEXT_ARCHITECTURES, WINDOWS_CONTEXT_ARCHITECTURES
from .constants.system import (
    ARM_ELF_HWCAPS, CPU_FEATURES_X86, PLATFORM_IDS, PROCESSOR_ARCHITECTURES,
    PRODUCT_TYPES, SUITE_MASKS, WINDOWS_PLATFORMS)
from .strings import read_string


__all__ = ['X86CpuInfo', 'ARMCpuInfo', 'OtherCpuInfo', 'SystemInfo',
           'CPU_INFO_CLASSES', 'CONTEXT_ARCHITECTURE_NAMES']


class X86CpuInfo(RecordBase):
    """Processor information for x86 and AMD64 processors."""

    _dtype = np.dtype([('vendor_id', '<u4', (3,)),
                       ('version_information', '<u4'),
                       ('feature_information', '<u4'),
                       ('amd_extended_cpu_features', '<u4')])
    _symbols = {'feature_information': CPU_FEATURES_X86}

    @property
    def vendor(self):
        """Vendor name, such as 'GenuineIntel' or 'AuthenticAMD'."""
        return (self['vendor_id'].astype('<u4').tobytes()
                .rstrip(b'\x00').decode('ascii', errors='replace'))

    @property
    def family(self):
        version = self['version_information']
        family = (version >> 8) & 0xf
        if family == 0xf:
            family += (version >> 20) & 0xff
        return family

    @property
    def model(self):
        version = self['version_information']
        model = (version >> 4) & 0xf
        if (version >> 8) & 0xf in (6, 0xf):
            model += ((version >> 16) & 0xf) << 4
        return model

    @property
    def stepping(self):
        return self['version_information'] & 0xf


class ARMCpuInfo(RecordBase):
    """Processor information for ARM processors."""

    _dtype = np.dtype([('cpuid', '<u4'),
                       ('elf_hwcaps', '<u4'),
                       ('reserved', '<u4', (4,))])
    _symbols = {'elf_hwcaps': ARM_ELF_HWCAPS}

    @property
    def implementer(self):
        return self['cpuid'] >> 24

    @property
    def part(self):
        return (self['cpuid'] >> 4) & 0xfff


class OtherCpuInfo(RecordBase):
    """Processor feature bits for other processors."""

    _dtype = np.dtype([('processor_features', '<u8', (2,))])


CPU_INFO_CLASSES = {
    0: X86CpuInfo,        # PROCESSOR_ARCHITECTURE_INTEL
    9: X86CpuInfo,        # PROCESSOR_ARCHITECTURE_AMD64
    10: X86CpuInfo,       # PROCESSOR_ARCHITECTURE_IA32_ON_WIN64
    5: ARMCpuInfo,        # PROCESSOR_ARCHITECTURE_ARM
    12: ARMCpuInfo,       # PROCESSOR_ARCHITECTURE_ARM64
    0x8003: ARMCpuInfo,   # PROCESSOR_ARCHITECTURE_ARM64_OLD
}
"""Interpretation of the CPU union, by processor architecture."""


CONTEXT_ARCHITECTURE_NAMES = {
    0: 'CONTEXT_X86',
    10: 'CONTEXT_X86',
    9: 'CONTEXT_AMD64',
    5: 'CONTEXT_ARM',
    12: 'CONTEXT_ARM64',
    0x8003: 'CONTEXT_ARM64_OLD',
    3: 'CONTEXT_PPC',
    0x8002: 'CONTEXT_PPC64',
    0x8001: 'CONTEXT_SPARC',
    1: 'CONTEXT_MIPS',
    0x8004: 'CONTEXT_MIPS64',
    6: 'CONTEXT_IA64',
}
"""Context architecture used for each processor architecture."""


class SystemInfo(RecordBase):
    """Operating system and processor information."""

    _dtype = np.dtype([('processor_architecture', '<u2'),
                       ('processor_level', '<u2'),
                       ('processor_revision', '<u2'),
                       ('number_of_processors', 'u1'),
                       ('product_type', 'u1'),
                       ('major_version', '<u4'),
                       ('minor_version', '<u4'),
                       ('build_number', '<u4'),
                       ('platform_id', '<u4'),
                       ('csd_version_rva', '<u4'),
                       ('suite_mask', '<u2'),
                       ('reserved2', '<u2'),
                       ('cpu', 'V24')])
    _symbols = {'processor_architecture': PROCESSOR_ARCHITECTURES,
                'product_type': PRODUCT_TYPES,
                'platform_id': PLATFORM_IDS,
                'suite_mask': SUITE_MASKS}

    @lazyproperty
    def cpu_info(self):
        """The CPU union interpreted according to the architecture."""
        cls = CPU_INFO_CLASSES.get(self['processor_architecture'],
                                   OtherCpuInfo)
        return cls.frombuffer(self['cpu'], byteorder=self.byteorder)

    @property
    def os_version(self):
        """Major, minor, and build number of the operating system."""
        return (self['major_version'], self['minor_version'],
                self['build_number'])

    @property
    def is_windows(self):
        return self['platform_id'] in WINDOWS_PLATFORMS

    @property
    def context_architectures(self):
        """Table of CPU context selectors appropriate for the platform."""
        return (WINDOWS_CONTEXT_ARCHITECTURES if self.is_windows
                else CONTEXT_ARCHITECTURES)

    @property
    def context_architecture(self):
        """Architecture tag for the CPU contexts in the dump.

        Follows from the processor architecture, looked up in the table of
        context selectors of the platform, so that, e.g., IA64 is only
        recognized for Windows.  The tag can be passed on to
        `mdmp.context.read_context` or `mdmp.records.Thread.read_context`.

        Raises
        ------
        UnrecognizedArchitectureError
            If the processor architecture has no context selector on the
            platform.
        """
        name = CONTEXT_ARCHITECTURE_NAMES.get(self['processor_architecture'])
        table = self.context_architectures
        if name not in table:
            raise UnrecognizedArchitectureError(
                "processor architecture {!r} has no context selector for "
                "platform {!r}".format(self['processor_architecture'],
                                       self['platform_id']))
        return table(table[name])

    def read_csd_version(self, buffer):
        """Decode the service pack (or, for Breakpad, OS build) string.

        Returns `None` if there is none.
        """
        rva = self['csd_version_rva']
        if not rva:
            return None
        return read_string(buffer, rva, byteorder=self.byteorder)
