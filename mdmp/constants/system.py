# Licensed under the GPLv3 - see LICENSE
"""Codes describing the system, process, and memory of a dump."""
from ..base.symbols import SymbolTable


__all__ = ['PLATFORM_IDS', 'PROCESSOR_ARCHITECTURES', 'PRODUCT_TYPES',
           'SUITE_MASKS', 'MISC_INFO_FLAGS', 'MEMORY_STATES',
           'MEMORY_TYPES', 'MEMORY_PROTECTIONS', 'THREAD_DUMP_FLAGS',
           'HANDLE_OBJECT_INFORMATION_TYPES', 'FILE_OS', 'FILE_TYPES',
           'FILE_FLAGS', 'VS_FFI_SIGNATURE', 'BREAKPAD_INFO_VALIDITY',
           'ASSERTION_TYPES', 'CV_SIGNATURES', 'ANNOTATION_TYPES',
           'CPU_FEATURES_X86', 'ARM_ELF_HWCAPS', 'MINIDUMP_TYPES',
           'WINDOWS_PLATFORMS', 'LINUX_PLATFORMS', 'APPLE_PLATFORMS']


PLATFORM_IDS = SymbolTable('PlatformId', (
    ('VER_PLATFORM_WIN32s', 0),
    ('VER_PLATFORM_WIN32_WINDOWS', 1),
    ('VER_PLATFORM_WIN32_NT', 2),
    ('VER_PLATFORM_WIN32_CE', 3),
    # Breakpad extensions.
    ('MD_OS_UNIX', 0x8000),
    ('MD_OS_MAC_OS_X', 0x8101),
    ('MD_OS_IOS', 0x8102),
    ('MD_OS_LINUX', 0x8201),
    ('MD_OS_SOLARIS', 0x8202),
    ('MD_OS_ANDROID', 0x8203),
    ('MD_OS_PS3', 0x8204),
    ('MD_OS_NACL', 0x8205),
    ('MD_OS_FUCHSIA', 0x8206),
))
"""Operating system, for ``SystemInfo['platform_id']``."""

WINDOWS_PLATFORMS = frozenset((0, 1, 2, 3))
LINUX_PLATFORMS = frozenset((0x8000, 0x8201, 0x8203))
APPLE_PLATFORMS = frozenset((0x8101, 0x8102))


PROCESSOR_ARCHITECTURES = SymbolTable('ProcessorArchitecture', (
    ('PROCESSOR_ARCHITECTURE_INTEL', 0),
    ('PROCESSOR_ARCHITECTURE_MIPS', 1),
    ('PROCESSOR_ARCHITECTURE_ALPHA', 2),
    ('PROCESSOR_ARCHITECTURE_PPC', 3),
    ('PROCESSOR_ARCHITECTURE_SHX', 4),
    ('PROCESSOR_ARCHITECTURE_ARM', 5),
    ('PROCESSOR_ARCHITECTURE_IA64', 6),
    ('PROCESSOR_ARCHITECTURE_ALPHA64', 7),
    ('PROCESSOR_ARCHITECTURE_MSIL', 8),
    ('PROCESSOR_ARCHITECTURE_AMD64', 9),
    ('PROCESSOR_ARCHITECTURE_IA32_ON_WIN64', 10),
    ('PROCESSOR_ARCHITECTURE_NEUTRAL', 11),
    ('PROCESSOR_ARCHITECTURE_ARM64', 12),
    ('PROCESSOR_ARCHITECTURE_ARM32_ON_WIN64', 13),
    ('PROCESSOR_ARCHITECTURE_IA32_ON_ARM64', 14),
    # Breakpad extensions.
    ('PROCESSOR_ARCHITECTURE_SPARC', 0x8001),
    ('PROCESSOR_ARCHITECTURE_PPC64', 0x8002),
    ('PROCESSOR_ARCHITECTURE_ARM64_OLD', 0x8003),
    ('PROCESSOR_ARCHITECTURE_MIPS64', 0x8004),
    ('PROCESSOR_ARCHITECTURE_UNKNOWN', 0xffff),
))
"""CPU family, for ``SystemInfo['processor_architecture']``."""


PRODUCT_TYPES = SymbolTable('ProductType', (
    ('VER_NT_WORKSTATION', 1),
    ('VER_NT_DOMAIN_CONTROLLER', 2),
    ('VER_NT_SERVER', 3),
))

SUITE_MASKS = SymbolTable('SuiteMask', (
    ('VER_SUITE_SMALLBUSINESS', 0x0001),
    ('VER_SUITE_ENTERPRISE', 0x0002),
    ('VER_SUITE_BACKOFFICE', 0x0004),
    ('VER_SUITE_COMMUNICATIONS', 0x0008),
    ('VER_SUITE_TERMINAL', 0x0010),
    ('VER_SUITE_SMALLBUSINESS_RESTRICTED', 0x0020),
    ('VER_SUITE_EMBEDDEDNT', 0x0040),
    ('VER_SUITE_DATACENTER', 0x0080),
    ('VER_SUITE_SINGLEUSERTS', 0x0100),
    ('VER_SUITE_PERSONAL', 0x0200),
    ('VER_SUITE_BLADE', 0x0400),
    ('VER_SUITE_EMBEDDED_RESTRICTED', 0x0800),
    ('VER_SUITE_SECURITY_APPLIANCE', 0x1000),
    ('VER_SUITE_STORAGE_SERVER', 0x2000),
    ('VER_SUITE_COMPUTE_SERVER', 0x4000),
    ('VER_SUITE_WH_SERVER', 0x8000),
), flags=True)


MISC_INFO_FLAGS = SymbolTable('MiscInfoFlags', (
    ('MINIDUMP_MISC1_PROCESS_ID', 0x00000001),
    ('MINIDUMP_MISC1_PROCESS_TIMES', 0x00000002),
    ('MINIDUMP_MISC1_PROCESSOR_POWER_INFO', 0x00000004),
    ('MINIDUMP_MISC3_PROCESS_INTEGRITY', 0x00000010),
    ('MINIDUMP_MISC3_PROCESS_EXECUTE_FLAGS', 0x00000020),
    ('MINIDUMP_MISC3_TIMEZONE', 0x00000040),
    ('MINIDUMP_MISC3_PROTECTED_PROCESS', 0x00000080),
    ('MINIDUMP_MISC4_BUILDSTRING', 0x00000100),
    ('MINIDUMP_MISC5_PROCESS_COOKIE', 0x00000200),
), flags=True)
"""Validity of ``MiscInfo`` fields, for ``MiscInfo['flags1']``."""


MEMORY_STATES = SymbolTable('MemoryState', (
    ('MEM_COMMIT', 0x01000),
    ('MEM_RESERVE', 0x02000),
    ('MEM_FREE', 0x10000),
))

MEMORY_TYPES = SymbolTable('MemoryType', (
    ('MEM_PRIVATE', 0x0020000),
    ('MEM_MAPPED', 0x0040000),
    ('MEM_IMAGE', 0x1000000),
))

MEMORY_PROTECTIONS = SymbolTable('MemoryProtection', (
    ('PAGE_NOACCESS', 0x01),
    ('PAGE_READONLY', 0x02),
    ('PAGE_READWRITE', 0x04),
    ('PAGE_WRITECOPY', 0x08),
    ('PAGE_EXECUTE', 0x10),
    ('PAGE_EXECUTE_READ', 0x20),
    ('PAGE_EXECUTE_READWRITE', 0x40),
    ('PAGE_EXECUTE_WRITECOPY', 0x80),
    ('PAGE_GUARD', 0x100),
    ('PAGE_NOCACHE', 0x200),
    ('PAGE_WRITECOMBINE', 0x400),
    ('PAGE_TARGETS_INVALID', 0x40000000),
), flags=True)


THREAD_DUMP_FLAGS = SymbolTable('ThreadDumpFlags', (
    ('MINIDUMP_THREAD_INFO_ERROR_THREAD', 0x01),
    ('MINIDUMP_THREAD_INFO_WRITING_THREAD', 0x02),
    ('MINIDUMP_THREAD_INFO_EXITED_THREAD', 0x04),
    ('MINIDUMP_THREAD_INFO_INVALID_INFO', 0x08),
    ('MINIDUMP_THREAD_INFO_INVALID_CONTEXT', 0x10),
    ('MINIDUMP_THREAD_INFO_INVALID_TEB', 0x20),
), flags=True)


HANDLE_OBJECT_INFORMATION_TYPES = SymbolTable('HandleObjectInformationType', (
    ('MiniHandleObjectInformationNone', 0),
    ('MiniThreadInformation1', 1),
    ('MiniMutantInformation1', 2),
    ('MiniMutantInformation2', 3),
    ('MiniProcessInformation1', 4),
    ('MiniProcessInformation2', 5),
    ('MiniEventInformation1', 6),
    ('MiniSectionInformation1', 7),
    ('MiniSemaphoreInformation1', 8),
))


VS_FFI_SIGNATURE = 0xfeef04bd
"""Signature of a valid ``VSFixedFileInfo``."""

FILE_OS = SymbolTable('FileOs', (
    ('VOS_UNKNOWN', 0x00000000),
    ('VOS__WINDOWS16', 0x00000001),
    ('VOS__PM16', 0x00000002),
    ('VOS__PM32', 0x00000003),
    ('VOS__WINDOWS32', 0x00000004),
    ('VOS_DOS', 0x00010000),
    ('VOS_DOS_WINDOWS16', 0x00010001),
    ('VOS_DOS_WINDOWS32', 0x00010004),
    ('VOS_OS216', 0x00020000),
    ('VOS_OS216_PM16', 0x00020002),
    ('VOS_OS232', 0x00030000),
    ('VOS_OS232_PM32', 0x00030003),
    ('VOS_NT', 0x00040000),
    ('VOS_NT_WINDOWS32', 0x00040004),
    ('VOS_WINCE', 0x00050000),
))

FILE_TYPES = SymbolTable('FileType', (
    ('VFT_UNKNOWN', 0),
    ('VFT_APP', 1),
    ('VFT_DLL', 2),
    ('VFT_DRV', 3),
    ('VFT_FONT', 4),
    ('VFT_VXD', 5),
    ('VFT_STATIC_LIB', 7),
))

FILE_FLAGS = SymbolTable('FileFlags', (
    ('VS_FF_DEBUG', 0x01),
    ('VS_FF_PRERELEASE', 0x02),
    ('VS_FF_PATCHED', 0x04),
    ('VS_FF_PRIVATEBUILD', 0x08),
    ('VS_FF_INFOINFERRED', 0x10),
    ('VS_FF_SPECIALBUILD', 0x20),
), flags=True)


BREAKPAD_INFO_VALIDITY = SymbolTable('BreakpadInfoValidity', (
    ('MD_BREAKPAD_INFO_VALID_DUMP_THREAD_ID', 1),
    ('MD_BREAKPAD_INFO_VALID_REQUESTING_THREAD_ID', 2),
), flags=True)

ASSERTION_TYPES = SymbolTable('AssertionType', (
    ('MD_ASSERTION_INFO_TYPE_UNKNOWN', 0),
    ('MD_ASSERTION_INFO_TYPE_INVALID_PARAMETER', 1),
    ('MD_ASSERTION_INFO_TYPE_PURE_VIRTUAL_CALL', 2),
))


CV_SIGNATURES = SymbolTable('CvSignature', (
    ('CV_SIGNATURE_NB09', 0x3930424e),  # 'NB09'
    ('CV_SIGNATURE_NB10', 0x3031424e),  # 'NB10', PDB 2.0
    ('CV_SIGNATURE_NB11', 0x3131424e),  # 'NB11'
    ('CV_SIGNATURE_RSDS', 0x53445352),  # 'RSDS', PDB 7.0
    ('CV_SIGNATURE_ELF', 0x4270454c),   # 'BpEL', Breakpad ELF build id
))
"""Signatures at the start of debug (CodeView) records."""


ANNOTATION_TYPES = SymbolTable('AnnotationType', (
    ('INVALID', 0),
    ('STRING', 1),
    ('USER_DEFINED', 0x8000),
))
"""Types of Crashpad annotation objects."""


CPU_FEATURES_X86 = SymbolTable('X86Features', (
    ('FPU', 1 << 0),
    ('VME', 1 << 1),
    ('DE', 1 << 2),
    ('PSE', 1 << 3),
    ('TSC', 1 << 4),
    ('MSR', 1 << 5),
    ('PAE', 1 << 6),
    ('MCE', 1 << 7),
    ('CX8', 1 << 8),
    ('APIC', 1 << 9),
    ('SEP', 1 << 11),
    ('MTRR', 1 << 12),
    ('PGE', 1 << 13),
    ('MCA', 1 << 14),
    ('CMOV', 1 << 15),
    ('PAT', 1 << 16),
    ('PSE36', 1 << 17),
    ('PSN', 1 << 18),
    ('CLFSH', 1 << 19),
    ('DS', 1 << 21),
    ('ACPI', 1 << 22),
    ('MMX', 1 << 23),
    ('FXSR', 1 << 24),
    ('SSE', 1 << 25),
    ('SSE2', 1 << 26),
    ('SS', 1 << 27),
    ('HTT', 1 << 28),
    ('TM', 1 << 29),
    ('IA64', 1 << 30),
    ('PBE', 1 << 31),
), flags=True)
"""CPUID leaf 1 EDX feature bits, for ``X86CpuInfo['feature_information']``.
"""

ARM_ELF_HWCAPS = SymbolTable('ArmElfHwcaps', (
    ('HWCAP_SWP', 1 << 0),
    ('HWCAP_HALF', 1 << 1),
    ('HWCAP_THUMB', 1 << 2),
    ('HWCAP_26BIT', 1 << 3),
    ('HWCAP_FAST_MULT', 1 << 4),
    ('HWCAP_FPA', 1 << 5),
    ('HWCAP_VFP', 1 << 6),
    ('HWCAP_EDSP', 1 << 7),
    ('HWCAP_JAVA', 1 << 8),
    ('HWCAP_IWMMXT', 1 << 9),
    ('HWCAP_CRUNCH', 1 << 10),
    ('HWCAP_THUMBEE', 1 << 11),
    ('HWCAP_NEON', 1 << 12),
    ('HWCAP_VFPv3', 1 << 13),
    ('HWCAP_VFPv3D16', 1 << 14),
    ('HWCAP_TLS', 1 << 15),
    ('HWCAP_VFPv4', 1 << 16),
    ('HWCAP_IDIVA', 1 << 17),
    ('HWCAP_IDIVT', 1 << 18),
), flags=True)
"""ARM ELF hardware capabilities, for ``ARMCpuInfo['elf_hwcaps']``."""


MINIDUMP_TYPES = SymbolTable('MinidumpType', (
    ('MiniDumpNormal', 0x00000000),
    ('MiniDumpWithDataSegs', 0x00000001),
    ('MiniDumpWithFullMemory', 0x00000002),
    ('MiniDumpWithHandleData', 0x00000004),
    ('MiniDumpFilterMemory', 0x00000008),
    ('MiniDumpScanMemory', 0x00000010),
    ('MiniDumpWithUnloadedModules', 0x00000020),
    ('MiniDumpWithIndirectlyReferencedMemory', 0x00000040),
    ('MiniDumpFilterModulePaths', 0x00000080),
    ('MiniDumpWithProcessThreadData', 0x00000100),
    ('MiniDumpWithPrivateReadWriteMemory', 0x00000200),
    ('MiniDumpWithoutOptionalData', 0x00000400),
    ('MiniDumpWithFullMemoryInfo', 0x00000800),
    ('MiniDumpWithThreadInfo', 0x00001000),
    ('MiniDumpWithCodeSegs', 0x00002000),
    ('MiniDumpWithoutAuxiliaryState', 0x00004000),
    ('MiniDumpWithFullAuxiliaryState', 0x00008000),
    ('MiniDumpWithPrivateWriteCopyMemory', 0x00010000),
    ('MiniDumpIgnoreInaccessibleMemory', 0x00020000),
    ('MiniDumpWithTokenInformation', 0x00040000),
    ('MiniDumpWithModuleHeaders', 0x00080000),
    ('MiniDumpFilterTriage', 0x00100000),
    ('MiniDumpWithAvxXStateContext', 0x00200000),
    ('MiniDumpWithIptTrace', 0x00400000),
    ('MiniDumpScanInaccessiblePartialPages', 0x00800000),
    ('MiniDumpFilterWriteCombinedMemory', 0x01000000),
), flags=True)
"""Kind of data included, for ``Header['flags']``."""
