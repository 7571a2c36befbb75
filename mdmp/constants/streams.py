# Licensed under the GPLv3 - see LICENSE
"""Stream types found in the stream directory.

Values up to ``LastReservedStream`` (0xffff) are reserved for the format's
originator; producers define extensions above it, using a 16-bit prefix to
avoid collisions (0x4767 'Gg' for Breakpad, 0x4350 'CP' for Crashpad, 0x4d7a
'Mz' for Mozilla).  Unknown types are legal and preserved.
"""
from ..base.symbols import SymbolTable


__all__ = ['STREAM_TYPES', 'LAST_RESERVED_STREAM',
           'BREAKPAD_STREAM_PREFIX', 'CRASHPAD_STREAM_PREFIX',
           'MOZILLA_STREAM_PREFIX', 'stream_ecosystem']


LAST_RESERVED_STREAM = 0xffff
BREAKPAD_STREAM_PREFIX = 0x4767
CRASHPAD_STREAM_PREFIX = 0x4350
MOZILLA_STREAM_PREFIX = 0x4d7a


STREAM_TYPES = SymbolTable('StreamType', (
    ('UnusedStream', 0),
    ('ReservedStream0', 1),
    ('ReservedStream1', 2),
    ('ThreadListStream', 3),
    ('ModuleListStream', 4),
    ('MemoryListStream', 5),
    ('ExceptionStream', 6),
    ('SystemInfoStream', 7),
    ('ThreadExListStream', 8),
    ('Memory64ListStream', 9),
    ('CommentStreamA', 10),
    ('CommentStreamW', 11),
    ('HandleDataStream', 12),
    ('FunctionTableStream', 13),
    ('UnloadedModuleListStream', 14),
    ('MiscInfoStream', 15),
    ('MemoryInfoListStream', 16),
    ('ThreadInfoListStream', 17),
    ('HandleOperationListStream', 18),
    ('TokenStream', 19),
    ('JavaScriptDataStream', 20),
    ('SystemMemoryInfoStream', 21),
    ('ProcessVmCountersStream', 22),
    ('IptTraceStream', 23),
    ('ThreadNamesStream', 24),
    # Windows CE streams.
    ('ceStreamNull', 0x8000),
    ('ceStreamSystemInfo', 0x8001),
    ('ceStreamException', 0x8002),
    ('ceStreamModuleList', 0x8003),
    ('ceStreamProcessList', 0x8004),
    ('ceStreamThreadList', 0x8005),
    ('ceStreamThreadContextList', 0x8006),
    ('ceStreamThreadCallStackList', 0x8007),
    ('ceStreamMemoryVirtualList', 0x8008),
    ('ceStreamMemoryPhysicalList', 0x8009),
    ('ceStreamBucketParameters', 0x800a),
    ('ceStreamProcessModuleMap', 0x800b),
    ('ceStreamDiagnosisList', 0x800c),
    ('LastReservedStream', LAST_RESERVED_STREAM),
    # Breakpad extensions.
    ('BreakpadInfoStream', 0x47670001),
    ('AssertionInfoStream', 0x47670002),
    ('LinuxCpuInfo', 0x47670003),
    ('LinuxProcStatus', 0x47670004),
    ('LinuxLsbRelease', 0x47670005),
    ('LinuxCmdLine', 0x47670006),
    ('LinuxEnviron', 0x47670007),
    ('LinuxAuxv', 0x47670008),
    ('LinuxMaps', 0x47670009),
    ('LinuxDsoDebug', 0x4767000a),
    # Crashpad extensions.
    ('CrashpadInfoStream', 0x43500001),
    # Mozilla extensions.
    ('MozMacosCrashInfoStream', 0x4d7a0001),
    ('MozMacosBootargsStream', 0x4d7a0002),
    ('MozLinuxLimits', 0x4d7a0003),
    ('MozSoftErrors', 0x4d7a0004),
    ('MozMacosTaskDump', 0x4d7a0005),
))
"""Known stream types, for ``Directory['stream_type']``."""


_ECOSYSTEMS = {
    BREAKPAD_STREAM_PREFIX: 'breakpad',
    CRASHPAD_STREAM_PREFIX: 'crashpad',
    MOZILLA_STREAM_PREFIX: 'mozilla',
}


def stream_ecosystem(stream_type):
    """Which producer ecosystem defined a stream type.

    Returns
    -------
    ecosystem : str or None
        'microsoft' for reserved types, 'breakpad', 'crashpad', or
        'mozilla' for known extension prefixes, and `None` otherwise.
    """
    stream_type = int(stream_type)
    if stream_type <= LAST_RESERVED_STREAM:
        return 'microsoft'
    return _ECOSYSTEMS.get(stream_type >> 16)
