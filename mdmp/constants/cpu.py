# Licensed under the GPLv3 - see LICENSE
"""Architecture selectors of CPU context records.

The ``context_flags`` word at the start of each context combines an
architecture selector (the bits in `CONTEXT_CPU_MASK`) with flags telling
which groups of registers are valid.  Breakpad-style producers and Windows
use the same selector ``0x00080000`` for different architectures (MIPS64
and IA64, respectively), so two tables are provided.
"""
from ..base.symbols import SymbolTable


__all__ = ['CONTEXT_CPU_MASK', 'CONTEXT_ARCHITECTURES',
           'WINDOWS_CONTEXT_ARCHITECTURES', 'CONTEXT_FLAGS_X86',
           'CONTEXT_FLAGS_ARM64']


CONTEXT_CPU_MASK = 0xffffff00


CONTEXT_ARCHITECTURES = SymbolTable('ContextArchitecture', (
    ('CONTEXT_X86', 0x00010000),
    ('CONTEXT_MIPS', 0x00040000),
    ('CONTEXT_MIPS64', 0x00080000),
    ('CONTEXT_AMD64', 0x00100000),
    ('CONTEXT_ARM64', 0x00400000),
    ('CONTEXT_PPC64', 0x01000000),
    ('CONTEXT_SPARC', 0x10000000),
    ('CONTEXT_PPC', 0x20000000),
    ('CONTEXT_ARM', 0x40000000),
    ('CONTEXT_ARM64_OLD', 0x80000000),
))
"""Context selectors as written by Breakpad-style producers."""

WINDOWS_CONTEXT_ARCHITECTURES = CONTEXT_ARCHITECTURES.copy()
WINDOWS_CONTEXT_ARCHITECTURES.name = 'WindowsContextArchitecture'
del WINDOWS_CONTEXT_ARCHITECTURES['CONTEXT_MIPS64']
WINDOWS_CONTEXT_ARCHITECTURES['CONTEXT_IA64'] = 0x00080000
"""Context selectors as written on Windows."""


CONTEXT_FLAGS_X86 = SymbolTable('ContextFlagsX86', (
    ('CONTEXT_CONTROL', 0x01),
    ('CONTEXT_INTEGER', 0x02),
    ('CONTEXT_SEGMENTS', 0x04),
    ('CONTEXT_FLOATING_POINT', 0x08),
    ('CONTEXT_DEBUG_REGISTERS', 0x10),
    ('CONTEXT_EXTENDED_REGISTERS', 0x20),
    ('CONTEXT_XSTATE', 0x40),
), flags=True)
"""Register groups of x86 and AMD64 contexts (low byte of the flags)."""

CONTEXT_FLAGS_ARM64 = SymbolTable('ContextFlagsARM64', (
    ('CONTEXT_CONTROL', 0x01),
    ('CONTEXT_INTEGER', 0x02),
    ('CONTEXT_FLOATING_POINT', 0x04),
    ('CONTEXT_DEBUG_REGISTERS', 0x08),
    ('CONTEXT_X18', 0x10),
), flags=True)
"""Register groups of ARM64 contexts (low byte of the flags)."""
