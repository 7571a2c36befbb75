# Licensed under the GPLv3 - see LICENSE
"""Mach exception values for dumps written on macOS and iOS.

For these platforms, the exception code of the exception stream holds the
Mach exception type, and the exception flags hold the first code, whose
meaning depends on the type (and, for bad accesses, on the processor).
The first exception information word holds the subcode, e.g., the address
of a bad access.
"""
from ..base.symbols import SymbolTable


__all__ = ['EXCEPTION_TYPES', 'KERN_RETURN', 'BAD_ACCESS_CODES_X86',
           'BAD_ACCESS_CODES_ARM', 'BAD_INSTRUCTION_CODES_X86',
           'BAD_INSTRUCTION_CODES_ARM', 'ARITHMETIC_CODES_X86',
           'ARITHMETIC_CODES_ARM', 'BREAKPOINT_CODES_X86',
           'BREAKPOINT_CODES_ARM', 'SOFTWARE_CODES', 'RESOURCE_TYPES',
           'GUARD_TYPES', 'exception_flags_table']


EXCEPTION_TYPES = SymbolTable('MachException', (
    ('EXC_BAD_ACCESS', 1),
    ('EXC_BAD_INSTRUCTION', 2),
    ('EXC_ARITHMETIC', 3),
    ('EXC_EMULATION', 4),
    ('EXC_SOFTWARE', 5),
    ('EXC_BREAKPOINT', 6),
    ('EXC_SYSCALL', 7),
    ('EXC_MACH_SYSCALL', 8),
    ('EXC_RPC_ALERT', 9),
    ('EXC_CRASH', 10),
    ('EXC_RESOURCE', 11),
    ('EXC_GUARD', 12),
    ('EXC_CORPSE_NOTIFY', 13),
    # Used by Breakpad for dumps written without a crash.
    ('SIMULATED', 0x43507378),
))


KERN_RETURN = SymbolTable('KernReturn', (
    ('KERN_SUCCESS', 0),
    ('KERN_INVALID_ADDRESS', 1),
    ('KERN_PROTECTION_FAILURE', 2),
    ('KERN_NO_SPACE', 3),
    ('KERN_INVALID_ARGUMENT', 4),
    ('KERN_FAILURE', 5),
    ('KERN_RESOURCE_SHORTAGE', 6),
    ('KERN_NOT_RECEIVER', 7),
    ('KERN_NO_ACCESS', 8),
    ('KERN_MEMORY_FAILURE', 9),
    ('KERN_MEMORY_ERROR', 10),
    ('KERN_ALREADY_IN_SET', 11),
    ('KERN_NOT_IN_SET', 12),
    ('KERN_NAME_EXISTS', 13),
    ('KERN_ABORTED', 14),
    ('KERN_INVALID_NAME', 15),
    ('KERN_INVALID_TASK', 16),
    ('KERN_INVALID_RIGHT', 17),
    ('KERN_INVALID_VALUE', 18),
    ('KERN_UREFS_OVERFLOW', 19),
    ('KERN_INVALID_CAPABILITY', 20),
    ('KERN_RIGHT_EXISTS', 21),
    ('KERN_INVALID_HOST', 22),
    ('KERN_MEMORY_PRESENT', 23),
    ('KERN_MEMORY_DATA_MOVED', 24),
    ('KERN_MEMORY_RESTART_COPY', 25),
    ('KERN_INVALID_PROCESSOR_SET', 26),
    ('KERN_POLICY_LIMIT', 27),
    ('KERN_INVALID_POLICY', 28),
    ('KERN_INVALID_OBJECT', 29),
    ('KERN_ALREADY_WAITING', 30),
    ('KERN_DEFAULT_SET', 31),
    ('KERN_EXCEPTION_PROTECTED', 32),
    ('KERN_INVALID_LEDGER', 33),
    ('KERN_INVALID_MEMORY_CONTROL', 34),
    ('KERN_INVALID_SECURITY', 35),
    ('KERN_NOT_DEPRESSED', 36),
    ('KERN_TERMINATED', 37),
    ('KERN_LOCK_SET_DESTROYED', 38),
    ('KERN_LOCK_UNSTABLE', 39),
    ('KERN_LOCK_OWNED', 40),
    ('KERN_LOCK_OWNED_SELF', 41),
    ('KERN_SEMAPHORE_DESTROYED', 42),
    ('KERN_RPC_SERVER_TERMINATED', 43),
    ('KERN_RPC_TERMINATE_ORPHAN', 44),
    ('KERN_RPC_CONTINUE_ORPHAN', 45),
    ('KERN_NOT_SUPPORTED', 46),
    ('KERN_NODE_DOWN', 47),
    ('KERN_NOT_WAITING', 48),
    ('KERN_OPERATION_TIMED_OUT', 49),
    ('KERN_CODESIGN_ERROR', 50),
    ('KERN_POLICY_STATIC', 51),
    ('KERN_INSUFFICIENT_BUFFER_SIZE', 52),
    ('KERN_DENIED', 53),
    ('KERN_MISSING_KC', 54),
    ('KERN_INVALID_KC', 55),
    ('KERN_NOT_FOUND', 56),
    ('KERN_RETURN_MAX', 0x100),
))


_BAD_ACCESS_KERN = tuple(
    (name, KERN_RETURN[name]) for name in (
        'KERN_INVALID_ADDRESS', 'KERN_PROTECTION_FAILURE', 'KERN_NO_ACCESS',
        'KERN_MEMORY_FAILURE', 'KERN_MEMORY_ERROR', 'KERN_CODESIGN_ERROR'))

BAD_ACCESS_CODES_X86 = SymbolTable('BadAccessX86', _BAD_ACCESS_KERN + (
    ('EXC_I386_GPFLT', 13),
))

BAD_ACCESS_CODES_ARM = SymbolTable('BadAccessARM', _BAD_ACCESS_KERN + (
    ('EXC_ARM_DA_ALIGN', 0x101),
    ('EXC_ARM_DA_DEBUG', 0x102),
    ('EXC_ARM_SP_ALIGN', 0x103),
    ('EXC_ARM_SWP', 0x104),
    ('EXC_ARM_PAC_FAIL', 0x105),
))

BAD_INSTRUCTION_CODES_X86 = SymbolTable('BadInstructionX86', (
    ('EXC_I386_INVOP', 1),
    ('EXC_I386_INVTSSFLT', 10),
    ('EXC_I386_SEGNPFLT', 11),
    ('EXC_I386_STKFLT', 12),
    ('EXC_I386_GPFLT', 13),
    ('EXC_I386_ALIGNFLT', 17),
))

BAD_INSTRUCTION_CODES_ARM = SymbolTable('BadInstructionARM', (
    ('EXC_ARM_UNDEFINED', 1),
))

ARITHMETIC_CODES_X86 = SymbolTable('ArithmeticX86', (
    ('EXC_I386_DIV', 1),
    ('EXC_I386_INTO', 2),
    ('EXC_I386_NOEXT', 3),
    ('EXC_I386_EXTOVR', 4),
    ('EXC_I386_EXTERR', 5),
    ('EXC_I386_EMERR', 6),
    ('EXC_I386_BOUND', 7),
    ('EXC_I386_SSEEXTERR', 8),
))

ARITHMETIC_CODES_ARM = SymbolTable('ArithmeticARM', (
    ('EXC_ARM_FP_UNDEFINED', 0),
    ('EXC_ARM_FP_IO', 1),
    ('EXC_ARM_FP_DZ', 2),
    ('EXC_ARM_FP_OF', 3),
    ('EXC_ARM_FP_UF', 4),
    ('EXC_ARM_FP_IX', 5),
    ('EXC_ARM_FP_ID', 6),
))

BREAKPOINT_CODES_X86 = SymbolTable('BreakpointX86', (
    ('EXC_I386_SGL', 1),
    ('EXC_I386_BPT', 2),
))

BREAKPOINT_CODES_ARM = SymbolTable('BreakpointARM', (
    ('EXC_ARM_BREAKPOINT', 1),
))

SOFTWARE_CODES = SymbolTable('SoftwareCode', (
    ('EXC_UNIX_BAD_SYSCALL', 0x10000),
    ('EXC_UNIX_BAD_PIPE', 0x10001),
    ('EXC_UNIX_ABORT', 0x10002),
    ('EXC_SOFT_SIGNAL', 0x10003),
    ('UNCAUGHT_NS_EXCEPTION', 0xdeadc0de),
))

RESOURCE_TYPES = SymbolTable('ResourceType', (
    ('RESOURCE_TYPE_CPU', 1),
    ('RESOURCE_TYPE_WAKEUPS', 2),
    ('RESOURCE_TYPE_MEMORY', 3),
    ('RESOURCE_TYPE_IO', 4),
    ('RESOURCE_TYPE_THREADS', 5),
))
"""Resource exception types, stored in bits 61-63 of the code."""

GUARD_TYPES = SymbolTable('GuardType', (
    ('GUARD_TYPE_NONE', 0),
    ('GUARD_TYPE_MACH_PORT', 1),
    ('GUARD_TYPE_FD', 2),
    ('GUARD_TYPE_USER', 3),
    ('GUARD_TYPE_VN', 4),
    ('GUARD_TYPE_VIRT_MEMORY', 5),
))
"""Guard exception types, stored in bits 61-63 of the code."""


_FLAGS_TABLES = {
    # exception type: (x86 table, ARM table)
    1: (BAD_ACCESS_CODES_X86, BAD_ACCESS_CODES_ARM),
    2: (BAD_INSTRUCTION_CODES_X86, BAD_INSTRUCTION_CODES_ARM),
    3: (ARITHMETIC_CODES_X86, ARITHMETIC_CODES_ARM),
    5: (SOFTWARE_CODES, SOFTWARE_CODES),
    6: (BREAKPOINT_CODES_X86, BREAKPOINT_CODES_ARM),
}

# PROCESSOR_ARCHITECTURE_ARM, _ARM64, and Breakpad's old ARM64.
_ARM_ARCHITECTURES = frozenset({5, 12, 0x8003})


def exception_flags_table(exception_type, processor_architecture=None):
    """Table for the exception flags (first code) of a Mach exception.

    Parameters
    ----------
    exception_type : int
        Mach exception type, i.e., the exception code.
    processor_architecture : int, optional
        Processor architecture from the system info.  Default: x86.

    Returns
    -------
    table : `~mdmp.base.symbols.SymbolTable` or `None`
        `None` if the codes of the exception type have no names.
    """
    tables = _FLAGS_TABLES.get(int(exception_type))
    if tables is None:
        return None
    return tables[processor_architecture is not None
                  and int(processor_architecture) in _ARM_ARCHITECTURES]
