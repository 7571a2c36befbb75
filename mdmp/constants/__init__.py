# Licensed under the GPLv3 - see LICENSE
"""Symbol tables for the codes found in minidump records.

Tables are loaded on demand, so that, e.g., the large table of NTSTATUS
codes is only created when first used.  Besides the tables defined in the
submodules, any tables registered via entry point 'mdmp.symbols' are made
available, e.g., for codes used by further producers.  An entry should
point to a `~mdmp.base.symbols.SymbolTable` instance (e.g.,
'MY_CODES = mypackage.codes:MY_CODES').  Entries that cannot be loaded are
dropped and not tried again.

Since the meaning of a code can depend on which program wrote the dump,
`exception_code_table` gives the table appropriate for a given platform.

Attributes
----------
SYMBOL_TABLES : list
    Names of the available tables.

"""
import sys

import entrypoints


__all__ = ['exception_code_table', 'exception_flags_table']


__self__ = sys.modules[__name__]
"""Link to our own module, for convenience below."""

_BUILTIN = {
    'streams': ('STREAM_TYPES',),
    'system': ('PLATFORM_IDS', 'PROCESSOR_ARCHITECTURES', 'PRODUCT_TYPES',
               'SUITE_MASKS', 'MISC_INFO_FLAGS', 'MEMORY_STATES',
               'MEMORY_TYPES', 'MEMORY_PROTECTIONS', 'THREAD_DUMP_FLAGS',
               'HANDLE_OBJECT_INFORMATION_TYPES', 'FILE_OS', 'FILE_TYPES',
               'FILE_FLAGS', 'BREAKPAD_INFO_VALIDITY', 'ASSERTION_TYPES',
               'CV_SIGNATURES', 'ANNOTATION_TYPES', 'CPU_FEATURES_X86',
               'ARM_ELF_HWCAPS', 'MINIDUMP_TYPES'),
    'cpu': ('CONTEXT_ARCHITECTURES', 'WINDOWS_CONTEXT_ARCHITECTURES',
            'CONTEXT_FLAGS_X86', 'CONTEXT_FLAGS_ARM64'),
    'windows': ('NTSTATUS', 'EXCEPTION_CODES', 'EXCEPTION_FLAGS',
                'ACCESS_VIOLATION_TYPES', 'IN_PAGE_ERROR_TYPES',
                'FAST_FAIL_CODES'),
    'winerror': ('WIN32_ERRORS',),
    'linux': ('SIGNALS', 'SI_CODES', 'SIGILL_CODES', 'SIGFPE_CODES',
              'SIGSEGV_CODES', 'SIGBUS_CODES', 'SIGTRAP_CODES',
              'SIGCHLD_CODES', 'SIGSYS_CODES', 'ERRNO'),
    'macos': ('EXCEPTION_TYPES', 'KERN_RETURN', 'BAD_ACCESS_CODES_X86',
              'BAD_ACCESS_CODES_ARM', 'BAD_INSTRUCTION_CODES_X86',
              'BAD_INSTRUCTION_CODES_ARM', 'ARITHMETIC_CODES_X86',
              'ARITHMETIC_CODES_ARM', 'BREAKPOINT_CODES_X86',
              'BREAKPOINT_CODES_ARM', 'SOFTWARE_CODES', 'RESOURCE_TYPES',
              'GUARD_TYPES'),
}

# We only load entries on demand, to keep import time minimal.
_entries = {}
"""Entry points found."""
_bad_entries = set()
"""Any entry points that failed to load. These will not be retried."""


def __getattr__(attr):
    """Get a missing attribute from a possible entry point.

    Looks for the attribute among the (possibly updated) entry points,
    and, if found, tries loading the entry.  If that fails, the entry
    is added to _bad_entries to ensure it does not recur.
    """
    if attr.startswith('_') or attr in _bad_entries:
        raise AttributeError(f"module {__name__!r} has no attribute {attr!r}")

    SYMBOL_TABLES = globals().setdefault('SYMBOL_TABLES', [])
    if attr not in _entries:
        if not _entries:
            # On initial update, we add our own tables as explicit entries,
            # so things work even in a pure source checkout, where entry
            # points are missing.
            _entries.update({
                name: entrypoints.EntryPoint(name, 'mdmp.constants.'+module,
                                             name)
                for module, names in _BUILTIN.items() for name in names})

        _entries.update(entrypoints.get_group_named('mdmp.symbols'))
        SYMBOL_TABLES.extend([name for name in _entries
                              if name not in SYMBOL_TABLES])
        if attr == 'SYMBOL_TABLES':
            return SYMBOL_TABLES

    entry = _entries.get(attr, None)
    if entry is None:
        raise AttributeError(f"module {__name__!r} has no attribute {attr!r}")

    try:
        value = entry.load()
    except Exception:
        _entries.pop(attr)
        _bad_entries.add(attr)
        if attr in SYMBOL_TABLES:
            SYMBOL_TABLES.remove(attr)
        raise AttributeError(f"{entry} was not loadable. Now removed")

    # Update so we do not have to go through __getattr__ again.
    globals()[attr] = value
    return value


def __dir__():
    # Force update of entries, creates 'SYMBOL_TABLES' if it doesn't exist.
    hasattr(__self__, 'absolutely_no_way_this_exists')
    return sorted(set(globals()).union(_entries).difference(_bad_entries))


def exception_code_table(platform_id):
    """Table for exception codes written on a given platform.

    Parameters
    ----------
    platform_id : int
        Platform identifier, as in ``SystemInfo['platform_id']``.

    Returns
    -------
    table : `~mdmp.base.symbols.SymbolTable`
        Exception and NTSTATUS codes for Windows, signals for Linux-like
        systems, and Mach exception types for macOS and iOS.  For unknown
        platforms, the Windows table is returned, as that is what the
        format was defined with.
    """
    from .system import APPLE_PLATFORMS, LINUX_PLATFORMS

    platform_id = int(platform_id)
    if platform_id in LINUX_PLATFORMS:
        return __self__.SIGNALS
    if platform_id in APPLE_PLATFORMS:
        return __self__.EXCEPTION_TYPES
    return __self__.EXCEPTION_CODES


def exception_flags_table(platform_id, exception_code,
                          processor_architecture=None):
    """Table for the exception flags written on a given platform.

    The flags hold the ``si_code`` for Linux-like systems, and the first
    Mach exception code for macOS and iOS; for both, the meaning depends
    on the exception code.  For Windows, they are `EXCEPTION_FLAGS`.

    Returns
    -------
    table : `~mdmp.base.symbols.SymbolTable` or `None`
        `None` if no names are known.
    """
    from .system import APPLE_PLATFORMS, LINUX_PLATFORMS

    platform_id = int(platform_id)
    if platform_id in LINUX_PLATFORMS:
        from .linux import si_code_table
        return si_code_table(exception_code)
    if platform_id in APPLE_PLATFORMS:
        from .macos import exception_flags_table
        return exception_flags_table(exception_code, processor_architecture)
    return __self__.EXCEPTION_FLAGS
