# Licensed under the GPLv3 - see LICENSE
"""Signal, ``si_code`` and errno values for dumps written on Linux/Android.

For these platforms, the exception code of the exception stream holds the
signal number, and the exception flags hold the ``si_code``.  The meaning of
an ``si_code`` depends on the signal; use `si_code_table` to get the
appropriate table.
"""
from ..base.symbols import SymbolTable


__all__ = ['SIGNALS', 'DUMP_REQUESTED', 'SI_CODES', 'SIGILL_CODES',
           'SIGFPE_CODES', 'SIGSEGV_CODES', 'SIGBUS_CODES', 'SIGTRAP_CODES',
           'SIGCHLD_CODES', 'SIGSYS_CODES', 'si_code_table', 'ERRNO']


DUMP_REQUESTED = 0xffffffff
"""Exception code used for dumps written without a crash."""


SIGNALS = SymbolTable('Signal', (
    ('SIGHUP', 1),
    ('SIGINT', 2),
    ('SIGQUIT', 3),
    ('SIGILL', 4),
    ('SIGTRAP', 5),
    ('SIGABRT', 6),
    ('SIGIOT', 6),
    ('SIGBUS', 7),
    ('SIGFPE', 8),
    ('SIGKILL', 9),
    ('SIGUSR1', 10),
    ('SIGSEGV', 11),
    ('SIGUSR2', 12),
    ('SIGPIPE', 13),
    ('SIGALRM', 14),
    ('SIGTERM', 15),
    ('SIGSTKFLT', 16),
    ('SIGCHLD', 17),
    ('SIGCONT', 18),
    ('SIGSTOP', 19),
    ('SIGTSTP', 20),
    ('SIGTTIN', 21),
    ('SIGTTOU', 22),
    ('SIGURG', 23),
    ('SIGXCPU', 24),
    ('SIGXFSZ', 25),
    ('SIGVTALRM', 26),
    ('SIGPROF', 27),
    ('SIGWINCH', 28),
    ('SIGIO', 29),
    ('SIGPOLL', 29),
    ('SIGPWR', 30),
    ('SIGSYS', 31),
    ('DUMP_REQUESTED', DUMP_REQUESTED),
))


SI_CODES = SymbolTable('SiCode', (
    ('SI_USER', 0),
    ('SI_KERNEL', 0x80),
    ('SI_QUEUE', -1 & 0xffffffff),
    ('SI_TIMER', -2 & 0xffffffff),
    ('SI_MESGQ', -3 & 0xffffffff),
    ('SI_ASYNCIO', -4 & 0xffffffff),
    ('SI_SIGIO', -5 & 0xffffffff),
    ('SI_TKILL', -6 & 0xffffffff),
    ('SI_DETHREAD', -7 & 0xffffffff),
    ('SI_ASYNCNL', -60 & 0xffffffff),
))
"""Codes valid for any signal.

Negative codes are stored as unsigned 32-bit values.
"""


def _with_generic(name, items):
    table = SI_CODES | SymbolTable(name, items)
    table.name = name
    return table


SIGILL_CODES = _with_generic('SigillCode', (
    ('ILL_ILLOPC', 1),
    ('ILL_ILLOPN', 2),
    ('ILL_ILLADR', 3),
    ('ILL_ILLTRP', 4),
    ('ILL_PRVOPC', 5),
    ('ILL_PRVREG', 6),
    ('ILL_COPROC', 7),
    ('ILL_BADSTK', 8),
    ('ILL_BADIADDR', 9),
))

SIGFPE_CODES = _with_generic('SigfpeCode', (
    ('FPE_INTDIV', 1),
    ('FPE_INTOVF', 2),
    ('FPE_FLTDIV', 3),
    ('FPE_FLTOVF', 4),
    ('FPE_FLTUND', 5),
    ('FPE_FLTRES', 6),
    ('FPE_FLTINV', 7),
    ('FPE_FLTSUB', 8),
    ('FPE_FLTUNK', 14),
    ('FPE_CONDTRAP', 15),
))

SIGSEGV_CODES = _with_generic('SigsegvCode', (
    ('SEGV_MAPERR', 1),
    ('SEGV_ACCERR', 2),
    ('SEGV_BNDERR', 3),
    ('SEGV_PKUERR', 4),
    ('SEGV_ACCADI', 5),
    ('SEGV_ADIDERR', 6),
    ('SEGV_ADIPERR', 7),
    ('SEGV_MTEAERR', 8),
    ('SEGV_MTESERR', 9),
    ('SEGV_CPERR', 10),
))

SIGBUS_CODES = _with_generic('SigbusCode', (
    ('BUS_ADRALN', 1),
    ('BUS_ADRERR', 2),
    ('BUS_OBJERR', 3),
    ('BUS_MCEERR_AR', 4),
    ('BUS_MCEERR_AO', 5),
))

SIGTRAP_CODES = _with_generic('SigtrapCode', (
    ('TRAP_BRKPT', 1),
    ('TRAP_TRACE', 2),
    ('TRAP_BRANCH', 3),
    ('TRAP_HWBKPT', 4),
    ('TRAP_UNK', 5),
    ('TRAP_PERF', 6),
))

SIGCHLD_CODES = _with_generic('SigchldCode', (
    ('CLD_EXITED', 1),
    ('CLD_KILLED', 2),
    ('CLD_DUMPED', 3),
    ('CLD_TRAPPED', 4),
    ('CLD_STOPPED', 5),
    ('CLD_CONTINUED', 6),
))

SIGSYS_CODES = _with_generic('SigsysCode', (
    ('SYS_SECCOMP', 1),
    ('SYS_USER_DISPATCH', 2),
))


_SI_CODE_TABLES = {
    4: SIGILL_CODES,
    5: SIGTRAP_CODES,
    7: SIGBUS_CODES,
    8: SIGFPE_CODES,
    11: SIGSEGV_CODES,
    17: SIGCHLD_CODES,
    31: SIGSYS_CODES,
}


def si_code_table(signal):
    """Table of ``si_code`` values appropriate for a given signal.

    Parameters
    ----------
    signal : int
        Signal number, e.g., the exception code of a Linux exception stream.

    Returns
    -------
    table : `~mdmp.base.symbols.SymbolTable`
        Signal-specific table, or that of the generic codes.
    """
    return _SI_CODE_TABLES.get(int(signal), SI_CODES)


ERRNO = SymbolTable('Errno', (
    ('EPERM', 1),
    ('ENOENT', 2),
    ('ESRCH', 3),
    ('EINTR', 4),
    ('EIO', 5),
    ('ENXIO', 6),
    ('E2BIG', 7),
    ('ENOEXEC', 8),
    ('EBADF', 9),
    ('ECHILD', 10),
    ('EAGAIN', 11),
    ('EWOULDBLOCK', 11),
    ('ENOMEM', 12),
    ('EACCES', 13),
    ('EFAULT', 14),
    ('ENOTBLK', 15),
    ('EBUSY', 16),
    ('EEXIST', 17),
    ('EXDEV', 18),
    ('ENODEV', 19),
    ('ENOTDIR', 20),
    ('EISDIR', 21),
    ('EINVAL', 22),
    ('ENFILE', 23),
    ('EMFILE', 24),
    ('ENOTTY', 25),
    ('ETXTBSY', 26),
    ('EFBIG', 27),
    ('ENOSPC', 28),
    ('ESPIPE', 29),
    ('EROFS', 30),
    ('EMLINK', 31),
    ('EPIPE', 32),
    ('EDOM', 33),
    ('ERANGE', 34),
    ('EDEADLK', 35),
    ('EDEADLOCK', 35),
    ('ENAMETOOLONG', 36),
    ('ENOLCK', 37),
    ('ENOSYS', 38),
    ('ENOTEMPTY', 39),
    ('ELOOP', 40),
    ('ENOMSG', 42),
    ('EIDRM', 43),
    ('ECHRNG', 44),
    ('EL2NSYNC', 45),
    ('EL3HLT', 46),
    ('EL3RST', 47),
    ('ELNRNG', 48),
    ('EUNATCH', 49),
    ('ENOCSI', 50),
    ('EL2HLT', 51),
    ('EBADE', 52),
    ('EBADR', 53),
    ('EXFULL', 54),
    ('ENOANO', 55),
    ('EBADRQC', 56),
    ('EBADSLT', 57),
    ('EBFONT', 59),
    ('ENOSTR', 60),
    ('ENODATA', 61),
    ('ETIME', 62),
    ('ENOSR', 63),
    ('ENONET', 64),
    ('ENOPKG', 65),
    ('EREMOTE', 66),
    ('ENOLINK', 67),
    ('EADV', 68),
    ('ESRMNT', 69),
    ('ECOMM', 70),
    ('EPROTO', 71),
    ('EMULTIHOP', 72),
    ('EDOTDOT', 73),
    ('EBADMSG', 74),
    ('EOVERFLOW', 75),
    ('ENOTUNIQ', 76),
    ('EBADFD', 77),
    ('EREMCHG', 78),
    ('ELIBACC', 79),
    ('ELIBBAD', 80),
    ('ELIBSCN', 81),
    ('ELIBMAX', 82),
    ('ELIBEXEC', 83),
    ('EILSEQ', 84),
    ('ERESTART', 85),
    ('ESTRPIPE', 86),
    ('EUSERS', 87),
    ('ENOTSOCK', 88),
    ('EDESTADDRREQ', 89),
    ('EMSGSIZE', 90),
    ('EPROTOTYPE', 91),
    ('ENOPROTOOPT', 92),
    ('EPROTONOSUPPORT', 93),
    ('ESOCKTNOSUPPORT', 94),
    ('EOPNOTSUPP', 95),
    ('ENOTSUP', 95),
    ('EPFNOSUPPORT', 96),
    ('EAFNOSUPPORT', 97),
    ('EADDRINUSE', 98),
    ('EADDRNOTAVAIL', 99),
    ('ENETDOWN', 100),
    ('ENETUNREACH', 101),
    ('ENETRESET', 102),
    ('ECONNABORTED', 103),
    ('ECONNRESET', 104),
    ('ENOBUFS', 105),
    ('EISCONN', 106),
    ('ENOTCONN', 107),
    ('ESHUTDOWN', 108),
    ('ETOOMANYREFS', 109),
    ('ETIMEDOUT', 110),
    ('ECONNREFUSED', 111),
    ('EHOSTDOWN', 112),
    ('EHOSTUNREACH', 113),
    ('EALREADY', 114),
    ('EINPROGRESS', 115),
    ('ESTALE', 116),
    ('EUCLEAN', 117),
    ('ENOTNAM', 118),
    ('ENAVAIL', 119),
    ('EISNAM', 120),
    ('EREMOTEIO', 121),
    ('EDQUOT', 122),
    ('ENOMEDIUM', 123),
    ('EMEDIUMTYPE', 124),
    ('ECANCELED', 125),
    ('ENOKEY', 126),
    ('EKEYEXPIRED', 127),
    ('EKEYREVOKED', 128),
    ('EKEYREJECTED', 129),
    ('EOWNERDEAD', 130),
    ('ENOTRECOVERABLE', 131),
    ('ERFKILL', 132),
    ('EHWPOISON', 133),
))
