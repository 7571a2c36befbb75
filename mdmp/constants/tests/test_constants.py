# Licensed under the GPLv3 - see LICENSE
import pytest

from ... import constants
from ...base.symbols import Symbol, SymbolTable
from ..cpu import (CONTEXT_ARCHITECTURES, CONTEXT_CPU_MASK,
                   WINDOWS_CONTEXT_ARCHITECTURES, CONTEXT_FLAGS_X86)
from ..linux import SIGNALS, SI_CODES, SIGSEGV_CODES, ERRNO, si_code_table
from ..macos import (EXCEPTION_TYPES, KERN_RETURN, BAD_ACCESS_CODES_ARM,
                     BAD_ACCESS_CODES_X86, exception_flags_table)
from ..streams import STREAM_TYPES, stream_ecosystem
from ..system import PLATFORM_IDS, PROCESSOR_ARCHITECTURES
from ..windows import (NTSTATUS, EXCEPTION_CODES, EXCEPTION_FLAGS,
                       severity, facility, is_customer_code)
from ..winerror import WIN32_ERRORS


ALL_TABLES = [getattr(constants, name) for name in (
    'STREAM_TYPES', 'PLATFORM_IDS', 'PROCESSOR_ARCHITECTURES',
    'MEMORY_PROTECTIONS', 'CONTEXT_ARCHITECTURES', 'NTSTATUS',
    'EXCEPTION_CODES', 'WIN32_ERRORS', 'SIGNALS', 'SI_CODES', 'ERRNO',
    'EXCEPTION_TYPES', 'KERN_RETURN', 'BAD_ACCESS_CODES_X86')]


@pytest.mark.parametrize('table', ALL_TABLES, ids=lambda t: t.name)
class TestTables:
    def test_totality(self, table):
        for raw in (0, 1, 0x7fffffff, 0xdeadbeef, 0xffffffff):
            symbol = table(raw)
            assert isinstance(symbol, Symbol)
            assert int(symbol) == raw
            assert symbol.name is None or symbol.name in table

    def test_roundtrip(self, table):
        for name, value in table.items():
            assert table.from_symbol(name) == value
            assert name in table.names_of(value)
            assert table(value).name is not None


class TestStreams:
    def test_names(self):
        assert STREAM_TYPES(3).name == 'ThreadListStream'
        assert STREAM_TYPES(0x47670001).name == 'BreakpadInfoStream'
        assert STREAM_TYPES(0x43500001).name == 'CrashpadInfoStream'
        assert STREAM_TYPES(0x4d7a0001).name == 'MozMacosCrashInfoStream'
        assert STREAM_TYPES(0x12345678).name is None

    @pytest.mark.parametrize('stream_type, ecosystem', (
        (3, 'microsoft'), (0xffff, 'microsoft'), (0x4767000a, 'breakpad'),
        (0x43500001, 'crashpad'), (0x4d7a0005, 'mozilla'),
        (0x12340001, None)))
    def test_ecosystem(self, stream_type, ecosystem):
        assert stream_ecosystem(stream_type) == ecosystem


class TestWindows:
    def test_codes(self):
        assert EXCEPTION_CODES(0xc0000005).name == 'STATUS_ACCESS_VIOLATION'
        assert EXCEPTION_CODES(0x80000003).name == 'STATUS_BREAKPOINT'
        assert EXCEPTION_CODES(0xe06d7363).name == 'UNHANDLED_CPP_EXCEPTION'
        assert NTSTATUS(0xe06d7363).name is None
        assert EXCEPTION_CODES.name == 'ExceptionCode'

    def test_flags(self):
        assert EXCEPTION_FLAGS.decompose(0x03) == (
            ('EXCEPTION_NONCONTINUABLE', 'EXCEPTION_UNWINDING'), 0)

    def test_ntstatus_fields(self):
        assert severity(0xc0000005) == 3
        assert severity(0x80000003) == 2
        assert facility(0xc0150002) == 0x15
        assert not is_customer_code(0xc0000005)
        assert is_customer_code(0xe06d7363)

    def test_win32_errors(self):
        assert WIN32_ERRORS(0).name == 'ERROR_SUCCESS'
        assert WIN32_ERRORS(5).name == 'ERROR_ACCESS_DENIED'


class TestLinux:
    def test_signals(self):
        assert SIGNALS(11).name == 'SIGSEGV'
        assert SIGNALS(6).name == 'SIGABRT'
        assert SIGNALS(0xffffffff).name == 'DUMP_REQUESTED'

    def test_si_codes(self):
        assert si_code_table(11) is SIGSEGV_CODES
        assert si_code_table(6) is SI_CODES
        assert SIGSEGV_CODES(1).name == 'SEGV_MAPERR'
        assert SIGSEGV_CODES(2).name == 'SEGV_ACCERR'
        # Generic codes are also known for specific signals.
        assert SIGSEGV_CODES(0x80).name == 'SI_KERNEL'
        assert SI_CODES(0xffffffff).name == 'SI_QUEUE'
        assert SIGSEGV_CODES.name != SI_CODES.name

    def test_errno(self):
        assert ERRNO(2).name == 'ENOENT'


class TestMacOS:
    def test_types(self):
        assert EXCEPTION_TYPES(1).name == 'EXC_BAD_ACCESS'
        assert KERN_RETURN(1).name == 'KERN_INVALID_ADDRESS'

    def test_flags_table(self):
        assert exception_flags_table(1) is BAD_ACCESS_CODES_X86
        assert exception_flags_table(1, 9) is BAD_ACCESS_CODES_X86
        assert exception_flags_table(1, 12) is BAD_ACCESS_CODES_ARM
        assert exception_flags_table(1, 0x8003) is BAD_ACCESS_CODES_ARM
        assert exception_flags_table(0x1234) is None
        assert BAD_ACCESS_CODES_ARM(0x101).name == 'EXC_ARM_DA_ALIGN'
        assert BAD_ACCESS_CODES_X86(13).name == 'EXC_I386_GPFLT'


class TestCPU:
    def test_architectures(self):
        assert CONTEXT_CPU_MASK == 0xffffff00
        assert CONTEXT_ARCHITECTURES(0x00010000).name == 'CONTEXT_X86'
        assert CONTEXT_ARCHITECTURES(0x00080000).name == 'CONTEXT_MIPS64'
        assert WINDOWS_CONTEXT_ARCHITECTURES(0x00080000).name == (
            'CONTEXT_IA64')
        assert 'CONTEXT_IA64' not in CONTEXT_ARCHITECTURES
        assert WINDOWS_CONTEXT_ARCHITECTURES(0x00100000).name == (
            'CONTEXT_AMD64')

    def test_flags(self):
        names, rest = CONTEXT_FLAGS_X86.decompose(0x1f)
        assert names == ('CONTEXT_CONTROL', 'CONTEXT_INTEGER',
                         'CONTEXT_SEGMENTS', 'CONTEXT_FLOATING_POINT',
                         'CONTEXT_DEBUG_REGISTERS')
        assert rest == 0


class TestPlatformLookup:
    @pytest.mark.parametrize('platform_id, table_name', (
        (2, 'ExceptionCode'), (0x8201, 'Signal'), (0x8203, 'Signal'),
        (0x8101, 'MachException'), (0x8102, 'MachException'),
        (0x9999, 'ExceptionCode')))
    def test_exception_code_table(self, platform_id, table_name):
        assert constants.exception_code_table(platform_id).name == table_name

    def test_same_code_different_platforms(self):
        code = 11
        assert constants.exception_code_table(0x8201)(code).name == 'SIGSEGV'
        assert constants.exception_code_table(0x8101)(code).name == (
            EXCEPTION_TYPES(11).name)
        assert constants.exception_code_table(2)(code).name == (
            EXCEPTION_CODES(11).name)

    def test_exception_flags_table(self):
        assert constants.exception_flags_table(2, 0xc0000005) is (
            EXCEPTION_FLAGS)
        assert constants.exception_flags_table(0x8201, 11) is SIGSEGV_CODES
        assert constants.exception_flags_table(0x8101, 1, 12) is (
            BAD_ACCESS_CODES_ARM)

    def test_platform_names(self):
        assert PLATFORM_IDS(0x8201).name == 'MD_OS_LINUX'
        assert PROCESSOR_ARCHITECTURES(9).name == (
            'PROCESSOR_ARCHITECTURE_AMD64')
