# Licensed under the GPLv3 - see LICENSE
import struct

import numpy as np
import pytest

from ... import context
from ...base.errors import (DecodeError, OutOfBoundsError,
                            UnrecognizedArchitectureError)
from ...constants.cpu import CONTEXT_ARCHITECTURES
from ..base import CONTEXT_CLASSES, ContextBase, ContextMeta
from ..x86 import ContextX86, ContextAMD64
from ..arm import ContextARM, ContextARM64, ContextARM64Old
from ..ppc import ContextPPC, ContextPPC64
from ..sparc import ContextSPARC
from ..mips import ContextMIPS, ContextMIPS64


@pytest.mark.parametrize('cls, nbytes', (
    (ContextX86, 716),
    (ContextAMD64, 1232),
    (ContextARM, 368),
    (ContextARM64, 912),
    (ContextARM64Old, 796),
    (ContextPPC, 1004),
    (ContextPPC64, 1160),
    (ContextSPARC, 584),
    (ContextMIPS, 600),
    (ContextMIPS64, 600)))
def test_layout_sizes(cls, nbytes):
    assert cls.nbytes == nbytes
    assert CONTEXT_CLASSES[cls._architecture] is cls
    assert CONTEXT_ARCHITECTURES[cls._architecture] == cls._selector


def test_registry_complete():
    assert set(CONTEXT_CLASSES) == set(CONTEXT_ARCHITECTURES)


def test_registry_conflict():
    with pytest.raises(ValueError):
        class AnotherX86(ContextBase):
            _architecture = 'CONTEXT_X86'

    assert CONTEXT_CLASSES['CONTEXT_X86'] is ContextX86


class TestSelect:
    def test_x86(self):
        tag = context.select(0x00010000)
        assert tag == 0x00010000
        assert tag.name == 'CONTEXT_X86'
        assert context.context_class(tag) is ContextX86

    @pytest.mark.parametrize('flags, name', (
        (0x0001003f, 'CONTEXT_X86'),
        (0x0010001f, 'CONTEXT_AMD64'),
        (0x40000002, 'CONTEXT_ARM'),
        (0x00400007, 'CONTEXT_ARM64'),
        (0x80000003, 'CONTEXT_ARM64_OLD'),
        (0x20000001, 'CONTEXT_PPC'),
        (0x01000001, 'CONTEXT_PPC64'),
        (0x10000003, 'CONTEXT_SPARC'),
        (0x00040002, 'CONTEXT_MIPS'),
        (0x00080002, 'CONTEXT_MIPS64')))
    def test_register_flags_ignored(self, flags, name):
        assert context.select(flags).name == name

    def test_unknown(self):
        with pytest.raises(UnrecognizedArchitectureError):
            context.select(0x00020000)
        with pytest.raises(UnrecognizedArchitectureError):
            context.select(0)
        # Two architecture bits together are not an architecture.
        with pytest.raises(UnrecognizedArchitectureError):
            context.select(0x00110000)
        with pytest.raises(LookupError):
            context.select(0x00000001)

    def test_ia64_mips64(self):
        assert context.select(0x00080000).name == 'CONTEXT_MIPS64'
        assert context.select(0x00080000, platform_id=0x8201).name == (
            'CONTEXT_MIPS64')
        # On Windows, the same selector is IA64, for which there is no
        # context layout.
        with pytest.raises(UnrecognizedArchitectureError):
            context.select(0x00080000, platform_id=2)
        assert context.select(0x00100000, platform_id=2).name == (
            'CONTEXT_AMD64')

    def test_context_class(self):
        assert context.context_class('CONTEXT_ARM64') is ContextARM64
        with pytest.raises(UnrecognizedArchitectureError):
            context.context_class('CONTEXT_IA64')
        assert context.context_class(0x00010000) is ContextX86
        assert context.context_class(0x00080000) is ContextMIPS64
        with pytest.raises(UnrecognizedArchitectureError):
            context.context_class(0x00020000)

    @pytest.mark.parametrize('tag', (None, 1.5, b'CONTEXT_X86'))
    def test_context_class_bad_type(self, tag):
        with pytest.raises(TypeError):
            context.context_class(tag)


class TestX86:
    def setup_class(self):
        self.context = ContextX86.fromvalues(context_flags=0x3f, eip=0x401000,
                                             esp=0x12ff00, eax=1, ebp=2)
        self.data = b'\xff' * 4 + self.context.tobytes() + b'\xee' * 4

    def test_fromvalues(self):
        assert self.context['context_flags'] == 0x0001003f
        assert len(self.context.tobytes()) == 716

    def test_read(self):
        tag = context.select(struct.unpack_from('<I', self.data, 4)[0])
        ctx = context.read_context(self.data, (716, 4), tag)
        assert type(ctx) is ContextX86
        assert ctx == self.context
        assert ctx.instruction_pointer == 0x401000
        assert ctx.stack_pointer == 0x12ff00
        assert ctx.registers['eax'] == 1
        assert ctx.registers['ebp'] == 2
        assert ctx.valid_groups == (
            'CONTEXT_CONTROL', 'CONTEXT_INTEGER', 'CONTEXT_SEGMENTS',
            'CONTEXT_FLOATING_POINT', 'CONTEXT_DEBUG_REGISTERS',
            'CONTEXT_EXTENDED_REGISTERS')
        assert ctx['float_save'].nbytes == 112
        assert len(ctx['extended_registers']) == 512

    def test_trailing_data_ignored(self):
        ctx = context.read_context(self.data, (720, 4), 'CONTEXT_X86')
        assert ctx == self.context

    def test_too_small(self):
        with pytest.raises(OutOfBoundsError):
            context.read_context(self.data, (715, 4), 'CONTEXT_X86')

    def test_never_reinterpreted(self):
        # Selecting from the flags of an x86 context never gives AMD64;
        # forcing the AMD64 layout on it fails verification.
        tag = context.select(self.context['context_flags'])
        assert context.context_class(tag) is not ContextAMD64
        data = self.context.tobytes() + b'\x00' * 600
        with pytest.raises(DecodeError):
            context.read_context(data, (1232, 0), 'CONTEXT_AMD64')

    def test_big_endian(self):
        ctx = ContextX86.fromvalues(byteorder='>', eip=0x401000)
        data = ctx.tobytes()
        assert data[:4] == b'\x00\x01\x00\x00'
        ctx2 = context.read_context(data, (716, 0), 'CONTEXT_X86',
                                    byteorder='>')
        assert ctx2.instruction_pointer == 0x401000


class TestAMD64:
    def setup_class(self):
        self.context = ContextAMD64.fromvalues(
            context_flags=0x0b, rip=0x7ff612341000, rsp=0x000000e1f0aff000,
            r15=15, eflags=0x246,
            vector_register=np.arange(52, dtype='u8').reshape(26, 2))

    def test_registers(self):
        data = self.context.tobytes()
        assert len(data) == 1232
        # context_flags follows the six 64-bit home addresses.
        assert struct.unpack_from('<I', data, 48)[0] == 0x0010000b
        tag = context.select(struct.unpack_from('<I', data, 48)[0])
        ctx = context.read_context(data, (len(data), 0), tag)
        assert ctx.instruction_pointer == 0x7ff612341000
        assert ctx.stack_pointer == 0xe1f0aff000
        registers = ctx.registers
        assert registers['r15'] == 15
        assert registers['eflags'] == 0x246
        assert len(registers) == 18
        assert ctx['vector_register'][1, 0] == 2
        assert ctx.valid_groups == ('CONTEXT_CONTROL', 'CONTEXT_INTEGER',
                                    'CONTEXT_FLOATING_POINT')

    def test_flags(self):
        data = b'\xff' * 8 + self.context.tobytes()
        location = (ContextAMD64.nbytes, 8)
        # The first word holds a home address, not the flags.
        assert struct.unpack_from('<I', data, 8)[0] == 0
        flags = context.read_context_flags(data, location, 'CONTEXT_AMD64')
        assert flags == 0x0010000b
        tag = context.select(flags)
        assert tag.name == 'CONTEXT_AMD64'
        ctx = context.read_context(data, location, tag)
        assert ctx == self.context

    def test_integer_tag(self):
        data = self.context.tobytes()
        ctx = context.read_context(data, (len(data), 0), 0x00100000)
        assert type(ctx) is ContextAMD64
        assert ctx.instruction_pointer == 0x7ff612341000

    def test_flags_out_of_bounds(self):
        with pytest.raises(OutOfBoundsError):
            context.read_context_flags(self.context.tobytes()[:50],
                                       (50, 0), 'CONTEXT_AMD64')


class TestARM:
    def test_arm(self):
        iregs = np.arange(16, dtype='u4') * 4
        ctx = ContextARM.fromvalues(iregs=iregs, cpsr=0x10)
        ctx = ContextARM.frombuffer(ctx.tobytes())
        assert ctx.instruction_pointer == 60
        assert ctx.stack_pointer == 52
        assert ctx.registers['lr'] == 56
        assert ctx.registers['r0'] == 0
        assert ctx.registers['cpsr'] == 0x10

    def test_arm64(self):
        iregs = np.arange(31, dtype='u8')
        ctx = ContextARM64.fromvalues(context_flags=3, iregs=iregs,
                                      sp=0x1000, pc=0x2000)
        ctx = context.read_context(ctx.tobytes(), (912, 0),
                                   context.select(0x00400003))
        assert ctx.instruction_pointer == 0x2000
        assert ctx.stack_pointer == 0x1000
        assert ctx.registers['fp'] == 29
        assert ctx.registers['lr'] == 30
        assert ctx.registers['x28'] == 28
        assert ctx.valid_groups == ('CONTEXT_CONTROL', 'CONTEXT_INTEGER')

    def test_arm64_old(self):
        iregs = np.arange(32, dtype='u8') + 100
        ctx = ContextARM64Old.fromvalues(iregs=iregs, pc=0x3000)
        data = ctx.tobytes()
        # The flags are a 64-bit word.
        assert struct.unpack_from('<Q', data)[0] == 0x80000000
        ctx = context.read_context(data, (796, 0), context.select(0x80000000))
        assert ctx.instruction_pointer == 0x3000
        assert ctx.stack_pointer == 131


class TestOthers:
    def test_ppc(self):
        gpr = np.arange(32, dtype='u4')
        ctx = ContextPPC.fromvalues(srr0=0x100, gpr=gpr)
        assert ctx.instruction_pointer == 0x100
        assert ctx.stack_pointer == 1
        assert ctx.registers['r31'] == 31
        assert ctx['vector_save'].nbytes == 576

    def test_ppc64(self):
        ctx = ContextPPC64.fromvalues(srr0=1 << 40, gpr=[0, 2] + [0] * 30)
        ctx = context.read_context(ctx.tobytes(), (1160, 0), 'CONTEXT_PPC64')
        assert ctx.instruction_pointer == 1 << 40
        assert ctx.stack_pointer == 2

    def test_sparc(self):
        g_r = np.arange(32, dtype='u8')
        ctx = ContextSPARC.fromvalues(g_r=g_r, pc=0x10000)
        assert ctx.stack_pointer == 14
        assert ctx.registers['fp'] == 30
        assert ctx.registers['i7'] == 31
        assert ctx.registers['g0'] == 0
        assert ctx.instruction_pointer == 0x10000

    @pytest.mark.parametrize('cls, flags', ((ContextMIPS, 0x00040000),
                                            (ContextMIPS64, 0x00080000)))
    def test_mips(self, cls, flags):
        iregs = np.arange(32, dtype='u8')
        ctx = cls.fromvalues(iregs=iregs, epc=0x400000)
        assert ctx['context_flags'] == flags
        ctx = context.read_context(ctx.tobytes(), (600, 0),
                                   context.select(flags))
        assert type(ctx) is cls
        assert ctx.instruction_pointer == 0x400000
        assert ctx.stack_pointer == 29
        assert ctx.registers['ra'] == 31

    def test_mips_mismatch(self):
        data = ContextMIPS.fromvalues().tobytes()
        with pytest.raises(DecodeError):
            context.read_context(data, (600, 0), 'CONTEXT_MIPS64')
        ctx = context.read_context(data, (600, 0), 'CONTEXT_MIPS64',
                                   verify=False)
        assert type(ctx) is ContextMIPS64
