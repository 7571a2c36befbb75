# Licensed under the GPLv3 - see LICENSE
"""Contexts of ARM processors.

Three layouts exist: 32-bit ARM, 64-bit ARM as written by Windows (and by
current Breakpad-style producers), and an older 64-bit layout with a 64-bit
flags word, which some producers still write.
"""
import numpy as np

from ..base.record import RecordBase
from ..constants.cpu import CONTEXT_FLAGS_ARM64
from .base import ContextBase


__all__ = ['FloatingSaveAreaARM', 'ContextARM', 'ContextARM64',
           'FloatingSaveAreaARM64Old', 'ContextARM64Old']


class FloatingSaveAreaARM(RecordBase):
    """VFP state of a 32-bit ARM thread."""

    _dtype = np.dtype([('fpscr', '<u8'),
                       ('regs', '<u8', (32,)),
                       ('extra', '<u4', (8,))])


class ContextARM(ContextBase):
    """Register state of a 32-bit ARM thread.

    Registers r0 to r15 are stored in ``iregs``; r13 is the stack pointer,
    r14 the link register, and r15 the program counter.
    """
    _architecture = 'CONTEXT_ARM'
    _selector = 0x40000000
    _dtype = np.dtype([('context_flags', '<u4'),
                       ('iregs', '<u4', (16,)),
                       ('cpsr', '<u4'),
                       ('float_save', FloatingSaveAreaARM._dtype)])
    _subrecords = {'float_save': FloatingSaveAreaARM}
    _registers = dict(
        [('r{}'.format(i), ('iregs', i)) for i in range(13)]
        + [('sp', ('iregs', 13)), ('lr', ('iregs', 14)),
           ('pc', ('iregs', 15)), ('cpsr', 'cpsr')])
    _instruction_pointer = 'pc'
    _stack_pointer = 'sp'


class ContextARM64(ContextBase):
    """Register state of a 64-bit ARM thread.

    Registers x0 to x30 are stored in ``iregs``, with x29 the frame pointer
    and x30 the link register.  The SIMD registers are given as pairs of
    64-bit words, low word first.
    """
    _architecture = 'CONTEXT_ARM64'
    _selector = 0x00400000
    _dtype = np.dtype([('context_flags', '<u4'),
                       ('cpsr', '<u4'),
                       ('iregs', '<u8', (31,)),
                       ('sp', '<u8'),
                       ('pc', '<u8'),
                       ('float_regs', '<u8', (32, 2)),
                       ('fpcr', '<u4'),
                       ('fpsr', '<u4'),
                       ('bcr', '<u4', (8,)),
                       ('bvr', '<u8', (8,)),
                       ('wcr', '<u4', (2,)),
                       ('wvr', '<u8', (2,))])
    _registers = dict(
        [('x{}'.format(i), ('iregs', i)) for i in range(29)]
        + [('fp', ('iregs', 29)), ('lr', ('iregs', 30)),
           ('sp', 'sp'), ('pc', 'pc'), ('cpsr', 'cpsr')])
    _instruction_pointer = 'pc'
    _stack_pointer = 'sp'

    @property
    def valid_groups(self):
        """Names of the register groups marked as valid in the flags."""
        return CONTEXT_FLAGS_ARM64.decompose(self['context_flags'] & 0xff)[0]


class FloatingSaveAreaARM64Old(RecordBase):
    _dtype = np.dtype([('fpsr', '<u4'),
                       ('fpcr', '<u4'),
                       ('regs', '<u8', (32, 2))])


class ContextARM64Old(ContextBase):
    """Register state of a 64-bit ARM thread, in the older layout.

    Here, ``iregs`` holds x0 to x30 followed by the stack pointer.
    """
    _architecture = 'CONTEXT_ARM64_OLD'
    _selector = 0x80000000
    _dtype = np.dtype([('context_flags', '<u8'),
                       ('iregs', '<u8', (32,)),
                       ('pc', '<u8'),
                       ('cpsr', '<u4'),
                       ('float_save', FloatingSaveAreaARM64Old._dtype)])
    _subrecords = {'float_save': FloatingSaveAreaARM64Old}
    _registers = dict(
        [('x{}'.format(i), ('iregs', i)) for i in range(29)]
        + [('fp', ('iregs', 29)), ('lr', ('iregs', 30)),
           ('sp', ('iregs', 31)), ('pc', 'pc'), ('cpsr', 'cpsr')])
    _instruction_pointer = 'pc'
    _stack_pointer = 'sp'
