# Licensed under the GPLv3 - see LICENSE
"""Contexts of MIPS processors.

The 32-bit and 64-bit variants share a layout (registers are always stored
as 64-bit words), but differ in their selector.
"""
import numpy as np

from ..base.record import RecordBase
from .base import ContextBase


__all__ = ['FloatingSaveAreaMIPS', 'ContextMIPS', 'ContextMIPS64']


_REGISTER_NAMES = (
    'zero', 'at', 'v0', 'v1', 'a0', 'a1', 'a2', 'a3',
    't0', 't1', 't2', 't3', 't4', 't5', 't6', 't7',
    's0', 's1', 's2', 's3', 's4', 's5', 's6', 's7',
    't8', 't9', 'k0', 'k1', 'gp', 'sp', 'fp', 'ra')


class FloatingSaveAreaMIPS(RecordBase):
    _dtype = np.dtype([('regs', '<u8', (32,)),
                       ('fpcsr', '<u4'),
                       ('fir', '<u4')])


class ContextMIPS(ContextBase):
    """Register state of a 32-bit MIPS thread."""
    _architecture = 'CONTEXT_MIPS'
    _selector = 0x00040000
    _dtype = np.dtype([('context_flags', '<u4'),
                       ('_pad0', '<u4'),
                       ('iregs', '<u8', (32,)),
                       ('mdhi', '<u8'),
                       ('mdlo', '<u8'),
                       ('hi', '<u4', (3,)),
                       ('lo', '<u4', (3,)),
                       ('dsp_control', '<u4'),
                       ('_pad1', '<u4'),
                       ('epc', '<u8'),
                       ('badvaddr', '<u8'),
                       ('status', '<u4'),
                       ('cause', '<u4'),
                       ('float_save', FloatingSaveAreaMIPS._dtype)])
    _subrecords = {'float_save': FloatingSaveAreaMIPS}
    _registers = dict(
        [(name, ('iregs', i)) for i, name in enumerate(_REGISTER_NAMES)]
        + [('pc', 'epc')])
    _instruction_pointer = 'pc'
    _stack_pointer = 'sp'


class ContextMIPS64(ContextMIPS):
    """Register state of a 64-bit MIPS thread."""
    _architecture = 'CONTEXT_MIPS64'
    _selector = 0x00080000
