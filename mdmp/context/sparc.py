# Licensed under the GPLv3 - see LICENSE
"""Context of SPARC processors."""
import numpy as np

from ..base.record import RecordBase
from .base import ContextBase


__all__ = ['FloatingSaveAreaSPARC', 'ContextSPARC']


class FloatingSaveAreaSPARC(RecordBase):
    _dtype = np.dtype([('regs', '<u8', (32,)),
                       ('filler', '<u8'),
                       ('fsr', '<u8')])


class ContextSPARC(ContextBase):
    """Register state of a SPARC thread.

    ``g_r`` holds the global, out, local and in registers (g0-g7, o0-o7,
    l0-l7, i0-i7); o6 is the stack pointer and i6 the frame pointer.
    """
    _architecture = 'CONTEXT_SPARC'
    _selector = 0x10000000
    _dtype = np.dtype([('context_flags', '<u4'),
                       ('flag_pad', '<u4'),
                       ('g_r', '<u8', (32,)),
                       ('ccr', '<u8'),
                       ('pc', '<u8'),
                       ('npc', '<u8'),
                       ('y', '<u8'),
                       ('asi', '<u8'),
                       ('fprs', '<u8'),
                       ('float_save', FloatingSaveAreaSPARC._dtype)])
    _subrecords = {'float_save': FloatingSaveAreaSPARC}
    _registers = dict(
        [('{}{}'.format(kind, i), ('g_r', 8*k + i))
         for k, kind in enumerate('goli') for i in range(8)]
        + [('sp', ('g_r', 14)), ('fp', ('g_r', 30)),
           ('pc', 'pc'), ('npc', 'npc'), ('y', 'y'), ('ccr', 'ccr')])
    _instruction_pointer = 'pc'
    _stack_pointer = 'sp'
