# Licensed under the GPLv3 - see LICENSE
"""Contexts of 32-bit and 64-bit PowerPC processors."""
import numpy as np

from ..base.record import RecordBase
from .base import ContextBase


__all__ = ['FloatingSaveAreaPPC', 'VectorSaveAreaPPC', 'ContextPPC',
           'ContextPPC64']


class FloatingSaveAreaPPC(RecordBase):
    _dtype = np.dtype([('fpregs', '<u8', (32,)),
                       ('fpscr_pad', '<u4'),
                       ('fpscr', '<u4')])


class VectorSaveAreaPPC(RecordBase):
    """AltiVec state; registers are pairs of 64-bit words."""

    _dtype = np.dtype([('save_vr', '<u8', (32, 2)),
                       ('save_vscr', '<u8', (2,)),
                       ('save_pad5', '<u4', (4,)),
                       ('save_vrvalid', '<u4'),
                       ('save_pad6', '<u4', (7,))])


def _gpr_registers():
    registers = {'r{}'.format(i): ('gpr', i) for i in range(32)}
    registers.update(srr0='srr0', srr1='srr1', cr='cr', xer='xer',
                     lr='lr', ctr='ctr')
    return registers


class ContextPPC(ContextBase):
    """Register state of a 32-bit PowerPC thread.

    ``srr0`` holds the instruction pointer, and r1 the stack pointer.
    """
    _architecture = 'CONTEXT_PPC'
    _selector = 0x20000000
    _dtype = np.dtype([('context_flags', '<u4'),
                       ('srr0', '<u4'),
                       ('srr1', '<u4'),
                       ('gpr', '<u4', (32,)),
                       ('cr', '<u4'),
                       ('xer', '<u4'),
                       ('lr', '<u4'),
                       ('ctr', '<u4'),
                       ('mq', '<u4'),
                       ('vrsave', '<u4'),
                       ('float_save', FloatingSaveAreaPPC._dtype),
                       ('vector_save', VectorSaveAreaPPC._dtype)])
    _subrecords = {'float_save': FloatingSaveAreaPPC,
                   'vector_save': VectorSaveAreaPPC}
    _registers = _gpr_registers()
    _instruction_pointer = 'srr0'
    _stack_pointer = 'r1'


class ContextPPC64(ContextBase):
    """Register state of a 64-bit PowerPC thread."""
    _architecture = 'CONTEXT_PPC64'
    _selector = 0x01000000
    _dtype = np.dtype([('context_flags', '<u8'),
                       ('srr0', '<u8'),
                       ('srr1', '<u8'),
                       ('gpr', '<u8', (32,)),
                       ('cr', '<u8'),
                       ('xer', '<u8'),
                       ('lr', '<u8'),
                       ('ctr', '<u8'),
                       ('vrsave', '<u8'),
                       ('float_save', FloatingSaveAreaPPC._dtype),
                       ('vector_save', VectorSaveAreaPPC._dtype)])
    _subrecords = {'float_save': FloatingSaveAreaPPC,
                   'vector_save': VectorSaveAreaPPC}
    _registers = _gpr_registers()
    _instruction_pointer = 'srr0'
    _stack_pointer = 'r1'
