# Licensed under the GPLv3 - see LICENSE
"""Contexts of 32-bit (x86) and 64-bit (AMD64) Intel processors."""
import numpy as np

from ..base.record import RecordBase
from ..constants.cpu import CONTEXT_FLAGS_X86
from .base import ContextBase


__all__ = ['FloatingSaveAreaX86', 'ContextX86', 'ContextAMD64']


class FloatingSaveAreaX86(RecordBase):
    """x87 floating point state, as saved by FNSAVE."""

    _dtype = np.dtype([('control_word', '<u4'),
                       ('status_word', '<u4'),
                       ('tag_word', '<u4'),
                       ('error_offset', '<u4'),
                       ('error_selector', '<u4'),
                       ('data_offset', '<u4'),
                       ('data_selector', '<u4'),
                       ('register_area', 'u1', (80,)),
                       ('cr0_npx_state', '<u4')])


class ContextX86(ContextBase):
    """Register state of a 32-bit x86 thread.

    The ``extended_registers`` field holds the FXSAVE area, kept as raw
    bytes.
    """
    _architecture = 'CONTEXT_X86'
    _selector = 0x00010000
    _dtype = np.dtype([('context_flags', '<u4'),
                       ('dr0', '<u4'),
                       ('dr1', '<u4'),
                       ('dr2', '<u4'),
                       ('dr3', '<u4'),
                       ('dr6', '<u4'),
                       ('dr7', '<u4'),
                       ('float_save', FloatingSaveAreaX86._dtype),
                       ('gs', '<u4'),
                       ('fs', '<u4'),
                       ('es', '<u4'),
                       ('ds', '<u4'),
                       ('edi', '<u4'),
                       ('esi', '<u4'),
                       ('ebx', '<u4'),
                       ('edx', '<u4'),
                       ('ecx', '<u4'),
                       ('eax', '<u4'),
                       ('ebp', '<u4'),
                       ('eip', '<u4'),
                       ('cs', '<u4'),
                       ('eflags', '<u4'),
                       ('esp', '<u4'),
                       ('ss', '<u4'),
                       ('extended_registers', 'V512')])
    _subrecords = {'float_save': FloatingSaveAreaX86}
    _registers = {name: name for name in (
        'eip', 'esp', 'ebp', 'ebx', 'esi', 'edi', 'eax', 'ecx', 'edx',
        'eflags')}
    _instruction_pointer = 'eip'
    _stack_pointer = 'esp'

    @property
    def valid_groups(self):
        """Names of the register groups marked as valid in the flags."""
        return CONTEXT_FLAGS_X86.decompose(self['context_flags'] & 0xff)[0]


class ContextAMD64(ContextBase):
    """Register state of a 64-bit x86 thread.

    The ``float_save`` field holds the FXSAVE area (XMM_SAVE_AREA32), kept
    as raw bytes; the vector registers are given as pairs of 64-bit words,
    low word first.
    """
    _architecture = 'CONTEXT_AMD64'
    _selector = 0x00100000
    _dtype = np.dtype([('p1_home', '<u8'),
                       ('p2_home', '<u8'),
                       ('p3_home', '<u8'),
                       ('p4_home', '<u8'),
                       ('p5_home', '<u8'),
                       ('p6_home', '<u8'),
                       ('context_flags', '<u4'),
                       ('mx_csr', '<u4'),
                       ('cs', '<u2'),
                       ('ds', '<u2'),
                       ('es', '<u2'),
                       ('fs', '<u2'),
                       ('gs', '<u2'),
                       ('ss', '<u2'),
                       ('eflags', '<u4'),
                       ('dr0', '<u8'),
                       ('dr1', '<u8'),
                       ('dr2', '<u8'),
                       ('dr3', '<u8'),
                       ('dr6', '<u8'),
                       ('dr7', '<u8'),
                       ('rax', '<u8'),
                       ('rcx', '<u8'),
                       ('rdx', '<u8'),
                       ('rbx', '<u8'),
                       ('rsp', '<u8'),
                       ('rbp', '<u8'),
                       ('rsi', '<u8'),
                       ('rdi', '<u8'),
                       ('r8', '<u8'),
                       ('r9', '<u8'),
                       ('r10', '<u8'),
                       ('r11', '<u8'),
                       ('r12', '<u8'),
                       ('r13', '<u8'),
                       ('r14', '<u8'),
                       ('r15', '<u8'),
                       ('rip', '<u8'),
                       ('float_save', 'V512'),
                       ('vector_register', '<u8', (26, 2)),
                       ('vector_control', '<u8'),
                       ('debug_control', '<u8'),
                       ('last_branch_to_rip', '<u8'),
                       ('last_branch_from_rip', '<u8'),
                       ('last_exception_to_rip', '<u8'),
                       ('last_exception_from_rip', '<u8')])
    _registers = {name: name for name in (
        'rax', 'rdx', 'rcx', 'rbx', 'rsi', 'rdi', 'rbp', 'rsp',
        'r8', 'r9', 'r10', 'r11', 'r12', 'r13', 'r14', 'r15', 'rip',
        'eflags')}
    _instruction_pointer = 'rip'
    _stack_pointer = 'rsp'

    valid_groups = ContextX86.valid_groups
