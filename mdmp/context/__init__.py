# Licensed under the GPLv3 - see LICENSE
"""CPU contexts: per-architecture register snapshots.

Contexts are decoded in two steps.  First, `select` determines the
architecture from the context flags, raising
`~mdmp.base.errors.UnrecognizedArchitectureError` if no layout is known.
Then, `read_context` decodes the context with the layout for that
architecture::

    >>> from mdmp import context
    >>> tag = context.select(0x0001003f)
    >>> tag
    <ContextArchitecture.CONTEXT_X86: 0x10000>
    >>> context.context_class(tag).nbytes
    716

In a dump, the tag is most easily obtained from the system info stream,
as `~mdmp.system_info.SystemInfo.context_architecture`.  Note that the
context flags are not necessarily the first word of a context (AMD64
contexts start with home addresses); `read_context_flags` reads them from
the right place for a given architecture.
"""
from .base import (CONTEXT_CLASSES, ContextBase, select, context_class,
                   read_context, read_context_flags)
from .x86 import ContextX86, ContextAMD64
from .arm import ContextARM, ContextARM64, ContextARM64Old
from .ppc import ContextPPC, ContextPPC64
from .sparc import ContextSPARC
from .mips import ContextMIPS, ContextMIPS64
from ..constants.cpu import CONTEXT_CPU_MASK
