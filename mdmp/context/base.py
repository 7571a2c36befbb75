# Licensed under the GPLv3 - see LICENSE
"""
Base definitions for CPU contexts.

A CPU context is a register snapshot whose layout depends on the processor
architecture.  The caller supplies an architecture tag, usually obtained
from the system info stream with
`~mdmp.system_info.SystemInfo.context_architecture`, or by passing the
architecture bits of known context flags to `select`.  The tag determines
the class used to decode the context; no attempt is ever made to guess the
layout from the data.  In particular, the flags are not always the first
word of a context: AMD64 contexts start with six home addresses.  Once the
tag is known, `read_context_flags` reads the flags without decoding the
rest of the context.
"""
from operator import index

from ..base.codec import read
from ..base.errors import DecodeError, UnrecognizedArchitectureError
from ..base.record import RecordBase, location_view
from ..base.symbols import Symbol
from ..constants.cpu import (CONTEXT_ARCHITECTURES, CONTEXT_CPU_MASK,
                             WINDOWS_CONTEXT_ARCHITECTURES)
from ..constants.system import WINDOWS_PLATFORMS


__all__ = ['CONTEXT_CLASSES', 'ContextMeta', 'ContextBase', 'select',
           'context_class', 'read_context', 'read_context_flags']


CONTEXT_CLASSES = {}
"""Dict of context classes, indexed by the name of their architecture."""


class ContextMeta(type):
    """Registry of context classes, using the ``CONTEXT_CLASSES`` dict.

    Any subclass of `ContextBase` that defines ``_architecture`` is
    registered under that name.  Checks for conflicts before registering.
    """
    _registry = CONTEXT_CLASSES

    def __init__(cls, name, bases, dct):
        super().__init__(name, bases, dct)
        architecture = dct.get('_architecture')
        if architecture is None:
            return

        if architecture in ContextMeta._registry:
            raise ValueError("architecture {0} already registered in "
                             "CONTEXT_CLASSES".format(architecture))
        ContextMeta._registry[architecture] = cls


class ContextBase(RecordBase, metaclass=ContextMeta):
    """Base class for CPU contexts.

    Subclasses should define:

      _architecture : name of the architecture in the table of context
          architectures, e.g., 'CONTEXT_X86'.

      _selector : value of the architecture bits of ``context_flags``.

      _registers : dict of general register name to field name, or to
          a (field name, index) tuple for registers stored in arrays.

      _instruction_pointer, _stack_pointer : names of those registers.

    Parameters
    ----------
    words : `~numpy.ndarray` or None
        Zero-dimensional array with the context's dtype.
    verify : bool, optional
        Whether to check that the architecture bits of ``context_flags``
        match those of the class.  Default: `True`.
    """
    _architecture = None
    _selector = None
    _registers = {}
    _instruction_pointer = None
    _stack_pointer = None

    def verify(self):
        super().verify()
        cpu = self['context_flags'] & CONTEXT_CPU_MASK
        if cpu != self._selector:
            raise DecodeError("context flags {:#x} do not indicate {}"
                              .format(self['context_flags'],
                                      self._architecture))

    @classmethod
    def fromvalues(cls, byteorder='<', verify=True, **kwargs):
        """Initialise a context from values.

        The architecture bits of the context flags are always set.
        """
        kwargs['context_flags'] = (kwargs.get('context_flags', 0)
                                   | cls._selector)
        return super().fromvalues(byteorder=byteorder, verify=verify,
                                  **kwargs)

    def _register(self, name):
        field = self._registers[name]
        if isinstance(field, tuple):
            field, i = field
            return int(self[field][i])
        return self[field]

    @property
    def registers(self):
        """General registers, as a dict of name to value."""
        return {name: self._register(name) for name in self._registers}

    @property
    def instruction_pointer(self):
        return self._register(self._instruction_pointer)

    @property
    def stack_pointer(self):
        return self._register(self._stack_pointer)

    def __repr__(self):
        name = self.__class__.__name__
        return "<{} ip={:#x} sp={:#x}>".format(
            name, self.instruction_pointer, self.stack_pointer)


def select(flags, platform_id=None):
    """Select the CPU architecture indicated by context flags.

    Only the architecture bits of the flags are considered.

    Parameters
    ----------
    flags : int
        Context flags, e.g., as read by `read_context_flags`.
    platform_id : int, optional
        Platform the dump was written on, as in ``SystemInfo['platform_id']``.
        Needed to distinguish IA64 (Windows) from MIPS64 (others).
        Default: treat as non-Windows.

    Returns
    -------
    tag : `~mdmp.base.symbols.Symbol`
        Architecture, from the appropriate table of context architectures.

    Raises
    ------
    UnrecognizedArchitectureError
        If the flags do not indicate an architecture for which a context
        layout is known.
    """
    cpu = index(flags) & CONTEXT_CPU_MASK
    if platform_id is not None and index(platform_id) in WINDOWS_PLATFORMS:
        table = WINDOWS_CONTEXT_ARCHITECTURES
    else:
        table = CONTEXT_ARCHITECTURES
    tag = table(cpu)
    if tag.name not in CONTEXT_CLASSES:
        raise UnrecognizedArchitectureError(
            "context flags {:#x} indicate {}, for which no context layout "
            "is known".format(index(flags), tag.name or 'no architecture'))
    return tag


def context_class(tag):
    """Class used to decode contexts for an architecture tag.

    Parameters
    ----------
    tag : `~mdmp.base.symbols.Symbol`, str, or int
        Architecture tag from `select`, the name of the architecture, or
        its selector.  Plain integers are looked up in the table of
        non-Windows selectors, so ``0x00080000`` is MIPS64.

    Raises
    ------
    UnrecognizedArchitectureError
        If no context layout is known for the tag.
    TypeError
        If the tag is not a symbol, string, or integer.
    """
    if isinstance(tag, Symbol):
        name = tag.name
    elif isinstance(tag, str):
        name = tag
    else:
        try:
            name = CONTEXT_ARCHITECTURES(index(tag)).name
        except TypeError:
            raise TypeError("tag should be a Symbol from select(), an "
                            "architecture name, or a selector, not {!r}"
                            .format(tag)) from None
    try:
        return CONTEXT_CLASSES[name]
    except KeyError:
        raise UnrecognizedArchitectureError(
            f"no context layout known for {tag!r}") from None


def read_context(buffer, location, tag, byteorder='<', verify=True):
    """Decode the context at a location as that of the given architecture.

    Parameters
    ----------
    buffer : buffer-protocol object
        Contents of the whole file.
    location : `~mdmp.header.LocationDescriptor` or tuple
        Location of the context, e.g., a thread's ``thread_context``.
        Any data beyond the layout (e.g., extended state) is ignored.
    tag : `~mdmp.base.symbols.Symbol`, str, or int
        Architecture tag, as for `context_class`.
    byteorder : str, optional
        Byte order of the data, '<' (default) or '>'.
    verify : bool, optional
        Whether to check that the context's own flags indicate the same
        architecture.  Default: `True`.

    Raises
    ------
    UnrecognizedArchitectureError
        If no context layout is known for the tag.
    OutOfBoundsError
        If the location is too small for the layout or beyond the buffer.
    DecodeError
        If verification is requested and the flags do not match.
    """
    cls = context_class(tag)
    return cls.fromlocation(buffer, location, byteorder=byteorder,
                            verify=verify)


def read_context_flags(buffer, location, tag, byteorder='<'):
    """Read the flags of a context without decoding the rest.

    The position and size of the flags depend on the layout, e.g., they
    follow six home addresses in AMD64 contexts, and are 64 bits wide in
    the older ARM64 layout.

    Parameters
    ----------
    buffer : buffer-protocol object
        Contents of the whole file.
    location : `~mdmp.header.LocationDescriptor` or tuple
        Location of the context.
    tag : `~mdmp.base.symbols.Symbol`, str, or int
        Architecture tag, as for `context_class`.
    byteorder : str, optional
        Byte order of the data, '<' (default) or '>'.

    Returns
    -------
    flags : int

    Raises
    ------
    OutOfBoundsError
        If the flags lie beyond the location or the buffer.
    """
    dtype, offset = context_class(tag)._dtype.fields['context_flags'][:2]
    region, _ = location_view(buffer, location)
    flags, _ = read(region, offset, dtype, byteorder)
    return flags
