# Licensed under the GPLv3 - see LICENSE
"""Two-way mapping between raw integer codes and symbolic names.

The minidump format contains many integer fields drawn from open-ended sets
(stream types, exception codes, platform identifiers, ...), which different
producers extend in different and sometimes conflicting ways.  A
`SymbolTable` maps names to raw values for one such set; looking up a raw
value never fails, but returns a `Symbol` that preserves the raw value and
has a ``name`` of `None` if the value is not known.  Which table applies to
a given field is up to the caller (and may depend on the producer platform).
"""
import functools


__all__ = ['Symbol', 'SymbolTable', 'ReverseDict']


class Symbol(int):
    """Integer code with an (optional) symbolic name.

    Behaves exactly like the raw integer for comparison, hashing, and
    arithmetic, so the raw value is always preserved.

    Parameters
    ----------
    value : int
        Raw value.
    table : `SymbolTable`, optional
        Table used to look up the name.
    """

    def __new__(cls, value, table=None):
        self = super().__new__(cls, value)
        self.table = table
        return self

    def __reduce__(self):
        return (self.__class__, (int(self), self.table))

    @property
    def name(self):
        """Name of the code, or `None` if it is not in the table."""
        if self.table is None:
            return None
        return self.table.to_symbol(self)

    @property
    def known(self):
        return self.name is not None

    def __repr__(self):
        table = self.table.name if self.table is not None else 'Symbol'
        name = self.name
        if name is None:
            return f"<{table}: {int(self):#x}>"
        return f"<{table}.{name}: {int(self):#x}>"

    def __str__(self):
        name = self.name
        return name if name is not None else f"{int(self):#x}"


class ReverseDict:
    """Lazily evaluated dict derived from the items of a `SymbolTable`.

    Implemented as a non-data descriptor.  When first accessed on an instance,
    it will create a dict under the name of itself in the instance's
    ``__dict__``, which means that any further attribute access will return
    that dict instead of this descriptor.

    Parameters
    ----------
    function : callable
        Called with the table's ``(name, value)`` items; should return the
        dict to store.
    """

    def __init__(self, function):
        self.function = function

    def __set_name__(self, owner, name):
        self.name = name
        self.__doc__ = f"Lazily evaluated dict of {name}"

    def __get__(self, instance, cls=None):
        if instance is None:
            return self
        d = self.function(dict.items(instance))
        setattr(instance, self.name, d)
        return d

    def __repr__(self):
        return f"{self.__class__.__name__}({self.function})"


def _first_names(items):
    names = {}
    for name, value in items:
        names.setdefault(value, name)
    return names


def _all_names(items):
    aliases = {}
    for name, value in items:
        aliases.setdefault(value, []).append(name)
    return {value: tuple(names) for value, names in aliases.items()}


class SymbolTable(dict):
    """Table of symbolic names for the raw values of one kind of field.

    Initialised as a normal dict, with (ordered) name, value pairs.  Several
    names may share a value (aliases); the first one given is the canonical
    name returned by `to_symbol`.

    Parameters
    ----------
    name : str
        Name of the table, used in representations.
    items : iterable of (str, int), or dict
        Name, raw value pairs.
    flags : bool, optional
        Whether the values are bit flags that can be combined.  If `True`,
        `decompose` can be used to split a raw value in its named parts.

    Examples
    --------
    >>> table = SymbolTable('Color', (('RED', 1), ('GREEN', 2)))
    >>> table(2)
    <Color.GREEN: 0x2>
    >>> table(7).name is None
    True
    >>> table.from_symbol('RED')
    1
    """

    values_to_names = ReverseDict(_first_names)
    aliases = ReverseDict(_all_names)

    def __init__(self, name, items=(), *, flags=False):
        super().__init__(items)
        self.name = name
        self.is_flags = flags

    def copy(self):
        return self.__class__(self.name, self, flags=self.is_flags)

    def __or__(self, other):
        if not isinstance(other, SymbolTable):
            return NotImplemented

        result = self.copy()
        result.update(other)
        return result

    def _clear_caches(self):
        """Clear the caches of the reverse dicts. To be done on any change."""
        for key in set(self.__dict__):
            if isinstance(getattr(type(self), key, None), ReverseDict):
                del self.__dict__[key]

    def __call__(self, raw):
        """Wrap a raw value in a `Symbol` linked to this table."""
        return Symbol(raw, self)

    def to_symbol(self, raw):
        """Name for a raw value, or `None` if it is not known."""
        return self.values_to_names.get(int(raw))

    def from_symbol(self, name):
        """Raw value corresponding to a name (or a `Symbol`).

        Raises
        ------
        KeyError : if the name is not in the table.
        """
        if isinstance(name, Symbol):
            return int(name)
        try:
            return self[name]
        except KeyError:
            raise KeyError(f"{self.name} does not contain {name!r}") from None

    def names_of(self, raw):
        """All names given to a raw value (empty if none)."""
        return self.aliases.get(int(raw), ())

    def decompose(self, raw):
        """Split a flags value into named flags and any unknown remainder.

        Only names whose value is non-zero and fully contained in ``raw``
        are returned, in table order, skipping aliases.

        Returns
        -------
        names : tuple of str
        remainder : int
            Bits in ``raw`` not covered by any of the names.
        """
        raw = int(raw)
        names = []
        covered = 0
        for value, name in self.values_to_names.items():
            if value and (raw & value) == value:
                names.append(name)
                covered |= value
        return tuple(names), raw & ~covered

    def __repr__(self):
        return f"<{self.__class__.__name__} {self.name} ({len(self)} names)>"


# Overwrite all dict methods that change the contents to clear the
# cache of the reverse mappings.
def make_wrapped_method(method):
    @functools.wraps(getattr(dict, method))
    def wrapped(self, *args, **kwargs):
        result = getattr(super(SymbolTable, self), method)(*args, **kwargs)
        self._clear_caches()
        return result
    return wrapped


for method in ('__setitem__', '__delitem__', 'update', 'pop', 'popitem',
               'clear', 'setdefault'):
    setattr(SymbolTable, method, make_wrapped_method(method))
