# Licensed under the GPLv3 - see LICENSE
"""Base implementations shared between all minidump records.

Records are decoded from an in-memory buffer holding the whole container
file, at absolute offsets.  The `~mdmp.base.codec` module provides primitive
reads of fixed-width values with an explicit byte order, on which the
`~mdmp.base.record` module builds records with a fixed layout, the
`~mdmp.base.versioned` module families of records whose layout depends on a
size or version field, and the `~mdmp.base.variable` module records with a
variable-length trailing part.

The `~mdmp.base.symbols` module maps raw integer codes to names without ever
failing on unknown values, and `~mdmp.base.errors` defines the exceptions
and warnings raised during decoding.  Finally, `~mdmp.base.utils` contains
some general utility routines, such as for time conversion.
"""
