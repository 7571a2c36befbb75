# Licensed under the GPLv3 - see LICENSE
"""Minidump crash-dump records.

Decodes the records of the minidump container format, as written by
Windows, Breakpad, Crashpad, and Mozilla, from an in-memory buffer holding
the whole file.  Locating records is up to the caller: typically, one
decodes the `~mdmp.header.Header` at offset 0, the directory it points to
with `~mdmp.header.read_directory`, and then the records of interest using
the location of the stream that holds them.
"""
from importlib.metadata import PackageNotFoundError, version as _version

from .base.errors import (DecodeError, OutOfBoundsError,  # noqa
                          MissingTerminatorError,
                          UnrecognizedArchitectureError,
                          TruncatedRecordWarning)
from .header import Header, Directory, read_directory, detect_byteorder  # noqa

try:
    __version__ = _version('mdmp')
except PackageNotFoundError:
    __version__ = ''

# Define minima for the documentation, but do not bother to explicitly check.
__minimum_python_version__ = '3.10'
__minimum_astropy_version__ = '5.1'
__minimum_numpy_version__ = '1.24'
