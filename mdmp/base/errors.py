# Licensed under the GPLv3 - see LICENSE
"""Exceptions and warnings raised while decoding minidump records.

All failures are local to the record being decoded: an error raised by a
lazily decoded part of a record (a string, a debug record, a CPU-info union)
never invalidates the fixed part that was already decoded.
"""

__all__ = ['DecodeError', 'OutOfBoundsError', 'MissingTerminatorError',
           'UnrecognizedArchitectureError', 'TruncatedRecordWarning']


class DecodeError(ValueError):
    """Error in decoding a record from a buffer.

    Parameters
    ----------
    message : str
        Description of the problem.
    offset : int, optional
        Absolute offset in the buffer at which decoding failed.
    """

    def __init__(self, message, offset=None):
        super().__init__(message)
        self.offset = offset


class OutOfBoundsError(DecodeError, EOFError):
    """A read would extend beyond the end of the buffer."""
    pass


class MissingTerminatorError(DecodeError):
    """A length-prefixed string lacks its required terminator."""
    pass


class UnrecognizedArchitectureError(DecodeError, LookupError):
    """A CPU context selector does not correspond to a known layout."""
    pass


class TruncatedRecordWarning(UserWarning):
    """A versioned record claims more data than is present.

    The record is decoded as the highest version that fits.
    """
    pass
