# Licensed under the GPLv3 - see LICENSE
"""Length-prefixed strings.

Two conventions are used, and which one applies is given by the field
referring to the string, not by the string itself:

- `MinidumpString`: UTF-16LE code units preceded by their length in bytes,
  as used for module names and other fields defined with the format;
- `MinidumpUTF8String`: UTF-8 bytes preceded by their length and followed
  by a NUL, as used by the Breakpad and Crashpad extensions.
"""
from .base.variable import LengthPrefixedBase


__all__ = ['MinidumpString', 'MinidumpUTF8String', 'read_string',
           'read_utf8_string']


class MinidumpString(LengthPrefixedBase):
    """UTF-16 string preceded by its length in bytes.

    Producers generally write a terminating NUL code unit after the string,
    but it is not included in the length and is not required.
    """
    _unit = 2

    def decode_payload(self, payload):
        return payload.decode('utf-16-le' if self.byteorder == '<'
                              else 'utf-16-be', errors='replace')

    @staticmethod
    def encode_value(value, byteorder):
        return value.encode('utf-16-le' if byteorder == '<' else 'utf-16-be')


class MinidumpUTF8String(LengthPrefixedBase):
    """UTF-8 string preceded by its length in bytes and followed by NUL."""
    _terminator = b'\x00'

    def decode_payload(self, payload):
        return payload.decode('utf-8', errors='replace')

    @staticmethod
    def encode_value(value, byteorder):
        return value.encode('utf-8')


def read_string(buffer, rva, byteorder='<'):
    """Decode the `MinidumpString` at ``rva`` and return its value."""
    return MinidumpString.frombuffer(buffer, rva, byteorder=byteorder).value


def read_utf8_string(buffer, rva, byteorder='<'):
    """Decode the `MinidumpUTF8String` at ``rva`` and return its value."""
    return MinidumpUTF8String.frombuffer(buffer, rva,
                                         byteorder=byteorder).value
