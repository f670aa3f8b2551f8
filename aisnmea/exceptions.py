"""Exceptions raised while parsing AIS NMEA lines.

All of them derive from :class:`pynmea2.ParseError`, so code that already
guards ``pynmea2.parse`` calls catches these too. Like pynmea2 errors they
are constructed with ``(message, data)``.
"""
from pynmea2.nmea import ParseError, ChecksumError

__all__ = [
    "AisNmeaError",
    "MalformedColumnsError",
    "InvalidFieldError",
    "InvalidHexError",
    "InvalidTagblockError",
    "ChecksumMismatchError",
]


class AisNmeaError(ParseError):
    '''
        Base for every failure to parse an AIS NMEA line or tagblock
    '''

    @property
    def message(self):
        return self.args[0][0]

    @property
    def data(self):
        return self.args[0][1]


class MalformedColumnsError(AisNmeaError):
    '''
        Wrong number of '\\', '*' or ',' delimited fields, or a bad channel column
    '''


class InvalidFieldError(AisNmeaError):
    '''
        A decimal column which is not a non-negative integer
    '''


class InvalidHexError(AisNmeaError):
    '''
        A checksum field which is not hex digits
    '''


class InvalidTagblockError(AisNmeaError):
    '''
        A tagblock pair which is not "key:value", or a repeated key
    '''


class ChecksumMismatchError(AisNmeaError, ChecksumError):
    '''
        Inherits from pynmea2.ChecksumError for a transmitted checksum not matching the data
    '''
