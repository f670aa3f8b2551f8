"""Low level helpers shared by the tagblock and sentence parsers.

See Also:
    http://catb.org/gpsd/AIVDM.html
    https://gpsd.gitlab.io/gpsd/AIVDM.html#_aivdmaivdo_payload_armoring
"""
import re

from pynmea2 import NMEASentence

from .exceptions import InvalidFieldError, InvalidHexError


# Characters which may start a full NMEA sentence and are excluded from its checksum
SENTENCE_START = ('!', '$')

_DECIMAL_RE = re.compile(r'^[0-9]+\Z')
_HEX_RE = re.compile(r'^[0-9A-Fa-f]+\Z')

# Upper bounds for 64-bit and 32-bit signed columns
LONG_MAX = 2 ** 63 - 1
INT_MAX = 2 ** 31 - 1


def checksum(nmea_str):
    """Return the NMEA XOR checksum of a string.

    A leading '!' or '$' is skipped and the remaining UTF-8 bytes are XORed.
    An empty string has checksum 0.

    Args:
        nmea_str (str): Tagblock data or sentence body, without the '*HH' suffix.
    """
    if nmea_str[:1] in SENTENCE_START:
        nmea_str = nmea_str[1:]
    # XOR the UTF-8 bytes: latin-1 gives one codepoint per byte
    return NMEASentence.checksum(nmea_str.encode("utf-8", "surrogatepass").decode("latin-1"))
# end checksum


def delimstring_split(string, delim):
    """Split a string on a single delimiter character, keeping empty fields.

    Unlike ``str.split`` an empty string yields no fields at all, so "nothing"
    can be told apart from "one empty column".

    Example:
        >>> delimstring_split(",aaa,,b,", ",")
        ['', 'aaa', '', 'b', '']
        >>> delimstring_split("", ",")
        []
    """
    if len(delim) != 1:
        raise ValueError("delim must be a single character, got " + repr(delim))
    if not string:
        return []
    return string.split(delim)
# end delimstring_split


# First payload character to AIS message type (six-bit armoring, '1' is type 1)
AIS_TYPEMAP = dict((chr(ord('0') + aistype), aistype) for aistype in range(1, 29))


def ais_msgtype(char):
    """Map the first character of an armored payload to its AIS message type.

    Returns:
        int: 1 to 28, or -1 if the character is not a known type.
    """
    return AIS_TYPEMAP.get(char, -1)
# end ais_msgtype


def _bounded_int(value, base, maximum):
    """Return int(value, base), or None if it is above maximum."""
    digits = value.lstrip('0') or '0'
    # Length first so int() never sees an over-long digit string
    if len(digits) > len(_format_int(maximum, base)):
        return None
    res = int(digits, base)
    if res > maximum:
        return None
    return res


def _format_int(value, base):
    return "%d" % value if base == 10 else "%x" % value


def parse_decimal(value, name, maximum=LONG_MAX):
    """Parse a non-negative base-10 column.

    Args:
        value (str): The column text.
        name (str): Column name for the error message.
        maximum (int): Largest accepted value.

    Raises:
        InvalidFieldError: If the column is empty, holds anything but ASCII digits or is
            above maximum.
    """
    if not _DECIMAL_RE.match(value):
        raise InvalidFieldError("invalid " + name + " column " + repr(value), value)
    res = _bounded_int(value, 10, maximum)
    if res is None:
        raise InvalidFieldError(name + " column out of range " + repr(value), value)
    return res
# end parse_decimal


def parse_hex(value):
    """Parse a transmitted checksum.

    Raises:
        InvalidHexError: If the field is empty, holds anything but hex digits or is out
            of range.
    """
    if not _HEX_RE.match(value):
        raise InvalidHexError("invalid hex checksum " + repr(value), value)
    res = _bounded_int(value, 16, LONG_MAX)
    if res is None:
        raise InvalidHexError("hex checksum out of range " + repr(value), value)
    return res
# end parse_hex
