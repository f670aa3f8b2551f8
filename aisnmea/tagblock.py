"""Parsing of NMEA 4.10 TAG blocks.

A tagblock is vendor metadata in front of a sentence, framed by backslashes
and carrying its own checksum, e.g.::

    \\g:1-2-73874,n:157036,s:r003669945,c:1241544035*4A\\!AIVDM,...

Common keys are c (UNIX time), s (source station), g (sentence group),
n (line count) and t (free text).

See Also:
    https://gpsd.gitlab.io/gpsd/AIVDM.html#_nmea_tag_blocks
"""
import collections
from datetime import datetime, timezone

from .exceptions import InvalidTagblockError, MalformedColumnsError, ChecksumMismatchError
from .nmea_utils import checksum, delimstring_split, parse_hex


# Timestamps above this are milliseconds rather than seconds since the epoch
MILLISECONDS_THRESHOLD = 10 ** 10

TagblockGroup = collections.namedtuple("TagblockGroup", ("part", "total", "group_id"))


def parse_tagblock(tagblock):
    """Parse a tagblock such as "a:bb,ccc:d*3D" into a dict.

    Args:
        tagblock (str): The text between the framing backslashes, including '*HH'.

    Returns:
        dict: Key to value, in transmitted order.

    Raises:
        MalformedColumnsError: If there is not exactly one '*'.
        InvalidHexError: If the checksum is not hex.
        ChecksumMismatchError: If the checksum does not match the data.
        InvalidTagblockError: If a pair is not "key:value" or a key repeats.
    """
    outercols = delimstring_split(tagblock, '*')
    if len(outercols) != 2:
        raise MalformedColumnsError("tagblock needs exactly one '*', found " +
                                    repr(max(len(outercols) - 1, 0)), tagblock)
    data, given_checksum_str = outercols

    given_checksum = parse_hex(given_checksum_str)
    actual_checksum = checksum(data)
    if actual_checksum != given_checksum:
        raise ChecksumMismatchError(
            "tagblock checksum does not match: %02X != %02X" % (given_checksum, actual_checksum),
            tagblock)

    res = {}
    for pair in delimstring_split(data, ','):
        parts = delimstring_split(pair, ':')
        if len(parts) != 2 or not parts[0] or not parts[1]:
            raise InvalidTagblockError("bad tagblock pair " + repr(pair), tagblock)

        key, val = parts
        if key in res:
            raise InvalidTagblockError("duplicate tagblock key " + repr(key), tagblock)
        res[key] = val

    return res
# end parse_tagblock


def format_tagblock(tagblock):
    """Render a mapping as a framed tagblock, e.g. {"c": "1"} as "\\c:1*HH\\".

    The inverse of :func:`parse_tagblock` plus the framing backslashes.
    """
    data = ",".join(str(key) + ":" + str(val) for key, val in tagblock.items())
    return "\\%s*%02X\\" % (data, checksum(data))
# end format_tagblock


def tagblock_timestamp(tagblock):
    """Return the 'c' value as a UTC datetime, or None if there is no 'c' key.

    Raises:
        InvalidTagblockError: If the value is not an integer.
    """
    value = tagblock.get('c')
    if value is None:
        return None

    try:
        stamp = int(value)
    except ValueError:
        raise InvalidTagblockError("invalid tagblock timestamp " + repr(value), value)

    if stamp > MILLISECONDS_THRESHOLD:
        stamp = stamp / 1000.0
    return datetime.fromtimestamp(stamp, tz=timezone.utc)
# end tagblock_timestamp


def tagblock_group(tagblock):
    """Return the 'g' value "<part>-<total>-<groupid>" as a TagblockGroup, or None.

    Raises:
        InvalidTagblockError: If the value is not three dash separated integers.
    """
    value = tagblock.get('g')
    if value is None:
        return None

    parts = value.split('-')
    if len(parts) != 3 or not all(part.isdecimal() for part in parts):
        raise InvalidTagblockError("invalid tagblock group " + repr(value), value)
    return TagblockGroup(*[int(part) for part in parts])
# end tagblock_group
