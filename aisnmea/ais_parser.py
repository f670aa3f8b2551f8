"""Parser for AIS NMEA lines, with or without a leading tagblock.

The armored payload is not decoded here; hand ``payload`` and ``fillbits``
to an AIS payload decoder for that.

See Also:
    http://catb.org/gpsd/AIVDM.html
    http://www.nmea.org/Assets/nmea%20collision%20avoidance%20through%20ais.pdf

Example:
import aisnmea
v = aisnmea.parse("!AIVDM,1,1,,B,177KQJ5000G?tO`K>RA1wUbN0TKH,0*5C")

v = aisnmea.parse("\\g:1-2-73874,n:157036,s:r003669945,c:1241544035*4A"
                  "\\!AIVDM,1,1,,B,15N4cJ`005Jrek0H@9n`DW5608EP,0*13")
v.tagblock_value("s")  # 'r003669945'
"""
import logging

from .exceptions import AisNmeaError, MalformedColumnsError, ChecksumMismatchError
from .nmea_utils import (checksum, delimstring_split, ais_msgtype, parse_decimal, parse_hex,
                         INT_MAX)
from . import tagblock as tb


logger = logging.getLogger(__name__)


def parse_sentence_body(inner_nmea):
    """Parse a sentence without tagblock, e.g. "!AIVDM,1,1,,B,177KQJ...,0*5C".

    Args:
        inner_nmea (str): The sentence including its '*HH' checksum.

    Returns:
        dict: Values for each name in :attr:`AisNmea.fields`.

    Raises:
        MalformedColumnsError: If there is not exactly one '*', not exactly 7 columns, or the
            channel column is not a single ASCII character.
        InvalidFieldError: If a numeric column is not a non-negative integer in range.
        InvalidHexError: If the checksum is not hex.
        ChecksumMismatchError: If the checksum does not match the sentence body.
    """
    body_and_checksum = delimstring_split(inner_nmea, '*')
    if len(body_and_checksum) != 2:
        raise MalformedColumnsError("sentence needs exactly one '*', found " +
                                    repr(max(len(body_and_checksum) - 1, 0)), inner_nmea)
    body, checksum_str = body_and_checksum

    cols = delimstring_split(body, ',')
    if len(cols) != 7:
        raise MalformedColumnsError("sentence needs 7 columns, found " + repr(len(cols)),
                                    inner_nmea)
    head, fragcount, fragnum, messageid, channel, payload, fillbits = cols

    if len(channel) > 1 or not channel.isascii():
        raise MalformedColumnsError("channel must be a single ASCII character, got " +
                                    repr(channel), inner_nmea)

    res = {
        "head": head,
        "fragcount": parse_decimal(fragcount, "fragment count"),
        "fragnum": parse_decimal(fragnum, "fragment number"),
        "messageid": parse_decimal(messageid, "message id", INT_MAX) if messageid else None,
        "channel": channel or None,
        "payload": payload,
        "fillbits": parse_decimal(fillbits, "fill bits"),
        "checksum": parse_hex(checksum_str),
    }

    actual_checksum = checksum(body)
    if actual_checksum != res["checksum"]:
        raise ChecksumMismatchError(
            "checksum does not match: %02X != %02X" % (res["checksum"], actual_checksum),
            inner_nmea)

    return res
# end parse_sentence_body


class AisNmea(object):
    """
    One AIS NMEA line: the optional tagblock plus the sentence columns.

    Example: http://catb.org/gpsd/AIVDM.html
        \\g:1-2-73874,n:157036,s:r003669945,c:1241544035*4A\\!AIVDM,1,1,,B,15N4cJ`005Jrek0H@9n`DW5608EP,0*13

        The optional tagblock sits between the two backslashes. It is a list of key:value pairs
        followed by its own checksum, see :mod:`aisnmea.tagblock`.

        Column 1, !AIVDM, identifies this as an AIVDM packet (``head``).

        Column 2 is the count of fragments in the currently accumulating message
        (``fragcount``). The payload size of each sentence is limited by NMEA 0183's
        82-character maximum, so it is sometimes required to split a payload over several
        fragment sentences.

        Column 3 is the one-based fragment number of this sentence (``fragnum``).

        Column 4 is a sequential message ID for multi-sentence messages (``messageid``). Often
        empty, which is read as None.

        Column 5 is the radio channel code (``channel``), A or B, sometimes 1 or 2. Empty is
        read as None.

        Column 6 is the armored data payload (``payload``).

        Column 7 is the number of fill bits padding the payload to a 6 bit boundary
        (``fillbits``).

        The *-separated suffix is the checksum (``checksum``), computed on the sentence
        excluding the leading "!".

    Warning:
        After a failed :meth:`parse` the field values are undefined and must not be read.
    """

    fields = (
        ("Sentence Identifier", "head"),
        ("Count of Fragments", "fragcount"),
        ("Fragment Number", "fragnum"),
        ("Sequential Message ID", "messageid"),
        ("Radio Channel Code", "channel"),
        ("Payload", "payload"),
        ("Number of Fill Bits", "fillbits"),
        ("Checksum", "checksum"),
    )

    def __init__(self, nmea=None):
        """Create an empty AisNmea, or parse one from a line.

        Raises:
            AisNmeaError: If ``nmea`` is given and does not parse.
        """
        self._tagblock = None
        self.head = None
        self.fragcount = 0
        self.fragnum = 0
        self.messageid = None
        self.channel = None
        self.payload = None
        self.fillbits = 0
        self.checksum = 0

        if nmea is not None:
            self.parse(nmea)
    # end Constructor

    def __repr__(self):
        return "<%s %s %d/%d channel=%r payload=%r>" % (
            self.__class__.__name__, self.head, self.fragnum, self.fragcount, self.channel,
            self.payload)

    def __eq__(self, other):
        if not isinstance(other, AisNmea):
            return NotImplemented
        return self._tagblock == other._tagblock and all(
            getattr(self, name) == getattr(other, name) for _, name in self.fields)

    __hash__ = None

    def parse(self, nmea):
        """Parse a full AIS NMEA line into this object, replacing everything it held.

        Args:
            nmea (str): One line, without line terminator.

        Returns:
            AisNmea: self

        Raises:
            AisNmeaError: If the line does not parse. The fields are then undefined.
        """
        if not isinstance(nmea, str):
            raise TypeError("nmea must be a str, got " + type(nmea).__name__)

        self._tagblock = None
        try:
            outercols = delimstring_split(nmea, '\\')
            if len(outercols) == 3:
                self._set_from_nmea_with_tagblock(outercols)
            elif len(outercols) == 1:
                self._set_from_inner_nmea(nmea)
            else:
                raise MalformedColumnsError("line needs 0 or 2 backslashes, found " +
                                            repr(max(len(outercols) - 1, 0)), nmea)
        except AisNmeaError as err:
            logger.debug("Failed to parse %r: %s", nmea, err.message)
            raise
        return self
    # end parse

    def try_parse(self, nmea):
        """Like :meth:`parse` but return True on success and False on failure."""
        try:
            self.parse(nmea)
        except AisNmeaError:
            return False
        return True
    # end try_parse

    def _set_from_inner_nmea(self, inner_nmea):
        for name, value in parse_sentence_body(inner_nmea).items():
            setattr(self, name, value)

    def _set_from_nmea_with_tagblock(self, outercols):
        dummycol, tagblock_str, inner_nmea = outercols
        if dummycol:
            raise MalformedColumnsError("text before the tagblock " + repr(dummycol),
                                        "\\".join(outercols))

        tagblock = tb.parse_tagblock(tagblock_str)
        self._set_from_inner_nmea(inner_nmea)
        self._tagblock = tagblock

    def duplicate(self):
        """Return an independent copy, sharing no mutable state with this object."""
        res = self.__class__()
        for _, name in self.fields:
            setattr(res, name, getattr(self, name))
        if self._tagblock is not None:
            res._tagblock = dict(self._tagblock)
        return res
    # end duplicate

    __copy__ = duplicate

    def __deepcopy__(self, memo):
        return self.duplicate()

    @property
    def tagblock(self):
        """A copy of the tagblock dict, or None if the line had no tagblock."""
        if self._tagblock is None:
            return None
        return dict(self._tagblock)

    def tagblock_value(self, key):
        """Return the tagblock value for key, or None if absent."""
        if self._tagblock is None:
            return None
        return self._tagblock.get(key)

    def tagblock_timestamp(self):
        """Return the tagblock 'c' time as a UTC datetime, or None."""
        if self._tagblock is None:
            return None
        return tb.tagblock_timestamp(self._tagblock)

    def tagblock_group(self):
        """Return the tagblock 'g' value as a TagblockGroup, or None."""
        if self._tagblock is None:
            return None
        return tb.tagblock_group(self._tagblock)

    def ais_type(self):
        """Return the AIS message type from the first payload character, -1 if unknown.

        Raises:
            ValueError: If the payload is empty or nothing has been parsed.
        """
        if not self.payload:
            raise ValueError("no payload to read the AIS message type from")
        return ais_msgtype(self.payload[0])
    # end ais_type

    def is_complete(self):
        """Return if this fragment completes its message."""
        return self.fragnum == self.fragcount

    def is_multipart(self):
        return self.fragcount > 1

    def asdict(self):
        """Return all fields, the tagblock copy and the AIS type as a dict."""
        res = dict((name, getattr(self, name)) for _, name in self.fields)
        res["tagblock"] = self.tagblock
        res["ais_type"] = self.ais_type() if self.payload else None
        return res
    # end asdict
# end AisNmea


def parse(nmea):
    """Create an AisNmea from a line.

    Raises:
        AisNmeaError: If the line does not parse; no object is produced.
    """
    return AisNmea(nmea)


def try_parse(nmea):
    """Create an AisNmea from a line, or return None if it does not parse."""
    try:
        return AisNmea(nmea)
    except AisNmeaError:
        return None
