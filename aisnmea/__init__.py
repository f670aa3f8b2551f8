"""Library for parsing AIS NMEA lines and their tagblocks.

For more information see http://catb.org/gpsd/AIVDM.html.

See Also:
    http://catb.org/gpsd/AIVDM.html
    https://gpsd.gitlab.io/gpsd/AIVDM.html#_nmea_tag_blocks
    http://www.nmea.org/Assets/nmea%20collision%20avoidance%20through%20ais.pdf

Built on pynmea2; every parse error is a pynmea2.ParseError.
"""
from .exceptions import *
from .nmea_utils import checksum, delimstring_split, ais_msgtype
from .tagblock import parse_tagblock, format_tagblock, TagblockGroup
from .ais_parser import AisNmea, parse_sentence_body, parse, try_parse

__version__ = "0.1.0"
