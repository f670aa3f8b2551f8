"""
Tests for the checksum, splitting and message type helpers.
"""

import pytest
from aisnmea import checksum, delimstring_split, ais_msgtype
from aisnmea import InvalidFieldError, InvalidHexError
from aisnmea.nmea_utils import parse_decimal, parse_hex, LONG_MAX, INT_MAX


class TestDelimstringSplit:
    """Test splitting on a single delimiter."""

    def test_keeps_empty_fields(self):
        assert delimstring_split(",aaa,,b,", ",") == ["", "aaa", "", "b", ""]

    def test_empty_string_has_no_fields(self):
        assert delimstring_split("", ",") == []
        assert delimstring_split("", "\\") == []

    def test_single_delimiter(self):
        assert delimstring_split("*", "*") == ["", ""]

    def test_no_delimiter(self):
        assert delimstring_split("abc", ",") == ["abc"]

    def test_delim_must_be_one_char(self):
        with pytest.raises(ValueError):
            delimstring_split("a,,b", ",,")


class TestChecksum:
    """Test NMEA XOR checksums."""

    def test_empty(self):
        assert checksum("") == 0

    def test_tagblock_data(self):
        assert checksum("g:1-2-73874,n:157036,s:r003669945,c:1241544035") == 0x4A

    def test_sentence_body_skips_bang(self):
        assert checksum("!AIVDM,1,1,,B,15N4cJ`005Jrek0H@9n`DW5608EP,0") == 0x13
        assert checksum("AIVDM,1,1,,B,15N4cJ`005Jrek0H@9n`DW5608EP,0") == 0x13

    def test_skips_dollar(self):
        assert checksum("$AIVDM,1,1,,B,15N4cJ`005Jrek0H@9n`DW5608EP,0") == 0x13

    def test_only_first_char_is_skipped(self):
        assert checksum("!!") == ord("!")
        assert checksum("!") == 0

    def test_xors_utf8_bytes(self):
        # "\xe9" is C3 A9 in UTF-8
        assert checksum("\xe9") == 0xC3 ^ 0xA9
        assert checksum("!\xe9") == 0x6A
        assert checksum("a\xe9") <= 0xFF


class TestAisMsgtype:
    """Test first payload character to message type mapping."""

    @pytest.mark.parametrize("char,aistype", [
        ("1", 1),
        ("3", 3),
        ("5", 5),
        (":", 10),
        ("@", 16),
        ("A", 17),
        ("I", 25),
        ("L", 28),
    ])
    def test_known(self, char, aistype):
        assert ais_msgtype(char) == aistype

    @pytest.mark.parametrize("char", ["}", "0", "M", "w", ""])
    def test_unknown(self, char):
        assert ais_msgtype(char) == -1


class TestFieldReaders:
    """Test strict decimal and hex parsing."""

    def test_decimal(self):
        assert parse_decimal("0", "x") == 0
        assert parse_decimal("42", "x") == 42

    @pytest.mark.parametrize("value", ["", "-1", "+1", " 1", "1 ", "1\n", "0x1", "1_0", "a"])
    def test_bad_decimal(self, value):
        with pytest.raises(InvalidFieldError):
            parse_decimal(value, "x")

    def test_hex(self):
        assert parse_hex("4A") == 0x4A
        assert parse_hex("4a") == 0x4A
        assert parse_hex("3E") == 0x3E

    @pytest.mark.parametrize("value", ["", "0x4A", "G1", " 4A", "4A\n"])
    def test_bad_hex(self, value):
        with pytest.raises(InvalidHexError):
            parse_hex(value)

    def test_decimal_range(self):
        assert parse_decimal(str(LONG_MAX), "x") == LONG_MAX
        assert parse_decimal(str(INT_MAX), "x", INT_MAX) == INT_MAX
        assert parse_decimal("0" * 5000 + "1", "x") == 1

    @pytest.mark.parametrize("value,maximum", [
        (str(LONG_MAX + 1), LONG_MAX),
        ("99999999999999999999", LONG_MAX),
        ("1" * 5000, LONG_MAX),
        (str(INT_MAX + 1), INT_MAX),
    ])
    def test_decimal_out_of_range(self, value, maximum):
        with pytest.raises(InvalidFieldError):
            parse_decimal(value, "x", maximum)

    def test_hex_range(self):
        assert parse_hex("0" * 5000 + "13") == 0x13
        assert parse_hex("7" + "F" * 15) == LONG_MAX
        with pytest.raises(InvalidHexError):
            parse_hex("8" + "0" * 15)
        with pytest.raises(InvalidHexError):
            parse_hex("F" * 5000)
