################################################################################
# pydlydecoder/dly/fields.py
#
# Field classes for .dly records, with the numeric parsers they use
#
# 2026-10-17:
#   * First version
################################################################################
# CONFIGURATION
################################################################################
import re
from pydlydecoder import Field, MalformedNumber
from pydlydecoder import code_tables as ct

# Sentinel for "no value recorded"
MISSING_VALUE = -9999

_INTEGER = re.compile("[+-]?[0-9]+")
################################################################################
# FUNCTIONS
################################################################################
def parse_integer(raw, desc, width=None):
    """
    Parses a signed base-10 integer. No whitespace is allowed

    :param string raw: Raw value
    :param string desc: Description used in the error message
    :param int width: If set, raw must be exactly this many characters
    :returns: Parsed value
    :rtype: int
    :raises: pydlydecoder.MalformedNumber if raw is not a valid integer
    """
    if not isinstance(raw, str) or _INTEGER.fullmatch(raw) is None:
        raise MalformedNumber(raw, desc)
    if width is not None and len(raw) != width:
        raise MalformedNumber(raw, desc)
    return int(raw)
def parse_year(raw):
    return parse_integer(raw, "year", width=Year._CODE_LEN)
def parse_month(raw):
    return parse_integer(raw, "month", width=Month._CODE_LEN)
def parse_value(raw):
    """
    Parses a day value. Values are right-justified so surrounding whitespace is
    removed first. Returns None if the value is missing (-9999)
    """
    if not isinstance(raw, str):
        raise MalformedNumber(raw, "value")
    val = parse_integer(raw.strip(), "value")
    if val == MISSING_VALUE:
        return None
    return val
################################################################################
# HEADER FIELDS
################################################################################
class StationId(Field):
    """
    Station identification code, returned verbatim
    """
    _OFFSET   = 0
    _CODE_LEN = 11
class Year(Field):
    _OFFSET   = 11
    _CODE_LEN = 4
    def _decode(self, raw):
        return parse_year(raw)
class Month(Field):
    _OFFSET   = 15
    _CODE_LEN = 2
    def _decode(self, raw):
        return parse_month(raw)
class ElementType(Field):
    _OFFSET   = 17
    _CODE_LEN = 4
    def _decode(self, raw):
        return ct.classify_element(raw)
################################################################################
# DAY FIELDS
################################################################################
class DayValue(Field):
    """
    Value for one day, or None if missing
    """
    _OFFSET   = 21
    _CODE_LEN = 5
    _PER_DAY  = True
    def _decode(self, raw):
        return parse_value(raw)
class DayMeasurement(Field):
    _OFFSET   = 26
    _CODE_LEN = 1
    _PER_DAY  = True
    def _decode(self, raw):
        return ct.classify_measurement(raw)
class DayQuality(Field):
    _OFFSET   = 27
    _CODE_LEN = 1
    _PER_DAY  = True
    def _decode(self, raw):
        return ct.classify_quality(raw)
class DaySource(Field):
    """
    Source flag for one day

    * extended - accept every documented source code, not just blank, E and S
    """
    _OFFSET   = 28
    _CODE_LEN = 1
    _PER_DAY  = True
    def __init__(self, extended=False):
        self.extended = extended
    def _decode(self, raw):
        return ct.classify_source(raw, extended=self.extended)
