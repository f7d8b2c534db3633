################################################################################
# pydlydecoder/dly/__init__.py
#
# Decoder for GHCN-Daily .dly records. Each line holds one station, year,
# month and element, followed by 31 day tuples of value, measurement flag,
# quality flag and source flag. See section III of
# https://www.ncei.noaa.gov/pub/data/ghcn/daily/readme.txt
#
# 2026-10-17:
#   * First version
################################################################################
# CONFIGURATION
################################################################################
import calendar, logging
from concurrent.futures import ThreadPoolExecutor
from enum import Enum
import pydlydecoder
from pydlydecoder.code_tables import classify_element, classify_measurement, classify_quality, classify_source
from . import fields
from .fields import MISSING_VALUE, parse_year, parse_month, parse_value

TUPLE_WIDTH   = 8
DAY_SLOTS     = 31
RECORD_LENGTH = fields.DayValue._OFFSET + TUPLE_WIDTH * DAY_SLOTS
################################################################################
# LAYOUT
################################################################################
class FieldKind(str, Enum):
    STATION_ID       = "station_id"
    YEAR             = "year"
    MONTH            = "month"
    ELEMENT          = "element"
    VALUE            = "value"
    MEASUREMENT_FLAG = "measurement_flag"
    QUALITY_FLAG     = "quality_flag"
    SOURCE_FLAG      = "source_flag"
FIELDS = {
    FieldKind.STATION_ID:       fields.StationId,
    FieldKind.YEAR:             fields.Year,
    FieldKind.MONTH:            fields.Month,
    FieldKind.ELEMENT:          fields.ElementType,
    FieldKind.VALUE:            fields.DayValue,
    FieldKind.MEASUREMENT_FLAG: fields.DayMeasurement,
    FieldKind.QUALITY_FLAG:     fields.DayQuality,
    FieldKind.SOURCE_FLAG:      fields.DaySource,
}

# (field name, offset, width). Offsets of per-day fields are for day index 0
LAYOUT = tuple((kind.value, cls._OFFSET, cls._CODE_LEN) for kind, cls in FIELDS.items())
################################################################################
# FUNCTIONS
################################################################################
def _field(field_kind):
    return FIELDS[FieldKind(field_kind)]()
def span(field_kind, day_index=None):
    """
    Returns the (start, end) character range of a field

    :param FieldKind field_kind: Field to locate
    :param int day_index: Day slot (0-30), only used for per-day fields
    :rtype: tuple
    :raises: pydlydecoder.OutOfBounds if the day index is missing or invalid
    """
    return _field(field_kind).span(day_index)
def extract(record, field_kind, day_index=None):
    """
    Returns the raw, untrimmed substring of a field

    :param string record: Record to read from
    :param FieldKind field_kind: Field to extract (member or its string value)
    :param int day_index: Day slot (0-30), only used for per-day fields
    :returns: Raw substring, exactly as wide as the field
    :rtype: string
    :raises: pydlydecoder.OutOfBounds if the field lies outside the record
    :raises: ValueError if field_kind is not a known field
    """
    return _field(field_kind).extract(record, day_index)
def decode_many(lines, max_workers=None, skip_invalid=False, extended_sources=False):
    """
    Decodes a sequence of records concurrently, preserving order

    :param iterable lines: Records to decode
    :param int max_workers: Number of worker threads (default chosen by the executor)
    :param boolean skip_invalid: If True, records that fail are logged and returned as None
    :param boolean extended_sources: Passed to DLY
    :returns: Decoded records
    :rtype: list
    """
    report = DLY(extended_sources=extended_sources)
    def _decode(line):
        try:
            return report.decode(line)
        except pydlydecoder.DecodeError as e:
            if not skip_invalid:
                raise
            logging.warning("Skipping record {!r}: {}".format(line[:fields.Month._OFFSET + fields.Month._CODE_LEN], str(e)))
            return None
    with ThreadPoolExecutor(max_workers=max_workers) as executor:
        return list(executor.map(_decode, lines))
################################################################################
# REPORT CLASSES
################################################################################
class DLY(pydlydecoder.Report):
    """
    Decodes a whole .dly record. Only the day slots that exist in the record's
    month are decoded; the remaining slots are padding
    """
    def __init__(self, extended_sources=False):
        self.extended_sources = extended_sources
    def _decode(self, line):
        data = {}
        data["station_id"] = fields.StationId().decode(line)
        data["year"]       = fields.Year().decode(line)
        data["month"]      = fields.Month().decode(line)
        data["element"]    = fields.ElementType().decode(line)

        if not 1 <= data["month"] <= 12:
            raise pydlydecoder.DecodeError("{} is not a valid month".format(data["month"]))
        num_days = calendar.monthrange(data["year"], data["month"])[1]
        data["days"] = [self.decode_day(line, idx) for idx in range(num_days)]
        return data
    def decode_day(self, line, day_index):
        """
        Decodes the tuple for a single day

        :param string line: Record
        :param int day_index: Day slot (0-30)
        :returns: Day number (1-31), value and flags
        :rtype: dict
        """
        return {
            "day":         day_index + 1,
            "value":       fields.DayValue().decode(line, day_index),
            "measurement": fields.DayMeasurement().decode(line, day_index),
            "quality":     fields.DayQuality().decode(line, day_index),
            "source":      fields.DaySource(extended=self.extended_sources).decode(line, day_index)
        }
