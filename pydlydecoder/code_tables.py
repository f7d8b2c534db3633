################################################################################
# pydlydecoder/code_tables.py
#
# Code tables for decoding the flags and element codes of .dly records. See
# section III of the GHCN-Daily readme for the full descriptions
#
# 2026-10-17:
#   * First version
################################################################################
# CONFIGURATION
################################################################################
from enum import Enum
import pydlydecoder

# When data are available for the same time from more than one source, the
# highest priority source is chosen in this order (highest first). Kept as
# reference data; no resolution is done here
SOURCE_PRIORITY = (
    "Z", "R", "0", "6", "C", "X", "W", "K", "7", "F", "B", "M", "r", "E",
    "z", "u", "b", "s", "a", "G", "Q", "I", "A", "N", "T", "U", "H", "S"
)
################################################################################
# ENUMERATIONS
################################################################################
class Element(str, Enum):
    """
    Element type of a record
    """
    PRECIPITATION = "PRCP"
    SNOWFALL      = "SNOW"
    SNOW_DEPTH    = "SNWD"
    MAX_TEMP      = "TMAX"
    MIN_TEMP      = "TMIN"
    AVG_TEMP      = "TAVG"

    @property
    def unit(self):
        return _ELEMENT_UNITS[self][0]
    @property
    def unit_type(self):
        return _ELEMENT_UNITS[self][1]
    @property
    def factor(self):
        """
        Multiplier from the raw integer to a value in unit
        """
        return _ELEMENT_UNITS[self][2]
_ELEMENT_UNITS = {
    Element.PRECIPITATION: ("mm", "length", 0.1),
    Element.SNOWFALL:      ("mm", "length", 1),
    Element.SNOW_DEPTH:    ("mm", "length", 1),
    Element.MAX_TEMP:      ("Cel", "temperature", 0.1),
    Element.MIN_TEMP:      ("Cel", "temperature", 0.1),
    Element.AVG_TEMP:      ("Cel", "temperature", 0.1),
}
class MeasurementFlag(str, Enum):
    """
    Measurement flag
    """
    NONE                    = " " # no measurement information applicable
    TWO_TOTALS              = "B" # precipitation total formed from two 12-hour totals
    FOUR_TOTALS             = "D" # precipitation total formed from four six-hour totals
    HOURLY                  = "H" # highest/lowest hourly temperature or average of hourly values
    CONVERTED_KNOTS         = "K"
    LAGGED                  = "L" # lagged with respect to reported hour of observation
    CONVERTED_OKTAS         = "O"
    MISSING_PRESUMED_ZERO   = "P" # as in DSI 3200 and 3206
    TRACE                   = "T" # trace of precipitation, snowfall or snow depth
    CONVERTED_16_POINT_WBAN = "W"
class QualityFlag(str, Enum):
    """
    Quality flag. Every member other than NONE names the check that failed
    """
    NONE                   = " "
    DUPLICATE              = "D"
    GAP                    = "G"
    INTERNAL_CONSISTENCY   = "I"
    STREAK                 = "K" # streak/frequent-value check
    MULTIDAY_LENGTH        = "L" # check on length of multiday period
    MEGACONSISTENCY        = "M"
    NAUGHT                 = "N"
    CLIMATOLOGICAL_OUTLIER = "O"
    LAGGED_RANGE           = "R"
    SPATIAL_CONSISTENCY    = "S"
    TEMPORAL_CONSISTENCY   = "T"
    TOO_WARM_FOR_SNOW      = "W"
    BOUNDS                 = "X"
    DATZILLA               = "Z" # flagged as a result of an official Datzilla investigation
class SourceFlag(str, Enum):
    """
    Source flag. The default classifier only recognises NONE, ECA_AND_D and
    DSI_9618
    """
    NONE                 = " "
    DSI_3200             = "0" # U.S. Cooperative Summary of the Day
    DSI_3206             = "6" # CDMP Cooperative Summary of the Day
    DSI_3207             = "7" # U.S. Cooperative Summary of the Day, transmitted via WxCoder3
    ASOS_REALTIME        = "A"
    AUSTRALIA_BOM        = "a"
    DSI_3211             = "B" # U.S. ASOS data for October 2000-December 2005
    BELARUS              = "b"
    ENVIRONMENT_CANADA   = "C"
    ECA_AND_D            = "E" # European Climate Assessment and Dataset
    US_FORT              = "F"
    GCOS                 = "G" # GCOS or other government-supplied data
    HPRCC                = "H" # High Plains Regional Climate Center real-time data
    INTERNATIONAL        = "I"
    COOP_DIGITIZED       = "K" # digitized from paper observer forms
    METAR_EXTRACT        = "M"
    COCORAHS             = "N"
    QUARANTINED          = "Q" # several African countries, withheld until permission granted
    REFERENCE_NETWORK    = "R" # NCEI Reference Network Database
    RIHMI_WDC            = "r" # All-Russian Research Institute of Hydrometeorological Information
    DSI_9618             = "S" # Global Summary of the Day. Use with caution
    CHINA_CMA            = "s"
    SNOTEL               = "T"
    RAWS                 = "U"
    UKRAINE              = "u"
    WBAN_ASOS_ISD        = "W"
    DSI_3210             = "X" # U.S. First-Order Summary of the Day
    DATZILLA             = "Z"
    UZBEKISTAN           = "z"

    @property
    def priority(self):
        """
        Position in SOURCE_PRIORITY (0 is highest), or None for NONE
        """
        if self is SourceFlag.NONE:
            return None
        return SOURCE_PRIORITY.index(self.value)
################################################################################
# BASE CLASSES
################################################################################
class CodeTable(object):
    """
    Base class for code table object. Subclasses set _TABLE and _ENUM
    """
    def decode(self, raw):
        """
        Decodes a raw code into an enumeration member

        :param string raw: Raw code
        :returns: Enumeration member
        :raises: pydlydecoder.UnknownCode if raw is not in the table
        """
        if not isinstance(raw, str):
            raise pydlydecoder.UnknownCode(raw, self._TABLE)
        try:
            return self._decode(raw)
        except ValueError:
            raise pydlydecoder.UnknownCode(raw, self._TABLE)
    def encode(self, member):
        """
        Returns the raw code for an enumeration member
        """
        return self._ENUM(member).value
    def _decode(self, raw):
        return self._ENUM(raw)
################################################################################
# CODE TABLE CLASSES
################################################################################
class CodeTableElement(CodeTable):
    _TABLE = "element"
    _ENUM  = Element
class CodeTableMeasurement(CodeTable):
    _TABLE = "measurement flag"
    _ENUM  = MeasurementFlag
class CodeTableQuality(CodeTable):
    _TABLE = "quality flag"
    _ENUM  = QualityFlag
class CodeTableSource(CodeTable):
    """
    Source flags. Only blank, E and S are decoded unless extended is set, in
    which case every documented source is accepted
    """
    _TABLE = "source flag"
    _ENUM  = SourceFlag
    _IMPLEMENTED = (SourceFlag.NONE, SourceFlag.ECA_AND_D, SourceFlag.DSI_9618)
    def __init__(self, extended=False):
        self.extended = extended
    def _decode(self, raw):
        source = self._ENUM(raw)
        if not self.extended and source not in self._IMPLEMENTED:
            raise ValueError(raw)
        return source
################################################################################
# FUNCTIONS
################################################################################
def classify_element(raw):
    """
    Classifies a 4 character element code e.g. "TMAX"
    """
    return CodeTableElement().decode(raw)
def classify_measurement(raw):
    return CodeTableMeasurement().decode(raw)
def classify_quality(raw):
    return CodeTableQuality().decode(raw)
def classify_source(raw, extended=False):
    """
    Classifies a source flag

    :param string raw: Single character source code
    :param boolean extended: If True, accept all 29 documented codes
    :returns: Source flag
    :rtype: SourceFlag
    :raises: pydlydecoder.UnknownCode if the code is not recognised
    """
    return CodeTableSource(extended=extended).decode(raw)
