################################################################################
# pydlydecoder/tests/test_code_tables.py
#
# Unit tests for the code tables. Requires pytest
#
# 2026-10-17:
#   * First version
################################################################################
# CONFIGURATION
################################################################################
import pytest
from pydlydecoder import UnknownCode
from pydlydecoder import code_tables as ct
################################################################################
# CLASSES
################################################################################
class TestElement:
    @pytest.mark.parametrize("raw,expected", [
        ("PRCP", ct.Element.PRECIPITATION),
        ("SNOW", ct.Element.SNOWFALL),
        ("SNWD", ct.Element.SNOW_DEPTH),
        ("TMAX", ct.Element.MAX_TEMP),
        ("TMIN", ct.Element.MIN_TEMP),
        ("TAVG", ct.Element.AVG_TEMP)
    ])
    def test_known(self, raw, expected):
        assert ct.classify_element(raw) is expected
    @pytest.mark.parametrize("raw", ["XXXX", "prcp", " PRC", "PRCP ", "AWND", "", None])
    def test_unknown(self, raw):
        with pytest.raises(UnknownCode):
            ct.classify_element(raw)
    def test_units(self):
        assert ct.Element.PRECIPITATION.unit == "mm"
        assert ct.Element.PRECIPITATION.factor == 0.1
        assert ct.Element.SNOWFALL.factor == 1
        assert ct.Element.MAX_TEMP.unit_type == "temperature"
class TestMeasurementFlag:
    def test_domain(self):
        codes = " BDHKLOPTW"
        assert len(ct.MeasurementFlag) == 10
        for code in codes:
            assert ct.classify_measurement(code).value == code
        assert ct.classify_measurement(" ") is ct.MeasurementFlag.NONE
        assert ct.classify_measurement("T") is ct.MeasurementFlag.TRACE
    @pytest.mark.parametrize("raw", ["A", "b", "", "BB", "/"])
    def test_unknown(self, raw):
        with pytest.raises(UnknownCode):
            ct.classify_measurement(raw)
class TestQualityFlag:
    def test_domain(self):
        for code in " DGIKLMNORSTWXZ":
            assert ct.classify_quality(code).value == code
        assert ct.classify_quality(" ") is ct.QualityFlag.NONE
        assert ct.classify_quality("X") is ct.QualityFlag.BOUNDS
    @pytest.mark.parametrize("raw", ["A", "d", "", "  "])
    def test_unknown(self, raw):
        with pytest.raises(UnknownCode):
            ct.classify_quality(raw)
class TestSourceFlag:
    ALL_CODES = " 067AaBbCEFGHIKMNQRrSsTUuWXZz"
    def test_implemented(self):
        assert ct.classify_source(" ") is ct.SourceFlag.NONE
        assert ct.classify_source("E") is ct.SourceFlag.ECA_AND_D
        assert ct.classify_source("S") is ct.SourceFlag.DSI_9618
    def test_unimplemented(self):
        unimplemented = [c for c in self.ALL_CODES if c not in " ES"]
        assert len(unimplemented) == 26
        for code in unimplemented:
            with pytest.raises(UnknownCode):
                ct.classify_source(code)
    def test_extended(self):
        assert len(ct.SourceFlag) == 29
        for code in self.ALL_CODES:
            assert ct.classify_source(code, extended=True).value == code
    @pytest.mark.parametrize("raw", ["Y", "1", "", "EE"])
    def test_unknown_extended(self, raw):
        with pytest.raises(UnknownCode):
            ct.classify_source(raw, extended=True)
    def test_priority(self):
        assert sorted(ct.SOURCE_PRIORITY) == sorted(self.ALL_CODES.strip())
        assert ct.SourceFlag.DATZILLA.priority == 0
        assert ct.SourceFlag.DSI_9618.priority == len(ct.SOURCE_PRIORITY) - 1
        assert ct.SourceFlag.NONE.priority is None
class TestCodeTable:
    def test_encode(self):
        assert ct.CodeTableElement().encode(ct.Element.SNOWFALL) == "SNOW"
        assert ct.CodeTableSource().encode("E") == "E"
    def test_error_message(self):
        with pytest.raises(UnknownCode) as e:
            ct.classify_quality("?")
        assert str(e.value) == "'?' is not a valid code for quality flag"
        assert e.value.val == "?"
