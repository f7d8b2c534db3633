################################################################################
# pydlydecoder/tests/test_conversion.py
#
# Unit tests for unit conversion. Requires pytest
#
# 2026-10-17:
#   * First version
################################################################################
# CONFIGURATION
################################################################################
import pytest
from pydlydecoder import conversion
from pydlydecoder.code_tables import Element
################################################################################
# CLASSES
################################################################################
class TestToPhysical:
    def test_temperature(self):
        assert conversion.to_physical(-50, Element.MAX_TEMP) == pytest.approx(-5.0)
        assert conversion.to_physical(-50, Element.MAX_TEMP, "degF") == pytest.approx(23.0)
        assert conversion.to_physical(0, "TMIN", "K") == pytest.approx(273.15)
    def test_length(self):
        assert conversion.to_physical(125, Element.PRECIPITATION) == pytest.approx(12.5)
        assert conversion.to_physical(125, Element.PRECIPITATION, "cm") == pytest.approx(1.25)
        assert conversion.to_physical(1500, Element.SNOW_DEPTH, "m") == pytest.approx(1.5)
    def test_missing(self):
        assert conversion.to_physical(None, Element.SNOWFALL, "cm") is None
    @pytest.mark.parametrize("element,unit", [
        (Element.MAX_TEMP, "mm"), (Element.SNOWFALL, "degF"), (Element.PRECIPITATION, "in")
    ])
    def test_incompatible(self, element, unit):
        with pytest.raises(conversion.ConversionError):
            conversion.to_physical(10, element, unit)
