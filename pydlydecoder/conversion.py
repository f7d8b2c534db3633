################################################################################
# pydlydecoder/conversion.py
#
# Conversion of raw .dly values into physical units
#
# 2026-10-17:
#   * First version
################################################################################
# CONFIGURATION
################################################################################
from pydlydecoder.code_tables import Element
################################################################################
# EXCEPTION CLASSES
################################################################################
class ConversionError(Exception):
    def __init__(self, val, unit_from, unit_to):
        self.msg = "Cannot convert {} from {} to {}".format(val, unit_from, unit_to)
        super().__init__(self.msg)
################################################################################
# FUNCTIONS
################################################################################
def _convert(x, factor=1, intercept=0):
    """
    Converts a value using y = mx + c
    """
    return (factor * x) + intercept
def to_physical(value, element, unit=None):
    """
    Converts a raw day value into a physical quantity

    :param int value: Raw value (e.g. tenths of a degree), or None if missing
    :param Element element: Element the value belongs to
    :param str unit: Unit to convert to. Defaults to the element's own unit
    :returns: Converted value, or None if the value is missing
    :rtype: float
    :raises: ConversionError if the unit is not compatible with the element
    """
    if value is None:
        return None
    element = Element(element)
    val = _convert(value, factor=element.factor)
    if unit is None or unit == element.unit:
        return val
    return convert(val, element.unit, unit, element.unit_type)
def convert(val, unit_from, unit_to, unit_type):
    """
    Converts value from one unit to another

    :param numeric val: Value to convert
    :param str unit_from: Convert from this unit
    :param str unit_to: Convert to this unit
    :param str unit_type: Type of unit ("length" or "temperature")
    :returns: Converted value
    :rtype: numeric
    """
    if unit_type == "length":
        # Only metric lengths (i.e. metres)
        units = []
        for u in [unit_from, unit_to]:
            if not u or u[-1] != "m":
                raise ConversionError(val, unit_from, unit_to)
            units.append(u[:-1] if len(u) > 1 else None)
        return _convert_si(val, *units)
    elif unit_type == "temperature":
        return _convert_temp(val, unit_from, unit_to)
    else:
        raise ConversionError(val, unit_from, unit_to)
def _convert_si(val, prefix_from, prefix_to):
    """
    Converts SI prefixes from one to another (e.g. from mm to cm)
    """
    PREFIXES = ["m", "c", "d", None, "da", "h", "k"]
    try:
        exp_from = PREFIXES.index(prefix_from) - 3
        exp_to   = PREFIXES.index(prefix_to) - 3
    except ValueError:
        raise ConversionError(val, prefix_from, prefix_to)
    return _convert(val, factor=(10 ** exp_from) / (10 ** exp_to))
def _convert_temp(val, unit_from, unit_to):
    if unit_from == unit_to:
        return val
    if unit_from == "Cel":
        if unit_to == "degF":
            return _convert(val, factor=(9/5), intercept=32)
        elif unit_to == "K":
            return _convert(val, intercept=273.15)
    elif unit_from == "degF":
        if unit_to == "Cel":
            return _convert((val - 32), factor=(5/9))
        elif unit_to == "K":
            return _convert(((val - 32) * (5/9)), intercept=273.15)
    elif unit_from == "K":
        if unit_to == "Cel":
            return _convert(val, intercept=-273.15)
        elif unit_to == "degF":
            return _convert(((9/5) * (val - 273.15)), intercept=32)

    # If we have reached this point, we are unable to convert
    raise ConversionError(val, unit_from, unit_to)
