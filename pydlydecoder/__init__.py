################################################################################
# pydlydecoder/__init__.py
#
# Main __init__ script for pydlydecoder
#
# 2026-10-17:
#   * First version
################################################################################
# IMPORTS
################################################################################
import logging
################################################################################
# EXCEPTION CLASSES
################################################################################
class DecodeError(Exception):
    def __init__(self, msg):
        self.msg = msg
        super().__init__(self.msg)
    def __str__(self):
        return self.msg
class OutOfBounds(DecodeError):
    pass
class MalformedNumber(DecodeError):
    def __init__(self, val, desc):
        self.val = val
        super().__init__("{!r} is not a valid number for {}".format(val, desc))
class UnknownCode(DecodeError):
    def __init__(self, val, desc):
        self.val = val
        super().__init__("{!r} is not a valid code for {}".format(val, desc))
################################################################################
# BASE CLASSES
################################################################################
class Report(object):
    """
    Base class for a fixed-width report
    """
    def decode(self, message):
        """
        Decode function
        """
        try:
            return self._decode(message)
        except DecodeError:
            raise
        except Exception as e:
            raise DecodeError(str(e))
    def _decode(self, message):
        """
        Actual decode function. Implement in subclass
        """
        raise NotImplementedError("_decode needs to be implemented in {} subclass".format(type(self).__name__))
class Field(object):
    """
    Base class for a field at a fixed position within a record

    Subclasses set _OFFSET and _CODE_LEN. Fields repeated once per day set
    _PER_DAY, in which case the offset advances by _STRIDE for each day index.
    """
    _PER_DAY = False
    _STRIDE  = 8
    _SLOTS   = 31
    def span(self, day_index=None):
        """
        Returns the (start, end) character range of this field

        :param int day_index: Day slot (0-30). Required for per-day fields
        :returns: Start and end offsets
        :rtype: tuple
        :raises: pydlydecoder.OutOfBounds if the day index is missing or invalid
        """
        start = self._OFFSET
        if self._PER_DAY:
            valid = isinstance(day_index, int) and not isinstance(day_index, bool)
            if not valid or not 0 <= day_index < self._SLOTS:
                raise OutOfBounds("{!r} is not a valid day index for {} (0-{})".format(
                    day_index, self.name(), self._SLOTS - 1
                ))
            start += self._STRIDE * day_index
        return (start, start + self._CODE_LEN)
    def extract(self, record, day_index=None):
        """
        Returns the raw substring for this field, untrimmed

        :param string record: Record to slice
        :param int day_index: Day slot (0-30). Required for per-day fields
        :returns: Exactly _CODE_LEN characters
        :rtype: string
        :raises: pydlydecoder.OutOfBounds if the record is too short
        """
        (start, end) = self.span(day_index)
        if len(record) < end:
            raise OutOfBounds("{} [{}:{}] is outside a record of length {}".format(
                self.name(), start, end, len(record)
            ))
        return record[start:end]
    def decode(self, record, day_index=None):
        """
        Extracts and decodes the field from a record
        """
        raw = self.extract(record, day_index)
        logging.debug("Decoding {} from {!r}".format(self.name(), raw))
        return self._decode(raw)
    def _decode(self, raw):
        """
        Actual decode function. By default the raw value is returned verbatim
        """
        return raw
    def name(self):
        return type(self).__name__
