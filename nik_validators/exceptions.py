"""
Error taxonomy

- InvalidNumberError: input is not 16 decimal digits (factory constructors)
- RegionDataError / RegionDataNotFoundError: region table missing or corrupt
- InvalidBornDateError: born month outside 01-12 or day above 31

A well-formed number whose region codes do not resolve is not an error:
validate() returns False and parse() returns an invalid result.
"""


class NikValidatorError(Exception):
    """Base class for all errors raised by this package"""


class InvalidNumberError(NikValidatorError, ValueError):
    """Identity number is not exactly 16 decimal digits"""


class RegionDataError(NikValidatorError, RuntimeError):
    """Region table could not be read or parsed"""


class RegionDataNotFoundError(RegionDataError, FileNotFoundError):
    """Region table file does not exist"""


class InvalidBornDateError(NikValidatorError, ValueError):
    """Born date digits cannot be placed on the calendar, even with rollover"""
