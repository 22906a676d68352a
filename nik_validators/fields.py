"""
Fixed-offset field extraction

[Layout of a 16-digit NIK / KK]
    PP CC SS DD MM YY UUUU
    - PP    province code       (offsets 0-1)
    - PPCC  city code           (offsets 0-3)
    - PPCCSS sub-district code  (offsets 0-5)
    - DD    day of birth, +40 for women (offsets 6-7)
    - MM    month of birth      (offsets 8-9)
    - YY    2-digit birth year  (offsets 10-11)
    - UUUU  registration order  (offsets 12-15, NIK only)

Extractors assume a well-formed number; check is_well_formed() first.
"""
import re
from typing import Union

NUMBER_LENGTH = 16

_DIGITS_RE = re.compile(r'[0-9]{16}')


def normalize(value: Union[str, int]) -> str:
    """Coerce a str or int identity number to str"""
    return value if isinstance(value, str) else str(value)


def is_well_formed(value: str) -> bool:
    """Exactly 16 ASCII decimal digits"""
    return _DIGITS_RE.fullmatch(value) is not None


def has_valid_length(value: str) -> bool:
    return len(value) == NUMBER_LENGTH


def has_only_digits(value: str) -> bool:
    # str.isdigit() accepts non-ASCII digits such as '١'
    return re.fullmatch(r'[0-9]+', value) is not None


def province_code(number: str) -> str:
    return number[0:2]


def city_code(number: str) -> str:
    return number[0:4]


def sub_district_code(number: str) -> str:
    return number[0:6]


def day_digits(number: str) -> str:
    return number[6:8]


def month_digits(number: str) -> str:
    return number[8:10]


def year_digits(number: str) -> str:
    return number[10:12]


def unique_code(number: str) -> str:
    return number[12:16]
