"""
Indonesian NIK / KK validators

[Usage]
    from nik_validators import NIKValidator, KKValidator

    nik = NIKValidator.set('3273012501990001')
    nik.validate()          # True
    result = nik.parse()    # NIKResult(..., valid=True)
    nik.to_array()          # plain dict, JSON-safe

    kk = KKValidator.set('3273012501990001')
    kk.get_formatted_number()   # '3273-0125-0199-0001'
"""
from .base_validator import BaseValidator
from .nik_validator import NIKValidator
from .kk_validator import KKValidator
from .region_directory import RegionDirectory, get_default_directory, clear_directory_cache
from .results import (
    Address,
    Age,
    BornDate,
    InvalidResult,
    KKResult,
    NextBirthday,
    NIKResult,
    ParseResult,
    parse_result_from_dict,
)
from .exceptions import (
    NikValidatorError,
    InvalidNumberError,
    InvalidBornDateError,
    RegionDataError,
    RegionDataNotFoundError,
)
from .config import Config

__version__ = '1.0.0'

__all__ = [
    # ============================================
    # Validators
    # ============================================
    'BaseValidator',
    'NIKValidator',
    'KKValidator',

    # ============================================
    # Region table
    # ============================================
    'RegionDirectory',
    'get_default_directory',
    'clear_directory_cache',

    # ============================================
    # Results
    # ============================================
    'Address',
    'Age',
    'BornDate',
    'InvalidResult',
    'KKResult',
    'NextBirthday',
    'NIKResult',
    'ParseResult',
    'parse_result_from_dict',

    # ============================================
    # Errors / config
    # ============================================
    'NikValidatorError',
    'InvalidNumberError',
    'InvalidBornDateError',
    'RegionDataError',
    'RegionDataNotFoundError',
    'Config',
]
