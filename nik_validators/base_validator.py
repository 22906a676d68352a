"""
Validator base class

[Role]
- Bind a 16-digit number to a region directory
- Region lookups shared by NIK and KK (province, city, sub-district, postal code)
- Format checks, validate(), itemized validation errors

[Construction]
- set(number): factory, raises InvalidNumberError unless 16 digits
- Validator(number): no gate; validate() simply returns False
"""
from abc import ABC, abstractmethod
from datetime import datetime
from typing import Any, Dict, List, Optional, Union

from . import fields
from .exceptions import InvalidNumberError
from .region_directory import RegionDirectory, get_default_directory
from .results import Address, ParseResult
from .utils.logger import get_logger, mask_number

logger = get_logger(__name__)


class BaseValidator(ABC):
    """Region-coded 16-digit number"""

    # name used in error messages
    LABEL = 'Number'

    def __init__(
        self,
        number: Union[str, int],
        wilayah_path: Optional[str] = None,
        directory: Optional[RegionDirectory] = None,
        now: Optional[datetime] = None,
    ):
        """
        Args:
            number: identity number (str or int)
            wilayah_path: region table to load instead of the shared default
            directory: already loaded region directory (wins over wilayah_path)
            now: fixed evaluation instant for date-derived facts

        Raises:
            RegionDataNotFoundError / RegionDataError: region table unusable
        """
        if directory is None:
            if wilayah_path is not None:
                directory = RegionDirectory.load(wilayah_path)
            else:
                directory = get_default_directory()

        self._number = fields.normalize(number)
        self._location = directory
        self._now = now

    @classmethod
    def set(cls, number: Union[str, int], **kwargs) -> 'BaseValidator':
        """
        Create a validator, rejecting anything that is not 16 digits

        Raises:
            InvalidNumberError: wrong length or non-digit characters
        """
        value = fields.normalize(number)

        if not fields.is_well_formed(value):
            logger.debug(f"{cls.LABEL} rejected at construction: length={len(value)}")
            raise InvalidNumberError(f"{cls.LABEL} must be exactly 16 digits")

        return cls(value, **kwargs)

    from_value = set

    # ============================================================
    # Read-only state
    # ============================================================

    @property
    def number(self) -> str:
        return self._number

    @property
    def location(self) -> RegionDirectory:
        return self._location

    def is_well_formed(self) -> bool:
        return fields.is_well_formed(self._number)

    # ============================================================
    # Region lookups (None for unknown codes and malformed numbers)
    # ============================================================

    def get_province(self) -> Optional[str]:
        if not self.is_well_formed():
            return None
        return self._location.province(fields.province_code(self._number))

    def get_city(self) -> Optional[str]:
        if not self.is_well_formed():
            return None
        return self._location.city(fields.city_code(self._number))

    def get_sub_district(self) -> Optional[str]:
        if not self.is_well_formed():
            return None
        return self._location.sub_district(fields.sub_district_code(self._number))

    def get_postal_code(self) -> Optional[str]:
        if not self.is_well_formed():
            return None
        return self._location.postal_code(fields.sub_district_code(self._number))

    def get_address(self) -> Address:
        return Address(
            province=self.get_province(),
            city=self.get_city(),
            sub_district=self.get_sub_district(),
        )

    # ============================================================
    # Validation
    # ============================================================

    def validate(self) -> bool:
        """16 digits and every region code resolves"""
        # length first
        if not fields.has_valid_length(self._number):
            return False

        if not fields.has_only_digits(self._number):
            return False

        province = self.get_province()
        city = self.get_city()
        sub_district = self.get_sub_district()

        return province is not None and city is not None and sub_district is not None

    def get_validation_errors(self) -> List[str]:
        """
        Itemized reasons the number is not valid (empty list when valid)

        Region codes are only checked on a well-formed number.
        """
        errors = []

        if not fields.has_valid_length(self._number):
            errors.append(f"{self.LABEL} must be exactly 16 digits")

        if not fields.has_only_digits(self._number):
            errors.append(f"{self.LABEL} must contain only digits")

        if errors:
            return errors

        if self.get_province() is None:
            errors.append('Invalid province code')

        if self.get_city() is None:
            errors.append('Invalid city code')

        if self.get_sub_district() is None:
            errors.append('Invalid sub-district code')

        return errors

    # ============================================================
    # Output
    # ============================================================

    @abstractmethod
    def parse(self) -> ParseResult:
        """Full result when valid, InvalidResult otherwise"""

    def to_array(self) -> Dict[str, Any]:
        """parse() flattened to plain dicts, JSON-safe"""
        return self.parse().to_dict()

    def clear_cache(self):
        """Drop memoized derived values"""

    def __repr__(self) -> str:
        return f"{type(self).__name__}({mask_number(self._number)!r})"
