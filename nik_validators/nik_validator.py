"""
NIK (Nomor Induk Kependudukan) validator

[Strategy]
- Format: 16 digits, region codes must resolve in the wilayah table
- Birth digits (offsets 6-11) give gender, born date, age, next birthday, zodiac
- Derived values are computed on first access and kept for the instance's
  lifetime; clear_cache() forces recomputation
"""
from datetime import datetime
from typing import Optional

from . import derived_facts, fields
from .base_validator import BaseValidator
from .results import Age, BornDate, InvalidResult, NextBirthday, NIKResult, ParseResult
from .utils.logger import get_logger, mask_number

logger = get_logger(__name__)


class NIKValidator(BaseValidator):
    """NIK validator"""

    LABEL = 'NIK'

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)

        # memoized derived facts
        self._cached_gender: Optional[str] = None
        self._cached_born_date: Optional[BornDate] = None
        self._cached_age: Optional[Age] = None
        self._cached_next_birthday: Optional[NextBirthday] = None
        self._resolved_now: Optional[datetime] = None

    def clear_cache(self):
        self._cached_gender = None
        self._cached_born_date = None
        self._cached_age = None
        self._cached_next_birthday = None
        self._resolved_now = None

    # ============================================================
    # Raw fields
    # ============================================================

    def get_now(self) -> datetime:
        """
        Evaluation instant

        The injected `now` when given; otherwise the wall clock, read once
        and kept until clear_cache().
        """
        if self._resolved_now is None:
            self._resolved_now = derived_facts.resolve_now(self._now)
        return self._resolved_now

    def get_current_year(self) -> int:
        """Last 2 digits of the current year"""
        return derived_facts.current_year_suffix(self.get_now())

    def get_nik_year(self) -> int:
        return int(fields.year_digits(self.number))

    def get_nik_date(self) -> int:
        """Day digits as stored (women carry +40)"""
        return int(fields.day_digits(self.number))

    def get_unique_code(self) -> str:
        return fields.unique_code(self.number)

    # ============================================================
    # Derived facts
    # ============================================================

    def get_gender(self) -> str:
        if self._cached_gender is None:
            self._cached_gender = derived_facts.infer_gender(self.get_nik_date())
        return self._cached_gender

    def get_born_date(self) -> BornDate:
        if self._cached_born_date is None:
            self._cached_born_date = derived_facts.compose_born_date(
                raw_day=self.get_nik_date(),
                month=fields.month_digits(self.number),
                year_digits=self.get_nik_year(),
                gender=self.get_gender(),
                now=self.get_now(),
            )
        return self._cached_born_date

    def get_age(self) -> Age:
        """
        Raises:
            InvalidBornDateError: month digits outside 01-12 or day above 31
        """
        if self._cached_age is None:
            self._cached_age = derived_facts.compute_age(self.get_born_date(), self.get_now())
        return self._cached_age

    def get_next_birthday(self) -> NextBirthday:
        if self._cached_next_birthday is None:
            self._cached_next_birthday = derived_facts.compute_next_birthday(
                self.get_born_date(), self.get_now()
            )
        return self._cached_next_birthday

    def get_zodiac(self) -> str:
        born = self.get_born_date()
        return derived_facts.zodiac_sign(int(born.month), int(born.date))

    # ============================================================
    # Output
    # ============================================================

    def parse(self) -> ParseResult:
        if not self.validate():
            logger.debug(f"NIK {mask_number(self.number)} is not valid")
            return InvalidResult()

        return NIKResult(
            number=self.number,
            unique_code=self.get_unique_code(),
            gender=self.get_gender(),
            born=self.get_born_date(),
            age=self.get_age(),
            next_birthday=self.get_next_birthday(),
            zodiac=self.get_zodiac(),
            address=self.get_address(),
            postal_code=self.get_postal_code(),
        )
