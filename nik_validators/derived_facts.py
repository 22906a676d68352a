"""
Facts derived from the birth digits of a NIK

[Conventions of the numbering scheme]
- Women have 40 added to the day of birth (day 65 = 25th, female)
- The year is stored with 2 digits; a value that would lie in the future
  belongs to the 1900s
- Age and next birthday come from the UTC calendar of an elapsed duration
  (see compute_age); results near month ends can differ by one unit from
  plain calendar subtraction, and callers rely on that exact output

Every function takes the evaluation instant explicitly.
"""
from datetime import date, datetime, timedelta, timezone
from typing import Optional

from .exceptions import InvalidBornDateError
from .results import Age, BornDate, NextBirthday

MALE = 'LAKI-LAKI'
FEMALE = 'PEREMPUAN'

FEMALE_DAY_OFFSET = 40

EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


def resolve_now(now: Optional[datetime] = None) -> datetime:
    """Evaluation instant as an aware UTC datetime (naive values are taken as UTC)"""
    if now is None:
        return datetime.now(timezone.utc)
    if now.tzinfo is None:
        return now.replace(tzinfo=timezone.utc)
    return now.astimezone(timezone.utc)


def infer_gender(raw_day: int) -> str:
    """Day digits above 40 mean female; exactly 40 is male"""
    return FEMALE if raw_day > FEMALE_DAY_OFFSET else MALE


def current_year_suffix(now: datetime) -> int:
    """Last two digits of the current year"""
    return now.year % 100


def resolve_year(year_digits: int, now: datetime) -> int:
    if year_digits < current_year_suffix(now):
        return 2000 + year_digits
    return 1900 + year_digits


def compose_born_date(raw_day: int, month: str, year_digits: int,
                      gender: str, now: datetime) -> BornDate:
    """
    Build the born date from the raw NIK digits

    Args:
        raw_day: day digits as stored (female days carry +40)
        month: month digits as stored ("01".."12")
        year_digits: 2-digit year
        gender: MALE or FEMALE
        now: evaluation instant, decides the century
    """
    day = raw_day - FEMALE_DAY_OFFSET if gender == FEMALE else raw_day

    day_str = str(day) if day >= 10 else f"0{day}"
    year_str = str(resolve_year(year_digits, now))

    return BornDate(
        date=day_str,
        month=month,
        year=year_str,
        full=f"{day_str}-{month}-{year_str}",
    )


def born_calendar_date(born: BornDate) -> date:
    """
    Calendar date of the born date digits

    Days past the end of a short month and day 00 roll over into the
    neighbouring month (30-02-1999 -> 1999-03-02, 00-01-1999 -> 1998-12-31).

    Raises:
        InvalidBornDateError: month outside 01-12 or day above 31
    """
    year, month, day = int(born.year), int(born.month), int(born.date)

    if not 1 <= month <= 12 or not 0 <= day <= 31:
        raise InvalidBornDateError(f"Invalid birth date format: {born.full}")

    return date(year, month, 1) + timedelta(days=day - 1)


def born_timestamp(born: BornDate) -> int:
    """Seconds since the epoch at UTC midnight of the born date"""
    born_day = born_calendar_date(born)

    midnight = datetime(born_day.year, born_day.month, born_day.day, tzinfo=timezone.utc)
    return int((midnight - EPOCH).total_seconds())


def elapsed_to_calendar(seconds: int) -> datetime:
    """UTC calendar date of epoch + seconds (negative values land before 1970)"""
    return EPOCH + timedelta(seconds=seconds)


def compute_age(born: BornDate, now: datetime) -> Age:
    """
    Age from the UTC calendar of (now - born)

        year  = |Y - 1970|
        month = |M|
        day   = |D - 1|
    """
    elapsed = int(now.timestamp()) - born_timestamp(born)
    stamp = elapsed_to_calendar(elapsed)

    return Age(
        year=abs(stamp.year - 1970),
        month=abs(stamp.month),
        day=abs(stamp.day - 1),
    )


def compute_next_birthday(born: BornDate, now: datetime) -> NextBirthday:
    """Same transform as compute_age, applied to (born - now)"""
    diff = born_timestamp(born) - int(now.timestamp())
    stamp = elapsed_to_calendar(diff)

    return NextBirthday(
        month=abs(stamp.month),
        day=abs(stamp.day - 1),
    )


def zodiac_sign(month: int, day: int) -> str:
    """Western zodiac; the cutover day belongs to the later sign"""
    if month == 1:
        return 'Aquarius' if day >= 20 else 'Capricorn'

    if month == 2:
        return 'Pisces' if day >= 19 else 'Aquarius'

    if month == 3:
        return 'Aries' if day >= 21 else 'Pisces'

    if month == 4:
        return 'Taurus' if day >= 20 else 'Aries'

    if month == 5:
        return 'Gemini' if day >= 21 else 'Taurus'

    if month == 6:
        return 'Cancer' if day >= 21 else 'Gemini'

    if month == 7:
        return 'Leo' if day >= 23 else 'Cancer'

    if month == 8:
        return 'Virgo' if day >= 23 else 'Leo'

    if month == 9:
        return 'Libra' if day >= 23 else 'Virgo'

    if month == 10:
        return 'Scorpio' if day >= 24 else 'Libra'

    if month == 11:
        return 'Sagittarius' if day >= 23 else 'Scorpio'

    # December
    return 'Capricorn' if day >= 22 else 'Sagittarius'
