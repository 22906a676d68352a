"""
Parse result types

parse() returns one of:
    - InvalidResult: only valid=False, no other field
    - NIKResult:     every derived fact of a person number
    - KKResult:      number, address and postal code of a household

to_dict() flattens nested values into plain JSON-safe dicts using the
external key names (uniqueCode, nextBirthday, subDistrict, postalCode);
from_dict() rebuilds an identical object.
"""
from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Union


@dataclass(frozen=True)
class BornDate:
    date: str
    month: str
    year: str
    full: str

    def to_dict(self) -> Dict[str, str]:
        return {'date': self.date, 'month': self.month, 'year': self.year, 'full': self.full}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'BornDate':
        return cls(date=data['date'], month=data['month'], year=data['year'], full=data['full'])


@dataclass(frozen=True)
class Age:
    year: int
    month: int
    day: int

    def to_dict(self) -> Dict[str, int]:
        return {'year': self.year, 'month': self.month, 'day': self.day}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Age':
        return cls(year=data['year'], month=data['month'], day=data['day'])


@dataclass(frozen=True)
class NextBirthday:
    month: int
    day: int

    def to_dict(self) -> Dict[str, int]:
        return {'month': self.month, 'day': self.day}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'NextBirthday':
        return cls(month=data['month'], day=data['day'])


@dataclass(frozen=True)
class Address:
    province: Optional[str]
    city: Optional[str]
    sub_district: Optional[str]

    def to_dict(self) -> Dict[str, Optional[str]]:
        return {'province': self.province, 'city': self.city, 'subDistrict': self.sub_district}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Address':
        return cls(province=data['province'], city=data['city'], sub_district=data['subDistrict'])


@dataclass(frozen=True)
class InvalidResult:
    """Outcome for a number that does not validate; carries no payload"""

    valid: bool = field(default=False, init=False)

    def to_dict(self) -> Dict[str, bool]:
        return {'valid': False}


@dataclass(frozen=True)
class NIKResult:
    number: str
    unique_code: str
    gender: str
    born: BornDate
    age: Age
    next_birthday: NextBirthday
    zodiac: str
    address: Address
    postal_code: Optional[str]
    valid: bool = field(default=True, init=False)

    def to_dict(self) -> Dict[str, Any]:
        return {
            'number': self.number,
            'uniqueCode': self.unique_code,
            'gender': self.gender,
            'born': self.born.to_dict(),
            'age': self.age.to_dict(),
            'nextBirthday': self.next_birthday.to_dict(),
            'zodiac': self.zodiac,
            'address': self.address.to_dict(),
            'postalCode': self.postal_code,
            'valid': True,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'NIKResult':
        return cls(
            number=data['number'],
            unique_code=data['uniqueCode'],
            gender=data['gender'],
            born=BornDate.from_dict(data['born']),
            age=Age.from_dict(data['age']),
            next_birthday=NextBirthday.from_dict(data['nextBirthday']),
            zodiac=data['zodiac'],
            address=Address.from_dict(data['address']),
            postal_code=data['postalCode'],
        )


@dataclass(frozen=True)
class KKResult:
    number: str
    address: Address
    postal_code: Optional[str]
    valid: bool = field(default=True, init=False)

    def to_dict(self) -> Dict[str, Any]:
        return {
            'number': self.number,
            'address': self.address.to_dict(),
            'postalCode': self.postal_code,
            'valid': True,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'KKResult':
        return cls(
            number=data['number'],
            address=Address.from_dict(data['address']),
            postal_code=data['postalCode'],
        )


ParseResult = Union[InvalidResult, NIKResult, KKResult]


def parse_result_from_dict(data: Dict[str, Any]) -> ParseResult:
    """Rebuild a parse result from its to_dict() form"""
    if not data.get('valid'):
        return InvalidResult()
    if 'uniqueCode' in data:
        return NIKResult.from_dict(data)
    return KKResult.from_dict(data)
