"""
NIK / KK demonstration script

    python example.py
"""
import json

from nik_validators import InvalidNumberError, KKValidator, NIKValidator


def show_nik():
    print("=" * 70)
    print("NIK")
    print("=" * 70)

    nik = NIKValidator.set('3273012501990001')
    result = nik.parse()

    if result.valid:
        print(f"Valid NIK: {result.number}")
        print(f"  Gender: {result.gender}")
        print(f"  Born: {result.born.full}")
        print(f"  Age: {result.age.year} years, {result.age.month} months, {result.age.day} days")
        print(f"  Next birthday in: {result.next_birthday.month} months, {result.next_birthday.day} days")
        print(f"  Zodiac: {result.zodiac}")
        print(f"  Province: {result.address.province}")
        print(f"  City: {result.address.city}")
        print(f"  Sub-district: {result.address.sub_district}")
        print(f"  Postal code: {result.postal_code}")
        print(f"  Unique code: {result.unique_code}")
    else:
        print("Invalid NIK")


def show_kk():
    print("\n" + "=" * 70)
    print("KK")
    print("=" * 70)

    kk = KKValidator.set('3273012501990001')
    result = kk.parse()

    if result.valid:
        print(f"Valid KK: {result.number}")
        print(f"  Formatted: {kk.get_formatted_number()}")
        print(f"  Province: {result.address.province}")
        print(f"  City: {result.address.city}")
        print(f"  Sub-district: {result.address.sub_district}")
        print(f"  Postal code: {result.postal_code}")
    else:
        print("Invalid KK")


def show_errors():
    print("\n" + "=" * 70)
    print("Errors")
    print("=" * 70)

    for value in ('123456789012345', '123456789012345a'):
        try:
            NIKValidator.set(value)
        except InvalidNumberError as e:
            print(f"{value}: {e}")

    nik = NIKValidator.set('1234567890123456')
    print(f"1234567890123456: {', '.join(nik.get_validation_errors())}")


def show_array():
    print("\n" + "=" * 70)
    print("Array output")
    print("=" * 70)

    print(json.dumps(NIKValidator.set('3273012501990001').to_array(), indent=2))
    print(json.dumps(KKValidator.set('3273012501990001').to_array(), indent=2))


if __name__ == "__main__":
    show_nik()
    show_kk()
    show_errors()
    show_array()
