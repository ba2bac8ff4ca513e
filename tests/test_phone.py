"""Tests for company phone normalization."""

import phonenumbers
from phonenumbers import PhoneNumberFormat

from connectify.infrastructure import CompanyPhoneNormalizer

SG_OFFICE = phonenumbers.example_number("SG")


def test_international_number_ignores_region() -> None:
    typed = phonenumbers.format_number(SG_OFFICE, PhoneNumberFormat.INTERNATIONAL)
    normalize = CompanyPhoneNormalizer("US")
    assert normalize(typed) == phonenumbers.format_number(SG_OFFICE, PhoneNumberFormat.E164)


def test_national_number_read_in_default_region() -> None:
    typed = phonenumbers.format_number(SG_OFFICE, PhoneNumberFormat.NATIONAL)
    normalize = CompanyPhoneNormalizer(" sg ")
    assert normalize.default_region == "SG"
    assert normalize(f"  {typed} ") == phonenumbers.format_number(SG_OFFICE, PhoneNumberFormat.E164)


def test_national_number_without_region_kept_as_entered() -> None:
    typed = phonenumbers.format_number(SG_OFFICE, PhoneNumberFormat.NATIONAL)
    normalize = CompanyPhoneNormalizer()
    assert normalize.parse(typed) is None
    assert normalize(typed) == typed


def test_free_text_phone_kept_stripped() -> None:
    normalize = CompanyPhoneNormalizer("SG")
    assert normalize(" front desk, ext 42 ") == "front desk, ext 42"
    assert normalize("") == ""
    assert normalize.parse("+1") is None
    assert normalize.parse("   ") is None
