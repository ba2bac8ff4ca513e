"""Company phone numbers, stored in E.164 when phonenumbers recognises them."""

import logging

import phonenumbers
from phonenumbers import NumberParseException, PhoneNumberFormat

logger = logging.getLogger(__name__)


class CompanyPhoneNormalizer:
    """
    The normalize_phone callable handed to AddressBookService.

    Numbers typed without a country prefix are read in default_region. Company
    phone is a free-text field, so anything phonenumbers cannot validate is kept
    as entered, minus surrounding blanks.
    """

    def __init__(self, default_region: str | None = None) -> None:
        self.default_region = default_region.strip().upper() if default_region else None

    def parse(self, raw: str) -> phonenumbers.PhoneNumber | None:
        text = (raw or "").strip()
        if not text:
            return None
        try:
            number = phonenumbers.parse(text, self.default_region)
        except NumberParseException:
            return None
        return number if phonenumbers.is_valid_number(number) else None

    def __call__(self, raw: str) -> str:
        number = self.parse(raw)
        if number is None:
            logger.debug("Company phone kept as entered: %r", raw)
            return (raw or "").strip()
        return phonenumbers.format_number(number, PhoneNumberFormat.E164)
