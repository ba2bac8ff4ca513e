"""Infrastructure layer: concrete implementations of application ports and runtime helpers."""

from connectify.infrastructure.memory_storage import InMemoryAddressBookStorage
from connectify.infrastructure.phone import CompanyPhoneNormalizer
from connectify.infrastructure.sample_data import get_sample_address_book
from connectify.infrastructure.settings import Settings

__all__ = [
    "CompanyPhoneNormalizer",
    "InMemoryAddressBookStorage",
    "Settings",
    "get_sample_address_book",
]
