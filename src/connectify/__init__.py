"""
Connectify core: clean-architecture layout.

- domain: Person, Company, value objects, unique lists, AddressBook. No outer dependencies.
- application: command use cases (AddressBookService), displayed lists (Model), ports, DTOs.
- infrastructure: adapters (InMemoryAddressBookStorage), phone normalization, settings.
"""

from connectify.application import AddressBookService, Model
from connectify.domain import AddressBook, Company, Person
from connectify.infrastructure import InMemoryAddressBookStorage, Settings

__all__ = [
    "AddressBook",
    "AddressBookService",
    "Company",
    "InMemoryAddressBookStorage",
    "Model",
    "Person",
    "Settings",
]
