"""Domain layer: entities, value objects and the address book. No dependencies on outer layers."""

from connectify.domain.address_book import AddressBook, ReadOnlyAddressBook
from connectify.domain.company import Company
from connectify.domain.entity import Entity
from connectify.domain.errors import (
    CompanyNotFoundError,
    ConnectifyError,
    DuplicateCompanyError,
    DuplicateError,
    DuplicateListError,
    DuplicatePersonError,
    ElementNotFoundError,
    PersonNotFoundError,
    ValidationError,
)
from connectify.domain.observable import ListChange, ObservableListView
from connectify.domain.person import Person
from connectify.domain.unique_list import UniqueCompanyList, UniqueList, UniquePersonList
from connectify.domain.values import (
    PersonAddress,
    PersonEmail,
    PersonName,
    PersonPhone,
    PersonPriority,
    Tag,
)

__all__ = [
    "AddressBook",
    "Company",
    "CompanyNotFoundError",
    "ConnectifyError",
    "DuplicateCompanyError",
    "DuplicateError",
    "DuplicateListError",
    "DuplicatePersonError",
    "ElementNotFoundError",
    "Entity",
    "ListChange",
    "ObservableListView",
    "Person",
    "PersonAddress",
    "PersonEmail",
    "PersonName",
    "PersonNotFoundError",
    "PersonPhone",
    "PersonPriority",
    "ReadOnlyAddressBook",
    "Tag",
    "UniqueCompanyList",
    "UniqueList",
    "UniquePersonList",
    "ValidationError",
]
