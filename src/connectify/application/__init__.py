"""Application layer: command use cases, the displayed-list model, ports and DTOs. Depends only on domain."""

from connectify.application.address_book_service import AddressBookService
from connectify.application.dto import (
    KIND_COMPANIES,
    KIND_ENTITIES,
    KIND_PEOPLE,
    Cleared,
    CompanyAdded,
    CompanyCardData,
    CompanyDeleted,
    CompanyEdited,
    DuplicateCompany,
    DuplicatePerson,
    EditCompanyDescriptor,
    EditPersonDescriptor,
    EditRequest,
    ElementNotFound,
    ExitRequested,
    IndexOutOfRange,
    Invalid,
    InvalidCompanyIndex,
    InvalidIndex,
    Listed,
    MissingCompanyReference,
    MissingEditFields,
    NothingListed,
    PersonAdded,
    PersonCardData,
    PersonDeleted,
    PersonEdited,
    PersonLinked,
    Ranked,
)
from connectify.application.model import SHOW_ALL, Model
from connectify.application.ports import AddressBookStorage

__all__ = [
    "KIND_COMPANIES",
    "KIND_ENTITIES",
    "KIND_PEOPLE",
    "SHOW_ALL",
    "AddressBookService",
    "AddressBookStorage",
    "Cleared",
    "CompanyAdded",
    "CompanyCardData",
    "CompanyDeleted",
    "CompanyEdited",
    "DuplicateCompany",
    "DuplicatePerson",
    "EditCompanyDescriptor",
    "EditPersonDescriptor",
    "EditRequest",
    "ElementNotFound",
    "ExitRequested",
    "IndexOutOfRange",
    "Invalid",
    "InvalidCompanyIndex",
    "InvalidIndex",
    "Listed",
    "MissingCompanyReference",
    "MissingEditFields",
    "Model",
    "NothingListed",
    "PersonAdded",
    "PersonCardData",
    "PersonDeleted",
    "PersonEdited",
    "PersonLinked",
    "Ranked",
]
