"""Request DTOs and result types for the address-book commands.

Results are plain facts; formatting them for a user is the caller's job.
"""

from dataclasses import dataclass, fields

from connectify.domain import Company, Person

KIND_ENTITIES = "entities"
KIND_COMPANIES = "companies"
KIND_PEOPLE = "people"


# --- requests ---


@dataclass(frozen=True)
class PersonCardData:
    """Raw person fields from a caller. Only name and email are required."""

    name: str
    email: str
    phone: str | None = None
    address: str | None = None
    tags: tuple[str, ...] = ()
    priority: int | str | None = None


@dataclass(frozen=True)
class CompanyCardData:
    """Raw company fields from a caller. Only name is required."""

    name: str
    industry: str = ""
    location: str = ""
    description: str = ""
    website: str = ""
    email: str = ""
    phone: str = ""
    address: str = ""


@dataclass(frozen=True)
class EditPersonDescriptor:
    """Fields to overlay on an existing person. None means unchanged."""

    name: str | None = None
    email: str | None = None
    phone: str | None = None
    address: str | None = None
    tags: tuple[str, ...] | None = None
    priority: int | str | None = None

    def is_any_field_edited(self) -> bool:
        return any(getattr(self, f.name) is not None for f in fields(self))


@dataclass(frozen=True)
class EditCompanyDescriptor:
    """Fields to overlay on an existing company. None means unchanged."""

    name: str | None = None
    industry: str | None = None
    location: str | None = None
    description: str | None = None
    website: str | None = None
    email: str | None = None
    phone: str | None = None
    address: str | None = None

    def is_any_field_edited(self) -> bool:
        return any(getattr(self, f.name) is not None for f in fields(self))


@dataclass(frozen=True)
class EditRequest:
    """
    Edit the record at a 1-based index of the displayed list.
    With within_company, index points into the roster of the displayed company
    at company_index instead.
    """

    index: int | None
    descriptor: EditPersonDescriptor | EditCompanyDescriptor
    company_index: int | None = None
    within_company: bool = False


# --- success results ---


@dataclass(frozen=True)
class PersonAdded:
    person: Person


@dataclass(frozen=True)
class CompanyAdded:
    company: Company


@dataclass(frozen=True)
class PersonDeleted:
    person: Person


@dataclass(frozen=True)
class CompanyDeleted:
    company: Company


@dataclass(frozen=True)
class PersonEdited:
    person: Person


@dataclass(frozen=True)
class CompanyEdited:
    company: Company


@dataclass(frozen=True)
class PersonLinked:
    """person was appended to the roster of company (the new company value)."""

    company: Company
    person: Person


@dataclass(frozen=True)
class Listed:
    kind: str
    count: int


@dataclass(frozen=True)
class NothingListed:
    """The list asked for is empty."""

    kind: str


@dataclass(frozen=True)
class Ranked:
    persons: int
    companies: int


@dataclass(frozen=True)
class Cleared:
    pass


@dataclass(frozen=True)
class ExitRequested:
    pass


# --- failures ---


@dataclass(frozen=True)
class Invalid:
    """A field value failed its format rule."""

    field: str
    reason: str


@dataclass(frozen=True)
class DuplicatePerson:
    name: str


@dataclass(frozen=True)
class DuplicateCompany:
    name: str


@dataclass(frozen=True)
class MissingEditFields:
    """An edit named no field to change."""


@dataclass(frozen=True)
class InvalidIndex:
    """Index is missing or not a positive integer."""

    index: int | None


@dataclass(frozen=True)
class MissingCompanyReference:
    """A company-scoped edit did not say which company."""


@dataclass(frozen=True)
class InvalidCompanyIndex:
    index: int | None


@dataclass(frozen=True)
class IndexOutOfRange:
    """Index does not map to a displayed element."""

    index: int
    size: int


@dataclass(frozen=True)
class ElementNotFound:
    """The displayed element is no longer in the address book."""

    reason: str
