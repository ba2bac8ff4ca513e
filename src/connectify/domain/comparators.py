"""Stock sort keys for AddressBook.sort and UniqueList.sort."""

from connectify.domain.company import Company
from connectify.domain.person import Person


def person_by_name(person: Person) -> str:
    return person.name.value


def person_by_priority(person: Person) -> int:
    """Highest priority first when used as a key (negated rank)."""
    return -person.rank()


def company_by_name(company: Company) -> str:
    return company.name
