"""Company entity and its copy-on-write roster."""

from collections.abc import Iterable
from dataclasses import dataclass, field, replace

from connectify.domain.entity import Entity
from connectify.domain.errors import ValidationError
from connectify.domain.person import Person

_TEXT_FIELDS = (
    "industry",
    "location",
    "description",
    "website",
    "email",
    "phone",
    "address",
)


@dataclass(frozen=True)
class Company(Entity):
    """
    Represents a Company in the address book.
    The roster (persons) is an immutable tuple: it keeps insertion order and may
    hold the same person more than once. Every roster change returns a new Company.
    """

    name: str
    industry: str = ""
    location: str = ""
    description: str = ""
    website: str = ""
    email: str = ""
    phone: str = ""
    address: str = ""
    persons: tuple[Person, ...] = field(default_factory=tuple)

    def __post_init__(self):
        if not isinstance(self.name, str) or not self.name.strip():
            raise ValidationError("name", "Company name must be non-empty.")
        for name in _TEXT_FIELDS:
            if not isinstance(getattr(self, name), str):
                raise ValidationError(name, f"Company {name} must be a string.")
        persons = tuple(self.persons)
        if any(not isinstance(p, Person) for p in persons):
            raise TypeError("Company roster may only hold Person records.")
        object.__setattr__(self, "persons", persons)

    def is_same_company(self, other: "Company | None") -> bool:
        """Weaker notion of equality: both companies have the same name."""
        if other is self:
            return True
        return isinstance(other, Company) and other.name == self.name

    def is_same(self, other) -> bool:
        return self.is_same_company(other)

    def add_person_to_company(self, person: Person) -> "Company":
        """Return a copy of this company with person appended to the roster."""
        if person is None:
            raise TypeError("person must not be None")
        return replace(self, persons=self.persons + (person,))

    def replace_person_at(self, position: int, person: Person) -> "Company":
        """Return a copy with the roster entry at a 0-based position replaced."""
        if not 0 <= position < len(self.persons):
            raise IndexError(position)
        persons = list(self.persons)
        persons[position] = person
        return replace(self, persons=tuple(persons))

    def remove_person(self, person: Person) -> "Company":
        """Return a copy without any roster entry that is the same person."""
        return replace(
            self,
            persons=tuple(p for p in self.persons if not p.is_same_person(person)),
        )

    def has_person(self, person: Person) -> bool:
        return any(p.is_same_person(person) for p in self.persons)

    def with_persons(self, persons: Iterable[Person]) -> "Company":
        return replace(self, persons=tuple(persons))
