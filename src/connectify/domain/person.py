"""Person entity."""

from dataclasses import dataclass, field

from connectify.domain.entity import Entity
from connectify.domain.values import (
    PersonAddress,
    PersonEmail,
    PersonName,
    PersonPhone,
    PersonPriority,
    Tag,
)


@dataclass(frozen=True)
class Person(Entity):
    """
    Represents a Person in the address book.
    Guarantees: fields are validated value objects and the record is immutable.
    Two persons are the same person when their names match exactly; they are
    equal when every field matches, including tags and priority.
    """

    name: PersonName
    email: PersonEmail
    phone: PersonPhone | None = None
    address: PersonAddress | None = None
    tags: frozenset[Tag] = field(default_factory=frozenset)
    priority: PersonPriority = field(default_factory=PersonPriority)

    def __post_init__(self):
        if not isinstance(self.name, PersonName):
            raise TypeError("Person name must be a PersonName.")
        if not isinstance(self.email, PersonEmail):
            raise TypeError("Person email must be a PersonEmail.")
        object.__setattr__(self, "tags", frozenset(self.tags))

    def is_same_person(self, other: "Person | None") -> bool:
        """Weaker notion of equality: both persons have the same name."""
        if other is self:
            return True
        return isinstance(other, Person) and other.name == self.name

    def is_same(self, other) -> bool:
        return self.is_same_person(other)

    def rank(self) -> int:
        return self.priority.value
