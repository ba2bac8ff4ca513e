"""Builders shared by the tests."""

from connectify.domain import (
    Company,
    Person,
    PersonAddress,
    PersonEmail,
    PersonName,
    PersonPhone,
    PersonPriority,
    Tag,
)


def make_person(
    name: str = "Amy Bee",
    email: str = "amy@example.com",
    phone: str | None = "85355255",
    address: str | None = "123, Jurong West Ave 6, #08-111",
    tags: tuple[str, ...] = (),
    priority: int = 0,
) -> Person:
    return Person(
        name=PersonName(name),
        email=PersonEmail(email),
        phone=PersonPhone(phone) if phone is not None else None,
        address=PersonAddress(address) if address is not None else None,
        tags=frozenset(Tag(t) for t in tags),
        priority=PersonPriority(priority),
    )


def make_company(name: str = "Acme", **kwargs) -> Company:
    return Company(name=name, **kwargs)


ALICE = make_person("Alice Pauline", "alice@example.com", "94351253", tags=("friends",), priority=2)
BENSON = make_person("Benson Meier", "johnd@example.com", "98765432", tags=("owesMoney", "friends"), priority=5)
CARL = make_person("Carl Kurz", "heinz@example.com", "95352563", priority=1)
