"""Sample persons and companies for a fresh address book."""

from connectify.domain import (
    AddressBook,
    Company,
    Person,
    PersonAddress,
    PersonEmail,
    PersonName,
    PersonPhone,
    PersonPriority,
    Tag,
)


def _person(name, phone, email, address, tags, priority) -> Person:
    return Person(
        name=PersonName(name),
        email=PersonEmail(email),
        phone=PersonPhone(phone),
        address=PersonAddress(address),
        tags=frozenset(Tag(t) for t in tags),
        priority=PersonPriority(priority),
    )


def get_sample_persons() -> list[Person]:
    return [
        _person("Alex Yeoh", "87438807", "alexyeoh@example.com",
                "Blk 30 Geylang Street 29, #06-40", ["friends"], 3),
        _person("Bernice Yu", "99272758", "berniceyu@example.com",
                "Blk 30 Lorong 3 Serangoon Gardens, #07-18", ["colleagues", "friends"], 4),
        _person("Charlotte Oliveiro", "93210283", "charlotte@example.com",
                "Blk 11 Ang Mo Kio Street 74, #11-04", ["neighbours"], 1),
        _person("David Li", "91031282", "lidavid@example.com",
                "Blk 436 Serangoon Gardens Street 26, #16-43", ["family"], 2),
    ]


def get_sample_companies(persons: list[Person]) -> list[Company]:
    acme = Company(
        name="Acme Logistics",
        industry="Logistics",
        location="Singapore",
        description="Regional freight forwarder",
        website="https://acme.example.com",
        email="hello@acme.example.com",
        phone="+6562223333",
        address="1 Harbourfront Ave",
    )
    initech = Company(name="Initech", industry="Software", location="Singapore")
    return [
        acme.add_person_to_company(persons[0]).add_person_to_company(persons[1]),
        initech.add_person_to_company(persons[3]),
    ]


def get_sample_address_book() -> AddressBook:
    book = AddressBook()
    persons = get_sample_persons()
    book.set_persons(persons)
    book.set_companies(get_sample_companies(persons))
    return book
