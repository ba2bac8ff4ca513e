"""Command-level use cases: add, delete, edit, link, list and rank over one Model."""

import logging
from collections.abc import Callable
from dataclasses import replace

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
from connectify.domain import (
    AddressBook,
    Company,
    DuplicateCompanyError,
    DuplicatePersonError,
    ElementNotFoundError,
    Person,
    PersonAddress,
    PersonEmail,
    PersonName,
    PersonPhone,
    PersonPriority,
    Tag,
    ValidationError,
)
from connectify.domain.comparators import company_by_name, person_by_priority

logger = logging.getLogger(__name__)


def _check_index(index: int | None, size: int) -> InvalidIndex | IndexOutOfRange | None:
    if index is None or isinstance(index, bool) or index <= 0:
        return InvalidIndex(index=index)
    if index > size:
        return IndexOutOfRange(index=index, size=size)
    return None


def _tags(raw_tags) -> frozenset[Tag]:
    return frozenset(Tag(t) for t in raw_tags)


def _priority(raw) -> PersonPriority:
    return PersonPriority() if raw is None else PersonPriority(raw)


class AddressBookService:
    """
    Drives the address book on behalf of a dispatch layer.
    Every method returns a result object; user-correctable problems never raise.
    Successful mutations are saved through the optional storage port.
    """

    def __init__(
        self,
        model: Model,
        *,
        storage: AddressBookStorage | None = None,
        normalize_phone: Callable[[str], str] | None = None,
    ) -> None:
        self._model = model
        self._storage = storage
        self._normalize_phone = normalize_phone

    @property
    def model(self) -> Model:
        return self._model

    @property
    def address_book(self) -> AddressBook:
        return self._model.address_book

    def _save(self) -> None:
        if self._storage is not None:
            self._storage.save_address_book(self.address_book)

    def _company_phone(self, raw: str) -> str:
        phone = (raw or "").strip()
        if phone and self._normalize_phone is not None:
            return self._normalize_phone(phone)
        return phone

    # --- builders ---

    def _build_person(self, card: PersonCardData) -> Person:
        return Person(
            name=PersonName(card.name),
            email=PersonEmail(card.email),
            phone=PersonPhone(card.phone) if card.phone is not None else None,
            address=PersonAddress(card.address) if card.address is not None else None,
            tags=_tags(card.tags),
            priority=_priority(card.priority),
        )

    def _build_company(self, card: CompanyCardData) -> Company:
        return Company(
            name=(card.name or "").strip(),
            industry=card.industry,
            location=card.location,
            description=card.description,
            website=card.website,
            email=card.email,
            phone=self._company_phone(card.phone),
            address=card.address,
        )

    def _edit_person(self, person: Person, descriptor: EditPersonDescriptor) -> Person:
        """Overlay the supplied fields on person. The internal handle is kept."""
        changes = {}
        if descriptor.name is not None:
            changes["name"] = PersonName(descriptor.name)
        if descriptor.email is not None:
            changes["email"] = PersonEmail(descriptor.email)
        if descriptor.phone is not None:
            changes["phone"] = PersonPhone(descriptor.phone)
        if descriptor.address is not None:
            changes["address"] = PersonAddress(descriptor.address)
        if descriptor.tags is not None:
            changes["tags"] = _tags(descriptor.tags)
        if descriptor.priority is not None:
            changes["priority"] = PersonPriority(descriptor.priority)
        return replace(person, **changes)

    def _edit_company(self, company: Company, descriptor: EditCompanyDescriptor) -> Company:
        changes = {
            name: getattr(descriptor, name)
            for name in (
                "name",
                "industry",
                "location",
                "description",
                "website",
                "email",
                "address",
            )
            if getattr(descriptor, name) is not None
        }
        if "name" in changes:
            changes["name"] = changes["name"].strip()
        if descriptor.phone is not None:
            changes["phone"] = self._company_phone(descriptor.phone)
        return replace(company, **changes)

    # --- add ---

    def add_person(self, card: PersonCardData) -> PersonAdded | Invalid | DuplicatePerson:
        """Validate the card and add the person. Duplicate names are rejected."""
        try:
            person = self._build_person(card)
        except ValidationError as e:
            logger.info("Add person rejected: invalid %s", e.field)
            return Invalid(field=e.field, reason=e.message)
        try:
            self.address_book.add_person(person)
        except DuplicatePersonError:
            logger.info("Add person rejected: duplicate %s", person.name)
            return DuplicatePerson(name=str(person.name))
        self._model.update_person_filter(SHOW_ALL)
        self._save()
        logger.info("Added person %s", person.name)
        return PersonAdded(person=person)

    def add_company(self, card: CompanyCardData) -> CompanyAdded | Invalid | DuplicateCompany:
        try:
            company = self._build_company(card)
        except ValidationError as e:
            logger.info("Add company rejected: invalid %s", e.field)
            return Invalid(field=e.field, reason=e.message)
        try:
            self.address_book.add_company(company)
        except DuplicateCompanyError:
            logger.info("Add company rejected: duplicate %s", company.name)
            return DuplicateCompany(name=company.name)
        self._model.update_company_filter(SHOW_ALL)
        self._save()
        logger.info("Added company %s", company.name)
        return CompanyAdded(company=company)

    # --- delete ---

    def delete_person(
        self, index: int | None
    ) -> PersonDeleted | InvalidIndex | IndexOutOfRange | ElementNotFound:
        """Delete the person at a 1-based index of the displayed list, and drop them from rosters."""
        displayed = self._model.displayed_persons()
        failure = _check_index(index, len(displayed))
        if failure is not None:
            return failure
        person = displayed[index - 1]
        try:
            self.address_book.remove_person(person)
        except ElementNotFoundError as e:
            return ElementNotFound(reason=str(e))
        for company in list(self.address_book.get_company_list()):
            if company.has_person(person):
                self.address_book.set_company(company, company.remove_person(person))
        self._save()
        logger.info("Deleted person %s", person.name)
        return PersonDeleted(person=person)

    def delete_company(
        self, index: int | None
    ) -> CompanyDeleted | InvalidIndex | IndexOutOfRange | ElementNotFound:
        displayed = self._model.displayed_companies()
        failure = _check_index(index, len(displayed))
        if failure is not None:
            return failure
        company = displayed[index - 1]
        try:
            self.address_book.remove_company(company)
        except ElementNotFoundError as e:
            return ElementNotFound(reason=str(e))
        self._save()
        logger.info("Deleted company %s", company.name)
        return CompanyDeleted(company=company)

    # --- edit ---

    def edit(self, request: EditRequest):
        """
        Overlay the descriptor's fields on the addressed record.
        Failures are reported in this order: no field to edit, invalid index,
        missing company reference, invalid company index, index out of range,
        duplicate identity.
        """
        descriptor = request.descriptor
        if not descriptor.is_any_field_edited():
            return MissingEditFields()
        index = request.index
        if index is None or isinstance(index, bool) or index <= 0:
            return InvalidIndex(index=index)
        try:
            if isinstance(descriptor, EditCompanyDescriptor):
                return self._edit_company_at(index, descriptor)
            if request.within_company:
                return self._edit_person_in_company(index, request.company_index, descriptor)
            return self._edit_person_at(index, descriptor)
        except ValidationError as e:
            logger.info("Edit rejected: invalid %s", e.field)
            return Invalid(field=e.field, reason=e.message)

    def _edit_person_at(self, index: int, descriptor: EditPersonDescriptor):
        displayed = self._model.displayed_persons()
        if index > len(displayed):
            return IndexOutOfRange(index=index, size=len(displayed))
        target = displayed[index - 1]
        edited = self._edit_person(target, descriptor)
        try:
            self.address_book.set_person(target, edited)
        except DuplicatePersonError:
            logger.info("Edit rejected: duplicate %s", edited.name)
            return DuplicatePerson(name=str(edited.name))
        except ElementNotFoundError as e:
            return ElementNotFound(reason=str(e))
        self._propagate_to_rosters(target, descriptor)
        self._model.update_person_filter(SHOW_ALL)
        self._save()
        logger.info("Edited person %s", edited.name)
        return PersonEdited(person=edited)

    def _edit_person_in_company(
        self, index: int, company_index: int | None, descriptor: EditPersonDescriptor
    ):
        if company_index is None:
            return MissingCompanyReference()
        if isinstance(company_index, bool) or company_index <= 0:
            return InvalidCompanyIndex(index=company_index)
        companies = self._model.displayed_companies()
        if company_index > len(companies):
            return IndexOutOfRange(index=company_index, size=len(companies))
        company = companies[company_index - 1]
        if index > len(company.persons):
            return IndexOutOfRange(index=index, size=len(company.persons))
        target = company.persons[index - 1]
        edited = self._edit_person(target, descriptor)

        book = self.address_book
        for existing in book.get_person_list():
            if existing.is_same_person(edited) and not existing.is_same_person(target):
                logger.info("Edit rejected: duplicate %s", edited.name)
                return DuplicatePerson(name=str(edited.name))
        top_level = next((p for p in book.get_person_list() if p.is_same_person(target)), None)
        top_level_edited = (
            self._edit_person(top_level, descriptor) if top_level is not None else None
        )

        book.set_company(company, company.replace_person_at(index - 1, edited))
        if top_level is not None:
            book.set_person(top_level, top_level_edited)
        self._propagate_to_rosters(target, descriptor)
        self._save()
        logger.info("Edited person %s in company %s", edited.name, company.name)
        return PersonEdited(person=edited)

    def _propagate_to_rosters(self, target: Person, descriptor: EditPersonDescriptor) -> None:
        for company in list(self.address_book.get_company_list()):
            if not company.has_person(target):
                continue
            roster = [
                self._edit_person(p, descriptor) if p.is_same_person(target) else p
                for p in company.persons
            ]
            self.address_book.set_company(company, company.with_persons(roster))

    def _edit_company_at(self, index: int, descriptor: EditCompanyDescriptor):
        displayed = self._model.displayed_companies()
        if index > len(displayed):
            return IndexOutOfRange(index=index, size=len(displayed))
        target = displayed[index - 1]
        edited = self._edit_company(target, descriptor)
        try:
            self.address_book.set_company(target, edited)
        except DuplicateCompanyError:
            logger.info("Edit rejected: duplicate company %s", edited.name)
            return DuplicateCompany(name=edited.name)
        except ElementNotFoundError as e:
            return ElementNotFound(reason=str(e))
        self._model.update_company_filter(SHOW_ALL)
        self._save()
        logger.info("Edited company %s", edited.name)
        return CompanyEdited(company=edited)

    # --- company roster ---

    def add_person_to_company(
        self, person_index: int | None, company_index: int | None
    ) -> PersonLinked | InvalidIndex | InvalidCompanyIndex | IndexOutOfRange | ElementNotFound:
        """Append the displayed person at person_index to the roster of the displayed company."""
        if person_index is None or isinstance(person_index, bool) or person_index <= 0:
            return InvalidIndex(index=person_index)
        if company_index is None or isinstance(company_index, bool) or company_index <= 0:
            return InvalidCompanyIndex(index=company_index)
        persons = self._model.displayed_persons()
        companies = self._model.displayed_companies()
        if person_index > len(persons):
            return IndexOutOfRange(index=person_index, size=len(persons))
        if company_index > len(companies):
            return IndexOutOfRange(index=company_index, size=len(companies))
        person = persons[person_index - 1]
        company = companies[company_index - 1]
        updated = company.add_person_to_company(person)
        try:
            self.address_book.set_company(company, updated)
        except ElementNotFoundError as e:
            return ElementNotFound(reason=str(e))
        self._save()
        logger.info("Added person %s to company %s", person.name, company.name)
        return PersonLinked(company=updated, person=person)

    # --- queries ---

    def list_all(self) -> Listed | NothingListed:
        self._model.update_person_filter(SHOW_ALL)
        self._model.update_company_filter(SHOW_ALL)
        count = len(self.address_book.get_person_list()) + len(
            self.address_book.get_company_list()
        )
        if count == 0:
            return NothingListed(kind=KIND_ENTITIES)
        return Listed(kind=KIND_ENTITIES, count=count)

    def list_companies(self) -> Listed | NothingListed:
        self._model.update_company_filter(SHOW_ALL)
        count = len(self._model.displayed_companies())
        if count == 0:
            return NothingListed(kind=KIND_COMPANIES)
        return Listed(kind=KIND_COMPANIES, count=count)

    def list_people(self) -> Listed | NothingListed:
        self._model.update_person_filter(SHOW_ALL)
        count = len(self._model.displayed_persons())
        if count == 0:
            return NothingListed(kind=KIND_PEOPLE)
        return Listed(kind=KIND_PEOPLE, count=count)

    # --- whole book ---

    def rank(self) -> Ranked:
        """Order people by priority (highest first) and companies by name."""
        self.address_book.sort(company_key=company_by_name, person_key=person_by_priority)
        self._save()
        return Ranked(
            persons=len(self.address_book.get_person_list()),
            companies=len(self.address_book.get_company_list()),
        )

    def clear(self) -> Cleared:
        self._model.reset_data(AddressBook())
        self._save()
        logger.info("Cleared address book")
        return Cleared()

    def exit(self) -> ExitRequested:
        return ExitRequested()
