"""AddressBook: aggregate root over the person and company lists."""

from collections.abc import Callable, Iterable, Sequence
from typing import Any, Protocol

from connectify.domain.company import Company
from connectify.domain.observable import ObservableListView
from connectify.domain.person import Person
from connectify.domain.unique_list import UniqueCompanyList, UniquePersonList


class ReadOnlyAddressBook(Protocol):
    """Unmodifiable view of an address book."""

    def get_person_list(self) -> Sequence[Person]:
        ...

    def get_company_list(self) -> Sequence[Company]:
        ...


class AddressBook:
    """
    Wraps all data at the address-book level.
    Duplicates are not allowed (by is_same_person / is_same_company).
    """

    def __init__(self, to_be_copied: ReadOnlyAddressBook | None = None) -> None:
        self._persons = UniquePersonList()
        self._companies = UniqueCompanyList()
        if to_be_copied is not None:
            self.reset_data(to_be_copied)

    # list overwrite operations

    def set_persons(self, persons: Iterable[Person]) -> None:
        """Replace the person list. persons must not contain duplicate persons."""
        self._persons.set_persons(persons)

    def set_companies(self, companies: Iterable[Company]) -> None:
        """Replace the company list. companies must not contain duplicate companies."""
        self._companies.set_companies(companies)

    def reset_data(self, new_data: ReadOnlyAddressBook) -> None:
        """
        Replace both lists with the contents of new_data. Not a merge.
        Both lists are checked and committed before any listener is notified,
        so a failing listener cannot leave the book half reset.
        """
        if new_data is None:
            raise TypeError("new_data must not be None")
        persons = UniquePersonList(new_data.get_person_list())
        companies = UniqueCompanyList(new_data.get_company_list())
        person_change = self._persons._replace_all(persons)
        company_change = self._companies._replace_all(companies)

        first_error: Exception | None = None
        for view, change in (
            (self.get_person_list(), person_change),
            (self.get_company_list(), company_change),
        ):
            try:
                view._notify(change)
            except Exception as e:
                if first_error is None:
                    first_error = e
        if first_error is not None:
            raise first_error

    # person-level operations

    def has_person(self, person: Person) -> bool:
        """True if a person with the same identity as person is in the address book."""
        return self._persons.contains(person)

    def add_person(self, person: Person) -> None:
        self._persons.add(person)

    def set_person(self, target: Person, edited: Person) -> None:
        """
        Replace target with edited. target must exist; edited must not take the
        identity of another person in the address book.
        """
        self._persons.set_person(target, edited)

    def remove_person(self, key: Person) -> None:
        self._persons.remove(key)

    # company-level operations

    def has_company(self, company: Company) -> bool:
        return self._companies.contains(company)

    def add_company(self, company: Company) -> None:
        self._companies.add(company)

    def set_company(self, target: Company, edited: Company) -> None:
        self._companies.set_company(target, edited)

    def remove_company(self, key: Company) -> None:
        self._companies.remove(key)

    # whole-book operations

    def sort(
        self,
        company_key: Callable[[Company], Any] | None = None,
        person_key: Callable[[Person], Any] | None = None,
        *,
        reverse_companies: bool = False,
        reverse_persons: bool = False,
    ) -> None:
        """Sort both lists independently. A None key leaves that list as it is."""
        if company_key is not None:
            self._companies.sort(key=company_key, reverse=reverse_companies)
        if person_key is not None:
            self._persons.sort(key=person_key, reverse=reverse_persons)

    def get_person_list(self) -> ObservableListView[Person]:
        return self._persons.as_unmodifiable_observable_list()

    def get_company_list(self) -> ObservableListView[Company]:
        return self._companies.as_unmodifiable_observable_list()

    def __eq__(self, other) -> bool:
        if other is self:
            return True
        if not isinstance(other, AddressBook):
            return NotImplemented
        return self._companies == other._companies and self._persons == other._persons

    def __hash__(self) -> int:
        return hash(self._persons)

    def __repr__(self) -> str:
        return f"AddressBook(companies={list(self._companies)!r}, persons={list(self._persons)!r})"
