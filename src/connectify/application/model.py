"""Model: the address book plus the filtered lists currently displayed to the user."""

from collections.abc import Callable

from connectify.domain import AddressBook, Company, Person, ReadOnlyAddressBook


def SHOW_ALL(_entity) -> bool:
    return True


class Model:
    """Command indices are resolved against displayed_persons / displayed_companies."""

    def __init__(self, address_book: ReadOnlyAddressBook | None = None) -> None:
        self.address_book = AddressBook(address_book)
        self._person_filter: Callable[[Person], bool] = SHOW_ALL
        self._company_filter: Callable[[Company], bool] = SHOW_ALL

    def reset_data(self, new_data: ReadOnlyAddressBook) -> None:
        self.address_book.reset_data(new_data)

    def displayed_persons(self) -> list[Person]:
        return [p for p in self.address_book.get_person_list() if self._person_filter(p)]

    def displayed_companies(self) -> list[Company]:
        return [c for c in self.address_book.get_company_list() if self._company_filter(c)]

    def update_person_filter(self, predicate: Callable[[Person], bool]) -> None:
        self._person_filter = predicate

    def update_company_filter(self, predicate: Callable[[Company], bool]) -> None:
        self._company_filter = predicate
