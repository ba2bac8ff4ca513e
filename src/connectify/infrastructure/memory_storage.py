"""In-memory implementation of AddressBookStorage (no file format)."""

from connectify.domain import AddressBook, ReadOnlyAddressBook


class InMemoryAddressBookStorage:
    """Keeps the last saved snapshot. Snapshots are copies, so later edits do not leak in."""

    def __init__(self, initial: ReadOnlyAddressBook | None = None) -> None:
        self._snapshot: AddressBook | None = AddressBook(initial) if initial is not None else None
        self.save_count = 0

    def read_address_book(self) -> ReadOnlyAddressBook | None:
        if self._snapshot is None:
            return None
        return AddressBook(self._snapshot)

    def save_address_book(self, address_book: ReadOnlyAddressBook) -> None:
        self._snapshot = AddressBook(address_book)
        self.save_count += 1
