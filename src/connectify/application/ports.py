"""Application ports (interfaces). Implemented by infrastructure adapters."""

from typing import Protocol

from connectify.domain import ReadOnlyAddressBook


class AddressBookStorage(Protocol):
    """Loads and saves whole address-book snapshots. The format is the adapter's concern."""

    def read_address_book(self) -> ReadOnlyAddressBook | None:
        """Return the stored snapshot, or None if nothing has been saved yet."""
        ...

    def save_address_book(self, address_book: ReadOnlyAddressBook) -> None:
        """Store a full snapshot, replacing any previous one."""
        ...
