"""
Ordered lists that never hold two elements with the same business identity.
Every mutation goes through these classes so the invariant is checked in one place.
"""

import functools
from collections.abc import Callable, Iterable, Iterator
from typing import Any, Generic, TypeVar

from connectify.domain.company import Company
from connectify.domain.entity import Entity
from connectify.domain.errors import (
    CompanyNotFoundError,
    DuplicateCompanyError,
    DuplicateError,
    DuplicateListError,
    DuplicatePersonError,
    ElementNotFoundError,
    PersonNotFoundError,
)
from connectify.domain.observable import (
    CHANGE_ADD,
    CHANGE_REMOVE,
    CHANGE_REPLACE_ALL,
    CHANGE_SET,
    CHANGE_SORT,
    ListChange,
    ObservableListView,
)
from connectify.domain.person import Person

E = TypeVar("E", bound=Entity)


class UniqueList(Generic[E]):
    """Base for UniquePersonList and UniqueCompanyList. Lookups are linear scans."""

    def __init__(self, items: Iterable[E] | None = None) -> None:
        self._items: list[E] = []
        self._view: ObservableListView[E] = ObservableListView(self._items)
        if items is not None:
            self.set_all(items)

    def _duplicate_error(self, item: E) -> DuplicateError:
        return DuplicateError()

    def _not_found_error(self, item: E) -> ElementNotFoundError:
        return ElementNotFoundError()

    def _index_of(self, item: E) -> int:
        if item is None:
            raise TypeError("item must not be None")
        for i, existing in enumerate(self._items):
            if existing.is_same(item):
                return i
        return -1

    def contains(self, item: E) -> bool:
        return self._index_of(item) >= 0

    def __contains__(self, item) -> bool:
        return isinstance(item, Entity) and self.contains(item)

    def add(self, item: E) -> None:
        """Append item. Raises a DuplicateError if a same-identity element is present."""
        if self.contains(item):
            raise self._duplicate_error(item)
        self._items.append(item)
        self._view._notify(ListChange(CHANGE_ADD, (item,)))

    def set_element(self, target: E, edited: E) -> None:
        """
        Replace the element that is the same as target with edited.
        edited may keep target's identity; it may not take another element's.
        """
        if edited is None:
            raise TypeError("edited must not be None")
        index = self._index_of(target)
        if index < 0:
            raise self._not_found_error(target)
        for i, existing in enumerate(self._items):
            if i != index and existing.is_same(edited):
                raise self._duplicate_error(edited)
        self._items[index] = edited
        self._view._notify(ListChange(CHANGE_SET, (target, edited)))

    def remove(self, item: E) -> None:
        index = self._index_of(item)
        if index < 0:
            raise self._not_found_error(item)
        removed = self._items.pop(index)
        self._view._notify(ListChange(CHANGE_REMOVE, (removed,)))

    def set_all(self, items: "UniqueList[E] | Iterable[E]") -> None:
        """Replace the whole contents. Raises DuplicateListError if items are not unique."""
        self._view._notify(self._replace_all(items))

    def _replace_all(self, items: "UniqueList[E] | Iterable[E]") -> ListChange:
        """Validate and commit a full replace without notifying. Returns the pending change."""
        if items is None:
            raise TypeError("items must not be None")
        new_items = list(items)
        if any(item is None for item in new_items):
            raise TypeError("items must not contain None")
        if not _elements_are_unique(new_items):
            raise DuplicateListError(
                f"{type(self).__name__} cannot hold two elements with the same identity."
            )
        self._items[:] = new_items
        return ListChange(CHANGE_REPLACE_ALL, tuple(new_items))

    def sort(
        self,
        key: Callable[[E], Any] | None = None,
        reverse: bool = False,
        cmp: Callable[[E, E], int] | None = None,
    ) -> None:
        """Stable in-place sort; ties keep their prior relative order."""
        if cmp is not None:
            key = functools.cmp_to_key(cmp)
        self._items.sort(key=key, reverse=reverse)
        self._view._notify(ListChange(CHANGE_SORT, tuple(self._items)))

    def as_unmodifiable_observable_list(self) -> ObservableListView[E]:
        return self._view

    def __iter__(self) -> Iterator[E]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __eq__(self, other) -> bool:
        if other is self:
            return True
        if not isinstance(other, UniqueList):
            return NotImplemented
        return type(self) is type(other) and self._items == other._items

    def __hash__(self) -> int:
        return hash(tuple(self._items))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._items!r})"


def _elements_are_unique(items: list) -> bool:
    for i in range(len(items) - 1):
        for j in range(i + 1, len(items)):
            if items[i].is_same(items[j]):
                return False
    return True


class UniquePersonList(UniqueList[Person]):
    """Persons are unique by name (see Person.is_same_person)."""

    def _duplicate_error(self, item: Person) -> DuplicateError:
        return DuplicatePersonError(str(item.name))

    def _not_found_error(self, item: Person) -> ElementNotFoundError:
        return PersonNotFoundError(f"Person not found: {item.name}")

    def set_person(self, target: Person, edited: Person) -> None:
        self.set_element(target, edited)

    def set_persons(self, persons: Iterable[Person]) -> None:
        self.set_all(persons)


class UniqueCompanyList(UniqueList[Company]):
    """Companies are unique by name (see Company.is_same_company)."""

    def _duplicate_error(self, item: Company) -> DuplicateError:
        return DuplicateCompanyError(item.name)

    def _not_found_error(self, item: Company) -> ElementNotFoundError:
        return CompanyNotFoundError(f"Company not found: {item.name}")

    def set_company(self, target: Company, edited: Company) -> None:
        self.set_element(target, edited)

    def set_companies(self, companies: Iterable[Company]) -> None:
        self.set_all(companies)
