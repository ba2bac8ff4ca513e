"""Read-only observable views over the unique lists."""

from collections.abc import Callable, Sequence
from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")

CHANGE_ADD = "add"
CHANGE_SET = "set"
CHANGE_REMOVE = "remove"
CHANGE_REPLACE_ALL = "replace_all"
CHANGE_SORT = "sort"


@dataclass(frozen=True)
class ListChange:
    """One committed mutation. items holds the elements the change touched."""

    kind: str
    items: tuple = ()


Listener = Callable[[ListChange], None]


class ObservableListView(Sequence, Generic[T]):
    """
    Live, read-only sequence over a backing list owned by a unique list.
    Consumers may iterate, index and subscribe; they cannot mutate.
    """

    def __init__(self, backing: list) -> None:
        self._backing = backing
        self._listeners: list[Listener] = []

    def __getitem__(self, index):
        if isinstance(index, slice):
            return tuple(self._backing[index])
        return self._backing[index]

    def __len__(self) -> int:
        return len(self._backing)

    def __eq__(self, other) -> bool:
        if isinstance(other, ObservableListView):
            return self._backing == other._backing
        if isinstance(other, (list, tuple)):
            return list(self._backing) == list(other)
        return NotImplemented

    __hash__ = None

    def __repr__(self) -> str:
        return f"ObservableListView({self._backing!r})"

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register listener for change events. Returns a callable that unsubscribes it."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _notify(self, change: ListChange) -> None:
        """Called by the owning list after a mutation is committed."""
        first_error: Exception | None = None
        for listener in list(self._listeners):
            try:
                listener(change)
            except Exception as e:
                if first_error is None:
                    first_error = e
        if first_error is not None:
            raise first_error
