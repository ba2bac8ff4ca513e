"""Base for records held by the unique lists."""

import uuid
from abc import ABC, abstractmethod
from dataclasses import dataclass, field


@dataclass(frozen=True)
class Entity(ABC):
    """
    Every record carries an internal handle for container bookkeeping.
    The handle never takes part in equality or hashing; business identity
    is decided by is_same().
    """

    id: str = field(
        default_factory=lambda: str(uuid.uuid4()),
        compare=False,
        repr=False,
        kw_only=True,
    )

    @abstractmethod
    def is_same(self, other: "Entity | None") -> bool:
        """True if other denotes the same real-world record (business identity)."""
