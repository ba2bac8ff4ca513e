"""Validated value objects for Person fields. Immutable once constructed."""

import re
from dataclasses import dataclass

from connectify.domain.errors import ValidationError

PRIORITY_MIN = 0
PRIORITY_MAX = 5
DEFAULT_PRIORITY = 0

_NAME_RE = re.compile(r"[A-Za-z0-9][A-Za-z0-9 ]*")
_PHONE_RE = re.compile(r"\+?[0-9]{3,15}")
_TAG_RE = re.compile(r"[A-Za-z0-9]+")
_ADDRESS_RE = re.compile(r"\S.*", re.DOTALL)
_PRIORITY_RE = re.compile(r"[+-]?[0-9]+")

_EMAIL_LOCAL = r"[A-Za-z0-9]+(?:[+_.\-][A-Za-z0-9]+)*"
_DOMAIN_LABEL = r"[A-Za-z0-9](?:[A-Za-z0-9\-]*[A-Za-z0-9])?"
_DOMAIN_LAST = r"[A-Za-z0-9][A-Za-z0-9\-]*[A-Za-z0-9]"
_EMAIL_RE = re.compile(rf"{_EMAIL_LOCAL}@(?:{_DOMAIN_LABEL}\.)*{_DOMAIN_LAST}")

NAME_CONSTRAINTS = (
    "Names should only contain alphanumeric characters and spaces, and it should not be blank"
)
PHONE_CONSTRAINTS = (
    "Phone numbers should only contain digits, optionally prefixed by '+', "
    "and be between 3 and 15 digits long"
)
EMAIL_CONSTRAINTS = (
    "Emails should be of the format local-part@domain. The local-part holds alphanumeric "
    "characters and +_.- (not at the start or end); the domain is made of labels separated "
    "by periods, and the last label must be at least 2 characters long"
)
ADDRESS_CONSTRAINTS = "Addresses can take any values, and it should not be blank"
TAG_CONSTRAINTS = "Tag names should be alphanumeric"
PRIORITY_CONSTRAINTS = (
    f"Priority should be a whole number between {PRIORITY_MIN} and {PRIORITY_MAX}"
)


def _require_match(pattern: re.Pattern, value, field: str, message: str) -> None:
    if not isinstance(value, str) or pattern.fullmatch(value) is None:
        raise ValidationError(field, message)


@dataclass(frozen=True)
class PersonName:
    value: str

    def __post_init__(self):
        _require_match(_NAME_RE, self.value, "name", NAME_CONSTRAINTS)

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class PersonPhone:
    value: str

    def __post_init__(self):
        _require_match(_PHONE_RE, self.value, "phone", PHONE_CONSTRAINTS)

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class PersonEmail:
    value: str

    def __post_init__(self):
        _require_match(_EMAIL_RE, self.value, "email", EMAIL_CONSTRAINTS)

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class PersonAddress:
    value: str

    def __post_init__(self):
        _require_match(_ADDRESS_RE, self.value, "address", ADDRESS_CONSTRAINTS)

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Tag:
    name: str

    def __post_init__(self):
        _require_match(_TAG_RE, self.name, "tag", TAG_CONSTRAINTS)

    def __str__(self) -> str:
        return f"[{self.name}]"


@dataclass(frozen=True, order=True)
class PersonPriority:
    """
    Ranking weight of a Person. Higher means more important.
    Accepts an int or a numeric string; bools are rejected.
    """

    value: int = DEFAULT_PRIORITY

    def __post_init__(self):
        value = self.value
        if isinstance(value, str):
            if _PRIORITY_RE.fullmatch(value.strip()) is None:
                raise ValidationError("priority", PRIORITY_CONSTRAINTS)
            value = int(value.strip())
        if isinstance(value, bool) or not isinstance(value, int):
            raise ValidationError("priority", PRIORITY_CONSTRAINTS)
        if not PRIORITY_MIN <= value <= PRIORITY_MAX:
            raise ValidationError("priority", PRIORITY_CONSTRAINTS)
        object.__setattr__(self, "value", value)

    def __str__(self) -> str:
        return str(self.value)
