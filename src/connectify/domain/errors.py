"""Domain errors. Raised by value objects and the unique lists; the application layer maps them to results."""


class ConnectifyError(Exception):
    """Base class for every error raised by the domain layer."""


class ValidationError(ConnectifyError, ValueError):
    """A raw field value does not satisfy its format rule."""

    def __init__(self, field: str, message: str) -> None:
        super().__init__(message)
        self.field = field
        self.message = message


class DuplicateError(ConnectifyError):
    """An add or edit would put two same-identity elements in one list."""


def _duplicate_message(kind: str, name: str) -> str:
    message = f"Operation would result in duplicate {kind}"
    return f"{message}: {name}" if name else message


class DuplicatePersonError(DuplicateError):
    def __init__(self, name: str = "") -> None:
        super().__init__(_duplicate_message("persons", name))
        self.name = name


class DuplicateCompanyError(DuplicateError):
    def __init__(self, name: str = "") -> None:
        super().__init__(_duplicate_message("companies", name))
        self.name = name


class DuplicateListError(ConnectifyError):
    """A bulk replace was given a list that already contains same-identity elements."""


class ElementNotFoundError(ConnectifyError):
    """The target of a set or remove is not in the list."""


class PersonNotFoundError(ElementNotFoundError):
    pass


class CompanyNotFoundError(ElementNotFoundError):
    pass
