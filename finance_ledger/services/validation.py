"""Field checks shared by the services."""
from enum import Enum
from typing import Optional, Type, TypeVar

from finance_ledger.domain.errors import InvalidParameterError, NotFoundError, ValidationError

E = TypeVar("E", bound=Enum)


def require_text(value: Optional[str], message: str) -> str:
    """Return ``value`` stripped, or raise ValidationError if it is blank."""
    if value is None or not value.strip():
        raise ValidationError(message)
    return value.strip()


def require_id(value: Optional[str], resource: str) -> str:
    if value is None or not str(value).strip():
        raise NotFoundError(f"{resource} ID cannot be empty")
    return str(value).strip()


def parse_enum(enum_cls: Type[E], value, param: str, required: bool = True) -> Optional[E]:
    """Convert a raw string to ``enum_cls``.

    Empty values raise ValidationError when ``required`` and return None
    otherwise; unknown values raise InvalidParameterError.
    """
    if isinstance(value, enum_cls):
        return value
    if value is None or value == "":
        if required:
            raise ValidationError(f"{param} cannot be empty")
        return None
    try:
        return enum_cls(str(value).strip().lower())
    except ValueError:
        raise InvalidParameterError(param, str(value))
