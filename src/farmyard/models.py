"""Shared value types used across the farmyard package."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Generic, TypeVar, Union

T = TypeVar("T")


class InvalidField(Enum):
    CODE = "code"
    BIRTH_DATE = "birth_date"
    SEX = "sex"
    WEIGHT = "weight"
    SPECIES = "species"


class ValidationError(ValueError):
    """Raised when a field value breaks its constraint.

    ``field`` tells which constraint failed; callers that only care that the
    input was invalid can catch the exception and ignore it.
    """

    def __init__(self, field: InvalidField, value: Any, message: str = ""):
        self.field = field
        self.value = value
        self.message = message or f"invalid {field.value}: {value!r}"
        super().__init__(self.message)


# Letters per notation. "es" is the farm's native notation: M = mujer, H = hombre.
SEX_NOTATIONS: dict[str, dict[str, str]] = {
    "en": {"FEMALE": "F", "MALE": "M"},
    "es": {"FEMALE": "M", "MALE": "H"},
}


class Sex(Enum):
    FEMALE = "female"
    MALE = "male"

    @classmethod
    def from_symbol(cls, symbol: str, notation: str = "en") -> "Sex":
        letters = _notation(notation)
        for name, letter in letters.items():
            if symbol == letter:
                return cls[name]
        raise ValidationError(
            InvalidField.SEX,
            symbol,
            f"sex must be one of {sorted(letters.values())} in '{notation}' notation, "
            f"got {symbol!r}",
        )

    def symbol(self, notation: str = "en") -> str:
        return _notation(notation)[self.name]


def _notation(notation: str) -> dict[str, str]:
    try:
        return SEX_NOTATIONS[notation]
    except KeyError:
        raise ValueError(
            f"Unknown sex notation '{notation}', expected one of {sorted(SEX_NOTATIONS)}"
        ) from None


@dataclass(frozen=True)
class Ok(Generic[T]):
    value: T

    def is_ok(self) -> bool:
        return True

    def unwrap(self) -> T:
        return self.value


@dataclass(frozen=True)
class Err:
    error: ValidationError

    def is_ok(self) -> bool:
        return False

    def unwrap(self):
        raise self.error


Result = Union[Ok[T], Err]
