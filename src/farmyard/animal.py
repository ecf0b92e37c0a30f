"""The Animal entity: validated fields plus species behaviour."""

from __future__ import annotations

import logging
from datetime import date

from farmyard.models import Err, InvalidField, Ok, Result, Sex, ValidationError
from farmyard.species import Species, get_species
from farmyard.validation import parse_birth_date, parse_sex, validate_code, validate_weight

logger = logging.getLogger(__name__)

_VALIDATORS = {
    "code": validate_code,
    "birth_date": parse_birth_date,
    "sex": parse_sex,
    "weight": validate_weight,
}


def _resolve_species(value) -> Species:
    if isinstance(value, Species):
        return value
    if isinstance(value, str):
        species = get_species(value)
        if species is not None:
            return species
    logger.debug("Rejected species=%r", value)
    raise ValidationError(InvalidField.SPECIES, value, f"unknown species {value!r}")


class Animal:
    """A farm animal.

    Every field is validated on construction and again by its setter. A
    rejected value raises ValidationError and leaves the animal untouched,
    so an instance is always valid. Equality and hashing use the four data
    fields only; the species is a behaviour collaborator and is ignored.

    Instances are not thread-safe; guard shared ones with a lock.
    """

    __slots__ = ("_code", "_birth_date", "_sex", "_weight", "_species")

    def __init__(
        self,
        code: str,
        birth_date: str | date,
        sex: Sex | str,
        weight: float,
        species: Species | str,
        notation: str = "en",
    ):
        code = validate_code(code)
        sex = parse_sex(sex, notation)
        weight = validate_weight(weight)
        birth_date = parse_birth_date(birth_date)
        species = _resolve_species(species)

        self._code = code
        self._birth_date = birth_date
        self._sex = sex
        self._weight = weight
        self._species = species

    @classmethod
    def create(
        cls,
        code: str,
        birth_date: str | date,
        sex: Sex | str,
        weight: float,
        species: Species | str,
        notation: str = "en",
    ) -> Result["Animal"]:
        """Build an animal without raising: ``Ok(animal)`` or ``Err(error)``."""
        try:
            return Ok(cls(code, birth_date, sex, weight, species, notation))
        except ValidationError as exc:
            return Err(exc)

    # --- fields ---
    @property
    def code(self) -> str:
        return self._code

    @code.setter
    def code(self, value: str) -> None:
        self._code = validate_code(value)
        logger.debug("Animal code set to %s", self._code)

    @property
    def birth_date(self) -> date:
        return self._birth_date

    @birth_date.setter
    def birth_date(self, value: str | date) -> None:
        self._birth_date = parse_birth_date(value)
        logger.debug("Animal %s birth date set to %s", self._code, self._birth_date)

    @property
    def sex(self) -> Sex:
        return self._sex

    @sex.setter
    def sex(self, value: Sex | str) -> None:
        self._sex = parse_sex(value)
        logger.debug("Animal %s sex set to %s", self._code, self._sex.name)

    @property
    def weight(self) -> float:
        return self._weight

    @weight.setter
    def weight(self, value: float) -> None:
        self._weight = validate_weight(value)
        logger.debug("Animal %s weight set to %s", self._code, self._weight)

    @property
    def species(self) -> Species:
        return self._species

    def update(self, **changes) -> Result["Animal"]:
        """Replace several fields at once, all or nothing.

        Returns ``Ok(self)`` when every change is valid, otherwise
        ``Err(error)`` for the first invalid one with nothing applied.
        """
        unknown = set(changes) - set(_VALIDATORS)
        if unknown:
            raise TypeError(f"update() got unexpected field(s): {', '.join(sorted(unknown))}")

        validated = {}
        for name, value in changes.items():
            try:
                validated[name] = _VALIDATORS[name](value)
            except ValidationError as exc:
                return Err(exc)

        for name, value in validated.items():
            setattr(self, f"_{name}", value)
        if validated:
            logger.debug("Animal %s updated: %s", self._code, ", ".join(validated))
        return Ok(self)

    # --- behaviour ---
    def make_sound(self) -> str:
        return self._species.make_sound()

    def express_joy(self) -> str:
        return self._species.express_joy()

    def express_anger(self) -> str:
        return self._species.express_anger()

    def species_name(self) -> str:
        return self._species.species_name()

    # --- value semantics ---
    def _key(self) -> tuple:
        return (self._code, self._birth_date, self._sex, self._weight)

    def __eq__(self, other: object) -> bool:
        if self is other:
            return True
        if not isinstance(other, Animal):
            return NotImplemented
        return self._key() == other._key()

    def __hash__(self) -> int:
        return hash(self._key())

    def describe(self) -> str:
        return (
            f"Animal(code={self._code!r}, birth_date={self._birth_date.isoformat()}, "
            f"sex={self._sex.symbol()}, weight={self._weight!r}, "
            f"species={self.species_name()})"
        )

    __repr__ = describe

    def to_dict(self, notation: str = "en") -> dict:
        return {
            "code": self._code,
            "birth_date": self._birth_date.isoformat(),
            "sex": self._sex.symbol(notation),
            "weight": self._weight,
            "species": self.species_name(),
        }
