"""Species registry: look up a behaviour set by name."""

from __future__ import annotations

from farmyard.species.base import Species, SpeciesProfile
from farmyard.species.domestic import BUILTIN_SPECIES, CAT, COW, DOG, HEN, SHEEP

_registry: dict[str, Species] = {s.species_name().lower(): s for s in BUILTIN_SPECIES}


def get_species(name: str) -> Species | None:
    return _registry.get(name.lower())


def register_species(species: Species, replace: bool = False) -> None:
    key = species.species_name().lower()
    if key in _registry and not replace:
        raise ValueError(f"Species '{species.species_name()}' is already registered")
    _registry[key] = species


def available_species() -> list[str]:
    return sorted(s.species_name() for s in _registry.values())


__all__ = [
    "CAT",
    "COW",
    "DOG",
    "HEN",
    "SHEEP",
    "Species",
    "SpeciesProfile",
    "available_species",
    "get_species",
    "register_species",
]
