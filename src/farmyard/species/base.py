"""Abstract behaviour contract every species supplies."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass


class Species(ABC):
    @abstractmethod
    def make_sound(self) -> str:
        """Describe the characteristic sound of the species."""
        ...

    @abstractmethod
    def express_joy(self) -> str:
        """Describe how the species shows it is happy."""
        ...

    @abstractmethod
    def express_anger(self) -> str:
        """Describe how the species reacts when angry or attacking."""
        ...

    @abstractmethod
    def species_name(self) -> str:
        """Human-readable species label, e.g. "Dog"."""
        ...


@dataclass(frozen=True)
class SpeciesProfile(Species):
    """A species whose behaviours are fixed strings."""

    name: str
    sound: str
    joy: str
    anger: str

    def __post_init__(self) -> None:
        for attr in ("name", "sound", "joy", "anger"):
            if not getattr(self, attr):
                raise ValueError(f"SpeciesProfile {attr} must be non-empty")

    def make_sound(self) -> str:
        return self.sound

    def express_joy(self) -> str:
        return self.joy

    def express_anger(self) -> str:
        return self.anger

    def species_name(self) -> str:
        return self.name
