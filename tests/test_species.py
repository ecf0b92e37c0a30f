"""Tests for the species contract and registry."""

import pytest

from farmyard.animal import Animal
from farmyard.models import Sex
from farmyard.species import (
    CAT,
    DOG,
    Species,
    SpeciesProfile,
    available_species,
    get_species,
    register_species,
)
from farmyard.species import _registry


@pytest.fixture
def clean_registry():
    saved = dict(_registry)
    yield
    _registry.clear()
    _registry.update(saved)


class Goat(Species):
    def make_sound(self) -> str:
        return "Meeeh!"

    def express_joy(self) -> str:
        return "jumps onto the nearest rock"

    def express_anger(self) -> str:
        return "rams with its horns"

    def species_name(self) -> str:
        return "Goat"


def test_species_is_abstract():
    with pytest.raises(TypeError):
        Species()


def test_builtin_species_return_non_empty_strings():
    for name in available_species():
        species = get_species(name)
        for behaviour in (
            species.make_sound,
            species.express_joy,
            species.express_anger,
            species.species_name,
        ):
            assert isinstance(behaviour(), str)
            assert behaviour()


def test_available_species_sorted():
    names = available_species()
    assert names == sorted(names)
    assert {"Cat", "Cow", "Dog", "Hen", "Sheep"} <= set(names)


def test_get_species_is_case_insensitive():
    assert get_species("DOG") is DOG
    assert get_species("cat") is CAT
    assert get_species("unicorn") is None


def test_profile_requires_all_strings():
    with pytest.raises(ValueError, match="sound must be non-empty"):
        SpeciesProfile(name="Duck", sound="", joy="quacks", anger="bites")


def test_register_custom_species(clean_registry):
    register_species(Goat())
    assert "Goat" in available_species()
    animal = Animal("g0at1", "2022-03-10", Sex.FEMALE, 35.0, "goat")
    assert animal.make_sound() == "Meeeh!"
    assert animal.species_name() == "Goat"


def test_register_duplicate_raises(clean_registry):
    with pytest.raises(ValueError, match="already registered"):
        register_species(SpeciesProfile(name="dog", sound="Arf", joy="x", anger="y"))


def test_register_replace(clean_registry):
    loud = SpeciesProfile(name="Dog", sound="WOOF!", joy="x", anger="y")
    register_species(loud, replace=True)
    assert get_species("dog") is loud


def test_unregistered_species_instance_works():
    animal = Animal("g0at2", "2022-03-10", Sex.MALE, 40.0, Goat())
    assert animal.express_anger() == "rams with its horns"
