"""Built-in farm species."""

from __future__ import annotations

from farmyard.species.base import SpeciesProfile

DOG = SpeciesProfile(
    name="Dog",
    sound="Woof woof!",
    joy="wags its tail and jumps around",
    anger="growls, shows its teeth and bites",
)

CAT = SpeciesProfile(
    name="Cat",
    sound="Meow!",
    joy="purrs and rubs against your legs",
    anger="hisses, arches its back and scratches",
)

COW = SpeciesProfile(
    name="Cow",
    sound="Moo!",
    joy="chews the cud calmly and moos softly",
    anger="lowers its head and charges",
)

SHEEP = SpeciesProfile(
    name="Sheep",
    sound="Baa!",
    joy="skips around the pen",
    anger="stamps its hoof and headbutts",
)

HEN = SpeciesProfile(
    name="Hen",
    sound="Cluck cluck!",
    joy="scratches the ground and clucks happily",
    anger="flaps its wings and pecks",
)

BUILTIN_SPECIES = (DOG, CAT, COW, SHEEP, HEN)
