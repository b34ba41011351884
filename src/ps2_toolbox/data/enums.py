"""Game-wide enumerations referenced by events and census records."""

from enum import IntEnum, StrEnum
from typing import TypeVar

E = TypeVar("E", bound=IntEnum)


class Environment(StrEnum):
    """Platform environments exposed by the event streaming service."""

    PC = "ps2"
    PS4_US = "ps2ps4us"
    PS4_EU = "ps2ps4eu"


class World(IntEnum):
    """Game servers ("worlds") by census world id."""

    CONNERY = 1
    MILLER = 10
    COBALT = 13
    EMERALD = 17
    JAEGER = 19
    APEX = 24
    BRIGGS = 25
    SOLTECH = 40


ALL_WORLDS: tuple[World, ...] = tuple(World)


class Zone(IntEnum):
    """Continents and special zones by census zone id.

    Live events frequently carry instanced zone ids that are not listed
    here, so event models keep the raw integer.
    """

    INDAR = 2
    HOSSIN = 4
    AMERISH = 6
    ESAMIR = 8
    VR_TRAINING_NC = 96
    VR_TRAINING_TR = 97
    VR_TRAINING_VS = 98
    OSHUR = 344
    KOLTYR = 10000
    DESOLATION = 20000
    SANCTUARY = 131434


class Faction(IntEnum):
    NONE = 0
    VANU_SOVEREIGNTY = 1
    NEW_CONGLOMERATE = 2
    TERRAN_REPUBLIC = 3
    NS_OPERATIVES = 4


class Class(IntEnum):
    """Infantry classes by census profile type id."""

    INFILTRATOR = 1
    LIGHT_ASSAULT = 3
    COMBAT_MEDIC = 4
    ENGINEER = 5
    HEAVY_ASSAULT = 6
    MAX = 7


def try_enum(enum_cls: type[E], value: int) -> E | None:
    """Returns the enum member for value, or None when value is unknown."""
    try:
        return enum_cls(value)
    except ValueError:
        return None
