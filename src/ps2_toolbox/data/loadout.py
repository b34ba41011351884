import msgspec

from .enums import Class, Faction


class ClassInfo(msgspec.Struct, frozen=True):
    """Faction and infantry class behind a loadout id."""

    loadout_id: int
    faction: Faction
    character_class: Class
