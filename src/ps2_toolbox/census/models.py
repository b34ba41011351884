"""Census response containers and the raw records inside them.

Census encodes every scalar as a string; containers are decoded in lax
mode so numeric strings coerce into the declared types. Only the fields
used are declared, everything else in a record is ignored.
"""

import msgspec

from ps2_toolbox.data import CharacterInfo, LocaleText, VehicleInfo


class CharacterNameRecord(msgspec.Struct):
    character_id: int


class ItemInfoRecord(msgspec.Struct):
    name: LocaleText
    is_vehicle_weapon: str = "0"


class FireModeRecord(msgspec.Struct):
    item_id: int
    type: str
    item_info: ItemInfoRecord


class ExperienceRecord(msgspec.Struct):
    experience_id: int
    description: str


class LoadoutClassRecord(msgspec.Struct):
    profile_type_id: int


class LoadoutRecord(msgspec.Struct):
    loadout_id: int
    faction_id: int
    class_: LoadoutClassRecord = msgspec.field(name="class")


class CharacterNameContainer(msgspec.Struct):
    character_name_list: list[CharacterNameRecord]
    returned: int = 0


class CharacterContainer(msgspec.Struct):
    character_list: list[CharacterInfo]
    returned: int = 0


class VehicleContainer(msgspec.Struct):
    vehicle_list: list[VehicleInfo]
    returned: int = 0


class FireModeContainer(msgspec.Struct):
    fire_mode_list: list[FireModeRecord]
    returned: int = 0


class ExperienceContainer(msgspec.Struct):
    experience_list: list[ExperienceRecord]
    returned: int = 0


class LoadoutContainer(msgspec.Struct):
    loadout_list: list[LoadoutRecord]
    returned: int = 0
