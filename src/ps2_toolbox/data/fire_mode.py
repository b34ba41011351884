import msgspec

from .locale_text import LocaleText


class FireModeInfo(msgspec.Struct, frozen=True):
    """The weapon behind a fire mode id.

    Attributes:
        item_id: Census item id of the weapon.
        weapon_type: "primary" or "secondary".
        weapon_name: Localized weapon name.
        weapon_is_vehicle_weapon: True if the weapon is mounted on a vehicle.
    """

    item_id: int
    weapon_type: str
    weapon_name: LocaleText
    weapon_is_vehicle_weapon: bool
