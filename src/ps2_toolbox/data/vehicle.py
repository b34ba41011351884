import msgspec

from .locale_text import LocaleText


class VehicleInfo(msgspec.Struct, frozen=True):
    """Descriptive record for a vehicle type."""

    vehicle_id: int
    name: LocaleText
    description: LocaleText
    type_id: int
    type_name: str
    cost_resource_id: int = 0
    image_set_id: int = 0
    image_id: int = 0
    image_path: str = ""

    def is_ground(self) -> bool:
        # 2: hover tank, 5: four wheeled ground vehicle
        return self.type_id in (2, 5)

    def is_air(self) -> bool:
        # 1: light aircraft, 8: drop pod
        return self.type_id in (1, 8)

    def is_boat(self) -> bool:
        return False
