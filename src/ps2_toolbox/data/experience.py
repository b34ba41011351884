"""Experience tick classification.

Census only exposes a free-text description per experience id, so the
predicates below combine well-known ids with substring checks on the
description.
"""

import msgspec

KILL_EXPERIENCE_IDS = frozenset({1, 29, *range(146, 156)})
ASSIST_EXPERIENCE_ID = 2
CONTROL_POINT_EXPERIENCE_IDS = frozenset({15, 16, 272})
REVIVE_EXPERIENCE_IDS = frozenset({7, 53})
HEAL_EXPERIENCE_IDS = frozenset({4, 5, 51})
SHIELD_REPAIR_EXPERIENCE_IDS = frozenset({438, 439})
RESUPPLY_PLAYER_EXPERIENCE_IDS = frozenset({34, 55})
RESUPPLY_VEHICLE_EXPERIENCE_IDS = frozenset({240, 241})
MOTION_DETECT_EXPERIENCE_IDS = frozenset({293, 294})
RADAR_EXPERIENCE_IDS = frozenset({353, 354})


class ExperienceInfo(msgspec.Struct, frozen=True):
    """An experience id together with its census description."""

    experience_id: int
    name: str

    def is_squad(self) -> bool:
        return "Squad" in self.name

    def is_spawn(self) -> bool:
        return "Spawn" in self.name and "Kill" not in self.name

    def is_kill(self) -> bool:
        """Player kill, MAX kill and the specialised kill bonuses."""
        return self.experience_id in KILL_EXPERIENCE_IDS

    def is_assist(self) -> bool:
        return self.experience_id == ASSIST_EXPERIENCE_ID

    def is_control_point(self) -> bool:
        return self.experience_id in CONTROL_POINT_EXPERIENCE_IDS

    def is_revive(self) -> bool:
        return self.experience_id in REVIVE_EXPERIENCE_IDS

    def is_heal(self) -> bool:
        return self.experience_id in HEAL_EXPERIENCE_IDS

    def is_shield_repair(self) -> bool:
        return self.experience_id in SHIELD_REPAIR_EXPERIENCE_IDS

    def is_repair(self) -> bool:
        """Any repair tick except shield repair."""
        if self.is_shield_repair():
            return False
        return "Repair" in self.name

    def is_resupply_player(self) -> bool:
        return self.experience_id in RESUPPLY_PLAYER_EXPERIENCE_IDS

    def is_resupply_vehicle(self) -> bool:
        return self.experience_id in RESUPPLY_VEHICLE_EXPERIENCE_IDS

    def is_resupply(self) -> bool:
        return self.is_resupply_player() or self.is_resupply_vehicle()

    def is_spot(self) -> bool:
        return "Spot" in self.name

    def is_motion_detect(self) -> bool:
        return self.experience_id in MOTION_DETECT_EXPERIENCE_IDS

    def is_radar(self) -> bool:
        return self.experience_id in RADAR_EXPERIENCE_IDS

    def is_recon(self) -> bool:
        """Spot, motion detect or radar bonus."""
        return self.is_spot() or self.is_motion_detect() or self.is_radar()

    def is_vehicle_damage(self) -> bool:
        return "Damage" in self.name

    def is_support(self) -> bool:
        return (
            self.is_spawn()
            or self.is_revive()
            or self.is_heal()
            or self.is_shield_repair()
            or self.is_repair()
            or self.is_resupply()
            or self.is_recon()
        )
