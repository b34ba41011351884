"""Wire-format models for event payloads carried by service messages.

Each payload is a msgspec struct tagged by its `event_name` field. The
streaming service encodes every number and boolean as a string, so these
structs are decoded in lax mode (see MessageClassifier), which coerces
"123" to 123 and "1"/"0"/"true"/"false" to booleans.

World, zone and faction ids are kept as raw integers; the feed regularly
carries instanced zone ids outside the known enumeration. Use the enum
accessors (`world`, `zone`, ...) which return None for unknown ids.
"""

from __future__ import annotations

from enum import StrEnum

import msgspec

from ps2_toolbox.data.enums import Faction, World, Zone, try_enum


class EventType(StrEnum):
    """Event names accepted by subscribe/clearSubscribe requests."""

    ALL = "all"

    ACHIEVEMENT_EARNED = "AchievementEarned"
    BATTLE_RANK_UP = "BattleRankUp"
    DEATH = "Death"
    ITEM_ADDED = "ItemAdded"
    SKILL_ADDED = "SkillAdded"
    VEHICLE_DESTROY = "VehicleDestroy"
    GAIN_EXPERIENCE = "GainExperience"

    PLAYER_FACILITY_CAPTURE = "PlayerFacilityCapture"
    PLAYER_FACILITY_DEFEND = "PlayerFacilityDefend"

    # World level events, these ignore the characters filter.
    CONTINENT_LOCK = "ContinentLock"
    CONTINENT_UNLOCK = "ContinentUnlock"
    FACILITY_CONTROL = "FacilityControl"
    METAGAME_EVENT = "MetagameEvent"

    PLAYER_LOGIN = "PlayerLogin"
    PLAYER_LOGOUT = "PlayerLogout"


class EventPayload(msgspec.Struct, frozen=True, tag_field="event_name"):
    """Base class for tagged event payloads.

    Attributes:
        timestamp: Unix time of the event in seconds.
        world_id: World the event happened on.
    """

    timestamp: int
    world_id: int

    @property
    def event_type(self) -> EventType:
        return EventType(self.__struct_config__.tag)

    @property
    def world(self) -> World | None:
        return try_enum(World, self.world_id)


class ZonedEvent(EventPayload, frozen=True):
    """Base class for payloads that also reference a zone."""

    zone_id: int

    @property
    def zone(self) -> Zone | None:
        return try_enum(Zone, self.zone_id)


class AchievementEarned(ZonedEvent, tag="AchievementEarned"):
    character_id: int
    achievement_id: int


class BattleRankUp(ZonedEvent, tag="BattleRankUp"):
    character_id: int
    battle_rank: int


class Death(ZonedEvent, tag="Death"):
    """A character died.

    Attributes:
        attacker_character_id: The killer, may equal character_id on suicide.
        attacker_fire_mode_id: Fire mode of the weapon used.
        attacker_loadout_id: Loadout of the killer.
        attacker_vehicle_id: Vehicle the killer was in, 0 when on foot.
        attacker_weapon_id: Weapon item id.
        character_id: The character that died.
        character_loadout_id: Loadout of the character that died.
        is_headshot: True for headshot kills.
    """

    attacker_character_id: int
    attacker_fire_mode_id: int
    attacker_loadout_id: int
    attacker_vehicle_id: int
    attacker_weapon_id: int
    character_id: int
    character_loadout_id: int
    is_headshot: bool


class ItemAdded(ZonedEvent, tag="ItemAdded"):
    character_id: int
    context: str
    item_id: int
    item_count: int


class SkillAdded(ZonedEvent, tag="SkillAdded"):
    character_id: int
    skill_id: int


class VehicleDestroy(ZonedEvent, tag="VehicleDestroy"):
    attacker_character_id: int
    attacker_loadout_id: int
    attacker_vehicle_id: int
    attacker_weapon_id: int
    character_id: int
    vehicle_id: int
    facility_id: int
    faction_id: int

    @property
    def faction(self) -> Faction | None:
        return try_enum(Faction, self.faction_id)


class GainExperience(ZonedEvent, tag="GainExperience"):
    """A character earned experience.

    Attributes:
        character_id: The character earning the experience.
        other_id: The other party (revived player, killed player, ...),
            0 when not applicable.
        experience_id: Experience type, resolvable via the census client.
        amount: Experience amount.
        loadout_id: Loadout of the earning character.
    """

    character_id: int
    other_id: int
    experience_id: int
    amount: int
    loadout_id: int


class PlayerFacilityEvent(ZonedEvent, frozen=True):
    character_id: int
    facility_id: int
    outfit_id: int


class PlayerFacilityCapture(PlayerFacilityEvent, tag="PlayerFacilityCapture"):
    pass


class PlayerFacilityDefend(PlayerFacilityEvent, tag="PlayerFacilityDefend"):
    pass


class ContinentEvent(ZonedEvent, frozen=True):
    metagame_event_id: str
    previous_faction: int
    triggering_faction: int
    vs_population: str
    nc_population: str
    tr_population: str
    event_type_name: str = msgspec.field(default="", name="event_type")

    @property
    def triggering(self) -> Faction | None:
        return try_enum(Faction, self.triggering_faction)


class ContinentLock(ContinentEvent, tag="ContinentLock"):
    pass


class ContinentUnlock(ContinentEvent, tag="ContinentUnlock"):
    pass


class FacilityControl(ZonedEvent, tag="FacilityControl"):
    facility_id: int
    old_faction_id: int
    new_faction_id: int
    outfit_id: int
    duration_held: int = 0

    @property
    def changed_hands(self) -> bool:
        return self.old_faction_id != self.new_faction_id


class MetagameEvent(ZonedEvent, tag="MetagameEvent"):
    metagame_event_id: str
    metagame_event_state: str
    experience_bonus: str
    faction_nc: str
    faction_tr: str
    faction_vs: str


class PlayerLogEvent(EventPayload, frozen=True):
    character_id: int


class PlayerLogin(PlayerLogEvent, tag="PlayerLogin"):
    pass


class PlayerLogout(PlayerLogEvent, tag="PlayerLogout"):
    pass


Event = (
    AchievementEarned
    | BattleRankUp
    | Death
    | ItemAdded
    | SkillAdded
    | VehicleDestroy
    | GainExperience
    | PlayerFacilityCapture
    | PlayerFacilityDefend
    | ContinentLock
    | ContinentUnlock
    | FacilityControl
    | MetagameEvent
    | PlayerLogin
    | PlayerLogout
)
