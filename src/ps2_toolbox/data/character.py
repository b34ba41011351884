"""Character records returned by the census character collection."""

import msgspec

from .enums import Faction, try_enum


class CharacterName(msgspec.Struct, frozen=True):
    first: str
    first_lower: str


class CharacterTimes(msgspec.Struct, frozen=True):
    """Unix timestamps (seconds) and their census date strings."""

    creation: int
    creation_date: str
    last_save: int
    last_save_date: str
    last_login: int
    last_login_date: str
    login_count: int
    minutes_played: int


class CharacterCerts(msgspec.Struct, frozen=True):
    earned_points: int
    gifted_points: int
    spent_points: int
    available_points: int
    percent_to_next: float


class CharacterBattleRank(msgspec.Struct, frozen=True):
    percent_to_next: int
    value: int


class CharacterDailyRibbon(msgspec.Struct, frozen=True):
    count: int
    time: int
    date: str


class CharacterInfo(msgspec.Struct, frozen=True):
    """Descriptive record for a single character.

    Attributes:
        character_id: Census character id.
        name: Display name and its lowercase form.
        faction_id: Raw faction id, see `faction`.
        head_id: Cosmetic head id.
        title_id: Selected title id.
        times: Creation, save and login timestamps.
        certs: Certification point balances.
        battle_rank: Current battle rank and progress.
        profile_id: Last used profile (class) id.
        daily_ribbon: Daily ribbon counter.
        prestige_level: ASP level, zero when absent.
    """

    character_id: int
    name: CharacterName
    faction_id: int
    head_id: int
    title_id: int
    times: CharacterTimes
    certs: CharacterCerts
    battle_rank: CharacterBattleRank
    profile_id: int
    daily_ribbon: CharacterDailyRibbon
    prestige_level: int = 0

    @property
    def faction(self) -> Faction | None:
        return try_enum(Faction, self.faction_id)
