import msgspec

from ps2_toolbox.data import (
    ALL_WORLDS,
    CharacterInfo,
    Environment,
    Faction,
    LocaleText,
    VehicleInfo,
    World,
    Zone,
    try_enum,
)


class TestEnums:
    def test_environment_values(self) -> None:
        assert [e.value for e in Environment] == ["ps2", "ps2ps4us", "ps2ps4eu"]

    def test_all_worlds(self) -> None:
        assert len(ALL_WORLDS) == 8
        assert World.MILLER in ALL_WORLDS

    def test_try_enum(self) -> None:
        assert try_enum(Zone, 344) == Zone.OSHUR
        assert try_enum(Zone, 123456) is None
        assert try_enum(Faction, 4) == Faction.NS_OPERATIVES


class TestRecords:
    def test_locale_text_str_is_english(self) -> None:
        text = LocaleText(en="Flash", de="Flash DE")
        assert str(text) == "Flash"
        assert text.fr == ""

    def test_vehicle_kinds(self) -> None:
        name = LocaleText(en="Mosquito")
        air = VehicleInfo(vehicle_id=9, name=name, description=name, type_id=1, type_name="Light Aircraft")
        assert air.is_air() and not air.is_ground() and not air.is_boat()

    def test_character_without_prestige_and_unknown_faction(self) -> None:
        raw = {
            "character_id": "1",
            "name": {"first": "Test", "first_lower": "test"},
            "faction_id": "99",
            "head_id": "1",
            "title_id": "0",
            "times": {
                "creation": "1", "creation_date": "", "last_save": "1", "last_save_date": "",
                "last_login": "1", "last_login_date": "", "login_count": "1", "minutes_played": "1",
            },
            "certs": {
                "earned_points": "0", "gifted_points": "0", "spent_points": "0",
                "available_points": "0", "percent_to_next": "0",
            },
            "battle_rank": {"percent_to_next": "0", "value": "1"},
            "profile_id": "1",
            "daily_ribbon": {"count": "0", "time": "0", "date": ""},
        }
        info = msgspec.convert(raw, CharacterInfo, strict=False)
        assert info.prestige_level == 0
        assert info.faction is None
