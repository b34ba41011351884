"""In-process census server for lookup client tests."""

import pytest
import pytest_asyncio
from aiohttp import web
from aiohttp.test_utils import TestServer

from ps2_toolbox.census import CensusClient, CensusConfig
from ps2_toolbox.logging import Logger, LoggerConfig, LogLevel

CHARACTER = {
    "character_id": "5428010618015189713",
    "name": {"first": "Higby", "first_lower": "higby"},
    "faction_id": "2",
    "head_id": "1",
    "title_id": "0",
    "times": {
        "creation": "1352000000",
        "creation_date": "2012-11-04 03:33:20.0",
        "last_save": "1700000000",
        "last_save_date": "2023-11-14 22:13:20.0",
        "last_login": "1700000000",
        "last_login_date": "2023-11-14 22:13:20.0",
        "login_count": "1234",
        "minutes_played": "98765",
    },
    "certs": {
        "earned_points": "100",
        "gifted_points": "5",
        "spent_points": "90",
        "available_points": "15",
        "percent_to_next": "0.25",
    },
    "battle_rank": {"percent_to_next": "40", "value": "100"},
    "profile_id": "20",
    "daily_ribbon": {"count": "1", "time": "1700000000", "date": "2023-11-14 00:00:00.0"},
    "prestige_level": "1",
}

LOCALE = {"de": "Sunderer", "en": "Sunderer", "es": "Sunderer", "fr": "Sunderer", "it": "Sunderer", "tr": "Sunderer"}

RESPONSES = {
    "character_name": lambda q: (
        {"character_name_list": [{"character_id": CHARACTER["character_id"], "name": {"first": "Higby", "first_lower": "higby"}}], "returned": 1}
        if q.get("name.first_lower") == "higby"
        else {"character_name_list": [], "returned": 0}
    ),
    "character": lambda q: {"character_list": [CHARACTER], "returned": 1},
    "vehicle": lambda q: {
        "vehicle_list": [
            {
                "vehicle_id": q["vehicle_id"],
                "name": LOCALE,
                "description": LOCALE,
                "type_id": "5",
                "type_name": "Four Wheeled Ground Vehicle",
                "cost_resource_id": "4",
                "image_set_id": "1",
                "image_id": "2",
                "image_path": "/files/ps2/images/static/2.png",
            }
        ],
        "returned": 1,
    },
    "fire_mode": lambda q: {
        "fire_mode_list": [
            {
                "fire_mode_id": q["fire_mode_id"],
                "item_id": "7214",
                "type": "primary",
                "item_info": {"name": dict(LOCALE, en="Gauss SAW"), "is_vehicle_weapon": "0"},
            }
        ],
        "returned": 1,
    },
    "experience": lambda q: {
        "experience_list": [{"experience_id": q["experience_id"], "description": "Revive", "xp": "75"}],
        "returned": 1,
    },
    "loadout": lambda q: {
        "loadout_list": [
            {"loadout_id": q["loadout_id"], "profile_id": "19", "faction_id": "2", "class": {"profile_type_id": "4"}}
        ],
        "returned": 1,
    },
}


class FakeCensus:
    """Serves canned census collections and records every request."""

    def __init__(self) -> None:
        self.requests: list[tuple[str, dict]] = []
        self.fail_next = 0
        self.malformed_next = 0
        self.app = web.Application()
        self.app.router.add_get("/{service_id}/{collection}", self.handle)

    def count(self, collection: str) -> int:
        return sum(1 for name, _ in self.requests if name == collection)

    async def handle(self, request: web.Request) -> web.Response:
        collection = request.match_info["collection"]
        query = dict(request.query)
        self.requests.append((collection, query))

        if self.fail_next:
            self.fail_next -= 1
            return web.Response(status=503, text="service unavailable")
        if self.malformed_next:
            self.malformed_next -= 1
            return web.json_response({"error": "No data found."})

        return web.json_response(RESPONSES[collection](query))


@pytest_asyncio.fixture
async def census_server():
    census = FakeCensus()
    server = TestServer(census.app)
    await server.start_server()
    census.base_url = str(server.make_url("/"))
    try:
        yield census
    finally:
        await server.close()


@pytest_asyncio.fixture
async def census_client(census_server):
    logger = Logger(
        name="test-census",
        config=LoggerConfig(base_level=LogLevel.ERROR, do_stdout=False),
    )
    config = CensusConfig(
        service_id="example",
        base_url_template=census_server.base_url + "{service_id}/",
        timeout_s=5.0,
    )
    client = CensusClient(config, logger=logger)
    try:
        yield client
    finally:
        await client.aclose()
        await logger.shutdown()
