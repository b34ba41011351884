import asyncio
import sys

from ps2_toolbox.census import CensusClient, CensusConfig
from ps2_toolbox.data import Environment, World
from ps2_toolbox.stream import (
    Death,
    EventStreamingClient,
    EventType,
    GainExperience,
    StreamConfig,
    SubscriptionRequest,
)

SERVICE_ID = "example"
ENVIRONMENT = Environment.PC


class CharacterWatcher:
    """Prints kills, deaths and experience ticks for one character."""

    def __init__(self, character_id: int):
        self.character_id = character_id
        self.kills = 0
        self.deaths = 0

    def handle(self, event) -> None:
        match event:
            case Death() if event.character_id == self.character_id:
                self.deaths += 1
                print("You just got killed")
            case Death() if event.attacker_character_id == self.character_id:
                self.kills += 1
                print("You just killed someone")
            case GainExperience() if event.character_id == self.character_id:
                print("You just earned experience")
                if event.experience_id == 1:
                    print("You just earned kill experience")
            case _:
                return

        if isinstance(event, Death) and event.is_headshot:
            print("Kill was a headshot")


async def main(character_name: str):
    async with CensusClient(CensusConfig.default(SERVICE_ID)) as census:
        character_id = await census.character_id_from_name(character_name)

    client = EventStreamingClient(StreamConfig.default(SERVICE_ID, ENVIRONMENT))
    client.registry.register_event(CharacterWatcher(character_id).handle)
    client.registry.register_event(print)

    async with client:
        client.send_request(
            SubscriptionRequest.subscribe(
                characters=[character_id],
                worlds=[World.MILLER],
                event_names=[EventType.GAIN_EXPERIENCE, EventType.DEATH],
            )
        )
        close_code = await client.run()

    print(f"Stream closed with code {close_code}")


if __name__ == "__main__":
    asyncio.run(main(sys.argv[1] if len(sys.argv) > 1 else "something"))
