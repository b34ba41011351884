import asyncio
import sys

from ps2_toolbox.census import CensusClient, CensusConfig
from ps2_toolbox.data import Environment, World
from ps2_toolbox.errors import CensusLookupError
from ps2_toolbox.logging import FileLogHandler, Logger, LoggerConfig, LogLevel
from ps2_toolbox.stream import (
    Death,
    Event,
    EventStreamingClient,
    EventType,
    GainExperience,
    StreamConfig,
    SubscriptionRequest,
)

SERVICE_ID = "example"
ENVIRONMENT = Environment.PC


async def handle_event(event: Event, character_id: int, census: CensusClient) -> None:
    print(f"Received event message: {event}")

    if isinstance(event, Death):
        if event.character_id == character_id:
            try:
                other = await census.character_info(event.attacker_character_id)
                print(f"You just got killed by {other.name.first}")
            except CensusLookupError:
                print("You just got killed")
        elif event.attacker_character_id == character_id:
            try:
                other = await census.character_info(event.character_id)
                print(f"You just killed {other.name.first}")
            except CensusLookupError:
                print("You just killed someone")
        if event.is_headshot:
            print("Kill was a headshot")

    elif isinstance(event, GainExperience):
        try:
            info = await census.experience_info(event.experience_id)
        except CensusLookupError:
            return
        if event.character_id == character_id:
            if info.is_squad():
                print("You just earned squad experience")
            if info.is_revive():
                print("You just earned revive experience")
        if event.other_id == character_id and info.is_revive():
            print("You just got revived")


async def consume_events(
    queue: asyncio.Queue, character_id: int, census: CensusClient
) -> None:
    """Owns the census client; all lookups are serialized through this task."""
    while True:
        event = await queue.get()
        if event is None:
            return
        await handle_event(event, character_id, census)


def make_logger(log_file: str | None) -> Logger:
    """Session and lookup activity at DEBUG, optionally mirrored to a file."""
    handlers = [FileLogHandler(log_file, create=True)] if log_file else []
    return Logger(
        name="enrich",
        config=LoggerConfig(base_level=LogLevel.DEBUG, do_stdout=False),
        handlers=handlers,
    )


async def main(character_name: str, log_file: str | None = None):
    logger = make_logger(log_file)
    try:
        await enrich(character_name, logger)
    finally:
        await logger.shutdown()


async def enrich(character_name: str, logger: Logger) -> None:
    async with CensusClient(CensusConfig.default(SERVICE_ID), logger=logger) as census:
        character_id = await census.character_id_from_name(character_name)

        queue: asyncio.Queue[Event | None] = asyncio.Queue()
        client = EventStreamingClient(
            StreamConfig.default(SERVICE_ID, ENVIRONMENT), logger=logger
        )
        client.registry.register_event(queue.put_nowait)

        await client.connect()
        client.send_request(
            SubscriptionRequest.subscribe(
                characters=[character_id],
                worlds=[World.MILLER],
                event_names=[EventType.GAIN_EXPERIENCE, EventType.DEATH],
            )
        )

        consumer = asyncio.create_task(consume_events(queue, character_id, census))
        try:
            await client.run()
        finally:
            queue.put_nowait(None)
            await consumer


if __name__ == "__main__":
    name = sys.argv[1] if len(sys.argv) > 1 else "something"
    log_file = sys.argv[2] if len(sys.argv) > 2 else None
    asyncio.run(main(name, log_file))
