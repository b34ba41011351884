"""Census lookup client with a cache per identifier kind."""

from __future__ import annotations

import asyncio
from collections.abc import Callable
from enum import StrEnum
from typing import Any, Self, TypeVar

import aiohttp
import msgspec

from ps2_toolbox.data import (
    CharacterInfo,
    Class,
    ClassInfo,
    ExperienceInfo,
    Faction,
    FireModeInfo,
    VehicleInfo,
)
from ps2_toolbox.errors import CensusLookupError, CensusNotFoundError
from ps2_toolbox.logging import Logger, get_default_logger

from .config import CensusConfig
from .models import (
    CharacterContainer,
    CharacterNameContainer,
    ExperienceContainer,
    FireModeContainer,
    LoadoutContainer,
    VehicleContainer,
)

C = TypeVar("C")
R = TypeVar("R")

FIRE_MODE_JOIN = "item^inject_at:item_info^show:name'is_vehicle_weapon"
LOADOUT_JOIN = "profile^inject_at:class^show:profile_type_id"


class LookupKind(StrEnum):
    """Identifier namespaces, one cache each."""

    CHARACTER_NAME = "character_name"
    CHARACTER = "character"
    VEHICLE = "vehicle"
    FIRE_MODE = "fire_mode"
    EXPERIENCE = "experience"
    LOADOUT = "loadout"


class CensusClient:
    """Resolves ids from the event stream into descriptive records.

    Every lookup checks its own cache first and only issues a request on
    a miss. Entries are never evicted for the lifetime of the client; use
    a new client (or `clear_cache()`) to start fresh. Failures are raised
    as CensusLookupError and never cached, so a lookup can be retried.

    The cache is not guarded against concurrent misses of the same key;
    both requests run and the first to finish populates the entry. Route
    lookups through a single task to avoid duplicate requests.
    """

    def __init__(self, config: CensusConfig, logger: Logger | None = None) -> None:
        self._config = config
        self._base_url = config.base_url
        self._logger = logger
        if self._logger is None:
            self._logger = get_default_logger("ps2-census")

        self._http_session: aiohttp.ClientSession | None = None
        self._caches: dict[LookupKind, dict[Any, Any]] = {kind: {} for kind in LookupKind}
        self._decoders: dict[type, msgspec.json.Decoder] = {}

    @property
    def http_session(self) -> aiohttp.ClientSession:
        """Lazily initialize the HTTP session."""
        if self._http_session is None or self._http_session.closed:
            self._http_session = aiohttp.ClientSession(
                timeout=aiohttp.ClientTimeout(total=self._config.timeout_s)
            )
        return self._http_session

    def get_config(self) -> CensusConfig:
        return self._config

    def cache_size(self, kind: LookupKind | str) -> int:
        """Number of cached entries for one lookup kind."""
        return len(self._caches[LookupKind(kind)])

    def clear_cache(self) -> None:
        for cache in self._caches.values():
            cache.clear()

    def _decoder(self, container: type[C]) -> msgspec.json.Decoder:
        decoder = self._decoders.get(container)
        if decoder is None:
            decoder = msgspec.json.Decoder(container, strict=False)
            self._decoders[container] = decoder
        return decoder

    def _normalize_id(self, kind: LookupKind, value: Any) -> int:
        """Coerces an id given as int or decimal string, so both share a cache entry."""
        try:
            return int(value)
        except (TypeError, ValueError) as exc:
            raise CensusLookupError(kind, value, f"invalid id; {exc}") from exc

    async def _get(
        self, kind: LookupKind, key: Any, collection: str, params: dict[str, str]
    ) -> bytes:
        url = self._base_url + collection
        try:
            async with self.http_session.get(url, params=params) as resp:
                resp.raise_for_status()
                return await resp.read()
        except (aiohttp.ClientError, asyncio.TimeoutError) as exc:
            self._logger.debug(f"Census {kind} request for {key!r} failed; {exc}")
            raise CensusLookupError(kind, key, f"request failed; {exc!r}") from exc

    async def _lookup(
        self,
        kind: LookupKind,
        key: Any,
        collection: str,
        params: dict[str, str],
        container: type[C],
        extract: Callable[[C], R],
    ) -> R:
        """Shared cache-or-fetch path for every lookup kind.

        `extract` receives the decoded container and returns the value to
        cache; an IndexError from it means the result list was empty.
        """
        cache = self._caches[kind]
        if key in cache:
            self._logger.trace(f"Census {kind} cache hit for {key!r}")
            return cache[key]

        self._logger.debug(f"Census {kind} cache miss for {key!r}, fetching")
        body = await self._get(kind, key, collection, params)

        try:
            value = extract(self._decoder(container).decode(body))
        except IndexError as exc:
            self._logger.debug(f"Census {kind} lookup for {key!r} returned nothing")
            raise CensusNotFoundError(kind, key, "no results returned") from exc
        except (msgspec.DecodeError, ValueError) as exc:
            self._logger.debug(f"Census {kind} response for {key!r} malformed; {exc}")
            raise CensusLookupError(kind, key, f"malformed response; {exc}") from exc

        return cache.setdefault(key, value)

    async def character_id_from_name(self, name: str) -> int:
        """Resolves a character name (any case) to its character id."""
        name = name.lower()
        return await self._lookup(
            LookupKind.CHARACTER_NAME,
            name,
            "character_name",
            {"name.first_lower": name},
            CharacterNameContainer,
            lambda c: c.character_name_list[0].character_id,
        )

    async def character_info(self, character_id: int) -> CharacterInfo:
        character_id = self._normalize_id(LookupKind.CHARACTER, character_id)
        return await self._lookup(
            LookupKind.CHARACTER,
            character_id,
            "character",
            {"character_id": str(character_id)},
            CharacterContainer,
            lambda c: c.character_list[0],
        )

    async def vehicle_info(self, vehicle_id: int) -> VehicleInfo:
        vehicle_id = self._normalize_id(LookupKind.VEHICLE, vehicle_id)
        return await self._lookup(
            LookupKind.VEHICLE,
            vehicle_id,
            "vehicle",
            {"vehicle_id": str(vehicle_id)},
            VehicleContainer,
            lambda c: c.vehicle_list[0],
        )

    async def fire_mode_info(self, fire_mode_id: int) -> FireModeInfo:
        """Resolves a fire mode to the weapon it belongs to."""
        fire_mode_id = self._normalize_id(LookupKind.FIRE_MODE, fire_mode_id)

        def extract(c: FireModeContainer) -> FireModeInfo:
            record = c.fire_mode_list[0]
            return FireModeInfo(
                item_id=record.item_id,
                weapon_type=record.type,
                weapon_name=record.item_info.name,
                weapon_is_vehicle_weapon=record.item_info.is_vehicle_weapon != "0",
            )

        return await self._lookup(
            LookupKind.FIRE_MODE,
            fire_mode_id,
            "fire_mode",
            {"c:join": FIRE_MODE_JOIN, "fire_mode_id": str(fire_mode_id)},
            FireModeContainer,
            extract,
        )

    async def experience_name(self, experience_id: int) -> str:
        """Resolves an experience id to its description."""
        experience_id = self._normalize_id(LookupKind.EXPERIENCE, experience_id)
        return await self._lookup(
            LookupKind.EXPERIENCE,
            experience_id,
            "experience",
            {"experience_id": str(experience_id)},
            ExperienceContainer,
            lambda c: c.experience_list[0].description,
        )

    async def experience_info(self, experience_id: int) -> ExperienceInfo:
        """Same as `experience_name`, wrapped with classification predicates."""
        experience_id = self._normalize_id(LookupKind.EXPERIENCE, experience_id)
        name = await self.experience_name(experience_id)
        return ExperienceInfo(experience_id=experience_id, name=name)

    async def class_info(self, loadout_id: int) -> ClassInfo:
        """Resolves a loadout to its faction and infantry class.

        Raises:
            CensusLookupError: Also when the faction or class id is unknown.
        """
        loadout_id = self._normalize_id(LookupKind.LOADOUT, loadout_id)

        def extract(c: LoadoutContainer) -> ClassInfo:
            record = c.loadout_list[0]
            return ClassInfo(
                loadout_id=loadout_id,
                faction=Faction(record.faction_id),
                character_class=Class(record.class_.profile_type_id),
            )

        return await self._lookup(
            LookupKind.LOADOUT,
            loadout_id,
            "loadout",
            {"c:join": LOADOUT_JOIN, "loadout_id": str(loadout_id)},
            LoadoutContainer,
            extract,
        )

    async def aclose(self) -> None:
        """Closes the underlying HTTP session. The caches are kept."""
        if self._http_session is not None and not self._http_session.closed:
            await self._http_session.close()
        self._http_session = None

    async def __aenter__(self) -> Self:
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.aclose()
