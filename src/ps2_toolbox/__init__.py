"""Event stream and census lookup client for PlanetSide 2."""

from .census import (
    CensusClient as CensusClient,
)
from .census import (
    CensusConfig as CensusConfig,
)
from .census import (
    LookupKind as LookupKind,
)
from .data import (
    ALL_WORLDS as ALL_WORLDS,
)
from .data import (
    CharacterInfo as CharacterInfo,
)
from .data import (
    Class as Class,
)
from .data import (
    ClassInfo as ClassInfo,
)
from .data import (
    Environment as Environment,
)
from .data import (
    ExperienceInfo as ExperienceInfo,
)
from .data import (
    Faction as Faction,
)
from .data import (
    FireModeInfo as FireModeInfo,
)
from .data import (
    LocaleText as LocaleText,
)
from .data import (
    VehicleInfo as VehicleInfo,
)
from .data import (
    World as World,
)
from .data import (
    Zone as Zone,
)
from .errors import (
    CensusLookupError as CensusLookupError,
)
from .errors import (
    CensusNotFoundError as CensusNotFoundError,
)
from .errors import (
    NotConnectedError as NotConnectedError,
)
from .errors import (
    ParseFailure as ParseFailure,
)
from .errors import (
    Ps2Error as Ps2Error,
)
from .errors import (
    SessionConsumedError as SessionConsumedError,
)
from .errors import (
    StreamConnectionError as StreamConnectionError,
)
from .logging import (
    FileLogHandler as FileLogHandler,
)
from .logging import (
    Logger as Logger,
)
from .logging import (
    LoggerConfig as LoggerConfig,
)
from .logging import (
    LogLevel as LogLevel,
)
from .stream import (
    DispatchRegistry as DispatchRegistry,
)
from .stream import (
    Event as Event,
)
from .stream import (
    EventStreamingClient as EventStreamingClient,
)
from .stream import (
    EventType as EventType,
)
from .stream import (
    Listener as Listener,
)
from .stream import (
    MessageClassifier as MessageClassifier,
)
from .stream import (
    SessionState as SessionState,
)
from .stream import (
    StreamConfig as StreamConfig,
)
from .stream import (
    SubscriptionRequest as SubscriptionRequest,
)
from .stream import (
    split_frames as split_frames,
)
from .time import (
    time_iso8601 as time_iso8601,
)
from .time import (
    time_ms as time_ms,
)
from .time import (
    time_s as time_s,
)

__all__ = [
    # Stream
    "EventStreamingClient",
    "StreamConfig",
    "SessionState",
    "SubscriptionRequest",
    "EventType",
    "Event",
    "DispatchRegistry",
    "Listener",
    "MessageClassifier",
    "split_frames",
    # Census
    "CensusClient",
    "CensusConfig",
    "LookupKind",
    # Data
    "ALL_WORLDS",
    "CharacterInfo",
    "Class",
    "ClassInfo",
    "Environment",
    "ExperienceInfo",
    "Faction",
    "FireModeInfo",
    "LocaleText",
    "VehicleInfo",
    "World",
    "Zone",
    # Errors
    "Ps2Error",
    "StreamConnectionError",
    "NotConnectedError",
    "SessionConsumedError",
    "ParseFailure",
    "CensusLookupError",
    "CensusNotFoundError",
    # Logging
    "Logger",
    "LoggerConfig",
    "LogLevel",
    "FileLogHandler",
    # Time
    "time_s",
    "time_ms",
    "time_iso8601",
]
