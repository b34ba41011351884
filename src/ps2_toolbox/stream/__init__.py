"""Event stream ingestion: framing, classification, dispatch and the session."""

from .classifier import (
    MessageClassifier as MessageClassifier,
)
from .config import (
    StreamConfig as StreamConfig,
)
from .connection import (
    BaseConnection as BaseConnection,
)
from .connection import (
    EventConnection as EventConnection,
)
from .dispatch import (
    CallbackListener as CallbackListener,
)
from .dispatch import (
    DispatchRegistry as DispatchRegistry,
)
from .dispatch import (
    Listener as Listener,
)
from .events import (
    AchievementEarned as AchievementEarned,
)
from .events import (
    BattleRankUp as BattleRankUp,
)
from .events import (
    ContinentLock as ContinentLock,
)
from .events import (
    ContinentUnlock as ContinentUnlock,
)
from .events import (
    Death as Death,
)
from .events import (
    Event as Event,
)
from .events import (
    EventPayload as EventPayload,
)
from .events import (
    EventType as EventType,
)
from .events import (
    FacilityControl as FacilityControl,
)
from .events import (
    GainExperience as GainExperience,
)
from .events import (
    ItemAdded as ItemAdded,
)
from .events import (
    MetagameEvent as MetagameEvent,
)
from .events import (
    PlayerFacilityCapture as PlayerFacilityCapture,
)
from .events import (
    PlayerFacilityDefend as PlayerFacilityDefend,
)
from .events import (
    PlayerLogin as PlayerLogin,
)
from .events import (
    PlayerLogout as PlayerLogout,
)
from .events import (
    SkillAdded as SkillAdded,
)
from .events import (
    VehicleDestroy as VehicleDestroy,
)
from .framing import (
    FrameSplitter as FrameSplitter,
)
from .framing import (
    split_frames as split_frames,
)
from .request import (
    Action as Action,
)
from .request import (
    SubscriptionRequest as SubscriptionRequest,
)
from .responses import (
    ConnectionStateChanged as ConnectionStateChanged,
)
from .responses import (
    Heartbeat as Heartbeat,
)
from .responses import (
    HelpInfo as HelpInfo,
)
from .responses import (
    HelpResponse as HelpResponse,
)
from .responses import (
    Response as Response,
)
from .responses import (
    Service as Service,
)
from .responses import (
    ServiceMessage as ServiceMessage,
)
from .responses import (
    ServiceStateChanged as ServiceStateChanged,
)
from .responses import (
    SubscriptionInfo as SubscriptionInfo,
)
from .session import (
    EventStreamingClient as EventStreamingClient,
)
from .session import (
    SessionState as SessionState,
)
from .session import (
    SessionStats as SessionStats,
)
