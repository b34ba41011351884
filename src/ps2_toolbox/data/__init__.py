"""Enumerations and descriptive records shared by the stream and census clients."""

from .character import (
    CharacterBattleRank as CharacterBattleRank,
)
from .character import (
    CharacterCerts as CharacterCerts,
)
from .character import (
    CharacterDailyRibbon as CharacterDailyRibbon,
)
from .character import (
    CharacterInfo as CharacterInfo,
)
from .character import (
    CharacterName as CharacterName,
)
from .character import (
    CharacterTimes as CharacterTimes,
)
from .enums import (
    ALL_WORLDS as ALL_WORLDS,
)
from .enums import (
    Class as Class,
)
from .enums import (
    Environment as Environment,
)
from .enums import (
    Faction as Faction,
)
from .enums import (
    World as World,
)
from .enums import (
    Zone as Zone,
)
from .enums import (
    try_enum as try_enum,
)
from .experience import (
    ExperienceInfo as ExperienceInfo,
)
from .fire_mode import (
    FireModeInfo as FireModeInfo,
)
from .loadout import (
    ClassInfo as ClassInfo,
)
from .locale_text import (
    LocaleText as LocaleText,
)
from .vehicle import (
    VehicleInfo as VehicleInfo,
)
