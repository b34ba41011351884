"""Census lookup client and its configuration."""

from .client import (
    CensusClient as CensusClient,
)
from .client import (
    LookupKind as LookupKind,
)
from .config import (
    CensusConfig as CensusConfig,
)
