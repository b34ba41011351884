"""Configuration for the census lookup client."""

from __future__ import annotations

import msgspec

CENSUS_BASE_URL = "http://census.daybreakgames.com/s:{service_id}/json/get/ps2:v2/"


class CensusConfig(msgspec.Struct):
    """Where and as whom to query the census API.

    Attributes:
        service_id: Census service id, without the "s:" prefix.
        base_url_template: Collection root with a {service_id} field.
        timeout_s: Total timeout per request in seconds. None disables
            the timeout, wrap calls externally for bounded latency.
    """

    service_id: str
    base_url_template: str = CENSUS_BASE_URL
    timeout_s: float | None = None

    def __post_init__(self) -> None:
        if not self.service_id:
            raise ValueError("Invalid service_id; expected a non-empty string")
        if self.timeout_s is not None and self.timeout_s <= 0.0:
            raise ValueError(
                f"Invalid timeout; expected >0 or None but got {self.timeout_s}"
            )

    @classmethod
    def default(cls, service_id: str) -> CensusConfig:
        return cls(service_id=service_id)

    @property
    def base_url(self) -> str:
        return self.base_url_template.format(service_id=self.service_id)
