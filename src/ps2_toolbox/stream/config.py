"""Configuration for the event streaming session."""

from __future__ import annotations

import msgspec

from ps2_toolbox.data.enums import Environment

EVENT_STREAM_URL = (
    "wss://push.planetside2.com/streaming?environment={env}&service-id=s:{service_id}"
)


class StreamConfig(msgspec.Struct):
    """Where and as whom to connect to the event stream.

    Attributes:
        environment: Platform environment to stream events from.
        service_id: Census service id, without the "s:" prefix.
        url_template: Endpoint template with {env} and {service_id} fields.
    """

    environment: Environment
    service_id: str
    url_template: str = EVENT_STREAM_URL

    def __post_init__(self) -> None:
        if not self.service_id:
            raise ValueError("Invalid service_id; expected a non-empty string")

    @classmethod
    def default(
        cls, service_id: str, environment: Environment = Environment.PC
    ) -> StreamConfig:
        return cls(environment=environment, service_id=service_id)

    @property
    def url(self) -> str:
        return self.url_template.format(
            env=self.environment.value, service_id=self.service_id
        )
