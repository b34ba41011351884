import pytest

from ps2_toolbox.data import Environment
from ps2_toolbox.stream.config import StreamConfig


class TestStreamConfig:
    def test_default_url(self) -> None:
        config = StreamConfig.default("example")
        assert config.environment == Environment.PC
        assert config.url == (
            "wss://push.planetside2.com/streaming?environment=ps2&service-id=s:example"
        )

    @pytest.mark.parametrize(
        "environment, env", [(Environment.PS4_US, "ps2ps4us"), (Environment.PS4_EU, "ps2ps4eu")]
    )
    def test_console_environments(self, environment: Environment, env: str) -> None:
        config = StreamConfig.default("abc", environment=environment)
        assert f"environment={env}&service-id=s:abc" in config.url

    def test_custom_template(self) -> None:
        config = StreamConfig(
            environment=Environment.PC,
            service_id="x",
            url_template="ws://localhost:9000/?env={env}&id={service_id}",
        )
        assert config.url == "ws://localhost:9000/?env=ps2&id=x"

    def test_empty_service_id_rejected(self) -> None:
        with pytest.raises(ValueError):
            StreamConfig.default("")
