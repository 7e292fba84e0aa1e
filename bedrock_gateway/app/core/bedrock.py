import boto3
from botocore.config import Config
from botocore.exceptions import BotoCoreError, ClientError
from typing import Any, Protocol
import logging
from bedrock_gateway.app.core.config import Settings
from bedrock_gateway.app.core.errors import ConfigurationError, InferenceError

logger = logging.getLogger(__name__)

# Single attempt per invocation; failures surface to the caller immediately.
_CLIENT_CONFIG = Config(retries={"total_max_attempts": 1, "mode": "standard"})


class InferenceClient(Protocol):
    def invoke(self, prompt: str, model: str) -> str:
        ...


class BedrockInferenceClient:
    """Invokes Amazon Bedrock models through the Converse API."""

    def __init__(self, runtime_client: Any) -> None:
        self._client = runtime_client

    @classmethod
    def from_settings(cls, settings: Settings) -> "BedrockInferenceClient":
        missing = settings.missing_credentials()
        if missing:
            raise ConfigurationError(
                f"Missing required AWS configuration: {', '.join(missing)}"
            )

        try:
            session = boto3.session.Session(
                aws_access_key_id=settings.aws_access_key_id,
                aws_secret_access_key=settings.aws_secret_access_key,
                region_name=settings.aws_region,
            )
            runtime_client = session.client("bedrock-runtime", config=_CLIENT_CONFIG)
        except (BotoCoreError, ClientError) as e:
            raise ConfigurationError(f"Failed to create AWS session: {e}") from e

        logger.info(f"Bedrock runtime client ready (region={settings.aws_region})")
        return cls(runtime_client)

    def invoke(self, prompt: str, model: str) -> str:
        try:
            response = self._client.converse(
                modelId=model,
                messages=[{"role": "user", "content": [{"text": prompt}]}],
            )
        except (BotoCoreError, ClientError) as e:
            raise InferenceError(f"Bedrock invocation of {model} failed: {e}") from e

        message = response.get("output", {}).get("message")
        if message is None:
            raise InferenceError(f"Bedrock response for {model} contained no message")

        return "".join(
            block["text"] for block in message.get("content", []) if "text" in block
        )
