import logging
import sys
import uvicorn
from pydantic import ValidationError
from bedrock_gateway.app.core.bedrock import BedrockInferenceClient
from bedrock_gateway.app.core.config import Settings, env_file_exists
from bedrock_gateway.app.core.errors import ConfigurationError
from bedrock_gateway.app.core.logging import setup_logging
from bedrock_gateway.app.main import create_app

logger = logging.getLogger("bedrock_gateway")


def main() -> None:
    try:
        settings = Settings()
    except ValidationError as e:
        setup_logging()
        logger.critical(f"Invalid configuration: {e}")
        sys.exit(1)

    setup_logging(settings.log_level)
    if not env_file_exists():
        logger.warning("No .env file found")

    try:
        inference_client = BedrockInferenceClient.from_settings(settings)
    except ConfigurationError as e:
        logger.critical(str(e))
        sys.exit(1)

    app = create_app(settings, inference_client)
    logger.info(f"Server is running on port {settings.port}")
    uvicorn.run(
        app,
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
