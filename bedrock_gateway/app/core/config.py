from pydantic_settings import BaseSettings, SettingsConfigDict
from pathlib import Path
from typing import List

ENV_FILE = ".env"


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=ENV_FILE,
        case_sensitive=False,
        env_ignore_empty=True,
        extra="ignore",
    )

    app_name: str = "Bedrock Prompt Gateway"
    host: str = "0.0.0.0"
    port: int = 3000
    log_level: str = "INFO"

    aws_access_key_id: str = ""
    aws_secret_access_key: str = ""
    aws_region: str = ""

    def missing_credentials(self) -> List[str]:
        """Names of the AWS variables that are unset or empty."""
        required = {
            "AWS_ACCESS_KEY_ID": self.aws_access_key_id,
            "AWS_SECRET_ACCESS_KEY": self.aws_secret_access_key,
            "AWS_REGION": self.aws_region,
        }
        return [name for name, value in required.items() if not value]


def env_file_exists(path: str = ENV_FILE) -> bool:
    return Path(path).is_file()
