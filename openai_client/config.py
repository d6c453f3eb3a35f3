"""Configuration management using Pydantic settings."""
from functools import lru_cache
from pathlib import Path
import yaml
from pydantic import BaseModel
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_BASE_URL = "https://api.openai.com"
DEFAULT_TIMEOUT = 60.0


class ClientConfig(BaseModel):
    """Client configuration from YAML."""
    base_url: str = DEFAULT_BASE_URL
    request_timeout: float = DEFAULT_TIMEOUT


class Settings(BaseSettings):
    """Environment-based settings."""
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )

    # API
    openai_api_key: str = ""
    base_url: str = DEFAULT_BASE_URL

    # HTTP Client
    request_timeout: float = DEFAULT_TIMEOUT

    # Logging
    log_level: str = "info"

    # Optional YAML overrides
    config_file: str = ""

    def client_config(self) -> ClientConfig:
        """Merge the YAML file, when configured, over the environment values."""
        if self.config_file:
            return load_yaml_config(self.config_file)
        return ClientConfig(
            base_url=self.base_url,
            request_timeout=self.request_timeout,
        )


def load_yaml_config(config_path: str = "config.yaml") -> ClientConfig:
    """Load configuration from YAML file."""
    config_file = Path(config_path)
    if not config_file.exists():
        raise FileNotFoundError(f"Configuration file not found: {config_path}")

    with open(config_file, "r", encoding="utf-8") as f:
        config_data = yaml.safe_load(f) or {}

    return ClientConfig(**config_data)


@lru_cache
def get_settings() -> Settings:
    """Return the process-wide settings."""
    return Settings()
