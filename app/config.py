from enum import Enum
from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict


class Env(Enum):
    local = "local"
    dev = "dev"
    prod = "prod"


class Config(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="RECETARIO_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    env: Env = Env.local
    html_dir: Path = Path("assets/html")
    host: str = "0.0.0.0"
    port: int = 8080
    log_level: str = "INFO"

    # No defaults. Fail at startup rather than send a blank credential.
    openai_api_key: str
    completion_url: str
    completion_model: str
    max_tokens: int = 500
    completion_timeout: float = 60 * 2

    validate_lists: bool = True
    error_sentinel: bool = True
    promote_similar: bool = False
    cors_origin: str | None = None
    preferred_brand: str | None = None
