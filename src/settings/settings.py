import os
import yaml
from pathlib import Path
from pydantic import BaseModel, Field
from dotenv import load_dotenv


DEFAULT_APP_ENV = "dev"
DEFAULT_CONFIG_TEMPLATE = "configs/app.{env}.yaml"


class ServerConfig(BaseModel):
    host: str = "0.0.0.0"
    port: int = 8000
    title: str = "Events API"
    cors_origins: list[str] = Field(default_factory=lambda: ["*"])


class LoggingConfig(BaseModel):
    log_dir: str = "logs"
    level: str = "INFO"


class AppConfig(BaseModel):
    server: ServerConfig = Field(default_factory=ServerConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def load_settings(config_path: str | None = None) -> AppConfig:
    load_dotenv()

    if config_path is None:
        config_path = os.getenv("APP_CONFIG_PATH", "").strip() or None

    if config_path is None:
        env = os.getenv("APP_ENV", DEFAULT_APP_ENV).strip() or DEFAULT_APP_ENV
        config_path = DEFAULT_CONFIG_TEMPLATE.format(env=env)

    path = Path(config_path)
    if not path.exists():
        raise FileNotFoundError(f"Config not found: {path}")

    with open(path, "r", encoding="utf-8") as f:
        raw = yaml.safe_load(f) or {}

    return AppConfig.model_validate(raw)
