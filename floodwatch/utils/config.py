"""Configuration loader for Floodwatch."""

import os
from pathlib import Path
from typing import Any, Optional

import yaml
from dotenv import load_dotenv
from pydantic import BaseModel

load_dotenv()


class DMCConfig(BaseModel):
    base_url: str = (
        "https://raw.githubusercontent.com/nuuuwan/lk_dmc/refs/heads/"
        "data_lk_dmc_river_water_level_and_flood_warnings/data/"
        "lk_dmc_river_water_level_and_flood_warnings"
    )
    index_file: str = "docs_last100.tsv"
    detail_file: str = "blocks.json"
    timeout_seconds: float = 30.0


class IngestConfig(BaseModel):
    default_start_date: str = "2025-12-17"
    default_end_date: str = "2025-12-18"
    include_history: bool = True
    max_candidates: int = 10
    max_districts: int = 10
    trend_days: int = 7


class PollerConfig(BaseModel):
    interval_seconds: int = 300
    stale_seconds: int = 240


class APIConfig(BaseModel):
    host: str = "0.0.0.0"
    port: int = 8000
    reload: bool = False
    cors_origins: list[str] = ["*"]


class LoggingConfig(BaseModel):
    level: str = "INFO"
    format: str = "{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function}:{line} - {message}"
    to_file: bool = False
    file_name: str = "floodwatch.log"
    error_file_name: Optional[str] = None
    rotation: str = "10 MB"
    retention: str = "7 days"


class AppConfig(BaseModel):
    name: str = "floodwatch"
    version: str = "0.1.0"
    environment: str = "development"
    debug: bool = False


class Settings(BaseModel):
    app: AppConfig = AppConfig()
    logging: LoggingConfig = LoggingConfig()
    dmc: DMCConfig = DMCConfig()
    ingest: IngestConfig = IngestConfig()
    poller: PollerConfig = PollerConfig()
    api: APIConfig = APIConfig()


def get_project_root() -> Path:
    return Path(__file__).parent.parent.parent


def load_yaml_config(env: str = "development") -> dict[str, Any]:
    config_path = get_project_root() / "config" / "environments" / f"{env}.yaml"
    if not config_path.exists():
        return {}
    with open(config_path, "r") as f:
        return yaml.safe_load(f) or {}


def get_settings(env: Optional[str] = None) -> Settings:
    env = env or os.getenv("APP_ENV", "development")
    yaml_config = load_yaml_config(env)

    # Override with env vars
    if os.getenv("DMC_BASE_URL"):
        yaml_config.setdefault("dmc", {})["base_url"] = os.getenv("DMC_BASE_URL")
    if os.getenv("DMC_TIMEOUT_SECONDS"):
        yaml_config.setdefault("dmc", {})["timeout_seconds"] = os.getenv("DMC_TIMEOUT_SECONDS")
    if os.getenv("LOG_LEVEL"):
        yaml_config.setdefault("logging", {})["level"] = os.getenv("LOG_LEVEL")
    if os.getenv("POLL_INTERVAL_SECONDS"):
        yaml_config.setdefault("poller", {})["interval_seconds"] = os.getenv("POLL_INTERVAL_SECONDS")

    return Settings(**yaml_config) if yaml_config else Settings()


settings = get_settings()
