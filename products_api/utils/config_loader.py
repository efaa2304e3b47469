"""
App configuration loader (service metadata, CORS, logging).
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import List, Literal, Optional

import yaml
from pydantic import BaseModel, Field, ValidationError

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = Path(__file__).parent.parent.parent / "config" / "app_config.yml"


class CorsConfig(BaseModel):
    allow_origins: List[str] = Field(default_factory=lambda: ["*"])
    allow_credentials: bool = True


class LoggingConfig(BaseModel):
    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


class AppConfig(BaseModel):
    title: str = "Products API"
    description: str = "Product listing API with a transport-independent controller"
    version: str = "1.0.0"
    api_prefix: str = "/api/v1"
    cors: CorsConfig = Field(default_factory=CorsConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def load_app_config(config_path: Optional[Path] = None) -> AppConfig:
    """
    Load and validate the app configuration from a YAML file.

    Args:
        config_path: Path to config file. Defaults to $APP_CONFIG_PATH, then
            config/app_config.yml at the repository root.

    Raises:
        FileNotFoundError: If config file doesn't exist
        ValidationError: If config doesn't match schema
    """
    if config_path is None:
        env_path = os.getenv("APP_CONFIG_PATH")
        config_path = Path(env_path) if env_path else DEFAULT_CONFIG_PATH

    if not config_path.exists():
        raise FileNotFoundError(f"App config file not found: {config_path}")

    with open(config_path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}

    try:
        cfg = AppConfig(**data)
        logger.info("Successfully loaded app config from %s", config_path)
        return cfg
    except ValidationError as e:
        logger.error("App config validation failed: %s", e)
        raise
