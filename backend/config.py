"""
Configuration module for SEO Signal Score.
Loads and validates configuration from YAML file using Pydantic models.
"""

from pydantic import BaseModel, Field, ValidationError
from typing import List
import yaml
import logging
import os

logger = logging.getLogger(__name__)


class FetchConfig(BaseModel):
    """Settings for loading pages over HTTP."""
    timeout: float = 20  # seconds
    user_agent: str = "SEOSignalScore/1.0"


class Config(BaseModel):
    """Main configuration model."""
    fetch: FetchConfig = Field(default_factory=FetchConfig)
    restricted_url_prefixes: List[str] = Field(default_factory=lambda: [
        "chrome://",
        "chrome-extension://",
        "edge://",
        "about:",
    ])
    log_level: str = "INFO"


def load_config(path: str = "config.yaml") -> Config:
    """
    Load and validate configuration from YAML file.

    Keys left out of the file keep their defaults, so a file may set only
    the values it wants to change.

    Args:
        path: Path to configuration file (default: config.yaml)

    Returns:
        Validated Config object

    Raises:
        FileNotFoundError: If config file doesn't exist
        yaml.YAMLError: If YAML syntax is invalid
        ValueError: If the file is empty, not a mapping, or fails validation
    """
    if not os.path.isfile(path):
        raise FileNotFoundError(
            f"Configuration file not found: {path}\n"
            f"Copy config.example.yaml to {path} or omit --config to use defaults."
        )

    with open(path, 'r', encoding='utf-8') as f:
        try:
            data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise yaml.YAMLError(f"Invalid YAML syntax in {path}: {e}")

    if data is None:
        raise ValueError(f"Configuration file {path} is empty")
    if not isinstance(data, dict):
        raise ValueError(
            f"Configuration file {path} must contain a mapping, got {type(data).__name__}"
        )

    try:
        config = Config.model_validate(data)
    except ValidationError as e:
        raise ValueError(
            f"Invalid configuration structure in {path}: {e}\n"
            f"Please check config.example.yaml for the correct format."
        )

    logger.info(
        f"Loaded configuration from {path} "
        f"(timeout={config.fetch.timeout}s, log_level={config.log_level})"
    )
    return config
