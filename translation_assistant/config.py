"""Assistant configuration loaded from YAML files."""

from pathlib import Path
from typing import Optional

import yaml
from pydantic import BaseModel, Field, ValidationError

from .errors import ConfigError


class ReportConfig(BaseModel):
    """Settings of the HTML diagnostics report."""
    title: str = "Translation Suggestion Report"
    output_path: Optional[str] = None
    max_items_per_group: int = Field(default=5, ge=0)


class AssistantConfig(BaseModel):
    """Configuration of a translation assistant."""
    lang: str = "en"
    report: ReportConfig = Field(default_factory=ReportConfig)


def load_config(config_path: Optional[str] = None) -> AssistantConfig:
    """Load configuration from a YAML file.

    Example file:
        lang: pt
        report:
          title: Portuguese suggestions
          output_path: reports/pt.html

    Args:
        config_path: Path to config YAML file

    Returns:
        Loaded config, or the defaults if no file is given or it doesn't exist

    Raises:
        ConfigError: If the file can't be parsed or has invalid values
    """
    if not config_path or not Path(config_path).exists():
        return AssistantConfig()

    try:
        with open(config_path, 'r', encoding='utf-8') as f:
            data = yaml.safe_load(f) or {}
    except (OSError, yaml.YAMLError) as e:
        raise ConfigError(f"Failed to read config {config_path}: {e}", e) from e

    if not isinstance(data, dict):
        raise ConfigError(f"Config {config_path} must contain a mapping")

    try:
        return AssistantConfig(**data)
    except ValidationError as e:
        raise ConfigError(f"Invalid config {config_path}: {e}", e) from e
