"""Config module."""
from pathlib import Path
from typing import Optional

from attr import frozen
from loguru import logger
from oes.eventdesk.models.config import Config
from oes.eventdesk.serialization import get_config_converter
from ruamel.yaml import YAML

yaml = YAML(typ="safe")


@frozen
class CommandLineConfig:
    """Command line config settings."""

    debug: bool
    config: Path
    audit_log: Optional[Path] = None


def load_config(path: Path) -> Config:
    """Load the main configuration."""
    doc = yaml.load(path)
    config = get_config_converter().structure(doc or {}, Config)
    return config


def get_config(path: Path) -> Config:
    """Load the configuration at ``path``, or the defaults if it doesn't exist."""
    if not path.exists():
        logger.warning(f"Config file {path} not found, using defaults")
        return Config()
    return load_config(path)
