"""Configuration loader with YAML and environment variable support.

Reads ~/.config/orgtree/config.yaml (if it exists) and applies environment
variable overrides using the ORGTREE_ prefix. Every setting has a default,
so a missing file is not an error.

Environment variables:
- ORGTREE_PARSER_MARKER: Override heading marker character
- ORGTREE_FILES_ENCODING: Override file encoding
"""

import os
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from orgtree.models.config import Config
from orgtree.utils.logging import get_logger

logger = get_logger(__name__)

DEFAULT_CONFIG_PATH = Path.home() / ".config" / "orgtree" / "config.yaml"


def load_config(config_path: Optional[Path] = None) -> Config:
    """Load configuration from YAML file with environment variable overrides.

    Args:
        config_path: Path to config file. If None, uses ~/.config/orgtree/config.yaml

    Returns:
        Validated Config object

    Raises:
        ValueError: If a setting is invalid
        yaml.YAMLError: If the config file is malformed
    """
    if config_path is None:
        config_path = DEFAULT_CONFIG_PATH

    if config_path.exists():
        with config_path.open() as f:
            data = yaml.safe_load(f) or {}
    else:
        data = {}

    data = _apply_env_overrides(data)

    config = Config(**data)
    logger.debug(
        "config_loaded",
        path=str(config_path),
        marker=config.parser.marker,
        encoding=config.files.encoding,
    )
    return config


def _apply_env_overrides(data: Dict[str, Any]) -> Dict[str, Any]:
    """Apply ORGTREE_SECTION_KEY environment variables to configuration data.

    For example: ORGTREE_PARSER_MARKER sets data['parser']['marker']
    """
    data.setdefault("parser", {})
    data.setdefault("files", {})

    if env_marker := os.getenv("ORGTREE_PARSER_MARKER"):
        data["parser"]["marker"] = env_marker

    if env_encoding := os.getenv("ORGTREE_FILES_ENCODING"):
        data["files"]["encoding"] = env_encoding

    return data
