"""Configuration models for orgtree."""

import codecs
from pathlib import Path

import yaml
from pydantic import BaseModel, Field, field_validator


class ParserConfig(BaseModel):
    """Configuration for heading detection."""

    marker: str = Field(
        default="*",
        description="Heading marker character (repeated once per nesting level)"
    )

    @field_validator("marker")
    @classmethod
    def validate_marker(cls, v: str) -> str:
        """Marker must be a single non-whitespace character."""
        if len(v) != 1 or v.isspace():
            raise ValueError(
                f"Heading marker must be a single non-whitespace character, got {v!r}"
            )
        return v

    model_config = {"frozen": True}


class FileConfig(BaseModel):
    """Configuration for reading and writing org files."""

    encoding: str = Field(
        default="utf-8",
        description="Text encoding used for org files"
    )

    @field_validator("encoding")
    @classmethod
    def validate_encoding(cls, v: str) -> str:
        """Encoding must be known to Python's codec registry."""
        try:
            codecs.lookup(v)
        except LookupError:
            raise ValueError(f"Unknown text encoding: {v}")
        return v

    model_config = {"frozen": True}


class Config(BaseModel):
    """Root configuration for orgtree."""

    parser: ParserConfig = Field(default_factory=ParserConfig, description="Heading detection settings")
    files: FileConfig = Field(default_factory=FileConfig, description="File I/O settings")

    @classmethod
    def load(cls, path: Path) -> "Config":
        """
        Load configuration from YAML file.

        Args:
            path: Path to config.yaml file

        Returns:
            Validated Config instance

        Raises:
            FileNotFoundError: If config file doesn't exist
            ValueError: If validation fails
            yaml.YAMLError: If YAML is malformed
        """
        if not path.exists():
            raise FileNotFoundError(
                f"Configuration file not found at {path}\n\n"
                f"Example:\n\n"
                f"parser:\n"
                f"  marker: \"*\"\n\n"
                f"files:\n"
                f"  encoding: utf-8\n"
            )

        with open(path) as f:
            data = yaml.safe_load(f) or {}

        return cls(**data)

    model_config = {"frozen": True}
