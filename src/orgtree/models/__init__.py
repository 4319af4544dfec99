"""Configuration models for orgtree."""

from orgtree.models.config import Config, FileConfig, ParserConfig

__all__ = ["Config", "FileConfig", "ParserConfig"]
