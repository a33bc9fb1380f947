"""Configuration for keyhash."""

from .config import DEFAULT_ENCODING, KeyHashConfig, load_config

__all__ = ["DEFAULT_ENCODING", "KeyHashConfig", "load_config"]
