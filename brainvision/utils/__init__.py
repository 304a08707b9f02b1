"""Shared helpers: logger factory and configuration loading."""

from .logger import get_logger
from .config_loader import load_config

__all__ = ["get_logger", "load_config"]
