"""
Configuration management for the UPC-E row decoder.
"""

from upce_decoder.config.logging import configure_logging
from upce_decoder.config.settings import Settings, get_settings

__all__ = ["Settings", "get_settings", "configure_logging"]
