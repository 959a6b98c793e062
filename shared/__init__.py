"""
CaesarKit Shared Module
=======================

Common utilities, models, and configuration management shared across
CaesarKit tools.
"""

from shared.config import KitConfig, get_config

__all__ = ["KitConfig", "get_config"]
