"""管理器模块"""

from .config_manager import ConfigError, ConfigManager
from .image_manager import ImageManager

__all__ = [
    "ConfigError",
    "ConfigManager",
    "ImageManager",
]
