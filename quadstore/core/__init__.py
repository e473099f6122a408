from . import logger
from .settings import Settings, load_settings

__all__ = ["logger", "Settings", "load_settings"]
