from .strings import shorten
from .logger import get_logger, setup_logging
from .config import Config, RenderConfig, ViewerConfig

__all__ = [
    "shorten",
    "get_logger",
    "setup_logging",
    "Config",
    "RenderConfig",
    "ViewerConfig",
]
