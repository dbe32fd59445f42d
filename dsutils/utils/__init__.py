from .config_manager import Config
from .logger_utils import setup_logging, time_block

__all__ = ["Config", "setup_logging", "time_block"]
