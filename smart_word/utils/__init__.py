# smart_word/utils/__init__.py
# config, metrics and logging helpers shared by the CLI and evaluation

from .config_manager import Config
from .metrics_tracker import Metrics
from .logger_utils import Log, configure_logging

__all__ = ["Config", "Metrics", "Log", "configure_logging"]
