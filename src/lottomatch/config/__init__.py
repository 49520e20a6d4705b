"""Config loading and schema."""

from .loader import ConfigLoadError, load_config, load_env_config
from .schema import MatchConfig

__all__ = ["ConfigLoadError", "MatchConfig", "load_config", "load_env_config"]
