from .config import load_config, validate_config
from .settings import TrackerSettings

__all__ = ["load_config", "validate_config", "TrackerSettings"]
