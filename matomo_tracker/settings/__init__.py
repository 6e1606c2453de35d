from ._config import MatomoTrackerConfig
from ._config import config


__all__ = ["MatomoTrackerConfig", "config"]
