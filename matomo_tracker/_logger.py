import logging
from typing import Optional

from matomo_tracker.internal.logger import MatomoFormatter
from matomo_tracker.settings import MatomoTrackerConfig
from matomo_tracker.settings import config


def configure_logger(settings=None):
    # type: (Optional[MatomoTrackerConfig]) -> None
    """Configures the matomo_tracker log level and handlers.

    Customization is possible with the environment variables:
        ``MATOMO_TRACKER_DEBUG`` and ``MATOMO_TRACKER_LOG_STREAM_HANDLER``

    By default the package logger gets a stream handler using ``MatomoFormatter``
    and otherwise inherits its level from the root logger.
    """
    if settings is None:
        settings = config
    logger = logging.getLogger("matomo_tracker")
    if settings.log_stream_handler:
        _add_stream_handler(logger)

    _configure_debug_logger(logger, settings)


def _add_stream_handler(logger):
    # type: (logging.Logger) -> None
    # configure_logger may run more than once, e.g. from tests
    if any(isinstance(h, logging.StreamHandler) and isinstance(h.formatter, MatomoFormatter) for h in logger.handlers):
        return
    handler = logging.StreamHandler()
    handler.setFormatter(MatomoFormatter())
    logger.addHandler(handler)


def _configure_debug_logger(logger, settings):
    # type: (logging.Logger, MatomoTrackerConfig) -> None
    if settings.debug:
        logger.setLevel(logging.DEBUG)
