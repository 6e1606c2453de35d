"""
Logging utilities for internal use.
Usage:
    from matomo_tracker.internal.logger import get_logger
    log = get_logger(__name__)

    # Records that carry a "product" extra are rate limited by message instead of by call site
    log.debug("lookup::unknown", extra={"product": "query_params", "more_info": " key=%r" % key})

    # example result
    DEBUG query_params::lookup::unknown key='foo' [3 skipped]

By default one record per call site is let through every ``MATOMO_TRACKER_LOGGING_RATE`` seconds (60).
Loggers whose effective level is DEBUG are never rate limited.
"""

import collections
import logging
import time
import traceback
from typing import DefaultDict
from typing import Tuple
from typing import Union

from matomo_tracker.settings import config


def get_logger(name: str) -> logging.Logger:
    """
    Retrieve or create a ``Logger`` instance with consistent behavior for internal use.

    Configure all loggers with a rate limiter filter to prevent excessive logging.
    """
    logger = logging.getLogger(name)
    # addFilter will only add the filter if it is not already present
    logger.addFilter(log_filter)
    logger.propagate = True
    return logger


# Keeps track of a log line's current time bucket and the number of log lines skipped in it
class LoggingBucket:
    def __init__(self, bucket: float, skipped: int):
        self.bucket = bucket
        self.skipped = skipped

    def __repr__(self):
        return f"LoggingBucket({self.bucket}, {self.skipped})"

    def is_sampled(self, record: logging.LogRecord, rate: float) -> bool:
        """
        Determine if the log line should be sampled based on the rate limit.
        """
        current = time.monotonic()
        if current - self.bucket >= rate:
            self.bucket = current
            record.skipped = self.skipped
            self.skipped = 0
            return True
        self.skipped += 1
        return False


_MINF = float("-inf")

key_type = Union[Tuple[str, int], str]
_buckets: DefaultDict[key_type, LoggingBucket] = collections.defaultdict(lambda: LoggingBucket(_MINF, 0))

# DEV: a rate of 0 disables all rate limiting
_rate_limit = config.logging_rate


def log_filter(record: logging.LogRecord) -> bool:
    """
    Function used to determine if a log record should be outputted or not (True = output, False = skip).

    Records are rate limited by pathname/lineno, or by message for records tagged with a product.
    """
    logger = logging.getLogger(record.name)
    if not _rate_limit or logger.getEffectiveLevel() == logging.DEBUG:
        return True
    if hasattr(record, "product"):
        key: key_type = record.msg
    else:
        key = (record.pathname, record.lineno)
    return _buckets[key].is_sampled(record, _rate_limit)


class MatomoFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        skipped = getattr(record, "skipped", 0)
        skip_str = f" [{skipped} skipped]" if skipped else ""
        product = getattr(record, "product", None)
        if product:
            more_info = getattr(record, "more_info", "")
            string_buffer = [f"{record.levelname} {product}::{record.getMessage()}{more_info}{skip_str}"]
            if record.exc_info:
                string_buffer.extend(traceback.format_exception(*record.exc_info, limit=1))
            return "\n".join(string_buffer)
        return f"{record.levelname} {super().format(record)}{skip_str}"
