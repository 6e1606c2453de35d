from envier import En


def _validate_logging_rate(value):
    # type: (int) -> None
    if value < 0:
        raise ValueError("logging rate must be a non-negative number of seconds, got %d" % value)


class MatomoTrackerConfig(En):
    __prefix__ = "matomo_tracker"

    debug = En.v(
        bool,
        "debug",
        default=False,
        help_type="Boolean",
        help="Set the matomo_tracker logger to the DEBUG level",
    )

    logging_rate = En.v(
        int,
        "logging_rate",
        default=60,
        help_type="Integer",
        help="Seconds between two identical log lines from the same call site. 0 disables rate limiting",
        validator=_validate_logging_rate,
    )

    log_stream_handler = En.v(
        bool,
        "log_stream_handler",
        default=True,
        help_type="Boolean",
        help="Attach a stream handler to the matomo_tracker logger",
    )

    warn_deprecated_params = En.v(
        bool,
        "warn_deprecated_params",
        default=True,
        help_type="Boolean",
        help="Emit a deprecation warning when a deprecated query parameter is resolved by name or key",
    )


config = MatomoTrackerConfig()
