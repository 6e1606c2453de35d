from typing import TYPE_CHECKING

from debtcollector import deprecate


if TYPE_CHECKING:  # pragma: no cover
    from matomo_tracker.ext.query_params import QueryParams


class MatomoDeprecationWarning(DeprecationWarning):
    pass


def report_deprecated_param(param, stacklevel=5):
    # type: (QueryParams, int) -> None
    """Report the use of a deprecated query parameter.

    Bear in mind that ``DeprecationWarning`` is ignored by default outside of
    ``__main__``, so applications must run with ``python -Wall`` (or install a
    warnings filter) to see these.

    The default ``stacklevel`` points the warning at the code that called the
    public lookup function, not at this helper.
    """
    deprecate(
        prefix="{}.{} ({}) is deprecated".format(type(param).__name__, param.name, param.key),
        message=param.deprecation_message,
        category=MatomoDeprecationWarning,
        stacklevel=stacklevel,
    )
