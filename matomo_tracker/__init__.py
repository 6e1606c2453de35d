from ._logger import configure_logger


# configure the package logger before other modules log
configure_logger()  # noqa: E402

from .errors import UnknownParameter  # noqa: E402
from .ext import ParamTier  # noqa: E402
from .ext.query_params import QueryParams  # noqa: E402
from .ext.query_params import enumerate_params  # noqa: E402
from .ext.query_params import key_of  # noqa: E402
from .ext.query_params import params_for_tier  # noqa: E402
from .ext.query_params import resolve  # noqa: E402
from .internal.utils.deprecations import MatomoDeprecationWarning  # noqa: E402
from .settings import config  # noqa: E402
from .version import __version__  # noqa: E402


__all__ = [
    "MatomoDeprecationWarning",
    "ParamTier",
    "QueryParams",
    "UnknownParameter",
    "__version__",
    "config",
    "enumerate_params",
    "key_of",
    "params_for_tier",
    "resolve",
]
