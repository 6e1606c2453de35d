"""
Query parameters supported by the Matomo tracking HTTP API.

See the `Tracking HTTP API <https://developer.matomo.org/api-reference/tracking-api>`_.

Each member of :class:`QueryParams` is the wire key itself, so it can be used anywhere a
parameter name string is expected::

    from urllib.parse import urlencode

    urlencode({QueryParams.SITE_ID: 1, QueryParams.RECORD: 1, QueryParams.URL_PATH: "/home"})
    # 'idsite=1&rec=1&url=%2Fhome'

Requirement tiers are advisory and not enforced anywhere.
"""
from enum import unique
from typing import Optional
from typing import Tuple
from typing import Union

from matomo_tracker.errors import UnknownParameter
from matomo_tracker.ext import ParamTier
from matomo_tracker.ext import StrEnum
from matomo_tracker.internal.logger import get_logger
from matomo_tracker.internal.utils.deprecations import report_deprecated_param
from matomo_tracker.settings import config


log = get_logger(__name__)

_USE_CUSTOM_DIMENSIONS = "Consider using Custom Dimensions (http://matomo.org/docs/custom-dimensions/)"


@unique
class QueryParams(StrEnum):
    def __new__(cls, key, tier=ParamTier.OPTIONAL, deprecation_message=None):
        # type: (str, ParamTier, Optional[str]) -> QueryParams
        obj = str.__new__(cls, key)
        obj._value_ = key
        obj._tier = tier
        obj._deprecation_message = deprecation_message
        return obj

    # Required parameters

    #: The ID of the website we're tracking a visit/action for.
    SITE_ID = ("idsite", ParamTier.REQUIRED)

    #: Required for tracking, must be set to one, eg, ``rec=1``.
    RECORD = ("rec", ParamTier.REQUIRED)

    #: The full URL for the current action.
    URL_PATH = ("url", ParamTier.REQUIRED)

    # Recommended parameters

    #: The title of the action being tracked.
    #:
    #: Slashes set one or several categories for this action: ``Help / Feedback`` creates the
    #: action ``Feedback`` in the category ``Help``. See http://matomo.org/faq/how-to/faq_62
    ACTION_NAME = ("action_name", ParamTier.RECOMMENDED)

    #: The unique visitor ID, must be a 16 characters hexadecimal string.
    #:
    #: Every unique visitor must be assigned a different ID and this ID must not change after it is assigned.
    #: Without it Matomo still tracks visits, but the unique visitors metric might be less accurate.
    VISITOR_ID = ("_id", ParamTier.RECOMMENDED)

    #: A random value generated before each request, so browsers and proxies do not cache the request.
    RANDOM_NUMBER = ("rand", ParamTier.RECOMMENDED)

    #: The API version to use, currently always ``apiv=1``.
    API_VERSION = ("apiv", ParamTier.RECOMMENDED)

    # Optional user info

    #: The full HTTP Referrer URL, used to determine how someone got to the website
    #: (through a website, search engine or campaign).
    REFERRER = "urlref"

    #: Visit scope custom variables (http://matomo.org/docs/custom-variables/), as a JSON encoded
    #: string of the custom variable array.
    #:
    #: Deprecated: use Custom Dimensions instead.
    VISIT_SCOPE_CUSTOM_VARIABLES = ("_cvar", ParamTier.OPTIONAL, _USE_CUSTOM_DIMENSIONS)

    #: The current count of visits for this visitor.
    #:
    #: Setting it correctly means storing the value for each visitor in the application and incrementing it on
    #: each new visit or session. Populates the report Visitors > Engagement > Visits by visit number.
    TOTAL_NUMBER_OF_VISITS = "_idvc"

    #: The UNIX timestamp of this visitor's previous visit, in seconds since the epoch (UTC).
    #:
    #: Populates the report Visitors > Engagement > Visits by days since last visit.
    PREVIOUS_VISIT_TIMESTAMP = "_viewts"

    #: The UNIX timestamp of this visitor's first visit, in seconds since the epoch (UTC).
    #:
    #: Could be the date the user first started the app or created an account.
    #: Populates the Goals > Days to Conversion report.
    FIRST_VISIT_TIMESTAMP = "_idts"

    #: The campaign name (http://matomo.org/docs/tracking-campaigns/).
    #:
    #: Populates the Referrers > Campaigns report. Only used for the first pageview of a visit.
    CAMPAIGN_NAME = "_rcn"

    #: The campaign keyword (http://matomo.org/docs/tracking-campaigns/).
    #:
    #: Populates the keywords of the Referrers > Campaigns report. Only used for the first pageview of a visit.
    CAMPAIGN_KEYWORD = "_rck"

    #: The resolution of the device the visitor is using, eg ``1280x1024``.
    SCREEN_RESOLUTION = "res"

    #: The current hour (local time).
    HOURS = "h"

    #: The current minute (local time).
    MINUTES = "m"

    #: The current second (local time).
    SECONDS = "s"

    #: An override value for the User-Agent HTTP header, used to detect the operating system and browser.
    USER_AGENT = "ua"

    #: An override value for the Accept-Language HTTP header.
    #:
    #: Used to detect the visitor's country if GeoIP is not enabled.
    LANGUAGE = "lang"

    #: The User ID for this request: any non empty unique string identifying the user,
    #: such as an email address or a username.
    #:
    #: The User ID is enforced. If there is no visit with this User ID in the last 30 minutes a new
    #: one is created, otherwise the action is recorded to the existing visit.
    USER_ID = "uid"

    #: If set to 1, forces a new visit to be created for this action.
    SESSION_START = "new_visit"

    # Optional action info (page view, outlink, download, site search)

    #: Page scope custom variables (http://matomo.org/docs/custom-variables/), as a JSON encoded
    #: string of the custom variable array.
    #:
    #: Deprecated: use Custom Dimensions instead.
    SCREEN_SCOPE_CUSTOM_VARIABLES = ("cvar", ParamTier.OPTIONAL, _USE_CUSTOM_DIMENSIONS)

    #: An external URL the user has opened, for outlink tracking.
    #: Setting ``url`` to the same value is recommended.
    LINK = "link"

    #: URL of a file the user has downloaded, for download tracking.
    #: Setting ``url`` to the same value is recommended.
    DOWNLOAD = "download"

    #: The site search keyword.
    #:
    #: When specified the request is tracked as a site search (http://matomo.org/docs/site-search/)
    #: instead of a pageview.
    SEARCH_KEYWORD = "search"

    #: Optional search category, only meaningful together with :attr:`SEARCH_KEYWORD`.
    SEARCH_CATEGORY = "search_cat"

    #: The number of search results, recommended together with :attr:`SEARCH_KEYWORD`.
    SEARCH_NUMBER_OF_HITS = "search_count"

    #: Triggers a conversion for the goal with this ID on the tracked website.
    GOAL_ID = "idgoal"

    #: The monetary value generated by this goal conversion. Only used together with :attr:`GOAL_ID`.
    REVENUE = "revenue"

    #: Override for the datetime of the request, normally the current time.
    #:
    #: Format is ``2011-04-05 00:11:42`` in UTC (URL encoded). Requests can only be backdated by 24h, and
    #: reports for past dates must be re-processed (http://matomo.org/faq/how-to/faq_59).
    DATETIME_OF_REQUEST = "cdt"

    # Content tracking (http://matomo.org/docs/content-tracking/)

    #: The name of the content, for instance ``Ad Foo Bar``.
    CONTENT_NAME = "c_n"

    #: The actual content piece, for instance the path to an image, video, audio or any text.
    CONTENT_PIECE = "c_p"

    #: The target of the content, for instance the URL of a landing page.
    CONTENT_TARGET = "c_t"

    #: The name of the interaction with the content, for instance a ``click``.
    CONTENT_INTERACTION = "c_i"

    # Event tracking (http://matomo.org/docs/event-tracking/)

    #: The event category. Must not be empty (eg. Videos, Music, Games...).
    EVENT_CATEGORY = "e_c"

    #: The event action. Must not be empty (eg. Play, Pause, Duration, Add Playlist, Downloaded, Clicked...).
    EVENT_ACTION = "e_a"

    #: The event name (eg. a movie name, a song name or a file name).
    EVENT_NAME = "e_n"

    #: The event value. Must be numeric, not a string.
    EVENT_VALUE = "e_v"

    # Ecommerce parameters

    #: Items in the cart or order.
    ECOMMERCE_ITEMS = "ec_items"

    #: The amount of tax paid for the order.
    TAX = "ec_tx"

    #: The unique identifier for the order.
    ORDER_ID = "ec_id"

    #: The amount of shipping paid on the order.
    SHIPPING = "ec_sh"

    #: The amount of the discount on the order.
    DISCOUNT = "ec_dt"

    #: The sub total amount of the order.
    SUBTOTAL = "ec_st"

    # Other parameters

    #: If set to 0 Matomo responds with HTTP 204 instead of a GIF image.
    #:
    #: Improves performance and fixes errors where images cannot be fetched directly (eg Chrome Apps).
    #: Available since Matomo 2.10.0.
    SEND_IMAGE = "send_image"

    @property
    def key(self):
        # type: () -> str
        """The wire key sent as the HTTP query parameter name."""
        return self._value_

    @property
    def tier(self):
        # type: () -> ParamTier
        return self._tier

    @property
    def deprecated(self):
        # type: () -> bool
        return self._deprecation_message is not None

    @property
    def deprecation_message(self):
        # type: () -> Optional[str]
        return self._deprecation_message

    @classmethod
    def from_key(cls, key):
        # type: (str) -> QueryParams
        """Return the member whose wire key is ``key``.

        :raises UnknownParameter: when no parameter uses that wire key
        """
        try:
            return cls(key)
        except ValueError:
            log.debug("lookup::unknown", extra={"product": "query_params", "more_info": " key=%r" % (key,)})
            raise UnknownParameter(key) from None


_NAMES = QueryParams.__members__


def enumerate_params():
    # type: () -> Tuple[QueryParams, ...]
    """Return every query parameter, in declaration order."""
    return tuple(QueryParams)


def key_of(param):
    # type: (QueryParams) -> str
    return param.key


def resolve(identifier):
    # type: (Union[QueryParams, str]) -> QueryParams
    """Resolve a member, a symbolic name (``"VISITOR_ID"``) or a wire key (``"_id"``) to a query parameter.

    Resolving a deprecated parameter reports a ``MatomoDeprecationWarning`` unless
    ``MATOMO_TRACKER_WARN_DEPRECATED_PARAMS`` is disabled.

    :raises UnknownParameter: when ``identifier`` names no parameter
    """
    if isinstance(identifier, QueryParams):
        param = identifier
    elif isinstance(identifier, str) and identifier in _NAMES:
        param = _NAMES[identifier]
    else:
        param = QueryParams.from_key(identifier)

    if param.deprecated and config.warn_deprecated_params:
        report_deprecated_param(param)
    return param


def params_for_tier(tier):
    # type: (Union[ParamTier, str]) -> Tuple[QueryParams, ...]
    tier = ParamTier(tier)
    return tuple(p for p in QueryParams if p.tier is tier)
