from urllib.parse import urlencode
import warnings

from hypothesis import given
from hypothesis import strategies as st
import mock
import pytest

from matomo_tracker.errors import UnknownParameter
from matomo_tracker.ext import ParamTier
from matomo_tracker.ext.query_params import QueryParams
from matomo_tracker.ext.query_params import enumerate_params
from matomo_tracker.ext.query_params import key_of
from matomo_tracker.ext.query_params import params_for_tier
from matomo_tracker.ext.query_params import resolve
from matomo_tracker.internal.utils.deprecations import MatomoDeprecationWarning
from matomo_tracker.settings import config


# Wire keys dictated by the tracking HTTP API, in declaration order
WIRE_KEYS = [
    "idsite",
    "rec",
    "url",
    "action_name",
    "_id",
    "rand",
    "apiv",
    "urlref",
    "_cvar",
    "_idvc",
    "_viewts",
    "_idts",
    "_rcn",
    "_rck",
    "res",
    "h",
    "m",
    "s",
    "ua",
    "lang",
    "uid",
    "new_visit",
    "cvar",
    "link",
    "download",
    "search",
    "search_cat",
    "search_count",
    "idgoal",
    "revenue",
    "cdt",
    "c_n",
    "c_p",
    "c_t",
    "c_i",
    "e_c",
    "e_a",
    "e_n",
    "e_v",
    "ec_items",
    "ec_tx",
    "ec_id",
    "ec_sh",
    "ec_dt",
    "ec_st",
    "send_image",
]

DEPRECATED = (QueryParams.VISIT_SCOPE_CUSTOM_VARIABLES, QueryParams.SCREEN_SCOPE_CUSTOM_VARIABLES)


@pytest.mark.parametrize(
    "param,key",
    [
        (QueryParams.SITE_ID, "idsite"),
        (QueryParams.VISITOR_ID, "_id"),
        (QueryParams.EVENT_CATEGORY, "e_c"),
        (QueryParams.SEND_IMAGE, "send_image"),
        (QueryParams.ECOMMERCE_ITEMS, "ec_items"),
        (QueryParams.VISIT_SCOPE_CUSTOM_VARIABLES, "_cvar"),
        (QueryParams.SCREEN_SCOPE_CUSTOM_VARIABLES, "cvar"),
    ],
)
def test_key_of(param, key):
    assert key_of(param) == key
    assert param.key == key
    assert str(param) == key


def test_enumerate_params_matches_wire_keys():
    """The table lists every wire key exactly once, in declaration order."""
    params = enumerate_params()
    assert [key_of(p) for p in params] == WIRE_KEYS
    assert len(params) == len(set(params)) == 46
    assert params == tuple(QueryParams)


def test_enumerate_params_is_restartable():
    assert enumerate_params() == enumerate_params()


def test_wire_keys_are_unique_and_well_formed():
    keys = [key_of(p) for p in enumerate_params()]
    assert len(set(keys)) == len(keys) == 46
    for key in keys:
        assert key
        assert not any(c.isspace() for c in key), key
        assert key.isascii()


def test_key_of_is_idempotent():
    for param in QueryParams:
        assert key_of(param) == key_of(param)
        assert str(param) == str(param) == param.value


def test_key_of_does_not_warn():
    with warnings.catch_warnings(record=True) as ws:
        warnings.simplefilter("always")
        for param in QueryParams:
            key_of(param)
    assert ws == []


def test_string_forms():
    """Members render as their wire key wherever a string is built from them."""
    assert "{}".format(QueryParams.USER_ID) == "uid"
    assert f"{QueryParams.USER_ID}=42" == "uid=42"
    assert QueryParams.USER_ID == "uid"
    assert urlencode({QueryParams.SITE_ID: 1, QueryParams.RECORD: 1, QueryParams.URL_PATH: "/home"}) == (
        "idsite=1&rec=1&url=%2Fhome"
    )


def test_table_is_closed():
    with pytest.raises(AttributeError):
        QueryParams.SITE_ID = "site"
    with pytest.raises(AttributeError):
        del QueryParams.SITE_ID
    assert QueryParams.SITE_ID.key == "idsite"


@pytest.mark.parametrize("key", WIRE_KEYS)
def test_from_key(key):
    param = QueryParams.from_key(key)
    assert isinstance(param, QueryParams)
    assert param.key == key


@pytest.mark.parametrize("key", ["", "IDSITE", "id site", "SITE_ID", "e-c", None, 1])
def test_from_key_unknown(key):
    with pytest.raises(UnknownParameter) as exc_info:
        QueryParams.from_key(key)
    assert exc_info.value.identifier == key
    assert isinstance(exc_info.value, ValueError)


@given(st.text().filter(lambda s: s not in WIRE_KEYS and s not in QueryParams.__members__))
def test_resolve_rejects_anything_outside_the_table(identifier):
    with pytest.raises(UnknownParameter):
        resolve(identifier)


def test_from_key_logs_unknown_keys():
    with mock.patch("matomo_tracker.ext.query_params.log") as log:
        with pytest.raises(UnknownParameter):
            QueryParams.from_key("nope")
    log.debug.assert_called_once_with(
        "lookup::unknown", extra={"product": "query_params", "more_info": " key='nope'"}
    )


@pytest.mark.parametrize(
    "identifier,expected",
    [
        (QueryParams.VISITOR_ID, QueryParams.VISITOR_ID),
        ("VISITOR_ID", QueryParams.VISITOR_ID),
        ("_id", QueryParams.VISITOR_ID),
        ("EVENT_CATEGORY", QueryParams.EVENT_CATEGORY),
        ("e_c", QueryParams.EVENT_CATEGORY),
        ("send_image", QueryParams.SEND_IMAGE),
    ],
)
def test_resolve(identifier, expected):
    assert resolve(identifier) is expected


def test_resolve_unknown():
    with pytest.raises(UnknownParameter) as exc_info:
        resolve("visitor_id")
    assert exc_info.value.identifier == "visitor_id"
    assert "visitor_id" in str(exc_info.value)


def test_deprecated_members():
    assert {p for p in QueryParams if p.deprecated} == set(DEPRECATED)
    for param in DEPRECATED:
        assert "Custom Dimensions" in param.deprecation_message
    assert QueryParams.SITE_ID.deprecation_message is None


@pytest.mark.parametrize("identifier", ["VISIT_SCOPE_CUSTOM_VARIABLES", "_cvar", "cvar"])
def test_resolve_deprecated_warns(identifier):
    with warnings.catch_warnings(record=True) as ws:
        warnings.simplefilter("always")
        param = resolve(identifier)

    assert param.deprecated
    assert len(ws) == 1
    assert issubclass(ws[0].category, MatomoDeprecationWarning)
    message = str(ws[0].message)
    assert "QueryParams.{} ({}) is deprecated".format(param.name, param.key) in message
    assert "Custom Dimensions" in message


def test_resolve_deprecated_warning_disabled():
    with mock.patch.object(config, "warn_deprecated_params", False):
        with warnings.catch_warnings(record=True) as ws:
            warnings.simplefilter("always")
            assert resolve("_cvar") is QueryParams.VISIT_SCOPE_CUSTOM_VARIABLES
    assert ws == []


def test_resolve_current_param_does_not_warn():
    with warnings.catch_warnings(record=True) as ws:
        warnings.simplefilter("always")
        resolve("idsite")
    assert ws == []


def test_tiers():
    assert params_for_tier(ParamTier.REQUIRED) == (QueryParams.SITE_ID, QueryParams.RECORD, QueryParams.URL_PATH)
    assert params_for_tier("recommended") == (
        QueryParams.ACTION_NAME,
        QueryParams.VISITOR_ID,
        QueryParams.RANDOM_NUMBER,
        QueryParams.API_VERSION,
    )
    optional = params_for_tier(ParamTier.OPTIONAL)
    assert len(optional) == 39
    assert QueryParams.VISIT_SCOPE_CUSTOM_VARIABLES in optional


def test_tiers_partition_the_table():
    by_tier = [p for tier in ParamTier for p in params_for_tier(tier)]
    assert sorted(by_tier, key=WIRE_KEYS.index) == list(QueryParams)


def test_unknown_tier():
    with pytest.raises(ValueError):
        params_for_tier("mandatory")
