"""Search, scroll and the multi-search family."""

from .._utils._endpoint import Endpoint, Param
from .._utils.constants import CONTENT_TYPE_NDJSON
from ._common import (
    ANY,
    BOOL,
    BOOL_OR_INT,
    DURATION,
    INT,
    LIST,
    QUERY_STRING,
    SOURCE,
    STRING,
    WILDCARDS,
    bools,
    ints,
    lists,
    strings,
)

SEARCH_PARAMS = (
    *WILDCARDS,
    *QUERY_STRING,
    *bools(
        "allow_partial_search_results",
        "ccs_minimize_roundtrips",
        "explain",
        "ignore_throttled",
        "request_cache",
        "rest_total_hits_as_int",
        "seq_no_primary_term",
        "track_scores",
        "typed_keys",
        "version",
    ),
    *ints(
        "batched_reduce_size",
        "max_concurrent_shard_requests",
        "pre_filter_shard_size",
        "size",
        "suggest_size",
        "terminate_after",
    ),
    Param("from_", INT, "from"),
    *lists("docvalue_fields", "routing", "sort", "stats", "stored_fields"),
    *SOURCE,
    *strings("preference", "search_type", "suggest_field", "suggest_mode", "suggest_text"),
    Param("scroll", DURATION),
    Param("timeout", DURATION),
    Param("track_total_hits", BOOL_OR_INT),
)

SEARCH = Endpoint(
    "search",
    "GET",
    "/{index?}/{doc_type?}/_search",
    params=SEARCH_PARAMS,
    body=True,
)

COUNT = Endpoint(
    "count",
    "POST",
    "/{index?}/{doc_type?}/_count",
    params=(
        *WILDCARDS,
        *QUERY_STRING,
        Param("ignore_throttled", BOOL),
        Param("min_score", ANY),
        Param("preference", STRING),
        Param("routing", LIST),
        Param("terminate_after", INT),
    ),
    body=True,
)

SCROLL = Endpoint(
    "scroll",
    "POST",
    "/_search/scroll/{scroll_id?}",
    params=(Param("scroll", DURATION), Param("rest_total_hits_as_int", BOOL)),
    body=True,
)

CLEAR_SCROLL = Endpoint(
    "clear_scroll",
    "DELETE",
    "/_search/scroll/{scroll_id?}",
    body=True,
)

_MULTI = (
    *bools("ccs_minimize_roundtrips", "rest_total_hits_as_int", "typed_keys"),
    *ints("max_concurrent_searches"),
    Param("search_type", STRING),
)

MSEARCH = Endpoint(
    "msearch",
    "POST",
    "/{index?}/{doc_type?}/_msearch",
    params=(
        *_MULTI,
        *ints("max_concurrent_shard_requests", "pre_filter_shard_size"),
    ),
    body=True,
    content_type=CONTENT_TYPE_NDJSON,
)

MSEARCH_TEMPLATE = Endpoint(
    "msearch_template",
    "POST",
    "/{index?}/{doc_type?}/_msearch/template",
    params=_MULTI,
    body=True,
    content_type=CONTENT_TYPE_NDJSON,
)

SEARCH_TEMPLATE = Endpoint(
    "search_template",
    "POST",
    "/{index?}/{doc_type?}/_search/template",
    params=(
        *WILDCARDS,
        *bools(
            "ccs_minimize_roundtrips",
            "explain",
            "ignore_throttled",
            "profile",
            "rest_total_hits_as_int",
            "typed_keys",
        ),
        *lists("routing"),
        Param("preference", STRING),
        Param("scroll", DURATION),
        Param("search_type", STRING),
    ),
    body=True,
)

RENDER_SEARCH_TEMPLATE = Endpoint(
    "render_search_template",
    "POST",
    "/_render/template/{id?}",
    body=True,
)

SEARCH_SHARDS = Endpoint(
    "search_shards",
    "GET",
    "/{index?}/_search_shards",
    params=(
        *WILDCARDS,
        Param("local", BOOL),
        Param("preference", STRING),
        Param("routing", STRING),
    ),
)

FIELD_CAPS = Endpoint(
    "field_caps",
    "POST",
    "/{index?}/_field_caps",
    params=(*WILDCARDS, *lists("fields"), Param("include_unmapped", BOOL)),
    body=True,
)

RANK_EVAL = Endpoint(
    "rank_eval",
    "POST",
    "/{index?}/_rank_eval",
    params=WILDCARDS,
    body=True,
)

ENDPOINTS = (
    SEARCH,
    COUNT,
    SCROLL,
    CLEAR_SCROLL,
    MSEARCH,
    MSEARCH_TEMPLATE,
    SEARCH_TEMPLATE,
    RENDER_SEARCH_TEMPLATE,
    SEARCH_SHARDS,
    FIELD_CAPS,
    RANK_EVAL,
)
