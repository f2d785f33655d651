"""Delete/update by query, reindex and their rethrottle companions."""

from .._utils._endpoint import Endpoint, Param
from ._common import (
    BOOL,
    DURATION,
    INT,
    QUERY_STRING,
    SLICES,
    SOURCE,
    STRING,
    WILDCARDS,
    bools,
    durations,
    ints,
    lists,
    strings,
)

_TASK = (
    Param("requests_per_second", INT),
    Param("slices", SLICES),
    Param("timeout", DURATION),
    Param("wait_for_active_shards", STRING),
    Param("wait_for_completion", BOOL),
)

_BY_QUERY = (
    *WILDCARDS,
    *QUERY_STRING,
    *_TASK,
    Param("from_", INT, "from"),
    *strings("conflicts", "preference", "search_type"),
    *bools("refresh", "request_cache", "version"),
    *ints("max_docs", "scroll_size", "size", "terminate_after"),
    *lists("routing", "sort", "stats"),
    *durations("scroll", "search_timeout"),
    *SOURCE,
)

DELETE_BY_QUERY = Endpoint(
    "delete_by_query",
    "POST",
    "/{index}/{doc_type?}/_delete_by_query",
    params=_BY_QUERY,
    body=True,
)

UPDATE_BY_QUERY = Endpoint(
    "update_by_query",
    "POST",
    "/{index}/{doc_type?}/_update_by_query",
    params=(*_BY_QUERY, Param("pipeline", STRING), Param("version_type", BOOL)),
    body=True,
)

REINDEX = Endpoint(
    "reindex",
    "POST",
    "/_reindex",
    params=(
        *_TASK,
        Param("max_docs", INT),
        Param("refresh", BOOL),
        Param("scroll", DURATION),
    ),
    body=True,
)

_RETHROTTLE = (Param("requests_per_second", INT),)

REINDEX_RETHROTTLE = Endpoint(
    "reindex_rethrottle",
    "POST",
    "/_reindex/{task_id}/_rethrottle",
    params=_RETHROTTLE,
)

DELETE_BY_QUERY_RETHROTTLE = Endpoint(
    "delete_by_query_rethrottle",
    "POST",
    "/_delete_by_query/{task_id}/_rethrottle",
    params=_RETHROTTLE,
)

UPDATE_BY_QUERY_RETHROTTLE = Endpoint(
    "update_by_query_rethrottle",
    "POST",
    "/_update_by_query/{task_id}/_rethrottle",
    params=_RETHROTTLE,
)

ENDPOINTS = (
    DELETE_BY_QUERY,
    UPDATE_BY_QUERY,
    REINDEX,
    REINDEX_RETHROTTLE,
    DELETE_BY_QUERY_RETHROTTLE,
    UPDATE_BY_QUERY_RETHROTTLE,
)
