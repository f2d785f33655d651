from .._utils._endpoint import Endpoint, Param
from ._common import DURATION, STRING, bools, ints, lists

_TIMEOUT = (Param("timeout", DURATION),)

HOT_THREADS = Endpoint(
    "nodes.hot_threads",
    "GET",
    "/_nodes/{node_id?}/hot_threads",
    params=(
        *bools("ignore_idle_threads"),
        Param("interval", DURATION),
        *ints("snapshots", "threads"),
        Param("doc_type", STRING, "type"),
        *_TIMEOUT,
    ),
)

INFO = Endpoint(
    "nodes.info",
    "GET",
    "/_nodes/{node_id?}/{metric?}",
    params=(*bools("flat_settings"), *_TIMEOUT),
)

RELOAD_SECURE_SETTINGS = Endpoint(
    "nodes.reload_secure_settings",
    "POST",
    "/_nodes/{node_id?}/reload_secure_settings",
    params=_TIMEOUT,
)

STATS = Endpoint(
    "nodes.stats",
    "GET",
    "/_nodes/{node_id?}/stats/{metric?}/{index_metric?}",
    params=(
        *lists("completion_fields", "fielddata_fields", "fields", "groups", "types"),
        *bools("include_segment_file_sizes"),
        Param("level", STRING),
        *_TIMEOUT,
    ),
)

USAGE = Endpoint(
    "nodes.usage",
    "GET",
    "/_nodes/{node_id?}/usage/{metric?}",
    params=_TIMEOUT,
)

ENDPOINTS = (HOT_THREADS, INFO, RELOAD_SECURE_SETTINGS, STATS, USAGE)
