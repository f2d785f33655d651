from .._utils._endpoint import Endpoint, Param
from ._common import (
    DURATION,
    INT,
    MASTER_TIMEOUT,
    STRING,
    TIMEOUTS,
    WILDCARDS,
    bools,
    lists,
    strings,
)

ALLOCATION_EXPLAIN = Endpoint(
    "cluster.allocation_explain",
    "POST",
    "/_cluster/allocation/explain",
    params=bools("include_disk_info", "include_yes_decisions"),
    body=True,
)

GET_SETTINGS = Endpoint(
    "cluster.get_settings",
    "GET",
    "/_cluster/settings",
    params=(*bools("flat_settings", "include_defaults"), *TIMEOUTS),
)

HEALTH = Endpoint(
    "cluster.health",
    "GET",
    "/_cluster/health/{index?}",
    params=(
        Param("expand_wildcards", STRING),
        *strings("level", "wait_for_active_shards", "wait_for_events"),
        *strings("wait_for_nodes", "wait_for_status"),
        *bools("local", "wait_for_no_initializing_shards", "wait_for_no_relocating_shards"),
        *TIMEOUTS,
    ),
)

PENDING_TASKS = Endpoint(
    "cluster.pending_tasks",
    "GET",
    "/_cluster/pending_tasks",
    params=(*bools("local"), *MASTER_TIMEOUT),
)

PUT_SETTINGS = Endpoint(
    "cluster.put_settings",
    "PUT",
    "/_cluster/settings",
    params=(*bools("flat_settings"), *TIMEOUTS),
    body=True,
)

REMOTE_INFO = Endpoint("cluster.remote_info", "GET", "/_remote/info")

REROUTE = Endpoint(
    "cluster.reroute",
    "POST",
    "/_cluster/reroute",
    params=(
        *bools("dry_run", "explain", "retry_failed"),
        *lists("metric"),
        *TIMEOUTS,
    ),
    body=True,
)

STATE = Endpoint(
    "cluster.state",
    "GET",
    (
        "/_cluster/state/{metric=_all}/{index}",
        "/_cluster/state/{metric}",
        "/_cluster/state",
    ),
    params=(
        *WILDCARDS,
        *bools("flat_settings", "local"),
        *MASTER_TIMEOUT,
        Param("wait_for_metadata_version", INT),
        Param("wait_for_timeout", DURATION),
    ),
)

STATS = Endpoint(
    "cluster.stats",
    "GET",
    ("/_cluster/stats/nodes/{node_id}", "/_cluster/stats"),
    params=(*bools("flat_settings"), Param("timeout", DURATION)),
)

ENDPOINTS = (
    ALLOCATION_EXPLAIN,
    GET_SETTINGS,
    HEALTH,
    PENDING_TASKS,
    PUT_SETTINGS,
    REMOTE_INFO,
    REROUTE,
    STATE,
    STATS,
)
