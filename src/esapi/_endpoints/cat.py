"""Compact, human-oriented ``_cat`` APIs."""

from .._utils._endpoint import Endpoint, Param
from ._common import BOOL, CAT, INT, LIST, STRING, bools, lists

_BYTES = (Param("bytes", STRING),)


def _cat(name: str, path: str, *extra: Param) -> Endpoint:
    return Endpoint(f"cat.{name}", "GET", path, params=(*CAT, *extra))


ALIASES = _cat("aliases", "/_cat/aliases/{name?}")
ALLOCATION = _cat("allocation", "/_cat/allocation/{node_id?}", *_BYTES)
COUNT = _cat("count", "/_cat/count/{index?}")
FIELDDATA = _cat("fielddata", "/_cat/fielddata/{fields?}", *_BYTES)
HEALTH = _cat("health", "/_cat/health", *bools("ts"))
HELP = Endpoint(
    "cat.help", "GET", "/_cat", params=(Param("help", BOOL), Param("s", LIST))
)
INDICES = _cat(
    "indices",
    "/_cat/indices/{index?}",
    *_BYTES,
    Param("health", STRING),
    *bools("include_unloaded_segments", "pri"),
)
MASTER = _cat("master", "/_cat/master")
NODEATTRS = _cat("nodeattrs", "/_cat/nodeattrs")
NODES = _cat("nodes", "/_cat/nodes", *bools("full_id"))
PENDING_TASKS = _cat("pending_tasks", "/_cat/pending_tasks")
PLUGINS = _cat("plugins", "/_cat/plugins")
RECOVERY = _cat(
    "recovery", "/_cat/recovery/{index?}", *_BYTES, *bools("active_only", "detailed")
)
REPOSITORIES = _cat("repositories", "/_cat/repositories")
SEGMENTS = _cat("segments", "/_cat/segments/{index?}", *_BYTES)
SHARDS = _cat("shards", "/_cat/shards/{index?}", *_BYTES)
SNAPSHOTS = _cat(
    "snapshots", "/_cat/snapshots/{repository?}", Param("ignore_unavailable", BOOL)
)
TASKS = _cat(
    "tasks",
    "/_cat/tasks",
    *lists("actions", "nodes"),
    Param("detailed", BOOL),
    Param("parent_task", INT),
)
TEMPLATES = _cat("templates", "/_cat/templates/{name?}")
THREAD_POOL = _cat(
    "thread_pool", "/_cat/thread_pool/{thread_pool_patterns?}", Param("size", STRING)
)

ENDPOINTS = (
    ALIASES,
    ALLOCATION,
    COUNT,
    FIELDDATA,
    HEALTH,
    HELP,
    INDICES,
    MASTER,
    NODEATTRS,
    NODES,
    PENDING_TASKS,
    PLUGINS,
    RECOVERY,
    REPOSITORIES,
    SEGMENTS,
    SHARDS,
    SNAPSHOTS,
    TASKS,
    TEMPLATES,
    THREAD_POOL,
)
