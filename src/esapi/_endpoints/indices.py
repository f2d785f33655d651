from .._utils._endpoint import Endpoint, Param
from ._common import (
    INT,
    MASTER_TIMEOUT,
    QUERY_STRING,
    STRING,
    TIMEOUTS,
    WILDCARDS,
    bools,
    lists,
)

_ACTIVE_SHARDS = (Param("wait_for_active_shards", STRING),)


def _indices(
    name: str, method: str, path: str, *params: Param, body: bool = False
) -> Endpoint:
    return Endpoint(f"indices.{name}", method, path, params=params, body=body)


ANALYZE = _indices("analyze", "POST", "/{index?}/_analyze", body=True)

CLEAR_CACHE = _indices(
    "clear_cache",
    "POST",
    "/{index?}/_cache/clear",
    *WILDCARDS,
    *bools("fielddata", "query", "request"),
    *lists("fields"),
)

CLOSE = _indices(
    "close", "POST", "/{index}/_close", *WILDCARDS, *TIMEOUTS, *_ACTIVE_SHARDS
)

CREATE = _indices(
    "create",
    "PUT",
    "/{index}",
    *bools("include_type_name"),
    *TIMEOUTS,
    *_ACTIVE_SHARDS,
    body=True,
)

DELETE = _indices("delete", "DELETE", "/{index}", *WILDCARDS, *TIMEOUTS)

DELETE_ALIAS = _indices("delete_alias", "DELETE", "/{index}/_alias/{name}", *TIMEOUTS)

DELETE_TEMPLATE = _indices("delete_template", "DELETE", "/_template/{name}", *TIMEOUTS)

EXISTS = _indices(
    "exists",
    "HEAD",
    "/{index}",
    *WILDCARDS,
    *bools("flat_settings", "include_defaults", "local"),
)

EXISTS_ALIAS = _indices(
    "exists_alias", "HEAD", "/{index?}/_alias/{name}", *WILDCARDS, *bools("local")
)

EXISTS_TEMPLATE = _indices(
    "exists_template",
    "HEAD",
    "/_template/{name}",
    *bools("flat_settings", "local"),
    *MASTER_TIMEOUT,
)

EXISTS_TYPE = _indices(
    "exists_type", "HEAD", "/{index}/_mapping/{doc_type}", *WILDCARDS, *bools("local")
)

FLUSH = _indices(
    "flush", "POST", "/{index?}/_flush", *WILDCARDS, *bools("force", "wait_if_ongoing")
)

FORCEMERGE = _indices(
    "forcemerge",
    "POST",
    "/{index?}/_forcemerge",
    *WILDCARDS,
    *bools("flush", "only_expunge_deletes"),
    Param("max_num_segments", INT),
)

FREEZE = _indices(
    "freeze", "POST", "/{index}/_freeze", *WILDCARDS, *TIMEOUTS, *_ACTIVE_SHARDS
)

GET = _indices(
    "get",
    "GET",
    "/{index}",
    *WILDCARDS,
    *bools("flat_settings", "include_defaults", "include_type_name", "local"),
    *MASTER_TIMEOUT,
)

GET_ALIAS = _indices(
    "get_alias", "GET", "/{index?}/_alias/{name?}", *WILDCARDS, *bools("local")
)

GET_FIELD_MAPPING = _indices(
    "get_field_mapping",
    "GET",
    "/{index?}/_mapping/{doc_type?}/field/{fields}",
    *WILDCARDS,
    *bools("include_defaults", "include_type_name", "local"),
)

GET_MAPPING = _indices(
    "get_mapping",
    "GET",
    "/{index?}/_mapping/{doc_type?}",
    *WILDCARDS,
    *bools("include_type_name", "local"),
    *MASTER_TIMEOUT,
)

GET_SETTINGS = _indices(
    "get_settings",
    "GET",
    "/{index?}/_settings/{name?}",
    *WILDCARDS,
    *bools("flat_settings", "include_defaults", "local"),
    *MASTER_TIMEOUT,
)

GET_TEMPLATE = _indices(
    "get_template",
    "GET",
    "/_template/{name?}",
    *bools("flat_settings", "include_type_name", "local"),
    *MASTER_TIMEOUT,
)

OPEN = _indices(
    "open", "POST", "/{index}/_open", *WILDCARDS, *TIMEOUTS, *_ACTIVE_SHARDS
)

PUT_ALIAS = _indices("put_alias", "PUT", "/{index}/_alias/{name}", *TIMEOUTS, body=True)

PUT_MAPPING = _indices(
    "put_mapping",
    "PUT",
    "/{index?}/{doc_type?}/_mapping",
    *WILDCARDS,
    *bools("include_type_name"),
    *TIMEOUTS,
    body=True,
)

PUT_SETTINGS = _indices(
    "put_settings",
    "PUT",
    "/{index?}/_settings",
    *WILDCARDS,
    *bools("flat_settings", "preserve_existing"),
    *TIMEOUTS,
    body=True,
)

PUT_TEMPLATE = _indices(
    "put_template",
    "PUT",
    "/_template/{name}",
    *bools("create", "flat_settings", "include_type_name"),
    Param("order", INT),
    *TIMEOUTS,
    body=True,
)

RECOVERY = _indices(
    "recovery", "GET", "/{index?}/_recovery", *bools("active_only", "detailed")
)

REFRESH = _indices("refresh", "POST", "/{index?}/_refresh", *WILDCARDS)

ROLLOVER = _indices(
    "rollover",
    "POST",
    "/{alias}/_rollover/{new_index?}",
    *bools("dry_run", "include_type_name"),
    *TIMEOUTS,
    *_ACTIVE_SHARDS,
    body=True,
)

SEGMENTS = _indices(
    "segments", "GET", "/{index?}/_segments", *WILDCARDS, *bools("verbose")
)

SHARD_STORES = _indices(
    "shard_stores", "GET", "/{index?}/_shard_stores", *WILDCARDS, *lists("status")
)

SHRINK = _indices(
    "shrink",
    "PUT",
    "/{index}/_shrink/{target}",
    *bools("copy_settings"),
    *TIMEOUTS,
    *_ACTIVE_SHARDS,
    body=True,
)

SPLIT = _indices(
    "split",
    "PUT",
    "/{index}/_split/{target}",
    *bools("copy_settings"),
    *TIMEOUTS,
    *_ACTIVE_SHARDS,
    body=True,
)

STATS = _indices(
    "stats",
    "GET",
    "/{index?}/_stats/{metric?}",
    *WILDCARDS,
    *lists("completion_fields", "fielddata_fields", "fields", "groups"),
    *bools(
        "forbid_closed_indices",
        "include_segment_file_sizes",
        "include_unloaded_segments",
    ),
    Param("level", STRING),
)

UNFREEZE = _indices(
    "unfreeze", "POST", "/{index}/_unfreeze", *WILDCARDS, *TIMEOUTS, *_ACTIVE_SHARDS
)

UPDATE_ALIASES = _indices("update_aliases", "POST", "/_aliases", *TIMEOUTS, body=True)

VALIDATE_QUERY = _indices(
    "validate_query",
    "POST",
    "/{index?}/{doc_type?}/_validate/query",
    *WILDCARDS,
    *QUERY_STRING,
    *bools("all_shards", "explain", "rewrite"),
    body=True,
)

ENDPOINTS = (
    ANALYZE,
    CLEAR_CACHE,
    CLOSE,
    CREATE,
    DELETE,
    DELETE_ALIAS,
    DELETE_TEMPLATE,
    EXISTS,
    EXISTS_ALIAS,
    EXISTS_TEMPLATE,
    EXISTS_TYPE,
    FLUSH,
    FORCEMERGE,
    FREEZE,
    GET,
    GET_ALIAS,
    GET_FIELD_MAPPING,
    GET_MAPPING,
    GET_SETTINGS,
    GET_TEMPLATE,
    OPEN,
    PUT_ALIAS,
    PUT_MAPPING,
    PUT_SETTINGS,
    PUT_TEMPLATE,
    RECOVERY,
    REFRESH,
    ROLLOVER,
    SEGMENTS,
    SHARD_STORES,
    SHRINK,
    SPLIT,
    STATS,
    UNFREEZE,
    UPDATE_ALIASES,
    VALIDATE_QUERY,
)
