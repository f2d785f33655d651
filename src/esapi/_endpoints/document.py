"""Single- and multi-document APIs."""

from .._utils._endpoint import Endpoint, Param
from .._utils.constants import CONTENT_TYPE_NDJSON
from ._common import (
    BOOL,
    DURATION,
    INT,
    QUERY_STRING,
    SEQ_NO,
    SOURCE,
    STRING,
    VERSIONING,
    bools,
    lists,
    strings,
)

_WRITE = (
    Param("refresh", STRING),
    Param("routing", STRING),
    Param("timeout", DURATION),
    Param("wait_for_active_shards", STRING),
)

_READ = (
    Param("preference", STRING),
    Param("realtime", BOOL),
    Param("refresh", BOOL),
    Param("routing", STRING),
    *SOURCE,
)

INDEX = Endpoint(
    "index",
    "PUT",
    "/{index}/{doc_type=_doc}/{id?}",
    params=(
        *SEQ_NO,
        Param("op_type", STRING),
        Param("pipeline", STRING),
        *_WRITE,
        *VERSIONING,
    ),
    body=True,
    fallback_method=("id", "POST"),
)

CREATE = Endpoint(
    "create",
    "PUT",
    "/{index}/_create/{id}",
    params=(Param("pipeline", STRING), *_WRITE, *VERSIONING),
    body=True,
)

GET = Endpoint(
    "get",
    "GET",
    "/{index}/{doc_type=_doc}/{id}",
    params=(*_READ, *lists("stored_fields"), *VERSIONING),
)

EXISTS = Endpoint(
    "exists",
    "HEAD",
    "/{index}/{doc_type=_doc}/{id}",
    params=(*_READ, *lists("stored_fields"), *VERSIONING),
)

GET_SOURCE = Endpoint(
    "get_source",
    "GET",
    "/{index}/_source/{id}",
    params=(*_READ, *VERSIONING),
)

EXISTS_SOURCE = Endpoint(
    "exists_source",
    "HEAD",
    "/{index}/_source/{id}",
    params=(*_READ, *VERSIONING),
)

DELETE = Endpoint(
    "delete",
    "DELETE",
    "/{index}/{doc_type=_doc}/{id}",
    params=(*SEQ_NO, *_WRITE, *VERSIONING),
)

UPDATE = Endpoint(
    "update",
    "POST",
    "/{index}/_update/{id}",
    params=(
        *SEQ_NO,
        Param("lang", STRING),
        Param("retry_on_conflict", INT),
        *_WRITE,
        *SOURCE,
    ),
    body=True,
)

BULK = Endpoint(
    "bulk",
    "POST",
    "/{index?}/{doc_type?}/_bulk",
    params=(
        Param("pipeline", STRING),
        *_WRITE,
        *SOURCE,
    ),
    body=True,
    content_type=CONTENT_TYPE_NDJSON,
)

MGET = Endpoint(
    "mget",
    "POST",
    "/{index?}/{doc_type?}/_mget",
    params=(*_READ, *lists("stored_fields")),
    body=True,
)

_TERM_VECTORS = (
    *bools("field_statistics", "offsets", "payloads", "positions", "realtime"),
    *bools("term_statistics"),
    *lists("fields"),
    *strings("preference", "routing"),
    *VERSIONING,
)

TERMVECTORS = Endpoint(
    "termvectors",
    "POST",
    "/{index}/_termvectors/{id?}",
    params=_TERM_VECTORS,
    body=True,
)

MTERMVECTORS = Endpoint(
    "mtermvectors",
    "POST",
    "/{index?}/_mtermvectors",
    params=(*_TERM_VECTORS, *lists("ids")),
    body=True,
)

EXPLAIN = Endpoint(
    "explain",
    "POST",
    "/{index}/_explain/{id}",
    params=(
        *QUERY_STRING,
        *strings("preference", "routing"),
        *SOURCE,
        *lists("stored_fields"),
    ),
    body=True,
)

ENDPOINTS = (
    INDEX,
    CREATE,
    GET,
    EXISTS,
    GET_SOURCE,
    EXISTS_SOURCE,
    DELETE,
    UPDATE,
    BULK,
    MGET,
    TERMVECTORS,
    MTERMVECTORS,
    EXPLAIN,
)
