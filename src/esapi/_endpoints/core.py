"""Root endpoints and stored scripts."""

from .._utils._endpoint import Endpoint
from ._common import MASTER_TIMEOUT, TIMEOUTS

INFO = Endpoint("info", "GET", "/")

PING = Endpoint("ping", "HEAD", "/")

PUT_SCRIPT = Endpoint(
    "put_script",
    "PUT",
    ("/_scripts/{id}/{context}", "/_scripts/{id}"),
    params=TIMEOUTS,
    body=True,
)

GET_SCRIPT = Endpoint("get_script", "GET", "/_scripts/{id}", params=MASTER_TIMEOUT)

DELETE_SCRIPT = Endpoint("delete_script", "DELETE", "/_scripts/{id}", params=TIMEOUTS)

SCRIPTS_PAINLESS_EXECUTE = Endpoint(
    "scripts_painless_execute",
    "POST",
    "/_scripts/painless/_execute",
    body=True,
)

ENDPOINTS = (
    INFO,
    PING,
    PUT_SCRIPT,
    GET_SCRIPT,
    DELETE_SCRIPT,
    SCRIPTS_PAINLESS_EXECUTE,
)
