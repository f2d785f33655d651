from .._utils._endpoint import Endpoint, Param
from ._common import BOOL, MASTER_TIMEOUT, TIMEOUTS, bools

_WAIT = (Param("wait_for_completion", BOOL),)


def _snapshot(
    name: str, method: str, path: str, *params: Param, body: bool = False
) -> Endpoint:
    return Endpoint(f"snapshot.{name}", method, path, params=params, body=body)


CREATE = _snapshot(
    "create",
    "PUT",
    "/_snapshot/{repository}/{snapshot}",
    *MASTER_TIMEOUT,
    *_WAIT,
    body=True,
)
CREATE_REPOSITORY = _snapshot(
    "create_repository",
    "PUT",
    "/_snapshot/{repository}",
    *TIMEOUTS,
    *bools("verify"),
    body=True,
)
DELETE = _snapshot(
    "delete", "DELETE", "/_snapshot/{repository}/{snapshot}", *MASTER_TIMEOUT
)
DELETE_REPOSITORY = _snapshot(
    "delete_repository", "DELETE", "/_snapshot/{repository}", *TIMEOUTS
)
GET = _snapshot(
    "get",
    "GET",
    "/_snapshot/{repository}/{snapshot}",
    *bools("ignore_unavailable", "verbose"),
    *MASTER_TIMEOUT,
)
GET_REPOSITORY = _snapshot(
    "get_repository",
    "GET",
    "/_snapshot/{repository?}",
    *bools("local"),
    *MASTER_TIMEOUT,
)
RESTORE = _snapshot(
    "restore",
    "POST",
    "/_snapshot/{repository}/{snapshot}/_restore",
    *MASTER_TIMEOUT,
    *_WAIT,
    body=True,
)
STATUS = _snapshot(
    "status",
    "GET",
    "/_snapshot/{repository?}/{snapshot?}/_status",
    *bools("ignore_unavailable"),
    *MASTER_TIMEOUT,
)
VERIFY_REPOSITORY = _snapshot(
    "verify_repository", "POST", "/_snapshot/{repository}/_verify", *TIMEOUTS
)

ENDPOINTS = (
    CREATE,
    CREATE_REPOSITORY,
    DELETE,
    DELETE_REPOSITORY,
    GET,
    GET_REPOSITORY,
    RESTORE,
    STATUS,
    VERIFY_REPOSITORY,
)
