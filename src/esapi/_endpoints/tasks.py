from .._utils._endpoint import Endpoint, Param
from ._common import BOOL, DURATION, STRING, bools, lists

CANCEL = Endpoint(
    "tasks.cancel",
    "POST",
    "/_tasks/{task_id?}/_cancel",
    params=(*lists("actions", "nodes"), Param("parent_task_id", STRING)),
)

GET = Endpoint(
    "tasks.get",
    "GET",
    "/_tasks/{task_id}",
    params=(Param("timeout", DURATION), Param("wait_for_completion", BOOL)),
)

LIST = Endpoint(
    "tasks.list",
    "GET",
    "/_tasks",
    params=(
        *lists("actions", "nodes"),
        *bools("detailed", "wait_for_completion"),
        Param("group_by", STRING),
        Param("parent_task_id", STRING),
        Param("timeout", DURATION),
    ),
)

ENDPOINTS = (CANCEL, GET, LIST)
