from ._dispatch import Request, build_spec, execute, execute_async
from ._encoder import encode, format_duration
from ._endpoint import UNIVERSAL_PARAMS, Endpoint, Param, ParamType, PathTemplate
from ._options import (
    Option,
    RequestConfiguration,
    with_body,
    with_cancel,
    with_document_type,
    with_error_trace,
    with_filter_path,
    with_header,
    with_headers,
    with_human,
    with_index,
    with_opaque_id,
    with_param,
    with_path,
    with_pretty,
)
from ._request_spec import RequestSpec

__all__ = [
    "Endpoint",
    "Option",
    "Param",
    "ParamType",
    "PathTemplate",
    "Request",
    "RequestConfiguration",
    "RequestSpec",
    "UNIVERSAL_PARAMS",
    "build_spec",
    "encode",
    "execute",
    "execute_async",
    "format_duration",
    "with_body",
    "with_cancel",
    "with_document_type",
    "with_error_trace",
    "with_filter_path",
    "with_header",
    "with_headers",
    "with_human",
    "with_index",
    "with_opaque_id",
    "with_param",
    "with_path",
    "with_pretty",
]
