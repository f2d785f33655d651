from ._cancellation import CancellationToken
from ._client import AsyncBoundEndpoint, AsyncClient, BoundEndpoint, Client, Namespace
from ._config import Config
from ._endpoints import ENDPOINTS, endpoints_for
from ._transport import AsyncHttpxTransport, AsyncTransport, HttpxTransport, Transport
from ._utils import (
    Endpoint,
    Option,
    Param,
    ParamType,
    Request,
    RequestConfiguration,
    RequestSpec,
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
from .models import (
    AUTO,
    Auto,
    ConstructionError,
    EsApiError,
    RequestCancelledError,
    Response,
    SliceCount,
    TransportError,
)

__all__ = [
    "AUTO",
    "AsyncBoundEndpoint",
    "AsyncClient",
    "AsyncHttpxTransport",
    "AsyncTransport",
    "Auto",
    "BoundEndpoint",
    "CancellationToken",
    "Client",
    "Config",
    "ConstructionError",
    "ENDPOINTS",
    "Endpoint",
    "EsApiError",
    "HttpxTransport",
    "Namespace",
    "Option",
    "Param",
    "ParamType",
    "Request",
    "RequestCancelledError",
    "RequestConfiguration",
    "RequestSpec",
    "Response",
    "SliceCount",
    "Transport",
    "TransportError",
    "endpoints_for",
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
