from .errors import (
    ConstructionError,
    EsApiError,
    RequestCancelledError,
    TransportError,
)
from .response import Response
from .values import AUTO, Auto, SliceCount

__all__ = [
    "AUTO",
    "Auto",
    "ConstructionError",
    "EsApiError",
    "RequestCancelledError",
    "Response",
    "SliceCount",
    "TransportError",
]
