from collections.abc import Mapping
from logging import getLogger
from typing import TYPE_CHECKING, Any, Optional

from httpx import Response as HttpxResponse

from .._cancellation import CancellationToken
from ..models.errors import ConstructionError
from ..models.response import Response
from ._encoder import encode
from ._endpoint import Endpoint
from ._options import (
    Option,
    RequestConfiguration,
    with_body,
    with_cancel,
    with_headers,
    with_opaque_id,
    with_param,
    with_path,
)
from ._request_spec import RequestSpec
from .constants import HEADER_CONTENT_TYPE

if TYPE_CHECKING:
    from .._transport import AsyncTransport, Transport

logger = getLogger("esapi")


def build_spec(endpoint: Endpoint, configuration: RequestConfiguration) -> RequestSpec:
    """Encode the configuration and attach headers and body.

    ``Content-Type`` is only set when there is a body. Caller headers come
    last and replace the automatic header of the same name.
    """
    spec = encode(endpoint, configuration)

    body = configuration.body
    headers: list[tuple[str, str]] = []
    if body is not None:
        body = _check_body(endpoint, body)
        headers.append((HEADER_CONTENT_TYPE, endpoint.content_type))

    if configuration.headers:
        overridden = {name.lower() for name, _ in configuration.headers}
        headers = [(k, v) for k, v in headers if k.lower() not in overridden]
        headers.extend(configuration.headers)

    spec.headers = headers
    spec.content = body
    return spec


def _check_body(endpoint: Endpoint, body: Any) -> Any:
    """Return the body as httpx expects it, or raise if it can never be sent.

    httpx iterates anything that is not ``bytes`` or ``str``, so byte buffers
    are copied to ``bytes`` and materialized sequences must hold byte chunks.
    """
    if isinstance(body, (bytes, str)):
        return body
    if isinstance(body, (bytearray, memoryview)):
        return bytes(body)
    if isinstance(body, Mapping):
        raise ConstructionError(
            "body must be bytes, str or a byte stream; serialize mappings first",
            endpoint.name,
        )
    if not (hasattr(body, "__iter__") or hasattr(body, "__aiter__")):
        raise ConstructionError(
            f"unsupported body type {type(body).__name__}", endpoint.name
        )
    if isinstance(body, (list, tuple)) and not all(
        isinstance(chunk, bytes) for chunk in body
    ):
        raise ConstructionError("body chunks must be bytes", endpoint.name)
    return body


def execute(
    endpoint: Endpoint,
    configuration: RequestConfiguration,
    transport: "Transport",
) -> Response:
    return send(build_spec(endpoint, configuration), configuration.cancel, transport)


def send(
    spec: RequestSpec, cancel: Optional[CancellationToken], transport: "Transport"
) -> Response:
    logger.debug(f"Request: {spec.method} {spec.url}")
    logger.debug(f"HEADERS: {spec.headers}")

    # the token goes to the transport even when it already fired
    raw = transport.perform(spec, cancel=cancel)
    return _wrap(raw)


async def execute_async(
    endpoint: Endpoint,
    configuration: RequestConfiguration,
    transport: "AsyncTransport",
) -> Response:
    spec = build_spec(endpoint, configuration)
    return await send_async(spec, configuration.cancel, transport)


async def send_async(
    spec: RequestSpec,
    cancel: Optional[CancellationToken],
    transport: "AsyncTransport",
) -> Response:
    logger.debug(f"Request: {spec.method} {spec.url}")
    logger.debug(f"HEADERS: {spec.headers}")

    raw = await transport.perform(spec, cancel=cancel)
    return _wrap(raw)


def _wrap(raw: HttpxResponse) -> Response:
    logger.debug(f"Response: {raw.status_code}")
    return Response(status_code=raw.status_code, headers=raw.headers, body=raw)


def options_from_kwargs(endpoint: Endpoint, kwargs: dict[str, Any]) -> list[Option]:
    """Translate keyword arguments into options, in the order given."""
    options: list[Option] = []
    for name, value in kwargs.items():
        if name == "body":
            options.append(with_body(value))
        elif name == "headers":
            options.append(with_headers(value))
        elif name == "opaque_id":
            options.append(with_opaque_id(value))
        elif name == "cancel":
            options.append(with_cancel(value))
        elif name in endpoint.path_parts:
            options.append(with_path(name, value))
        else:
            options.append(with_param(name, value))
    return options


class Request:
    """A configurable, executable request for one endpoint.

    The request is configured with options until it is performed; after that
    it can be performed again, which re-encodes it identically, but it can no
    longer be changed.

    Examples:
        ```python
        request = Request.new(SEARCH, index=["a", "b"])
        request.apply(with_param("size", 0), with_opaque_id("job-42"))
        response = request.perform(transport)
        ```
    """

    def __init__(
        self, endpoint: Endpoint, configuration: Optional[RequestConfiguration] = None
    ) -> None:
        self.endpoint = endpoint
        self.configuration = configuration or RequestConfiguration()
        self._executed = False

    @classmethod
    def new(
        cls,
        endpoint: Endpoint,
        *path_args: Any,
        options: tuple[Option, ...] = (),
        **kwargs: Any,
    ) -> "Request":
        """Create a request from required path arguments, options and keywords.

        Positional values fill the endpoint's required path arguments in
        order. ``options`` are applied first, keyword arguments after them.
        """
        if len(path_args) > len(endpoint.required):
            raise ConstructionError(
                f"expected at most {len(endpoint.required)} path argument(s), "
                f"got {len(path_args)}",
                endpoint.name,
            )

        positional = dict(zip(endpoint.required, path_args))
        duplicated = sorted(set(positional) & set(kwargs))
        if duplicated:
            raise ConstructionError(
                f"path argument(s) given twice: {', '.join(duplicated)}", endpoint.name
            )

        request = cls(endpoint, RequestConfiguration(path=positional))
        request.apply(*options, *options_from_kwargs(endpoint, kwargs))
        return request

    @property
    def executed(self) -> bool:
        return self._executed

    def apply(self, *options: Option) -> "Request":
        if self._executed:
            raise ConstructionError(
                "request was already performed and can no longer be changed",
                self.endpoint.name,
            )
        for option in options:
            option(self.configuration)
        return self

    def spec(self) -> RequestSpec:
        return build_spec(self.endpoint, self.configuration)

    def perform(self, transport: "Transport") -> Response:
        # a request that fails to encode stays configurable
        spec = self.spec()
        self._executed = True
        return send(spec, self.configuration.cancel, transport)

    async def perform_async(self, transport: "AsyncTransport") -> Response:
        spec = self.spec()
        self._executed = True
        return await send_async(spec, self.configuration.cancel, transport)

    def __repr__(self) -> str:
        state = "executed" if self._executed else "configuring"
        return f"Request({self.endpoint.name!r}, {state})"
