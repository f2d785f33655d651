import asyncio
from logging import getLogger
from typing import Optional, Protocol, runtime_checkable

from httpx import AsyncClient, Client, InvalidURL, Request
from httpx import Response as HttpxResponse
from httpx import TransportError as HttpxTransportError

from ._cancellation import CancellationToken
from ._config import Config
from ._utils._request_spec import RequestSpec
from ._utils._ssl_context import get_httpx_client_kwargs
from .models.errors import ConstructionError, RequestCancelledError, TransportError


@runtime_checkable
class Transport(Protocol):
    """Performs one exchange and returns the unread response."""

    def perform(
        self, request: RequestSpec, *, cancel: Optional[CancellationToken] = None
    ) -> HttpxResponse: ...


@runtime_checkable
class AsyncTransport(Protocol):
    async def perform(
        self, request: RequestSpec, *, cancel: Optional[CancellationToken] = None
    ) -> HttpxResponse: ...


class _HttpxTransportBase:
    def __init__(self, config: Config) -> None:
        self._logger = getLogger("esapi")
        self._config = config

    @property
    def config(self) -> Config:
        return self._config

    def url_for(self, request: RequestSpec) -> str:
        # plain concatenation keeps any path prefix on base_url
        return f"{self._config.base_url}{request.path}"

    def _build(self, client: Client | AsyncClient, request: RequestSpec) -> Request:
        try:
            return client.build_request(
                request.method,
                self.url_for(request),
                params=sorted(request.params.items()),
                headers=request.headers,
                content=request.content,
            )
        except (InvalidURL, TypeError, ValueError) as e:
            raise ConstructionError(
                f"could not build {request.method} {request.url}: {e}", request.endpoint
            ) from e

    def _bad_body(self, request: RequestSpec, error: TypeError) -> ConstructionError:
        # httpx only finds out a streamed body yields non-bytes while sending it
        return ConstructionError(f"body could not be sent: {error}", request.endpoint)

    def _failed(self, request: RequestSpec, error: HttpxTransportError) -> TransportError:
        self._logger.warning(
            f"Transport failure for {request.method} {request.path}: {error!r}"
        )
        return TransportError(str(error) or type(error).__name__, request=request)


class HttpxTransport(_HttpxTransportBase):
    """Synchronous transport backed by a shared ``httpx.Client``.

    A request already cancelled when it reaches the transport is never sent.
    httpx offers no way to interrupt a blocking send, so a token that fires
    mid-flight is honoured once the response headers arrive.
    """

    def __init__(self, config: Config, client: Optional[Client] = None) -> None:
        super().__init__(config)
        self._client = client or Client(**get_httpx_client_kwargs(config))

    def perform(
        self, request: RequestSpec, *, cancel: Optional[CancellationToken] = None
    ) -> HttpxResponse:
        if cancel is not None and cancel.cancelled:
            raise RequestCancelledError(request)

        http_request = self._build(self._client, request)
        try:
            response = self._client.send(http_request, stream=True)
        except HttpxTransportError as e:
            raise self._failed(request, e) from e
        except TypeError as e:
            raise self._bad_body(request, e) from e

        if cancel is not None and cancel.cancelled:
            response.close()
            raise RequestCancelledError(request)
        return response

    def close(self) -> None:
        self._client.close()


class AsyncHttpxTransport(_HttpxTransportBase):
    """Asynchronous transport backed by a shared ``httpx.AsyncClient``.

    A cancellation token firing mid-flight cancels the pending send.
    """

    def __init__(self, config: Config, client: Optional[AsyncClient] = None) -> None:
        super().__init__(config)
        self._client = client or AsyncClient(**get_httpx_client_kwargs(config))

    async def perform(
        self, request: RequestSpec, *, cancel: Optional[CancellationToken] = None
    ) -> HttpxResponse:
        if cancel is not None and cancel.cancelled:
            raise RequestCancelledError(request)

        http_request = self._build(self._client, request)
        if cancel is None:
            return await self._send(request, http_request)

        loop = asyncio.get_running_loop()
        task = asyncio.ensure_future(self._send(request, http_request))
        unregister = cancel.add_callback(lambda: loop.call_soon_threadsafe(task.cancel))
        try:
            return await task
        except asyncio.CancelledError:
            if cancel.cancelled:
                raise RequestCancelledError(request) from None
            raise
        finally:
            unregister()

    async def _send(self, request: RequestSpec, http_request: Request) -> HttpxResponse:
        try:
            return await self._client.send(http_request, stream=True)
        except HttpxTransportError as e:
            raise self._failed(request, e) from e
        except TypeError as e:
            raise self._bad_body(request, e) from e

    async def aclose(self) -> None:
        await self._client.aclose()
