from logging import getLogger
from typing import Any, Callable, Mapping, Optional

from ._config import Config
from ._endpoints import endpoints_for
from ._transport import AsyncHttpxTransport, AsyncTransport, HttpxTransport, Transport
from ._utils._dispatch import Request
from ._utils._endpoint import Endpoint
from ._utils._options import Option
from .models.response import Response


class BoundEndpoint:
    """An endpoint tied to a transport.

    Positional arguments that are not :class:`Option` objects fill the
    endpoint's required path arguments in order. Options are applied first,
    left to right, then keyword arguments: path segments, ``body``,
    ``headers``, ``opaque_id``, ``cancel`` or any recognized parameter.
    """

    def __init__(self, endpoint: Endpoint, transport: Any) -> None:
        self.endpoint = endpoint
        self._transport = transport

    def request(self, *args: Any, **kwargs: Any) -> Request:
        path_args = [arg for arg in args if not isinstance(arg, Option)]
        options = tuple(arg for arg in args if isinstance(arg, Option))
        return Request.new(self.endpoint, *path_args, options=options, **kwargs)

    def __call__(self, *args: Any, **kwargs: Any) -> Response:
        return self.request(*args, **kwargs).perform(self._transport)

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.endpoint.name}>"


class AsyncBoundEndpoint(BoundEndpoint):
    async def __call__(self, *args: Any, **kwargs: Any) -> Response:  # type: ignore[override]
        return await self.request(*args, **kwargs).perform_async(self._transport)


class Namespace:
    """Groups the endpoints of one API family, e.g. ``client.indices``."""

    def __init__(self, name: str) -> None:
        self._name = name
        self._endpoints: dict[str, BoundEndpoint] = {}

    def _bind(self, name: str, bound: BoundEndpoint) -> None:
        self._endpoints[name] = bound
        setattr(self, name, bound)

    def __iter__(self):
        return iter(self._endpoints.values())

    def __dir__(self) -> list[str]:
        return sorted(self._endpoints)

    def __repr__(self) -> str:
        return f"<Namespace {self._name}: {', '.join(sorted(self._endpoints))}>"


class _BaseClient:
    def __init__(
        self,
        config: Optional[Config],
        transport: Any,
        bind: Callable[[Endpoint, Any], BoundEndpoint],
    ) -> None:
        self._logger = getLogger("esapi")
        self._config = config or Config()
        self._transport = transport
        self._endpoints = endpoints_for(self._config.api_version)
        self._namespaces: dict[str, Namespace] = {}

        for endpoint in self._endpoints.values():
            bound = bind(endpoint, transport)
            namespace = endpoint.namespace
            if namespace is None:
                setattr(self, endpoint.short_name, bound)
                continue
            if namespace not in self._namespaces:
                self._namespaces[namespace] = Namespace(namespace)
                setattr(self, namespace, self._namespaces[namespace])
            self._namespaces[namespace]._bind(endpoint.short_name, bound)

        self._logger.debug(
            f"Bound {len(self._endpoints)} endpoints for API version "
            f"{self._config.api_version}"
        )

    @property
    def config(self) -> Config:
        return self._config

    @property
    def endpoints(self) -> Mapping[str, Endpoint]:
        return self._endpoints

    @property
    def namespaces(self) -> Mapping[str, Namespace]:
        return dict(self._namespaces)


class Client(_BaseClient):
    """Synchronous bindings for the whole API.

    Examples:
        ```python
        from esapi import Client, Config

        with Client(Config(base_url="http://localhost:9200")) as client:
            res = client.search(index=["logs-*"], size=0, track_total_hits=True)
            res = client.indices.create("my-index", body=b'{"settings": {}}')
        ```
    """

    def __init__(
        self, config: Optional[Config] = None, transport: Optional[Transport] = None
    ) -> None:
        config = config or Config()
        self._owns_transport = transport is None
        super().__init__(
            config, transport or HttpxTransport(config), bind=BoundEndpoint
        )

    @property
    def transport(self) -> Transport:
        return self._transport

    def close(self) -> None:
        """Close the transport if this client created it."""
        if self._owns_transport:
            self._transport.close()

    def __enter__(self) -> "Client":
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()


class AsyncClient(_BaseClient):
    """Asynchronous bindings; every endpoint call returns a coroutine."""

    def __init__(
        self, config: Optional[Config] = None, transport: Optional[AsyncTransport] = None
    ) -> None:
        config = config or Config()
        self._owns_transport = transport is None
        super().__init__(
            config, transport or AsyncHttpxTransport(config), bind=AsyncBoundEndpoint
        )

    @property
    def transport(self) -> AsyncTransport:
        return self._transport

    async def aclose(self) -> None:
        if self._owns_transport:
            await self._transport.aclose()

    async def __aenter__(self) -> "AsyncClient":
        return self

    async def __aexit__(self, *args: Any) -> None:
        await self.aclose()
