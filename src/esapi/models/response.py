from dataclasses import dataclass
from http import HTTPStatus
from typing import Any

from httpx import Headers, ResponseNotRead
from httpx import Response as HttpxResponse

from .._utils.constants import HEADER_WARNING


@dataclass
class Response:
    """The raw outcome of an API call.

    The status code is not interpreted: 4xx and 5xx answers are returned like
    any other. The body is left unread and must be released by the caller,
    either explicitly with :meth:`close` / :meth:`aclose` or by using the
    response as a (async) context manager.

    Examples:
        ```python
        with client.search(index=["logs"], size=10) as res:
            if res.is_error():
                ...
            hits = res.json()["hits"]
        ```
    """

    status_code: int
    headers: Headers
    body: HttpxResponse

    def is_error(self) -> bool:
        return self.status_code > 299

    def warnings(self) -> list[str]:
        return self.headers.get_list(HEADER_WARNING)

    def has_warnings(self) -> bool:
        return len(self.warnings()) > 0

    def read(self) -> bytes:
        return self.body.read()

    async def aread(self) -> bytes:
        return await self.body.aread()

    def json(self, **kwargs: Any) -> Any:
        """Decode the body as JSON.

        Async callers must ``await response.aread()`` first.
        """
        self.read()
        return self.body.json(**kwargs)

    def close(self) -> None:
        self.body.close()

    async def aclose(self) -> None:
        await self.body.aclose()

    def __enter__(self) -> "Response":
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()

    async def __aenter__(self) -> "Response":
        return self

    async def __aexit__(self, *args: Any) -> None:
        await self.aclose()

    def __str__(self) -> str:
        try:
            status = f"[{self.status_code} {HTTPStatus(self.status_code).phrase}]"
        except ValueError:
            status = f"[{self.status_code}]"

        # only show a body that was already read, never consume it here
        try:
            text = self.body.text
        except ResponseNotRead:
            return status
        return f"{status} {text}" if text else status
