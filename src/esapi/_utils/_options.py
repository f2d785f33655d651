from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, Callable, Iterable, Optional, Sequence, Union

from .._cancellation import CancellationToken
from .constants import HEADER_OPAQUE_ID

PathValue = Union[str, int, Sequence[str]]


@dataclass
class RequestConfiguration:
    """The mutable, per-call state of a request.

    A parameter is unset when its name is absent from ``params``; ``False``,
    ``0`` and ``""`` stored there are values like any other. Headers form a
    multimap kept as ordered ``(name, value)`` pairs.
    """

    path: dict[str, PathValue] = field(default_factory=dict)
    body: Any | None = None
    params: dict[str, Any] = field(default_factory=dict)
    headers: list[tuple[str, str]] = field(default_factory=list)
    cancel: Optional[CancellationToken] = None


class Option:
    """A configuration step applied to a :class:`RequestConfiguration`."""

    __slots__ = ("_apply", "description")

    def __init__(
        self, apply: Callable[[RequestConfiguration], None], description: str = ""
    ) -> None:
        self._apply = apply
        self.description = description

    def __call__(self, configuration: RequestConfiguration) -> None:
        self._apply(configuration)

    def __repr__(self) -> str:
        return f"Option({self.description})"


def _frozen(value: Any) -> Any:
    # keep the caller from mutating a list after handing it over
    if isinstance(value, list):
        return tuple(value)
    return value


def with_param(name: str, value: Any) -> Option:
    """Set a query parameter; ``None`` unsets it."""

    def apply(configuration: RequestConfiguration) -> None:
        if value is None:
            configuration.params.pop(name, None)
        else:
            configuration.params[name] = _frozen(value)

    return Option(apply, f"{name}={value!r}")


def with_path(name: str, value: Optional[PathValue]) -> Option:
    """Set a path segment; ``None`` unsets it."""

    def apply(configuration: RequestConfiguration) -> None:
        if value is None:
            configuration.path.pop(name, None)
        else:
            configuration.path[name] = _frozen(value)

    return Option(apply, f"path {name}={value!r}")


def with_index(*names: str) -> Option:
    return with_path("index", tuple(names))


def with_document_type(*names: str) -> Option:
    return with_path("doc_type", tuple(names))


def with_body(body: Any) -> Option:
    def apply(configuration: RequestConfiguration) -> None:
        configuration.body = body

    return Option(apply, "body")


def with_header(name: str, value: str) -> Option:
    """Add a header; repeated calls add further values instead of replacing."""

    def apply(configuration: RequestConfiguration) -> None:
        configuration.headers.append((name, value))

    return Option(apply, f"header {name}")


def with_headers(
    headers: Union[Mapping[str, Union[str, Iterable[str]]], Iterable[tuple[str, str]]],
) -> Option:
    if isinstance(headers, Mapping):
        pairs = []
        for name, values in headers.items():
            if isinstance(values, str):
                pairs.append((name, values))
            else:
                pairs.extend((name, value) for value in values)
    else:
        pairs = list(headers)

    def apply(configuration: RequestConfiguration) -> None:
        configuration.headers.extend(pairs)

    return Option(apply, f"headers {[name for name, _ in pairs]}")


def with_opaque_id(value: str) -> Option:
    """Tag the request with an ``X-Opaque-Id`` the server echoes in its logs and tasks."""
    return with_header(HEADER_OPAQUE_ID, value)


def with_cancel(token: Optional[CancellationToken]) -> Option:
    def apply(configuration: RequestConfiguration) -> None:
        configuration.cancel = token

    return Option(apply, "cancel")


def with_pretty(enabled: bool = True) -> Option:
    return with_param("pretty", enabled)


def with_human(enabled: bool = True) -> Option:
    return with_param("human", enabled)


def with_error_trace(enabled: bool = True) -> Option:
    return with_param("error_trace", enabled)


def with_filter_path(*paths: str) -> Option:
    return with_param("filter_path", tuple(paths))
