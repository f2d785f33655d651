"""Turns an endpoint and a request configuration into a method, path and query.

Nothing here performs I/O. Every invalid input is reported as a
:class:`~esapi.models.errors.ConstructionError` so callers find out before
anything reaches the network.
"""

from datetime import timedelta
from typing import Any, Optional
from urllib.parse import quote

from ..models.errors import ConstructionError
from ..models.values import parse_slice_count
from ._endpoint import Endpoint, Param, ParamType, PathTemplate, Segment
from ._options import PathValue, RequestConfiguration
from ._request_spec import RequestSpec

# characters left as-is inside a single path segment
_SEGMENT_SAFE = ",*"

_DURATION_UNITS = (
    ("d", 86_400_000_000),
    ("h", 3_600_000_000),
    ("m", 60_000_000),
    ("s", 1_000_000),
    ("ms", 1_000),
    ("micros", 1),
)


def encode(endpoint: Endpoint, configuration: RequestConfiguration) -> RequestSpec:
    if configuration.body is not None and not endpoint.body:
        raise ConstructionError("endpoint does not accept a body", endpoint.name)

    missing = [name for name in endpoint.required if configuration.path.get(name) is None]
    if missing:
        raise ConstructionError(
            f"missing required path argument(s): {', '.join(missing)}", endpoint.name
        )

    unknown = sorted(set(configuration.path) - endpoint.path_parts)
    if unknown:
        raise ConstructionError(
            f"unknown path argument(s): {', '.join(unknown)}", endpoint.name
        )

    return RequestSpec(
        method=encode_method(endpoint, configuration),
        path=encode_path(endpoint, configuration),
        params=encode_params(endpoint, configuration),
        endpoint=endpoint.name,
    )


def encode_method(endpoint: Endpoint, configuration: RequestConfiguration) -> str:
    if endpoint.fallback_method is not None:
        segment, method = endpoint.fallback_method
        if not _present(configuration.path.get(segment)):
            return method
    return endpoint.method


def encode_path(endpoint: Endpoint, configuration: RequestConfiguration) -> str:
    template = select_template(endpoint, configuration)

    components: list[str] = []
    for part in template.parts:
        if isinstance(part, str):
            components.append(part)
            continue

        value = configuration.path.get(part.name)
        if _present(value):
            components.append(escape_segment(value))  # type: ignore[arg-type]
        elif part.default is not None:
            components.append(escape_segment(part.default))
        elif part.required:
            # required but empty: keep the slot so the layout stays positional
            components.append("")

    return "/" + "/".join(components)


def select_template(
    endpoint: Endpoint, configuration: RequestConfiguration
) -> PathTemplate:
    for template in endpoint.templates:
        if all(
            _segment_satisfied(endpoint, segment, configuration)
            for segment in template.segments
        ):
            return template

    missing = [
        s.name
        for s in endpoint.templates[-1].segments
        if not _segment_satisfied(endpoint, s, configuration)
    ]
    raise ConstructionError(
        f"no path matches the given arguments, missing: {', '.join(missing)}",
        endpoint.name,
    )


def _segment_satisfied(
    endpoint: Endpoint, segment: Segment, configuration: RequestConfiguration
) -> bool:
    if not segment.required or segment.name in endpoint.required:
        return True
    return _present(configuration.path.get(segment.name))


def escape_segment(value: PathValue) -> str:
    """Join list segments with ``,`` then percent-escape the result as one segment.

    A segment made only of dots is escaped in full so it survives URL parsing.
    """
    if isinstance(value, bool):
        raise ConstructionError(f"invalid path segment {value!r}")
    if isinstance(value, (str, int)):
        text = str(value)
    else:
        text = ",".join(str(item) for item in value)
    escaped = quote(text, safe=_SEGMENT_SAFE)
    # "." and ".." would be removed as dot segments when the URL is parsed
    if escaped and escaped.strip(".") == "":
        return "%2E" * len(escaped)
    return escaped


def encode_params(
    endpoint: Endpoint, configuration: RequestConfiguration
) -> dict[str, str]:
    unknown = sorted(name for name in configuration.params if endpoint.param(name) is None)
    if unknown:
        raise ConstructionError(
            f"unknown parameter(s): {', '.join(unknown)}", endpoint.name
        )

    params: dict[str, str] = {}
    for param in endpoint.all_params:
        if param.name not in configuration.params:
            continue
        try:
            rendered = render_value(param, configuration.params[param.name])
        except (TypeError, ValueError) as e:
            raise ConstructionError(str(e), endpoint.name) from e
        if rendered is not None:
            params[param.key] = rendered
    return params


def render_value(param: Param, value: Any) -> Optional[str]:
    """Render one parameter value, or ``None`` when it counts as unset."""
    kind = param.type

    if kind is ParamType.BOOL:
        if not isinstance(value, bool):
            raise TypeError(f"parameter {param.name!r} expects a bool, got {value!r}")
        return _bool(value)

    if kind is ParamType.INT:
        if isinstance(value, bool) or not isinstance(value, int):
            raise TypeError(f"parameter {param.name!r} expects an int, got {value!r}")
        return str(value)

    if kind is ParamType.DURATION:
        if isinstance(value, timedelta):
            return format_duration(value)
        if isinstance(value, str) and value:
            return value
        raise TypeError(
            f"parameter {param.name!r} expects a timedelta or a duration string, "
            f"got {value!r}"
        )

    if kind is ParamType.STRING:
        if not isinstance(value, str):
            raise TypeError(f"parameter {param.name!r} expects a str, got {value!r}")
        return value

    if kind is ParamType.LIST:
        if isinstance(value, str):
            value = (value,)
        items = list(value)
        if not all(isinstance(item, str) for item in items):
            raise TypeError(
                f"parameter {param.name!r} expects a list of str, got {value!r}"
            )
        return ",".join(items) if items else None

    if kind is ParamType.SLICES:
        return str(parse_slice_count(value))

    if kind is ParamType.BOOL_OR_INT:
        if isinstance(value, bool):
            return _bool(value)
        if isinstance(value, int):
            return str(value)
        raise TypeError(
            f"parameter {param.name!r} expects a bool or an int, got {value!r}"
        )

    if isinstance(value, bool):
        return _bool(value)
    return str(value)


def format_duration(value: timedelta) -> str:
    """Render a duration in the largest unit that represents it exactly, e.g. ``30s``."""
    micros = value // timedelta(microseconds=1)
    if micros == 0:
        return "0s"

    sign = "-" if micros < 0 else ""
    micros = abs(micros)
    for unit, size in _DURATION_UNITS:
        if micros % size == 0:
            return f"{sign}{micros // size}{unit}"
    return f"{sign}{micros}micros"


def _bool(value: bool) -> str:
    return "true" if value else "false"


def _present(value: Optional[PathValue]) -> bool:
    if value is None:
        return False
    if isinstance(value, (str, list, tuple)):
        return len(value) > 0
    return True
