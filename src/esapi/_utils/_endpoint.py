import re
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Union

from .constants import CONTENT_TYPE_JSON

_PLACEHOLDER = re.compile(r"^\{(?P<name>\w+)(?:(?P<optional>\?)|=(?P<default>[^}]*))?\}$")


class ParamType(Enum):
    """How an option value is rendered into the query string."""

    BOOL = "bool"
    INT = "int"
    DURATION = "duration"
    STRING = "string"
    LIST = "list"
    ANY = "any"
    SLICES = "slices"
    BOOL_OR_INT = "bool_or_int"


@dataclass(frozen=True)
class Param:
    """A recognized query parameter.

    ``name`` is the option name used from Python, ``key`` the name sent on the
    wire. They only differ where the wire name is not a valid identifier or is
    a keyword (``from``, ``_source``, ``q``...).
    """

    name: str
    type: ParamType
    key: str = ""

    def __post_init__(self) -> None:
        if not self.key:
            object.__setattr__(self, "key", self.name)


# Accepted by every endpoint.
UNIVERSAL_PARAMS: tuple[Param, ...] = (
    Param("pretty", ParamType.BOOL),
    Param("human", ParamType.BOOL),
    Param("error_trace", ParamType.BOOL),
    Param("filter_path", ParamType.LIST),
)


@dataclass(frozen=True)
class Segment:
    name: str
    optional: bool = False
    default: Optional[str] = None

    @property
    def required(self) -> bool:
        return not self.optional and self.default is None


@dataclass(frozen=True)
class PathTemplate:
    """A path such as ``/{index}/{doc_type?}/_delete_by_query``.

    ``{name}`` is always emitted, even when empty, ``{name?}`` is dropped
    together with its slash when unset or empty, and ``{name=value}`` falls
    back to ``value``.
    """

    raw: str
    parts: tuple[Union[str, Segment], ...]

    @classmethod
    def parse(cls, raw: str) -> "PathTemplate":
        if not raw.startswith("/"):
            raise ValueError(f"path template must start with '/': {raw!r}")

        parts: list[Union[str, Segment]] = []
        for component in raw.strip("/").split("/") if raw != "/" else []:
            match = _PLACEHOLDER.match(component)
            if match is None:
                if "{" in component or "}" in component:
                    raise ValueError(f"malformed placeholder {component!r} in {raw!r}")
                parts.append(component)
                continue
            parts.append(
                Segment(
                    name=match.group("name"),
                    optional=match.group("optional") is not None,
                    default=match.group("default"),
                )
            )
        return cls(raw=raw, parts=tuple(parts))

    @property
    def segments(self) -> tuple[Segment, ...]:
        return tuple(part for part in self.parts if isinstance(part, Segment))


@dataclass(frozen=True)
class Endpoint:
    """Static description of one remote operation.

    Args:
        name: Dotted name, e.g. ``search`` or ``indices.create``.
        method: HTTP method.
        paths: One template, or several tried in order; the first whose
            required segments are all present wins.
        params: The recognized optional query parameters.
        body: Whether a request body is accepted.
        content_type: Sent automatically when a body is present.
        fallback_method: ``(segment, method)``; the method used instead of
            ``method`` when that segment is absent.
    """

    name: str
    method: str
    paths: Union[str, tuple[str, ...]]
    params: tuple[Param, ...] = ()
    body: bool = False
    content_type: str = CONTENT_TYPE_JSON
    fallback_method: Optional[tuple[str, str]] = None

    templates: tuple[PathTemplate, ...] = field(init=False, repr=False, compare=False)
    required: tuple[str, ...] = field(init=False, repr=False, compare=False)
    path_parts: frozenset[str] = field(init=False, repr=False, compare=False)
    _params_by_name: dict[str, Param] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        paths = (self.paths,) if isinstance(self.paths, str) else tuple(self.paths)
        if not paths:
            raise ValueError(f"{self.name}: at least one path is required")
        templates = tuple(PathTemplate.parse(path) for path in paths)

        # required arguments are the plain segments shared by every template
        required = [s.name for s in templates[0].segments if s.required]
        for template in templates[1:]:
            names = {s.name for s in template.segments if s.required}
            required = [name for name in required if name in names]

        path_parts = frozenset(s.name for t in templates for s in t.segments)

        by_name: dict[str, Param] = {}
        for param in (*self.params, *UNIVERSAL_PARAMS):
            if param.name in by_name:
                raise ValueError(f"{self.name}: duplicate parameter {param.name!r}")
            if param.name in path_parts:
                raise ValueError(
                    f"{self.name}: parameter {param.name!r} shadows a path segment"
                )
            by_name[param.name] = param

        if self.fallback_method is not None and self.fallback_method[0] not in path_parts:
            raise ValueError(
                f"{self.name}: fallback method depends on unknown segment "
                f"{self.fallback_method[0]!r}"
            )

        object.__setattr__(self, "paths", paths)
        object.__setattr__(self, "templates", templates)
        object.__setattr__(self, "required", tuple(required))
        object.__setattr__(self, "path_parts", path_parts)
        object.__setattr__(self, "_params_by_name", by_name)

    @property
    def namespace(self) -> Optional[str]:
        head, sep, _ = self.name.rpartition(".")
        return head if sep else None

    @property
    def short_name(self) -> str:
        return self.name.rpartition(".")[2]

    def param(self, name: str) -> Optional[Param]:
        return self._params_by_name.get(name)

    @property
    def all_params(self) -> tuple[Param, ...]:
        """Declared parameters followed by the universal ones."""
        return tuple(self._params_by_name.values())
