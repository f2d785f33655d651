from .._utils._endpoint import Param, ParamType

BOOL = ParamType.BOOL
INT = ParamType.INT
DURATION = ParamType.DURATION
STRING = ParamType.STRING
LIST = ParamType.LIST
ANY = ParamType.ANY
SLICES = ParamType.SLICES
BOOL_OR_INT = ParamType.BOOL_OR_INT


def params(kind: ParamType, *names: str) -> tuple[Param, ...]:
    return tuple(Param(name, kind) for name in names)


def bools(*names: str) -> tuple[Param, ...]:
    return params(BOOL, *names)


def ints(*names: str) -> tuple[Param, ...]:
    return params(INT, *names)


def durations(*names: str) -> tuple[Param, ...]:
    return params(DURATION, *names)


def strings(*names: str) -> tuple[Param, ...]:
    return params(STRING, *names)


def lists(*names: str) -> tuple[Param, ...]:
    return params(LIST, *names)


WILDCARDS = (
    Param("allow_no_indices", BOOL),
    Param("expand_wildcards", STRING),
    Param("ignore_unavailable", BOOL),
)

SOURCE = (
    Param("source", LIST, "_source"),
    Param("source_excludes", LIST, "_source_excludes"),
    Param("source_includes", LIST, "_source_includes"),
)

# 5.x spelled the include/exclude filters in the singular
SOURCE_V5 = (
    Param("source", LIST, "_source"),
    Param("source_exclude", LIST, "_source_exclude"),
    Param("source_include", LIST, "_source_include"),
)

QUERY_STRING = (
    Param("analyze_wildcard", BOOL),
    Param("analyzer", STRING),
    Param("default_operator", STRING),
    Param("df", STRING),
    Param("lenient", BOOL),
    Param("query", STRING, "q"),
)

MASTER_TIMEOUT = (Param("master_timeout", DURATION),)

TIMEOUTS = (Param("master_timeout", DURATION), Param("timeout", DURATION))

VERSIONING = (
    Param("version", INT),
    Param("version_type", STRING),
)

SEQ_NO = (
    Param("if_primary_term", INT),
    Param("if_seq_no", INT),
)

CAT = (
    Param("format", STRING),
    Param("h", LIST),
    Param("help", BOOL),
    Param("local", BOOL),
    Param("master_timeout", DURATION),
    Param("s", LIST),
    Param("v", BOOL),
)
