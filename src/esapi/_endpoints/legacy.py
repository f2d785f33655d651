"""Overrides for 6.x and 5.x servers.

Those versions address documents through an explicit mapping type and know a
smaller, partly differently spelled set of search parameters.
"""

from dataclasses import replace
from typing import Iterable, Optional, Union

from .._utils._endpoint import Endpoint, Param
from ._common import LIST, SOURCE, SOURCE_V5
from . import by_query, document, search


def adjust(
    endpoint: Endpoint,
    *,
    paths: Optional[Union[str, tuple[str, ...]]] = None,
    drop: Iterable[str] = (),
    add: tuple[Param, ...] = (),
) -> Endpoint:
    dropped = set(drop)
    params = tuple(p for p in endpoint.params if p.name not in dropped) + add
    return replace(endpoint, paths=paths or endpoint.paths, params=params)


def _v5_source(endpoint: Endpoint) -> Endpoint:
    return adjust(endpoint, drop=[p.name for p in SOURCE], add=SOURCE_V5)


_V7_ONLY_SEARCH = ("ccs_minimize_roundtrips",)
_V6_ONLY_SEARCH = (
    "allow_partial_search_results",
    "ignore_throttled",
    "rest_total_hits_as_int",
    "seq_no_primary_term",
    "track_total_hits",
)

V6 = (
    adjust(document.INDEX, paths="/{index}/{doc_type}/{id?}"),
    adjust(document.CREATE, paths="/{index}/{doc_type}/{id}/_create"),
    adjust(document.GET, paths="/{index}/{doc_type}/{id}"),
    adjust(document.EXISTS, paths="/{index}/{doc_type}/{id}"),
    adjust(document.DELETE, paths="/{index}/{doc_type}/{id}"),
    adjust(document.GET_SOURCE, paths="/{index}/{doc_type}/{id}/_source"),
    adjust(document.EXISTS_SOURCE, paths="/{index}/{doc_type}/{id}/_source"),
    adjust(document.UPDATE, paths="/{index}/{doc_type}/{id}/_update"),
    adjust(document.TERMVECTORS, paths="/{index}/{doc_type}/{id?}/_termvectors"),
    adjust(document.EXPLAIN, paths="/{index}/{doc_type}/{id}/_explain"),
    adjust(search.SEARCH, drop=_V7_ONLY_SEARCH),
    adjust(by_query.DELETE_BY_QUERY, drop=("max_docs",)),
    adjust(by_query.UPDATE_BY_QUERY, drop=("max_docs",)),
    adjust(by_query.REINDEX, drop=("max_docs",)),
)

_V6_BY_NAME = {endpoint.name: endpoint for endpoint in V6}

V5 = (
    adjust(
        _V6_BY_NAME["search"],
        drop=(*_V6_ONLY_SEARCH, *(p.name for p in SOURCE)),
        add=(*SOURCE_V5, Param("fielddata_fields", LIST)),
    ),
    _v5_source(_V6_BY_NAME["get"]),
    _v5_source(_V6_BY_NAME["get_source"]),
    _v5_source(_V6_BY_NAME["update"]),
    _v5_source(document.MGET),
)
