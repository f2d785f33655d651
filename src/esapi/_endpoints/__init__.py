"""Endpoint descriptor tables.

Every remote operation is declared once, as data; the client binds each
descriptor to the shared encoder and dispatcher.
"""

from functools import lru_cache
from types import MappingProxyType
from typing import Mapping

from .._utils._endpoint import Endpoint
from .._utils.constants import DEFAULT_API_VERSION, SUPPORTED_API_VERSIONS
from . import (
    by_query,
    cat,
    cluster,
    core,
    document,
    indices,
    ingest,
    legacy,
    nodes,
    search,
    snapshot,
    tasks,
)

ENDPOINTS: tuple[Endpoint, ...] = (
    *core.ENDPOINTS,
    *document.ENDPOINTS,
    *search.ENDPOINTS,
    *by_query.ENDPOINTS,
    *cat.ENDPOINTS,
    *cluster.ENDPOINTS,
    *indices.ENDPOINTS,
    *ingest.ENDPOINTS,
    *nodes.ENDPOINTS,
    *snapshot.ENDPOINTS,
    *tasks.ENDPOINTS,
)


@lru_cache(maxsize=None)
def endpoints_for(api_version: int = DEFAULT_API_VERSION) -> Mapping[str, Endpoint]:
    """Return the endpoint table for a server major version, keyed by dotted name."""
    if api_version not in SUPPORTED_API_VERSIONS:
        raise ValueError(
            f"unsupported api_version {api_version}, expected one of {SUPPORTED_API_VERSIONS}"
        )

    table = {endpoint.name: endpoint for endpoint in ENDPOINTS}
    if api_version <= 6:
        table.update((endpoint.name, endpoint) for endpoint in legacy.V6)
    if api_version <= 5:
        table.update((endpoint.name, endpoint) for endpoint in legacy.V5)
    return MappingProxyType(table)


__all__ = ["ENDPOINTS", "endpoints_for"]
