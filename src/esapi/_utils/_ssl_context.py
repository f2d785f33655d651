import os
import ssl
from typing import TYPE_CHECKING, Any, Union

from .constants import CONTENT_TYPE_JSON, HEADER_ACCEPT

if TYPE_CHECKING:
    from .._config import Config


def expand_path(path):
    """Expand environment variables and user home directory in path."""
    if not path:
        return path
    # Expand environment variables like $HOME
    path = os.path.expandvars(path)
    # Expand user home directory ~
    path = os.path.expanduser(path)
    return path


def create_ssl_context(ca_bundle: str) -> ssl.SSLContext:
    return ssl.create_default_context(cafile=expand_path(ca_bundle))


def get_verify(config: "Config") -> Union[bool, ssl.SSLContext]:
    if isinstance(config.verify, str):
        return create_ssl_context(config.verify)
    return config.verify


def get_httpx_client_kwargs(config: "Config") -> dict[str, Any]:
    """Keyword arguments shared by the sync and async httpx clients."""
    return {
        "verify": get_verify(config),
        "timeout": config.timeout,
        "headers": {HEADER_ACCEPT: CONTENT_TYPE_JSON, **config.headers},
        "follow_redirects": False,
    }
