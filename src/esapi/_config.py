import os
from pathlib import Path
from typing import Optional, Union

from dotenv import load_dotenv
from pydantic import BaseModel, Field, field_validator

from ._utils.constants import (
    DEFAULT_API_VERSION,
    DEFAULT_BASE_URL,
    DEFAULT_TIMEOUT,
    ENV_API_VERSION,
    ENV_TIMEOUT,
    ENV_URL,
    ENV_VERIFY,
    SUPPORTED_API_VERSIONS,
)


class Config(BaseModel):
    """Connection settings for the bundled httpx transports.

    ``timeout`` is in seconds and defaults to httpx's own 5 seconds; ``None``
    waits without limit. ``api_version`` selects the endpoint table (path
    layouts and recognized parameters differ between 5.x, 6.x and 7.x
    servers).
    """

    base_url: str = DEFAULT_BASE_URL
    timeout: Optional[float] = DEFAULT_TIMEOUT
    verify: Union[bool, str] = True
    headers: dict[str, str] = Field(default_factory=dict)
    api_version: int = DEFAULT_API_VERSION

    @field_validator("base_url")
    @classmethod
    def _check_base_url(cls, value: str) -> str:
        if not value.startswith(("http://", "https://")):
            raise ValueError(f"base_url must be an http(s) URL, got {value!r}")
        return value.rstrip("/")

    @field_validator("api_version")
    @classmethod
    def _check_api_version(cls, value: int) -> int:
        if value not in SUPPORTED_API_VERSIONS:
            raise ValueError(
                f"api_version must be one of {SUPPORTED_API_VERSIONS}, got {value}"
            )
        return value

    @classmethod
    def from_env(cls, env_file: Optional[Union[str, Path]] = None) -> "Config":
        """Build a config from ``ESAPI_*`` environment variables.

        Variables from ``env_file`` (or a ``.env`` found from the working
        directory) are loaded first without overriding the real environment.
        """
        load_dotenv(env_file, override=False)

        values: dict[str, object] = {}
        if url := os.getenv(ENV_URL):
            values["base_url"] = url
        if timeout := os.getenv(ENV_TIMEOUT):
            values["timeout"] = float(timeout)
        if verify := os.getenv(ENV_VERIFY):
            values["verify"] = _parse_verify(verify)
        if api_version := os.getenv(ENV_API_VERSION):
            values["api_version"] = int(api_version)
        return cls(**values)


def _parse_verify(value: str) -> Union[bool, str]:
    lowered = value.strip().lower()
    if lowered in ("1", "true", "yes"):
        return True
    if lowered in ("0", "false", "no"):
        return False
    # anything else is a CA bundle path
    return value
