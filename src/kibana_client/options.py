"""
Client configuration.

ClientConfig is immutable once built. Configuration functions (``with_*``)
are applied in order to a settings mapping when the client is created;
the resulting settings are validated into a ClientConfig.
"""

from typing import Any, Callable, Dict, Optional
import logging

import httpx
import pydantic
from pydantic import BaseModel, ConfigDict, Field, field_validator

from kibana_client import __version__
from kibana_client.exceptions import ConfigurationError

logger = logging.getLogger(__name__)

API_PATH = "api/"
DEFAULT_BASE_URL = "http://localhost:5601"
DEFAULT_TIMEOUT = 10.0
USER_AGENT = f"kibana-client/{__version__}"

ClientOption = Callable[[Dict[str, Any]], None]


def normalize_base_url(url: str) -> str:
    """
    Make sure ``url`` ends with a slash followed by the API path segment.

    ``http://host`` and ``http://host/`` both become ``http://host/api/``;
    a URL whose path already ends in ``api/`` only gets the trailing slash.
    """
    if not url.endswith("/"):
        url += "/"

    try:
        parsed = httpx.URL(url)
    except httpx.InvalidURL as e:
        raise ValueError(f"invalid base URL {url!r}: {e}") from e

    if parsed.scheme not in ("http", "https") or not parsed.host:
        raise ValueError(f"invalid base URL {url!r}: expected http(s)://host[:port][/path]")

    path = parsed.path
    if not path.endswith(API_PATH):
        path += API_PATH

    return str(parsed.copy_with(path=path))


class ClientConfig(BaseModel):
    """Settings shared by every request a client sends."""

    base_url: str = Field(
        DEFAULT_BASE_URL,
        validate_default=True,
        description="Base URL, normalized to end with /api/",
    )
    user_agent: str = Field(USER_AGENT, description="User-Agent header value")
    timeout: float = Field(DEFAULT_TIMEOUT, gt=0, description="Request timeout in seconds")
    http_client: Optional[httpx.Client] = Field(
        None,
        exclude=True,
        repr=False,
        description="Caller-owned httpx client to send requests with",
    )

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    @field_validator("base_url")
    @classmethod
    def _normalize_base_url(cls, value: str) -> str:
        return normalize_base_url(value)


def build_config(*options: Optional[ClientOption]) -> ClientConfig:
    """
    Apply configuration functions in order and validate the result.

    Raises:
        ConfigurationError: If a function fails or the settings are invalid
    """
    settings: Dict[str, Any] = {}
    for fn in options:
        if fn is None:
            continue
        try:
            fn(settings)
        except ConfigurationError:
            raise
        except Exception as e:
            raise ConfigurationError(f"client option failed: {e}") from e

    try:
        config = ClientConfig(**settings)
    except pydantic.ValidationError as e:
        raise ConfigurationError(f"invalid client configuration: {e}") from e

    logger.debug(f"Client configured for {config.base_url}")
    return config


def with_base_url(url: str) -> ClientOption:
    """Send requests to ``url`` instead of the default local instance."""

    def apply(settings: Dict[str, Any]) -> None:
        settings["base_url"] = url

    return apply


def with_timeout(seconds: float) -> ClientOption:
    """Bound every request by ``seconds``."""

    def apply(settings: Dict[str, Any]) -> None:
        settings["timeout"] = seconds

    return apply


def with_user_agent(user_agent: str) -> ClientOption:
    def apply(settings: Dict[str, Any]) -> None:
        settings["user_agent"] = user_agent

    return apply


def with_http_client(http_client: httpx.Client) -> ClientOption:
    """
    Send requests through a caller-supplied ``httpx.Client``.

    The caller keeps ownership: closing the Kibana client leaves it open.
    The configured timeout still applies per request.
    """

    def apply(settings: Dict[str, Any]) -> None:
        if not isinstance(http_client, httpx.Client):
            raise ConfigurationError(
                f"expected an httpx.Client, got {type(http_client).__name__}"
            )
        settings["http_client"] = http_client

    return apply
