"""
Credentials and Authorization header injection.

A client holds exactly one credential, either BasicAuth or APIKey. The
header is applied when a request is sent, and only when the request does
not already carry an Authorization header (for example one set by a
request customizer).
"""

import base64
from typing import Union

import httpx
from pydantic import BaseModel, ConfigDict, Field


class BasicAuth(BaseModel):
    """Username and password, sent as ``Authorization: Basic <base64>``."""

    username: str
    password: str = Field(repr=False)

    model_config = ConfigDict(frozen=True)

    def authorization_header(self) -> str:
        token = base64.b64encode(f"{self.username}:{self.password}".encode("utf-8"))
        return "Basic " + token.decode("ascii")


class APIKey(BaseModel):
    """Encoded API key, sent as ``Authorization: ApiKey <key>``."""

    key: str = Field(repr=False)

    model_config = ConfigDict(frozen=True)

    def authorization_header(self) -> str:
        return "ApiKey " + self.key


Credential = Union[BasicAuth, APIKey]


def authenticate(request: httpx.Request, credential: Credential) -> httpx.Request:
    """
    Set the Authorization header on ``request`` unless one is present.

    Calling this twice is a no-op the second time.
    """
    if not request.headers.get_list("Authorization"):
        request.headers["Authorization"] = credential.authorization_header()
    return request
