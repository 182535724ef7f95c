"""
HTTP layer for the Kibana API.

This module provides the request pipeline shared by every endpoint:
- Resolving relative operation paths against the configured base URL
- Method-specific headers and body/query encoding
- Request customizers
- Authorization header injection at send time
- Status interpretation and error message extraction
- Decoding success bodies into typed values
"""

from functools import lru_cache
from typing import Any, Iterable, Optional, Tuple
import json
import logging
import re

import httpx
import pydantic
from pydantic import TypeAdapter

from kibana_client.auth import Credential, authenticate
from kibana_client.encoding import Options, encode_json, encode_query
from kibana_client.errors_parser import error_message
from kibana_client.exceptions import (
    UNKNOWN_ERROR_FORMAT,
    ConnectionError as ClientConnectionError,
    DecodeError,
    InvalidPathError,
    NetworkError,
    TimeoutError as ClientTimeoutError,
    exception_from_response,
)
from kibana_client.options import ClientConfig
from kibana_client.request_options import RequestOption

logger = logging.getLogger(__name__)

SUCCESS_STATUS_CODES = frozenset({200, 201, 202, 204, 304})

XSRF_HEADER = "kbn-xsrf"

# A '%' that does not start a two-digit hex escape
_MALFORMED_ESCAPE = re.compile(r"%(?![0-9A-Fa-f]{2})")


class Response:
    """
    Envelope around the underlying ``httpx.Response``.

    The response stream is closed by the time callers see it. ``content``
    is available unless the body was copied into a caller-supplied sink.
    """

    def __init__(self, http_response: httpx.Response):
        self.http_response = http_response

    @property
    def status_code(self) -> int:
        return self.http_response.status_code

    @property
    def headers(self) -> httpx.Headers:
        return self.http_response.headers

    @property
    def request(self) -> httpx.Request:
        return self.http_response.request

    @property
    def url(self) -> httpx.URL:
        return self.http_response.request.url

    @property
    def content(self) -> bytes:
        return self.http_response.content

    def __repr__(self) -> str:
        return f"<Response [{self.status_code}] {self.request.method} {self.url}>"


@lru_cache(maxsize=None)
def _adapter(result_type: Any) -> TypeAdapter:
    return TypeAdapter(result_type)


def _is_sink(result: Any) -> bool:
    return not isinstance(result, type) and callable(getattr(result, "write", None))


class HTTPClient:
    """
    Synchronous HTTP client for Kibana API requests.

    One call sends exactly one request. The client holds no per-call state,
    so an instance can be shared between threads.
    """

    def __init__(self, config: ClientConfig, credential: Credential):
        """
        Initialize the HTTP client.

        Args:
            config: Validated client configuration
            credential: BasicAuth or APIKey credential
        """
        self.config = config
        self.credential = credential
        self._owns_client = config.http_client is None
        self._client = config.http_client or httpx.Client(
            timeout=httpx.Timeout(config.timeout),
            follow_redirects=True,
        )

    @property
    def base_url(self) -> str:
        return self.config.base_url

    def close(self) -> None:
        """Close the underlying httpx client if this instance created it."""
        if self._owns_client and not self._client.is_closed:
            self._client.close()

    def __enter__(self) -> "HTTPClient":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()

    # =========================================================================
    # Request Building
    # =========================================================================

    def new_request(
        self,
        method: str,
        path: str,
        opt: Optional[Options] = None,
        options: Iterable[Optional[RequestOption]] = (),
    ) -> httpx.Request:
        """
        Build a request for ``path`` relative to the base URL.

        POST and PUT requests carry ``opt`` as a JSON body; DELETE requests
        carry no body; any other method encodes ``opt`` as the query string.
        No I/O is performed.

        Args:
            method: HTTP method
            path: Relative path, without a leading slash
            opt: Option model or mapping, None for no body/query
            options: Request customizers applied last, in order

        Raises:
            InvalidPathError: If ``path`` contains a malformed escape
        """
        method = method.upper()
        if _MALFORMED_ESCAPE.search(path):
            raise InvalidPathError(path)

        url = httpx.URL(self.config.base_url + path)
        headers = {
            "Accept": "application/json",
            "User-Agent": self.config.user_agent,
        }

        content: Optional[bytes] = None
        if method in ("POST", "PUT"):
            headers[XSRF_HEADER] = "true"
            headers["Content-Type"] = "application/json"
            if opt is not None:
                content = encode_json(opt)
        elif method == "DELETE":
            headers[XSRF_HEADER] = "true"
        elif opt is not None:
            query = encode_query(opt)
            if query:
                url = url.copy_with(query=query.encode("ascii"))

        request = httpx.Request(
            method,
            url,
            headers=headers,
            content=content,
            extensions={"timeout": httpx.Timeout(self.config.timeout).as_dict()},
        )

        for fn in options:
            if fn is None:
                continue
            replacement = fn(request)
            if isinstance(replacement, httpx.Request):
                request = replacement

        return request

    # =========================================================================
    # Execution
    # =========================================================================

    def do(self, request: httpx.Request, result: Any = None) -> Tuple[Any, Response]:
        """
        Send ``request`` and interpret the response.

        Args:
            request: Request built by ``new_request``
            result: What to do with a success body. None discards it; an
                object with a ``write`` method receives the raw bytes;
                anything else is a type the JSON body is validated into.

        Returns:
            ``(value, response)``; value is None when the body was discarded
            or empty, the sink itself when one was given

        Raises:
            ErrorResponse: On any status outside the success set
            DecodeError: If a success body does not match ``result``
            NetworkError: If no response was received, or its body could
                not be read (then with ``response`` set)
        """
        authenticate(request, self.credential)
        logger.debug(f"{request.method} {request.url}")

        try:
            http_response = self._client.send(request, stream=True)
        except httpx.RequestError as e:
            raise self._network_error(e) from e

        try:
            return self._handle_response(http_response, result)
        except httpx.RequestError as e:
            raise self._network_error(e, Response(http_response)) from e
        finally:
            http_response.close()

    def _handle_response(self, http_response: httpx.Response, result: Any) -> Tuple[Any, Response]:
        response = Response(http_response)
        logger.debug(f"{response.request.method} {response.url} -> {response.status_code}")

        check_response(response)

        if result is None:
            http_response.read()
            return None, response

        if _is_sink(result):
            for chunk in http_response.iter_bytes():
                result.write(chunk)
            return result, response

        content = http_response.read()
        if not content.strip():
            return None, response

        try:
            value = _adapter(result).validate_json(content)
        except pydantic.ValidationError as e:
            raise DecodeError(
                f"failed to decode response body: {e}",
                status_code=response.status_code,
                response=response,
            ) from e
        return value, response

    @staticmethod
    def _network_error(e: httpx.RequestError, response: Optional[Response] = None) -> NetworkError:
        if isinstance(e, httpx.TimeoutException):
            return ClientTimeoutError(f"Request timed out: {e}", response=response)
        if isinstance(e, httpx.ConnectError):
            return ClientConnectionError(f"Connection failed: {e}", response=response)
        return NetworkError(f"Request failed: {e}", response=response)

    # =========================================================================
    # Convenience Methods
    # =========================================================================

    def request(
        self,
        method: str,
        path: str,
        *,
        opt: Optional[Options] = None,
        result: Any = None,
        options: Iterable[Optional[RequestOption]] = (),
    ) -> Tuple[Any, Response]:
        """Build and send a request in one step."""
        req = self.new_request(method, path, opt, options)
        return self.do(req, result)

    def get(
        self,
        path: str,
        *,
        params: Optional[Options] = None,
        result: Any = None,
        options: Iterable[Optional[RequestOption]] = (),
    ) -> Tuple[Any, Response]:
        """Make a GET request."""
        return self.request("GET", path, opt=params, result=result, options=options)

    def post(
        self,
        path: str,
        *,
        json_data: Optional[Options] = None,
        result: Any = None,
        options: Iterable[Optional[RequestOption]] = (),
    ) -> Tuple[Any, Response]:
        """Make a POST request."""
        return self.request("POST", path, opt=json_data, result=result, options=options)

    def put(
        self,
        path: str,
        *,
        json_data: Optional[Options] = None,
        result: Any = None,
        options: Iterable[Optional[RequestOption]] = (),
    ) -> Tuple[Any, Response]:
        """Make a PUT request."""
        return self.request("PUT", path, opt=json_data, result=result, options=options)

    def delete(
        self,
        path: str,
        *,
        options: Iterable[Optional[RequestOption]] = (),
    ) -> Response:
        """Make a DELETE request; the response body is discarded."""
        _, response = self.request("DELETE", path, options=options)
        return response


def check_response(response: Response) -> None:
    """
    Raise the matching ErrorResponse unless the status is a success status.

    The body is read in full. If it is not valid JSON the message is the
    fixed "failed to parse unknown error format" text.
    """
    if response.status_code in SUCCESS_STATUS_CODES:
        return

    body = response.http_response.read()
    try:
        raw = json.loads(body)
    except ValueError:
        message = UNKNOWN_ERROR_FORMAT
    else:
        message = error_message(raw)

    raise exception_from_response(response, message, body)
