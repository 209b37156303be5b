"""
HTTP transport abstraction for one-shot JSON requests.

Provides a unified interface for issuing requests against the remote service
with consistent headers, error handling, and logging, so the resource client
can be tested against canned responses instead of the network.
"""

import logging
from typing import NamedTuple, Optional

import requests

from fakerest.config import Config
from fakerest.output import get_output

logger = logging.getLogger(__name__)

METHODS = ("GET", "POST", "PUT", "DELETE")

JSON_CONTENT_TYPE = "application/json; charset=utf-8"


class TransportError(RuntimeError):
    """Raised when a request fails at the I/O level (connect, read, write, bad URL)."""


class Response(NamedTuple):
    """Status code and decoded text body of a completed exchange."""

    status: int
    body: str

    @property
    def ok(self) -> bool:
        """True for any 2xx status."""
        return 200 <= self.status < 300


class HttpTransport:
    """
    Blocking HTTP transport built on requests.

    Each call opens its own connection and releases it before returning.
    Non-2xx statuses are handed back to the caller untouched; only failures
    to complete the exchange raise TransportError.
    """

    def __init__(self, timeout: Optional[float] = None):
        """
        Initialize the transport.

        Args:
            timeout: Seconds to wait for connect and read, None to wait forever
        """
        self.timeout = timeout

    def request(self, method: str, url: str, body: Optional[str] = None) -> Response:
        """
        Perform one request and return the status and full response body.

        Args:
            method: One of GET, POST, PUT, DELETE
            url: Absolute URL of the target resource
            body: Optional JSON text sent verbatim as UTF-8

        Returns:
            Response with the numeric status and the body as text ("" when empty)

        Raises:
            ValueError: If method is not supported
            TransportError: If the request cannot be sent or the response cannot be read
        """
        method = method.upper()
        if method not in METHODS:
            raise ValueError(f"Unsupported HTTP method: {method}. Expected one of: {', '.join(METHODS)}")

        headers = {"Accept": "application/json"}
        data = None
        if body is not None:
            headers["Content-Type"] = JSON_CONTENT_TYPE
            data = body.encode("utf-8")

        output = get_output()
        logger.debug(f"{method} {url}")
        output.verbose(f"{method} {url}")
        if body is not None:
            logger.debug(f"Request body: {body}")
            output.verbose(f"Request body: {body}")

        try:
            response = requests.request(
                method,
                url,
                headers=headers,
                data=data,
                timeout=self.timeout,
            )
            text = response.content.decode("utf-8")
            status = response.status_code
        except requests.RequestException as e:
            logger.error(f"Request failed: {method} {url}: {e}")
            raise TransportError(f"{method} {url} failed: {e}") from e
        except UnicodeDecodeError as e:
            logger.error(f"Response from {method} {url} is not valid UTF-8")
            raise TransportError(f"{method} {url} returned a body that is not valid UTF-8") from e

        logger.debug(f"{method} {url} -> {status} ({len(text)} chars)")
        output.verbose(f"{method} {url} -> {status}")
        return Response(status, text)


_default_transport: Optional[HttpTransport] = None


def get_transport() -> HttpTransport:
    """
    Get the default transport instance.

    The instance is created on first use so that FAKEREST_TIMEOUT is read at
    call time rather than at import time.

    Returns:
        Default HttpTransport instance
    """
    global _default_transport
    if _default_transport is None:
        _default_transport = HttpTransport(timeout=Config.timeout())
    return _default_transport
