"""
Custom exception hierarchy for the Gengo client library.

Every failure of an API call is reported as a :class:`GengoError`.  The
``kind`` attribute tells callers which stage failed without ``isinstance``
checks, and ``payload`` carries whatever the failing stage had at hand:

* ``transport`` - network/timeout error or a non-2xx HTTP status; the payload
  is the ``(error, response)`` pair.
* ``parse`` - the body could not be decoded as JSON; the payload is the raw
  body text.
* ``api`` - the service answered with ``opstat == "error"``; the payload is
  the service's own ``err`` value.
* ``payload`` - the caller passed a request payload the client cannot send.
"""

from typing import Any, Optional


class ErrorKinds:
    TRANSPORT = "transport"
    PARSE = "parse"
    API = "api"
    PAYLOAD = "payload"


class GengoError(Exception):
    """Base exception for all Gengo-client errors."""

    kind: str = ""

    def __init__(self, message: str, payload: Any = None) -> None:
        super().__init__(message)
        self.message = message
        self.payload = payload


class TransportError(GengoError):
    """
    Raised when the request did not produce a successful HTTP response.

    ``error`` is the underlying ``requests`` exception (if any) and
    ``response`` the HTTP response (if any); together they form the payload.
    """

    kind = ErrorKinds.TRANSPORT

    def __init__(
        self,
        message: str,
        error: Optional[BaseException] = None,
        response: Any = None,
    ) -> None:
        super().__init__(message, payload=(error, response))
        self.error = error
        self.response = response

    @property
    def status_code(self) -> Optional[int]:
        return getattr(self.response, "status_code", None)


class AuthenticationError(TransportError):
    """Raised when the server returns HTTP 401/403 - invalid or missing keys."""

    pass


class RateLimitError(TransportError):
    """Raised when the server returns HTTP 429 - request rate limit exceeded."""

    pass


class ResponseParseError(GengoError):
    """Raised when the response body is not valid JSON."""

    kind = ErrorKinds.PARSE

    def __init__(self, message: str, body: Optional[str] = None) -> None:
        super().__init__(message, payload=body)
        self.body = body


class ApiError(GengoError):
    """
    Raised when the service reports ``opstat == "error"`` in a 2xx response.

    The ``err`` value sent by the service is kept as-is in ``payload``; when
    it is a mapping, its ``code`` and ``msg`` entries are exposed as
    attributes.
    """

    kind = ErrorKinds.API

    def __init__(self, message: str, err: Any = None) -> None:
        super().__init__(message, payload=err)
        self.err = err
        self.code = err.get("code") if isinstance(err, dict) else None
        self.msg = err.get("msg") if isinstance(err, dict) else None


class InvalidPayloadError(GengoError):
    """Raised when a request payload is neither a mapping nor a scalar id."""

    kind = ErrorKinds.PAYLOAD
