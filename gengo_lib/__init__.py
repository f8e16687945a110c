from gengo_lib.client import GengoClient, client
from gengo_lib.config import ClientConfig
from gengo_lib.exceptions import (
    GengoError,
    ErrorKinds,
    TransportError,
    AuthenticationError,
    RateLimitError,
    ResponseParseError,
    ApiError,
    InvalidPayloadError,
)

__all__ = [
    "GengoClient",
    "client",
    "ClientConfig",
    "GengoError",
    "ErrorKinds",
    "TransportError",
    "AuthenticationError",
    "RateLimitError",
    "ResponseParseError",
    "ApiError",
    "InvalidPayloadError",
]
