"""
Normalization of API call outcomes.

Every call made by the dispatcher ends in :func:`normalize_response`.  It
turns transport failures, malformed bodies, API-reported errors and success
envelopes into exactly one of two outcomes: the unwrapped result is returned,
or a :class:`~gengo_lib.exceptions.GengoError` subclass is raised.
"""

import json
import logging
from typing import Any, Optional

import requests

from gengo_lib.data_models.envelope import Envelope
from gengo_lib.exceptions import (
    ApiError,
    AuthenticationError,
    RateLimitError,
    ResponseParseError,
    TransportError,
)

logger = logging.getLogger(__name__)

PARSE_ERROR_PREFIX = "Could not parse response from Gengo: "


def _transport_error(
    error: Optional[BaseException], response: Optional[requests.Response]
) -> TransportError:
    if response is None:
        return TransportError(f"Request failed: {error}", error=error)

    status = response.status_code
    message = f"HTTP {status}: {response.text}"
    if status in (401, 403):
        return AuthenticationError(message, error=error, response=response)
    if status == 429:
        return RateLimitError(message, error=error, response=response)
    return TransportError(message, error=error, response=response)


def _api_error(err: Any) -> ApiError:
    if isinstance(err, dict) and ("code" in err or "msg" in err):
        message = f"Gengo API error {err.get('code')}: {err.get('msg')}"
    else:
        message = f"Gengo API error: {err}"
    return ApiError(message, err=err)


def normalize_response(
    response: Optional[requests.Response],
    error: Optional[BaseException] = None,
    body: Any = None,
) -> Any:
    """
    Interpret the outcome of one HTTP call.

    Parameters
    ----------
    response : Optional[requests.Response]
        Response of the call; ``None`` when the transport failed before a
        response was received.
    error : Optional[BaseException]
        Transport-level exception raised by ``requests``, if any.
    body : Any
        Already decoded body; strings and bytes are parsed as JSON, when
        omitted ``response.text`` is parsed.

    Returns
    -------
    Any
        ``body["response"]`` for ``opstat == "ok"`` envelopes, otherwise
        the decoded body itself.

    Raises
    ------
    TransportError
        On a transport error, a missing response or a non-2xx status.
    ResponseParseError
        When the body is not valid JSON.
    ApiError
        When the envelope reports ``opstat == "error"``.
    """
    if error is not None or response is None or not 200 <= response.status_code < 300:
        exc = _transport_error(error, response)
        logger.debug("Transport failure: %s", exc.message)
        raise exc

    if body is None or isinstance(body, (str, bytes)):
        text = response.text if body is None else body
        try:
            body = json.loads(text)
        except (TypeError, ValueError) as exc:
            logger.debug("Unparsable response body from %s", response.url)
            raise ResponseParseError(f"{PARSE_ERROR_PREFIX}{text}", body=text) from exc

    if not isinstance(body, dict):
        return body

    envelope = Envelope.model_validate(body)
    if envelope.is_error:
        if envelope.err:
            exc = _api_error(envelope.err)
        else:
            # no details from the service; the only captured transport error is
            # ``error`` which is always None at this point
            exc = ApiError("Gengo reported an error without details", err=error)
        logger.debug("API error: %s", exc.message)
        raise exc

    if envelope.is_ok:
        return envelope.response
    return body
