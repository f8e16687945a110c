"""
Thin wrapper around ``requests`` used to talk to the Gengo API.

The :class:`HttpRequester` class centralises:

* construction of absolute URLs from the configured base URL,
* the ``Accept: application/json`` header sent with every call,
* the per-request timeout,
* execution of a :class:`~gengo_lib.data_models.request.RequestDescriptor`.

It performs exactly one attempt per call and does not interpret the result:
HTTP status codes and bodies are judged by
:mod:`gengo_lib.core.response`.
"""

import logging
from typing import Optional

import requests

from gengo_lib.constants import REQUEST_TIMEOUT
from gengo_lib.data_models.request import RequestDescriptor


class HttpRequester:
    """
    Helper for making single-attempt HTTP calls.

    Parameters
    ----------
    base_url : str
        Base URL of the remote service (e.g. ``"https://api.gengo.com/v2/"``).
    timeout : int, default ``REQUEST_TIMEOUT``
        Per-request timeout in seconds.
    logger : Optional[logging.Logger]
        Logger instance; if omitted, a module-level logger is created.
    session : Optional[requests.Session]
        Session to reuse; a new one is created when omitted.
    """

    DEFAULT_HEADERS = {"Accept": "application/json"}

    def __init__(
        self,
        base_url: str,
        timeout: int = REQUEST_TIMEOUT,
        logger: Optional[logging.Logger] = None,
        session: Optional[requests.Session] = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.session = session or requests.Session()
        self.logger = logger or logging.getLogger(__name__)

    def full_url(self, path: str) -> str:
        """
        Build the absolute URL for a request.

        Exactly one ``/`` separates the base URL and ``path``; a trailing
        slash of ``path`` is kept.
        """
        return f"{self.base_url}/{path.lstrip('/')}"

    def describe(
        self,
        method: str,
        path: str,
        params: Optional[dict] = None,
        data: Optional[dict] = None,
    ) -> RequestDescriptor:
        return RequestDescriptor(
            method=method,
            url=self.full_url(path),
            headers=dict(self.DEFAULT_HEADERS),
            params=params,
            data=data,
            timeout=self.timeout,
        )

    def execute(self, request: RequestDescriptor) -> requests.Response:
        """
        Send ``request`` and return the raw response.

        Raises
        ------
        requests.RequestException
            On connection problems and timeouts.
        """
        self.logger.debug("%s %s", request.method, request.url)
        return self.session.request(
            request.method,
            request.url,
            params=request.params,
            data=request.data,
            headers=request.headers,
            timeout=request.timeout,
        )

    def close(self) -> None:
        self.session.close()
