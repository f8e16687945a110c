"""
Request construction and dispatch.

:class:`RequestDispatcher` turns ``(method, path, payload)`` into exactly one
HTTP request:

* the payload is coerced to a mapping (a scalar becomes ``{"id": value}``)
  and its keys are normalized to the underscore convention,
* for ``GET``/``DELETE`` the payload and the signature fields form the query
  string (nested values flattened into bracket keys),
* for ``POST``/``PUT`` the payload is JSON-encoded under the ``data`` form
  field and the signature fields are sent as sibling form fields,
* the outcome is passed through :func:`~gengo_lib.core.response.normalize_response`.

Calls are synchronous.  :meth:`RequestDispatcher.submit` runs any call on a
thread pool and returns a :class:`concurrent.futures.Future` immediately;
:meth:`RequestDispatcher.fire_and_forget` does the same but only logs
failures.
"""

import json
import logging
import threading
from concurrent.futures import Future, ThreadPoolExecutor
from typing import Any, Callable, Dict, Mapping, Optional

import requests
from pydantic import BaseModel

from gengo_lib.auth.signature import SignatureProvider
from gengo_lib.constants import FORM_DATA_FIELD, MAX_WORKERS, QUERY_STRING_METHODS
from gengo_lib.core.response import normalize_response
from gengo_lib.data_models.request import RequestDescriptor
from gengo_lib.exceptions import InvalidPayloadError
from gengo_lib.utils.http import HttpRequester
from gengo_lib.utils.keys import keys_to_underscore
from gengo_lib.utils.query import flatten_params

ResultCallback = Callable[[Optional[Exception], Any], None]


def coerce_payload(payload: Any) -> Dict[str, Any]:
    """
    Bring a caller-supplied payload into mapping form.

    ``None`` gives an empty mapping, a string or number is treated as a job
    id (``{"id": payload}``) and pydantic models are dumped without unset
    optional fields.
    """
    if payload is None:
        return {}
    if isinstance(payload, (str, int, float)) and not isinstance(payload, bool):
        return {"id": payload}
    if isinstance(payload, BaseModel):
        return payload.model_dump(exclude_none=True)
    if isinstance(payload, Mapping):
        return dict(payload)
    raise InvalidPayloadError(
        f"Payload must be a mapping or a scalar id, got {type(payload).__name__}",
        payload=payload,
    )


class RequestDispatcher:
    """
    Builds and sends signed requests.

    Parameters
    ----------
    http : HttpRequester
        Transport bound to the environment's base URL and timeout.
    signer : SignatureProvider
        Source of the authentication fields.
    logger : Optional[logging.Logger]
        Logger instance; if omitted, a module-level logger is created.
    max_workers : int
        Thread pool size for :meth:`submit`; the pool is created on first use.
    """

    def __init__(
        self,
        http: HttpRequester,
        signer: SignatureProvider,
        logger: Optional[logging.Logger] = None,
        max_workers: int = MAX_WORKERS,
    ) -> None:
        self.http = http
        self.signer = signer
        self.logger = logger or logging.getLogger(__name__)
        self.max_workers = max_workers

        self._executor: Optional[ThreadPoolExecutor] = None
        self._executor_lock = threading.Lock()

    # ------------------------------------------------------------------ #
    def build_request(
        self, method: str, path: str, payload: Any = None
    ) -> RequestDescriptor:
        method = method.upper()
        data = keys_to_underscore(coerce_payload(payload))
        signature = self.signer.current().as_params()

        if method in QUERY_STRING_METHODS:
            params = flatten_params({**data, **signature})
            return self.http.describe(method, path, params=params)

        try:
            encoded = json.dumps(data)
        except (TypeError, ValueError) as exc:
            raise InvalidPayloadError(
                f"Payload cannot be encoded as JSON: {exc}", payload=data
            ) from exc
        form = {FORM_DATA_FIELD: encoded, **signature}
        return self.http.describe(method, path, data=form)

    def send(self, method: str, path: str, payload: Any = None) -> Any:
        """
        Issue one request and return its normalized result.

        Raises
        ------
        GengoError
            Any failure of the call, see :mod:`gengo_lib.core.response`.
        """
        request = self.build_request(method, path, payload)
        try:
            response = self.http.execute(request)
        except requests.RequestException as exc:
            return normalize_response(None, error=exc)
        return normalize_response(response)

    def method_caller(self, method: str) -> Callable[..., Any]:
        """Bind ``method``; the returned callable takes ``(path, payload=None)``."""

        def _call(path: str, payload: Any = None) -> Any:
            return self.send(method, path, payload)

        return _call

    # ------------------------------------------------------------------ #
    def submit(
        self,
        fn: Callable[..., Any],
        *args,
        callback: Optional[ResultCallback] = None,
        **kwargs,
    ) -> Future:
        """
        Run ``fn(*args, **kwargs)`` in the background.

        Returns immediately.  The result is delivered once through the
        returned future and, if given, through ``callback(error, result)``
        where exactly one of the two arguments is set.  With a callback the
        future resolves to the result (or ``None`` on failure) instead of
        raising.
        """
        return self._get_executor().submit(self._run, fn, args, kwargs, callback)

    def fire_and_forget(self, fn: Callable[..., Any], *args, **kwargs) -> Future:
        """Run ``fn`` in the background; failures are logged, not returned."""
        future = self._get_executor().submit(fn, *args, **kwargs)
        future.add_done_callback(self._log_failure)
        return future

    def shutdown(self, wait: bool = True) -> None:
        with self._executor_lock:
            if self._executor is not None:
                self._executor.shutdown(wait=wait)
                self._executor = None

    # ------------------------------------------------------------------ #
    @staticmethod
    def _run(
        fn: Callable[..., Any],
        args: tuple,
        kwargs: dict,
        callback: Optional[ResultCallback],
    ) -> Any:
        try:
            result = fn(*args, **kwargs)
        except Exception as exc:
            if callback is None:
                raise
            callback(exc, None)
            return None
        if callback is not None:
            callback(None, result)
        return result

    def _log_failure(self, future: Future) -> None:
        if future.cancelled():
            return
        exc = future.exception()
        if exc is not None:
            self.logger.warning("Fire-and-forget call failed: %s", exc)

    def _get_executor(self) -> ThreadPoolExecutor:
        with self._executor_lock:
            if self._executor is None:
                self._executor = ThreadPoolExecutor(
                    max_workers=self.max_workers, thread_name_prefix="gengo"
                )
            return self._executor
