import logging
from concurrent.futures import Future
from typing import Any, Callable, Optional

from gengo_lib.auth.signature import SignatureProvider
from gengo_lib.config import ClientConfig
from gengo_lib.core.dispatcher import RequestDispatcher, ResultCallback
from gengo_lib.services.account import AccountResource
from gengo_lib.services.glossary import GlossaryResource
from gengo_lib.services.job import JobResource
from gengo_lib.services.jobs import JobsResource
from gengo_lib.services.order import OrderResource
from gengo_lib.services.service import ServiceResource
from gengo_lib.utils.http import HttpRequester


class GengoClient:
    """
    Entry point of the library.

    The client groups the API endpoints into resources (``account``, ``job``,
    ``jobs``, ``order``, ``glossary``, ``service``).  Every resource method
    sends one signed request and returns the ``response`` part of the
    envelope, raising a :class:`~gengo_lib.exceptions.GengoError` on failure.

    Parameters
    ----------
    public_key, private_key : str
        Credential pair of the account, used for the lifetime of the client.
    sandbox : bool, default ``False``
        Talk to the sandbox instead of the production API.
    timeout : Optional[int]
        Per-request timeout in seconds (``GENGO_TIMEOUT`` / 300 by default).
    refresh_signature : bool, default ``True``
        Sign every request with the current timestamp.  ``False`` reuses the
        signature created at construction time for all requests.
    config : Optional[ClientConfig]
        Complete configuration; overrides ``sandbox``, ``timeout`` and
        ``refresh_signature``.
    """

    def __init__(
        self,
        public_key: str,
        private_key: str,
        sandbox: bool = False,
        timeout: Optional[int] = None,
        refresh_signature: bool = True,
        config: Optional[ClientConfig] = None,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        self.config = config or ClientConfig.for_environment(
            sandbox=sandbox, timeout=timeout, refresh_signature=refresh_signature
        )
        self.logger = logger or logging.getLogger(__name__)

        self.signer = SignatureProvider.from_keys(
            public_key,
            private_key,
            refresh_per_request=self.config.refresh_signature,
        )
        self.http = HttpRequester(
            base_url=self.config.base_url,
            timeout=self.config.timeout,
            logger=self.logger,
        )
        self.dispatcher = RequestDispatcher(
            http=self.http,
            signer=self.signer,
            logger=self.logger,
            max_workers=self.config.max_workers,
        )

        self.account = AccountResource(self.dispatcher, self.logger)
        self.job = JobResource(self.dispatcher, self.logger)
        self.jobs = JobsResource(self.dispatcher, self.logger)
        self.order = OrderResource(self.dispatcher, self.logger)
        self.glossary = GlossaryResource(self.dispatcher, self.logger)
        self.service = ServiceResource(self.dispatcher, self.logger)

    # ------------------------------------------------------------------ #
    def submit(
        self,
        fn: Callable[..., Any],
        *args,
        callback: Optional[ResultCallback] = None,
        **kwargs,
    ) -> Future:
        """
        Run a resource method in the background, e.g.
        ``client.submit(client.job.get, 42, callback=on_job)``.
        """
        return self.dispatcher.submit(fn, *args, callback=callback, **kwargs)

    def fire_and_forget(self, fn: Callable[..., Any], *args, **kwargs) -> Future:
        """Run a resource method in the background and only log failures."""
        return self.dispatcher.fire_and_forget(fn, *args, **kwargs)

    # ------------------------------------------------------------------ #
    def close(self) -> None:
        self.dispatcher.shutdown()
        self.http.close()

    def __enter__(self) -> "GengoClient":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()


def client(public_key: str, private_key: str, sandbox: bool = False) -> GengoClient:
    return GengoClient(public_key, private_key, sandbox=sandbox)
