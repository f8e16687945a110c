"""
Per-client configuration.

A :class:`ClientConfig` is created once per client and never changes
afterwards.  The environment selector (sandbox vs. production) is resolved
to one of the two fixed endpoint strings from :mod:`gengo_lib.constants`.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from gengo_lib.constants import (
    ENVIRONMENT_URLS,
    Environments,
    MAX_WORKERS,
    REQUEST_TIMEOUT,
)


class ClientConfig(BaseModel):
    """
    Immutable settings of a single :class:`~gengo_lib.client.GengoClient`.

    Attributes
    ----------
    base_url : str
        Root URL of the API, e.g. ``"https://api.gengo.com/v2/"``.
    timeout : int
        Per-request timeout in seconds.
    refresh_signature : bool
        When ``True`` a fresh signature (with the current timestamp) is
        computed for every request; when ``False`` the signature created at
        client construction is reused for the client's lifetime.
    max_workers : int
        Size of the thread pool used for asynchronous submissions.
    """

    model_config = ConfigDict(frozen=True)

    base_url: str
    timeout: int = Field(default=REQUEST_TIMEOUT, gt=0)
    refresh_signature: bool = True
    max_workers: int = Field(default=MAX_WORKERS, gt=0)

    @classmethod
    def for_environment(
        cls,
        sandbox: bool = False,
        timeout: Optional[int] = None,
        refresh_signature: bool = True,
        max_workers: Optional[int] = None,
    ) -> "ClientConfig":
        env = Environments.SANDBOX if sandbox else Environments.PRODUCTION
        return cls(
            base_url=ENVIRONMENT_URLS[env],
            timeout=REQUEST_TIMEOUT if timeout is None else timeout,
            refresh_signature=refresh_signature,
            max_workers=MAX_WORKERS if max_workers is None else max_workers,
        )

    @property
    def is_sandbox(self) -> bool:
        return self.base_url == ENVIRONMENT_URLS[Environments.SANDBOX]
