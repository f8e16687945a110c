"""
Request signing.

The Gengo API authenticates a call by three fields: the public key, the
current unix timestamp and an HMAC-SHA1 of that timestamp keyed by the
private key.  :class:`SignatureProvider` produces these fields for the
dispatcher.
"""

import hashlib
import hmac
import logging
import time
from typing import Callable, Optional

from pydantic import ValidationError

from gengo_lib.data_models.auth import ApiSignature, Credentials
from gengo_lib.exceptions import InvalidPayloadError


class SignatureProvider:
    """
    Holds the credential pair of a client and hands out signatures.

    Parameters
    ----------
    credentials : Credentials
        Key pair used for signing; read-only for the provider's lifetime.
    refresh_per_request : bool, default ``True``
        ``True`` computes a new signature (current timestamp) on every
        :meth:`current` call.  ``False`` creates one signature up front and
        returns it unchanged forever.
    clock : Callable[[], float]
        Source of the current unix time, ``time.time`` by default.
    """

    def __init__(
        self,
        credentials: Credentials,
        refresh_per_request: bool = True,
        clock: Callable[[], float] = time.time,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        self.credentials = credentials
        self.refresh_per_request = refresh_per_request
        self.clock = clock
        self.logger = logger or logging.getLogger(__name__)

        self._signature: Optional[ApiSignature] = None
        if not refresh_per_request:
            self._signature = self._sign()

    @classmethod
    def from_keys(
        cls, public_key: str, private_key: str, refresh_per_request: bool = True
    ) -> "SignatureProvider":
        try:
            credentials = Credentials(public_key=public_key, private_key=private_key)
        except ValidationError as exc:
            raise InvalidPayloadError(
                "Both public and private key must be non-empty strings"
            ) from exc
        return cls(credentials, refresh_per_request=refresh_per_request)

    @staticmethod
    def create(
        public_key: str, private_key: str, timestamp: Optional[int] = None
    ) -> ApiSignature:
        """
        Build a signature for ``timestamp`` (current time when omitted).

        The digest depends on ``private_key`` and ``timestamp`` only.
        """
        ts = int(time.time()) if timestamp is None else int(timestamp)
        digest = hmac.new(
            private_key.encode("utf-8"), str(ts).encode("ascii"), hashlib.sha1
        ).hexdigest()
        return ApiSignature(timestamp=ts, digest=digest, public_key=public_key)

    def current(self) -> ApiSignature:
        if self._signature is not None:
            return self._signature
        return self._sign()

    def _sign(self) -> ApiSignature:
        signature = self.create(
            self.credentials.public_key,
            self.credentials.private_key,
            timestamp=int(self.clock()),
        )
        self.logger.debug("Created API signature for ts=%s", signature.timestamp)
        return signature
