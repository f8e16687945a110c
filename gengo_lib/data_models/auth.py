"""
Authentication models: the credential pair of a client and the signature
derived from it.
"""

from typing import Dict, Union

from pydantic import BaseModel, ConfigDict, Field


class Credentials(BaseModel):
    """
    Public/private key pair of a Gengo account.

    Held in memory only; the private key is excluded from ``repr`` so it
    does not leak into logs or tracebacks.
    """

    model_config = ConfigDict(frozen=True)

    public_key: str = Field(min_length=1)
    private_key: str = Field(min_length=1, repr=False)


class ApiSignature(BaseModel):
    """
    Authentication fields sent with every API call.

    Attributes
    ----------
    timestamp : int
        Unix time (whole seconds) the signature was created at; sent as
        ``ts``.
    digest : str
        Hex-encoded HMAC-SHA1 of ``str(timestamp)`` keyed by the private key;
        sent as ``api_sig``.
    public_key : str
        Public key of the account; sent as ``api_key``.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    timestamp: int = Field(alias="ts")
    digest: str = Field(alias="api_sig")
    public_key: str = Field(alias="api_key")

    def as_params(self) -> Dict[str, Union[int, str]]:
        return self.model_dump(by_alias=True)
