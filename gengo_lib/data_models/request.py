"""
Description of a single outbound HTTP request.

A :class:`RequestDescriptor` is built by the dispatcher for every call and
handed to :class:`~gengo_lib.utils.http.HttpRequester`; it is discarded once
the call completes.
"""

from typing import Any, Dict, Optional

from pydantic import BaseModel, Field


class RequestDescriptor(BaseModel):
    """
    Attributes
    ----------
    method : str
        HTTP method (``GET``, ``POST``, ``PUT`` or ``DELETE``).
    url : str
        Absolute URL of the endpoint.
    headers : Dict[str, str]
        Extra request headers.
    params : Optional[Dict[str, Any]]
        Query-string parameters (GET/DELETE).
    data : Optional[Dict[str, Any]]
        Form-encoded body fields (POST/PUT).
    timeout : int
        Timeout of the call in seconds.
    """

    method: str
    url: str
    headers: Dict[str, str] = Field(default_factory=dict)
    params: Optional[Dict[str, Any]] = None
    data: Optional[Dict[str, Any]] = None
    timeout: int
