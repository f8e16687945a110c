"""
Base class of the endpoint wrappers.

Each endpoint of the Gengo API is described by a tiny subclass of
:class:`BaseResourceServiceInterface` that fixes the HTTP ``method`` and the
``endpoint`` path template.  The template may reference ``{id}`` and
``{rev_id}``, which are filled in from the payload before the request is
handed to the :class:`~gengo_lib.core.dispatcher.RequestDispatcher`.
"""

import abc
import logging
from typing import Any, Mapping, Type

from pydantic import BaseModel

from gengo_lib.core.dispatcher import RequestDispatcher, coerce_payload
from gengo_lib.exceptions import InvalidPayloadError


def get_id(data: Any) -> Any:
    """Return ``data["id"]`` for mappings and models, ``data`` otherwise."""
    if isinstance(data, BaseModel):
        return getattr(data, "id", None)
    if isinstance(data, Mapping):
        return data.get("id")
    return data


class BaseResourceServiceInterface(abc.ABC):
    """
    Abstract base class for endpoint wrappers.

    Sub-classes must set ``method`` and ``endpoint``; ``model_cls`` optionally
    names the pydantic model that documents the payload of the endpoint.
    """

    # HTTP method of the endpoint
    method: str = ""

    # Path template relative to the API base URL
    endpoint: str = ""

    # Pydantic model class describing the request payload.
    model_cls: Type[BaseModel] = None

    def __init__(self, dispatcher: RequestDispatcher, logger: logging.Logger):
        self.dispatcher = dispatcher
        self.logger = logger

    def path(self, payload: Any) -> str:
        """Fill the endpoint template with the identifiers from ``payload``."""
        if "{" not in self.endpoint:
            return self.endpoint

        fields = {"id": get_id(payload)}
        if "{rev_id}" in self.endpoint:
            data = coerce_payload(payload)
            fields["rev_id"] = data.get("rev_id", data.get("revId"))

        missing = [name for name, value in fields.items() if value is None]
        if missing:
            raise InvalidPayloadError(
                f"{self.endpoint} requires {', '.join(missing)}", payload=payload
            )
        return self.endpoint.format(**fields)

    def call(self, payload: Any = None) -> Any:
        """Send the request and return the normalized result."""
        return self.dispatcher.send(self.method, self.path(payload), payload)
