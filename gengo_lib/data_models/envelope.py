"""
Top-level structure of every Gengo API response body:
``{"opstat": "ok", "response": ...}`` or ``{"opstat": "error", "err": ...}``.
"""

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict

from gengo_lib.constants import OPSTAT_ERROR, OPSTAT_OK


class Envelope(BaseModel):
    model_config = ConfigDict(extra="allow")

    opstat: Optional[Any] = None
    response: Any = None
    err: Any = None

    @property
    def is_ok(self) -> bool:
        return self.opstat == OPSTAT_OK

    @property
    def is_error(self) -> bool:
        return self.opstat == OPSTAT_ERROR
