import logging
from typing import Any

from gengo_lib.constants import HttpMethods
from gengo_lib.core.dispatcher import RequestDispatcher
from gengo_lib.data_models.jobs import JobRef
from gengo_lib.services.service_interface import BaseResourceServiceInterface


class GlossaryListService(BaseResourceServiceInterface):
    method = HttpMethods.GET
    endpoint = "translate/glossary"


class GlossaryGetService(BaseResourceServiceInterface):
    method = HttpMethods.GET
    endpoint = "translate/glossary/{id}"
    model_cls = JobRef


class GlossaryResource:
    def __init__(self, dispatcher: RequestDispatcher, logger: logging.Logger):
        self.dispatcher = dispatcher
        self.logger = logger

    def list(self, data: Any = None) -> Any:
        return GlossaryListService(self.dispatcher, self.logger).call(data)

    def get(self, data: Any) -> Any:
        return GlossaryGetService(self.dispatcher, self.logger).call(data)
