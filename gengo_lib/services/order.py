import logging
from typing import Any

from gengo_lib.constants import HttpMethods
from gengo_lib.core.dispatcher import RequestDispatcher
from gengo_lib.data_models.jobs import JobRef
from gengo_lib.services.service_interface import BaseResourceServiceInterface


class OrderGetService(BaseResourceServiceInterface):
    method = HttpMethods.GET
    endpoint = "translate/order/{id}"
    model_cls = JobRef


class OrderDeleteService(BaseResourceServiceInterface):
    method = HttpMethods.DELETE
    endpoint = "translate/order/{id}"
    model_cls = JobRef


class OrderResource:
    def __init__(self, dispatcher: RequestDispatcher, logger: logging.Logger):
        self.dispatcher = dispatcher
        self.logger = logger

    def get(self, data: Any) -> Any:
        return OrderGetService(self.dispatcher, self.logger).call(data)

    def delete(self, data: Any) -> Any:
        return OrderDeleteService(self.dispatcher, self.logger).call(data)
