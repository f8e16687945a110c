"""
Job collection endpoints (``translate/jobs``).
"""

import logging
from typing import Any, List, Union

from gengo_lib.constants import HttpMethods
from gengo_lib.core.dispatcher import RequestDispatcher
from gengo_lib.data_models.jobs import JobsCreate, JobsQuery
from gengo_lib.services.service_interface import BaseResourceServiceInterface


class JobsCreateService(BaseResourceServiceInterface):
    method = HttpMethods.POST
    endpoint = "translate/jobs"
    model_cls = JobsCreate


class JobsListService(BaseResourceServiceInterface):
    method = HttpMethods.GET
    endpoint = "translate/jobs"
    model_cls = JobsQuery


class JobsGetService(BaseResourceServiceInterface):
    method = HttpMethods.GET
    endpoint = "translate/jobs/"


class JobsBatchGetService(BaseResourceServiceInterface):
    """
    Fetch several jobs at once.  The ids are comma-joined into the path
    (``translate/jobs/1,2,3``) and no payload is sent.
    """

    method = HttpMethods.GET
    endpoint = "translate/jobs/{id}"

    def call(self, payload: Any = None) -> Any:
        ids = ",".join(str(job_id) for job_id in payload)
        return self.dispatcher.send(self.method, self.endpoint.format(id=ids))


class JobsResource:
    def __init__(self, dispatcher: RequestDispatcher, logger: logging.Logger):
        self.dispatcher = dispatcher
        self.logger = logger

    def create(self, data: Any) -> Any:
        return JobsCreateService(self.dispatcher, self.logger).call(data)

    def list(self, data: Any = None) -> Any:
        return JobsListService(self.dispatcher, self.logger).call(data)

    def get(self, data: Union[List[Any], Any]) -> Any:
        if isinstance(data, (list, tuple)):
            return JobsBatchGetService(self.dispatcher, self.logger).call(data)
        return JobsGetService(self.dispatcher, self.logger).call(data)
