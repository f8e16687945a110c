"""
Single-job endpoints (``translate/job/{id}...``).

Every method accepts either the job id itself or a mapping / pydantic model
carrying an ``id`` field; the whole payload is sent along with the request.
"""

import logging
from typing import Any

from gengo_lib.constants import HttpMethods
from gengo_lib.core.dispatcher import RequestDispatcher
from gengo_lib.data_models.jobs import JobComment, JobRef, JobUpdate, RevisionRef
from gengo_lib.services.service_interface import BaseResourceServiceInterface


class JobGetService(BaseResourceServiceInterface):
    method = HttpMethods.GET
    endpoint = "translate/job/{id}"
    model_cls = JobRef


class JobUpdateService(BaseResourceServiceInterface):
    method = HttpMethods.PUT
    endpoint = "translate/job/{id}"
    model_cls = JobUpdate


class JobDeleteService(BaseResourceServiceInterface):
    method = HttpMethods.DELETE
    endpoint = "translate/job/{id}"
    model_cls = JobRef


class JobFeedbackService(BaseResourceServiceInterface):
    method = HttpMethods.GET
    endpoint = "translate/job/{id}/feedback"
    model_cls = JobRef


class JobRevisionsListService(BaseResourceServiceInterface):
    method = HttpMethods.GET
    endpoint = "translate/job/{id}/revisions"
    model_cls = JobRef


class JobRevisionGetService(BaseResourceServiceInterface):
    method = HttpMethods.GET
    endpoint = "translate/job/{id}/revision/{rev_id}"
    model_cls = RevisionRef


class JobCommentsGetService(BaseResourceServiceInterface):
    method = HttpMethods.GET
    endpoint = "translate/job/{id}/comments"
    model_cls = JobRef


class JobCommentCreateService(BaseResourceServiceInterface):
    method = HttpMethods.POST
    endpoint = "translate/job/{id}/comment"
    model_cls = JobComment


class _JobSubResource:
    def __init__(self, dispatcher: RequestDispatcher, logger: logging.Logger):
        self.dispatcher = dispatcher
        self.logger = logger


class JobRevisionsResource(_JobSubResource):
    def list(self, data: Any) -> Any:
        return JobRevisionsListService(self.dispatcher, self.logger).call(data)

    def get(self, data: Any) -> Any:
        """``data`` must carry both ``id`` and ``rev_id`` (or ``revId``)."""
        return JobRevisionGetService(self.dispatcher, self.logger).call(data)


class JobCommentsResource(_JobSubResource):
    def get(self, data: Any) -> Any:
        return JobCommentsGetService(self.dispatcher, self.logger).call(data)

    def create(self, data: Any) -> Any:
        return JobCommentCreateService(self.dispatcher, self.logger).call(data)


class JobResource(_JobSubResource):
    def __init__(self, dispatcher: RequestDispatcher, logger: logging.Logger):
        super().__init__(dispatcher, logger)
        self.revisions = JobRevisionsResource(dispatcher, logger)
        self.comments = JobCommentsResource(dispatcher, logger)

    def get(self, data: Any) -> Any:
        return JobGetService(self.dispatcher, self.logger).call(data)

    def update(self, data: Any) -> Any:
        return JobUpdateService(self.dispatcher, self.logger).call(data)

    def delete(self, data: Any) -> Any:
        return JobDeleteService(self.dispatcher, self.logger).call(data)

    def feedback(self, data: Any) -> Any:
        return JobFeedbackService(self.dispatcher, self.logger).call(data)
