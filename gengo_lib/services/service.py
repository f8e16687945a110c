"""
Service information endpoints: supported languages, language pairs and
price quotes.
"""

import logging
from typing import Any

from gengo_lib.constants import HttpMethods
from gengo_lib.core.dispatcher import RequestDispatcher
from gengo_lib.data_models.jobs import JobsCreate
from gengo_lib.services.service_interface import BaseResourceServiceInterface


class LanguagePairsService(BaseResourceServiceInterface):
    method = HttpMethods.GET
    endpoint = "translate/service/language_pairs"


class LanguagesService(BaseResourceServiceInterface):
    method = HttpMethods.GET
    endpoint = "translate/service/languages"


class QuoteService(BaseResourceServiceInterface):
    """
    Price quote for a set of jobs.  Text jobs and file jobs share the
    endpoint; the job definitions decide which quote is computed.
    """

    method = HttpMethods.POST
    endpoint = "translate/service/quote"
    model_cls = JobsCreate


class ServiceResource:
    def __init__(self, dispatcher: RequestDispatcher, logger: logging.Logger):
        self.dispatcher = dispatcher
        self.logger = logger

    def language_pairs(self, data: Any = None) -> Any:
        return LanguagePairsService(self.dispatcher, self.logger).call(data)

    def languages(self, data: Any = None) -> Any:
        return LanguagesService(self.dispatcher, self.logger).call(data)

    def quote(self, data: Any) -> Any:
        return QuoteService(self.dispatcher, self.logger).call(data)

    def quote_files(self, data: Any) -> Any:
        return QuoteService(self.dispatcher, self.logger).call(data)
