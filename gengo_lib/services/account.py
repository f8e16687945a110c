"""
Account endpoints: usage statistics, balance and preferred translators.
"""

import logging
from typing import Any

from gengo_lib.constants import HttpMethods
from gengo_lib.core.dispatcher import RequestDispatcher
from gengo_lib.services.service_interface import BaseResourceServiceInterface


class AccountStatsService(BaseResourceServiceInterface):
    method = HttpMethods.GET
    endpoint = "account/stats"


class AccountBalanceService(BaseResourceServiceInterface):
    method = HttpMethods.GET
    endpoint = "account/balance"


class PreferredTranslatorsService(BaseResourceServiceInterface):
    method = HttpMethods.GET
    endpoint = "account/preferred_translators"


class AccountResource:
    def __init__(self, dispatcher: RequestDispatcher, logger: logging.Logger):
        self.dispatcher = dispatcher
        self.logger = logger

    def stats(self) -> Any:
        return AccountStatsService(self.dispatcher, self.logger).call()

    def balance(self) -> Any:
        return AccountBalanceService(self.dispatcher, self.logger).call()

    def preferred_translators(self) -> Any:
        return PreferredTranslatorsService(self.dispatcher, self.logger).call()
