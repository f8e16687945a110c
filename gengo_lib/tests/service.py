from gengo_lib.data_models.jobs import JobsCreate

from gengo_lib.tests.base import BaseEndpointTest


class LanguagePairsTest(BaseEndpointTest):
    payload = {"lc_src": "pl"}

    def client_method(self):
        return self._client.service.language_pairs


class QuoteTest(BaseEndpointTest):
    payload = {
        "jobs": {
            "job_1": {
                "type": "text",
                "body_src": "Jesień przeplatała się kolorami pomarańczowymi z czerwienią!",
                "lc_src": "pl",
                "lc_tgt": "en",
                "tier": "standard",
            }
        }
    }
    payload_model = JobsCreate

    def client_method(self):
        return self._client.service.quote
