"""Unit tests for request construction and dispatch."""

import json
import threading
from datetime import date
from unittest.mock import Mock
from urllib.parse import parse_qs, urlsplit

import pytest
import requests

from gengo_lib.core.dispatcher import coerce_payload
from gengo_lib.data_models.jobs import JobsQuery
from gengo_lib.exceptions import (
    ApiError,
    InvalidPayloadError,
    ResponseParseError,
    TransportError,
)
from tests.conftest import FIXED_TS, PUBLIC_KEY, make_response


def signature_fields(client):
    return client.signer.current().as_params()


class TestCoercePayload:
    @pytest.mark.parametrize("value", [42, "42", 4.2])
    def test_scalar_becomes_id(self, value):
        assert coerce_payload(value) == {"id": value}

    def test_none_is_empty(self):
        assert coerce_payload(None) == {}

    def test_mapping_is_copied(self):
        payload = {"a": 1}
        coerced = coerce_payload(payload)
        assert coerced == payload
        assert coerced is not payload

    def test_model_is_dumped_without_unset_fields(self):
        assert coerce_payload(JobsQuery(status="approved")) == {"status": "approved"}

    @pytest.mark.parametrize("value", [True, [1, 2], object()])
    def test_unsupported_payload(self, value):
        with pytest.raises(InvalidPayloadError):
            coerce_payload(value)


class TestBuildRequest:
    def test_get_puts_payload_and_signature_in_query(self, gengo_client):
        request = gengo_client.dispatcher.build_request(
            "GET", "translate/jobs", {"timestampAfter": 10}
        )
        assert request.method == "GET"
        assert request.url == "http://api.sandbox.gengo.com/v2/translate/jobs"
        assert request.data is None
        assert request.params == {"timestamp_after": 10, **signature_fields(gengo_client)}
        assert request.params["ts"] == FIXED_TS
        assert request.params["api_key"] == PUBLIC_KEY

    def test_delete_uses_query_string(self, gengo_client):
        request = gengo_client.dispatcher.build_request("delete", "translate/job/1", 1)
        assert request.method == "DELETE"
        assert request.params["id"] == 1
        assert request.data is None

    @pytest.mark.parametrize("method", ["POST", "PUT"])
    def test_body_methods_json_encode_payload_under_data(self, gengo_client, method):
        request = gengo_client.dispatcher.build_request(
            method, "translate/jobs", {"jobs": {"jobOne": {"bodySrc": "hi"}}}
        )
        assert request.params is None
        assert set(request.data) == {"data", "ts", "api_sig", "api_key"}
        assert json.loads(request.data["data"]) == {
            "jobs": {"job_one": {"body_src": "hi"}}
        }
        assert "api_sig" not in json.loads(request.data["data"])

    def test_accept_header_and_timeout(self, gengo_client):
        request = gengo_client.dispatcher.build_request("GET", "account/stats")
        assert request.headers == {"Accept": "application/json"}
        assert request.timeout == 300

    def test_caller_payload_is_not_mutated(self, gengo_client):
        payload = {"revId": 1}
        gengo_client.dispatcher.build_request("GET", "x", payload)
        assert payload == {"revId": 1}

    def test_nested_query_values_use_bracket_keys(self, gengo_client):
        request = gengo_client.dispatcher.build_request(
            "GET",
            "translate/jobs",
            {"filter": {"lcSrc": "en"}, "jobIds": [1, 2], "flag": True, "off": False},
        )
        params = request.params
        assert params["filter[lc_src]"] == "en"
        assert params["job_ids[0]"] == 1
        assert params["job_ids[1]"] == 2
        assert params["flag"] == "true"
        assert params["off"] == "false"
        assert "filter" not in params

    def test_nested_query_values_reach_the_wire(self, gengo_client):
        request = gengo_client.dispatcher.build_request(
            "DELETE", "translate/job/1", {"filter": {"lcSrc": "en"}, "flag": True}
        )
        prepared = requests.Request("DELETE", request.url, params=request.params).prepare()
        query = parse_qs(urlsplit(prepared.url).query)
        assert query["filter[lc_src]"] == ["en"]
        assert query["flag"] == ["true"]
        assert query["api_key"] == [PUBLIC_KEY]

    def test_unencodable_body_payload(self, gengo_client):
        with pytest.raises(InvalidPayloadError) as exc_info:
            gengo_client.dispatcher.build_request(
                "POST", "translate/jobs", {"jobs": {"j": {"when": date(2024, 1, 1)}}}
            )
        assert exc_info.value.payload == {"jobs": {"j": {"when": date(2024, 1, 1)}}}


class TestSend:
    def test_single_request_with_normalized_result(self, gengo_client, transport):
        result = gengo_client.dispatcher.send("GET", "account/stats")
        assert result == {"id": 42}
        transport.assert_called_once()
        args, kwargs = transport.call_args
        assert args == ("GET", "http://api.sandbox.gengo.com/v2/account/stats")
        assert kwargs["timeout"] == 300
        assert kwargs["headers"] == {"Accept": "application/json"}

    def test_transport_exception_becomes_transport_error(self, gengo_client, transport):
        transport.side_effect = requests.Timeout("timed out")
        with pytest.raises(TransportError) as exc_info:
            gengo_client.dispatcher.send("GET", "account/stats")
        assert isinstance(exc_info.value.error, requests.Timeout)
        assert transport.call_count == 1

    def test_http_500_is_not_retried(self, gengo_client, transport):
        transport.return_value = make_response(500, "oops")
        with pytest.raises(TransportError):
            gengo_client.dispatcher.send("POST", "translate/jobs", {})
        assert transport.call_count == 1

    def test_method_caller(self, gengo_client, transport):
        send_get = gengo_client.dispatcher.method_caller("GET")
        assert send_get("account/balance") == {"id": 42}
        assert transport.call_args.args[0] == "GET"


class TestSubmit:
    def test_future_resolves_to_result(self, gengo_client, transport):
        future = gengo_client.submit(gengo_client.account.stats)
        assert future.result(timeout=5) == {"id": 42}

    def test_callback_receives_result(self, gengo_client, transport):
        callback = Mock()
        future = gengo_client.submit(gengo_client.job.get, 42, callback=callback)
        assert future.result(timeout=5) == {"id": 42}
        callback.assert_called_once_with(None, {"id": 42})

    def test_callback_receives_error(self, gengo_client, transport):
        transport.return_value = make_response(
            200, {"opstat": "error", "err": "bad job id"}
        )
        callback = Mock()
        future = gengo_client.submit(gengo_client.job.get, 42, callback=callback)
        assert future.result(timeout=5) is None
        callback.assert_called_once()
        error, result = callback.call_args.args
        assert isinstance(error, ApiError)
        assert error.payload == "bad job id"
        assert result is None

    def test_future_raises_without_callback(self, gengo_client, transport):
        transport.return_value = make_response(200, "not json")
        future = gengo_client.submit(gengo_client.account.balance)
        with pytest.raises(ResponseParseError):
            future.result(timeout=5)

    def test_submit_returns_before_request_completes(self, gengo_client, transport):
        release = threading.Event()

        def slow_request(*args, **kwargs):
            release.wait(timeout=5)
            return make_response(200, {"opstat": "ok", "response": "late"})

        transport.side_effect = slow_request
        future = gengo_client.submit(gengo_client.account.stats)
        assert not future.done()
        release.set()
        assert future.result(timeout=5) == "late"

    def test_fire_and_forget_logs_failures(self, gengo_client, transport, caplog):
        transport.return_value = make_response(500, "oops")
        future = gengo_client.fire_and_forget(gengo_client.account.stats)
        with pytest.raises(TransportError):
            future.result(timeout=5)
        gengo_client.dispatcher.shutdown()
        assert "Fire-and-forget call failed" in caplog.text

    def test_unencodable_payload_reaches_callback(self, gengo_client, transport):
        callback = Mock()
        future = gengo_client.submit(
            gengo_client.jobs.create,
            {"jobs": {"j": {"when": date(2024, 1, 1)}}},
            callback=callback,
        )
        assert future.result(timeout=5) is None
        callback.assert_called_once()
        error, result = callback.call_args.args
        assert isinstance(error, InvalidPayloadError)
        assert result is None
        transport.assert_not_called()

    def test_any_exception_reaches_callback(self, gengo_client):
        def broken():
            raise RuntimeError("boom")

        callback = Mock()
        future = gengo_client.submit(broken, callback=callback)
        assert future.result(timeout=5) is None
        error, result = callback.call_args.args
        assert isinstance(error, RuntimeError)
        assert result is None
        assert callback.call_count == 1
