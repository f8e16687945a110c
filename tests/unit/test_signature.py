"""Unit tests for request signing."""

import hashlib
import hmac

import pytest

from gengo_lib.auth.signature import SignatureProvider
from gengo_lib.data_models.auth import Credentials
from gengo_lib.exceptions import InvalidPayloadError


def expected_digest(private_key: str, ts: int) -> str:
    return hmac.new(private_key.encode(), str(ts).encode(), hashlib.sha1).hexdigest()


class TestCreate:
    def test_digest_is_hmac_sha1_of_timestamp(self):
        sig = SignatureProvider.create("pub", "priv", timestamp=1700000000)
        assert sig.timestamp == 1700000000
        assert sig.public_key == "pub"
        assert sig.digest == expected_digest("priv", 1700000000)
        assert len(sig.digest) == 40

    def test_deterministic(self):
        a = SignatureProvider.create("pub", "priv", timestamp=123)
        b = SignatureProvider.create("other-pub", "priv", timestamp=123)
        assert a.digest == b.digest

    def test_different_timestamps_differ(self):
        a = SignatureProvider.create("pub", "priv", timestamp=123)
        b = SignatureProvider.create("pub", "priv", timestamp=124)
        assert a.digest != b.digest

    def test_default_timestamp_is_whole_seconds(self, monkeypatch):
        monkeypatch.setattr("gengo_lib.auth.signature.time.time", lambda: 1700000000.9)
        sig = SignatureProvider.create("pub", "priv")
        assert sig.timestamp == 1700000000

    def test_wire_params(self):
        sig = SignatureProvider.create("pub", "priv", timestamp=5)
        assert sig.as_params() == {
            "ts": 5,
            "api_sig": expected_digest("priv", 5),
            "api_key": "pub",
        }


class TestProvider:
    def test_refresh_per_request_uses_current_time(self):
        ticks = iter([100, 200])
        provider = SignatureProvider(
            Credentials(public_key="pub", private_key="priv"),
            clock=lambda: next(ticks),
        )
        assert provider.current().timestamp == 100
        assert provider.current().timestamp == 200

    def test_fixed_signature_is_reused(self):
        ticks = iter([100, 200])
        provider = SignatureProvider(
            Credentials(public_key="pub", private_key="priv"),
            refresh_per_request=False,
            clock=lambda: next(ticks),
        )
        first = provider.current()
        assert provider.current() is first
        assert first.timestamp == 100

    def test_private_key_not_in_repr(self):
        creds = Credentials(public_key="pub", private_key="very-secret")
        assert "very-secret" not in repr(creds)

    @pytest.mark.parametrize("public_key,private_key", [("", "priv"), ("pub", "")])
    def test_empty_keys_rejected(self, public_key, private_key):
        with pytest.raises(InvalidPayloadError):
            SignatureProvider.from_keys(public_key, private_key)
