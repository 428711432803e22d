import pytest

from yelp_api_client import Credentials
from yelp_api_client import credentials as credentials_module


@pytest.fixture
def frozen_time(monkeypatch):
    now = {"value": 1_000_000.0}
    monkeypatch.setattr(credentials_module.time, "time", lambda: now["value"])
    return now


def test_empty_token_is_invalid_regardless_of_expiry(frozen_time):
    creds = Credentials(client_id="cid", client_secret="secret", expiry=frozen_time["value"] + 3600)
    assert creds.access_token == ""
    assert not creds.is_valid()


def test_token_with_past_expiry_is_invalid(frozen_time):
    creds = Credentials(client_id="cid", client_secret="secret")
    creds.access_token = "T"
    creds.expiry = frozen_time["value"] - 1
    assert not creds.is_valid()


def test_token_expiring_now_is_invalid(frozen_time):
    creds = Credentials(client_id="cid", client_secret="secret")
    creds.access_token = "T"
    creds.expiry = frozen_time["value"]
    assert not creds.is_valid()


def test_token_with_future_expiry_is_valid(frozen_time):
    creds = Credentials(client_id="cid", client_secret="secret")
    creds.access_token = "T"
    creds.expiry = frozen_time["value"] + 1
    assert creds.is_valid()


def test_url_values():
    creds = Credentials(client_id="cid", client_secret="secret")
    assert creds.url_values() == {
        "grant_type": "client_credentials",
        "client_id": "cid",
        "client_secret": "secret",
    }


def test_api_key_is_always_valid():
    creds = Credentials(api_key="KEY")
    assert creds.uses_api_key
    assert creds.access_token == "KEY"
    assert creds.is_valid()


@pytest.mark.parametrize(
    "kwargs",
    [{}, {"client_id": "cid"}, {"client_secret": "secret"}],
)
def test_missing_client_credentials_rejected(kwargs):
    with pytest.raises(ValueError):
        Credentials(**kwargs)


def test_secrets_not_in_repr():
    creds = Credentials(client_id="cid", client_secret="s3cr3t")
    creds.access_token = "sensitive-token"
    text = repr(creds)
    assert "s3cr3t" not in text
    assert "sensitive-token" not in text
    assert "cid" in text
