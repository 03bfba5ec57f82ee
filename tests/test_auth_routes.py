from urllib.parse import parse_qs, urlparse

import pytest

from tubefetch.storage.token_store import TokenStore

from .conftest import FakeRetrievalService, RecordingFactory


@pytest.mark.parametrize("variant", ["library", "platform"])
def test_auth_redirects_to_consent_page(make_client, settings, variant):
    client = make_client(variant)

    resp = client.get("/auth", follow_redirects=False)

    assert resp.status_code == 302
    location = urlparse(resp.headers["location"])
    assert location.netloc == "accounts.google.com"
    query = parse_qs(location.query)
    assert query["state"] == ["state-token"]
    assert query["access_type"] == ["offline"]


def test_auth_without_client_config_is_server_error(make_client, settings):
    settings.GOOGLE_CLIENT_ID = ""
    client = make_client("library")
    assert client.get("/auth", follow_redirects=False).status_code == 500


def test_callback_without_code_is_bad_request(make_client, settings):
    client = make_client("library")

    resp = client.get("/oauth2callback", follow_redirects=False)

    assert resp.status_code == 400
    assert not settings.TOKEN_FILE.exists()


def test_callback_exchange_failure_is_server_error(make_client, settings):
    client = make_client("library", oauth_token=None)

    resp = client.get("/oauth2callback", params={"code": "bad"}, follow_redirects=False)

    assert resp.status_code == 500
    assert not settings.TOKEN_FILE.exists()


def test_callback_write_failure_is_server_error(make_client, settings, valid_token):
    settings.TOKEN_FILE = settings.DOWNLOAD_DIR.parent
    client = make_client("library", oauth_token=valid_token)

    resp = client.get("/oauth2callback", params={"code": "4/code"}, follow_redirects=False)

    assert resp.status_code == 500


def test_callback_persists_token_and_redirects(make_client, settings, valid_token):
    client = make_client("library", oauth_token=valid_token)

    resp = client.get("/oauth2callback", params={"code": "4/code", "state": "anything"}, follow_redirects=False)

    assert resp.status_code == 302
    assert resp.headers["location"] == "/download"
    assert TokenStore(settings.TOKEN_FILE).load() == valid_token


def test_token_written_by_callback_is_used_by_download(make_client, settings, valid_token, sample_video):
    factory = RecordingFactory(FakeRetrievalService(sample_video, [b"bytes"]))
    client = make_client("library", factory=factory, oauth_token=valid_token)

    client.get("/oauth2callback", params={"code": "4/code"}, follow_redirects=False)
    resp = client.post("/download", json={"url": "https://youtu.be/abc123"})

    assert resp.status_code == 200
    credentials = factory.credentials[0]
    assert credentials.token == valid_token.access_token
    assert credentials.refresh_token == valid_token.refresh_token
    assert credentials.expiry == valid_token.expiry
