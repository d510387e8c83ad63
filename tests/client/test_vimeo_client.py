"""
Vimeo Client Tests

Tests for VimeoClient.request():
- Path handling and request options
- Authorization and body encoding on the wire
- Response handling (success, HTTP errors, bad JSON, transport errors)
- Callback forwarding

To run these tests:
    pytest tests/client/test_vimeo_client.py -v
"""

import json

import pytest
import requests

from vimeo_api.client.vimeo_client import VimeoClient
from vimeo_api.constants import MISSING_PATH_MESSAGE
from vimeo_api.models.response import VimeoRequestError


class RecordingCallback:
    """Callable that records every call it receives"""

    def __init__(self):
        self.calls = []

    def __call__(self, *args):
        self.calls.append(args)

    @property
    def last(self):
        return self.calls[-1]


class FailingSession:
    """Session whose every request raises a transport error"""

    def request(self, *args, **kwargs):
        raise requests.ConnectionError("connection refused")


# =============================================================================
# REQUEST OPTIONS
# =============================================================================


class TestRequestOptions:
    """Options given to request() end up on the wire correctly"""

    @pytest.mark.unit
    def test_string_options_become_get(self, client, mock_session):
        client.request("/me")

        sent = mock_session.get_last_request()
        assert sent["method"] == "GET"
        assert sent["url"] == "https://api.vimeo.com/me"

    @pytest.mark.unit
    def test_leading_slash_is_added(self, client, mock_session):
        client.request("me/videos")

        assert mock_session.get_last_request()["path"] == "/me/videos"

    @pytest.mark.unit
    def test_missing_path_is_reported_to_callback(self, client, mock_session):
        callback = RecordingCallback()

        response = client.request({"method": "GET"}, callback)

        assert len(callback.calls) == 1
        error = callback.last[0]
        assert isinstance(error, ValueError)
        assert str(error) == MISSING_PATH_MESSAGE
        assert response.error is error
        assert mock_session.request_history == []

    @pytest.mark.unit
    def test_get_query_goes_into_url(self, client, mock_session):
        client.request({"path": "/me/videos", "query": {"page": 2}})

        sent = mock_session.get_last_request()
        assert sent["query"] == "page=2"
        assert sent["data"] is None

    @pytest.mark.unit
    def test_post_query_goes_into_json_body(self, client, mock_session):
        client.request(
            {"method": "POST", "path": "/me/videos", "query": {"name": "Clip"}}
        )

        sent = mock_session.get_last_request()
        assert json.loads(sent["data"]) == {"name": "Clip"}
        assert sent["headers"]["Content-Type"] == "application/json"
        assert sent["headers"]["Content-Length"] == str(len(sent["data"]))

    @pytest.mark.unit
    def test_none_options_are_reported_as_missing_path(self, client, mock_session):
        callback = RecordingCallback()

        response = client.request(None, callback)

        error = callback.last[0]
        assert isinstance(error, ValueError)
        assert str(error) == MISSING_PATH_MESSAGE
        assert response.error is error
        assert mock_session.request_history == []

    @pytest.mark.unit
    def test_client_hostname_is_used_by_default(self, mock_session, mock_uploader):
        client = VimeoClient(
            "id",
            "secret",
            "token",
            session=mock_session,
            uploader=mock_uploader,
            hostname="api.vimeo.test",
        )

        client.request("/me")

        assert mock_session.get_last_request()["url"] == "https://api.vimeo.test/me"

    @pytest.mark.unit
    def test_request_hostname_wins_over_client_hostname(self, mock_session, mock_uploader):
        client = VimeoClient(
            "id",
            "secret",
            "token",
            session=mock_session,
            uploader=mock_uploader,
            hostname="api.vimeo.test",
        )

        client.request({"path": "/me", "hostname": "localhost"})

        assert mock_session.get_last_request()["url"] == "https://localhost/me"

    @pytest.mark.unit
    def test_http_protocol_is_used_when_requested(self, client, mock_session):
        client.request({"path": "/me", "protocol": "http", "hostname": "localhost", "port": 8080})

        assert mock_session.get_last_request()["url"] == "http://localhost:8080/me"

    @pytest.mark.unit
    def test_bearer_token_is_sent(self, client, mock_session):
        client.request("/me")

        assert mock_session.get_last_request()["headers"]["Authorization"] == "Bearer token"

    @pytest.mark.unit
    def test_basic_auth_without_token(self, app_client, mock_session):
        app_client.request("/me")

        assert mock_session.get_last_request()["headers"]["Authorization"].startswith("Basic ")

    @pytest.mark.unit
    def test_set_access_token_switches_to_bearer(self, app_client, mock_session):
        app_client.set_access_token("new-token")
        app_client.request("/me")

        assert mock_session.get_last_request()["headers"]["Authorization"] == "Bearer new-token"


# =============================================================================
# RESPONSE HANDLING
# =============================================================================


class TestResponseHandling:
    """Responses are forwarded as (error, body, status, headers)"""

    @pytest.mark.unit
    def test_success_decodes_json(self, client, mock_session):
        mock_session.add_response("GET", "/me", 200, {"name": "Jane"})
        callback = RecordingCallback()

        response = client.request("/me", callback)

        error, body, status, headers = callback.last
        assert error is None
        assert body == {"name": "Jane"}
        assert status == 200
        assert headers["Content-Type"] == "application/json"
        assert response.ok
        assert response.as_tuple() == callback.last

    @pytest.mark.unit
    def test_empty_body_becomes_empty_dict(self, client, mock_session):
        mock_session.add_response("DELETE", "/videos/1", 204, "")

        response = client.request({"method": "DELETE", "path": "/videos/1"})

        assert response.error is None
        assert response.body == {}
        assert response.status == 204

    @pytest.mark.unit
    def test_http_error_wraps_raw_body(self, client, mock_session):
        mock_session.add_response("GET", "/videos/404", 404, {"error": "Not found"})
        callback = RecordingCallback()

        client.request("/videos/404", callback)

        error, body, status, headers = callback.last
        assert isinstance(error, VimeoRequestError)
        assert error.status_code == 404
        assert json.loads(str(error)) == {"error": "Not found"}
        assert body == '{"error": "Not found"}'
        assert status == 404

    @pytest.mark.unit
    def test_invalid_json_reports_decode_error(self, client, mock_session):
        mock_session.add_response("GET", "/me", 200, "not json")

        response = client.request("/me")

        assert isinstance(response.error, ValueError)
        assert response.body == "not json"
        assert response.status == 200

    @pytest.mark.unit
    def test_transport_error_is_forwarded(self):
        client = VimeoClient("id", "secret", "token", session=FailingSession())
        callback = RecordingCallback()

        response = client.request("/me", callback)

        error, body, status, headers = callback.last
        assert isinstance(error, requests.ConnectionError)
        assert body is None
        assert status is None
        assert headers is None
        assert response.error is error

    @pytest.mark.unit
    def test_raise_for_error(self, client, mock_session):
        mock_session.add_response("GET", "/me", 401, {"error": "Unauthorized"})

        with pytest.raises(VimeoRequestError):
            client.request("/me").raise_for_error()

    @pytest.mark.unit
    def test_request_without_callback_returns_response(self, client):
        response = client.request("/tutorial")

        assert response.ok
        assert response.body["message"] == "Success!"
