"""
Vimeo Upload Tests

Tests for VimeoClient.upload() / replace():
- Missing files reported through on_error
- Upload ticket request always asks for tus with the real size
- Ticket failures reported through on_error
- Resumable transfer invoked with the ticket's upload link

To run these tests:
    pytest tests/client/test_vimeo_upload.py -v
"""

import io
import json

import pytest

from vimeo_api.constants import FILE_NOT_FOUND_MESSAGE, UploadStatus
from vimeo_api.implementations.mock_uploader import MockUploader
from vimeo_api.interfaces.uploader_interface import UploaderError

STREAM_BYTES = b"0123456789" * 100


class Recorder:
    """Callable that records every call it receives"""

    def __init__(self, result=None):
        self.result = result
        self.calls = []

    def __call__(self, *args):
        self.calls.append(args)
        if self.result is not None and len(args) == 2 and callable(args[1]):
            args[1](*self.result)


class FailingUploader(MockUploader):
    def upload(self, source, file_size, upload_link, on_progress=None):
        raise UploaderError("chunk failed", status=UploadStatus.NETWORK_ERROR)


@pytest.fixture
def callbacks():
    return Recorder(), Recorder(), Recorder()


# =============================================================================
# FILE HANDLING
# =============================================================================


class TestUploadFile:
    @pytest.mark.unit
    def test_missing_file_calls_error_callback(self, client, callbacks, monkeypatch):
        on_complete, on_progress, on_error = callbacks
        fake_request = Recorder()
        monkeypatch.setattr(client, "request", fake_request)

        client.upload("/real/file", {}, on_complete, on_progress, on_error)

        assert on_error.calls == [(FILE_NOT_FOUND_MESSAGE,)]
        assert fake_request.calls == []
        assert on_complete.calls == []

    @pytest.mark.unit
    def test_stream_is_sized_from_start_to_end(self, client, monkeypatch):
        fake_request = Recorder()
        monkeypatch.setattr(client, "request", fake_request)
        stream = io.BytesIO(STREAM_BYTES)
        stream.seek(100)

        client.upload(stream, {})

        options = fake_request.calls[0][0]
        assert options["query"]["upload"]["size"] == len(STREAM_BYTES)
        assert stream.tell() == 100


# =============================================================================
# UPLOAD TICKET
# =============================================================================


class TestUploadTicket:
    @pytest.mark.unit
    def test_uses_tus_when_approach_not_specified(self, client, temp_video_file, monkeypatch):
        fake_request = Recorder()
        monkeypatch.setattr(client, "request", fake_request)

        client.upload(temp_video_file, {})

        assert len(fake_request.calls) == 1
        assert fake_request.calls[0][0]["query"]["upload"]["approach"] == "tus"

    @pytest.mark.unit
    def test_uses_tus_when_approach_is_not_tus(self, client, temp_video_file, video_size, monkeypatch):
        fake_request = Recorder()
        monkeypatch.setattr(client, "request", fake_request)

        client.upload(temp_video_file, {"upload": {"approach": "not-tus", "size": 1}})

        upload = fake_request.calls[0][0]["query"]["upload"]
        assert upload == {"approach": "tus", "size": video_size}

    @pytest.mark.unit
    def test_request_called_with_expected_parameters(
        self, client, temp_video_file, video_size, monkeypatch
    ):
        fake_request = Recorder()
        monkeypatch.setattr(client, "request", fake_request)

        client.upload(temp_video_file, {})

        assert fake_request.calls[0][0] == {
            "method": "POST",
            "path": "/me/videos?fields=uri,name,upload",
            "query": {"upload": {"approach": "tus", "size": video_size}},
        }

    @pytest.mark.unit
    def test_caller_params_are_not_mutated(self, client, temp_video_file, monkeypatch):
        monkeypatch.setattr(client, "request", Recorder())
        params = {"name": "Clip", "upload": {"approach": "pull"}}

        client.upload(temp_video_file, params)

        assert params == {"name": "Clip", "upload": {"approach": "pull"}}

    @pytest.mark.unit
    def test_request_error_calls_error_callback(self, client, temp_video_file, callbacks, monkeypatch):
        on_complete, on_progress, on_error = callbacks
        monkeypatch.setattr(client, "request", Recorder(("Request Error", None, None, None)))

        client.upload(temp_video_file, {}, on_complete, on_progress, on_error)

        assert len(on_error.calls) == 1
        assert "Request Error" in on_error.calls[0][0]
        assert on_error.calls[0][0].startswith("Unable to initiate an upload.")
        assert on_complete.calls == []

    @pytest.mark.unit
    def test_calls_perform_tus_upload_with_expected_parameters(
        self, client, temp_video_file, video_size, callbacks, monkeypatch
    ):
        on_complete, on_progress, on_error = callbacks
        monkeypatch.setattr(client, "request", Recorder((None, {}, 200, {})))
        fake_tus = Recorder()
        monkeypatch.setattr(client, "_perform_tus_upload", fake_tus)

        client.upload(temp_video_file, {}, on_complete, on_progress, on_error)

        assert fake_tus.calls == [
            (temp_video_file, video_size, {}, on_complete, on_progress, on_error),
        ]


# =============================================================================
# FULL FLOW (mock session + mock uploader)
# =============================================================================


class TestUploadFlow:
    @pytest.mark.unit
    def test_upload_completes_with_video_uri(
        self, client, mock_session, mock_uploader, temp_video_file, video_size, callbacks
    ):
        on_complete, on_progress, on_error = callbacks

        client.upload(temp_video_file, {"name": "Clip"}, on_complete, on_progress, on_error)

        assert on_error.calls == []
        assert len(on_complete.calls) == 1
        assert on_complete.calls[0][0].startswith("/videos/")

        ticket = json.loads(mock_session.get_last_request()["data"])
        assert ticket["name"] == "Clip"
        assert ticket["upload"] == {"approach": "tus", "size": video_size}

        last_upload = mock_uploader.get_last_upload()
        assert last_upload["upload_link"].startswith("https://files.tus.mock/upload/")
        assert last_upload["file_size"] == video_size

    @pytest.mark.unit
    def test_progress_reaches_total(self, client, temp_video_file, video_size, callbacks):
        on_complete, on_progress, on_error = callbacks

        client.upload(temp_video_file, {}, on_complete, on_progress, on_error)

        assert len(on_progress.calls) > 1
        assert on_progress.calls[-1] == (video_size, video_size)

    @pytest.mark.unit
    def test_transfer_error_reaches_error_callback(self, mock_session, temp_video_file, callbacks):
        from vimeo_api.client.vimeo_client import VimeoClient

        on_complete, on_progress, on_error = callbacks
        client = VimeoClient(
            "id", "secret", "token", session=mock_session, uploader=FailingUploader(),
        )

        client.upload(temp_video_file, {}, on_complete, on_progress, on_error)

        assert on_complete.calls == []
        assert len(on_error.calls) == 1
        assert isinstance(on_error.calls[0][0], UploaderError)

    @pytest.mark.unit
    def test_ticket_without_upload_link_is_an_error(self, client, mock_session, temp_video_file, callbacks):
        on_complete, on_progress, on_error = callbacks
        mock_session.add_response("POST", "/me/videos", 200, {"uri": "/videos/1"})

        client.upload(temp_video_file, {}, on_complete, on_progress, on_error)

        assert on_complete.calls == []
        assert "no upload link" in on_error.calls[0][0]

    @pytest.mark.unit
    def test_api_error_on_ticket(self, client, mock_session, temp_video_file, callbacks):
        on_complete, on_progress, on_error = callbacks
        mock_session.add_response("POST", "/me/videos", 403, {"error": "Upload scope missing"})

        client.upload(temp_video_file, {}, on_complete, on_progress, on_error)

        assert "Upload scope missing" in on_error.calls[0][0]


# =============================================================================
# REPLACE
# =============================================================================


class TestReplace:
    @pytest.mark.unit
    def test_replace_requests_version_ticket(self, client, temp_video_file, video_size, monkeypatch):
        fake_request = Recorder()
        monkeypatch.setattr(client, "request", fake_request)

        client.replace(temp_video_file, "/videos/12345", {})

        assert fake_request.calls[0][0] == {
            "method": "POST",
            "path": "/videos/12345/versions?fields=upload",
            "query": {
                "file_name": "test_video.mp4",
                "upload": {"approach": "tus", "size": video_size},
            },
        }

    @pytest.mark.unit
    def test_replace_completes_with_original_uri(self, client, temp_video_file, callbacks):
        on_complete, on_progress, on_error = callbacks

        client.replace(temp_video_file, "/videos/12345", {}, on_complete, on_progress, on_error)

        assert on_error.calls == []
        assert on_complete.calls == [("/videos/12345",)]

    @pytest.mark.unit
    def test_replace_missing_file(self, client, callbacks):
        on_complete, on_progress, on_error = callbacks

        client.replace("/real/file", "/videos/1", {}, on_complete, on_progress, on_error)

        assert on_error.calls == [(FILE_NOT_FOUND_MESSAGE,)]
