import pytest
import requests

from ocr_md_utils.schemas import UploadCandidate


class FakeResponse:
    """Thay cho requests.Response trong test."""

    def __init__(self, status_code=200, payload=None, reason="OK"):
        self.status_code = status_code
        self.reason = reason
        self._payload = payload

    @property
    def ok(self):
        return 200 <= self.status_code < 300

    def json(self):
        if self._payload is None:
            raise requests.exceptions.JSONDecodeError("Expecting value", "", 0)
        return self._payload


class RecordingPost:
    """Giả lập requests.post, ghi lại mọi lần gọi."""

    def __init__(self, response=None, error=None):
        self.response = response
        self.error = error
        self.calls = []

    def __call__(self, url, **kwargs):
        self.calls.append((url, kwargs))
        if self.error is not None:
            raise self.error
        return self.response


@pytest.fixture
def backend_payload():
    return {
        "backend": "x",
        "version": "1.0",
        "results": {"doc.pdf": {"md_content": "# Hi"}},
    }


@pytest.fixture
def pdf_candidate():
    return UploadCandidate(name="doc.pdf", media_type="application/pdf", content=b"%PDF-1.4 test")
