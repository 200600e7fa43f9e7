"""
pytest configuration and fixtures.
"""

import io
import sys
from pathlib import Path

import pytest

# Add src/py to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src" / "py"))

from httpmsg import Request, Response, Stream, UploadedFile  # NOQA: E402


@pytest.fixture
def request_() -> Request:
	"""An empty request."""
	return Request()


@pytest.fixture
def response() -> Response:
	"""A default `200 OK` response."""
	return Response()


@pytest.fixture
def server_params() -> dict[str, str]:
	"""Server parameters for a typical POST request."""
	return {
		"REQUEST_METHOD": "POST",
		"REQUEST_URI": "http://example.com/user?foo=bar",
		"HTTP_HOST": "example.com",
		"HTTP_ACCEPT": "application/json",
		"CONTENT_TYPE": "application/json",
		"CONTENT_LENGTH": "2",
		"HTTP_COOKIE": "session=abc123",
		"SERVER_NAME": "example.com",
	}


@pytest.fixture
def upload_path(tmp_path: Path) -> Path:
	"""A temporary file standing for an upload."""
	path = tmp_path / "upload.tmp"
	path.write_bytes(b"Hello, uploaded world!")
	return path


@pytest.fixture
def upload() -> UploadedFile:
	"""An uploaded file backed by an in-memory stream."""
	return UploadedFile(
		Stream(io.BytesIO(b"uploaded content")), 16, 0, "file.txt", "text/plain"
	)
