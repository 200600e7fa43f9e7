"""
Unit tests for responses.
"""

import pytest

from httpmsg import InvalidStatusCode, Response
from httpmsg.status import HTTP_STATUS, STATUS_NOT_FOUND


class TestStatus:
	def test_defaults(self, response):
		assert response.getStatusCode() == 200
		assert response.getReasonPhrase() == "OK"

	def test_null_status_defaults_to_ok(self):
		assert Response(status=None).getStatusCode() == 200

	def test_numeric_string_status(self):
		response = Response(status="404")
		assert response.getStatusCode() == 404
		assert response.getReasonPhrase() == "Not Found"

	@pytest.mark.parametrize(
		"code", [99, 600, 999, -1, 200.0, 200.5, "200.5", "abc", "", True, [200], object()]
	)
	def test_invalid_status(self, code):
		with pytest.raises(InvalidStatusCode):
			Response(status=code)
		with pytest.raises(InvalidStatusCode):
			Response().withStatus(code)

	@pytest.mark.parametrize("code", [100, 599])
	def test_bounds(self, code):
		assert Response(status=code).getStatusCode() == code

	def test_with_status_uses_table(self, response):
		other = response.withStatus(STATUS_NOT_FOUND)
		assert other is not response
		assert other.getStatusCode() == 404
		assert other.getReasonPhrase() == "Not Found"
		assert response.getStatusCode() == 200
		assert response.getReasonPhrase() == "OK"

	def test_with_status_and_reason(self, response):
		other = response.withStatus(418, "Short and stout")
		assert other.getReasonPhrase() == "Short and stout"
		# The reason is kept with the status
		assert other.withHeader("X-Foo", "Foo").getReasonPhrase() == "Short and stout"

	def test_with_status_after_custom_reason(self, response):
		other = response.withStatus(200, "Fine").withStatus(201)
		assert other.getReasonPhrase() == "Created"

	def test_unmapped_status(self):
		assert 599 not in HTTP_STATUS
		assert Response(status=599).getReasonPhrase() is None
		assert Response().withStatus(599).getReasonPhrase() == ""
		assert Response().withStatus(599, "Custom").getReasonPhrase() == "Custom"


class TestHeaders:
	def test_constructor_headers(self):
		response = Response(
			headers={"Content-Type": "text/plain", "X-Multi": ["a", "b"]}
		)
		assert response.getHeaders() == {
			"Content-Type": ["text/plain"],
			"X-Multi": ["a", "b"],
		}
		assert response.getHeaderLine("content-type") == "text/plain"

	def test_invalid_constructor_headers_are_dropped(self):
		response = Response(headers={1: "numeric", "X-Int": 42, "X-Ok": "ok"})
		assert response.getHeaders() == {"X-Ok": ["ok"]}


class TestUnparsedBody:
	def test_with_unparsed_body(self, response):
		data = {"key": "value", "anotherKey": "the second value"}
		other = response.withUnparsedBody(data)
		assert other is not response
		assert other.getUnparsedBody() == data
		assert response.getUnparsedBody() is None

	def test_is_distinct_from_body(self, response):
		other = response.withUnparsedBody([1, 2, 3])
		assert other.getBody() is response.getBody()
		assert other.getBody().getContents() == b""
