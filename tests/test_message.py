"""
Unit tests for the behaviour shared by requests and responses.
"""

import io

import pytest

from httpmsg import InvalidBody, InvalidHeaderValue, Request, Response, Stream


@pytest.fixture(params=["request", "response"])
def message(request):
	return Request() if request.param == "request" else Response()


class TestBody:
	def test_uses_stream_provided_in_constructor(self):
		stream = Stream(io.BytesIO(b"payload"))
		assert Request(body=stream).getBody() is stream
		assert Response(stream).getBody() is stream

	def test_defaults_to_memory_stream(self, message):
		body = message.getBody()
		assert isinstance(body, Stream)
		body.write(b"abc")
		body.rewind()
		assert body.read() == b"abc"

	def test_handles_are_wrapped(self):
		handle = io.BytesIO(b"raw")
		body = Request(body=handle).getBody()
		assert isinstance(body, Stream)
		assert body.read() == b"raw"

	@pytest.mark.parametrize("body", [1, 1.5, object(), ["a"]])
	def test_invalid_body(self, body):
		with pytest.raises(InvalidBody):
			Request(body=body)
		with pytest.raises(InvalidBody):
			Response(body)

	def test_with_body_returns_copy(self, message):
		stream = Stream(io.BytesIO())
		other = message.withBody(stream)
		assert other is not message
		assert other.getBody() is stream
		assert message.getBody() is not stream

	def test_with_body_requires_stream(self, message):
		with pytest.raises(InvalidBody):
			message.withBody(b"not a stream")


class TestProtocol:
	def test_default(self, message):
		assert message.getProtocolVersion() == "1.1"

	def test_with_protocol_version(self, message):
		other = message.withProtocolVersion("1.0")
		assert other is not message
		assert other.getProtocolVersion() == "1.0"
		assert message.getProtocolVersion() == "1.1"


class TestHeaders:
	def test_get_header_returns_list(self, message):
		message = message.withHeader("X-Foo", ["Foo", "Bar"])
		assert message.getHeader("x-foo") == ["Foo", "Bar"]
		assert message.getHeaderLine("X-FOO") == "Foo,Bar"

	def test_headers_keep_first_casing(self, message):
		message = (
			message.withHeader("X-Foo", "Foo")
			.withAddedHeader("x-foo", "Bar")
			.withAddedHeader("X-FOO", "Baz")
		)
		assert message.getHeaders() == {"X-Foo": ["Foo", "Bar", "Baz"]}

	def test_without_header(self, message):
		with_header = message.withHeader("X-Foo", "Foo")
		without = with_header.withoutHeader("x-foo")
		assert without is not with_header
		assert not without.hasHeader("X-Foo")
		assert with_header.hasHeader("X-Foo")
		assert without.getHeaders() == {}

	def test_without_absent_header_returns_copy(self, message):
		other = message.withoutHeader("X-Foo")
		assert other is not message
		assert not other.hasHeader("X-Foo")
		assert other.getHeaders() == message.getHeaders()

	def test_receiver_is_unchanged(self, message):
		before = message.getHeaders()
		other = message.withHeader("X-Foo", "Foo")
		assert message.getHeaders() == before
		assert other.getHeaders() == {**before, "X-Foo": ["Foo"]}

	def test_copies_share_the_body(self, message):
		other = message.withHeader("X-Foo", "Foo")
		assert other.getBody() is message.getBody()

	def test_invalid_header_leaves_receiver_valid(self, message):
		with pytest.raises(InvalidHeaderValue):
			message.withHeader("X-Foo", 1)
		assert not message.hasHeader("X-Foo")

	def test_headers_property(self, message):
		assert message.withHeader("X-Foo", "Foo").headers.get("x-foo") == ["Foo"]
