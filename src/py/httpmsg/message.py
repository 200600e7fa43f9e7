import io
from typing import Any, TypeVar

from mypy_extensions import mypyc_attr

from .errors import InvalidBody
from .headers import HeaderBag
from .utils.io import MEMORY, Stream

TMessage = TypeVar("TMessage", bound="Message")

# Bodies can be given as a path (or `MEMORY`), an open handle or a stream
TBody = str | io.IOBase | Stream

DEFAULT_PROTOCOL: str = "1.1"


def asStream(body: Any, mode: str) -> Stream:
	"""Validates the given body and wraps it in a `Stream` if needed."""
	if isinstance(body, Stream):
		return body
	elif isinstance(body, (str, io.IOBase)):
		return Stream(body, mode)
	else:
		raise InvalidBody(
			"Body must be a path or stream identifier, an open binary handle or a Stream",
			body,
		)


@mypyc_attr(allow_interpreted_subclasses=True)
class Message:
	"""The base of requests and responses: a protocol version, headers and a
	body stream. Messages are immutable, `with*` methods return a shallow copy
	with the given change. The body stream is shared between copies, never
	duplicated nor closed by the message."""

	__slots__ = ["protocol", "_body", "_headers"]

	def __init__(
		self,
		body: TBody = MEMORY,
		headers: HeaderBag | None = None,
		*,
		mode: str = "r",
	):
		self.protocol: str = DEFAULT_PROTOCOL
		self._body: Stream = asStream(body, mode)
		self._headers: HeaderBag = HeaderBag() if headers is None else headers

	def derive(self: TMessage, **changes: Any) -> TMessage:
		"""Returns a copy of this message with the given attributes replaced."""
		res = object.__new__(type(self))
		for cls in type(self).__mro__:
			for name in getattr(cls, "__slots__", ()):
				if hasattr(self, name):
					setattr(res, name, getattr(self, name))
		for name, value in changes.items():
			setattr(res, name, value)
		return res

	# =========================================================================
	# PROTOCOL & BODY
	# =========================================================================

	def getProtocolVersion(self) -> str:
		return self.protocol

	def withProtocolVersion(self: TMessage, version: str) -> TMessage:
		return self.derive(protocol=version)

	def getBody(self) -> Stream:
		return self._body

	def withBody(self: TMessage, body: Stream) -> TMessage:
		if not isinstance(body, Stream):
			raise InvalidBody("Body must be a Stream", body)
		return self.derive(_body=body)

	# =========================================================================
	# HEADERS
	# =========================================================================

	@property
	def headers(self) -> HeaderBag:
		return self._headers

	def getHeaders(self) -> dict[str, list[str]]:
		return self._headers.getAll()

	def hasHeader(self, name: str) -> bool:
		return self._headers.has(name)

	def getHeader(self, name: str) -> list[str]:
		return self._headers.get(name)

	def getHeaderLine(self, name: str) -> str | None:
		return self._headers.getLine(name)

	def withHeader(self: TMessage, name: str, value: Any) -> TMessage:
		return self.derive(_headers=self._headers.withSet(name, value))

	def withAddedHeader(self: TMessage, name: str, value: Any) -> TMessage:
		return self.derive(_headers=self._headers.withAdded(name, value))

	def withoutHeader(self: TMessage, name: str) -> TMessage:
		return self.derive(_headers=self._headers.withRemoved(name))


# EOF
