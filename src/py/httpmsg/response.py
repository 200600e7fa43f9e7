import re
from typing import Any, Mapping

from .errors import InvalidStatusCode
from .headers import HeaderBag
from .message import Message, TBody
from .status import HTTP_STATUS, STATUS_MAX, STATUS_MIN, STATUS_OK
from .utils.io import MEMORY

RE_INTEGER = re.compile(r"\s*[+-]?\d+\s*")


def validateStatus(code: Any) -> int:
	"""Returns the given status code as an int, accepting ints and integral
	numeric strings in `[100, 600)`."""
	status: int | None = None
	if isinstance(code, int) and not isinstance(code, bool):
		status = code
	elif isinstance(code, str) and RE_INTEGER.fullmatch(code):
		status = int(code)
	if status is None or not (STATUS_MIN <= status < STATUS_MAX):
		raise InvalidStatusCode(
			f'Invalid status code "{code}"; must be an integer between 100 and 599, inclusive',
			code,
		)
	return status


class Response(Message):
	"""An HTTP response, with a status and a reason phrase. The unparsed body
	holds the application data that is yet to be serialized to the body
	stream."""

	__slots__ = ["status", "_reasonPhrase", "unparsedBody"]

	def __init__(
		self,
		body: TBody = MEMORY,
		status: int | str | None = STATUS_OK,
		headers: Mapping[Any, Any] | None = None,
	):
		super().__init__(body, HeaderBag.FromMapping(headers), mode="w+")
		self.status: int = validateStatus(STATUS_OK if status is None else status)
		self._reasonPhrase: str | None = None
		self.unparsedBody: Any = None

	def getStatusCode(self) -> int:
		return self.status

	def getReasonPhrase(self) -> str | None:
		if self._reasonPhrase is None:
			self._reasonPhrase = HTTP_STATUS.get(self.status)
		return self._reasonPhrase

	def withStatus(self, code: int | str, reasonPhrase: str | None = None) -> "Response":
		status: int = validateStatus(code)
		return self.derive(
			status=status,
			_reasonPhrase=(
				HTTP_STATUS.get(status, "") if reasonPhrase is None else reasonPhrase
			),
		)

	def getUnparsedBody(self) -> Any:
		return self.unparsedBody

	def withUnparsedBody(self, data: Any) -> "Response":
		return self.derive(unparsedBody=data)

	def __str__(self) -> str:
		return f"Response({self.protocol} {self.status} {self.getReasonPhrase()} {self.getHeaders()})"


# EOF
