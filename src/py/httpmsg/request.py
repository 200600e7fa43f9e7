import re
from typing import Any, Iterable, Mapping
from urllib.parse import parse_qsl

from .errors import (
	InvalidMethodType,
	InvalidRequestTarget,
	InvalidUploadTree,
	UnsupportedMethod,
)
from .headers import HeaderBag
from .message import Message, TBody
from .upload import UploadedFile
from .utils.io import MEMORY
from .utils.uri import URI, uri as asURI

VALID_METHODS: tuple[str, ...] = (
	"CONNECT",
	"TRACE",
	"GET",
	"HEAD",
	"OPTIONS",
	"POST",
	"PATCH",
	"PUT",
	"DELETE",
	"COPY",
	"LOCK",
	"UNLOCK",
)

RE_WHITESPACE = re.compile(r"\s")
RE_QUERY_SEGMENT = re.compile(r"\[([^\[\]]*)\]")

# A tree of uploaded files, where nodes are either dicts or lists
TUploadedFiles = Mapping[Any, Any] | list[Any] | tuple[Any, ...]

# -----------------------------------------------------------------------------
#
# HELPERS
#
# -----------------------------------------------------------------------------


def copyTree(tree: Any) -> Any:
	"""Copies the dict and list nodes of the given tree, leaves are shared."""
	if isinstance(tree, Mapping):
		return {k: copyTree(v) for k, v in tree.items()}
	elif isinstance(tree, tuple):
		return tuple(copyTree(_) for _ in tree)
	elif isinstance(tree, list):
		return [copyTree(_) for _ in tree]
	else:
		return tree


def setQueryParam(params: dict[str, Any], key: str, value: str) -> None:
	"""Sets the given value in the params, expanding bracketed keys: `a[]`
	appends to a list, `a[b]` sets a key in a dict. Plain keys are set as is."""
	index: int = key.find("[")
	segments: list[str] = RE_QUERY_SEGMENT.findall(key, index) if index > 0 else []
	if not segments:
		params[key] = value
		return
	names: list[str] = [key[:index]] + segments
	last: int = len(names) - 1
	node: Any = params
	for i, name in enumerate(names):
		child: Any = value if i == last else [] if names[i + 1] == "" else {}
		if isinstance(node, list):
			# List nodes are only created for `[]` segments
			node.append(child)
		else:
			current: Any = node.get(name)
			# An existing node of the same kind is merged, anything else is
			# replaced.
			if i < last and type(current) is type(child):
				child = current
			node[name] = child
		node = child


def parseQuery(query: str | None) -> dict[str, Any]:
	"""Parses a query string, keeping blank values. Bracketed keys are
	expanded into lists and dicts, otherwise the last value wins."""
	params: dict[str, Any] = {}
	for key, value in parse_qsl(query or "", keep_blank_values=True):
		setQueryParam(params, key, value)
	return params


def validateUploadedFiles(files: Any) -> None:
	"""Ensures that all the leaves of the given tree are `UploadedFile`s."""
	if isinstance(files, Mapping):
		items: Iterable[Any] = files.values()
	elif isinstance(files, (list, tuple)):
		items = files
	else:
		raise InvalidUploadTree("Uploaded files must be a mapping or a list", files)
	for item in items:
		if isinstance(item, (Mapping, list, tuple)):
			validateUploadedFiles(item)
		elif not isinstance(item, UploadedFile):
			raise InvalidUploadTree("Invalid leaf in uploaded files structure", item)


# -----------------------------------------------------------------------------
#
# REQUEST
#
# -----------------------------------------------------------------------------


class Request(Message):
	"""A server-side HTTP request, built from the server parameters (like a
	WSGI environ). The headers, method, URI and query parameters are derived
	once at construction, everything else is set through `with*` methods."""

	__slots__ = [
		"method",
		"uri",
		"validMethods",
		"requestTarget",
		"serverParams",
		"queryParams",
		"cookieParams",
		"attributes",
		"parsedBody",
		"uploadedFiles",
	]

	def __init__(
		self,
		serverParams: Mapping[str, Any] | None = None,
		uploadedFiles: TUploadedFiles | None = None,
		body: TBody = MEMORY,
		validMethods: Iterable[str] | None = None,
	):
		params: dict[str, Any] = dict(serverParams or {})
		super().__init__(body, HeaderBag.FromSource(params), mode="r")
		methods = tuple(validMethods) if validMethods else ()
		self.validMethods: tuple[str, ...] = methods or VALID_METHODS
		self.serverParams: dict[str, Any] = params
		self.method: str | None = self._validateMethod(params.get("REQUEST_METHOD"))
		self.uri: URI | None = (
			asURI(params["REQUEST_URI"]) if "REQUEST_URI" in params else None
		)
		self.queryParams: dict[str, Any] = parseQuery(
			self.uri.query if self.uri else None
		)
		self.requestTarget: str | None = None
		self.cookieParams: dict[str, Any] = {}
		self.attributes: dict[str, Any] = {}
		self.parsedBody: Any = None
		files: TUploadedFiles = copyTree(
			{} if uploadedFiles is None else uploadedFiles
		)
		validateUploadedFiles(files)
		self.uploadedFiles: TUploadedFiles = files

	def _validateMethod(self, method: Any) -> str | None:
		if method is None:
			return None
		if not isinstance(method, str):
			raise InvalidMethodType(
				f"Unsupported HTTP method; must be a string, received {type(method).__name__}",
				method,
			)
		if method.upper() not in (_.upper() for _ in self.validMethods):
			raise UnsupportedMethod(
				f'Unsupported HTTP method "{method.upper()}" provided', method
			)
		return method

	# =========================================================================
	# REQUEST LINE
	# =========================================================================

	def getRequestTarget(self) -> str:
		if self.requestTarget is not None:
			return self.requestTarget
		if not self.uri:
			return "/"
		target: str = self.uri.path or ""
		if self.uri.query:
			target += f"?{self.uri.query}"
		return target or "/"

	def withRequestTarget(self, requestTarget: str) -> "Request":
		if not isinstance(requestTarget, str) or RE_WHITESPACE.search(
			requestTarget
		):
			raise InvalidRequestTarget(
				"Invalid request target provided; cannot contain whitespace",
				requestTarget,
			)
		return self.derive(requestTarget=requestTarget)

	def getMethod(self) -> str | None:
		return self.method

	def withMethod(self, method: str | None) -> "Request":
		return self.derive(method=self._validateMethod(method))

	def getUri(self) -> URI | None:
		return self.uri

	def withUri(self, uri: URI | str, preserveHost: bool = False) -> "Request":
		"""Returns a copy with the given URI. Unless `preserveHost` is set, the
		`Host` header is updated from the URI when it has a host."""
		value: URI = asURI(uri)
		host: str | None = value.authority
		if preserveHost or not host:
			return self.derive(uri=value)
		return self.derive(
			uri=value,
			_headers=self._headers.withRemoved("Host").withSet("Host", host),
		)

	# =========================================================================
	# SERVER & CLIENT PARAMETERS
	# =========================================================================

	def getServerParams(self) -> dict[str, Any]:
		return dict(self.serverParams)

	def getCookieParams(self) -> dict[str, Any]:
		return dict(self.cookieParams)

	def withCookieParams(self, cookies: Mapping[str, Any]) -> "Request":
		return self.derive(cookieParams=dict(cookies))

	def getQueryParams(self) -> dict[str, Any]:
		return copyTree(self.queryParams)

	def withQueryParams(self, query: Mapping[str, Any]) -> "Request":
		return self.derive(queryParams=copyTree(query))

	def getUploadedFiles(self) -> TUploadedFiles:
		return copyTree(self.uploadedFiles)

	def withUploadedFiles(self, uploadedFiles: TUploadedFiles) -> "Request":
		files: TUploadedFiles = copyTree(uploadedFiles)
		validateUploadedFiles(files)
		return self.derive(uploadedFiles=files)

	def getParsedBody(self) -> Any:
		return self.parsedBody

	def withParsedBody(self, data: Any) -> "Request":
		return self.derive(parsedBody=data)

	# =========================================================================
	# ATTRIBUTES
	# =========================================================================

	def getAttributes(self) -> dict[str, Any]:
		return dict(self.attributes)

	def getAttribute(self, name: str, default: Any = None) -> Any:
		return self.attributes.get(name, default)

	def withAttribute(self, name: str, value: Any) -> "Request":
		return self.derive(attributes=self.attributes | {name: value})

	def withoutAttribute(self, name: str) -> "Request":
		return self.derive(
			attributes={k: v for k, v in self.attributes.items() if k != name}
		)

	def __str__(self) -> str:
		return f"Request({self.method} {self.getRequestTarget()} {self.getHeaders()})"


# EOF
