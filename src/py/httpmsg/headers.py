from typing import Any, Iterator, Mapping, NamedTuple, TypeAlias

from .errors import InvalidHeaderValue
from .utils.logging import warning

# Server parameters carrying headers without the `HTTP_` prefix
SPECIAL_HEADERS: frozenset[str] = frozenset(
	("php_auth_user", "php_auth_pw", "php_auth_digest", "auth_type")
)
HTTP_PREFIX: str = "http_"
CONTENT_PREFIX: str = "content_"
# Cookies are passed separately as cookie params
COOKIE_PREFIX: str = "HTTP_COOKIE"

# -----------------------------------------------------------------------------
#
# HEADER VALUES
#
# -----------------------------------------------------------------------------


class Single(NamedTuple):
	"""A header given as a single string value."""

	value: str

	@property
	def values(self) -> tuple[str, ...]:
		return (self.value,)


class Multiple(NamedTuple):
	"""A header given as a sequence of string values, possibly empty."""

	values: tuple[str, ...]


THeaderValue: TypeAlias = Single | Multiple


class HeaderValue:
	"""Classifies raw header values into `Single` or `Multiple`."""

	@staticmethod
	def TryParse(value: Any) -> THeaderValue | None:
		if isinstance(value, (Single, Multiple)):
			return value
		elif isinstance(value, str):
			return Single(value)
		elif isinstance(value, (list, tuple)) and all(
			isinstance(_, str) for _ in value
		):
			return Multiple(tuple(value))
		else:
			return None

	@staticmethod
	def Parse(value: Any) -> THeaderValue:
		res = HeaderValue.TryParse(value)
		if res is None:
			raise InvalidHeaderValue(
				"Invalid header value, must be a string or array of strings", value
			)
		return res


# -----------------------------------------------------------------------------
#
# HELPERS
#
# -----------------------------------------------------------------------------


def headername(name: str, *, headers: dict[str, str] = {}) -> str:
	"""Normalizes a server parameter name as a `Kebab-Case` header name,
	`HTTP_X_FOO` becomes `X-Foo`."""
	if name in headers:
		return headers[name]
	key: str = name.lower()
	if key.startswith(HTTP_PREFIX):
		key = key[len(HTTP_PREFIX) :]
	normalized: str = "-".join(_[:1].upper() + _[1:] for _ in key.split("_"))
	headers[name] = normalized
	return normalized


def isheadersource(name: str) -> bool:
	"""Tells if the given server parameter name holds a header."""
	if name.startswith(COOKIE_PREFIX):
		return False
	key: str = name.lower()
	return (
		key in SPECIAL_HEADERS
		or key.startswith(HTTP_PREFIX)
		or key.startswith(CONTENT_PREFIX)
	)


# -----------------------------------------------------------------------------
#
# HEADER BAG
#
# -----------------------------------------------------------------------------


class HeaderBag:
	"""A case-insensitive, order-preserving collection of multi-valued headers.
	Header names keep the casing with which they were first registered. The
	bag is never mutated: all the `with*` methods return a new bag."""

	__slots__ = ["_values", "_names"]

	@staticmethod
	def FromSource(params: Mapping[Any, Any]) -> "HeaderBag":
		"""Builds the headers from a flat server parameter map, like a WSGI
		environ."""
		values: dict[str, tuple[str, ...]] = {}
		names: dict[str, str] = {}
		for name, value in params.items():
			if not isinstance(name, str) or not isheadersource(name):
				continue
			parsed = HeaderValue.TryParse(value)
			if parsed is None:
				warning(
					"Discarded server parameter with a non-string header value",
					Name=name,
					Type=type(value).__name__,
				)
				continue
			HeaderBag._Register(values, names, headername(name), parsed.values)
		return HeaderBag._Create(values, names)

	@staticmethod
	def FromMapping(headers: Mapping[Any, Any] | None) -> "HeaderBag":
		"""Builds the headers from a `name → value(s)` map, silently dropping
		entries that are not valid headers."""
		return HeaderBag(headers)

	@staticmethod
	def _Create(
		values: dict[str, tuple[str, ...]], names: dict[str, str]
	) -> "HeaderBag":
		res = HeaderBag.__new__(HeaderBag)
		res._values = values
		res._names = names
		return res

	@staticmethod
	def _Register(
		values: dict[str, tuple[str, ...]],
		names: dict[str, str],
		name: str,
		headerValues: tuple[str, ...],
	) -> None:
		key = name.lower()
		original = names.setdefault(key, name)
		values[original] = headerValues

	def __init__(self, headers: Mapping[Any, Any] | None = None):
		self._values: dict[str, tuple[str, ...]] = {}
		self._names: dict[str, str] = {}
		for name, value in (headers or {}).items():
			if not isinstance(name, str):
				continue
			parsed = HeaderValue.TryParse(value)
			if parsed is not None:
				self._Register(self._values, self._names, name, parsed.values)

	# =========================================================================
	# ACCESSORS
	# =========================================================================

	def has(self, name: str) -> bool:
		return isinstance(name, str) and name.lower() in self._names

	def get(self, name: str) -> list[str]:
		if not self.has(name):
			return []
		return list(self._values[self._names[name.lower()]])

	def getLine(self, name: str) -> str | None:
		values = self.get(name)
		return ",".join(values) if values else None

	def getAll(self) -> dict[str, list[str]]:
		return {k: list(v) for k, v in self._values.items()}

	# =========================================================================
	# COPY-ON-WRITE
	# =========================================================================

	def withSet(self, name: str, value: Any) -> "HeaderBag":
		parsed = self._parse(name, value)
		values = dict(self._values)
		names = dict(self._names)
		self._Register(values, names, name, parsed.values)
		return self._Create(values, names)

	def withAdded(self, name: str, value: Any) -> "HeaderBag":
		parsed = self._parse(name, value)
		if not self.has(name):
			return self.withSet(name, parsed)
		original = self._names[name.lower()]
		values = dict(self._values)
		values[original] = values[original] + parsed.values
		return self._Create(values, dict(self._names))

	def withRemoved(self, name: str) -> "HeaderBag":
		values = dict(self._values)
		names = dict(self._names)
		if self.has(name):
			del values[names.pop(name.lower())]
		return self._Create(values, names)

	def _parse(self, name: Any, value: Any) -> THeaderValue:
		if not isinstance(name, str):
			raise InvalidHeaderValue("Invalid header name, must be a string", name)
		return HeaderValue.Parse(value)

	# =========================================================================
	# PROTOCOL
	# =========================================================================

	def __contains__(self, name: object) -> bool:
		return isinstance(name, str) and self.has(name)

	def __iter__(self) -> Iterator[str]:
		return iter(self._values)

	def __len__(self) -> int:
		return len(self._values)

	def __eq__(self, other: object) -> bool:
		return isinstance(other, HeaderBag) and self._values == other._values

	def __repr__(self) -> str:
		return f"HeaderBag({self.getAll()})"


# EOF
