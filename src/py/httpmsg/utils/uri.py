from __future__ import annotations

from typing import Any
from urllib.parse import urlsplit

from ..errors import InvalidUri


class URI:
	"""An immutable URI value, as referenced by requests."""

	__slots__ = (
		"path",
		"scheme",
		"host",
		"port",
		"query",
		"fragment",
	)

	@classmethod
	def Parse(cls, link: "URI|str") -> "URI":
		if isinstance(link, URI):
			return link
		try:
			res = urlsplit(link)
			port: int | None = res.port
		except ValueError as e:
			raise InvalidUri(f"Invalid URI: {e}", link) from e
		host: str | None = res.hostname
		return URI(
			scheme=res.scheme if res.scheme else None,
			# IPv6 literals keep their brackets, as in the `Host` header
			host=f"[{host}]" if host and ":" in host else host,
			port=port,
			path=res.path,
			query=res.query if res.query else None,
			fragment=res.fragment if res.fragment else None,
		)

	def __init__(
		self,
		*,
		path: str | None = None,
		scheme: str | None = None,
		host: str | None = None,
		port: int | None = None,
		query: str | None = None,
		fragment: str | None = None,
	):
		self.path = path
		self.scheme = scheme
		self.host = host
		self.port = port
		self.query = query
		self.fragment = fragment

	@property
	def authority(self) -> str | None:
		"""The `host[:port]` part, as used by the `Host` header."""
		if not self.host:
			return None
		return f"{self.host}:{self.port}" if self.port else self.host

	def __eq__(self, other: Any) -> bool:
		if isinstance(other, str):
			return str(self) == other
		elif isinstance(other, URI):
			return (
				self.path == other.path
				and self.scheme == other.scheme
				and self.host == other.host
				and self.port == other.port
				and self.query == other.query
				and self.fragment == other.fragment
			)
		else:
			return False

	def __repr__(self) -> str:
		attr = dict(
			scheme=self.scheme,
			host=self.host,
			port=self.port,
			path=self.path,
			query=self.query,
			fragment=self.fragment,
		)
		return f"URI({' '.join(f'{k}={v}' for k, v in attr.items() if v)})"

	def __str__(self) -> str:
		res: list[str] = []
		if self.scheme:
			res.append(self.scheme)
			res.append(":")
		if self.host:
			res.append("//")
			res.append(self.host)
			if self.port:
				res.append(f":{self.port}")
		if self.path:
			if self.host and not self.path.startswith("/"):
				res.append("/")
			res.append(self.path)
		if self.query:
			res.append("?")
			res.append(self.query)
		if self.fragment:
			res.append("#")
			res.append(self.fragment)
		return "".join(res)


def uri(value: str | URI) -> URI:
	return value if isinstance(value, URI) else URI.Parse(value)


# EOF
