from http.cookies import CookieError, SimpleCookie
from typing import Any, Mapping
from urllib.parse import quote

from .errors import InvalidUploadTree
from .request import Request, TUploadedFiles
from .upload import UploadedFile
from .utils.io import MEMORY, Stream
from .utils.logging import warning

# Characters left as is when re-quoting the decoded WSGI path
PATH_SAFE: str = "/;=,@:!$&'()*+~"

# Fields of a CGI-style file specification, the last two are optional
FILE_FIELDS: tuple[str, ...] = ("tmp_name", "size", "error", "name", "type")

# -----------------------------------------------------------------------------
#
# HELPERS
#
# -----------------------------------------------------------------------------


def quotePath(path: str) -> str:
	"""Percent-encodes a WSGI path. Servers decode the raw path bytes as
	latin-1, so the path is encoded back as such when it can be."""
	try:
		return quote(path, safe=PATH_SAFE, encoding="latin-1")
	except UnicodeEncodeError:
		return quote(path, safe=PATH_SAFE)


def requestURI(environ: Mapping[str, Any]) -> str:
	"""Reconstructs the request URI from the CGI variables of the environ."""
	if "REQUEST_URI" in environ:
		return str(environ["REQUEST_URI"])
	path: str = quotePath(
		f"{environ.get('SCRIPT_NAME', '')}{environ.get('PATH_INFO', '')}"
	)
	query: str = environ.get("QUERY_STRING", "")
	return f"{path or '/'}{f'?{query}' if query else ''}"


def parseCookies(header: str | None) -> dict[str, str]:
	if not header:
		return {}
	cookies = SimpleCookie()
	try:
		cookies.load(header)
	except CookieError as e:
		warning("Could not parse cookie header", Reason=str(e))
		return {}
	return {k: v.value for k, v in cookies.items()}


def fileSpecItem(spec: Mapping[str, Any], key: Any) -> dict[str, Any]:
	"""Returns the file specification at `key` of a specification whose
	fields are parallel lists or mappings."""
	kind: Any = Mapping if isinstance(spec["tmp_name"], Mapping) else (list, tuple)
	item: dict[str, Any] = {}
	for field in FILE_FIELDS:
		if field not in spec:
			continue
		values: Any = spec[field]
		if not isinstance(values, kind):
			raise InvalidUploadTree(
				f'File specification field "{field}" does not match "tmp_name"',
				values,
			)
		try:
			item[field] = values[key]
		except (KeyError, IndexError) as e:
			raise InvalidUploadTree(
				f'File specification field "{field}" has no entry for "{key}"',
				values,
			) from e
	return item


def normalizeFile(
	spec: Mapping[str, Any],
) -> UploadedFile | list[Any] | dict[Any, Any]:
	"""Creates uploaded files from a CGI-style file specification
	(`tmp_name`, `size`, `error`, `name`, `type`), where each field may be a
	list, or a mapping, when several files are uploaded under the same
	name."""
	files: Any = spec["tmp_name"]
	if isinstance(files, Mapping):
		return {k: normalizeFile(fileSpecItem(spec, k)) for k in files}
	elif isinstance(files, (list, tuple)):
		return [normalizeFile(fileSpecItem(spec, i)) for i in range(len(files))]
	missing: list[str] = [_ for _ in ("size", "error") if _ not in spec]
	if missing:
		raise InvalidUploadTree(
			f"File specification is missing: {', '.join(missing)}", spec
		)
	return UploadedFile(
		spec["tmp_name"],
		spec["size"],
		spec["error"],
		spec.get("name"),
		spec.get("type"),
	)


def normalizeFiles(files: Mapping[Any, Any]) -> dict[Any, Any]:
	res: dict[Any, Any] = {}
	for key, value in files.items():
		if isinstance(value, UploadedFile):
			res[key] = value
		elif isinstance(value, Mapping) and "tmp_name" in value:
			res[key] = normalizeFile(value)
		elif isinstance(value, Mapping):
			res[key] = normalizeFiles(value)
		else:
			# Left as is, the request will reject it
			res[key] = value
	return res


# -----------------------------------------------------------------------------
#
# FACTORY
#
# -----------------------------------------------------------------------------


def fromEnviron(
	environ: Mapping[str, Any],
	query: Mapping[str, Any] | None = None,
	body: Any = None,
	cookies: Mapping[str, Any] | None = None,
	files: Mapping[Any, Any] | None = None,
) -> Request:
	"""Creates a request from a WSGI-style environ. Everything is injected,
	nothing is read from the process state. The `body` is the parsed body,
	while the body stream is taken from `wsgi.input`."""
	server: dict[str, Any] = dict(environ)
	server.setdefault("REQUEST_METHOD", "GET")
	server["REQUEST_URI"] = requestURI(environ)
	stream: Stream = (
		Stream(environ["wsgi.input"]) if "wsgi.input" in environ else Stream(MEMORY)
	)
	uploaded: TUploadedFiles = normalizeFiles(files) if files else {}
	request = Request(server, uploaded, stream)
	return (
		request.withCookieParams(
			parseCookies(environ.get("HTTP_COOKIE")) if cookies is None else cookies
		)
		.withQueryParams(request.getQueryParams() if query is None else query)
		.withParsedBody(body)
	)


# EOF
