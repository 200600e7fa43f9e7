import io
import os
from typing import IO

DEFAULT_ENCODING: str = "utf8"

# Identifier for a stream that lives in memory
MEMORY: str = ":memory:"


def asBytes(value: str | bytes | bytearray) -> bytes:
	if isinstance(value, bytes):
		return value
	elif isinstance(value, bytearray):
		return bytes(value)
	elif isinstance(value, str):
		return bytes(value, DEFAULT_ENCODING)
	else:
		raise ValueError(f"Expected bytes or str, got: {value}")


class Stream:
	"""A byte channel wrapping a binary file object. Streams created from a
	path are only opened on first access. The stream does not own handles it
	was given: closing them is up to whoever created them."""

	__slots__ = ["path", "mode", "_handle", "_eof"]

	def __init__(self, source: str | os.PathLike[str] | IO[bytes], mode: str = "r"):
		self.path: str | None = None
		self.mode: str = mode if "b" in mode else f"{mode}b"
		self._handle: IO[bytes] | None = None
		self._eof: bool = False
		if isinstance(source, (str, os.PathLike)):
			path = os.fspath(source)
			if path == MEMORY:
				self._handle = io.BytesIO()
			else:
				self.path = path
		elif hasattr(source, "read") or hasattr(source, "write"):
			self._handle = source
		else:
			raise ValueError(f"Stream expects a path or a file object, got: {source!r}")

	@property
	def handle(self) -> IO[bytes]:
		if self._handle is None:
			if self.path is None:
				raise RuntimeError("Stream is detached")
			self._handle = open(self.path, self.mode)
		return self._handle

	def read(self, size: int = -1) -> bytes:
		data = self.handle.read(size)
		if size < 0 or len(data) < size:
			self._eof = True
		return data

	def write(self, data: str | bytes | bytearray) -> int:
		return self.handle.write(asBytes(data))

	def eof(self) -> bool:
		return self._eof

	def seek(self, offset: int, whence: int = io.SEEK_SET) -> int:
		self._eof = False
		return self.handle.seek(offset, whence)

	def rewind(self) -> int:
		return self.seek(0)

	def tell(self) -> int:
		return self.handle.tell()

	def getSize(self) -> int | None:
		if self._handle is None and self.path is not None:
			return os.path.getsize(self.path)
		try:
			return os.fstat(self.handle.fileno()).st_size
		except (AttributeError, OSError, io.UnsupportedOperation):
			pass
		if isinstance(self.handle, io.BytesIO):
			return len(self.handle.getvalue())
		return None

	def getContents(self) -> bytes:
		"""Returns the remaining contents of the stream."""
		return self.read()

	def detach(self) -> IO[bytes] | None:
		"""Separates the underlying handle from the stream, which becomes
		unusable."""
		handle = self._handle
		self._handle = None
		self.path = None
		return handle

	def close(self) -> None:
		handle = self.detach()
		if handle is not None:
			handle.close()

	def __repr__(self) -> str:
		return f"Stream({self.path or repr(self._handle)})"


# EOF
