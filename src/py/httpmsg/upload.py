import io
import os
import shutil
from typing import Any

from mypy_extensions import mypyc_attr

from . import config
from .errors import (
	AlreadyMoved,
	InvalidClientMetadata,
	InvalidErrorStatus,
	InvalidSize,
	InvalidTargetPath,
	InvalidUploadSource,
	MoveFailed,
)
from .utils.io import Stream
from .utils.logging import LogLevel, error, exception, info, logged

# SEE: https://www.php.net/manual/en/features.file-upload.errors.php
UPLOAD_ERR_OK: int = 0
UPLOAD_ERR_INI_SIZE: int = 1
UPLOAD_ERR_FORM_SIZE: int = 2
UPLOAD_ERR_PARTIAL: int = 3
UPLOAD_ERR_NO_FILE: int = 4
UPLOAD_ERR_NO_TMP_DIR: int = 6
UPLOAD_ERR_CANT_WRITE: int = 7
UPLOAD_ERR_EXTENSION: int = 8


def isint(value: Any) -> bool:
	return isinstance(value, int) and not isinstance(value, bool)


@mypyc_attr(allow_interpreted_subclasses=True)
class UploadedFile:
	"""A file uploaded with a request, backed either by a path or a stream.
	The file can be moved only once, after which its stream is gone."""

	__slots__ = [
		"file",
		"size",
		"error",
		"clientFilename",
		"clientMediaType",
		"moved",
		"_stream",
	]

	def __init__(
		self,
		streamOrFile: str | os.PathLike[str] | io.IOBase | Stream,
		size: int,
		errorStatus: int,
		clientFilename: str | None = None,
		clientMediaType: str | None = None,
	):
		self.file: str | None = None
		self._stream: Stream | None = None
		if isinstance(streamOrFile, (str, os.PathLike)):
			self.file = os.fspath(streamOrFile)
		elif isinstance(streamOrFile, io.IOBase):
			self._stream = Stream(streamOrFile)
		elif isinstance(streamOrFile, Stream):
			self._stream = streamOrFile
		else:
			raise InvalidUploadSource(
				"Invalid stream or file provided for UploadedFile", streamOrFile
			)
		if not isint(size) or size < 0:
			raise InvalidSize(
				"Invalid size provided for UploadedFile; must be a non-negative int",
				size,
			)
		if not isint(errorStatus) or not (
			UPLOAD_ERR_OK <= errorStatus <= UPLOAD_ERR_EXTENSION
		):
			raise InvalidErrorStatus(
				"Invalid error status for UploadedFile; must be an UPLOAD_ERR_* constant",
				errorStatus,
			)
		for name, value in (
			("client filename", clientFilename),
			("client media type", clientMediaType),
		):
			if value is not None and not isinstance(value, str):
				raise InvalidClientMetadata(
					f"Invalid {name} provided for UploadedFile; must be None or a string",
					value,
				)
		self.size: int = size
		self.error: int = errorStatus
		self.clientFilename: str | None = clientFilename
		self.clientMediaType: str | None = clientMediaType
		self.moved: bool = False

	def getStream(self) -> Stream:
		if self.moved:
			raise AlreadyMoved("Cannot retrieve stream after it has already been moved")
		if self._stream is None:
			# NOTE: The constructor guarantees we have a file there
			self._stream = Stream(self.file or "")
		return self._stream

	def moveTo(self, targetPath: str | os.PathLike[str]) -> None:
		"""Moves the uploaded file to the given path. When serving requests
		and the upload has a path, the file is relocated, otherwise the stream
		is copied to the target."""
		if not isinstance(targetPath, (str, os.PathLike)) or not os.fspath(
			targetPath
		):
			raise InvalidTargetPath(
				"Invalid path provided for move operation; must be a non-empty string",
				targetPath,
			)
		if self.moved:
			raise AlreadyMoved("Cannot move file; already moved!")
		path: str = os.fspath(targetPath)
		try:
			if config.SERVING and self.file:
				shutil.move(self.file, path)
			else:
				self._write(path)
		except OSError as e:
			error(
				"Error occurred while moving uploaded file",
				e.errno,
				Source=self.file,
				Target=path,
			)
			# The traceback is only of interest when debugging
			if logged(LogLevel.Debug):
				exception(e)
			raise MoveFailed(
				"Error occurred while moving uploaded file", targetPath
			) from e
		info("Moved uploaded file", Source=self.file, Target=path, Size=self.size)
		# Streams opened from the file path are ours to close
		if self.file and self._stream:
			self._stream.close()
		self.moved = True

	def _write(self, path: str) -> None:
		stream = self.getStream()
		with open(path, "wb") as f:
			stream.rewind()
			while not stream.eof():
				f.write(stream.read(config.UPLOAD_CHUNK_SIZE))

	# =========================================================================
	# ACCESSORS
	# =========================================================================

	def getSize(self) -> int:
		return self.size

	def getError(self) -> int:
		return self.error

	def getClientFilename(self) -> str | None:
		return self.clientFilename

	def getClientMediaType(self) -> str | None:
		return self.clientMediaType

	def isMoved(self) -> bool:
		return self.moved

	def __repr__(self) -> str:
		return f"UploadedFile({self.clientFilename or self.file} size={self.size} error={self.error}{' moved' if self.moved else ''})"


# EOF
