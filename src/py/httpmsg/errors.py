# -----------------------------------------------------------------------------
#
# ERRORS
#
# -----------------------------------------------------------------------------
# All the errors are raised synchronously by the operation that received the
# offending input. Validation errors are also `ValueError`s, state errors are
# `RuntimeError`s, so that callers can catch either family.


class MessageError(Exception):
	"""Base class for all the errors raised by message objects."""

	def __init__(self, message: str, value: object | None = None):
		super().__init__(message)
		self.message: str = message
		self.value: object | None = value


class InvalidHeaderValue(MessageError, ValueError):
	pass


class InvalidBody(MessageError, ValueError):
	pass


class UnsupportedMethod(MessageError, ValueError):
	pass


class InvalidMethodType(MessageError, TypeError):
	pass


class InvalidRequestTarget(MessageError, ValueError):
	pass


class InvalidUri(MessageError, ValueError):
	pass


class InvalidUploadTree(MessageError, ValueError):
	pass


class InvalidStatusCode(MessageError, ValueError):
	pass


class InvalidSize(MessageError, ValueError):
	pass


class InvalidErrorStatus(MessageError, ValueError):
	pass


class InvalidClientMetadata(MessageError, ValueError):
	pass


class InvalidUploadSource(MessageError, ValueError):
	pass


class InvalidTargetPath(MessageError, ValueError):
	pass


class AlreadyMoved(MessageError, RuntimeError):
	"""The uploaded file was already moved, its stream is gone."""


class MoveFailed(MessageError, RuntimeError):
	"""Relocating an uploaded file failed, the file is still pending."""


# EOF
