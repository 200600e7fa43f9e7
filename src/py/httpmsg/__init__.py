from .errors import (  # NOQA: F401
	AlreadyMoved,
	InvalidBody,
	InvalidClientMetadata,
	InvalidErrorStatus,
	InvalidHeaderValue,
	InvalidMethodType,
	InvalidRequestTarget,
	InvalidSize,
	InvalidStatusCode,
	InvalidTargetPath,
	InvalidUploadSource,
	InvalidUploadTree,
	InvalidUri,
	MessageError,
	MoveFailed,
	UnsupportedMethod,
)
from .headers import HeaderBag, HeaderValue, Multiple, Single  # NOQA: F401
from .message import Message  # NOQA: F401
from .request import Request  # NOQA: F401
from .response import Response  # NOQA: F401
from .upload import UploadedFile  # NOQA: F401
from .factory import fromEnviron  # NOQA: F401
from .utils.io import MEMORY, Stream  # NOQA: F401
from .utils.uri import URI  # NOQA: F401

__version__ = "1.0.0"

# EOF
