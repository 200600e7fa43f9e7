from typing import Final

# -----------------------------------------------------------------------------
#
# STATUS CODES
#
# -----------------------------------------------------------------------------

STATUS_OK: Final = 200
STATUS_CREATED: Final = 201
STATUS_ACCEPTED: Final = 202
STATUS_NO_CONTENT: Final = 204
STATUS_MOVED_PERMANENTLY: Final = 301
STATUS_NOT_MODIFIED: Final = 304
STATUS_TEMPORARY_REDIRECT: Final = 307
STATUS_BAD_REQUEST: Final = 400
STATUS_UNAUTHORIZED: Final = 401
STATUS_PAYMENT_REQUIRED: Final = 402
STATUS_FORBIDDEN: Final = 403
STATUS_NOT_FOUND: Final = 404
STATUS_METHOD_NOT_ALLOWED: Final = 405
STATUS_NOT_ACCEPTABLE: Final = 406
STATUS_REQUEST_TIMEOUT: Final = 408
STATUS_CONFLICT: Final = 409
STATUS_GONE: Final = 410
STATUS_REQUEST_ENTITY_TOO_LARGE: Final = 413
STATUS_UNSUPPORTED_MEDIA_TYPE: Final = 415
STATUS_UNPROCESSABLE_ENTITY: Final = 422
STATUS_LOCKED: Final = 423
STATUS_TOO_MANY_REQUESTS: Final = 429
STATUS_INTERNAL_SERVER_ERROR: Final = 500
STATUS_NOT_IMPLEMENTED: Final = 501
STATUS_BAD_GATEWAY: Final = 502
STATUS_SERVICE_UNAVAILABLE: Final = 503

# Valid status codes are in [STATUS_MIN, STATUS_MAX)
STATUS_MIN: Final = 100
STATUS_MAX: Final = 600

# -----------------------------------------------------------------------------
#
# REASON PHRASES
#
# -----------------------------------------------------------------------------

HTTP_STATUS: dict[int, str] = {
	# Informational 1xx
	100: "Continue",
	101: "Switching Protocols",
	102: "Processing",
	# Successful 2xx
	200: "OK",
	201: "Created",
	202: "Accepted",
	203: "Non-Authoritative Information",
	204: "No Content",
	205: "Reset Content",
	206: "Partial Content",
	207: "Multi-status",
	208: "Already Reported",
	# Redirection 3xx
	300: "Multiple Choices",
	301: "Moved Permanently",
	302: "Found",
	303: "See Other",
	304: "Not Modified",
	305: "Use Proxy",
	306: "Switch Proxy",
	307: "Temporary Redirect",
	# Client Error 4xx
	400: "Bad Request",
	401: "Unauthorized",
	402: "Payment Required",
	403: "Forbidden",
	404: "Not Found",
	405: "Method Not Allowed",
	406: "Not Acceptable",
	407: "Proxy Authentication Required",
	408: "Request Time-out",
	409: "Conflict",
	410: "Gone",
	411: "Length Required",
	412: "Precondition Failed",
	413: "Request Entity Too Large",
	414: "Request-URI Too Large",
	415: "Unsupported Media Type",
	416: "Requested range not satisfiable",
	417: "Expectation Failed",
	418: "I'm a teapot",
	422: "Unprocessable Entity",
	423: "Locked",
	424: "Failed Dependency",
	425: "Unordered Collection",
	426: "Upgrade Required",
	428: "Precondition Required",
	429: "Too Many Requests",
	431: "Request Header Fields Too Large",
	# Server Error 5xx
	500: "Internal Server Error",
	501: "Not Implemented",
	502: "Bad Gateway",
	503: "Service Unavailable",
	504: "Gateway Time-out",
	505: "HTTP Version not supported",
	506: "Variant Also Negotiates",
	507: "Insufficient Storage",
	508: "Loop Detected",
	511: "Network Authentication Required",
}

# EOF
