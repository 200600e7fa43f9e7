from os import getenv

# When serving requests, uploaded files that come from a path are relocated
# as a whole instead of being copied through their stream.
SERVING: bool = getenv("HTTPMSG_SERVING", "0") == "1"

UPLOAD_CHUNK_SIZE: int = int(getenv("HTTPMSG_UPLOAD_CHUNK", 4096))

# One of `debug`, `info`, `warning`, `error`
LOG_LEVEL: str = getenv("HTTPMSG_LOG_LEVEL", "info").lower()

# EOF
