from .io import MEMORY, Stream  # NOQA: F401
from .uri import URI, uri  # NOQA: F401

# EOF
