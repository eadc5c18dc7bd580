"""Lists the URLs the Wayback Machine has captured under a domain."""

from .archive import CDX_SEARCH_URL, DEFAULT_TIMEOUT, Archive
from .errors import ArchiveError, BodyReadError, RequestError, SerializationError
from .parsing import ParsedURL, parse_url, parse_urls
from .result import Result

__version__ = "0.1.0"

__all__ = [
    "Archive",
    "ArchiveError",
    "BodyReadError",
    "CDX_SEARCH_URL",
    "DEFAULT_TIMEOUT",
    "ParsedURL",
    "RequestError",
    "Result",
    "SerializationError",
    "parse_url",
    "parse_urls",
]
