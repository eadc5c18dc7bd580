"""Exceptions raised by webarchive."""


class ArchiveError(Exception):
    """Base class for webarchive errors."""


class RequestError(ArchiveError):
    """Issuing the CDX API request failed."""


class BodyReadError(ArchiveError):
    """Reading the CDX API response body failed."""


class SerializationError(ArchiveError):
    """Encoding a result failed."""
