"""Parsing of CDX API output into structured URLs.

Only well-formed absolute URLs are accepted. A line that fails validation is
dropped rather than reported.

Fragments are not split off: a ``#`` stays in the path or query it appears
in, so hash routes such as ``https://example.com/#!/item?id=3`` keep their
query string.
"""

from __future__ import annotations

import dataclasses
import re
import urllib.parse

SCHEME_RE = re.compile(r"[A-Za-z][A-Za-z0-9+.\-]*")
CONTROL_CHAR_RE = re.compile(r"[\x00-\x1f\x7f]")
BAD_ESCAPE_RE = re.compile(r"%(?![0-9A-Fa-f]{2})")


@dataclasses.dataclass(frozen=True)
class ParsedURL:
    """Absolute URL split into its components.

    ``host`` keeps the port, if any, ``path`` stays percent-encoded, and
    ``raw_query`` is everything after the first ``?``.
    """

    scheme: str = ""
    user: str = ""
    host: str = ""
    path: str = ""
    raw_query: str = ""

    @property
    def has_params(self) -> bool:
        """Returns True if the URL has a non-empty query string."""
        return self.raw_query != ""

    @property
    def extension(self) -> str:
        """Returns the extension of the last decoded path segment, with the dot."""
        name = urllib.parse.unquote(self.path).rpartition("/")[2]
        index = name.rfind(".")
        return name[index:] if index >= 0 else ""

    def __str__(self) -> str:
        netloc = f"{self.user}@{self.host}" if self.user else self.host
        url = f"{self.scheme}:"
        if netloc or (
            self.path.startswith("/") and self.scheme in urllib.parse.uses_netloc
        ):
            url += f"//{netloc}"
        url += self.path
        if self.raw_query:
            url += f"?{self.raw_query}"
        return url

    def to_json_dict(self) -> dict:
        """Returns JSON representation of the URL."""
        return {
            "scheme": self.scheme,
            "user": self.user,
            "host": self.host,
            "path": self.path,
            "raw_query": self.raw_query,
        }

    @staticmethod
    def from_json(json: dict) -> ParsedURL:
        """Creates ParsedURL from JSON."""
        return ParsedURL(
            scheme=json["scheme"],
            user=json["user"],
            host=json["host"],
            path=json["path"],
            raw_query=json["raw_query"],
        )


def parse_url(text: str) -> ParsedURL | None:
    """Parses an absolute URL, or returns None if text is not one."""
    if not is_well_formed(text):
        return None
    parts = urllib.parse.urlsplit(text, allow_fragments=False)
    user, _, host = parts.netloc.rpartition("@")
    return ParsedURL(
        scheme=parts.scheme,
        user=user,
        host=host,
        path=parts.path,
        raw_query=parts.query,
    )


def parse_urls(body: str) -> list[ParsedURL]:
    """Parses newline-delimited URLs, dropping lines that fail to parse.

    A trailing carriage return is removed from each line.
    """
    urls: list[ParsedURL] = []
    for line in body.split("\n"):
        text = line.removesuffix("\r")
        if text and (url := parse_url(text)) is not None:
            urls.append(url)
    return urls


def is_well_formed(text: str) -> bool:
    """Returns True if text is a well-formed absolute URL."""
    if not text or CONTROL_CHAR_RE.search(text):
        return False
    scheme, sep, _ = text.partition(":")
    if not sep or not SCHEME_RE.fullmatch(scheme):
        return False
    try:
        parts = urllib.parse.urlsplit(text, allow_fragments=False)
        # raises on a non-numeric or out of range port
        _ = parts.port
    except ValueError:
        return False
    if any(char.isspace() for char in parts.netloc):
        return False
    return BAD_ESCAPE_RE.search(parts.netloc + parts.path) is None
