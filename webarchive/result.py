"""Results of a CDX API lookup."""

from __future__ import annotations

import dataclasses
import json
from collections.abc import Iterator

from .errors import SerializationError
from .parsing import ParsedURL


@dataclasses.dataclass(frozen=True)
class Result:
    """URLs returned by the CDX API, in the order the API returned them.

    Filters return a new Result and leave the receiver untouched.
    """

    urls: tuple[ParsedURL, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "urls", tuple(self.urls))

    def __len__(self) -> int:
        return len(self.urls)

    def __iter__(self) -> Iterator[ParsedURL]:
        return iter(self.urls)

    def __getitem__(self, index: int) -> ParsedURL:
        return self.urls[index]

    def has_params(self) -> Result:
        """Returns the URLs that have a query string."""
        return Result(tuple(url for url in self.urls if url.has_params))

    def filter_by_extension(self, ext: str) -> Result:
        """Returns the URLs that have a query string and whose path ends in ext.

        ext includes the leading dot and is compared case-sensitively. A URL
        with the right extension but no query string is excluded.
        """
        return Result(
            tuple(url for url in self.urls if url.has_params and url.extension == ext)
        )

    def to_json_dict(self) -> dict:
        """Returns JSON representation of the result."""
        return {"urls": [url.to_json_dict() for url in self.urls]}

    def format_as_json(self) -> str:
        """Returns the result encoded as a JSON document.

        :raises SerializationError: the result could not be encoded
        """
        try:
            return json.dumps(self.to_json_dict())
        except (TypeError, ValueError) as exc:
            raise SerializationError(f"encoding result failed: {exc}") from exc

    @staticmethod
    def from_json(data: dict) -> Result:
        """Creates Result from JSON."""
        return Result(tuple(ParsedURL.from_json(url) for url in data["urls"]))
