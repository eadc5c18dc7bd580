"""API client for the Wayback Machine CDX server.

https://github.com/internetarchive/wayback/tree/master/wayback-cdx-server
"""

from __future__ import annotations

import requests

from .errors import BodyReadError, RequestError
from .parsing import parse_urls
from .result import Result

CDX_SEARCH_URL = "https://web.archive.org/cdx/search/cdx"
CDX_PARAMS = {
    "output": "txt",
    "collapse": "urlkey",
    "fl": "original",
    "page": "/",
}
DEFAULT_TIMEOUT = 10.0


# pylint: disable=too-few-public-methods
class Archive:
    """Lists the URLs the Wayback Machine has captured under a domain or URL.

    Every fetch makes exactly one request, with no retries or caching. The
    HTTP status is ignored unless check_status is set, in which case 4xx and
    5xx responses raise RequestError. Otherwise an error page is parsed like
    any other body and usually yields no URLs.
    """

    def __init__(
        self,
        query: str,
        session: requests.Session | None = None,
        *,
        timeout: float | None = DEFAULT_TIMEOUT,
        check_status: bool = False,
    ) -> None:
        """Creates new Archive for query, using session for requests if given."""
        self.query = query
        self.session = session if session is not None else requests.Session()
        self.timeout = timeout
        self.check_status = check_status

    def fetch_urls(self) -> Result:
        """Fetches the URLs captured under the query.

        :raises RequestError: CDX API request failed
        :raises BodyReadError: reading the response body failed
        """
        params = {"url": f"{self.query}/*", **CDX_PARAMS}
        try:
            resp = self.session.get(
                CDX_SEARCH_URL, params=params, timeout=self.timeout, stream=True
            )
        except requests.RequestException as exc:
            raise RequestError(f"CDX API request failed: {exc}") from exc
        with resp:
            if self.check_status:
                try:
                    resp.raise_for_status()
                except requests.HTTPError as exc:
                    raise RequestError(f"CDX API request failed: {exc}") from exc
            try:
                body = resp.content
            except requests.RequestException as exc:
                raise BodyReadError(f"reading response failed: {exc}") from exc
        return Result(tuple(parse_urls(body.decode("utf-8", errors="replace"))))
