import io

import pytest
import requests
import requests.adapters


class FakeCDXAdapter(requests.adapters.BaseAdapter):
    """Serves a fixed CDX API response and records the requests it receives."""

    def __init__(self, body=b"", status=200, raw=None, error=None):
        super().__init__()
        self.body = body
        self.status = status
        self.raw = raw
        self.error = error
        self.requests = []
        self.timeouts = []

    def send(self, request, *args, **kwargs):
        self.requests.append(request)
        self.timeouts.append(kwargs.get("timeout"))
        if self.error is not None:
            raise self.error
        resp = requests.Response()
        resp.status_code = self.status
        resp.reason = "OK" if self.status < 400 else "Error"
        resp.raw = self.raw if self.raw is not None else io.BytesIO(self.body)
        resp.url = request.url
        resp.request = request
        return resp

    def close(self):
        pass


class BrokenBody:
    """Response body that fails part way through reading."""

    def read(self, *args, **kwargs):
        raise requests.exceptions.ChunkedEncodingError("connection broken")

    def close(self):
        pass


@pytest.fixture
def cdx_session():
    """Returns a factory for sessions backed by a FakeCDXAdapter."""

    def make(body=b"", **kwargs):
        adapter = FakeCDXAdapter(body, **kwargs)
        session = requests.Session()
        session.mount("https://", adapter)
        return session, adapter

    return make


@pytest.fixture
def broken_body():
    return BrokenBody()
