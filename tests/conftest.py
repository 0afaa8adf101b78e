import httpx
import pytest


def make_transport(routes):
    """Fake upstream: url -> body text, status code, or exception to raise."""
    def handler(request: httpx.Request) -> httpx.Response:
        spec = routes.get(str(request.url))
        if spec is None:
            raise httpx.ConnectError("connection refused", request=request)
        if isinstance(spec, Exception):
            raise spec
        if isinstance(spec, int):
            return httpx.Response(spec, text="error")
        return httpx.Response(200, text=spec)
    return httpx.MockTransport(handler)


@pytest.fixture
def servers_file(tmp_path):
    def write(text: str):
        p = tmp_path / "servers.yaml"
        p.write_text(text, encoding="utf-8")
        return p
    return write


@pytest.fixture
def transport_for():
    return make_transport
