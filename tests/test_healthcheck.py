import httpx
import pytest

from webapp import healthcheck


def client_for(handler) -> httpx.Client:
    return httpx.Client(transport=httpx.MockTransport(handler))


def test_probe_healthy():
    client = client_for(lambda request: httpx.Response(200, json={"status": "healthy", "uptime": 1.0}))
    assert healthcheck.probe("http://svc/health", client=client) is True


def test_probe_bad_status():
    client = client_for(lambda request: httpx.Response(503, json={"status": "healthy"}))
    assert healthcheck.probe("http://svc/health", client=client) is False


def test_probe_unexpected_body():
    client = client_for(lambda request: httpx.Response(200, json={"status": "ok"}))
    assert healthcheck.probe("http://svc/health", client=client) is False


def test_probe_non_json_body():
    client = client_for(lambda request: httpx.Response(200, text="fine"))
    assert healthcheck.probe("http://svc/health", client=client) is False


def test_probe_connection_error():
    def refuse(request):
        raise httpx.ConnectError("connection refused", request=request)

    assert healthcheck.probe("http://svc/health", client=client_for(refuse)) is False


def test_default_url_uses_port(monkeypatch, fresh_settings):
    monkeypatch.setenv("PORT", "8080")
    assert healthcheck.default_url() == "http://127.0.0.1:8080/health"


@pytest.mark.parametrize("healthy, code", [(True, 0), (False, 1)])
def test_main_exit_code(monkeypatch, healthy, code):
    seen = {}

    def fake_probe(url, timeout=healthcheck.DEFAULT_TIMEOUT, client=None):
        seen["url"] = url
        seen["timeout"] = timeout
        return healthy

    monkeypatch.setattr(healthcheck, "probe", fake_probe)
    assert healthcheck.main(["--url", "http://svc/health", "--timeout", "0.5"]) == code
    assert seen == {"url": "http://svc/health", "timeout": 0.5}
