import json

import httpx
import pytest

from pawapay_connect.exceptions import TransportError
from pawapay_connect.gateway.config import GatewayConfig
from pawapay_connect.gateway.transport import HttpTransport


def _config(**overrides) -> GatewayConfig:
    values = dict(
        sandbox_url="https://api.sandbox.pawapay.io/v2/",
        production_url="https://api.pawapay.io/v2",
        token="secret-token",
        retry_times=3,
        retry_sleep=0,
    )
    values.update(overrides)
    return GatewayConfig(**values)


async def test_sends_auth_and_json_headers_to_sandbox():
    seen = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, json={"status": "ACCEPTED"})

    transport = HttpTransport(_config(), transport=httpx.MockTransport(handler))
    resp = await transport.execute("POST", "/deposits", {"depositId": "d-1"})

    assert resp.status_code == 200
    assert json.loads(resp.body) == {"status": "ACCEPTED"}
    request = seen[0]
    assert str(request.url) == "https://api.sandbox.pawapay.io/v2/deposits"
    assert request.headers["Authorization"] == "Bearer secret-token"
    assert request.headers["Accept"] == "application/json"
    assert json.loads(request.content) == {"depositId": "d-1"}


async def test_production_environment_uses_production_url():
    seen = []

    def handler(request):
        seen.append(str(request.url))
        return httpx.Response(200, json={})

    transport = HttpTransport(_config(environment="production"), transport=httpx.MockTransport(handler))
    await transport.execute("GET", "/deposits/abc")

    assert seen == ["https://api.pawapay.io/v2/deposits/abc"]


async def test_retries_server_errors_then_succeeds():
    attempts = []

    def handler(request):
        attempts.append(1)
        if len(attempts) < 3:
            return httpx.Response(503, text="busy")
        return httpx.Response(200, json={"ok": True})

    transport = HttpTransport(_config(), transport=httpx.MockTransport(handler))
    resp = await transport.execute("POST", "/predict-provider", {"phoneNumber": "260763456789"})

    assert resp.status_code == 200
    assert len(attempts) == 3


async def test_client_errors_are_not_retried_and_keep_body():
    attempts = []

    def handler(request):
        attempts.append(1)
        return httpx.Response(400, json={"status": "REJECTED"})

    transport = HttpTransport(_config(), transport=httpx.MockTransport(handler))
    with pytest.raises(TransportError) as exc:
        await transport.execute("POST", "/deposits", {})

    assert len(attempts) == 1
    assert exc.value.status_code == 400
    assert json.loads(exc.value.body) == {"status": "REJECTED"}


async def test_network_failure_after_retries():
    attempts = []

    def handler(request):
        attempts.append(1)
        raise httpx.ConnectError("connection refused", request=request)

    transport = HttpTransport(_config(retry_times=2), transport=httpx.MockTransport(handler))
    with pytest.raises(TransportError) as exc:
        await transport.execute("GET", "/deposits/abc")

    assert len(attempts) == 2
    assert exc.value.status_code is None
    assert exc.value.body == b""
