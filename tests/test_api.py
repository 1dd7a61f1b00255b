import pytest
from fastapi.testclient import TestClient

from pawapay_connect.gateway.client import PawapayClient
from pawapay_connect.main import app
from pawapay_connect.routers.pawapay import get_client

from conftest import StubTransport, http_error, json_response


@pytest.fixture
def api():
    transport = StubTransport()
    app.dependency_overrides[get_client] = lambda: PawapayClient(transport)
    with TestClient(app) as c:
        yield c, transport
    app.dependency_overrides.clear()


def test_health(api):
    c, _ = api
    assert c.get("/health").json()["status"] == "ok"


def test_predict_provider_endpoint(api):
    c, transport = api
    transport.responses.append(
        json_response({"country": "KEN", "provider": "MPESA_KEN", "phoneNumber": "254712345678"})
    )

    resp = c.post("/pawapay/predict-provider", json={"phoneNumber": "+254712345678"})

    assert resp.status_code == 200
    assert resp.json() == {
        "success": True,
        "data": {"country": "KEN", "provider": "MPESA_KEN", "phoneNumber": "254712345678"},
    }


def test_deposit_endpoint_reports_rejection(api, deposit_payload):
    c, transport = api
    transport.responses.append(
        json_response({"status": "REJECTED", "failureReason": {"failureCode": "PAYER_NOT_FOUND", "failureMessage": "x"}})
    )

    body = c.post("/pawapay/deposits", json=deposit_payload).json()

    assert body["success"] is False
    assert body["data"]["status"] == "REJECTED"
    assert body["data"]["failureReason"]["failureCode"] == "PAYER_NOT_FOUND"


def test_deposit_endpoint_maps_metadata_errors_to_422(api, deposit_payload):
    c, transport = api
    deposit_payload["metadata"] = [{"a": "b"}, ["c"]]

    resp = c.post("/pawapay/deposits", json=deposit_payload)

    assert resp.status_code == 422
    assert resp.json()["error"] == "Unable to initiate deposit"
    assert transport.calls == []


def test_deposit_endpoint_validates_request_shape(api, deposit_payload):
    c, _ = api
    deposit_payload["currency"] = "EUR"

    assert c.post("/pawapay/deposits", json=deposit_payload).status_code == 422


def test_payment_page_endpoint(api, deposit_id):
    c, transport = api
    transport.responses.append(json_response({"redirectUrl": "https://pay.example/abc"}))

    body = c.post(
        "/pawapay/payment-page",
        json={
            "depositId": deposit_id,
            "returnUrl": "https://merchant.example/return",
            "amountDetails": {"amount": "10", "currency": "KES"},
        },
    ).json()

    assert body == {"success": True, "data": {"redirectUrl": "https://pay.example/abc"}}


def test_status_endpoint_not_found(api, deposit_id):
    c, transport = api
    transport.responses.append(http_error(404))

    body = c.get(f"/pawapay/deposits/{deposit_id}").json()

    assert body == {"success": False, "data": {"status": "NOT_FOUND"}}


def test_status_endpoint_transport_failure_is_500(api, deposit_id):
    c, transport = api
    transport.responses.append(http_error(502))

    resp = c.get(f"/pawapay/deposits/{deposit_id}")

    assert resp.status_code == 500
    assert resp.json()["success"] is False
