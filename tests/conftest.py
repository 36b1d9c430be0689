import pytest
from unittest.mock import MagicMock
from fastapi.testclient import TestClient

from foodpay.config import PaymentSettings
from foodpay.main import create_app
from foodpay.mockGateway import MockRazorpayClient
from foodpay.oauth2 import create_access_token, get_settings
from foodpay.razorpay_service import PaymentService
from foodpay.routers.payment import get_payment_service


TEST_SECRET = "testsecret"
TEST_JWT_SECRET = "jwt-test-secret"


@pytest.fixture
def settings():
    return PaymentSettings(
        razorpay_key_id="rzp_test_key",
        razorpay_key_secret=TEST_SECRET,
        jwt_secret=TEST_JWT_SECRET,
        payment_gateway="mock",
    )


@pytest.fixture
def gateway_client():
    """A stand-in for razorpay.Client whose order.create echoes back an order."""
    client = MagicMock()
    client.order.create.side_effect = lambda data: {
        "id": "order_ABC123",
        "entity": "order",
        "amount": data["amount"],
        "currency": data["currency"],
        "status": "created",
    }
    return client


@pytest.fixture
def service(settings, gateway_client):
    return PaymentService(settings, client=gateway_client)


@pytest.fixture
def mock_service(settings):
    return PaymentService(settings, client=MockRazorpayClient(auth=("rzp_test_key", TEST_SECRET)))


@pytest.fixture
def make_client(settings):
    def _make(payment_service):
        app = create_app()
        app.dependency_overrides[get_settings] = lambda: settings
        app.dependency_overrides[get_payment_service] = lambda: payment_service
        # no `with` block: the lifespan (which reads the environment) does not run
        return TestClient(app)
    return _make


@pytest.fixture
def auth_headers():
    token = create_access_token({"user_id": "42", "role": "customer"}, TEST_JWT_SECRET)
    return {"Authorization": f"Bearer {token}"}
