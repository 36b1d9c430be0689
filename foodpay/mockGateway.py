import uuid
import time


class MockGatewayError(Exception):
    def __init__(self, description, status_code=400):
        self.status_code = status_code
        self.error = {"code": "BAD_REQUEST_ERROR", "description": description}
        super().__init__(description)


# --- THE FAKE BANK ---
# Mimics the 'razorpay' client surface used by PaymentService: client.order.create / client.order.fetch
class MockRazorpayClient:
    def __init__(self, auth):
        self.key_id = auth[0]
        self.key_secret = auth[1]
        self.orders = {}                # order_id -> order dict, lives as long as the client
        self.order = self.Order(self)   # Nested class to mimic client.order.create

    class Order:
        def __init__(self, client):
            self.client = client

        def create(self, data):
            amount = data.get("amount")
            if not isinstance(amount, int) or amount <= 0:
                raise MockGatewayError("The amount must be a positive integer in paise")
            if data.get("currency") != "INR":
                raise MockGatewayError("Currency is not supported")

            # Razorpay order ids look like order_<14 chars>
            fake_id = f"order_{uuid.uuid4().hex[:14]}"
            order = {
                "id": fake_id,
                "entity": "order",
                "amount": amount,
                "amount_paid": 0,
                "amount_due": amount,
                "currency": data["currency"],
                "receipt": data.get("receipt"),
                "status": "created",
                "attempts": 0,
                "created_at": int(time.time()),
            }
            self.client.orders[fake_id] = order
            return dict(order)

        def fetch(self, order_id):
            order = self.client.orders.get(order_id)
            if order is None:
                raise MockGatewayError("The id provided does not exist")
            return dict(order)
