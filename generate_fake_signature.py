import sys
import uuid
from foodpay.config import load_settings
from foodpay.razorpay_service import generate_signature

# Usage: python generate_fake_signature.py <order_id>
# The secret comes from RAZORPAY_KEY_SECRET, the same one the service verifies with

settings = load_settings()

# 1. Pass the Order ID you got from 'create-order':
ORDER_ID = sys.argv[1] if len(sys.argv) > 1 else "order_3393eab4e025"

PAYMENT_ID = f"pay_fake_{uuid.uuid4().hex[:10]}"

# 2. Generate the Signature
signature = generate_signature(settings.razorpay_key_secret.get_secret_value(), ORDER_ID, PAYMENT_ID)

print("--- COPY THIS INTO POSTMAN /payments/verify-payment ---")
print("{")
print(f'  "orderId": "{ORDER_ID}",')
print(f'  "paymentId": "{PAYMENT_ID}",')
print(f'  "signature": "{signature}"')
print("}")
