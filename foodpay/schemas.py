from pydantic import BaseModel, ConfigDict, Field
from typing import Any, Dict, Optional


#------------------------ORDER------------------------
class OrderCreate(BaseModel):
    # strict: JSON true and "250" are rejected instead of coerced to numbers
    amount: float = Field(strict=True, gt=0, allow_inf_nan=False)    # rupees, converted to paise by the service


class OrderResponse(BaseModel):
    order: Dict[str, Any]      # gateway order, passed through as-is


#------------------------PAYMENT------------------------
class PaymentVerification(BaseModel):
    # missing fields are allowed here: the verifier answers False instead of a 422
    model_config = ConfigDict(populate_by_name=True)

    order_id: Optional[str] = Field(default=None, alias="orderId")
    payment_id: Optional[str] = Field(default=None, alias="paymentId")
    signature: Optional[str] = None


class PaymentVerificationResponse(BaseModel):
    valid: bool


#------------------------TOKEN------------------------
class TokenData(BaseModel):
    id: str
    role: Optional[str] = None
