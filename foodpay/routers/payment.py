from fastapi import APIRouter, Depends, Request, status
from .. import schemas
from ..oauth2 import get_current_user
from ..razorpay_service import PaymentService
from ..logging_config import get_logger

router = APIRouter(prefix="/payments", tags=["Payments"])

logger = get_logger(__name__)


def get_payment_service(request: Request) -> PaymentService:
    return request.app.state.payment_service


# --- ACT 1: CREATE ORDER (Server-Side) ---
# Plain def: the gateway SDK call blocks, FastAPI runs it in the threadpool
@router.post("/create-order", status_code=status.HTTP_201_CREATED, response_model=schemas.OrderResponse)
def create_order(
    request: schemas.OrderCreate,
    service: PaymentService = Depends(get_payment_service),
    current_user: schemas.TokenData = Depends(get_current_user),
):
    logger.info("create_order_requested", user_id=current_user.id, amount=request.amount)

    # OrderCreationFailed / InvalidAmountError are mapped to responses in main.py
    order = service.create_order(request.amount)

    return {"order": order}


# --- ACT 2: VERIFY PAYMENT (after the client SDK finishes) ---
@router.post("/verify-payment", status_code=status.HTTP_200_OK, response_model=schemas.PaymentVerificationResponse)
def verify_payment(
    request: schemas.PaymentVerification,
    service: PaymentService = Depends(get_payment_service),
    current_user: schemas.TokenData = Depends(get_current_user),
):
    is_valid = service.verify_signature(request.order_id, request.payment_id, request.signature)
    return {"valid": is_valid}


@router.get("/orders/{order_id}", status_code=status.HTTP_200_OK, response_model=schemas.OrderResponse)
def get_order_status(
    order_id: str,
    service: PaymentService = Depends(get_payment_service),
    current_user: schemas.TokenData = Depends(get_current_user),
):
    return {"order": service.get_order_status(order_id)}
