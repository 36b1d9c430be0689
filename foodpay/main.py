from contextlib import asynccontextmanager
from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from .config import load_settings
from .errors import InvalidAmountError, PaymentGatewayError
from .logging_config import configure_logging, get_logger
from .razorpay_service import PaymentService
from .routers import payment

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # ConfigurationError propagates here and aborts startup
    settings = load_settings()
    configure_logging(settings.log_level)
    app.state.settings = settings
    app.state.payment_service = PaymentService(settings)
    yield


def create_app() -> FastAPI:
    app = FastAPI(title="Foodpay", lifespan=lifespan)

    app.include_router(payment.router)

    @app.exception_handler(PaymentGatewayError)
    async def gateway_error_handler(request: Request, exc: PaymentGatewayError):
        # diagnostic already logged by the service; only the public message leaves
        return JSONResponse(status_code=status.HTTP_502_BAD_GATEWAY, content={"detail": exc.public_message})

    @app.exception_handler(InvalidAmountError)
    async def invalid_amount_handler(request: Request, exc: InvalidAmountError):
        return JSONResponse(status_code=422, content={"detail": str(exc)})

    @app.get("/")
    def root():
        return {"message": "Welcome to Foodpay"}

    @app.get("/health")
    def health():
        return {"status": "ok"}

    return app


app = create_app()
