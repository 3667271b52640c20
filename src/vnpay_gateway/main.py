"""
VNPay Gateway - FastAPI Application

Demo service exposing payment URL creation and return verification.
"""
from contextlib import asynccontextmanager
import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from . import __version__
from .config import settings
from .exceptions import VNPayError
from .api.payments import router as payments_router


# Configure logging
logging.basicConfig(
    level=getattr(logging, settings.log_level),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Log the effective gateway settings on startup (never the secret)."""
    logger.info("Starting VNPay gateway service...")
    logger.info(f"Payment gateway: {settings.payment_gateway}")
    logger.info(f"Merchant code configured: {bool(settings.tmn_code)}")
    if not settings.secure_secret:
        logger.warning("VNPAY_SECURE_SECRET is not set; signing requests will fail")

    yield

    logger.info("Shutting down VNPay gateway service...")


app = FastAPI(
    title="VNPay Gateway API",
    description="Signed VNPay payment URLs and return verification",
    version=__version__,
    lifespan=lifespan,
)


@app.exception_handler(VNPayError)
async def vnpay_error_handler(request: Request, exc: VNPayError):
    """
    Handle config and payload errors with the standard error body.

    Returns 400 Bad Request with VNPayError.to_dict().
    """
    logger.warning(
        f"VNPay error: {exc.error_code} - {exc.message}",
        extra={"details": exc.details}
    )

    return JSONResponse(
        status_code=400,
        content=exc.to_dict()
    )


@app.exception_handler(Exception)
async def general_error_handler(request: Request, exc: Exception):
    """Catch-all handler; logs the traceback, returns a generic message."""
    logger.error(f"Unexpected error: {str(exc)}", exc_info=True)

    return JSONResponse(
        status_code=500,
        content={
            "error_code": "internal_error",
            "message": "An unexpected error occurred",
            "details": {}
        }
    )


@app.get("/api/health")
async def health_check():
    return {
        "status": "healthy",
        "version": __version__,
        "payment_gateway": settings.payment_gateway,
    }


app.include_router(payments_router, prefix="/api/payments", tags=["Payments"])


def run() -> None:
    import uvicorn
    uvicorn.run(
        "vnpay_gateway.main:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower()
    )


if __name__ == "__main__":
    run()
