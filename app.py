from __future__ import annotations

import argparse
import logging
import os
from logging.handlers import RotatingFileHandler
from typing import Optional

import uvicorn
from fastapi import APIRouter, Depends, FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from auth import AllowAllAuthorizer, JwtAuthorizer
from config import Settings, getSettings
from errors import NotFoundError, ValidationError
from models import ErrorResponse, PointsResponse, ProcessResponse, Receipt
from processor import ReceiptProcessor
from store import ResultStore

logger = logging.getLogger("ReceiptLogger")

router = APIRouter()


def setupLogging(settings: Settings) -> logging.Logger:
    """Attach the rotating file handler to ``ReceiptLogger`` once per process."""
    logger.setLevel(settings.LOG_LEVEL)
    if any(isinstance(h, RotatingFileHandler) for h in logger.handlers):
        return logger

    logDir = os.path.dirname(settings.LOG_FILE_PATH)
    if logDir:
        os.makedirs(logDir, exist_ok=True)

    handler = RotatingFileHandler(
        filename=settings.LOG_FILE_PATH,
        maxBytes=settings.LOG_MAX_BYTES,
        backupCount=settings.LOG_BACKUP_COUNT,
    )
    handler.setFormatter(logging.Formatter("%(message)s"))
    logger.addHandler(handler)
    return logger


PROTECTED_PREFIX = "/receipts/"


async def authorizeRequest(request: Request, callNext):
    """
    Reject unauthorized calls to the receipt endpoints before the body is read.

    Args:
        request: The incoming request.
        callNext: The rest of the middleware stack.

    Returns:
        Response: 401 for an unauthorized caller, otherwise the endpoint's response.
    """
    if request.url.path.startswith(PROTECTED_PREFIX) and not request.app.state.authorizer.isAuthorized(request):
        logger.error("Unauthorized request to %s", request.url.path)
        return JSONResponse(status_code=401, content={"detail": "Unauthorized"})
    return await callNext(request)


def getProcessor(request: Request) -> ReceiptProcessor:
    return request.app.state.processor


async def customRequestValidationExceptionHandler(request: Request, exc: RequestValidationError):
    """
    Custom handler for malformed bodies (bad JSON, non-string fields).

    Args:
        request: The incoming request.
        exc: The exception raised.

    Returns:
        JSONResponse: The error response.
    """
    logger.error("Validation error: %s", exc)
    return JSONResponse(
        status_code=400,
        content={"detail": "Invalid structure or missing fields in the input."},
    )


async def receiptValidationExceptionHandler(request: Request, exc: ValidationError):
    logger.error("Receipt validation failed: %s", exc.reason)
    return JSONResponse(status_code=400, content={"detail": exc.reason})


async def notFoundExceptionHandler(request: Request, exc: NotFoundError):
    logger.error("Receipt not found with ID: %s", exc.receiptId)
    return JSONResponse(status_code=404, content={"detail": "No receipt found for that ID"})


@router.post(
    "/receipts/process",
    response_model=ProcessResponse,
    responses={400: {"model": ErrorResponse}, 401: {"model": ErrorResponse}},
)
async def processReceipt(
    receipt: Receipt, processor: ReceiptProcessor = Depends(getProcessor)
) -> ProcessResponse:
    """
    Validate and score a receipt, returning the ID its points are stored under.

    Args:
        receipt (Receipt): The receipt data to be processed.

    Returns:
        ProcessResponse: A response containing the unique receipt ID.
    """
    logger.info("Received receipt: %s", receipt.model_dump())
    return ProcessResponse(id=processor.submit(receipt))


@router.get(
    "/receipts/{receiptId}/points",
    response_model=PointsResponse,
    responses={401: {"model": ErrorResponse}, 404: {"model": ErrorResponse}},
)
async def getPoints(receiptId: str, processor: ReceiptProcessor = Depends(getProcessor)) -> PointsResponse:
    """
    Get the points for a specific receipt based on the receipt ID.

    Args:
        receiptId (str): The unique ID of the receipt.

    Returns:
        PointsResponse: A response model containing the calculated points.
    """
    return PointsResponse(points=processor.getPoints(receiptId))


def createApp(
    processor: Optional[ReceiptProcessor] = None,
    authorizer=None,
    settings: Optional[Settings] = None,
) -> FastAPI:
    """
    Build the receipt processor API.

    Args:
        processor (ReceiptProcessor | None): Defaults to one backed by a new, empty store.
        authorizer: Anything with ``isAuthorized(request) -> bool``. Defaults to
            ``JwtAuthorizer`` when a secret is configured, otherwise ``AllowAllAuthorizer``.
        settings (Settings | None): Defaults to the environment settings.
    """
    settings = settings or getSettings()
    setupLogging(settings)

    if authorizer is None:
        if settings.JWT_SECRET:
            authorizer = JwtAuthorizer(settings.JWT_SECRET)
        else:
            logger.warning("RECEIPT_JWT_SECRET is not set; authorization is disabled")
            authorizer = AllowAllAuthorizer()

    application = FastAPI(title="Receipt Processor", version="1.0.0")
    application.state.processor = processor or ReceiptProcessor(ResultStore())
    application.state.authorizer = authorizer

    application.middleware("http")(authorizeRequest)
    application.add_exception_handler(RequestValidationError, customRequestValidationExceptionHandler)
    application.add_exception_handler(ValidationError, receiptValidationExceptionHandler)
    application.add_exception_handler(NotFoundError, notFoundExceptionHandler)
    application.include_router(router)
    return application


app = createApp()


def main():
    parser = argparse.ArgumentParser(description="Run the receipt processor API.")
    parser.add_argument("--host", default="0.0.0.0")
    parser.add_argument("--port", type=int, default=8080)
    args = parser.parse_args()

    logger.info("Server starting on port %d...", args.port)
    uvicorn.run(app, host=args.host, port=args.port)


if __name__ == "__main__":
    main()
