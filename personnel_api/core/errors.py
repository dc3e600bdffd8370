import logging

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)


class RepositoryError(Exception):
    """Base for every failure the record repository reports to its callers."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class StoreConnectionError(RepositoryError):
    """The pool could not hand out a usable connection."""

    def __init__(self, driver_message: str):
        super().__init__(f"Database connection error: {driver_message}")


class StoreError(RepositoryError):
    """A statement failed in the store (bad SQL, constraint violation, network)."""

    def __init__(self, driver_message: str):
        super().__init__(f"Database error: {driver_message}")


class NotFound(RepositoryError):
    status_code = status.HTTP_404_NOT_FOUND

    def __init__(self, entity_label: str):
        super().__init__(f"{entity_label} not found")


class NoFieldsToUpdate(RepositoryError):
    status_code = status.HTTP_400_BAD_REQUEST

    def __init__(self):
        super().__init__("No fields to update")


class ValidationError(RepositoryError):
    status_code = status.HTTP_400_BAD_REQUEST


def repository_error_handler(request: Request, exc: RepositoryError) -> JSONResponse:
    if exc.status_code >= 500:
        logger.error(f"{request.method} {request.url.path} failed: {exc.message}")
    else:
        logger.info(f"{request.method} {request.url.path} rejected: {exc.message}")
    return JSONResponse(status_code=exc.status_code, content={"detail": exc.message})


def request_validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    # payload shape mismatches are client errors, reported as 400
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": jsonable_encoder(exc.errors())},
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(RepositoryError, repository_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_error_handler)
