"""Error taxonomy of the marketplace and its mapping to HTTP responses.

Domain code raises; the web layer translates:

    ObjectNotFoundError     -> 404  (NotFound)
    AccessDenied            -> 403  (Forbidden)
    ValidationError         -> 400  (InvalidArgument)
    InvalidOperationError   -> 409  (InvalidState)
    NotAuthenticated        -> 401  (Unauthenticated)
    anything else           -> 500
"""

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from protean.exceptions import InvalidOperationError, ObjectNotFoundError, ValidationError
from protean.integrations.fastapi import register_exception_handlers

from marketplace.utils.logging import get_logger

logger = get_logger(__name__)


class AccessDenied(Exception):
    """The principal is not allowed to perform the operation."""

    def __init__(self, message: str = "Access denied"):
        super().__init__(message)
        self.message = message


class NotAuthenticated(Exception):
    """No principal, or the credentials presented could not be verified."""

    def __init__(self, message: str = "Not authenticated"):
        super().__init__(message)
        self.message = message


def _detail(exc: Exception):
    messages = getattr(exc, "messages", None)
    if messages:
        return messages
    return str(exc) or exc.__class__.__name__


async def _not_found(request: Request, exc: ObjectNotFoundError) -> JSONResponse:
    return JSONResponse(status_code=404, content={"detail": _detail(exc)})


async def _invalid_argument(request: Request, exc: ValidationError) -> JSONResponse:
    return JSONResponse(status_code=400, content={"detail": _detail(exc)})


async def _invalid_request(request: Request, exc: RequestValidationError) -> JSONResponse:
    return JSONResponse(status_code=400, content={"detail": jsonable_errors(exc)})


async def _invalid_state(request: Request, exc: InvalidOperationError) -> JSONResponse:
    return JSONResponse(status_code=409, content={"detail": _detail(exc)})


async def _forbidden(request: Request, exc: AccessDenied) -> JSONResponse:
    return JSONResponse(status_code=403, content={"detail": exc.message})


async def _unauthenticated(request: Request, exc: NotAuthenticated) -> JSONResponse:
    return JSONResponse(
        status_code=401,
        content={"detail": exc.message},
        headers={"WWW-Authenticate": "Bearer"},
    )


async def _unhandled(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("unhandled_error", path=request.url.path, method=request.method)
    return JSONResponse(status_code=500, content={"detail": "Internal server error"})


def jsonable_errors(exc: RequestValidationError) -> list[dict]:
    """Strip non-serializable context (e.g. exception instances) from pydantic errors."""
    return [{"loc": list(err.get("loc", ())), "msg": err.get("msg"), "type": err.get("type")} for err in exc.errors()]


def register_error_handlers(app: FastAPI) -> None:
    """Install the marketplace's exception-to-HTTP mapping on `app`."""
    register_exception_handlers(app)

    app.add_exception_handler(ObjectNotFoundError, _not_found)
    app.add_exception_handler(ValidationError, _invalid_argument)
    app.add_exception_handler(RequestValidationError, _invalid_request)
    app.add_exception_handler(InvalidOperationError, _invalid_state)
    app.add_exception_handler(AccessDenied, _forbidden)
    app.add_exception_handler(NotAuthenticated, _unauthenticated)
    app.add_exception_handler(Exception, _unhandled)
