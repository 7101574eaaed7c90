"""Maps construction, execution and HTTP errors to ``{"status", "message"}`` responses."""
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from starlette.exceptions import HTTPException as StarletteHTTPException

from backend.app.core.logging import logger
from backend.app.db.errors import ConstraintKind, classify_integrity_error
from backend.app.queries.assembler import ConstructionError, EmptyAssignmentSet, InvalidPagination

# Driver messages carry the SQL text and bound values; they only go to the log.
INTERNAL_ERROR = "Internal Server Error"


def error_response(status: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status, content={"status": status, "message": message})


def _validation_message(exc: RequestValidationError) -> str:
    parts = []
    for error in exc.errors():
        loc = ".".join(str(p) for p in error.get("loc", ()) if p not in {"body", "query", "path"})
        parts.append(f"{loc}: {error.get('msg')}" if loc else str(error.get("msg")))
    return "; ".join(parts) or "Invalid request"


def register_exception_handlers(app: FastAPI) -> None:
    @app.exception_handler(StarletteHTTPException)
    async def http_error(request: Request, exc: StarletteHTTPException):
        return error_response(exc.status_code, str(exc.detail))

    @app.exception_handler(RequestValidationError)
    async def validation_error(request: Request, exc: RequestValidationError):
        return error_response(400, _validation_message(exc))

    @app.exception_handler(EmptyAssignmentSet)
    async def empty_update(request: Request, exc: EmptyAssignmentSet):
        return error_response(400, "At least one field must be provided")

    @app.exception_handler(InvalidPagination)
    async def invalid_pagination(request: Request, exc: InvalidPagination):
        return error_response(400, str(exc))

    @app.exception_handler(ConstructionError)
    async def construction_error(request: Request, exc: ConstructionError):
        logger.exception("Failed to assemble query for %s %s", request.method, request.url.path)
        return error_response(500, INTERNAL_ERROR)

    @app.exception_handler(IntegrityError)
    async def integrity_error(request: Request, exc: IntegrityError):
        kind = classify_integrity_error(exc)
        if kind is ConstraintKind.UNIQUE:
            return error_response(409, "A record with the same unique value already exists")
        logger.exception("Integrity error (%s) on %s %s", kind.value, request.method, request.url.path)
        return error_response(500, INTERNAL_ERROR)

    @app.exception_handler(SQLAlchemyError)
    async def database_error(request: Request, exc: SQLAlchemyError):
        logger.exception("Database error on %s %s", request.method, request.url.path)
        return error_response(500, INTERNAL_ERROR)
