"""Global exception handlers.

- ColecaoValidationError -> 422 with the violation list
- RequestValidationError -> 422 with the same body shape; pydantic length
  errors become the same max_length violations the validator reports
"""
import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from .validation import ColecaoValidationError, Violation, max_length_violation

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""

    @app.exception_handler(ColecaoValidationError)
    async def colecao_validation_error_handler(request: Request, exc: ColecaoValidationError):
        logger.warning(
            f"Validation error on {request.url.path}: {exc}",
            extra={"path": request.url.path},
        )
        return JSONResponse(
            status_code=422,
            content=exc.to_response(),
        )

    @app.exception_handler(RequestValidationError)
    async def request_validation_error_handler(request: Request, exc: RequestValidationError):
        error = ColecaoValidationError(_violations_from_request_errors(exc))
        logger.warning(
            f"Malformed request on {request.url.path}: {exc.errors()}",
            extra={"path": request.url.path},
        )
        return JSONResponse(
            status_code=422,
            content=error.to_response(),
        )


def _violations_from_request_errors(exc: RequestValidationError) -> list[Violation]:
    violations = []
    for e in exc.errors():
        loc = e.get("loc") or ("body",)
        field = ".".join(str(part) for part in loc[1:]) or None
        if e.get("type") == "string_too_long" and field:
            violations.append(max_length_violation(field, str(loc[0])))
            continue
        violations.append(Violation(
            field=field,
            rule=e.get("type", "invalid"),
            message=e.get("msg", "Invalid value"),
            location=str(loc[0]),
        ))
    return violations
