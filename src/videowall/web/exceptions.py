"""Custom exceptions and error handlers for the REST API."""

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from videowall.application.config import ConfigError


class CalculationError(Exception):
    """Raised when a wall calculation cannot produce a result."""

    def __init__(self, errors: list[str]) -> None:
        self.errors = errors
        super().__init__(f"Calculation failed: {errors}")


class UnknownUnitError(Exception):
    """Raised when a requested unit is not supported."""

    def __init__(self, unit: str, available: list[str]) -> None:
        self.unit = unit
        self.available = available
        super().__init__(f"Unknown unit: {unit}. Available: {', '.join(available)}")


def register_exception_handlers(app: FastAPI) -> None:
    """Register custom exception handlers with the FastAPI app."""

    @app.exception_handler(CalculationError)
    async def calculation_error_handler(
        request: Request, exc: CalculationError
    ) -> JSONResponse:
        return JSONResponse(
            status_code=422,
            content={
                "error": "Calculation failed",
                "error_type": "calculation",
                "details": [{"message": e} for e in exc.errors],
            },
        )

    @app.exception_handler(ConfigError)
    async def config_error_handler(request: Request, exc: ConfigError) -> JSONResponse:
        return JSONResponse(
            status_code=422,
            content={
                "error": exc.message,
                "error_type": exc.error_type,
                "details": [
                    {"path": d.get("path"), "message": d.get("message")}
                    for d in exc.details
                ],
            },
        )

    @app.exception_handler(UnknownUnitError)
    async def unknown_unit_handler(
        request: Request, exc: UnknownUnitError
    ) -> JSONResponse:
        return JSONResponse(
            status_code=400,
            content={
                "error": str(exc),
                "error_type": "unknown_unit",
                "details": {"unit": exc.unit, "available": exc.available},
            },
        )
