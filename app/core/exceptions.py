"""
Ошибки API и их преобразование в JSON.

Формат всех ошибок: {"error": "<сообщение>"}; для 500 и ошибок разбора тела
дополнительно передается "detail".
"""

import logging
from typing import Optional

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware

logger = logging.getLogger(__name__)


class WorkoutAPIError(Exception):
    status_code = status.HTTP_400_BAD_REQUEST
    message = "Bad request"

    def __init__(self, message: Optional[str] = None):
        if message is not None:
            self.message = message
        super().__init__(self.message)


class InvalidWorkoutIdError(WorkoutAPIError):
    message = "Invalid workout id"


class MissingFieldsError(WorkoutAPIError):
    message = "workout_date, workout_type, duration_minutes, and active_calories are required"


class EmptyUpdateError(WorkoutAPIError):
    message = "No fields provided to update"


class WorkoutNotFoundError(WorkoutAPIError):
    status_code = status.HTTP_404_NOT_FOUND
    message = "Workout not found"


class NoWorkoutsError(WorkoutAPIError):
    status_code = status.HTTP_404_NOT_FOUND
    message = "No workouts found"


async def workout_api_error_handler(request: Request, exc: WorkoutAPIError) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content={"error": exc.message})


async def request_validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Тело неверного типа - ошибка клиента (400), а не 422."""
    errors = [
        {
            "field": ".".join(str(part) for part in error["loc"]),
            "message": error["msg"],
        }
        for error in exc.errors()
    ]
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"error": "Invalid request body", "detail": errors},
    )


class ErrorHandlingMiddleware(BaseHTTPMiddleware):
    """Последний рубеж: любое необработанное исключение -> 500 без стектрейса в ответе."""

    async def dispatch(self, request, call_next):
        try:
            return await call_next(request)
        except Exception as e:
            logger.exception(f"Необработанная ошибка в {request.method} {request.url.path}: {e}")
            return JSONResponse(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                content={"error": "Internal Server Error", "detail": str(e)},
            )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(WorkoutAPIError, workout_api_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_error_handler)
    app.add_middleware(ErrorHandlingMiddleware)
