"""
Handlers de excepciones de la aplicación.

Todas las respuestas de error son texto plano con el código HTTP
correspondiente; no se devuelven códigos de error estructurados.
"""

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import PlainTextResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

INVALID_USER_ID = "Invalid user ID"
INVALID_JSON = "Invalid JSON"
INVALID_BODY = "Invalid request body"


def validation_error_message(exc: RequestValidationError) -> str:
    """
    Traduce los errores de validación de FastAPI al mensaje que ve el cliente.

    FastAPI solo valida el id de la ruta; el cuerpo lo decodifica cada handler.
    """
    if any(error["loc"][0] == "path" for error in exc.errors()):
        return INVALID_USER_ID
    return INVALID_BODY


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> PlainTextResponse:
    return PlainTextResponse(str(exc.detail), status_code=exc.status_code, headers=exc.headers)


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> PlainTextResponse:
    return PlainTextResponse(validation_error_message(exc), status_code=400)


def register_exception_handlers(app: FastAPI) -> None:
    """Registra los handlers en la aplicación."""
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
