"""Excepciones HTTP del servicio. El detalle se devuelve como texto plano."""

from fastapi import HTTPException


class ServiceException(HTTPException):
    """Excepción base del servicio."""
    status_code = 500

    def __init__(self, detail: str, headers: dict | None = None):
        super().__init__(status_code=self.status_code, detail=detail, headers=headers)


class BadRequestException(ServiceException):
    """400 - entrada mal formada."""
    status_code = 400


class NotFoundException(ServiceException):
    """404 - el recurso no existe."""
    status_code = 404


class InternalServerErrorException(ServiceException):
    """500 - error de base de datos o de conexión."""
    status_code = 500
