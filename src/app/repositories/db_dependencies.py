"""Proporciona una dependencia para la base de datos"""

from typing import AsyncIterator

from fastapi import Request
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncConnection

from app.exceptions.types import InternalServerErrorException
from app.logger import get_logger

_logger = get_logger("db_dependencies")


async def get_db_connection(request: Request) -> AsyncIterator[AsyncConnection]:
    """
    Presta una conexión del pool durante la petición y la devuelve
    siempre al terminar, también si la petición falla.
    """
    database = request.app.state.database
    try:
        connection = await database.connect()
    except (SQLAlchemyError, OSError) as exc:
        _logger.error("DB error: %s", exc)
        raise InternalServerErrorException("Database connection error") from exc
    try:
        yield connection
    finally:
        await connection.close()
