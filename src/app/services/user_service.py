"""Lógica de negocio de usuarios: traduce los resultados del repositorio
   a las excepciones HTTP del servicio."""

from typing import List

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncConnection

from app.exceptions.types import InternalServerErrorException, NotFoundException
from app.logger import get_logger
from app.repositories import user_repository
from app.schemas.db.user import User, UserPayload

USER_NOT_FOUND = "User not found"

_logger = get_logger("user_service")


class UserService(object):
    """
    Clase de servicio para el CRUD de usuarios.

    El detalle de los errores de base de datos se registra en el log y nunca
    se devuelve al cliente.
    """

    @staticmethod
    async def create(conn: AsyncConnection, payload: UserPayload) -> int:
        """Crea el usuario y devuelve su id."""
        try:
            return await user_repository.create_user(conn, payload.name, payload.email)
        except SQLAlchemyError as exc:
            _logger.error("Create error: %s", exc)
            raise InternalServerErrorException("Error creating user") from exc

    @staticmethod
    async def get_all(conn: AsyncConnection) -> List[User]:
        try:
            return await user_repository.get_all_users(conn)
        except SQLAlchemyError as exc:
            _logger.error("Fetch error: %s", exc)
            raise InternalServerErrorException("Error fetching users") from exc

    @staticmethod
    async def get(conn: AsyncConnection, user_id: int) -> User:
        try:
            user = await user_repository.get_user(conn, user_id)
        except SQLAlchemyError as exc:
            _logger.error("Get error: %s", exc)
            raise InternalServerErrorException("Error retrieving user") from exc
        if user is None:
            raise NotFoundException(USER_NOT_FOUND)
        return user

    @staticmethod
    async def update(conn: AsyncConnection, user_id: int, payload: UserPayload) -> None:
        """Sustituye name y email; 404 si no se ha modificado ninguna fila."""
        try:
            found = await user_repository.update_user(conn, user_id, payload.name, payload.email)
        except SQLAlchemyError as exc:
            _logger.error("Update error: %s", exc)
            raise InternalServerErrorException("Error updating user") from exc
        if not found:
            raise NotFoundException(USER_NOT_FOUND)

    @staticmethod
    async def delete(conn: AsyncConnection, user_id: int) -> None:
        try:
            found = await user_repository.delete_user(conn, user_id)
        except SQLAlchemyError as exc:
            _logger.error("Delete error: %s", exc)
            raise InternalServerErrorException("Error deleting user") from exc
        if not found:
            raise NotFoundException(USER_NOT_FOUND)
