"""Repositorio de usuarios. Cada función ejecuta una única sentencia SQL
 parametrizada sobre la tabla users. Los errores de base de datos se
 propagan sin modificar."""

from typing import List

from sqlalchemy import delete, insert, select, update
from sqlalchemy.ext.asyncio import AsyncConnection

from app.models.user_model import UserTable
from app.schemas.db.user import User

_COLUMNS = (UserTable.id, UserTable.name, UserTable.email)


# -----Funciones para interactuar con la bd----------------------------------------------------------


async def create_user(conn: AsyncConnection, name: str, email: str) -> int:
    """Inserta un usuario y devuelve el id asignado por la base de datos."""
    result = await conn.execute(insert(UserTable).values(name=name, email=email))
    await conn.commit()
    return result.inserted_primary_key[0]


async def get_all_users(conn: AsyncConnection) -> List[User]:
    """Devuelve todos los usuarios, en el orden en que los devuelva la base de datos."""
    result = await conn.execute(select(*_COLUMNS))
    return [User.model_validate(row) for row in result]


async def get_user(conn: AsyncConnection, user_id: int) -> User | None:
    """Devuelve un usuario por su ID, o None si no existe."""
    result = await conn.execute(select(*_COLUMNS).where(UserTable.id == user_id))
    row = result.first()
    return User.model_validate(row) if row is not None else None


async def update_user(conn: AsyncConnection, user_id: int, name: str, email: str) -> bool:
    """Sustituye name y email. Devuelve False si el id no existe."""
    result = await conn.execute(
        update(UserTable).where(UserTable.id == user_id).values(name=name, email=email)
    )
    await conn.commit()
    return result.rowcount > 0


async def delete_user(conn: AsyncConnection, user_id: int) -> bool:
    """Borra un usuario. Devuelve False si el id no existe."""
    result = await conn.execute(delete(UserTable).where(UserTable.id == user_id))
    await conn.commit()
    return result.rowcount > 0
