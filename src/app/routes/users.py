"""
Router público con el CRUD de usuarios:
1. obtiene una conexión del pool
2. valida id y cuerpo
3. delega en UserService y devuelve JSON o texto plano
"""

from typing import List

from fastapi import APIRouter, Depends, Path, Request, Response
from fastapi.responses import PlainTextResponse
from pydantic import ValidationError
from sqlalchemy.ext.asyncio import AsyncConnection

from app.exceptions.handlers import INVALID_BODY, INVALID_JSON
from app.exceptions.types import BadRequestException
from app.repositories.db_dependencies import get_db_connection
from app.schemas.db.user import User, UserPayload
from app.services.user_service import UserService

router = APIRouter(prefix="/users", tags=["Users"])

# Rango de un entero de 64 bits con signo
MIN_USER_ID = -(2 ** 63)
MAX_USER_ID = 2 ** 63 - 1

_PAYLOAD_BODY = {
    "requestBody": {
        "required": True,
        "content": {"application/json": {"schema": UserPayload.model_json_schema()}},
    }
}


async def read_payload(request: Request) -> UserPayload:
    """
    Decodifica el cuerpo como JSON sea cual sea su Content-Type.

    Se llama desde el handler, una vez obtenida la conexión.
    """
    try:
        return UserPayload.model_validate_json(await request.body())
    except ValidationError as exc:
        if any(error["type"] == "json_invalid" for error in exc.errors()):
            raise BadRequestException(INVALID_JSON) from exc
        raise BadRequestException(INVALID_BODY) from exc


@router.post("", status_code=201, response_class=PlainTextResponse, openapi_extra=_PAYLOAD_BODY)
async def create_user(request: Request,
                      response: Response,
                      conn: AsyncConnection = Depends(get_db_connection)):
    """Crea un usuario. La cabecera Location apunta al nuevo recurso."""
    payload = await read_payload(request)
    user_id = await UserService.create(conn, payload)
    response.headers["Location"] = f"{router.prefix}/{user_id}"
    return "User created successfully"


@router.get("", response_model=List[User])
async def get_all_users(conn: AsyncConnection = Depends(get_db_connection)):
    return await UserService.get_all(conn)


@router.get("/{user_id}", response_model=User)
async def get_user(user_id: int = Path(ge=MIN_USER_ID, le=MAX_USER_ID),
                   conn: AsyncConnection = Depends(get_db_connection)):
    return await UserService.get(conn, user_id)


@router.put("/{user_id}", response_class=PlainTextResponse, openapi_extra=_PAYLOAD_BODY)
async def update_user(request: Request,
                      user_id: int = Path(ge=MIN_USER_ID, le=MAX_USER_ID),
                      conn: AsyncConnection = Depends(get_db_connection)):
    """Sustitución completa de name y email."""
    payload = await read_payload(request)
    await UserService.update(conn, user_id, payload)
    return "User updated successfully"


@router.delete("/{user_id}", response_class=PlainTextResponse)
async def delete_user(user_id: int = Path(ge=MIN_USER_ID, le=MAX_USER_ID),
                      conn: AsyncConnection = Depends(get_db_connection)):
    await UserService.delete(conn, user_id)
    return "User deleted successfully"
