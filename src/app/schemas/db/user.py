"""Modelos para validar datos de entrada y salida en la API."""


from pydantic import BaseModel, ConfigDict


class UserPayload(BaseModel):
    """Cuerpo de POST /users y PUT /users/{id}. Ambos campos son obligatorios."""
    name: str
    email: str


class User(BaseModel):
    """Modelo User para validar datos de salida en la API."""
    id: int
    name: str
    email: str

    model_config = ConfigDict(from_attributes=True)
