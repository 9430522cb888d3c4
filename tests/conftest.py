"""
Configuración de pruebas para FastAPI.

Cada test trabaja contra una base de datos SQLite (aiosqlite) nueva en
tmp_path, con la tabla users creada a partir del modelo.
"""

import os

# main crea la aplicación al importarse; que no apunte a MySQL
os.environ.setdefault("DB_URL", "sqlite+aiosqlite:///:memory:")

import pytest
import pytest_asyncio
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.engine import make_url

from app.models.user_model import Base
from app.repositories.database import Database
from app.settings import Settings
from main import create_app


@pytest.fixture
def db_url(tmp_path):
    """URL de una base de datos con la tabla users vacía."""
    path = tmp_path / "users.db"
    engine = create_engine(f"sqlite:///{path}")
    Base.metadata.create_all(engine)
    engine.dispose()
    return f"sqlite+aiosqlite:///{path}"


@pytest.fixture
def test_settings(db_url):
    return Settings(DB_URL=db_url, LOG_LEVEL="DEBUG")


@pytest.fixture
def client(test_settings):
    """
    Cliente contra una aplicación nueva por test.
    """
    app = create_app(test_settings)
    with TestClient(app) as c:
        yield c


@pytest_asyncio.fixture
async def database(db_url):
    database = Database(make_url(db_url))
    yield database
    await database.dispose()


@pytest_asyncio.fixture
async def conn(database):
    """Conexión prestada por el pool durante el test."""
    connection = await database.connect()
    yield connection
    await connection.close()
