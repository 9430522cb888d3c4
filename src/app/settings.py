"""
Módulo de configuración de la aplicación.

Este módulo utiliza Pydantic Settings para definir y cargar la configuración del servicio
a partir de variables de entorno (y de un fichero .env). Opcionalmente puede cargarse desde
un fichero YAML indicado en la variable CONFIG_FILE; los valores del YAML tienen prioridad
sobre las variables de entorno.
La instancia se construye una sola vez al arrancar (get_settings) y se pasa de forma explícita
a la aplicación y al proveedor de conexiones.
"""
import os
from functools import lru_cache
from typing import Optional

import yaml
from dotenv import load_dotenv
from pydantic_settings import BaseSettings
from sqlalchemy.engine import URL, make_url

load_dotenv()

# Nombre "corto" de driver -> driver asíncrono de SQLAlchemy
_ASYNC_DRIVERS = {
    "mysql": "mysql+asyncmy",
    "sqlite": "sqlite+aiosqlite",
}


class Settings(BaseSettings):
    """Configuración de la aplicación."""

    # General
    PROJECT_NAME: str = "users-crud-service"
    ENVIRONMENT: str = "development"
    ROOT_PATH: str = ""
    LOG_LEVEL: str = "INFO"

    # Server
    SERVER_HOST: str = "0.0.0.0"
    SERVER_PORT: int = 9000

    # Database
    DB_DRIVER: str = "mysql+asyncmy"
    DB_USER: str = "root"
    DB_PASSWORD: str = "password"
    DB_HOST: str = "localhost"
    DB_PORT: int = 3306
    DB_NAME: str = "users"
    DB_URL: Optional[str] = None

    # Pool
    DB_POOL_SIZE: int = 5
    DB_MAX_OVERFLOW: int = 10
    DB_POOL_PRE_PING: bool = True
    DB_ECHO: bool = False

    @classmethod
    def load_from_yaml(cls, path: str) -> "Settings":
        """
        Carga la configuración desde un archivo YAML.

        Las rutas relativas se resuelven respecto al directorio src/, que es donde
        vive el config.yaml del proyecto.
        """
        if os.path.isabs(path):
            config_path = path
        else:
            current_dir = os.path.dirname(os.path.abspath(__file__))
            config_path = os.path.join(current_dir, "..", path)
        if not os.path.exists(config_path):
            raise FileNotFoundError(f"Config file not found at {config_path}")
        with open(config_path, "r") as f:
            data = yaml.safe_load(f) or {}
        return cls(**data)

    def database_url(self) -> URL:
        """
        Devuelve la URL de conexión de SQLAlchemy.

        DB_URL, si está definida, sustituye al resto de parámetros DB_*.
        """
        if self.DB_URL:
            return make_url(self.DB_URL)
        return URL.create(
            drivername=_ASYNC_DRIVERS.get(self.DB_DRIVER, self.DB_DRIVER),
            username=self.DB_USER,
            password=self.DB_PASSWORD,
            host=self.DB_HOST,
            port=self.DB_PORT,
            database=self.DB_NAME,
        )


@lru_cache()
def get_settings() -> Settings:
    """Devuelve la configuración del proceso (YAML si CONFIG_FILE está definida)."""
    config_file = os.getenv("CONFIG_FILE")
    if config_file:
        return Settings.load_from_yaml(config_file)
    return Settings()
