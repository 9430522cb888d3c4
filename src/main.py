"""
main.py
Este módulo define la aplicación FastAPI principal y configura las rutas,
los handlers de errores, el middleware de logging y el endpoint de salud.
Funciones:
    create_app(settings) -> FastAPI:
        Construye la aplicación con una configuración explícita.
    run() -> None:
        Arranca el servidor uvicorn con SERVER_HOST y SERVER_PORT.
Atributos:
    app (FastAPI): Instancia principal creada con get_settings().
"""

from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI

from app.exceptions.handlers import register_exception_handlers
from app.logger import configure_logging, get_logger
from app.middleware import LoggingMiddleware
from app.repositories.database import Database
from app.routes.users import router as users_router
from app.settings import Settings, get_settings

_logger = get_logger("main")


def create_app(settings: Settings | None = None) -> FastAPI:
    """Crea la aplicación y su proveedor de conexiones."""
    settings = settings or get_settings()
    configure_logging(settings.LOG_LEVEL)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        _logger.info("Starting %s (%s)", settings.PROJECT_NAME, settings.ENVIRONMENT)
        yield
        _logger.info("Shutting down %s...", settings.PROJECT_NAME)
        await app.state.database.dispose()

    app = FastAPI(title=settings.PROJECT_NAME, root_path=settings.ROOT_PATH, lifespan=lifespan)
    app.state.settings = settings
    app.state.database = Database.from_settings(settings)
    app.add_middleware(LoggingMiddleware)
    register_exception_handlers(app)
    app.include_router(users_router)

    @app.get("/health")
    async def health():
        """
        Health check endpoint para comprobar si la aplicación está en funcionamiento.
        """
        return {"message": f"{settings.PROJECT_NAME} is up!"}

    return app


app = create_app()


def run() -> None:
    """Punto de entrada del script users-service."""
    settings = app.state.settings
    uvicorn.run(app, host=settings.SERVER_HOST, port=settings.SERVER_PORT)


if __name__ == "__main__":
    run()
