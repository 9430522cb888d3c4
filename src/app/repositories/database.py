"""Proveedor de conexiones. Mantiene el engine asíncrono (y su pool) durante
 toda la vida de la aplicación y presta una conexión por petición."""

from sqlalchemy.engine import URL
from sqlalchemy.ext.asyncio import AsyncConnection, AsyncEngine, create_async_engine

from app.logger import get_logger
from app.settings import Settings

_logger = get_logger("database")


class Database(object):
    """Envoltorio del AsyncEngine de SQLAlchemy."""

    def __init__(self, url: URL, pool_size: int = 5, max_overflow: int = 10,
                 pool_pre_ping: bool = True, echo: bool = False):
        self.url = url
        options = {"pool_pre_ping": pool_pre_ping, "echo": echo}
        # SQLite usa el pool por defecto del dialecto, que no admite tamaño
        if url.get_backend_name() != "sqlite":
            options.update(pool_size=pool_size, max_overflow=max_overflow)
        self.engine: AsyncEngine = create_async_engine(url, **options)

    @classmethod
    def from_settings(cls, settings: Settings) -> "Database":
        """Crea el proveedor a partir de la configuración de la aplicación."""
        return cls(
            settings.database_url(),
            pool_size=settings.DB_POOL_SIZE,
            max_overflow=settings.DB_MAX_OVERFLOW,
            pool_pre_ping=settings.DB_POOL_PRE_PING,
            echo=settings.DB_ECHO,
        )

    async def connect(self) -> AsyncConnection:
        """
        Toma una conexión del pool.

        Lanza el error de conexión subyacente si la base de datos no está
        disponible. El llamante debe cerrar la conexión.
        """
        connection = self.engine.connect()
        await connection.start()
        return connection

    async def dispose(self) -> None:
        """Cierra todas las conexiones del pool."""
        _logger.info("Closing connection pool for %s", self.url.render_as_string(hide_password=True))
        await self.engine.dispose()
