"""Configuración de logging del servicio.

Todos los loggers cuelgan del espacio de nombres ``users_service`` para poder
ajustar su nivel sin tocar el de uvicorn o SQLAlchemy.
"""

import logging
import logging.config

ROOT_LOGGER = "users_service"
LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def configure_logging(level: str = "INFO") -> None:
    """Configura el handler de consola y el nivel de los loggers del servicio."""
    logging.config.dictConfig({
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "default": {"format": LOG_FORMAT},
        },
        "handlers": {
            "console": {
                "class": "logging.StreamHandler",
                "formatter": "default",
            },
        },
        "loggers": {
            ROOT_LOGGER: {
                "handlers": ["console"],
                "level": level.upper(),
                "propagate": True,
            },
        },
    })


def get_logger(name: str) -> logging.Logger:
    """Devuelve un logger hijo de ``users_service``."""
    return logging.getLogger(f"{ROOT_LOGGER}.{name}")
