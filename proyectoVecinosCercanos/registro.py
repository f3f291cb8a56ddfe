"""Configuración única del logging (consola + archivo rotativo)."""

import logging
import logging.config
import os

import config

LOG_FILE = os.path.join(config.LOG_DIR, "vecinos.log")


def construir_config(nivel: str = config.LOG_LEVEL, archivo: str = LOG_FILE) -> dict:
    return {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "standard": {
                "format": "%(asctime)s [%(levelname)s] %(name)s: %(message)s",
                "datefmt": "%Y-%m-%d %H:%M:%S",
            },
        },
        "handlers": {
            "console": {
                "class": "logging.StreamHandler",
                "formatter": "standard",
                "stream": "ext://sys.stderr",
            },
            "file": {
                "class": "logging.handlers.RotatingFileHandler",
                "formatter": "standard",
                "filename": archivo,
                "maxBytes": 5 * 1024 * 1024,
                "backupCount": 3,
                "encoding": "utf-8",
            },
        },
        "loggers": {
            "vecinos": {"handlers": ["console", "file"], "level": nivel, "propagate": False},
        },
    }


def configurar_registro(nivel: str = config.LOG_LEVEL, archivo: str = LOG_FILE) -> logging.Logger:
    """Aplica la configuración con dictConfig y devuelve el logger raíz del proyecto."""
    os.makedirs(os.path.dirname(archivo) or ".", exist_ok=True)
    logging.config.dictConfig(construir_config(nivel, archivo))
    return logging.getLogger("vecinos")
