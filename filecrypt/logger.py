# --------------------------------------------------------------
# File: logger.py
# Description: Configuración de logging estructurado con structlog.
# --------------------------------------------------------------
"""Logger estructurado compartido por el paquete."""

from __future__ import annotations

import logging
import sys

import structlog

from filecrypt import config


def new_logger(level: str = config.LOG_LEVEL, format: str = config.LOG_FORMAT) -> structlog.stdlib.BoundLogger:
    """Configura structlog y devuelve un logger listo para usar.

    Args:
        level (str): Nivel mínimo ("DEBUG", "INFO", "WARNING", "ERROR").
        format (str): Formato de salida, "json" o "text".

    Returns:
        structlog.stdlib.BoundLogger: Logger configurado.

    """

    log_level = getattr(logging, level.upper(), logging.WARNING)
    logging.basicConfig(format="%(message)s", stream=sys.stderr, level=log_level)

    processors: list[structlog.types.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
    ]
    if format == "json":
        processors += [structlog.processors.StackInfoRenderer(), structlog.processors.JSONRenderer()]
    else:
        processors.append(structlog.dev.ConsoleRenderer())

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )
    return structlog.stdlib.get_logger("filecrypt")


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Devuelve un logger del paquete sin tocar la configuración global.

    Los eventos se envían al logger estándar "filecrypt"; el nivel, los
    handlers y los procesadores los decide la aplicación (ver :func:`new_logger`).
    """

    return structlog.wrap_logger(
        logging.getLogger("filecrypt"),
        wrapper_class=structlog.stdlib.BoundLogger,
    ).bind(module=name)
