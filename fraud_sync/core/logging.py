"""
Configuracion de loguru para el worker.
"""
import sys

from loguru import logger

from fraud_sync.core.config import Settings

LOG_FORMAT = "{time:YYYY-MM-DD HH:mm:ss.SSS} | {level: <8} | {name}:{function} | {message}"


def setup_logging(settings: Settings) -> None:
    """
    Reemplaza el sink por defecto de loguru.

    - stderr siempre, con el nivel efectivo (DEBUG si DEBUG=true)
    - archivo con rotacion si LOG_FILE esta definido
    """
    level = settings.effective_log_level

    logger.remove()
    logger.add(sys.stderr, format=LOG_FORMAT, level=level)

    if settings.LOG_FILE:
        logger.add(
            settings.LOG_FILE,
            format=LOG_FORMAT,
            rotation="500 MB",
            retention="10 days",
            level=level,
        )
