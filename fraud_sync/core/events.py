"""
Arranque y cierre del worker.
"""
from loguru import logger

from fraud_sync import __version__
from fraud_sync.core.config import Settings, load_settings
from fraud_sync.core.logging import setup_logging
from fraud_sync.infrastructure.monitoring.error_reporter import ErrorReporter


def startup(error_reporter: ErrorReporter) -> Settings:
    """
    Carga la configuracion, configura logging e inicializa Sentry.

    Raises:
        ConfigurationError: variables faltantes o DSN invalido.
    """
    settings = load_settings()
    setup_logging(settings)

    logger.info(f"Iniciando fraud-sync v{__version__}")
    logger.info(f"Entorno: {settings.ENVIRONMENT}")
    if settings.SKIP_CASES_WITHOUT_COUNTRY:
        logger.warning("CONFIG: SKIP_CASES_WITHOUT_COUNTRY activo - se omiten fraud cases sin pais")

    error_reporter.init(
        settings.SENTRY_DSN,
        debug=settings.DEBUG,
        environment=settings.ENVIRONMENT,
    )
    return settings


def shutdown(error_reporter: ErrorReporter) -> None:
    """Vacia los eventos pendientes de Sentry antes de salir."""
    logger.info("Cerrando worker...")
    error_reporter.flush()
    logger.info("Worker cerrado")
