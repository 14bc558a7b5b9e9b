"""
Reporte de errores a Sentry.

Fire-and-forget: reportar nunca cambia el flujo del worker. Si Sentry
falla, se registra en el log y se sigue.
"""
from typing import Optional

import sentry_sdk
from loguru import logger

from fraud_sync.shared.exceptions.sync import ConfigurationError


class ErrorReporter:
    """Envoltorio minimo sobre sentry_sdk."""

    def __init__(self) -> None:
        self._enabled = False

    def init(self, dsn: str, *, debug: bool = False, environment: Optional[str] = None) -> None:
        """
        Inicializa el cliente de Sentry.

        Raises:
            ConfigurationError: si el DSN no es valido.
        """
        try:
            sentry_sdk.init(dsn=dsn, debug=debug, environment=environment)
        except Exception as e:
            raise ConfigurationError(f"No se pudo inicializar Sentry: {e}") from e
        self._enabled = True
        logger.info("Sentry inicializado")

    def capture(self, exc: BaseException) -> None:
        if not self._enabled:
            return
        try:
            sentry_sdk.capture_exception(exc)
        except Exception as e:
            logger.warning(f"No se pudo reportar el error a Sentry: {e}")

    def flush(self, timeout_s: float = 2.0) -> None:
        if not self._enabled:
            return
        try:
            sentry_sdk.flush(timeout=timeout_s)
        except Exception as e:
            logger.warning(f"No se pudo vaciar la cola de Sentry: {e}")
