"""
Excepciones del pipeline de sincronizacion.

Dos severidades:
- SyncError y derivadas: afectan solo al mensaje en curso. El mensaje se
  rechaza (sin requeue) y el worker sigue con el siguiente.
- FatalSyncError y derivadas: la API respondio algo que no deberia
  (status inesperado) o la cola no esta disponible. El worker deja de
  consumir y el proceso termina.
"""
from typing import Optional

from fraud_sync.shared.exceptions.base import AppException


class ConfigurationError(AppException):
    """Configuracion de arranque invalida o incompleta."""

    def __init__(self, message: str, missing: Optional[list[str]] = None):
        details = {"missing": missing} if missing else None
        super().__init__(
            message=message,
            error_code="CONFIGURATION_ERROR",
            details=details
        )
        self.missing = missing or []


class SyncError(AppException):
    """Excepcion base para errores acotados a un mensaje."""

    def __init__(self, message: str, error_code: str = "SYNC_ERROR", details=None):
        super().__init__(message=message, error_code=error_code, details=details)


class TransportError(SyncError):
    """Fallo de conexion o timeout al hablar con una API."""

    def __init__(self, method: str, url: str, reason: str):
        super().__init__(
            message=f"{method} {url} fallo: {reason}",
            error_code="TRANSPORT_ERROR",
            details={"method": method, "url": url}
        )


class DecodeError(SyncError):
    """El body de la respuesta no es JSON o no tiene la forma esperada."""

    def __init__(self, message: str, body: str = ""):
        super().__init__(
            message=message,
            error_code="DECODE_ERROR",
            details={"body": body[:500]} if body else None
        )


class FetchError(SyncError):
    """No se pudo obtener una pagina de fraud cases de la API origen."""

    def __init__(self, page: int, reason: str):
        super().__init__(
            message=f"Error al obtener la pagina {page} de fraud cases: {reason}",
            error_code="FETCH_ERROR",
            details={"page": page}
        )
        self.page = page


class FatalSyncError(AppException):
    """
    Violacion de invariante: status HTTP inesperado en upsert/delete.

    No se descarta como un error de mensaje: indica que la API cambio o
    esta rota, asi que el worker debe detenerse.
    """

    def __init__(self, message: str, status_code: Optional[int] = None, error_code: str = "FATAL_SYNC_ERROR"):
        super().__init__(
            message=message,
            error_code=error_code,
            details={"status_code": status_code} if status_code is not None else None
        )
        self.status_code = status_code


class QueueConnectionError(FatalSyncError):
    """No se pudo conectar a RabbitMQ, abrir el canal o registrar el consumer."""

    def __init__(self, message: str):
        super().__init__(message=message, error_code="QUEUE_CONNECTION_ERROR")
