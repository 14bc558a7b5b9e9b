"""
Excepciones de la aplicacion.
"""
from fraud_sync.shared.exceptions.base import AppException
from fraud_sync.shared.exceptions.sync import (
    ConfigurationError,
    DecodeError,
    FatalSyncError,
    FetchError,
    QueueConnectionError,
    SyncError,
    TransportError,
)

__all__ = [
    "AppException",
    "ConfigurationError",
    "DecodeError",
    "FatalSyncError",
    "FetchError",
    "QueueConnectionError",
    "SyncError",
    "TransportError",
]
