"""
Casos de uso de la aplicacion.
"""
from .sync_use_cases import FraudCaseSyncUseCase, SyncResult

__all__ = ["FraudCaseSyncUseCase", "SyncResult"]
