"""
Servicios de aplicacion.

Contiene la logica de negocio reutilizable que no pertenece
a un caso de uso especifico.
"""
from fraud_sync.application.services.fraud_case_transformer import (
    FraudCaseTransformer,
    resolve_country_code,
)

__all__ = [
    "FraudCaseTransformer",
    "resolve_country_code",
]
