"""
Entidades del dominio.
"""
from fraud_sync.domain.entities.fraud_case import (
    BankAccount,
    DestinationRecord,
    FraudCase,
    FraudCasePage,
)

__all__ = [
    "BankAccount",
    "DestinationRecord",
    "FraudCase",
    "FraudCasePage",
]
