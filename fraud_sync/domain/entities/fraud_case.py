"""
Fraud cases tal como los entrega CDQ y tal como los espera Catena-X.

Tipos puros (sin I/O). El mapeo desde JSON es permisivo: un campo ausente
o null toma su valor cero ("" o 0). Solo un tipo incompatible (p.ej.
`dateOfAttack` no numerico) se considera un payload malformado.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional


def _as_str(payload: Dict[str, Any], key: str) -> str:
    value = payload.get(key)
    if value is None:
        return ""
    if not isinstance(value, str):
        raise ValueError(f"'{key}' debe ser string, recibido {type(value).__name__}")
    return value


def _as_int(payload: Dict[str, Any], key: str) -> int:
    value = payload.get(key)
    if value is None:
        return 0
    # bool es subclase de int; JSON true/false no es un epoch valido
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValueError(f"'{key}' debe ser numerico, recibido {type(value).__name__}")
    if isinstance(value, float) and not value.is_integer():
        raise ValueError(f"'{key}' debe ser entero, recibido {value}")
    return int(value)


def _as_object(payload: Dict[str, Any], key: str) -> Dict[str, Any]:
    value = payload.get(key)
    if value is None:
        return {}
    if not isinstance(value, dict):
        raise ValueError(f"'{key}' debe ser objeto, recibido {type(value).__name__}")
    return value


@dataclass(frozen=True)
class BankAccount:
    """Cuenta bancaria anidada de un fraud case."""

    bank_country_code: str = ""

    @classmethod
    def from_dict(cls, payload: Dict[str, Any]) -> "BankAccount":
        return cls(bank_country_code=_as_str(payload, "bankCountryCode"))


@dataclass(frozen=True)
class FraudCase:
    """
    Fraud case de la API de CDQ.

    - cdl_id: identificador unico del registro en origen
    - date_of_attack: epoch del ataque
    - type: categoria del caso
    - business_partner_country_code: pais del business partner
    - bank_account: cuenta bancaria (con su propio pais)
    """

    cdl_id: str
    date_of_attack: int
    type: str
    business_partner_country_code: str = ""
    bank_account: BankAccount = field(default_factory=BankAccount)

    @classmethod
    def from_dict(cls, payload: Dict[str, Any]) -> "FraudCase":
        if not isinstance(payload, dict):
            raise ValueError(f"fraud case debe ser objeto, recibido {type(payload).__name__}")
        return cls(
            cdl_id=_as_str(payload, "cdlId"),
            date_of_attack=_as_int(payload, "dateOfAttack"),
            type=_as_str(payload, "type"),
            business_partner_country_code=_as_str(payload, "businessPartnerCountryCode"),
            bank_account=BankAccount.from_dict(_as_object(payload, "bankAccount")),
        )


@dataclass(frozen=True)
class FraudCasePage:
    """Una pagina de la API de CDQ (indexada desde 0)."""

    page: int
    number_of_pages: int
    fraud_cases: List[FraudCase] = field(default_factory=list)

    @classmethod
    def from_dict(cls, payload: Any) -> "FraudCasePage":
        if not isinstance(payload, dict):
            raise ValueError(f"la respuesta debe ser objeto, recibido {type(payload).__name__}")

        raw_cases: Optional[Any] = payload.get("fraudCases")
        if raw_cases is None:
            raw_cases = []
        if not isinstance(raw_cases, list):
            raise ValueError("'fraudCases' debe ser una lista")

        return cls(
            page=_as_int(payload, "page"),
            number_of_pages=_as_int(payload, "numberOfPages"),
            fraud_cases=[FraudCase.from_dict(raw) for raw in raw_cases],
        )


@dataclass(frozen=True)
class DestinationRecord:
    """Registro en el formato que acepta Catena-X."""

    cdl_id: str
    date_of_attack: int
    type: str
    country_code: str

    def to_payload(self) -> Dict[str, Any]:
        """Serializa al JSON del endpoint de upsert."""
        return {
            "cdlId": self.cdl_id,
            "dateOfAttack": self.date_of_attack,
            "type": self.type,
            "countryCode": self.country_code,
        }
