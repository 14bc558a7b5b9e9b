"""
Transformador de fraud cases CDQ -> registros Catena-X.

Regla de pais: se prefiere el pais de la cuenta bancaria; si viene vacio
se usa el del business partner. Si ambos estan vacios el registro se
envia igual, con countryCode "" (comportamiento activo).

`skip_without_country` habilita la regla alternativa que descarta esos
registros. Esta apagada por defecto (SKIP_CASES_WITHOUT_COUNTRY).
"""
from __future__ import annotations

from typing import Iterable, List

from loguru import logger

from fraud_sync.domain.entities.fraud_case import DestinationRecord, FraudCase


def resolve_country_code(fraud_case: FraudCase) -> str:
    """
    Resuelve el pais de un fraud case.

    Returns:
        str: bankCountryCode si no esta vacio, si no businessPartnerCountryCode
        (que puede ser "").
    """
    country_code = fraud_case.bank_account.bank_country_code
    if not country_code:
        country_code = fraud_case.business_partner_country_code
    return country_code


class FraudCaseTransformer:
    """Mapea fraud cases a DestinationRecord conservando el orden de entrada."""

    def __init__(self, *, skip_without_country: bool = False) -> None:
        self._skip_without_country = skip_without_country

    def transform(self, fraud_cases: Iterable[FraudCase]) -> List[DestinationRecord]:
        records: List[DestinationRecord] = []
        for fc in fraud_cases:
            country_code = resolve_country_code(fc)
            if not country_code and self._skip_without_country:
                logger.info(f"Omitiendo fraud case {fc.cdl_id}: no tiene country code")
                continue

            records.append(
                DestinationRecord(
                    cdl_id=fc.cdl_id,
                    date_of_attack=fc.date_of_attack,
                    type=fc.type,
                    country_code=country_code,
                )
            )
        return records
