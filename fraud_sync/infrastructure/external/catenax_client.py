"""
Cliente de la API de fraud cases de Catena-X (destino).

- PUT: upsert de un lote; responde 200 con {"updatedAt": RFC3339}
- DELETE ?latest=RFC3339: borra lo actualizado antes de `latest`; responde 204

Cualquier otro status es FatalSyncError: el worker se detiene.
"""
from __future__ import annotations

from datetime import datetime
from typing import Sequence

from loguru import logger

from fraud_sync.domain.entities.fraud_case import DestinationRecord
from fraud_sync.infrastructure.external.http_client import HttpClient
from fraud_sync.shared.exceptions.sync import DecodeError, FatalSyncError
from fraud_sync.shared.utils.datetime_utils import DateTimeUtils


class CatenaxClient:
    """Escribe fraud cases en Catena-X con la API key estatica del worker."""

    def __init__(self, http: HttpClient, *, base_url: str, api_key: str) -> None:
        self._http = http
        self._url = base_url
        self._api_key = api_key

    def upsert_fraud_cases(self, records: Sequence[DestinationRecord]) -> datetime:
        """
        Publica un lote de registros.

        Returns:
            datetime: `updatedAt` devuelto por la API.

        Raises:
            TransportError: fallo de red (acotado al mensaje).
            FatalSyncError: status distinto de 200.
            DecodeError: body 200 sin `updatedAt` RFC3339 valido.
        """
        headers = {
            "X-API-KEY": self._api_key,
            "Content-Type": "application/json",
        }
        body = [r.to_payload() for r in records]

        resp = self._http.request("PUT", self._url, headers=headers, json_body=body)
        logger.info(f"Response: {resp.text}")

        if resp.status_code != 200:
            raise FatalSyncError(
                f"Upsert request failed with status code {resp.status_code}",
                status_code=resp.status_code,
            )

        payload = resp.json()
        raw_updated_at = payload.get("updatedAt") if isinstance(payload, dict) else None
        if not isinstance(raw_updated_at, str):
            raise DecodeError("La respuesta del upsert no contiene 'updatedAt'", body=resp.text)

        try:
            return DateTimeUtils.parse_rfc3339(raw_updated_at)
        except ValueError as e:
            raise DecodeError(f"'updatedAt' no es RFC3339: {raw_updated_at}", body=resp.text) from e

    def delete_fraud_cases(self, latest: datetime) -> None:
        """
        Borra los registros actualizados antes de `latest`.

        Raises:
            TransportError: fallo de red (acotado al mensaje).
            FatalSyncError: status distinto de 204.
        """
        headers = {"X-API-KEY": self._api_key}
        params = {"latest": DateTimeUtils.to_rfc3339(latest)}

        resp = self._http.request("DELETE", self._url, headers=headers, params=params)
        if resp.body:
            logger.info(f"Response: {resp.text}")

        if resp.status_code != 204:
            raise FatalSyncError(
                f"Delete request failed with status code {resp.status_code}",
                status_code=resp.status_code,
            )
