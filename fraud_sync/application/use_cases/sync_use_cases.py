"""
Sincronizacion de fraud cases de una credencial: CDQ -> Catena-X.

Diseño (resumen):
- Recorre todas las paginas de CDQ de la credencial (0 .. numberOfPages-1)
- Cada pagina se transforma y se publica (upsert) en Catena-X
- Se guarda el `updatedAt` mas antiguo devuelto por los upserts (cutoff)
- Al terminar todas las paginas, borra en Catena-X todo lo actualizado
  antes del cutoff: lo que no volvio a llegar se asume borrado en origen

Si una pagina falla, la corrida se aborta antes del delete. Catena-X queda
con lo ya publicado y sin borrar nada hasta la proxima corrida.
"""
from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from loguru import logger

from fraud_sync.application.services.fraud_case_transformer import FraudCaseTransformer
from fraud_sync.infrastructure.external.catenax_client import CatenaxClient
from fraud_sync.infrastructure.external.fraud_cases_client import FraudCasesClient
from fraud_sync.shared.utils.datetime_utils import DateTimeUtils


@dataclass(frozen=True)
class SyncResult:
    pages: int
    upserted_records: int
    cutoff: datetime


class FraudCaseSyncUseCase:
    """
    Orquestador fetch -> transform -> upsert -> delete para una credencial.
    """

    def __init__(
        self,
        *,
        fraud_cases: FraudCasesClient,
        catenax: CatenaxClient,
        transformer: Optional[FraudCaseTransformer] = None,
    ) -> None:
        self._fraud_cases = fraud_cases
        self._catenax = catenax
        self._transformer = transformer or FraudCaseTransformer()

    def process_credential(self, credential: str) -> SyncResult:
        """
        Ejecuta una corrida completa para la credencial.

        Raises:
            FetchError: fallo al obtener una pagina (no se borra nada).
            TransportError / DecodeError: fallo en un upsert o en el delete.
            FatalSyncError: status inesperado de Catena-X.
        """
        oldest_updated_at: Optional[datetime] = None
        pages = 0
        upserted = 0

        for page in self._fraud_cases.iter_pages(credential):
            records = self._transformer.transform(page.fraud_cases)
            updated_at = self._catenax.upsert_fraud_cases(records)

            pages += 1
            upserted += len(records)
            if oldest_updated_at is None or updated_at < oldest_updated_at:
                oldest_updated_at = updated_at

            logger.debug(
                f"Pagina {page.page} sincronizada: {len(records)} registros, updatedAt={updated_at.isoformat()}"
            )

        # iter_pages entrega siempre la pagina 0 (o falla antes), hay al menos un upsert
        logger.info(
            f"Borrando fraud cases anteriores a {DateTimeUtils.to_rfc3339(oldest_updated_at)} "
            f"(paginas={pages}, upserts={upserted})"
        )
        self._catenax.delete_fraud_cases(oldest_updated_at)

        return SyncResult(pages=pages, upserted_records=upserted, cutoff=oldest_updated_at)
