"""
Cliente de la API de fraud cases de CDQ.

Paginacion por indice: se pide la pagina 0 y el `numberOfPages` de esa
primera respuesta acota las siguientes (1 .. numberOfPages - 1). Cada
pagina es un request independiente autenticado con la credencial del
mensaje.
"""
from __future__ import annotations

from typing import Iterator

from loguru import logger

from fraud_sync.domain.entities.fraud_case import FraudCasePage
from fraud_sync.infrastructure.external.http_client import HttpClient
from fraud_sync.shared.exceptions.sync import FetchError, SyncError

DEFAULT_PAGE_SIZE = 200
DEFAULT_CLASSIFICATION = "CATENAX"


class FraudCasesClient:
    """Lee fraud cases paginados de CDQ."""

    def __init__(
        self,
        http: HttpClient,
        *,
        base_url: str,
        page_size: int = DEFAULT_PAGE_SIZE,
        classification: str = DEFAULT_CLASSIFICATION,
    ) -> None:
        self._http = http
        self._url = base_url
        self._page_size = page_size
        self._classification = classification

    def fetch_page(self, api_key: str, page: int) -> FraudCasePage:
        """
        Obtiene una pagina.

        Raises:
            FetchError: fallo de red, status no 2xx o body que no se puede
            decodificar como pagina de fraud cases.
        """
        headers = {"X-API-KEY": api_key}
        params = {
            "classification": self._classification,
            "pageSize": self._page_size,
            "page": page,
        }

        try:
            resp = self._http.request("GET", self._url, headers=headers, params=params)
        except SyncError as e:
            raise FetchError(page, e.message) from e

        if not 200 <= resp.status_code < 300:
            raise FetchError(page, f"status {resp.status_code}: {resp.text[:500]}")

        try:
            payload = resp.json()
        except SyncError as e:
            raise FetchError(page, e.message) from e

        try:
            fraud_case_page = FraudCasePage.from_dict(payload)
        except ValueError as e:
            raise FetchError(page, f"respuesta malformada: {e}") from e

        logger.debug(
            f"Pagina {page} obtenida: {len(fraud_case_page.fraud_cases)} fraud cases "
            f"(numberOfPages={fraud_case_page.number_of_pages})"
        )
        return fraud_case_page

    def iter_pages(self, api_key: str) -> Iterator[FraudCasePage]:
        """
        Itera todas las paginas de la credencial, empezando por la 0.

        La pagina 0 siempre se entrega, aun si numberOfPages es 0. El total
        se toma solo de la primera respuesta.
        """
        first = self.fetch_page(api_key, 0)
        yield first

        for page in range(1, first.number_of_pages):
            yield self.fetch_page(api_key, page)
