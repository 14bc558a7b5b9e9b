"""
Adaptador HTTP sobre requests.

Un request por llamada, timeout fijo, sin reintentos. Los fallos de red
se traducen a TransportError y los bodies no JSON a DecodeError; el
status HTTP se devuelve tal cual para que cada cliente decida.
"""
from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any, Mapping, Optional

import requests

from fraud_sync.shared.exceptions.sync import DecodeError, TransportError

DEFAULT_TIMEOUT_S = 30.0


@dataclass(frozen=True)
class HttpResponse:
    """Status y body crudo de una respuesta."""

    status_code: int
    body: bytes

    @property
    def text(self) -> str:
        return self.body.decode("utf-8", errors="replace")

    def json(self) -> Any:
        """
        Decodifica el body como JSON.

        Raises:
            DecodeError: body vacio, no UTF-8 o JSON invalido.
        """
        try:
            return json.loads(self.body)
        except (ValueError, UnicodeDecodeError) as e:
            raise DecodeError(f"La respuesta no es JSON valido: {e}", body=self.text) from e


class HttpClient:
    """Cliente HTTP bloqueante compartido por los clientes de API."""

    def __init__(
        self,
        *,
        session: Optional[requests.Session] = None,
        timeout_s: float = DEFAULT_TIMEOUT_S,
    ) -> None:
        self._session = session or requests.Session()
        self._timeout_s = timeout_s

    def request(
        self,
        method: str,
        url: str,
        *,
        headers: Optional[Mapping[str, str]] = None,
        params: Optional[Mapping[str, Any]] = None,
        json_body: Any = None,
    ) -> HttpResponse:
        """
        Ejecuta un request y lee el body completo.

        Raises:
            TransportError: conexion rechazada, timeout o cualquier otro
            fallo de requests antes de tener una respuesta.
        """
        data = None
        if json_body is not None:
            data = json.dumps(json_body).encode("utf-8")

        try:
            resp = self._session.request(
                method=method,
                url=url,
                headers=dict(headers or {}),
                params=params,
                data=data,
                timeout=self._timeout_s,
            )
            body = resp.content
        except requests.Timeout as e:
            raise TransportError(method, url, f"timeout tras {self._timeout_s}s") from e
        except requests.RequestException as e:
            raise TransportError(method, url, str(e)) from e

        return HttpResponse(status_code=resp.status_code, body=body or b"")
