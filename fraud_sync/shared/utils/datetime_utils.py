"""
Utilidades para manejo de fechas RFC3339.

La API de Catena-X devuelve `updatedAt` como RFC3339 (posiblemente con
fraccion de nanosegundos) y espera el parametro `latest` en RFC3339 sin
fraccion.
"""
import re
from datetime import datetime, timezone, timedelta

# fromisoformat (3.10) solo acepta 3 o 6 digitos; la API puede enviar de 1 a 9.
_FRACTION_RE = re.compile(r"\.(\d+)")


def _fraction_to_micros(match: "re.Match[str]") -> str:
    return "." + match.group(1)[:6].ljust(6, "0")


class DateTimeUtils:
    """Clase de utilidades para operaciones con fechas y horas."""

    @staticmethod
    def parse_rfc3339(value: str) -> datetime:
        """
        Convierte un string RFC3339 a datetime aware.

        Args:
            value: String RFC3339, e.g. "2024-03-01T10:15:00.123456789Z"

        Returns:
            datetime: Objeto datetime con zona horaria

        Raises:
            ValueError: Si el string no es RFC3339 valido
        """
        if not isinstance(value, str) or "T" not in value.upper():
            raise ValueError(f"Timestamp RFC3339 invalido: {value!r}")

        normalized = value.strip()
        if normalized[-1] in ("Z", "z"):
            normalized = normalized[:-1] + "+00:00"
        normalized = _FRACTION_RE.sub(_fraction_to_micros, normalized)

        dt = datetime.fromisoformat(normalized)
        if dt.tzinfo is None:
            raise ValueError(f"Timestamp RFC3339 sin zona horaria: {value!r}")
        return dt

    @staticmethod
    def to_rfc3339(dt: datetime) -> str:
        """
        Serializa un datetime a RFC3339 con precision de segundos.

        Offset cero se escribe como 'Z'; los demas offsets se conservan.
        Un datetime naive se asume UTC.

        Args:
            dt: Objeto datetime

        Returns:
            str: Fecha en formato RFC3339
        """
        if dt.tzinfo is None:
            dt = dt.replace(tzinfo=timezone.utc)
        text = dt.replace(microsecond=0).isoformat()
        if dt.utcoffset() == timedelta(0):
            text = text[: -len("+00:00")] + "Z"
        return text
