"""
Configuracion central del worker.

Las variables se leen del entorno (o de un .env) una unica vez al arrancar,
mediante `load_settings()`. La instancia resultante se pasa explicitamente
a cada componente; ningun modulo de negocio lee el entorno por su cuenta.
"""
from typing import Any, Dict

from loguru import logger
from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from fraud_sync.shared.exceptions.sync import ConfigurationError

# Variables sin las cuales el worker no arranca.
REQUIRED_ENV_VARS = (
    "RMQ_AMQP_URL",
    "RMQ_QUEUE_NAME",
    "SENTRY_DSN",
    "CDQ_FRAUD_CASES_API_URL",
    "CATENAX_API_URL",
    "CATENAX_API_KEY",
)

_TRUE_VALUES = {"1", "t", "T", "TRUE", "true", "True"}
_FALSE_VALUES = {"0", "f", "F", "FALSE", "false", "False"}


class Settings(BaseSettings):
    """
    Clase de configuracion del worker.

    Las seis variables de REQUIRED_ENV_VARS no tienen default: si falta
    alguna, la construccion falla. Una variable definida pero vacia se
    considera presente.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=True,
        extra="ignore",
    )

    # RabbitMQ
    RMQ_AMQP_URL: str
    RMQ_QUEUE_NAME: str
    RMQ_PREFETCH_COUNT: int = Field(default=1, ge=0)

    # Sentry
    SENTRY_DSN: str
    ENVIRONMENT: str = Field(default="production")

    # API origen (CDQ)
    CDQ_FRAUD_CASES_API_URL: str
    FRAUD_CASES_PAGE_SIZE: int = Field(default=200, gt=0)
    FRAUD_CASES_CLASSIFICATION: str = Field(default="CATENAX")

    # API destino (Catena-X)
    CATENAX_API_URL: str
    CATENAX_API_KEY: str

    # HTTP
    REQUEST_TIMEOUT_S: float = Field(default=30.0, gt=0)

    # Registros sin pais: False = se envian con countryCode vacio
    SKIP_CASES_WITHOUT_COUNTRY: bool = Field(default=False)

    # Logging
    DEBUG: bool = Field(default=False)
    LOG_LEVEL: str = Field(default="INFO")
    LOG_FILE: str = Field(default="")

    @field_validator("DEBUG", mode="before")
    @classmethod
    def _parse_debug(cls, value: Any) -> bool:
        # Un DEBUG mal formado no impide arrancar: se avisa y se asume False.
        if isinstance(value, bool):
            return value
        text = str(value).strip()
        if text in _TRUE_VALUES:
            return True
        if text in _FALSE_VALUES:
            return False
        logger.warning(f"No se pudo interpretar DEBUG={value!r} como bool; se usa False")
        return False

    @property
    def effective_log_level(self) -> str:
        return "DEBUG" if self.DEBUG else self.LOG_LEVEL.upper()

    def public_summary(self) -> Dict[str, Any]:
        """Configuracion resuelta sin secretos (para logs y --check-config)."""
        return {
            "RMQ_QUEUE_NAME": self.RMQ_QUEUE_NAME,
            "RMQ_PREFETCH_COUNT": self.RMQ_PREFETCH_COUNT,
            "CDQ_FRAUD_CASES_API_URL": self.CDQ_FRAUD_CASES_API_URL,
            "CATENAX_API_URL": self.CATENAX_API_URL,
            "FRAUD_CASES_PAGE_SIZE": self.FRAUD_CASES_PAGE_SIZE,
            "FRAUD_CASES_CLASSIFICATION": self.FRAUD_CASES_CLASSIFICATION,
            "REQUEST_TIMEOUT_S": self.REQUEST_TIMEOUT_S,
            "SKIP_CASES_WITHOUT_COUNTRY": self.SKIP_CASES_WITHOUT_COUNTRY,
            "ENVIRONMENT": self.ENVIRONMENT,
            "DEBUG": self.DEBUG,
        }


def load_settings(**overrides: Any) -> Settings:
    """
    Construye Settings desde el entorno.

    Raises:
        ConfigurationError: si falta una variable requerida o alguna
        variable opcional tiene un valor invalido.
    """
    try:
        return Settings(**overrides)
    except ValidationError as e:
        missing = [
            str(err["loc"][0])
            for err in e.errors()
            if err.get("type") == "missing" and err.get("loc")
        ]
        if missing:
            names = ", ".join(f"${name}" for name in missing)
            raise ConfigurationError(f"Faltan variables de entorno: {names}", missing=missing) from e
        raise ConfigurationError(f"Configuracion invalida: {e}") from e
