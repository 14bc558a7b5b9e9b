"""
Entry point del worker.

Uso:
  fraud-sync
  fraud-sync --check-config

Codigos de salida:
  0  la cola se cerro normalmente (o --check-config OK)
  1  configuracion invalida, fallo de RabbitMQ o FatalSyncError
"""
from __future__ import annotations

import argparse
import json
from typing import Optional, Sequence

from loguru import logger

from fraud_sync.application.services.fraud_case_transformer import FraudCaseTransformer
from fraud_sync.application.use_cases.sync_use_cases import FraudCaseSyncUseCase
from fraud_sync.core.config import Settings, load_settings
from fraud_sync.core.events import shutdown, startup
from fraud_sync.infrastructure.external.catenax_client import CatenaxClient
from fraud_sync.infrastructure.external.fraud_cases_client import FraudCasesClient
from fraud_sync.infrastructure.external.http_client import HttpClient
from fraud_sync.infrastructure.messaging.consumer import FraudCaseQueueConsumer, MessageHandler
from fraud_sync.infrastructure.monitoring.error_reporter import ErrorReporter
from fraud_sync.shared.exceptions.base import AppException
from fraud_sync.shared.exceptions.sync import ConfigurationError


def build_worker(settings: Settings, error_reporter: ErrorReporter) -> FraudCaseQueueConsumer:
    """Arma el grafo de dependencias a partir de la configuracion."""
    http = HttpClient(timeout_s=settings.REQUEST_TIMEOUT_S)
    fraud_cases = FraudCasesClient(
        http,
        base_url=settings.CDQ_FRAUD_CASES_API_URL,
        page_size=settings.FRAUD_CASES_PAGE_SIZE,
        classification=settings.FRAUD_CASES_CLASSIFICATION,
    )
    catenax = CatenaxClient(
        http,
        base_url=settings.CATENAX_API_URL,
        api_key=settings.CATENAX_API_KEY,
    )
    use_case = FraudCaseSyncUseCase(
        fraud_cases=fraud_cases,
        catenax=catenax,
        transformer=FraudCaseTransformer(skip_without_country=settings.SKIP_CASES_WITHOUT_COUNTRY),
    )
    handler = MessageHandler(use_case, error_reporter=error_reporter)
    return FraudCaseQueueConsumer(
        handler,
        amqp_url=settings.RMQ_AMQP_URL,
        queue_name=settings.RMQ_QUEUE_NAME,
        prefetch_count=settings.RMQ_PREFETCH_COUNT,
    )


def _check_config() -> int:
    try:
        settings = load_settings()
    except ConfigurationError as e:
        logger.error(f"Failed to validate required env vars: {e.message}")
        return 1
    print(json.dumps(settings.public_summary(), indent=2))
    return 0


def run() -> int:
    error_reporter = ErrorReporter()

    try:
        settings = startup(error_reporter)
    except ConfigurationError as e:
        logger.error(f"Failed to validate required env vars: {e.message}")
        return 1

    consumer = build_worker(settings, error_reporter)
    try:
        consumer.run()
    except AppException as e:
        # FatalSyncError / QueueConnectionError: detener el proceso
        logger.critical(f"{e.message} - deteniendo el worker")
        error_reporter.capture(e)
        return 1
    except KeyboardInterrupt:
        logger.info("Interrumpido por el usuario")
    finally:
        shutdown(error_reporter)

    return 0


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        prog="fraud-sync",
        description="Sincroniza fraud cases de CDQ hacia Catena-X a partir de mensajes de RabbitMQ.",
    )
    parser.add_argument(
        "--check-config",
        action="store_true",
        help="Solo valida la configuracion y la imprime (sin secretos).",
    )
    args = parser.parse_args(argv)

    if args.check_config:
        return _check_config()
    return run()


if __name__ == "__main__":
    raise SystemExit(main())
