"""
Consumer de RabbitMQ (pika, conexion bloqueante).

Un mensaje a la vez: el body es la API key de CDQ. Por mensaje:

    Received -> Processing -> Acked | Rejected

- Exito: basic_ack.
- Cualquier error de sincronizacion: se loguea, se reporta y se hace
  basic_nack sin requeue (el mensaje se descarta).
- FatalSyncError: el mensaje no se confirma ni se rechaza, se cancela el
  consumo y el error sube hasta el entry point, que termina el proceso.
"""
from __future__ import annotations

from enum import Enum
from typing import Callable, Optional

import pika
from loguru import logger
from pika.adapters.blocking_connection import BlockingChannel
from pika.exceptions import AMQPError, ChannelClosedByBroker, ConnectionClosedByBroker

from fraud_sync.application.use_cases.sync_use_cases import FraudCaseSyncUseCase
from fraud_sync.infrastructure.monitoring.error_reporter import ErrorReporter
from fraud_sync.shared.exceptions.sync import FatalSyncError, QueueConnectionError


class MessageOutcome(Enum):
    ACKED = "acked"
    REJECTED = "rejected"


class MessageHandler:
    """
    Decide el destino de un mensaje a partir del resultado de la corrida.

    No conoce pika: recibe el body y devuelve el outcome.
    """

    def __init__(self, use_case: FraudCaseSyncUseCase, *, error_reporter: Optional[ErrorReporter] = None) -> None:
        self._use_case = use_case
        self._error_reporter = error_reporter or ErrorReporter()

    def handle(self, body: bytes) -> MessageOutcome:
        """
        Procesa un mensaje.

        Raises:
            FatalSyncError: se propaga sin tocar el mensaje.
        """
        credential = body.decode("utf-8", errors="replace")

        try:
            result = self._use_case.process_credential(credential)
        except FatalSyncError:
            raise
        except Exception as e:
            logger.error(f"Failed to handle message with error: {e}")
            logger.error(f"Dropping message: {credential}")
            self._error_reporter.capture(e)
            return MessageOutcome.REJECTED

        logger.debug(
            f"Corrida completada: paginas={result.pages}, upserts={result.upserted_records}, "
            f"cutoff={result.cutoff.isoformat()}"
        )
        return MessageOutcome.ACKED


ConnectionFactory = Callable[[str], pika.BlockingConnection]


def _default_connection_factory(url: str) -> pika.BlockingConnection:
    return pika.BlockingConnection(pika.URLParameters(url))


class FraudCaseQueueConsumer:
    """
    Loop de consumo secuencial sobre una cola.

    `stopped` queda en True cuando un FatalSyncError detuvo el consumo.
    """

    def __init__(
        self,
        handler: MessageHandler,
        *,
        amqp_url: str,
        queue_name: str,
        prefetch_count: int = 1,
        connection_factory: ConnectionFactory = _default_connection_factory,
    ) -> None:
        self._handler = handler
        self._amqp_url = amqp_url
        self._queue_name = queue_name
        self._prefetch_count = prefetch_count
        self._connection_factory = connection_factory
        self._connection: Optional[pika.BlockingConnection] = None
        self._channel: Optional[BlockingChannel] = None
        self.stopped = False

    def connect(self) -> BlockingChannel:
        """
        Abre conexion y canal.

        Raises:
            QueueConnectionError: si falla la conexion o el canal.
        """
        try:
            self._connection = self._connection_factory(self._amqp_url)
        except AMQPError as e:
            raise QueueConnectionError(f"Failed to connect to RabbitMQ: {e!r}") from e

        try:
            channel = self._connection.channel()
            if self._prefetch_count:
                channel.basic_qos(prefetch_count=self._prefetch_count)
        except AMQPError as e:
            self.close()
            raise QueueConnectionError(f"Failed to open a channel: {e!r}") from e

        self._channel = channel
        logger.info(f"Conectado a RabbitMQ, cola '{self._queue_name}'")
        return channel

    def run(self) -> None:
        """
        Consume hasta que el broker cierre la conexion.

        Raises:
            QueueConnectionError: fallo al conectar o registrar el consumer.
            FatalSyncError: status inesperado en Catena-X; el consumo queda
            cancelado y `stopped` en True.
        """
        channel = self._channel or self.connect()

        try:
            deliveries = channel.consume(self._queue_name, auto_ack=False)
            for method, _properties, body in deliveries:
                if method is None:
                    # consume() sin inactivity_timeout no deberia entregar None
                    continue
                self._dispatch(channel, method.delivery_tag, body)
        except FatalSyncError:
            self.stopped = True
            self._cancel(channel)
            raise
        except ChannelClosedByBroker as e:
            # cola inexistente o permisos: el consumer no se pudo registrar
            raise QueueConnectionError(f"Failed to register a consumer: {e!r}") from e
        except ConnectionClosedByBroker as e:
            logger.warning(f"RabbitMQ cerro la conexion: {e!r}")
        except AMQPError as e:
            raise QueueConnectionError(f"Se perdio la conexion con RabbitMQ: {e!r}") from e
        finally:
            self.close()

    def _dispatch(self, channel: BlockingChannel, delivery_tag: int, body: bytes) -> None:
        logger.debug(f"Mensaje recibido: {delivery_tag}")
        outcome = self._handler.handle(body)

        if outcome is MessageOutcome.ACKED:
            logger.info(f"Successfully processed message: {delivery_tag}")
            channel.basic_ack(delivery_tag=delivery_tag)
        else:
            channel.basic_nack(delivery_tag=delivery_tag, requeue=False)

    def _cancel(self, channel: BlockingChannel) -> None:
        try:
            channel.cancel()
        except AMQPError as e:
            logger.warning(f"No se pudo cancelar el consumer: {e!r}")

    def close(self) -> None:
        """Cierra la conexion si sigue abierta."""
        connection = self._connection
        self._connection = None
        self._channel = None
        if connection is None or not connection.is_open:
            return
        try:
            connection.close()
        except AMQPError as e:
            logger.warning(f"Error al cerrar la conexion con RabbitMQ: {e!r}")
