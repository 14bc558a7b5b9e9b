"""
Consumo de credenciales desde RabbitMQ.
"""
from fraud_sync.infrastructure.messaging.consumer import (
    FraudCaseQueueConsumer,
    MessageHandler,
    MessageOutcome,
)

__all__ = ["FraudCaseQueueConsumer", "MessageHandler", "MessageOutcome"]
