"""
Worker de sincronizacion de fraud cases: CDQ -> Catena-X.

Consume credenciales desde RabbitMQ, descarga los fraud cases paginados
de la API de CDQ, los publica (upsert) en Catena-X y elimina los registros
que no se actualizaron en la corrida.
"""

__version__ = "1.0.0"
