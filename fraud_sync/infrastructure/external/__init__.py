"""
Clientes HTTP de las APIs externas.

- http_client: adaptador requests (timeout fijo, sin reintentos)
- fraud_cases_client: API origen de CDQ, paginada
- catenax_client: API destino de Catena-X (upsert y delete por fecha)
"""
