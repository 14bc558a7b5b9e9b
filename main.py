"""
Punto de entrada del worker de sincronizacion de fraud cases.

Ejecución:
  python main.py
  python main.py --check-config
"""
from fraud_sync.worker import main


if __name__ == "__main__":
    raise SystemExit(main())
