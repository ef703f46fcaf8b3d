"""API Layer: FastAPI routes, response class and error handlers.

Invariants:
    - Routes registered explicitly in main.py (no auto-discovery)
    - Every JSON body is the {success, data, message, count, error} envelope

Design Decisions:
    - Thin routes delegate to services; errors travel as exceptions to the
      global handlers instead of per-route try/except
"""
