"""Infrastructure Layer: database engine, storage-error translation and logging.

Invariants:
    - Infrastructure never imports from services/ or api/
    - Every SQLAlchemy failure leaves this layer as a core/errors.py type
"""
