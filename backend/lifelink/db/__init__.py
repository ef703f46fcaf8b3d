"""Database Infrastructure: SQLAlchemy declarative base shared by all tables.

Invariants:
    - Single async engine per process (initialized via init_db)
"""
