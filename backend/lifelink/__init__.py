"""Lifelink Application Package: CRUD gateway for user activity and blood donors.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)
"""
