"""Services Layer: statement execution per resource.

Invariants:
    - Services receive an AsyncSession; they never open their own
    - Services raise core/errors.py types only; routes map nothing themselves
"""
