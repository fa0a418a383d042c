"""Core Layer — pure domain logic, no IO, no async, no DB.

Invariants:
    - No module in core/ imports from services/, api/, infrastructure/, or db/
    - Normalization and mapping functions are total and deterministic (timestamps aside)
"""
