"""Infrastructure Layer — storage adapters and cross-cutting concerns.

Invariants:
    - Adapters implement the protocols in core/repository_protocols.py
    - Backend failures surface as StorageError (core/errors.py), never raw driver errors
"""
