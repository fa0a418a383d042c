"""Pydantic Schemas — use case entity and form payloads.

Invariants:
    - Schemas validate at system boundary (API requests, gateway results)
    - JSON keys are camelCase on the wire, snake_case in Python
"""
