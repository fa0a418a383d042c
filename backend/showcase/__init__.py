"""Showcase Application Package — use case catalogue backend.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)
"""
