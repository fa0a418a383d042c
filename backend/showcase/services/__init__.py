"""Services Layer — the use case persistence gateway."""
