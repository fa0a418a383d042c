"""ORM Models — SQLAlchemy declarative models for the remote store.

Invariants:
    - All models inherit from Base (db/base.py)
    - All models imported here so Base.metadata is complete before create_all/autogenerate
"""

from showcase.models.use_case import UseCaseRecord  # noqa: F401
