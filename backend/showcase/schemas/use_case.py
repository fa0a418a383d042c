"""Use Case Schemas — entity and form payloads shared by the gateway and the API.

Invariants:
    - UseCase.industry / UseCase.category are computed from the first list element
      (never stored independently on the entity)
    - Form list fields accept any raw value; the gateway normalizes them
    - UseCaseUpdate distinguishes "omitted" from "supplied" via model_fields_set
    - Wire format is camelCase (imageUrl, createdAt, updatedAt)
"""

from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, computed_field
from pydantic.alias_generators import to_camel

from showcase.core.domain_types import UseCaseStatus
from showcase.core.normalize_list import primary_value


class UseCase(BaseModel):
    """Fully-typed use case as returned by the gateway."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    id: str
    title: str
    description: str
    content: str
    industries: list[str] = Field(default_factory=list)
    categories: list[str] = Field(default_factory=list)
    image_url: str = ""
    status: UseCaseStatus = UseCaseStatus.DRAFT
    created_at: datetime
    updated_at: datetime

    @computed_field
    @property
    def industry(self) -> str:
        """Primary industry, kept for consumers of the scalar field."""
        return primary_value(self.industries)

    @computed_field
    @property
    def category(self) -> str:
        """Primary category, kept for consumers of the scalar field."""
        return primary_value(self.categories)


class UseCaseCreate(BaseModel):
    """Admin form data for a new use case."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    title: str = ""
    description: str = ""
    content: str = ""
    industries: Any = None
    categories: Any = None
    image_url: str | None = None
    status: UseCaseStatus = UseCaseStatus.DRAFT


class UseCaseUpdate(BaseModel):
    """Partial form data — only explicitly supplied fields are applied."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    title: str | None = None
    description: str | None = None
    content: str | None = None
    industries: Any = None
    categories: Any = None
    image_url: str | None = None
    status: UseCaseStatus | None = None


class UseCaseFacets(BaseModel):
    """Unique tag values offered as filters on the site."""
    industries: list[str] = Field(default_factory=list)
    categories: list[str] = Field(default_factory=list)
