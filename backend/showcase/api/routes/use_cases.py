"""Use Case Routes — catalogue reads for the site, CRUD for the admin area.

Invariants:
    - Routes delegate to UseCaseGateway; no store access here
    - /published and /facets are declared before /{use_case_id}
    - get of a missing id → 404 via ResourceNotFoundError (gateway returns None)
    - Responses use camelCase keys (UseCase aliases)
"""

import logging

from fastapi import APIRouter, Depends, Query, Response, status

from showcase.core.domain_types import TagKind, UseCaseStatus
from showcase.core.errors import ResourceNotFoundError
from showcase.core.use_case_filters import (
    collect_facets, filter_use_cases, related_tags,
)
from showcase.schemas.use_case import (
    UseCase, UseCaseCreate, UseCaseFacets, UseCaseUpdate,
)
from showcase.services.use_case_gateway import UseCaseGateway, get_use_case_gateway

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1/usecases", tags=["usecases"])


@router.get("", response_model=list[UseCase])
async def list_use_cases(
    search: str | None = Query(None, max_length=200),
    industry: list[str] | None = Query(None),
    category: list[str] | None = Query(None),
    status_filter: UseCaseStatus | None = Query(None, alias="status"),
    gateway: UseCaseGateway = Depends(get_use_case_gateway),
):
    """List use cases with optional search and tag filters."""
    use_cases = await gateway.list_all()
    return filter_use_cases(
        use_cases,
        search=search,
        industries=industry or (),
        categories=category or (),
        status=status_filter,
    )


@router.get("/published", response_model=list[UseCase])
async def list_published_use_cases(
    search: str | None = Query(None, max_length=200),
    industry: list[str] | None = Query(None),
    category: list[str] | None = Query(None),
    gateway: UseCaseGateway = Depends(get_use_case_gateway),
):
    """Public catalogue: published use cases only, same filters as the list."""
    use_cases = await gateway.list_published()
    return filter_use_cases(
        use_cases,
        search=search,
        industries=industry or (),
        categories=category or (),
    )


@router.get("/facets", response_model=UseCaseFacets)
async def list_facets(
    status_filter: UseCaseStatus | None = Query(None, alias="status"),
    gateway: UseCaseGateway = Depends(get_use_case_gateway),
):
    """Unique industries and categories, for the site's filter tabs."""
    use_cases = await gateway.list_all()
    return collect_facets(filter_use_cases(use_cases, status=status_filter))


@router.get("/facets/related", response_model=list[str])
async def list_related_tags(
    name: str = Query(..., min_length=1),
    kind: TagKind = Query(...),
    status_filter: UseCaseStatus | None = Query(None, alias="status"),
    gateway: UseCaseGateway = Depends(get_use_case_gateway),
):
    """Categories seen with an industry, or industries seen with a category."""
    use_cases = await gateway.list_all()
    return related_tags(filter_use_cases(use_cases, status=status_filter), name, kind)


@router.get("/{use_case_id}", response_model=UseCase)
async def get_use_case(
    use_case_id: str, gateway: UseCaseGateway = Depends(get_use_case_gateway),
):
    """Get one use case."""
    use_case = await gateway.get_by_id(use_case_id)
    if use_case is None:
        raise ResourceNotFoundError("Use case", use_case_id)
    return use_case


@router.post(
    "", response_model=UseCase, status_code=status.HTTP_201_CREATED,
)
async def create_use_case(
    body: UseCaseCreate, gateway: UseCaseGateway = Depends(get_use_case_gateway),
):
    """Create a use case from admin form data."""
    return await gateway.create(body)


@router.patch("/{use_case_id}", response_model=UseCase)
async def update_use_case(
    use_case_id: str,
    body: UseCaseUpdate,
    gateway: UseCaseGateway = Depends(get_use_case_gateway),
):
    """Apply a partial update."""
    return await gateway.update(use_case_id, body)


@router.delete("/{use_case_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_use_case(
    use_case_id: str, gateway: UseCaseGateway = Depends(get_use_case_gateway),
):
    """Hard-delete a use case."""
    await gateway.delete(use_case_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
