"""Catalogue Filters — search, tag filtering and facet lists for the use case section.

Invariants:
    - Pure functions over already-normalized UseCase entities (no IO)
    - Input order is preserved in every result
    - Facets are unique, in first-seen order
    - Search is case-insensitive substring match on title, description and tags
    - related_tags() reads the other tag kind of the use cases carrying a tag
"""

from collections.abc import Iterable, Sequence

from showcase.core.domain_types import TagKind, UseCaseStatus
from showcase.schemas.use_case import UseCase, UseCaseFacets


def _matches_search(use_case: UseCase, needle: str) -> bool:
    haystack = [use_case.title, use_case.description]
    haystack.extend(use_case.industries)
    haystack.extend(use_case.categories)
    return any(needle in text.lower() for text in haystack)


def filter_use_cases(
    use_cases: Sequence[UseCase],
    search: str | None = None,
    industries: Iterable[str] = (),
    categories: Iterable[str] = (),
    status: UseCaseStatus | None = None,
) -> list[UseCase]:
    """Apply search, then industry selection, then category selection.

    Within one tag type the selection is an OR (any selected tag matches);
    industry and category selections combine as AND.
    """
    filtered = list(use_cases)
    if status is not None:
        filtered = [u for u in filtered if u.status == status]
    if search and search.strip():
        needle = search.strip().lower()
        filtered = [u for u in filtered if _matches_search(u, needle)]
    selected_industries = set(industries)
    if selected_industries:
        filtered = [
            u for u in filtered
            if any(i in selected_industries for i in u.industries)
        ]
    selected_categories = set(categories)
    if selected_categories:
        filtered = [
            u for u in filtered
            if any(c in selected_categories for c in u.categories)
        ]
    return filtered


def _unique(values: Iterable[str]) -> list[str]:
    seen: set[str] = set()
    result: list[str] = []
    for value in values:
        if value and value not in seen:
            seen.add(value)
            result.append(value)
    return result


def collect_facets(use_cases: Iterable[UseCase]) -> UseCaseFacets:
    """Unique industries and categories across the given use cases."""
    use_cases = list(use_cases)
    return UseCaseFacets(
        industries=_unique(i for u in use_cases for i in u.industries),
        categories=_unique(c for u in use_cases for c in u.categories),
    )


def related_tags(
    use_cases: Iterable[UseCase], name: str, kind: TagKind,
) -> list[str]:
    """Tags of the other kind that co-occur with `name`.

    For an industry, the categories of every use case tagged with it;
    for a category, the industries. Unique, in first-seen order.
    """
    if kind == TagKind.INDUSTRY:
        return _unique(
            c for u in use_cases if name in u.industries for c in u.categories
        )
    return _unique(
        i for u in use_cases if name in u.categories for i in u.industries
    )
