"""
Universities API Routes

Public, read-only endpoints for listing, looking up and comparing
universities. Responses are safe to cache by their full query string.
"""

from typing import Optional

from fastapi import APIRouter, Query, Response

from unicompare.api.dependencies import FiltersDep, UniversityServiceDep
from unicompare.config.settings import get_settings
from unicompare.domain.models import (
    CatalogStatistics,
    PaginatedUniversities,
    University,
    UniversityComparison,
)
from unicompare.domain.search import parse_comparison_ids


router = APIRouter(prefix="/universities", tags=["Universities"])


def _set_cache_headers(response: Response, max_age: int, stale_while_revalidate: int) -> None:
    if not get_settings().cache_headers_enabled:
        return
    response.headers["Cache-Control"] = (
        f"public, s-maxage={max_age}, stale-while-revalidate={stale_while_revalidate}"
    )


def _list_cache(response: Response) -> None:
    settings = get_settings()
    _set_cache_headers(
        response, settings.list_cache_max_age, settings.list_stale_while_revalidate
    )


def _detail_cache(response: Response) -> None:
    settings = get_settings()
    _set_cache_headers(
        response, settings.detail_cache_max_age, settings.detail_stale_while_revalidate
    )


@router.get("", response_model=PaginatedUniversities)
def list_universities(
    filters: FiltersDep,
    service: UniversityServiceDep,
    response: Response,
):
    """
    Filtered and paginated university listing.

    Set filters take comma-separated values (``countries=Canada,Japan``).
    Invalid parameters return 400 with the validation errors.
    """
    result = service.list_universities(filters)
    _list_cache(response)
    return result


@router.get("/compare", response_model=UniversityComparison)
def compare_universities(
    service: UniversityServiceDep,
    response: Response,
    ids: Optional[str] = Query(None, description="Two comma-separated university ids"),
):
    """
    Compare two universities side by side.

    - 400 if ``ids`` is missing or does not hold exactly two distinct ids
    - 404 if either id is unknown
    """
    comparison = service.compare(parse_comparison_ids(ids))
    _detail_cache(response)
    return comparison


@router.get("/statistics", response_model=CatalogStatistics)
def get_statistics(service: UniversityServiceDep, response: Response):
    """Catalog-wide statistics (count, countries, average tuition, top ranked)."""
    stats = service.get_statistics()
    _detail_cache(response)
    return stats


@router.get("/{university_id}", response_model=University)
def get_university(university_id: str, service: UniversityServiceDep, response: Response):
    """Get a single university by id."""
    university = service.get_university(university_id)
    _detail_cache(response)
    return university
