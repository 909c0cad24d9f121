"""
API Dependencies

FastAPI dependency injection for the catalog, the service and
query-string parsing.

Routers should import from api.dependencies; tests swap the catalog
through ``app.dependency_overrides[get_catalog]``.
"""

import logging
from functools import lru_cache
from typing import Annotated, Any, Dict

import pydantic
from fastapi import Depends, Request

from unicompare.config.settings import get_settings
from unicompare.domain.models import UniversityFilters
from unicompare.domain.services import UniversityService
from unicompare.infrastructure.catalog import UniversityCatalog, load_catalog
from unicompare.infrastructure.exceptions import ValidationError


logger = logging.getLogger(__name__)

# Query parameters carrying comma-separated lists
LIST_PARAMS = ("countries", "cities", "programs", "campusTypes", "researchOutput")

# Query parameters passed through as scalars (pydantic coerces the strings)
SCALAR_PARAMS = (
    "search",
    "minTuition",
    "maxTuition",
    "minRanking",
    "maxRanking",
    "minYear",
    "maxYear",
    "minAcceptanceRate",
    "maxAcceptanceRate",
    "minEmploymentRate",
    "page",
    "limit",
    "sortBy",
    "sortOrder",
)


@lru_cache
def get_catalog() -> UniversityCatalog:
    """Load the catalog once per process."""
    return load_catalog(get_settings().resolved_catalog_path)


def get_university_service(
    catalog: Annotated[UniversityCatalog, Depends(get_catalog)],
) -> UniversityService:
    """Dependency provider for UniversityService."""
    return UniversityService(catalog)


def parse_filter_params(query: Dict[str, str]) -> UniversityFilters:
    """
    Build a validated UniversityFilters from raw query parameters.

    - Empty values are treated as absent
    - List parameters are split on commas, blank items dropped
    - ``scholarshipOnly`` is only set by the literal ``"true"``

    Raises:
        ValidationError: If any value fails type or range validation
    """
    raw: Dict[str, Any] = {}

    for name in SCALAR_PARAMS:
        value = query.get(name)
        if value:
            raw[name] = value

    for name in LIST_PARAMS:
        value = query.get(name)
        if value:
            items = [item for item in value.split(",") if item]
            if items:
                raw[name] = items

    if query.get("scholarshipOnly") == "true":
        raw["scholarshipOnly"] = True

    try:
        return UniversityFilters.model_validate(raw)
    except pydantic.ValidationError as e:
        errors = [
            {
                "field": ".".join(str(loc) for loc in err["loc"]),
                "message": err["msg"],
                "type": err["type"],
            }
            for err in e.errors()
        ]
        logger.debug(f"Rejected filter parameters: {errors}")
        raise ValidationError("Invalid filter parameters", errors=errors, original_error=e) from e


def get_filters(request: Request) -> UniversityFilters:
    """Dependency provider for the validated list filters."""
    return parse_filter_params(dict(request.query_params))


# Type aliases for dependencies
CatalogDep = Annotated[UniversityCatalog, Depends(get_catalog)]
UniversityServiceDep = Annotated[UniversityService, Depends(get_university_service)]
FiltersDep = Annotated[UniversityFilters, Depends(get_filters)]
