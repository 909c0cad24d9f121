# Domain module for UniCompare
from unicompare.domain.models import (
    University,
    UniversityFilters,
    PaginatedUniversities,
    UniversityComparison,
    CatalogStatistics,
    CampusType,
    ResearchOutput,
    SortField,
    SortOrder,
)

__all__ = [
    "University",
    "UniversityFilters",
    "PaginatedUniversities",
    "UniversityComparison",
    "CatalogStatistics",
    "CampusType",
    "ResearchOutput",
    "SortField",
    "SortOrder",
]
