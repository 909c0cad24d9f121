"""
University Service

Query operations over the injected university catalog:
- Filtered, sorted, paginated listing
- Lookup by id
- Two-university comparison
- Catalog statistics

The service holds no state of its own besides the catalog reference,
so a single instance is safe to share between concurrent requests.
"""

import logging
from decimal import Decimal, ROUND_HALF_UP
from typing import List, Sequence

from unicompare.domain.models import (
    CatalogStatistics,
    PaginationMeta,
    PaginatedUniversities,
    University,
    UniversityComparison,
    UniversityFilters,
)
from unicompare.domain.search import (
    compare_universities,
    filter_universities,
    paginate,
    sort_universities,
)
from unicompare.infrastructure.catalog import UniversityCatalog
from unicompare.infrastructure.exceptions import InvalidArgumentError, NotFoundError

logger = logging.getLogger(__name__)

TOP_RANKED_COUNT = 5


class UniversityService:
    """Search and comparison service bound to a read-only catalog."""

    def __init__(self, catalog: UniversityCatalog):
        self.catalog = catalog

    def list_universities(self, filters: UniversityFilters) -> PaginatedUniversities:
        """
        Filter, sort and paginate the catalog.

        Facet lists always describe the full catalog, not the filtered subset.
        """
        matches = filter_universities(self.catalog, filters)
        ordered = sort_universities(matches, filters.sort_by, filters.sort_order)
        data, total, total_pages = paginate(ordered, filters.page, filters.limit)

        logger.debug(
            "list: %d matches, page %d/%d (limit %d)",
            total, filters.page, total_pages, filters.limit,
        )

        return PaginatedUniversities(
            data=data,
            pagination=PaginationMeta(
                total=total,
                page=filters.page,
                limit=filters.limit,
                total_pages=total_pages,
            ),
            filters=self.catalog.filter_options,
        )

    def get_university(self, university_id: str) -> University:
        """
        Get a single university.

        Raises:
            NotFoundError: If no university has this id
        """
        university = self.catalog.get(university_id)
        if university is None:
            raise NotFoundError(
                f"University not found: {university_id}",
                missing_ids=[university_id],
            )
        return university

    def get_universities_by_ids(self, university_ids: Sequence[str]) -> List[University]:
        """Universities in the requested order. Unknown ids are skipped."""
        return [
            self.catalog.get(uid)
            for uid in university_ids
            if uid in self.catalog
        ]

    def compare(self, university_ids: Sequence[str]) -> UniversityComparison:
        """
        Compare exactly two universities.

        The first id is labelled first in the result; difference values do
        not depend on the order.

        Raises:
            InvalidArgumentError: Not exactly two distinct ids
            NotFoundError: One or both ids unknown
        """
        if len(university_ids) != 2:
            raise InvalidArgumentError(
                "Exactly 2 university IDs are required for comparison",
                details={"received": len(university_ids)},
            )
        first_id, second_id = university_ids
        if first_id == second_id:
            raise InvalidArgumentError(
                "Cannot compare a university with itself",
                details={"ids": list(university_ids)},
            )

        missing = [uid for uid in university_ids if uid not in self.catalog]
        if missing:
            raise NotFoundError(
                "One or both universities not found",
                missing_ids=missing,
            )

        logger.debug("compare: %s vs %s", first_id, second_id)
        return compare_universities(self.catalog.get(first_id), self.catalog.get(second_id))

    def get_statistics(self) -> CatalogStatistics:
        """Headline numbers for the dashboard."""
        universities = self.catalog.universities
        total = len(universities)

        avg_tuition = 0
        if total:
            mean = Decimal(str(sum(u.tuition_fee for u in universities))) / total
            avg_tuition = int(mean.quantize(Decimal("1"), rounding=ROUND_HALF_UP))

        ranked = sorted(
            (u for u in universities if u.ranking is not None),
            key=lambda u: u.ranking,
        )

        return CatalogStatistics(
            total_universities=total,
            countries=len({u.country for u in universities}),
            avg_tuition_fee=avg_tuition,
            top_ranked=ranked[:TOP_RANKED_COUNT],
        )
