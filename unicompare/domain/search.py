"""
University Search Engine

Pure functions behind the list and compare endpoints:
- filter_universities: conjunctive multi-field filtering
- sort_universities: stable, field-specific ordering
- paginate: offset/limit slicing with page metadata
- extract_filter_options: facet values for the filter panel
- parse_comparison_ids / compare_universities: side-by-side difference metrics

None of these functions mutate their input.
"""

import math
from typing import Callable, Iterable, List, Optional, Sequence, Tuple

from unicompare.domain.models import (
    ComparisonMetrics,
    FilterOptions,
    SortField,
    SortOrder,
    University,
    UniversityComparison,
    UniversityFilters,
)
from unicompare.infrastructure.exceptions import InvalidArgumentError


Predicate = Callable[[University], bool]


def _matches_search(university: University, term: str) -> bool:
    needle = term.lower()
    return any(
        needle in value.lower()
        for value in (
            university.name,
            university.city,
            university.country,
            university.description,
        )
    )


def _build_predicates(filters: UniversityFilters) -> List[Predicate]:
    """Translate the active filter dimensions into predicates."""
    predicates: List[Predicate] = []

    if filters.search:
        term = filters.search
        predicates.append(lambda u: _matches_search(u, term))

    # Multiple selection filters (empty list = no constraint)
    if filters.countries:
        countries = set(filters.countries)
        predicates.append(lambda u: u.country in countries)
    if filters.cities:
        cities = set(filters.cities)
        predicates.append(lambda u: u.city in cities)
    if filters.campus_types:
        campus_types = set(filters.campus_types)
        predicates.append(lambda u: u.campus_type in campus_types)
    if filters.research_output:
        levels = set(filters.research_output)
        predicates.append(lambda u: u.research_output in levels)

    # Programs: ANY requested program is enough
    if filters.programs:
        programs = set(filters.programs)
        predicates.append(lambda u: not programs.isdisjoint(u.programs))

    if filters.min_tuition is not None:
        predicates.append(lambda u: u.tuition_fee >= filters.min_tuition)
    if filters.max_tuition is not None:
        predicates.append(lambda u: u.tuition_fee <= filters.max_tuition)

    # Unranked universities never satisfy a ranking bound
    if filters.min_ranking is not None:
        predicates.append(
            lambda u: u.ranking is not None and u.ranking >= filters.min_ranking
        )
    if filters.max_ranking is not None:
        predicates.append(
            lambda u: u.ranking is not None and u.ranking <= filters.max_ranking
        )

    if filters.min_year is not None:
        predicates.append(lambda u: u.established_year >= filters.min_year)
    if filters.max_year is not None:
        predicates.append(lambda u: u.established_year <= filters.max_year)

    if filters.min_acceptance_rate is not None:
        predicates.append(lambda u: u.acceptance_rate >= filters.min_acceptance_rate)
    if filters.max_acceptance_rate is not None:
        predicates.append(lambda u: u.acceptance_rate <= filters.max_acceptance_rate)

    if filters.scholarship_only:
        predicates.append(lambda u: u.scholarship_available)

    if filters.min_employment_rate is not None:
        predicates.append(lambda u: u.employment_rate >= filters.min_employment_rate)

    return predicates


def filter_universities(
    universities: Iterable[University],
    filters: UniversityFilters,
) -> List[University]:
    """
    Keep the universities that satisfy every active filter.

    Args:
        universities: Records to filter, in catalog order
        filters: Validated filter request

    Returns:
        Matching records, input order preserved. May be empty.
    """
    predicates = _build_predicates(filters)
    return [u for u in universities if all(check(u) for check in predicates)]


_NUMERIC_KEYS = {
    SortField.TUITION_FEE: lambda u: u.tuition_fee,
    SortField.ESTABLISHED_YEAR: lambda u: u.established_year,
    SortField.ACCEPTANCE_RATE: lambda u: u.acceptance_rate,
    SortField.EMPLOYMENT_RATE: lambda u: u.employment_rate,
}


def sort_universities(
    universities: Sequence[University],
    sort_by: Optional[SortField] = None,
    sort_order: SortOrder = SortOrder.ASC,
) -> List[University]:
    """
    Order universities by a single field.

    Without ``sort_by`` the input order is kept. The sort is stable in both
    directions. Unranked universities always come after ranked ones when
    sorting by ranking, whatever the direction.
    """
    if sort_by is None:
        return list(universities)

    reverse = sort_order == SortOrder.DESC

    if sort_by == SortField.NAME:
        return sorted(universities, key=lambda u: u.name.casefold(), reverse=reverse)

    if sort_by == SortField.RANKING:
        ranked = [u for u in universities if u.ranking is not None]
        unranked = [u for u in universities if u.ranking is None]
        return sorted(ranked, key=lambda u: u.ranking, reverse=reverse) + unranked

    return sorted(universities, key=_NUMERIC_KEYS[sort_by], reverse=reverse)


def paginate(
    universities: Sequence[University],
    page: int,
    limit: int,
) -> Tuple[List[University], int, int]:
    """
    Slice one page out of an ordered result.

    Returns:
        (page items, total matching, total pages). A page past the end is
        an empty list, not an error.
    """
    total = len(universities)
    total_pages = math.ceil(total / limit)
    start = (page - 1) * limit
    return list(universities[start:start + limit]), total, total_pages


def extract_filter_options(universities: Iterable[University]) -> FilterOptions:
    """Collect the distinct countries, cities and programs, sorted."""
    countries = set()
    cities = set()
    programs = set()
    for u in universities:
        countries.add(u.country)
        cities.add(u.city)
        programs.update(u.programs)
    return FilterOptions(
        countries=sorted(countries),
        cities=sorted(cities),
        programs=sorted(programs),
    )


def parse_comparison_ids(raw: Optional[str]) -> List[str]:
    """
    Split the comma-delimited ``ids`` query parameter.

    Blank items are dropped; the count is checked by the service.

    Raises:
        InvalidArgumentError: parameter missing or blank
    """
    if raw is None or not raw.strip():
        raise InvalidArgumentError("Missing ids parameter")
    return [part.strip() for part in raw.split(",") if part.strip()]


def compare_universities(first: University, second: University) -> UniversityComparison:
    """Side-by-side comparison with absolute differences."""
    ranking_difference = None
    if first.ranking is not None and second.ranking is not None:
        ranking_difference = abs(first.ranking - second.ranking)

    return UniversityComparison(
        universities=(first, second),
        comparison=ComparisonMetrics(
            tuition_difference=abs(first.tuition_fee - second.tuition_fee),
            ranking_difference=ranking_difference,
            acceptance_rate_difference=abs(first.acceptance_rate - second.acceptance_rate),
            employment_rate_difference=abs(first.employment_rate - second.employment_rate),
        ),
    )
