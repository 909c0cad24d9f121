"""
Domain Models for UniCompare

Pure Pydantic models with no framework dependencies.
These models define the catalog entities, the validated filter request
and the response shapes. All of them are immutable once built.

Wire format is camelCase (``tuitionFee``, ``totalPages``...); Python
attributes stay snake_case.
"""

from datetime import date
from enum import Enum
from typing import Optional, List, Tuple
from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel


MIN_ESTABLISHED_YEAR = 1000
DEFAULT_PAGE_SIZE = 12
MAX_PAGE_SIZE = 100


def _current_year() -> int:
    return date.today().year


class CampusType(str, Enum):
    """Campus setting."""
    URBAN = "Urban"
    SUBURBAN = "Suburban"
    RURAL = "Rural"


class ResearchOutput(str, Enum):
    """Research output level."""
    LOW = "Low"
    MEDIUM = "Medium"
    HIGH = "High"
    VERY_HIGH = "Very High"


class SortField(str, Enum):
    """Fields the university list can be ordered by."""
    NAME = "name"
    RANKING = "ranking"
    TUITION_FEE = "tuitionFee"
    ESTABLISHED_YEAR = "establishedYear"
    ACCEPTANCE_RATE = "acceptanceRate"
    EMPLOYMENT_RATE = "employmentRate"


class SortOrder(str, Enum):
    ASC = "asc"
    DESC = "desc"


class CamelModel(BaseModel):
    """Frozen base model serialized with camelCase keys."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )


class University(CamelModel):
    """University record from the static catalog."""
    id: str = Field(..., min_length=1)
    name: str
    country: str
    city: str
    state: Optional[str] = None

    # Costs (annual tuition in USD)
    tuition_fee: float = Field(..., ge=0)
    currency: str
    ranking: Optional[int] = Field(None, ge=1, description="World ranking, None when unranked")
    established_year: int = Field(..., ge=MIN_ESTABLISHED_YEAR)
    image_url: str = ""

    # Student body (percentages on a 0-100 scale)
    student_population: int = Field(..., ge=0)
    international_students: float = Field(..., ge=0, le=100)
    acceptance_rate: float = Field(..., ge=0, le=100)
    graduation_rate: float = Field(..., ge=0, le=100)

    # Academics
    programs: Tuple[str, ...] = ()
    research_output: ResearchOutput

    # Student support
    scholarship_available: bool
    avg_scholarship_amount: Optional[float] = Field(None, ge=0)

    # Campus
    campus_type: CampusType
    housing_available: bool

    # Career outcomes
    employment_rate: float = Field(..., ge=0, le=100)
    avg_starting_salary: Optional[float] = Field(None, ge=0)

    website: str = ""
    description: str = ""

    @field_validator("established_year")
    @classmethod
    def validate_not_in_future(cls, v: int) -> int:
        if v > _current_year():
            raise ValueError("established year cannot be in the future")
        return v


class UniversityFilters(CamelModel):
    """
    Validated list request.

    Absent values never constrain the result. Range bounds are inclusive.
    """
    search: Optional[str] = None
    countries: Optional[List[str]] = None
    cities: Optional[List[str]] = None
    min_tuition: Optional[float] = Field(None, ge=0)
    max_tuition: Optional[float] = Field(None, ge=0)
    min_ranking: Optional[int] = Field(None, ge=1)
    max_ranking: Optional[int] = Field(None, ge=1)
    min_year: Optional[int] = Field(None, ge=MIN_ESTABLISHED_YEAR)
    max_year: Optional[int] = Field(None, ge=MIN_ESTABLISHED_YEAR)
    programs: Optional[List[str]] = None
    min_acceptance_rate: Optional[float] = Field(None, ge=0, le=100)
    max_acceptance_rate: Optional[float] = Field(None, ge=0, le=100)
    campus_types: Optional[List[CampusType]] = None
    scholarship_only: Optional[bool] = None
    min_employment_rate: Optional[float] = Field(None, ge=0, le=100)
    research_output: Optional[List[ResearchOutput]] = None

    # Pagination & ordering
    page: int = Field(1, ge=1)
    limit: int = Field(DEFAULT_PAGE_SIZE, ge=1, le=MAX_PAGE_SIZE)
    sort_by: Optional[SortField] = None
    sort_order: SortOrder = SortOrder.ASC

    @field_validator("min_year", "max_year")
    @classmethod
    def validate_year_not_in_future(cls, v: Optional[int]) -> Optional[int]:
        if v is not None and v > _current_year():
            raise ValueError(f"year must be <= {_current_year()}")
        return v


class PaginationMeta(CamelModel):
    total: int
    page: int
    limit: int
    total_pages: int


class FilterOptions(CamelModel):
    """Distinct values present in the full catalog."""
    countries: List[str]
    cities: List[str]
    programs: List[str]


class PaginatedUniversities(CamelModel):
    """One page of filtered, ordered universities."""
    data: List[University]
    pagination: PaginationMeta
    filters: FilterOptions


class ComparisonMetrics(CamelModel):
    """Absolute differences between two universities."""
    tuition_difference: float
    ranking_difference: Optional[int] = None
    acceptance_rate_difference: float
    employment_rate_difference: float


class UniversityComparison(CamelModel):
    universities: Tuple[University, University]
    comparison: ComparisonMetrics


class CatalogStatistics(CamelModel):
    """Headline numbers for the whole catalog."""
    total_universities: int
    countries: int
    avg_tuition_fee: int
    top_ranked: List[University]
