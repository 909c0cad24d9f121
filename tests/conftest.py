"""
Test configuration and fixtures for UniCompare.

Provides shared fixtures for unit and integration tests.
"""

import pytest

from fastapi.testclient import TestClient

from unicompare.domain.models import University
from unicompare.domain.services import UniversityService
from unicompare.infrastructure.catalog import UniversityCatalog


def make_university(**overrides) -> University:
    """Build a valid University, overriding any field by its Python name."""
    fields = {
        "id": "test-uni",
        "name": "Test University",
        "country": "Testland",
        "city": "Testville",
        "tuition_fee": 20000,
        "currency": "USD",
        "ranking": 50,
        "established_year": 1900,
        "student_population": 10000,
        "international_students": 20,
        "acceptance_rate": 50,
        "graduation_rate": 80,
        "programs": ("Computer Science",),
        "research_output": "High",
        "scholarship_available": True,
        "campus_type": "Urban",
        "housing_available": True,
        "employment_rate": 85,
        "website": "https://example.edu",
        "description": "A university used in tests.",
    }
    fields.update(overrides)
    return University(**fields)


# =============================================================================
# Sample Data Fixtures
# =============================================================================

@pytest.fixture
def university_factory():
    """Factory for one-off universities."""
    return make_university


@pytest.fixture
def sample_universities():
    """Five universities covering every filter dimension."""
    return [
        make_university(
            id="alpha",
            name="Alpha Institute",
            country="United States",
            city="Boston",
            tuition_fee=55000,
            ranking=3,
            established_year=1861,
            acceptance_rate=5,
            employment_rate=96,
            programs=("Computer Science", "Engineering"),
            research_output="Very High",
            campus_type="Urban",
            scholarship_available=True,
            description="Technology research powerhouse.",
        ),
        make_university(
            id="beta",
            name="beta College",
            country="United Kingdom",
            city="Oxford",
            tuition_fee=18000,
            ranking=None,
            established_year=1096,
            acceptance_rate=15,
            employment_rate=90,
            programs=("Law", "History"),
            research_output="High",
            campus_type="Urban",
            scholarship_available=False,
            description="Historic collegiate university.",
        ),
        make_university(
            id="gamma",
            name="Gamma University",
            country="Canada",
            city="Toronto",
            tuition_fee=18000,
            ranking=20,
            established_year=1827,
            acceptance_rate=43,
            employment_rate=88,
            programs=("Medicine", "Engineering"),
            research_output="High",
            campus_type="Suburban",
            scholarship_available=True,
            description="Large public university near the lake.",
        ),
        make_university(
            id="delta",
            name="Delta State",
            country="United States",
            city="Hanover",
            tuition_fee=30000,
            ranking=None,
            established_year=1769,
            acceptance_rate=60,
            employment_rate=80,
            programs=("History", "Economics"),
            research_output="Medium",
            campus_type="Rural",
            scholarship_available=True,
            description="Small liberal arts college in the woods.",
        ),
        make_university(
            id="epsilon",
            name="Epsilon Tech",
            country="Germany",
            city="Munich",
            tuition_fee=0,
            ranking=12,
            established_year=1868,
            acceptance_rate=8,
            employment_rate=92,
            programs=("Engineering", "Physics"),
            research_output="Very High",
            campus_type="Urban",
            scholarship_available=False,
            description="Tuition free technical university in Bavaria.",
        ),
    ]


@pytest.fixture
def sample_catalog(sample_universities):
    """Catalog built from the sample universities."""
    return UniversityCatalog(sample_universities)


@pytest.fixture
def service(sample_catalog):
    """UniversityService bound to the sample catalog."""
    return UniversityService(sample_catalog)


# =============================================================================
# App Fixtures
# =============================================================================

@pytest.fixture
def app(sample_catalog):
    """Get the FastAPI application wired to the sample catalog."""
    from unicompare.main import app
    from unicompare.api.dependencies import get_catalog

    app.dependency_overrides[get_catalog] = lambda: sample_catalog
    yield app
    app.dependency_overrides.clear()


@pytest.fixture
def client(app):
    """Get synchronous test client."""
    return TestClient(app)
