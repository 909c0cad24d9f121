"""
Unit tests for catalog loading.
"""

import json

import pydantic
import pytest

from unicompare.config.settings import DEFAULT_CATALOG_PATH
from unicompare.infrastructure.catalog import UniversityCatalog, load_catalog
from unicompare.infrastructure.exceptions import CatalogError


def _record(**overrides):
    record = {
        "id": "uni",
        "name": "Some University",
        "country": "Portugal",
        "city": "Lisbon",
        "tuitionFee": 7000,
        "currency": "EUR",
        "ranking": None,
        "establishedYear": 1911,
        "studentPopulation": 48000,
        "internationalStudents": 12,
        "acceptanceRate": 60,
        "graduationRate": 75,
        "programs": ["Law", "Medicine"],
        "researchOutput": "Medium",
        "scholarshipAvailable": False,
        "campusType": "Urban",
        "housingAvailable": True,
        "employmentRate": 80,
        "website": "https://example.pt",
        "description": "Public university.",
    }
    record.update(overrides)
    return record


class TestUniversityCatalog:

    def test_lookup_and_membership(self, sample_catalog):
        assert sample_catalog.get("alpha").name == "Alpha Institute"
        assert sample_catalog.get("missing") is None
        assert "beta" in sample_catalog
        assert "missing" not in sample_catalog

    def test_iterates_in_catalog_order(self, sample_catalog):
        assert [u.id for u in sample_catalog] == ["alpha", "beta", "gamma", "delta", "epsilon"]
        assert len(sample_catalog) == 5

    def test_duplicate_ids_rejected(self, university_factory):
        with pytest.raises(CatalogError):
            UniversityCatalog([university_factory(id="dup"), university_factory(id="dup")])

    def test_filter_options_cached(self, sample_catalog):
        assert sample_catalog.filter_options is sample_catalog.filter_options

    def test_records_are_immutable(self, sample_catalog):
        with pytest.raises(pydantic.ValidationError):
            sample_catalog.get("alpha").tuition_fee = 1

    def test_from_records_rejects_invalid_percentage(self):
        with pytest.raises(CatalogError):
            UniversityCatalog.from_records([_record(acceptanceRate=140)])


class TestLoadCatalog:

    def test_loads_camel_case_json(self, tmp_path):
        path = tmp_path / "catalog.json"
        path.write_text(json.dumps([_record(), _record(id="other", ranking=3)]))
        catalog = load_catalog(path)
        assert len(catalog) == 2
        assert catalog.get("uni").tuition_fee == 7000
        assert catalog.get("uni").ranking is None
        assert catalog.get("other").programs == ("Law", "Medicine")

    def test_missing_file(self, tmp_path):
        with pytest.raises(CatalogError) as exc_info:
            load_catalog(tmp_path / "nope.json")
        assert exc_info.value.message == "Catalog file not found"

    def test_malformed_json(self, tmp_path):
        path = tmp_path / "catalog.json"
        path.write_text("[{")
        with pytest.raises(CatalogError):
            load_catalog(path)

    def test_top_level_must_be_list(self, tmp_path):
        path = tmp_path / "catalog.json"
        path.write_text(json.dumps({"universities": []}))
        with pytest.raises(CatalogError):
            load_catalog(path)

    def test_future_year_rejected(self, tmp_path):
        path = tmp_path / "catalog.json"
        path.write_text(json.dumps([_record(establishedYear=9999)]))
        with pytest.raises(CatalogError) as exc_info:
            load_catalog(path)
        assert exc_info.value.details["path"] == str(path)


class TestPackagedCatalog:
    """The catalog shipped with the package."""

    @pytest.fixture(scope="class")
    def catalog(self):
        return load_catalog(DEFAULT_CATALOG_PATH)

    def test_has_26_universities(self, catalog):
        assert len(catalog) == 26

    def test_contains_unranked_universities(self, catalog):
        assert any(u.ranking is None for u in catalog)

    def test_facets_are_sorted_and_distinct(self, catalog):
        options = catalog.filter_options
        for values in (options.countries, options.cities, options.programs):
            assert values == sorted(set(values))
