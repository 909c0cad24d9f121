"""
University Catalog

Read-only, in-memory data source for university records.
The catalog is loaded once at startup from a JSON file and never mutated;
services receive it by injection so another data source can replace it
without touching the search engine.
"""

import json
import logging
from functools import cached_property
from pathlib import Path
from typing import Dict, Iterable, Iterator, Optional, Tuple, Union

import pydantic

from unicompare.domain.models import FilterOptions, University
from unicompare.domain.search import extract_filter_options
from unicompare.infrastructure.exceptions import CatalogError

logger = logging.getLogger(__name__)


class UniversityCatalog:
    """
    Immutable collection of universities with an id index.

    Iteration yields records in catalog (file) order.
    """

    def __init__(self, universities: Iterable[University]):
        records = tuple(universities)
        index: Dict[str, University] = {}
        for university in records:
            if university.id in index:
                raise CatalogError(f"Duplicate university id: {university.id}")
            index[university.id] = university
        self._universities: Tuple[University, ...] = records
        self._index = index

    def __iter__(self) -> Iterator[University]:
        return iter(self._universities)

    def __len__(self) -> int:
        return len(self._universities)

    def __contains__(self, university_id: object) -> bool:
        return university_id in self._index

    @property
    def universities(self) -> Tuple[University, ...]:
        return self._universities

    def get(self, university_id: str) -> Optional[University]:
        """Look up a university by id, None when unknown."""
        return self._index.get(university_id)

    @cached_property
    def filter_options(self) -> FilterOptions:
        """Facet values, computed once since the catalog never changes."""
        return extract_filter_options(self._universities)

    @classmethod
    def from_records(cls, records: Iterable[dict]) -> "UniversityCatalog":
        """Build a catalog from raw camelCase dicts (JSON shape)."""
        try:
            return cls(University.model_validate(record) for record in records)
        except pydantic.ValidationError as e:
            raise CatalogError("Invalid university record in catalog", original_error=e) from e


def load_catalog(path: Union[str, Path]) -> UniversityCatalog:
    """
    Load the catalog from a JSON file holding a list of university objects.

    Raises:
        CatalogError: file missing, unreadable, malformed or with invalid records
    """
    path = Path(path)
    try:
        with path.open(encoding="utf-8") as f:
            records = json.load(f)
    except FileNotFoundError as e:
        raise CatalogError("Catalog file not found", path=str(path), original_error=e) from e
    except (OSError, json.JSONDecodeError) as e:
        raise CatalogError(f"Could not read catalog: {e}", path=str(path), original_error=e) from e

    if not isinstance(records, list):
        raise CatalogError("Catalog must be a JSON list of universities", path=str(path))

    try:
        catalog = UniversityCatalog.from_records(records)
    except CatalogError as e:
        e.details.setdefault("path", str(path))
        raise

    logger.info(f"Loaded {len(catalog)} universities from {path}")
    return catalog
