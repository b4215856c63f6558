from __future__ import annotations

import logging
from typing import Iterable

import pandas as pd
from pydantic import ValidationError

from ..errors import CatalogError
from .config import DEFAULT_CATALOG_CONFIG, CatalogConfig
from .models import DrinkRecord
from .seed import seed_catalog

logger = logging.getLogger(__name__)

_OPTIONAL_COLUMNS = ("image_url", "affiliate_link")


def _load(config: CatalogConfig) -> tuple[DrinkRecord, ...]:
    path = config.path
    try:
        path = seed_catalog(config)
        df = pd.read_csv(path, dtype=str, keep_default_na=False)
    except (OSError, pd.errors.ParserError, pd.errors.EmptyDataError) as e:
        raise CatalogError(f"Failed to read drink catalogue {path}: {e}") from e

    # Strip stray whitespace so blank cells count as missing
    df = df.apply(lambda col: col.str.strip())

    drinks: list[DrinkRecord] = []
    for position, row in enumerate(df.to_dict(orient="records"), start=1):
        for col in _OPTIONAL_COLUMNS:
            if not row.get(col):
                row[col] = None
        try:
            drinks.append(DrinkRecord(id=position, **row))
        except ValidationError as e:
            raise CatalogError(f"Invalid drink on row {position} of {path}: {e}") from e

    logger.info("Loaded %d drinks from %s", len(drinks), path)
    return tuple(drinks)


class DrinkCatalog:
    """Read-only drink catalogue backed by a CSV file.

    The file is read on first use and kept as a frozen snapshot, so ids stay
    stable for the life of the instance.
    """

    def __init__(self, config: CatalogConfig = DEFAULT_CATALOG_CONFIG):
        self.config = config
        self._drinks: tuple[DrinkRecord, ...] | None = None
        self._in_memory = False

    @classmethod
    def from_records(cls, records: Iterable[DrinkRecord]) -> DrinkCatalog:
        catalog = cls()
        catalog._drinks = tuple(records)
        catalog._in_memory = True
        return catalog

    def get_all_drinks(self) -> tuple[DrinkRecord, ...]:
        if self._drinks is None:
            self._drinks = _load(self.config)
        return self._drinks

    def get_drink(self, drink_id: int) -> DrinkRecord | None:
        for drink in self.get_all_drinks():
            if drink.id == drink_id:
                return drink
        return None

    def get_drinks_by_type(self, drink_type: str) -> list[DrinkRecord]:
        wanted = drink_type.strip().lower()
        return [d for d in self.get_all_drinks() if d.type.lower() == wanted]

    def search_drinks(self, query: str) -> list[DrinkRecord]:
        q = query.strip().lower()
        if not q:
            return list(self.get_all_drinks())
        return [
            d
            for d in self.get_all_drinks()
            if q in d.name.lower()
            or q in d.type.lower()
            or q in d.flavour_notes.lower()
            or q in d.recommended_foods.lower()
        ]

    def reload(self) -> None:
        if not self._in_memory:
            self._drinks = None
