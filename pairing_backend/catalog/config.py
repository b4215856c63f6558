from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class CatalogConfig:
    """
    Location of the drink catalogue CSV.
    """

    data_dir: Path = Path(__file__).resolve().parent.parent / "data"
    filename: str = "drinks.csv"

    @property
    def path(self) -> Path:
        return self.data_dir / self.filename


DEFAULT_CATALOG_CONFIG = CatalogConfig()
