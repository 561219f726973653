from __future__ import annotations

import logging
from collections.abc import Iterable
from pathlib import Path

import pandas as pd

from .config import DEFAULT_CATALOG_CONFIG, CatalogConfig
from .models import Flower

logger = logging.getLogger(__name__)

CATALOG_COLUMNS: list[str] = [
    "flower_id",
    "name",
    "image_url",
    "meaning",
    "color",
    "season",
]


class FlowerCatalog:
    """Read-only, in-memory flower catalog backed by a DataFrame."""

    def __init__(self, df: pd.DataFrame) -> None:
        missing = [c for c in CATALOG_COLUMNS if c not in df.columns]
        if missing:
            raise ValueError(f"Flower catalog is missing columns: {', '.join(missing)}")

        df = df[CATALOG_COLUMNS].fillna("").astype(str)
        dupes = df["flower_id"].duplicated()
        if dupes.any():
            logger.warning(
                "Dropping %d duplicate flower_id rows: %s",
                int(dupes.sum()),
                sorted(set(df.loc[dupes, "flower_id"])),
            )
            df = df.loc[~dupes]

        self._df = df.reset_index(drop=True)
        self._flowers = [Flower(**row) for row in self._df.to_dict(orient="records")]
        self._by_id = {f.flower_id: f for f in self._flowers}

    @classmethod
    def from_csv(cls, path: Path) -> FlowerCatalog:
        df = pd.read_csv(path, dtype=str, keep_default_na=False)
        catalog = cls(df)
        logger.info("Loaded %d flowers from %s", len(catalog), path)
        return catalog

    @classmethod
    def from_flowers(cls, flowers: Iterable[Flower]) -> FlowerCatalog:
        rows = [f.model_dump() for f in flowers]
        return cls(pd.DataFrame(rows, columns=CATALOG_COLUMNS))

    def __len__(self) -> int:
        return len(self._flowers)

    def get_all(self) -> list[Flower]:
        """Return a snapshot of every flower, in catalog order."""
        return list(self._flowers)

    def get(self, flower_id: str) -> Flower | None:
        return self._by_id.get(flower_id)

    def search(self, term: str | None = None) -> list[Flower]:
        """Return flowers whose name contains *term*; everything when blank."""
        if term is None or not term.strip():
            return self.get_all()
        mask = self._df["name"].str.contains(term, regex=False, na=False)
        return [self._flowers[i] for i in self._df.index[mask.to_numpy()]]


_catalog: FlowerCatalog | None = None


def load_catalog(config: CatalogConfig = DEFAULT_CATALOG_CONFIG) -> FlowerCatalog:
    return FlowerCatalog.from_csv(config.catalog_path)


def get_catalog() -> FlowerCatalog:
    """Return the process-wide catalog, loading it on first call."""
    global _catalog
    if _catalog is None:
        _catalog = load_catalog()
    return _catalog


def reset_catalog() -> None:
    global _catalog
    _catalog = None
