from __future__ import annotations

from typing import Literal, Optional

from ..config import get_config
from .backends.csv_backend import CsvCatalog


def get_catalog(kind: Optional[Literal["csv"]] = None) -> CsvCatalog:
    """Build the configured product catalog backend."""
    config = get_config()
    kind = kind or config.default_catalog
    if kind == "csv":
        # Reads from configured CSV folder
        return CsvCatalog(data_dir=config.data_dir, products_file=config.products_file)
    raise ValueError(f"Unknown catalog kind: {kind}")
