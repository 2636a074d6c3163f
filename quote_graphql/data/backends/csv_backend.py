from __future__ import annotations

from pathlib import Path
from typing import List

import pandas as pd

from ...config import get_config
from ...logging import get_logger
from ..exceptions import NoSuchEntityError
from ..interface import ProductRepository, ProductSetFetcher
from ..models import Cart, Product

REQUIRED_COLUMNS = ["product_id", "sku"]


class CsvCatalog(ProductSetFetcher, ProductRepository):
    """
    CSV-backed product catalog.
    - Loads the products file from `data_dir` once at construction.
    - Serves both the per-cart product set and the per-SKU repository lookup.
    """

    def __init__(self, data_dir: str | Path = None, products_file: str = None) -> None:
        config = get_config()
        if data_dir is None:
            data_dir = config.data_dir
        if products_file is None:
            products_file = config.products_file

        self.logger = get_logger(__name__)
        self.data_dir = Path(data_dir)

        # If the path is relative, make it relative to the repository root
        if not self.data_dir.is_absolute():
            current = Path.cwd()
            repo_root = None

            # Look up the directory tree for pyproject.toml
            for parent in [current] + list(current.parents):
                if (parent / "pyproject.toml").exists():
                    repo_root = parent
                    break

            self.data_dir = (repo_root or current) / self.data_dir

        self._products = self._load_products(self.data_dir / products_file)
        self.logger.info(f"Loaded {len(self._products)} products from {self.data_dir / products_file}")

    # ---------- loading helpers ----------

    @staticmethod
    def _load_products(path: Path) -> pd.DataFrame:
        if not path.parent.exists():
            raise FileNotFoundError(
                f"Data directory not found: {path.parent}\n"
                f"Set DATA_DIR environment variable to point to your data directory"
            )
        if not path.exists():
            raise FileNotFoundError(
                f"Products file missing: {path}\n"
                f"Set PRODUCTS_FILE or add {path.name} to {path.parent}"
            )

        try:
            products = pd.read_csv(path, dtype={"sku": str})
        except Exception as e:
            raise RuntimeError(
                f"Error reading products from {path}: {e}\n"
                f"Please check that the CSV file is valid and readable."
            ) from e

        missing = [c for c in REQUIRED_COLUMNS if c not in products.columns]
        if missing:
            raise RuntimeError(f"Products file {path} is missing columns: {', '.join(missing)}")

        try:
            products["product_id"] = products["product_id"].astype(int)
        except (TypeError, ValueError) as e:
            raise RuntimeError(f"Products file {path} has blank or non-numeric product_id values: {e}") from e
        return products

    def _to_products(self, df: pd.DataFrame) -> List[Product]:
        # Blank CSV cells come back as NaN; the models expect None.
        records = df.astype(object).where(pd.notna(df), None).to_dict(orient="records")
        return [Product(**record) for record in records]

    # ---------- interface implementation ----------

    def fetch(self, cart: Cart) -> List[Product]:
        product_ids = {item.product.product_id for item in cart.all_visible_items()}
        if not product_ids:
            return []
        df = self._products
        return self._to_products(df.loc[df["product_id"].isin(product_ids)])

    def get_by_sku(self, sku: str) -> Product:
        df = self._products
        matches = df.loc[df["sku"] == sku]
        if matches.empty:
            raise NoSuchEntityError()
        return self._to_products(matches.head(1))[0]
