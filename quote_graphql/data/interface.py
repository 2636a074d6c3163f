# quote_graphql/data/interface.py
from __future__ import annotations

from typing import List, Protocol

from .models import Cart, Product


# ---- Collaborator protocols ----

class ProductSetFetcher(Protocol):
    """Loads every product referenced by a cart in a single pass."""

    def fetch(self, cart: Cart) -> List[Product]:
        """Return the products of the cart's visible items."""
        ...


class ProductRepository(Protocol):
    """
    Per-SKU product lookup.

    Implementations raise NoSuchEntityError for unknown SKUs.
    """

    def get_by_sku(self, sku: str) -> Product:
        """Get a product by its SKU."""
        ...


class IdentifierEncoder(Protocol):
    """Turns a raw identifier into an opaque external uid."""

    def encode(self, value: str) -> str:
        ...
