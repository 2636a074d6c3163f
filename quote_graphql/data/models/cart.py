from __future__ import annotations

from decimal import Decimal
from typing import Annotated, List, Optional

from pydantic import BaseModel, ConfigDict, Field, PlainSerializer

from .products import Product, ProductView

# GraphQL exposes quantities as Float.
Quantity = Annotated[Decimal, PlainSerializer(float, return_type=float, when_used="json")]


class CartError(BaseModel):
    """Cart-level error recorded on the quote (e.g. a stock or price problem)."""
    model_config = ConfigDict(frozen=True)

    code: Optional[int] = Field(default=None, description="Origin error code")
    text: str = Field(description="Display message")


class CartItem(BaseModel):
    """Single line item of a cart."""
    model_config = ConfigDict(frozen=True)

    item_id: int = Field(description="Line item identifier")
    product: Product = Field(description="Product the line refers to")
    quantity: Decimal = Field(description="Requested quantity")
    sku: Optional[str] = Field(default=None, description="SKU of the line; defaults to the product SKU")
    parent_item_id: Optional[int] = Field(default=None, description="Parent line for child items of composite products")
    is_deleted: bool = Field(default=False, description="Marked for removal on next save")

    @property
    def product_sku(self) -> str:
        return self.sku or self.product.sku


class Cart(BaseModel):
    """Cart aggregate snapshot handed to the resolver."""
    model_config = ConfigDict(frozen=True)

    cart_id: str = Field(description="Cart identifier")
    has_error: bool = Field(default=False, description="Whether cart-level errors are present")
    errors: List[CartError] = Field(default_factory=list, description="Cart-level errors in insertion order")
    items: List[CartItem] = Field(default_factory=list, description="All line items including hidden ones")

    def all_visible_items(self) -> List[CartItem]:
        # Child lines of composite products and deleted lines are hidden.
        return [
            item for item in self.items
            if not item.is_deleted and item.parent_item_id is None
        ]


class CartItemView(BaseModel):
    """Resolved cart item as returned to the GraphQL layer."""
    model_config = ConfigDict(frozen=True)

    id: int = Field(description="Line item identifier")
    uid: str = Field(description="Encoded line item identifier")
    quantity: Quantity = Field(description="Requested quantity")
    product: ProductView = Field(description="Product data of the line")
    model: CartItem = Field(description="Source line item", exclude=True)
    image: Optional[str] = Field(default=None, description="Image attribute of the product")
