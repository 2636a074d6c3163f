from __future__ import annotations

from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field


class Product(BaseModel):
    """Catalog product as returned by the product collaborators."""
    model_config = ConfigDict(frozen=True)

    product_id: int = Field(description="Unique product identifier")
    sku: str = Field(description="Stock keeping unit code")
    name: Optional[str] = Field(default=None, description="Product name")
    type_id: Optional[str] = Field(default=None, description="Product type code (simple, configurable, ...)")
    price: Optional[float] = Field(default=None, description="Base product price")
    image: Optional[str] = Field(default=None, description="Base image path")
    small_image: Optional[str] = Field(default=None, description="Small image path")
    thumbnail: Optional[str] = Field(default=None, description="Thumbnail image path")

    def get_data(self) -> Dict[str, Any]:
        """Attribute mapping of the product."""
        return self.model_dump()


class ProductView(BaseModel):
    """Product attributes as exposed on a cart item, plus its encoded uid."""
    model_config = ConfigDict(frozen=True)

    product_id: int = Field(description="Unique product identifier")
    sku: str = Field(description="Stock keeping unit code")
    name: Optional[str] = Field(default=None, description="Product name")
    type_id: Optional[str] = Field(default=None, description="Product type code")
    price: Optional[float] = Field(default=None, description="Base product price")
    image: Optional[str] = Field(default=None, description="Base image path")
    small_image: Optional[str] = Field(default=None, description="Small image path")
    thumbnail: Optional[str] = Field(default=None, description="Thumbnail image path")
    uid: str = Field(description="Encoded product identifier")
    model: Product = Field(description="Source product", exclude=True)

    @classmethod
    def from_product(cls, product: Product, uid: str) -> "ProductView":
        return cls(**product.get_data(), uid=uid, model=product)
