from .products import Product, ProductView
from .cart import Cart, CartError, CartItem, CartItemView

__all__ = [
    # Catalog records
    "Product",
    "ProductView",
    # Cart records
    "Cart",
    "CartError",
    "CartItem",
    "CartItemView",
]
