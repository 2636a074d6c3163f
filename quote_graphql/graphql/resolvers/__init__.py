from .cart_items import CartItemsResolver

__all__ = ["CartItemsResolver"]
