from __future__ import annotations

from typing import Any, Callable, Dict, List, Mapping, Optional, Union

from ...data.exceptions import NoSuchEntityError
from ...data.interface import IdentifierEncoder, ProductRepository, ProductSetFetcher
from ...data.models import Cart, CartItemView, ProductView
from ...logging import get_logger
from ..errors import ConfigurationError, ErrorMarker, InputError, NotFoundError

CartItemResult = Union[CartItemView, ErrorMarker]


class CartItemsResolver:
    """Resolves the `items` field of a cart.

    Cart-level errors and unmatched products are returned inline as error
    markers so the remaining items still reach the client. A failed SKU
    lookup is not recovered and fails the whole field.
    """

    def __init__(
        self,
        product_set_fetcher: ProductSetFetcher,
        uid_encoder: IdentifierEncoder,
        product_repository_factory: Callable[[], ProductRepository],
    ) -> None:
        self.product_set_fetcher = product_set_fetcher
        self.uid_encoder = uid_encoder
        self.product_repository_factory = product_repository_factory
        self.logger = get_logger(__name__)

    def resolve(
        self,
        field: Any,
        context: Any,
        info: Any,
        value: Optional[Mapping[str, Any]] = None,
        args: Optional[Mapping[str, Any]] = None,
    ) -> List[CartItemResult]:
        """Field resolver entry point called by the query engine.

        Args:
            field: Field definition being resolved (unused).
            context: Request context (unused).
            info: Resolve info (unused).
            value: Parent value; must hold the cart under "model".
            args: Field arguments (unused).
        Returns:
            list: Item records and error markers, cart-level errors first.
        Raises:
            ConfigurationError: If the parent value has no cart.
            NoSuchEntityError: If an item's SKU is unknown to the product repository.
        """
        if not value or value.get("model") is None:
            raise ConfigurationError('"model" value should be specified')
        return self.resolve_cart(value["model"])

    def resolve_cart(self, cart: Cart) -> List[CartItemResult]:
        items_data: List[CartItemResult] = []
        if cart.has_error:
            for error in cart.errors:
                items_data.append(InputError(message=error.text))

        cart_products_data = self._get_cart_products_data(cart)
        cart_items = cart.all_visible_items()
        self.logger.debug(
            f"Resolving {len(cart_items)} items of cart {cart.cart_id} "
            f"({len(cart_products_data)} products loaded)"
        )

        for cart_item in cart_items:
            product_id = cart_item.product.product_id
            sku = cart_item.product_sku
            try:
                product = self.product_repository_factory().get_by_sku(sku)
            except NoSuchEntityError:
                self.logger.error(f"SKU {sku!r} of cart item {cart_item.item_id} not found; aborting cart {cart.cart_id}")
                raise

            if product_id not in cart_products_data:
                self.logger.warning(f"Product {product_id} of cart item {cart_item.item_id} is not in the cart product set")
                items_data.append(NotFoundError())
                continue

            items_data.append(
                CartItemView(
                    id=cart_item.item_id,
                    uid=self.uid_encoder.encode(str(cart_item.item_id)),
                    quantity=cart_item.quantity,
                    product=cart_products_data[product_id],
                    model=cart_item,
                    image=product.image,
                )
            )
        return items_data

    def _get_cart_products_data(self, cart: Cart) -> Dict[int, ProductView]:
        products = self.product_set_fetcher.fetch(cart)
        return {
            product.product_id: ProductView.from_product(
                product, uid=self.uid_encoder.encode(str(product.product_id))
            )
            for product in products
        }
