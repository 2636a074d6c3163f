from __future__ import annotations

from typing import Any, Dict, Literal, Mapping, Optional

from ..data.exceptions import NoSuchEntityError
from ..data.util import get_catalog
from .errors import GraphQLError
from .resolvers import CartItemsResolver
from .response import format_failure, format_response
from .uid import Uid


def get_cart_items_resolver(kind: Optional[Literal["csv"]] = None) -> CartItemsResolver:
    """Build a resolver backed by the configured product catalog."""
    catalog = get_catalog(kind)
    return CartItemsResolver(
        product_set_fetcher=catalog,
        uid_encoder=Uid(),
        product_repository_factory=lambda: catalog,
    )


def resolve_cart_items(value: Optional[Mapping[str, Any]], resolver: Optional[CartItemsResolver] = None) -> Dict[str, Any]:
    """Resolve the `items` field and shape it as a GraphQL response.

    Fatal resolver errors become a failure payload with no data.
    """
    resolver = resolver or get_cart_items_resolver()
    try:
        results = resolver.resolve(field="items", context=None, info=None, value=value)
    except (GraphQLError, NoSuchEntityError) as e:
        return format_failure(e)
    return format_response(results)
