from decimal import Decimal

from quote_graphql.data.exceptions import NoSuchEntityError
from quote_graphql.data.models import CartItem, CartItemView, Product, ProductView
from quote_graphql.graphql.errors import ConfigurationError, InputError, NotFoundError
from quote_graphql.graphql.response import format_failure, format_response


def make_view():
    product = Product(product_id=1, sku="SKU-A", name="Duffle Bag")
    item = CartItem(item_id=10, product=product, quantity=Decimal("2"))
    return CartItemView(
        id=10,
        uid="MTA=",
        quantity=Decimal("2"),
        product=ProductView.from_product(product, uid="MQ=="),
        model=item,
        image=None,
    )


def test_records_and_markers_are_split():
    response = format_response([InputError(message="Not enough stock"), make_view(), NotFoundError()])

    assert response["data"][0] is None
    assert response["data"][2] is None
    record = response["data"][1]
    assert record["id"] == 10
    assert record["quantity"] == 2.0
    assert isinstance(record["quantity"], float)
    assert record["product"]["uid"] == "MQ=="
    # Back-references never reach the client.
    assert "model" not in record
    assert "model" not in record["product"]

    assert response["errors"] == [
        {"message": "Not enough stock", "path": ["items", 0], "extensions": {"category": "graphql-input"}},
        {
            "message": "The product that was requested doesn't exist. Verify the product and try again.",
            "path": ["items", 2],
            "extensions": {"category": "graphql-no-such-entity"},
        },
    ]


def test_no_errors_key_when_clean():
    assert "errors" not in format_response([make_view()])


def test_failure_payloads():
    assert format_failure(ConfigurationError('"model" value should be specified')) == {
        "data": None,
        "errors": [{"message": '"model" value should be specified', "extensions": {"category": "internal"}}],
    }
    assert format_failure(NoSuchEntityError())["errors"][0]["extensions"]["category"] == "graphql-no-such-entity"
    assert format_failure(RuntimeError("boom"))["errors"][0]["extensions"]["category"] == "internal"


def test_error_marker_is_tagged_by_kind():
    from pydantic import TypeAdapter

    from quote_graphql.graphql.errors import ErrorMarker

    adapter = TypeAdapter(ErrorMarker)
    assert adapter.validate_python({"kind": "input", "message": "Price changed"}) == InputError(message="Price changed")
    assert isinstance(adapter.validate_python({"kind": "not_found"}), NotFoundError)
