"""Public response shape of products."""

from datetime import datetime

from marketplace.database.models import Product, User
from marketplace.services.product_formatter import format_product, product_collection, product_item


def build_product(with_owner: bool = True) -> Product:
    product = Product(
        id=3,
        name="Desk",
        description="Oak desk",
        price=4999,
        owner_id=7,
        created_at=datetime(2025, 1, 2, 3, 4, 5),
    )
    if with_owner:
        product.owner = User(id=7, name="Owner", email="owner@example.com", hashed_password="secret-hash")
    return product


def test_format_product_shape():
    formatted = format_product(build_product()).model_dump()
    assert formatted == {
        "id": 3,
        "name": "Desk",
        "description": "Oak desk",
        "price_gbp": "49.99",
        "created_at": "02/01/2025 03:04:05",
        "seller": {"id": 7, "name": "Owner"},
    }


def test_seller_never_exposes_private_fields():
    seller = format_product(build_product()).model_dump()["seller"]
    assert set(seller) == {"id", "name"}


def test_seller_is_null_when_owner_not_loaded():
    assert format_product(build_product(with_owner=False)).seller is None


def test_single_and_collection_envelopes():
    product = build_product()
    assert product_item(product).model_dump()["data"]["id"] == 3
    listing = product_collection([product, product]).model_dump()
    assert [item["id"] for item in listing["data"]] == [3, 3]
