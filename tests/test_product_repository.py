"""Repository tests against a real SQLite database."""

from datetime import datetime
from decimal import Decimal

import pytest

from marketplace.core.exceptions import NotFound
from marketplace.database.models import Product
from marketplace.schemas.product import MAX_PRICE, ProductCreate, ProductUpdate
from marketplace.services.product_repository import ProductRepository


def desk(**overrides) -> ProductCreate:
    data = {"name": "Desk", "description": "Oak desk", "price": Decimal("49.99")}
    data.update(overrides)
    return ProductCreate(**data)


@pytest.mark.asyncio
async def test_create_stores_price_in_pence_with_owner(db, seller):
    product = await ProductRepository.create(db, seller.id, desk())

    assert product.id is not None
    assert product.price == 4999
    assert product.owner_id == seller.id
    assert product.owner.name == "Alice Seller"
    assert product.deleted_at is None
    assert product.created_at is not None


@pytest.mark.asyncio
async def test_find_by_id_and_get_or_404(db, seller):
    product = await ProductRepository.create(db, seller.id, desk())

    assert (await ProductRepository.find_by_id(db, product.id)).id == product.id
    assert await ProductRepository.find_by_id(db, product.id + 100) is None
    with pytest.raises(NotFound):
        await ProductRepository.get_or_404(db, product.id + 100)


@pytest.mark.asyncio
@pytest.mark.parametrize("product_id", [0, -1, 2**63, 99999999999999999999])
async def test_out_of_range_ids_are_not_found(db, seller, product_id, caplog):
    await ProductRepository.create(db, seller.id, desk())

    assert await ProductRepository.find_by_id(db, product_id) is None
    with pytest.raises(NotFound):
        await ProductRepository.get_or_404(db, product_id)
    assert f"Product #{product_id} not found" in caplog.text


@pytest.mark.asyncio
async def test_largest_price_fits_storage(db, seller):
    product = await ProductRepository.create(db, seller.id, desk(price=MAX_PRICE))

    assert product.price == 2**63 - 1


@pytest.mark.asyncio
async def test_list_all_excludes_soft_deleted(db, seller):
    kept = await ProductRepository.create(db, seller.id, desk(name="Chair"))
    removed = await ProductRepository.create(db, seller.id, desk(name="Lamp"))
    await ProductRepository.soft_delete(db, removed)

    products = await ProductRepository.list_all(db)

    assert [p.id for p in products] == [kept.id]
    assert all(p.deleted_at is None for p in products)


@pytest.mark.asyncio
async def test_update_changes_only_sent_fields(db, seller):
    product = await ProductRepository.create(db, seller.id, desk())

    updated = await ProductRepository.update(db, product, ProductUpdate(price=Decimal("10.5")))

    assert updated.price == 1050
    assert updated.name == "Desk"
    assert updated.description == "Oak desk"
    assert updated.owner_id == seller.id


@pytest.mark.asyncio
async def test_update_touches_updated_at_even_without_changes(db, seller):
    product = await ProductRepository.create(db, seller.id, desk())
    product.updated_at = datetime(2000, 1, 1)
    await db.commit()

    updated = await ProductRepository.update(db, product, {"name": "Desk"})

    assert updated.updated_at.year > 2000


@pytest.mark.asyncio
async def test_soft_delete_hides_but_keeps_row(db, seller):
    product = await ProductRepository.create(db, seller.id, desk())

    await ProductRepository.soft_delete(db, product)

    assert await ProductRepository.find_by_id(db, product.id) is None
    stored = await ProductRepository.find_with_trashed(db, product.id)
    assert stored is not None
    assert stored.deleted_at is not None
    assert (stored.name, stored.description, stored.price) == ("Desk", "Oak desk", 4999)


@pytest.mark.parametrize("price", [0, -100, 12.5, "100"])
def test_model_rejects_invalid_stored_price(price):
    with pytest.raises(ValueError):
        Product(name="Desk", description="Oak desk", price=price, owner_id=1)


def test_model_refuses_owner_change():
    product = Product(name="Desk", description="Oak desk", price=100, owner_id=1)
    with pytest.raises(ValueError):
        product.owner_id = 2
