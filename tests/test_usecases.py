from dataclasses import replace

import pytest

from shopfront.product import InsufficientQuantityError, Product
from shopfront.repository import ProductNotFoundError, ProductRepository
from shopfront.usecases import (
    BuyProductCommand,
    BuyProductUseCase,
    GetAllProductsUseCase,
    GetProductQuery,
    GetProductUseCase,
)


class MemoryRepository(ProductRepository):
    def __init__(self, products):
        self.products = {p.id: p for p in products}
        self.saved = []

    async def find_all(self):
        return [replace(p) for p in self.products.values()]

    async def find_by_id(self, product_id):
        try:
            return replace(self.products[product_id])
        except KeyError:
            raise ProductNotFoundError(product_id) from None

    async def save(self, product):
        self.saved.append(product)
        self.products[product.id] = replace(product)


def sample_products():
    return [
        Product(1, "Lamp", 1200, "Desk lamp", 10),
        Product(2, "Chair", 5400, "Office chair", 3),
    ]


def test_command_from_json():
    assert BuyProductCommand.from_json({"quantity": 2}) == BuyProductCommand(quantity=2)


def test_command_ignores_unknown_fields():
    assert BuyProductCommand.from_json({"quantity": 1, "note": "gift"}).quantity == 1


@pytest.mark.parametrize(
    "data",
    [{}, {"quantity": -1}, {"quantity": "2"}, {"quantity": True}, {"quantity": 2**32}, [1], None],
)
def test_command_rejects_malformed_input(data):
    with pytest.raises(ValueError):
        BuyProductCommand.from_json(data)


def test_query_from_product_and_to_dict():
    product = Product(7, "Pen", 300, "Blue pen", 12)
    query = GetProductQuery.from_product(product)
    assert query.to_dict() == {
        "id": 7,
        "name": "Pen",
        "price": 300,
        "description": "Blue pen",
        "quantity": 12,
    }


@pytest.mark.asyncio
async def test_get_by_id():
    use_case = GetProductUseCase(MemoryRepository(sample_products()))
    query = await use_case.get_by_id(2)
    assert query == GetProductQuery(2, "Chair", 5400, "Office chair", 3)


@pytest.mark.asyncio
async def test_get_by_id_missing_raises():
    use_case = GetProductUseCase(MemoryRepository(sample_products()))
    with pytest.raises(ProductNotFoundError):
        await use_case.get_by_id(42)


@pytest.mark.asyncio
async def test_get_all_keeps_repository_order():
    use_case = GetAllProductsUseCase(MemoryRepository(sample_products()))
    result = await use_case.get_all()
    assert [q.name for q in result] == ["Lamp", "Chair"]


@pytest.mark.asyncio
async def test_get_all_on_empty_repository():
    assert await GetAllProductsUseCase(MemoryRepository([])).get_all() == []


@pytest.mark.asyncio
async def test_buy_reduces_stock_and_saves():
    repository = MemoryRepository(sample_products())
    await BuyProductUseCase(repository).buy(1, BuyProductCommand(quantity=4))
    assert repository.products[1].quantity == 10 - 4
    assert [p.id for p in repository.saved] == [1]


@pytest.mark.asyncio
async def test_buy_too_many_raises_without_saving():
    repository = MemoryRepository(sample_products())
    with pytest.raises(InsufficientQuantityError):
        await BuyProductUseCase(repository).buy(2, BuyProductCommand(quantity=4))
    assert repository.saved == []
    assert repository.products[2].quantity == 3


@pytest.mark.asyncio
async def test_buy_missing_product_raises():
    repository = MemoryRepository(sample_products())
    with pytest.raises(ProductNotFoundError):
        await BuyProductUseCase(repository).buy(9, BuyProductCommand(quantity=1))
    assert repository.saved == []