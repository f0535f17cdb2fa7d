"""Application use cases with their commands and query results."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import asdict, dataclass
from typing import Any

from shopfront.product import Product
from shopfront.repository import ProductRepository

_log = logging.getLogger(__name__)

_U32_MAX = 2**32 - 1


@dataclass(frozen=True)
class BuyProductCommand:
    """A request to buy a number of units."""

    quantity: int

    @classmethod
    def from_json(cls, data: Any) -> BuyProductCommand:
        """Build a command from a decoded JSON object; raise ValueError if malformed."""
        if not isinstance(data, Mapping):
            raise ValueError("expected a JSON object")
        if "quantity" not in data:
            raise ValueError("missing field `quantity`")
        quantity = data["quantity"]
        if isinstance(quantity, bool) or not isinstance(quantity, int):
            raise ValueError("`quantity` must be an integer")
        if not 0 <= quantity <= _U32_MAX:
            raise ValueError("`quantity` is out of range")
        return cls(quantity=quantity)


@dataclass(frozen=True)
class GetProductQuery:
    """A product as returned to clients."""

    id: int
    name: str
    price: int
    description: str
    quantity: int

    @classmethod
    def from_product(cls, product: Product) -> GetProductQuery:
        return cls(product.id, product.name, product.price, product.description, product.quantity)

    def to_dict(self) -> dict[str, Any]:
        """Return the JSON-ready representation."""
        return asdict(self)


class GetProductUseCase:
    """Look up a single product."""

    def __init__(self, product_repository: ProductRepository) -> None:
        self._repository = product_repository

    async def get_by_id(self, product_id: int) -> GetProductQuery:
        _log.debug("get_product_usecase")
        product = await self._repository.find_by_id(product_id)
        return GetProductQuery.from_product(product)


class GetAllProductsUseCase:
    """List every product."""

    def __init__(self, product_repository: ProductRepository) -> None:
        self._repository = product_repository

    async def get_all(self) -> list[GetProductQuery]:
        _log.debug("get_all_products_usecase")
        return [GetProductQuery.from_product(p) for p in await self._repository.find_all()]


class BuyProductUseCase:
    """Sell units of a product and store the new stock level."""

    def __init__(self, product_repository: ProductRepository) -> None:
        self._repository = product_repository

    async def buy(self, product_id: int, command: BuyProductCommand) -> None:
        _log.debug("buy_product_usecase")
        product = await self._repository.find_by_id(product_id)
        product.sell(command.quantity)
        await self._repository.save(product)