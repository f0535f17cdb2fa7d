"""Wiring of the application's dependencies."""

from __future__ import annotations

from shopfront.repository import ProductRepository, SqliteProductRepository
from shopfront.usecases import BuyProductUseCase, GetAllProductsUseCase, GetProductUseCase


class Container:
    """Holds the shared repository and builds the use cases that need it."""

    def __init__(self, product_repository: ProductRepository | None = None) -> None:
        self.product_repository: ProductRepository = (
            product_repository if product_repository is not None else SqliteProductRepository()
        )

    def create_get_product_usecase(self) -> GetProductUseCase:
        """Return a use case that looks up one product."""
        return GetProductUseCase(self.product_repository)

    def create_get_all_products_usecase(self) -> GetAllProductsUseCase:
        """Return a use case that lists every product."""
        return GetAllProductsUseCase(self.product_repository)

    def create_buy_product_usecase(self) -> BuyProductUseCase:
        """Return a use case that sells units of a product."""
        return BuyProductUseCase(self.product_repository)


def get_container() -> Container:
    """Return a container backed by the shared SQLite database."""
    return Container()