"""Product storage: the repository interface and its SQLite implementation."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import datetime, timezone

from shopfront.database import Database, get_db
from shopfront.product import Product


class ProductNotFoundError(LookupError):
    """Raised when no product has the requested id."""

    def __init__(self, product_id: int) -> None:
        super().__init__(f"Product not found: {product_id}")
        self.product_id = product_id


class ProductRepository(ABC):
    """Where products are loaded from and stored to."""

    @abstractmethod
    async def find_all(self) -> list[Product]:
        """Return every product."""

    @abstractmethod
    async def find_by_id(self, product_id: int) -> Product:
        """Return the product with this id or raise ProductNotFoundError."""

    @abstractmethod
    async def save(self, product: Product) -> None:
        """Update the product if its id exists, otherwise insert it."""


@dataclass
class ProductEntity:
    """A row of the products table."""

    id: int
    name: str
    price: int
    description: str
    quantity: int
    created_at: str
    updated_at: str

    @classmethod
    def _from_row(cls, row) -> ProductEntity:
        return cls(
            id=row["id"],
            name=row["name"],
            price=row["price"],
            description=row["description"],
            quantity=row["quantity"],
            created_at=row["created_at"],
            updated_at=row["updated_at"],
        )

    def to_domain(self) -> Product:
        """Return the domain model for this row."""
        return Product(self.id, self.name, self.price, self.description, self.quantity)


class SqliteProductRepository(ProductRepository):
    """Products kept in the SQLite products table."""

    def __init__(self, database: Database | None = None) -> None:
        self._database = database

    @property
    def _connection(self):
        return (self._database or get_db()).connection

    async def _fetch(self, sql: str, params: tuple = ()) -> list:
        async with self._connection.execute(sql, params) as cursor:
            return list(await cursor.fetchall())

    async def find_all(self) -> list[Product]:
        rows = await self._fetch("SELECT * FROM products")
        return [ProductEntity._from_row(row).to_domain() for row in rows]

    async def find_by_id(self, product_id: int) -> Product:
        rows = await self._fetch("SELECT * FROM products WHERE id = ?", (product_id,))
        if not rows:
            raise ProductNotFoundError(product_id)
        return ProductEntity._from_row(rows[0]).to_domain()

    async def save(self, product: Product) -> None:
        now = datetime.now(timezone.utc).isoformat()
        existing = await self._fetch("SELECT id FROM products WHERE id = ?", (product.id,))
        if existing:
            await self._connection.execute(
                "UPDATE products SET name = ?, price = ?, description = ?, quantity = ?, "
                "updated_at = ? WHERE id = ?",
                (product.name, product.price, product.description, product.quantity, now, product.id),
            )
        else:
            await self._connection.execute(
                "INSERT INTO products (name, price, description, quantity, created_at, updated_at) "
                "VALUES (?, ?, ?, ?, ?, ?)",
                (product.name, product.price, product.description, product.quantity, now, now),
            )