# shopfront

An asyncio library for a small product catalogue. It keeps products in a
SQLite database (through `aiosqlite`). It provides use cases to list products,
look one up, and buy units of one, which reduces its stock.

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Modules

- `shopfront.product`: the `Product` dataclass (`id`, `name`, `price`,
  `description`, `quantity`). `Product.sell(quantity)` takes units out of
  stock. It raises `InsufficientQuantityError` when there are not enough
  units and `ValueError` for a negative quantity.
- `shopfront.database`: the `Database` connection and the shared instance
  that goes with it.
  - `init_db(url)` opens the shared database. Calling it a second time raises
    `DatabaseError`.
  - `get_db()` returns the shared database. It raises `DatabaseError` if
    `init_db` has not been called.
  - `close_db()` closes the shared database.
  - `run_migrations(url)` creates the `products` table.
  - `seed_database()` inserts the three products in `SEED_PRODUCTS`.
  - `clear_database()` deletes every product and resets the id sequence.

  URLs take the form `sqlite:path/to/file.sqlite`. Use `sqlite::memory:` for
  an in-memory database. A database file must already exist when it is
  opened; otherwise `DatabaseError` is raised. `DEFAULT_DATABASE_URL` is
  `sqlite:data/db.sqlite`. `Database.open(url)` also works as an async
  context manager that closes the connection on exit.
- `shopfront.repository`: the `ProductRepository` interface and
  `SqliteProductRepository`, which implements it.
  - `find_all()` returns every product.
  - `find_by_id(id)` returns one product or raises `ProductNotFoundError`.
  - `save(product)` updates the row if the id exists and inserts a new row
    otherwise.

  `SqliteProductRepository` uses the shared database by default. You can also
  pass it a `Database` of your own.
- `shopfront.usecases`:
  - `GetProductUseCase.get_by_id(id)` returns a `GetProductQuery`.
  - `GetAllProductsUseCase.get_all()` returns a list of `GetProductQuery`.
  - `BuyProductUseCase.buy(id, command)` sells the units in a
    `BuyProductCommand` and saves the product.
  - `BuyProductCommand.from_json(data)` validates a decoded JSON object such
    as `{"quantity": 1}`. The quantity must be an integer from 0 to
    4294967295; otherwise it raises `ValueError`.
  - `GetProductQuery.to_dict()` returns the JSON-ready dictionary.
- `shopfront.container`: `Container` holds a repository and builds the three
  use cases. `get_container()` returns a container backed by the shared
  database.

## Example

```python
import asyncio

from shopfront.container import get_container
from shopfront.database import close_db, init_db, run_migrations, seed_database
from shopfront.usecases import BuyProductCommand


async def demo():
    url = "sqlite::memory:"
    await init_db(url)
    await run_migrations(url)
    await seed_database()

    container = get_container()
    await container.create_buy_product_usecase().buy(1, BuyProductCommand(quantity=2))
    product = await container.create_get_product_usecase().get_by_id(1)
    print(product.to_dict())  # quantity is now 8

    await close_db()


asyncio.run(demo())
```

## What this package does not do

The package has no HTTP server and no command-line program. It does not serve
the products over HTTP and does not turn errors into HTTP responses. It
provides the storage and use-case layers, and you call them from your own
code.