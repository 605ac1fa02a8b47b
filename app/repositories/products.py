"""
Product data access over raw SQL.
"""

import logging
from typing import List, Optional, Protocol

from app.database import ConnectionFactory
from app.models import Product

logger = logging.getLogger(__name__)


class ProductService(Protocol):
    """Operations the product routes depend on."""

    def list_products(self) -> List[Product]: ...

    def get_product(self, product_id: int) -> Optional[Product]: ...

    def create_product(self, product: Product) -> int: ...

    def update_product(self, product: Product) -> bool: ...

    def delete_product(self, product_id: int) -> bool: ...


def row_to_product(row) -> Product:
    return Product(id=row["id"], name=row["name"], price=row["price"])


class ProductRepository:
    """
    SQLite-backed ProductService.
    Each method opens one connection, runs one statement and closes it.
    Database errors are not caught here.
    """

    def __init__(self, factory: ConnectionFactory):
        self.factory = factory

    def list_products(self) -> List[Product]:
        with self.factory.connection() as conn:
            cursor = conn.cursor()
            cursor.execute("SELECT id, name, price FROM products")
            rows = cursor.fetchall()
        logger.debug("Listed %d products", len(rows))
        return [row_to_product(row) for row in rows]

    def get_product(self, product_id: int) -> Optional[Product]:
        with self.factory.connection() as conn:
            cursor = conn.cursor()
            cursor.execute(
                "SELECT id, name, price FROM products WHERE id = ?",
                (product_id,)
            )
            row = cursor.fetchone()
        if row is None:
            logger.debug("Product %s not found", product_id)
            return None
        return row_to_product(row)

    def create_product(self, product: Product) -> int:
        with self.factory.connection() as conn:
            cursor = conn.cursor()
            cursor.execute(
                "INSERT INTO products (name, price) VALUES (?, ?)",
                (product.name, product.price)
            )
            product_id = cursor.lastrowid
        logger.debug("Created product %s", product_id)
        return product_id

    def update_product(self, product: Product) -> bool:
        # SQLite counts matched rows, so an unchanged row still reports as updated
        with self.factory.connection() as conn:
            cursor = conn.cursor()
            cursor.execute(
                "UPDATE products SET name = ?, price = ? WHERE id = ?",
                (product.name, product.price, product.id)
            )
            updated = cursor.rowcount > 0
        logger.debug("Update of product %s affected rows: %s", product.id, updated)
        return updated

    def delete_product(self, product_id: int) -> bool:
        with self.factory.connection() as conn:
            cursor = conn.cursor()
            cursor.execute("DELETE FROM products WHERE id = ?", (product_id,))
            deleted = cursor.rowcount > 0
        logger.debug("Delete of product %s affected rows: %s", product_id, deleted)
        return deleted
