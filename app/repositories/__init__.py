from app.repositories.products import ProductRepository, ProductService

__all__ = [
    "ProductRepository",
    "ProductService",
]
