"""
Product API Routes
"""

from typing import List

from fastapi import APIRouter, Depends, Path, Response

from app.database import ConnectionFactory, get_connection_factory
from app.models import MAX_ID, MIN_ID, Product
from app.repositories import ProductRepository, ProductService

router = APIRouter(prefix="/api/product", tags=["product"])


def get_product_service(
    factory: ConnectionFactory = Depends(get_connection_factory),
) -> ProductService:
    return ProductRepository(factory)


@router.get("", response_model=List[Product])
def list_products(service: ProductService = Depends(get_product_service)):
    """
    List all products.
    Returns an empty list when the table has no rows.
    """
    return service.list_products()


@router.get("/{product_id}", response_model=Product)
def get_product(
    product_id: int = Path(ge=MIN_ID, le=MAX_ID),
    service: ProductService = Depends(get_product_service),
):
    """
    Get a single product by ID.
    """
    product = service.get_product(product_id)
    if product is None:
        return Response(status_code=404)
    return product


@router.post("", response_model=Product)
def create_product(product: Product, service: ProductService = Depends(get_product_service)):
    """
    Create a product and return it as stored.
    Any `id` in the body is ignored; the database assigns one.
    Responds 200 with the re-fetched row rather than 201.
    """
    product_id = service.create_product(product)
    return get_product(product_id, service)


@router.put("/{product_id}", status_code=204)
def update_product(
    product: Product,
    product_id: int = Path(ge=MIN_ID, le=MAX_ID),
    service: ProductService = Depends(get_product_service),
):
    """
    Replace name and price of an existing product.

    - 400 if the path id and body id differ (nothing is written)
    - 404 if no row has this id
    """
    if product_id != product.id:
        return Response(status_code=400)
    if not service.update_product(product):
        return Response(status_code=404)
    return Response(status_code=204)


@router.delete("/{product_id}", status_code=204)
def delete_product(
    product_id: int = Path(ge=MIN_ID, le=MAX_ID),
    service: ProductService = Depends(get_product_service),
):
    """
    Delete a product by ID.
    """
    if not service.delete_product(product_id):
        return Response(status_code=404)
    return Response(status_code=204)
