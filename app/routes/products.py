from typing import List

from fastapi import APIRouter, Depends

from app.dependencies.services import get_catalog
from app.schemas.product_schemas import ProductResponse
from app.services.catalog import ProductCatalog

router = APIRouter()


@router.get("", response_model=List[ProductResponse])
def list_products(catalog: ProductCatalog = Depends(get_catalog)):
    return catalog.list_available()


@router.get("/{product_id}", response_model=ProductResponse)
def get_product(product_id: int, catalog: ProductCatalog = Depends(get_catalog)):
    return catalog.get_product(product_id)
