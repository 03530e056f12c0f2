# kitchen/routers/products.py

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from kitchen.database import get_db
from kitchen.schemas.product import ProductCreated, ProductPayload, ProductResponse
from kitchen.services import catalog

router = APIRouter(tags=["Products"])


@router.get("/products", response_model=list[ProductResponse])
def list_products(db: Session = Depends(get_db)):
    return catalog.list_products(db)


@router.get("/products/{product_id}", response_model=ProductResponse)
def get_product(
    product_id: int,
    db: Session = Depends(get_db),
):
    return catalog.get_product(db, product_id)


@router.post(
    "/product",
    response_model=ProductCreated,
    status_code=status.HTTP_201_CREATED,
)
def create_product(
    product_data: ProductPayload,
    db: Session = Depends(get_db),
):
    product = catalog.create_product(db, product_data)
    return {"productId": product.id}


@router.put("/product/{product_id}")
def update_product(
    product_id: int,
    product_data: ProductPayload,
    db: Session = Depends(get_db),
):
    catalog.update_product(db, product_id, product_data)
    return {"message": "Product updated successfully"}
