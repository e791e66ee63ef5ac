# warehouse/api/v1/routers/products.py

from fastapi import APIRouter, Depends
from typing import List

from warehouse.api.deps import product_repo, redis_dep
from warehouse.api.v1.schemas.reorder import MessageOut
from warehouse.domain.models.product import Product, ProductCreate, ProductUpdate
from warehouse.domain.repositories.product_repo import ProductRepo
from warehouse.domain.services.reorder_analysis_svc import invalidate_reorder_analysis

import logging
logger = logging.getLogger(__name__)

router = APIRouter(tags=["products"])


@router.get("/products", response_model=List[Product])
async def list_products(repo: ProductRepo = Depends(product_repo)):
    products = await repo.find_all()
    logger.info("Response: list_products returned %s items", len(products))
    return products


@router.post("/products", response_model=Product, status_code=201)
async def create_product(
    data: ProductCreate,
    repo: ProductRepo = Depends(product_repo),
    redis = Depends(redis_dep),
):
    product = await repo.create(data)
    await invalidate_reorder_analysis(redis)
    logger.info("New product created: %s (%s)", product.product_id, product.name)
    return product


@router.get("/products/{product_id}", response_model=Product)
async def get_product(product_id: str, repo: ProductRepo = Depends(product_repo)):
    return await repo.get(product_id)


@router.put("/products/{product_id}", response_model=Product)
async def update_product(
    product_id: str,
    changes: ProductUpdate,
    repo: ProductRepo = Depends(product_repo),
    redis = Depends(redis_dep),
):
    product = await repo.update(product_id, changes)
    await invalidate_reorder_analysis(redis)
    logger.info("Product updated: %s fields=%s", product_id, sorted(changes.changes()))
    return product


@router.delete("/products/{product_id}", response_model=MessageOut)
async def delete_product(
    product_id: str,
    repo: ProductRepo = Depends(product_repo),
    redis = Depends(redis_dep),
):
    await repo.delete(product_id)
    await invalidate_reorder_analysis(redis)
    logger.info("Product deleted: %s", product_id)
    return {"message": "Product deleted successfully"}
