# warehouse/api/v1/routers/seed.py
from fastapi import APIRouter, Depends

from warehouse.api.deps import product_repo, redis_dep
from warehouse.domain.models.analysis import SeedResult
from warehouse.domain.repositories.product_repo import ProductRepo
from warehouse.domain.services.reorder_analysis_svc import invalidate_reorder_analysis
from warehouse.domain.services.seed_svc import seed_products_svc

router = APIRouter(tags=["seed"])


@router.post("/seed-data", response_model=SeedResult, status_code=201)
async def seed_data(repo: ProductRepo = Depends(product_repo), redis = Depends(redis_dep)):
    """Replace every product with the built-in sample catalog."""
    products = await seed_products_svc(repo)
    await invalidate_reorder_analysis(redis)
    return {"message": "Sample data created successfully", "count": len(products), "products": products}
