# warehouse/api/v1/routers/reorder.py
from fastapi import APIRouter, Depends, Query
from typing import List
import time

from warehouse.api.deps import product_repo, redis_dep
from warehouse.domain.models.analysis import InventorySummary, ReorderAnalysis, ReorderSummary
from warehouse.domain.repositories.product_repo import ProductRepo
from warehouse.domain.services.reorder_analysis_svc import (
    FilterBy,
    SortBy,
    filter_analyses,
    get_product_analysis_svc,
    get_reorder_analysis_svc,
    sort_analyses,
    summarize_analyses,
    summarize_inventory,
)

import logging
logger = logging.getLogger(__name__)

router = APIRouter(tags=["reorder"])


@router.get("/reorder-analysis", response_model=List[ReorderAnalysis])
async def reorder_analysis(
    filter_by: FilterBy = Query("all", description="all | needs_reorder | critical"),
    sort_by: SortBy = Query("priority", description="priority | days_remaining | estimated_cost | criticality"),
    repo: ProductRepo = Depends(product_repo),
    redis = Depends(redis_dep),
):
    """
    Reorder analysis for every product.
    Default order: products needing a reorder first, then high > medium > low criticality.
    """
    t0 = time.perf_counter()
    analyses = await get_reorder_analysis_svc(repo, redis)
    result = sort_analyses(filter_analyses(analyses, filter_by), sort_by)
    logger.info(
        "Response: reorder_analysis returned %s of %s items filter_by=%s sort_by=%s in %.4fs",
        len(result), len(analyses), filter_by, sort_by, time.perf_counter() - t0,
    )
    return result


@router.get("/reorder-analysis/summary", response_model=ReorderSummary)
async def reorder_summary(
    repo: ProductRepo = Depends(product_repo),
    redis = Depends(redis_dep),
):
    analyses = await get_reorder_analysis_svc(repo, redis)
    return summarize_analyses(analyses)


@router.get("/reorder-analysis/{product_id}", response_model=ReorderAnalysis)
async def product_reorder_analysis(product_id: str, repo: ProductRepo = Depends(product_repo)):
    return await get_product_analysis_svc(repo, product_id)


@router.get("/dashboard/summary", response_model=InventorySummary)
async def dashboard_summary(
    repo: ProductRepo = Depends(product_repo),
    redis = Depends(redis_dep),
):
    products = await repo.find_all()
    analyses = await get_reorder_analysis_svc(repo, redis)
    return summarize_inventory(products, analyses)
