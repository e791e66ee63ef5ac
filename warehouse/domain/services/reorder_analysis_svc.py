import logging
import time
from typing import Iterable, List, Literal, Sequence

from warehouse.core.config import get_settings
from warehouse.domain.errors import InvalidInput
from warehouse.domain.models.analysis import InventorySummary, ReorderAnalysis, ReorderSummary
from warehouse.domain.models.product import Criticality, Product
from warehouse.domain.services import reorder_engine as engine
from warehouse.utils.cache import cache_delete, cache_get_models, cache_set_models

logger = logging.getLogger(__name__)

REORDER_ANALYSIS_CACHE_KEY = "reorder_analysis:v1"

FilterBy = Literal["all", "needs_reorder", "critical"]
SortBy = Literal["priority", "days_remaining", "estimated_cost", "criticality"]


def criticality_rank(criticality) -> int:
    """Total order over criticality: high (3) > medium (2) > low (1)."""
    c = Criticality(criticality)
    if c is Criticality.HIGH:
        return 3
    if c is Criticality.MEDIUM:
        return 2
    return 1


def reorder_priority_key(analysis: ReorderAnalysis) -> tuple:
    # products to reorder first, then most critical first
    return (not analysis.needs_reorder, -criticality_rank(analysis.criticality))


def rank_analyses(analyses: Iterable[ReorderAnalysis]) -> List[ReorderAnalysis]:
    # sorted() is stable: equal keys keep their input order
    return sorted(analyses, key=reorder_priority_key)


def analyze_all(
    products: Iterable[Product],
    buffer_days: int = engine.DEFAULT_BUFFER_DAYS,
    target_days: int = engine.DEFAULT_TARGET_DAYS,
) -> List[ReorderAnalysis]:
    return rank_analyses(engine.analyze_product(p, buffer_days, target_days) for p in products)


def filter_analyses(analyses: Sequence[ReorderAnalysis], filter_by: FilterBy = "all") -> List[ReorderAnalysis]:
    if filter_by == "all":
        return list(analyses)
    if filter_by == "needs_reorder":
        return [a for a in analyses if a.needs_reorder]
    if filter_by == "critical":
        return [a for a in analyses if Criticality(a.criticality) is Criticality.HIGH]
    raise InvalidInput(f"Unknown filter_by: {filter_by}")


def _days_sort_key(analysis: ReorderAnalysis) -> tuple:
    if engine.is_unlimited(analysis.days_remaining):
        return (1, 0)
    return (0, analysis.days_remaining)


def sort_analyses(analyses: Sequence[ReorderAnalysis], sort_by: SortBy = "priority") -> List[ReorderAnalysis]:
    if sort_by == "priority":
        return rank_analyses(analyses)
    if sort_by == "days_remaining":
        return sorted(analyses, key=_days_sort_key)
    if sort_by == "estimated_cost":
        return sorted(analyses, key=lambda a: a.estimated_cost, reverse=True)
    if sort_by == "criticality":
        return sorted(analyses, key=lambda a: -criticality_rank(a.criticality))
    raise InvalidInput(f"Unknown sort_by: {sort_by}")


def summarize_analyses(analyses: Sequence[ReorderAnalysis]) -> ReorderSummary:
    to_reorder = [a for a in analyses if a.needs_reorder]
    return ReorderSummary(
        total_products=len(analyses),
        needs_reorder=len(to_reorder),
        total_reorder_cost=engine.round_half_up(sum(a.estimated_cost for a in to_reorder)),
        critical_reorders=sum(1 for a in to_reorder if criticality_rank(a.criticality) == 3),
    )


def summarize_inventory(products: Sequence[Product], analyses: Sequence[ReorderAnalysis]) -> InventorySummary:
    return InventorySummary(
        total_products=len(products),
        low_stock=sum(1 for a in analyses if a.needs_reorder),
        total_inventory_value=engine.round_half_up(sum(engine.total_stock_value(p) for p in products)),
        critical_items=sum(1 for p in products if criticality_rank(p.criticality) == 3),
    )


async def get_reorder_analysis_svc(repo, redis=None) -> List[ReorderAnalysis]:
    """
    Ranked analysis of every product in the store.
    The ranked list is cached in Redis (when available) until the TTL expires
    or a product write calls `invalidate_reorder_analysis`.
    """
    t0 = time.perf_counter()
    settings = get_settings()

    if redis is not None:
        try:
            cached = await cache_get_models(redis, REORDER_ANALYSIS_CACHE_KEY, ReorderAnalysis)
        except Exception as e:
            logger.warning("reorder_analysis redis.get error key=%s err=%s", REORDER_ANALYSIS_CACHE_KEY, e)
            cached = None
        if cached is not None:
            logger.info("reorder_analysis cache_hit items=%s", len(cached))
            return cached
        logger.info("reorder_analysis cache_miss key=%s", REORDER_ANALYSIS_CACHE_KEY)

    products = await repo.find_all()
    analyses = analyze_all(products, settings.reorder_buffer_days, settings.reorder_target_days)

    if redis is not None:
        try:
            await cache_set_models(redis, REORDER_ANALYSIS_CACHE_KEY, analyses, ex=settings.reorder_analysis_cache_ttl)
        except Exception as e:
            logger.warning("reorder_analysis redis.set error key=%s err=%s", REORDER_ANALYSIS_CACHE_KEY, e)

    logger.info(
        "reorder_analysis done products=%s needs_reorder=%s time=%.3fs",
        len(analyses), sum(1 for a in analyses if a.needs_reorder), time.perf_counter() - t0,
    )
    return analyses


async def get_product_analysis_svc(repo, product_id: str) -> ReorderAnalysis:
    settings = get_settings()
    product = await repo.get(product_id)
    return engine.analyze_product(product, settings.reorder_buffer_days, settings.reorder_target_days)


async def invalidate_reorder_analysis(redis) -> None:
    if redis is None:
        return
    try:
        await cache_delete(redis, REORDER_ANALYSIS_CACHE_KEY)
    except Exception as e:
        logger.warning("reorder_analysis redis.delete error key=%s err=%s", REORDER_ANALYSIS_CACHE_KEY, e)
