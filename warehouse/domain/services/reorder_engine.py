# warehouse/domain/services/reorder_engine.py
"""
Reorder decision engine.

Pure functions that turn a product's stock attributes into a reorder decision.
No I/O and no logging here; callers (services/routers) own both.

    days_remaining   = floor(stock / daily_sales)      ("Unlimited" if sales == 0)
    safety_threshold = lead_time + buffer_days
    needs_reorder    = days_remaining <= safety_threshold
    quantity         = max(0, daily_sales * target_days - stock), floored by MOQ
    estimated_cost   = quantity * cost_per_unit, 2 decimals, ROUND_HALF_UP

Non-finite inputs or results raise InvalidInput.
"""
from __future__ import annotations
import math
from decimal import Decimal, ROUND_HALF_UP, localcontext
from warehouse.domain.errors import InvalidInput
from warehouse.domain.models.analysis import UNLIMITED, DaysRemaining, ReorderAnalysis, Urgency
from warehouse.domain.models.product import Product

DEFAULT_BUFFER_DAYS = 5
DEFAULT_TARGET_DAYS = 60

# Urgency bands, in days remaining (inclusive upper bounds)
URGENT_MAX_DAYS = 3
HIGH_MAX_DAYS = 7

# Enough digits to quantize the product of two finite floats to cents
_DECIMAL_PREC = 700


def round_half_up(value: float, places: int = 2) -> float:
    """
    Round through the decimal representation so 1.005 -> 1.01 and
    2.675 -> 2.68 (float round() would give 1.0 and 2.67).
    """
    return _quantize(Decimal(str(_finite(value))), Decimal(1).scaleb(-places))


def _finite(value: float) -> float:
    if not math.isfinite(value):
        raise InvalidInput(f"Value out of range: {value}")
    return value


def _quantize(value: Decimal, quantum: Decimal) -> float:
    with localcontext() as ctx:
        ctx.prec = _DECIMAL_PREC
        return _finite(float(value.quantize(quantum, rounding=ROUND_HALF_UP)))


def is_unlimited(days: DaysRemaining) -> bool:
    return days == UNLIMITED


def days_of_stock_remaining(current_stock: float, average_daily_sales: float) -> DaysRemaining:
    if average_daily_sales == 0:
        return UNLIMITED
    days = current_stock / average_daily_sales
    # coverage past the float range (denormal sales rate) never runs out
    if math.isinf(days):
        return UNLIMITED
    # stock and sales are never negative, so floor == truncation toward zero
    return math.floor(_finite(days))


def safety_stock_threshold(supplier_lead_time: int, buffer_days: int = DEFAULT_BUFFER_DAYS) -> int:
    return supplier_lead_time + buffer_days


def needs_reorder(days_remaining: DaysRemaining, safety_threshold: float) -> bool:
    # Unlimited compares greater than any finite threshold
    if is_unlimited(days_remaining):
        return False
    return days_remaining <= safety_threshold


def optimal_reorder_quantity(
    average_daily_sales: float,
    target_days: int = DEFAULT_TARGET_DAYS,
    current_stock: float = 0,
) -> float:
    """
    Units needed to bring stock back to `target_days` of coverage.
    The minimum-order floor is NOT applied here; it only makes sense once a
    reorder has actually triggered, see `reorder_quantity`.
    """
    target_stock = average_daily_sales * target_days
    return max(0, target_stock - current_stock)


def reorder_quantity(
    reorder: bool,
    average_daily_sales: float,
    current_stock: float,
    minimum_reorder_quantity: int,
    target_days: int = DEFAULT_TARGET_DAYS,
) -> float:
    if not reorder:
        return 0
    return max(
        optimal_reorder_quantity(average_daily_sales, target_days, current_stock),
        minimum_reorder_quantity,
    )


def estimated_cost(quantity: float, cost_per_unit: float) -> float:
    with localcontext() as ctx:
        ctx.prec = _DECIMAL_PREC
        total = Decimal(str(_finite(quantity))) * Decimal(str(_finite(cost_per_unit)))
    return _quantize(total, Decimal("0.01"))


def urgency_level(days_remaining: DaysRemaining, reorder: bool) -> Urgency:
    if not reorder or is_unlimited(days_remaining):
        return "ok"
    if days_remaining <= 0:
        return "out_of_stock"
    if days_remaining <= URGENT_MAX_DAYS:
        return "urgent"
    if days_remaining <= HIGH_MAX_DAYS:
        return "high"
    return "medium"


def analyze_product(
    product: Product,
    buffer_days: int = DEFAULT_BUFFER_DAYS,
    target_days: int = DEFAULT_TARGET_DAYS,
) -> ReorderAnalysis:
    days = days_of_stock_remaining(product.current_stock, product.average_daily_sales)
    threshold = safety_stock_threshold(product.supplier_lead_time, buffer_days)
    reorder = needs_reorder(days, threshold)
    quantity = reorder_quantity(
        reorder,
        product.average_daily_sales,
        product.current_stock,
        product.minimum_reorder_quantity,
        target_days,
    )
    return ReorderAnalysis(
        **product.model_dump(),
        days_remaining=days,
        safety_threshold=threshold,
        needs_reorder=reorder,
        optimal_reorder_quantity=round_half_up(quantity),
        estimated_cost=estimated_cost(quantity, product.cost_per_unit),
        urgency=urgency_level(days, reorder),
    )


def total_stock_value(product: Product) -> float:
    return product.current_stock * product.cost_per_unit
