# warehouse/domain/services/spike_forecaster.py
"""
Demand-spike forecaster.

Projects a product's state after a temporary multiplicative jump in daily
sales, then re-runs the reorder engine on the projected stock and on a sales
rate blended over the forecast window.

`forecast_spike` is pure and keeps raw numbers; `simulate_demand_spike`
rounds them for presentation; `simulate_demand_spike_svc` resolves the
product through the repository and logs.
"""
from __future__ import annotations
import logging
import math
import time
from dataclasses import dataclass
from typing import Any, Optional

from warehouse.domain.errors import InvalidInput, NotFound
from warehouse.domain.models.analysis import (
    AfterSpikeProjection,
    DaysRemaining,
    OriginalSnapshot,
    SpikeDetails,
    SpikeSimulation,
)
from warehouse.domain.models.product import Product
from warehouse.domain.services import reorder_engine as engine

logger = logging.getLogger(__name__)

DEFAULT_WINDOW_DAYS = 30


@dataclass(frozen=True)
class SpikeForecast:
    spiked_daily_sales: float
    total_spike_consumption: float
    stock_after_spike: float
    new_average_daily_sales: float
    original_days_remaining: DaysRemaining
    days_remaining: DaysRemaining
    safety_threshold: int
    needs_reorder: bool
    optimal_reorder_quantity: float
    estimated_cost: float
    stock_depletion: Optional[float]


def _is_missing(value: Any) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


def validate_spike_request(product_id: Any, spike_multiplier: Any, spike_duration: Any) -> None:
    missing = [
        name
        for name, value in (
            ("product_id", product_id),
            ("spike_multiplier", spike_multiplier),
            ("spike_duration", spike_duration),
        )
        if _is_missing(value)
    ]
    if missing:
        raise InvalidInput(f"Missing required fields: {', '.join(missing)}")
    validate_spike_params(spike_multiplier, spike_duration)


def validate_spike_params(spike_multiplier: float, spike_duration: float) -> None:
    if spike_multiplier is None or spike_duration is None:
        raise InvalidInput("spike_multiplier and spike_duration are required")
    if not (math.isfinite(spike_multiplier) and math.isfinite(spike_duration)):
        raise InvalidInput("spike_multiplier and spike_duration must be finite numbers")
    if spike_multiplier <= 0 or spike_duration <= 0:
        raise InvalidInput("spike_multiplier and spike_duration must be positive numbers")


def blended_daily_sales(
    average_daily_sales: float,
    spiked_daily_sales: float,
    spike_duration: float,
    window_days: int = DEFAULT_WINDOW_DAYS,
) -> float:
    if spike_duration >= window_days:
        return spiked_daily_sales
    normal_days = window_days - spike_duration
    return (average_daily_sales * normal_days + spiked_daily_sales * spike_duration) / window_days


def stock_depletion_percent(total_consumption: float, current_stock: float) -> Optional[float]:
    # Not applicable without stock: no percentage of nothing
    if current_stock == 0:
        return None
    return engine.round_half_up(total_consumption / current_stock * 100)


def forecast_spike(
    product: Product,
    spike_multiplier: float,
    spike_duration: float,
    window_days: int = DEFAULT_WINDOW_DAYS,
    buffer_days: int = engine.DEFAULT_BUFFER_DAYS,
    target_days: int = engine.DEFAULT_TARGET_DAYS,
) -> SpikeForecast:
    validate_spike_params(spike_multiplier, spike_duration)

    spiked = product.average_daily_sales * spike_multiplier
    total = spiked * spike_duration
    stock_after = max(0, product.current_stock - total)
    new_average = blended_daily_sales(product.average_daily_sales, spiked, spike_duration, window_days)
    if not all(math.isfinite(v) for v in (spiked, total, new_average)):
        raise InvalidInput("spike parameters out of range")

    days = engine.days_of_stock_remaining(stock_after, new_average)
    threshold = engine.safety_stock_threshold(product.supplier_lead_time, buffer_days)
    reorder = engine.needs_reorder(days, threshold)
    quantity = engine.reorder_quantity(
        reorder, new_average, stock_after, product.minimum_reorder_quantity, target_days
    )

    return SpikeForecast(
        spiked_daily_sales=spiked,
        total_spike_consumption=total,
        stock_after_spike=stock_after,
        new_average_daily_sales=new_average,
        original_days_remaining=engine.days_of_stock_remaining(
            product.current_stock, product.average_daily_sales
        ),
        days_remaining=days,
        safety_threshold=threshold,
        needs_reorder=reorder,
        optimal_reorder_quantity=quantity,
        estimated_cost=engine.estimated_cost(quantity, product.cost_per_unit),
        stock_depletion=stock_depletion_percent(total, product.current_stock),
    )


def simulate_demand_spike(
    product: Product,
    spike_multiplier: float,
    spike_duration: float,
    window_days: int = DEFAULT_WINDOW_DAYS,
    buffer_days: int = engine.DEFAULT_BUFFER_DAYS,
    target_days: int = engine.DEFAULT_TARGET_DAYS,
) -> SpikeSimulation:
    fc = forecast_spike(product, spike_multiplier, spike_duration, window_days, buffer_days, target_days)
    r2 = engine.round_half_up
    return SpikeSimulation(
        product_id=product.product_id,
        product_name=product.name,
        original=OriginalSnapshot(
            current_stock=product.current_stock,
            average_daily_sales=r2(product.average_daily_sales),
            days_remaining=fc.original_days_remaining,
        ),
        after_spike=AfterSpikeProjection(
            stock_after_spike=r2(fc.stock_after_spike),
            new_average_daily_sales=r2(fc.new_average_daily_sales),
            days_remaining=fc.days_remaining,
            safety_threshold=fc.safety_threshold,
            needs_reorder=fc.needs_reorder,
            optimal_reorder_quantity=r2(fc.optimal_reorder_quantity),
            estimated_cost=fc.estimated_cost,
        ),
        spike_details=SpikeDetails(
            spike_multiplier=spike_multiplier,
            spike_duration=spike_duration,
            spiked_daily_sales=r2(fc.spiked_daily_sales),
            total_consumption_during_spike=r2(fc.total_spike_consumption),
            stock_depletion=fc.stock_depletion,
        ),
    )


async def simulate_demand_spike_svc(
    repo,
    product_id: Optional[str],
    spike_multiplier: Optional[float],
    spike_duration: Optional[float],
    window_days: int = DEFAULT_WINDOW_DAYS,
    buffer_days: int = engine.DEFAULT_BUFFER_DAYS,
    target_days: int = engine.DEFAULT_TARGET_DAYS,
) -> SpikeSimulation:
    t0 = time.perf_counter()
    validate_spike_request(product_id, spike_multiplier, spike_duration)

    product = await repo.find_by_id(product_id)
    if product is None:
        raise NotFound(f"Product not found: {product_id}")

    result = simulate_demand_spike(
        product, spike_multiplier, spike_duration, window_days, buffer_days, target_days
    )
    logger.info(
        "spike_sim product_id=%s x%s for %s days -> days_remaining=%s needs_reorder=%s time=%.4fs",
        product_id, spike_multiplier, spike_duration,
        result.after_spike.days_remaining, result.after_spike.needs_reorder,
        time.perf_counter() - t0,
    )
    return result
