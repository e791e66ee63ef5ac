# warehouse/api/v1/routers/simulation.py
from fastapi import APIRouter, Depends

from warehouse.api.deps import product_repo
from warehouse.api.v1.schemas.reorder import SpikeRequest
from warehouse.core.config import get_settings
from warehouse.domain.models.analysis import SpikeSimulation
from warehouse.domain.repositories.product_repo import ProductRepo
from warehouse.domain.services.spike_forecaster import simulate_demand_spike_svc

import logging
logger = logging.getLogger(__name__)

router = APIRouter(tags=["simulation"])


@router.post("/simulate-demand-spike", response_model=SpikeSimulation)
async def simulate_demand_spike(body: SpikeRequest, repo: ProductRepo = Depends(product_repo)):
    """
    Project a product's stock and reorder decision after `spike_multiplier`x
    sales for `spike_duration` days, blended over the forecast window.
    """
    settings = get_settings()
    logger.info(
        "Request: simulate_demand_spike product_id=%s multiplier=%s duration=%s",
        body.product_id, body.spike_multiplier, body.spike_duration,
    )
    return await simulate_demand_spike_svc(
        repo,
        body.product_id,
        body.spike_multiplier,
        body.spike_duration,
        window_days=settings.spike_forecast_window_days,
        buffer_days=settings.reorder_buffer_days,
        target_days=settings.reorder_target_days,
    )
