from pydantic import BaseModel
from typing import List, Literal, Optional, Union
from warehouse.domain.models.product import Product

# Days of stock remaining: a whole number of days, or the "Unlimited" tag when
# nothing is being consumed. Never a float infinity.
UNLIMITED = "Unlimited"
DaysRemaining = Union[int, Literal["Unlimited"]]

Urgency = Literal["out_of_stock", "urgent", "high", "medium", "ok"]


class ReorderAnalysis(Product):
    days_remaining: DaysRemaining
    safety_threshold: int
    needs_reorder: bool
    optimal_reorder_quantity: float
    estimated_cost: float
    urgency: Urgency


class OriginalSnapshot(BaseModel):
    current_stock: int
    average_daily_sales: float
    days_remaining: DaysRemaining
    model_config = {"frozen": True}


class AfterSpikeProjection(BaseModel):
    stock_after_spike: float
    new_average_daily_sales: float
    days_remaining: DaysRemaining
    safety_threshold: int
    needs_reorder: bool
    optimal_reorder_quantity: float
    estimated_cost: float
    model_config = {"frozen": True}


class SpikeDetails(BaseModel):
    spike_multiplier: float
    spike_duration: float
    spiked_daily_sales: float
    total_consumption_during_spike: float
    stock_depletion: Optional[float] = None  # percent; None when there was no stock to deplete
    model_config = {"frozen": True}


class SpikeSimulation(BaseModel):
    product_id: str
    product_name: str
    original: OriginalSnapshot
    after_spike: AfterSpikeProjection
    spike_details: SpikeDetails
    model_config = {"frozen": True}


class ReorderSummary(BaseModel):
    total_products: int
    needs_reorder: int
    total_reorder_cost: float
    critical_reorders: int


class InventorySummary(BaseModel):
    total_products: int
    low_stock: int
    total_inventory_value: float
    critical_items: int


class SeedResult(BaseModel):
    message: str
    count: int
    products: List[Product]
