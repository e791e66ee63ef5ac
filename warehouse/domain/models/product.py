from enum import Enum
from pydantic import BaseModel, ConfigDict, Field
from typing import Optional
from datetime import datetime


class Criticality(str, Enum):
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


# Upper bounds keep every derived amount (order quantity x unit cost) finite
MAX_UNITS = 1_000_000_000_000
MAX_DAILY_SALES = 1_000_000_000
MAX_UNIT_COST = 1_000_000_000
MAX_LEAD_TIME_DAYS = 3650


class Product(BaseModel):
    product_id: str = Field(min_length=1)
    name: str = Field(min_length=1)
    current_stock: int = Field(ge=0, le=MAX_UNITS)
    average_daily_sales: float = Field(ge=0, le=MAX_DAILY_SALES)
    supplier_lead_time: int = Field(ge=1, le=MAX_LEAD_TIME_DAYS, description="Days")
    minimum_reorder_quantity: int = Field(ge=1, le=MAX_UNITS)
    cost_per_unit: float = Field(gt=0, le=MAX_UNIT_COST)
    criticality: Criticality
    last_updated: Optional[datetime] = None

    model_config = ConfigDict(frozen=True, use_enum_values=True, allow_inf_nan=False)


class ProductCreate(BaseModel):
    product_id: str = Field(min_length=1)
    name: str = Field(min_length=1)
    current_stock: int = Field(ge=0, le=MAX_UNITS)
    average_daily_sales: float = Field(ge=0, le=MAX_DAILY_SALES)
    supplier_lead_time: int = Field(ge=1, le=MAX_LEAD_TIME_DAYS)
    minimum_reorder_quantity: int = Field(ge=1, le=MAX_UNITS)
    cost_per_unit: float = Field(gt=0, le=MAX_UNIT_COST)
    criticality: Criticality

    model_config = ConfigDict(use_enum_values=True, str_strip_whitespace=True, allow_inf_nan=False)


class ProductUpdate(BaseModel):
    """Partial update. product_id is the store key and cannot change."""
    name: Optional[str] = Field(None, min_length=1)
    current_stock: Optional[int] = Field(None, ge=0, le=MAX_UNITS)
    average_daily_sales: Optional[float] = Field(None, ge=0, le=MAX_DAILY_SALES)
    supplier_lead_time: Optional[int] = Field(None, ge=1, le=MAX_LEAD_TIME_DAYS)
    minimum_reorder_quantity: Optional[int] = Field(None, ge=1, le=MAX_UNITS)
    cost_per_unit: Optional[float] = Field(None, gt=0, le=MAX_UNIT_COST)
    criticality: Optional[Criticality] = None

    model_config = ConfigDict(use_enum_values=True, str_strip_whitespace=True, allow_inf_nan=False)

    def changes(self) -> dict:
        return self.model_dump(exclude_unset=True, exclude_none=True)
