# warehouse/api/v1/schemas/reorder.py
from typing import Optional
from pydantic import BaseModel, ConfigDict, Field


class SpikeRequest(BaseModel):
    # All optional here: missing values are reported by the forecaster as InvalidInput
    product_id: Optional[str] = None
    spike_multiplier: Optional[float] = Field(None, description="Sales multiplier during the spike, > 0")
    spike_duration: Optional[float] = Field(None, description="Spike length in days, > 0")

    model_config = ConfigDict(allow_inf_nan=False)


class MessageOut(BaseModel):
    message: str
