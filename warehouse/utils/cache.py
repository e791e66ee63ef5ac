# warehouse/utils/cache.py
from typing import List, Optional, Type, TypeVar

from pydantic import BaseModel, TypeAdapter
from redis.asyncio import Redis

M = TypeVar("M", bound=BaseModel)


async def cache_get_models(redis: Redis, key: str, model: Type[M]) -> Optional[List[M]]:
    """Cached JSON list of `model`, or None on a miss."""
    if raw := await redis.get(key):
        return TypeAdapter(List[model]).validate_json(raw)
    return None


async def cache_set_models(redis: Redis, key: str, items: List[BaseModel], ex: int = 60):
    payload = TypeAdapter(List[type(items[0])] if items else list).dump_json(items).decode()
    await redis.set(key, payload, ex=ex)


async def cache_delete(redis: Redis, key: str):
    await redis.delete(key)
