# warehouse/api/deps.py
from fastapi import Depends
from warehouse.core.config import get_settings
from warehouse.db.mongo import get_db
from warehouse.db.redis import get_redis
from warehouse.domain.repositories.product_repo import ProductRepo

# Dependency for injecting the MongoDB database into endpoints/services
async def mongo_db(db = Depends(get_db)):
    return db

# Dependency for injecting the Redis client (or None) into endpoints/services
def redis_dep():
    return get_redis()

# Product store handle, built per request from the injected database
def product_repo(db = Depends(mongo_db)) -> ProductRepo:
    return ProductRepo(db, get_settings().products_collection)
