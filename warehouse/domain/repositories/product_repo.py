# warehouse/domain/repositories/product_repo.py

from __future__ import annotations
from typing import Iterable, List, Optional
from datetime import datetime, timezone
from motor.motor_asyncio import AsyncIOMotorDatabase
from pymongo import ASCENDING, DESCENDING, ReturnDocument
from pymongo.errors import DuplicateKeyError
from warehouse.domain.errors import DuplicateKey, NotFound
from warehouse.domain.models.product import Product, ProductCreate, ProductUpdate

class ProductRepo:
    """
    Product repository backed by the 'products' collection, keyed by the
    unique `product_id`. Mongo's `_id` never leaves this class.
    """

    def __init__(self, db: AsyncIOMotorDatabase, collection_name: str = "products"):
        self.col = db[collection_name]

    async def ensure_indexes(self) -> None:
        await self.col.create_index([("product_id", ASCENDING)], unique=True, name="uq_product_id")

    async def create(self, data: ProductCreate) -> Product:
        doc = {**data.model_dump(), "last_updated": datetime.now(timezone.utc)}
        try:
            await self.col.insert_one(doc)
        except DuplicateKeyError:
            raise DuplicateKey(f"Product already exists: {data.product_id}")
        doc.pop("_id", None)
        return Product.model_validate(doc)

    async def find_all(self) -> List[Product]:
        cursor = self.col.find({}, {"_id": 0}).sort("last_updated", DESCENDING)
        return [Product.model_validate(doc) async for doc in cursor]

    async def find_by_id(self, product_id: str) -> Optional[Product]:
        doc = await self.col.find_one({"product_id": product_id}, {"_id": 0})
        return Product.model_validate(doc) if doc else None

    async def get(self, product_id: str) -> Product:
        """Like find_by_id, but a missing product is an error."""
        product = await self.find_by_id(product_id)
        if product is None:
            raise NotFound(f"Product not found: {product_id}")
        return product

    async def update(self, product_id: str, changes: ProductUpdate) -> Product:
        fields = {**changes.changes(), "last_updated": datetime.now(timezone.utc)}
        doc = await self.col.find_one_and_update(
            {"product_id": product_id},
            {"$set": fields},
            projection={"_id": 0},
            return_document=ReturnDocument.AFTER,
        )
        if doc is None:
            raise NotFound(f"Product not found: {product_id}")
        return Product.model_validate(doc)

    async def delete(self, product_id: str) -> None:
        res = await self.col.delete_one({"product_id": product_id})
        if res.deleted_count == 0:
            raise NotFound(f"Product not found: {product_id}")

    async def replace_all(self, products: Iterable[ProductCreate]) -> List[Product]:
        """Drop every product and insert `products` (sample data seeding)."""
        now = datetime.now(timezone.utc)
        docs = [{**p.model_dump(), "last_updated": now} for p in products]
        await self.col.delete_many({})
        if docs:
            try:
                await self.col.insert_many(docs, ordered=True)
            except DuplicateKeyError as e:
                raise DuplicateKey(f"Duplicate product_id in seed data: {e}")
        for d in docs:
            d.pop("_id", None)
        return [Product.model_validate(d) for d in docs]
