from warehouse.domain.models.product import Product, ProductCreate


def make_product(**overrides) -> Product:
    fields = {
        "product_id": "PROD-001",
        "name": "Wireless Bluetooth Headphones",
        "current_stock": 45,
        "average_daily_sales": 3.2,
        "supplier_lead_time": 7,
        "minimum_reorder_quantity": 50,
        "cost_per_unit": 2499,
        "criticality": "high",
    }
    fields.update(overrides)
    return Product(**fields)


def product_payload(**overrides) -> dict:
    product = make_product(**overrides)
    return ProductCreate(**product.model_dump(exclude={"last_updated"})).model_dump()
