import logging
from typing import List

from warehouse.domain.models.product import Product, ProductCreate

logger = logging.getLogger(__name__)

# (product_id, name, current_stock, average_daily_sales, supplier_lead_time,
#  minimum_reorder_quantity, cost_per_unit, criticality)
SAMPLE_PRODUCTS = [
    ("PROD-001", "Wireless Bluetooth Headphones", 45, 3.2, 7, 50, 2499, "high"),
    ("PROD-002", "USB-C Cable 6ft", 120, 8.5, 3, 100, 1049, "medium"),
    ("PROD-003", "Smartphone Case - Clear", 15, 2.1, 5, 25, 749, "high"),
    ("PROD-004", "Portable Power Bank 10000mAh", 80, 1.8, 14, 30, 2099, "medium"),
    ("PROD-005", "Laptop Screen Protector", 25, 0.8, 10, 20, 1349, "low"),
    ("PROD-006", "Wireless Mouse", 35, 2.5, 8, 40, 1699, "medium"),
    ("PROD-007", "Gaming Keyboard - RGB", 22, 1.4, 12, 15, 6799, "high"),
    ("PROD-008", "Webcam 1080p HD", 65, 2.8, 6, 35, 3899, "medium"),
    ("PROD-009", "Bluetooth Speaker Portable", 8, 4.1, 9, 20, 2949, "high"),
    ("PROD-010", "Phone Stand Adjustable", 140, 6.2, 4, 75, 849, "low"),
    ("PROD-011", "Wireless Charging Pad", 55, 3.7, 11, 45, 1949, "medium"),
    ("PROD-012", "HDMI Cable 10ft", 95, 2.3, 5, 60, 1449, "low"),
    ("PROD-013", "Tablet Stylus Pen", 18, 1.9, 15, 25, 2449, "high"),
    ("PROD-014", "Car Phone Mount", 72, 3.1, 7, 50, 1299, "medium"),
    ("PROD-015", "Lightning Cable 3ft", 160, 12.4, 2, 120, 749, "medium"),
    ("PROD-016", "Laptop Cooling Pad", 31, 1.2, 18, 20, 2799, "low"),
    ("PROD-017", "Smart Watch Band - Silicone", 12, 5.8, 6, 30, 999, "high"),
    ("PROD-018", "USB Hub 4-Port", 44, 2.6, 8, 35, 1599, "medium"),
    ("PROD-019", "Noise Cancelling Earbuds", 28, 4.3, 13, 40, 7649, "high"),
    ("PROD-020", "Memory Card 64GB", 86, 3.4, 9, 50, 1699, "medium"),
    ("PROD-021", "Desk Lamp LED", 19, 1.1, 21, 15, 3649, "low"),
    ("PROD-022", "Cable Organizer Set", 103, 4.7, 4, 80, 679, "low"),
    ("PROD-023", "Portable Hard Drive 1TB", 37, 2.2, 16, 25, 5599, "medium"),
    ("PROD-024", "Monitor Stand Adjustable", 14, 0.9, 20, 12, 3299, "high"),
    ("PROD-025", "Bluetooth Adapter USB", 67, 1.6, 7, 40, 1199, "low"),
    ("PROD-026", "Gaming Mouse Pad XXL", 41, 2.8, 11, 30, 2199, "medium"),
    ("PROD-027", "Smartphone Gimbal Stabilizer", 9, 0.7, 25, 10, 11049, "high"),
    ("PROD-028", "Wi-Fi Range Extender", 52, 1.3, 14, 20, 4159, "low"),
    ("PROD-029", 'Digital Photo Frame 10"', 16, 0.6, 22, 12, 6709, "low"),
    ("PROD-030", "Ethernet Cable Cat6 25ft", 78, 2.1, 6, 50, 1299, "medium"),
    ("PROD-031", "Wireless Earbuds - Sport", 24, 3.9, 10, 35, 4839, "high"),
    ("PROD-032", "Laptop Backpack Water-Resistant", 33, 1.4, 17, 20, 4249, "medium"),
    ("PROD-033", "Mechanical Keyboard Switch Tester", 58, 0.4, 12, 25, 1099, "low"),
    ("PROD-034", "Smartphone Camera Lens Kit", 21, 1.7, 19, 18, 3059, "medium"),
    ("PROD-035", "Tablet Keyboard Case", 11, 2.4, 8, 15, 3649, "high"),
    ("PROD-036", "VR Headset Stand", 47, 0.8, 15, 20, 2039, "low"),
    ("PROD-037", "Wireless Gaming Controller", 29, 2.7, 11, 25, 5779, "medium"),
    ("PROD-038", "USB-C to HDMI Adapter", 84, 4.2, 5, 60, 1449, "medium"),
    ("PROD-039", "Smart Home Security Camera", 13, 1.8, 23, 15, 7649, "high"),
    ("PROD-040", "Portable SSD 500GB", 36, 1.5, 18, 20, 6799, "medium"),
]


def sample_products() -> List[ProductCreate]:
    return [
        ProductCreate(
            product_id=pid,
            name=name,
            current_stock=stock,
            average_daily_sales=sales,
            supplier_lead_time=lead,
            minimum_reorder_quantity=moq,
            cost_per_unit=cost,
            criticality=crit,
        )
        for pid, name, stock, sales, lead, moq, cost, crit in SAMPLE_PRODUCTS
    ]


async def seed_products_svc(repo) -> List[Product]:
    """Replace the whole catalog with the sample products."""
    products = await repo.replace_all(sample_products())
    logger.info("seed done products=%s", len(products))
    return products
