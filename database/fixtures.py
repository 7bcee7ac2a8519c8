"""
Seed data loaded into every fresh in-memory database
"""
from typing import Dict, List, Any

USERS: List[Dict[str, Any]] = [
    {"id": 1, "name": "Customer User", "email": "customer@example.com", "phone": "+966 50 123 4567",
     "role": "customer", "address": "123 Main St, Riyadh", "city": "Riyadh"},
    {"id": 2, "name": "Admin User", "email": "admin@example.com", "phone": "+966 50 987 6543",
     "role": "admin"},
    {"id": 3, "name": "Vendor User", "email": "vendor@example.com", "phone": "+966 50 456 7890",
     "role": "vendor"},
    {"id": 4, "name": "Delivery User", "email": "delivery@example.com", "phone": "+966 50 789 0123",
     "role": "delivery"},
    {"id": 5, "name": "Laundry User", "email": "laundry@example.com", "phone": "+966 50 321 6547",
     "role": "laundry"},
]

# email -> password for the demo accounts
PASSWORDS: Dict[str, str] = {
    "customer@example.com": "customer123",
    "admin@example.com": "admin123",
    "vendor@example.com": "vendor123",
    "delivery@example.com": "delivery123",
    "laundry@example.com": "laundry123",
}

SERVICE_ITEMS: List[Dict[str, Any]] = [
    {"id": 1, "name": "Bed Sheets", "name_ar": "ملاءات السرير", "price": 25,
     "description": "Deep cleaning for all your bed sheets",
     "description_ar": "تنظيف عميق لجميع ملاءات السرير", "icon": "🛏️"},
    {"id": 2, "name": "Pillowcases", "name_ar": "أكياس الوسائد", "price": 10,
     "description": "Fresh and clean pillowcases",
     "description_ar": "أكياس وسائد منعشة ونظيفة", "icon": "🛌"},
    {"id": 3, "name": "Duvet Covers", "name_ar": "أغطية اللحاف", "price": 35,
     "description": "Professional cleaning for duvet covers",
     "description_ar": "تنظيف احترافي لأغطية اللحاف", "icon": "🧵"},
    {"id": 4, "name": "Blankets", "name_ar": "البطانيات", "price": 45,
     "description": "Thorough cleaning for all blankets",
     "description_ar": "تنظيف شامل لجميع البطانيات", "icon": "🧶"},
    {"id": 5, "name": "Comforters", "name_ar": "اللحف", "price": 60,
     "description": "Deep cleaning for comforters",
     "description_ar": "تنظيف عميق للحف", "icon": "🧠"},
    {"id": 6, "name": "Quilts", "name_ar": "الألحفة", "price": 55,
     "description": "Professional cleaning for quilts",
     "description_ar": "تنظيف احترافي للألحفة", "icon": "🧩"},
]

ORDERS: List[Dict[str, Any]] = [
    {
        "id": 1001, "customer_id": 1, "customer_name": "Customer User",
        "customer_phone": "+966 50 123 4567", "vendor_id": 3, "address": "123 Main St, Riyadh",
        "items": [
            {"id": 1, "name": "Bed Sheets", "quantity": 2, "price": 25},
            {"id": 2, "name": "Pillowcases", "quantity": 4, "price": 10},
        ],
        "subtotal": 90, "delivery_fee": 10, "discount": 0, "total": 100,
        "status": "delivered", "payment_method": "Card",
        "pickup_time": "2025-04-22T10:00:00", "delivery_time": "2025-04-23T14:00:00",
        "created_at": "2025-04-22T08:30:00", "updated_at": "2025-04-23T14:30:00",
        "loyalty_points": 10,
    },
    {
        "id": 1002, "customer_id": 1, "customer_name": "Customer User",
        "customer_phone": "+966 50 123 4567", "vendor_id": 3, "address": "123 Main St, Riyadh",
        "items": [
            {"id": 3, "name": "Duvet Covers", "quantity": 1, "price": 35},
            {"id": 4, "name": "Blankets", "quantity": 2, "price": 45},
        ],
        "subtotal": 125, "delivery_fee": 10, "discount": 5, "total": 130,
        "status": "processing", "payment_method": "Cash",
        "pickup_time": "2025-04-24T11:00:00", "delivery_time": "2025-04-25T15:00:00",
        "created_at": "2025-04-24T09:15:00", "updated_at": "2025-04-24T12:30:00",
        "loyalty_points": 13,
    },
    {
        "id": 1003, "customer_id": 1, "customer_name": "Customer User",
        "customer_phone": "+966 50 123 4567", "vendor_id": 3, "address": "123 Main St, Riyadh",
        "items": [
            {"id": 5, "name": "Comforters", "quantity": 1, "price": 60},
            {"id": 6, "name": "Quilts", "quantity": 1, "price": 55},
        ],
        "subtotal": 115, "delivery_fee": 10, "discount": 0, "total": 125,
        "status": "pending", "payment_method": "STC Pay",
        "pickup_time": "2025-04-26T09:00:00", "delivery_time": "2025-04-27T13:00:00",
        "created_at": "2025-04-25T18:45:00", "updated_at": "2025-04-25T18:45:00",
        "loyalty_points": 12,
    },
]

RIDERS: List[Dict[str, Any]] = [
    {"id": "1", "name": "Ahmed Ali", "email": "ahmed@example.com", "phone": "+966501234567",
     "vehicle": "motorcycle", "status": "available", "avatar": "/static/images/rider1.jpg"},
    {"id": "2", "name": "Mohammed Hassan", "email": "mohammed@example.com", "phone": "+966502345678",
     "vehicle": "bike", "status": "available", "avatar": "/static/images/rider2.jpg"},
    {"id": "3", "name": "Khalid Omar", "email": "khalid@example.com", "phone": "+966503456789",
     "vehicle": "car", "status": "busy", "avatar": "/static/images/rider3.jpg"},
    {"id": "4", "name": "Yousef Ibrahim", "email": "yousef@example.com", "phone": "+966504567890",
     "vehicle": "motorcycle", "status": "available", "avatar": "/static/images/rider4.jpg"},
    {"id": "5", "name": "Fahad Abdullah", "email": "fahad@example.com", "phone": "+966505678901",
     "vehicle": "bike", "status": "busy", "avatar": "/static/images/rider5.jpg"},
]

SERVICE_AREAS: List[Dict[str, Any]] = [
    {"id": 1, "name": "Riyadh Central", "name_ar": "وسط الرياض", "city": "Riyadh", "city_ar": "الرياض",
     "delivery_fee": 10, "min_order_amount": 50, "is_active": True, "estimated_delivery_time": 24},
    {"id": 2, "name": "Riyadh North", "name_ar": "شمال الرياض", "city": "Riyadh", "city_ar": "الرياض",
     "delivery_fee": 15, "min_order_amount": 50, "is_active": True, "estimated_delivery_time": 24},
    {"id": 3, "name": "Jeddah Central", "name_ar": "وسط جدة", "city": "Jeddah", "city_ar": "جدة",
     "delivery_fee": 12, "min_order_amount": 60, "is_active": True, "estimated_delivery_time": 36},
    {"id": 4, "name": "Dammam", "name_ar": "الدمام", "city": "Dammam", "city_ar": "الدمام",
     "delivery_fee": 20, "min_order_amount": 70, "is_active": True, "estimated_delivery_time": 48},
    {"id": 5, "name": "Mecca", "name_ar": "مكة المكرمة", "city": "Mecca", "city_ar": "مكة المكرمة",
     "delivery_fee": 15, "min_order_amount": 50, "is_active": False, "estimated_delivery_time": 36},
]
