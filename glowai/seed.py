"""
Sample catalog — served by the in-memory backend and loaded into the
database by scripts/init_db.py.
"""

from glowai.schemas import Product

SAMPLE_PRODUCTS: list[dict] = [
    {
        "id": "1",
        "name": "Gentle Foaming Cleanser",
        "brand": "Cetaphil",
        "rating": 4.5,
        "reviews_count": 234,
        "description": "A gentle cleanser suitable for all skin types. Removes impurities without stripping natural oils.",
        "links": [
            {"store": "Jumia", "url": "https://jumia.co.ke"},
            {"store": "Amazon", "url": "https://amazon.com"},
        ],
        "skin_types": ["All", "Sensitive", "Dry"],
        "goals": ["Hydration", "Basic Care"],
    },
    {
        "id": "2",
        "name": "Vitamin C Brightening Serum",
        "brand": "The Ordinary",
        "rating": 4.7,
        "reviews_count": 456,
        "description": "Potent vitamin C serum that brightens skin and reduces dark spots. Best used in morning routine.",
        "links": [
            {"store": "Beauty Store", "url": "https://example.com"},
            {"store": "Jumia", "url": "https://jumia.co.ke"},
        ],
        "skin_types": ["Normal", "Combination", "Oily"],
        "goals": ["Glowing skin", "Even tone", "Anti-aging"],
    },
    {
        "id": "3",
        "name": "Hyaluronic Acid Moisturizer",
        "brand": "Neutrogena",
        "rating": 4.3,
        "reviews_count": 189,
        "description": "Lightweight moisturizer with hyaluronic acid for deep hydration without feeling heavy.",
        "links": [{"store": "Pharmacy", "url": "https://example.com"}],
        "skin_types": ["Dry", "Normal", "Sensitive"],
        "goals": ["Hydration", "Anti-aging"],
    },
    {
        "id": "4",
        "name": "Hydrating Facial Mist",
        "brand": "Mario Badescu",
        "rating": 4.4,
        "reviews_count": 312,
        "description": "Refreshing rosewater mist to rehydrate skin through the day.",
        "links": [{"store": "Jumia", "url": "https://jumia.co.ke"}],
        "skin_types": ["All"],
        "goals": ["Hydration", "Glowing skin"],
    },
    {
        "id": "5",
        "name": "Deep Cleanser Charcoal Wash",
        "brand": "Biore",
        "rating": 4.1,
        "reviews_count": 158,
        "description": "Charcoal wash that draws out oil and dirt from pores after a long day.",
        "links": [
            {"store": "Amazon", "url": "https://amazon.com"},
            {"store": "Jumia", "url": "https://jumia.co.ke"},
        ],
        "skin_types": ["Oily", "Combination"],
        "goals": ["Acne-free", "Basic Care"],
    },
    {
        "id": "6",
        "name": "Retinol Treatment 0.5%",
        "brand": "The Ordinary",
        "rating": 4.6,
        "reviews_count": 389,
        "description": "Evening retinol treatment that smooths fine lines and refines texture.",
        "links": [{"store": "Beauty Store", "url": "https://example.com"}],
        "skin_types": ["Normal", "Combination", "Oily"],
        "goals": ["Anti-aging", "Even tone", "Acne-free"],
    },
    {
        "id": "7",
        "name": "Night Repair Moisturizer",
        "brand": "CeraVe",
        "rating": 4.5,
        "reviews_count": 201,
        "description": "Rich overnight cream with ceramides to restore the skin barrier.",
        "links": [{"store": "Pharmacy", "url": "https://example.com"}],
        "skin_types": ["Dry", "Normal", "Sensitive", "Combination"],
        "goals": ["Hydration", "Anti-aging"],
    },
    {
        "id": "8",
        "name": "Daily Sunscreen SPF 30",
        "brand": "La Roche-Posay",
        "rating": 4.8,
        "reviews_count": 512,
        "description": "Lightweight broad-spectrum protection that sits well under makeup.",
        "links": [
            {"store": "Amazon", "url": "https://amazon.com"},
            {"store": "Pharmacy", "url": "https://example.com"},
        ],
        "skin_types": ["All"],
        "goals": ["Anti-aging", "Even tone", "Basic Care"],
    },
]


def sample_catalog() -> list[Product]:
    return [Product.model_validate(p) for p in SAMPLE_PRODUCTS]
