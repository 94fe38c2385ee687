MOCK_PRODUCT_ROWS = [
    {
        "id": 2,
        "name": "Lemon Wipe",
        "description": "Zesty lemon scent.",
        "features": '["Citrus Freshness", "pH Balanced"]',
        "usage_text": "Post-meal cleanup.",
        "image_path": "/images/lemon mockup.jpeg",
        "badge": None,
    },
    {
        "id": 1,
        "name": "Aloe Vera & Cucumber Wipe",
        "description": "Aloe vera and cucumber.",
        "features": ["Alcohol Free"],
        "usage_text": "Face, neck and hands.",
        "image_path": "/images/alovera mockup.jpeg",
        "badge": "Best Seller",
    },
]
