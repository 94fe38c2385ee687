"""Services for the product catalog.

The catalog is read-only. Products come from the products table when it is
reachable and populated; otherwise the built-in catalog is served.
"""

import logging
from typing import List, Optional

from brhygiene.core.config import Settings, settings as default_settings
from brhygiene.models.product import Product
from brhygiene.services.base_database_service import BaseDatabaseService, get_database_service

logger = logging.getLogger(__name__)

FALLBACK_PRODUCTS = [
    {
        "id": 1,
        "name": "Aloe Vera & Cucumber Wipe",
        "description": "Infused with aloe vera and cooling cucumber for deep hydration and gentle skin care.",
        "features": ["Alcohol Free", "Skin Friendly", "Moisturizing"],
        "usage_text": "Ideal for face, neck, and hands for a gentle cleanse anytime.",
        "image_path": "/images/alovera mockup.jpeg",
        "badge": "Best Seller",
    },
    {
        "id": 2,
        "name": "Lemon Wipe",
        "description": "Zesty lemon scent delivers an instant burst of energy while effectively cleansing skin.",
        "features": ["Citrus Freshness", "pH Balanced", "Individually Sealed"],
        "usage_text": "Perfect for post-meal cleanup or quick refreshment during travel.",
        "image_path": "/images/lemon mockup.jpeg",
        "badge": "Popular",
    },
    {
        "id": 3,
        "name": "Custom Formulation",
        "description": "Tailored wipes designed to meet your specific requirements and branding needs.",
        "features": ["White Label", "Custom Scent", "Private Label"],
        "usage_text": "Ideal for corporate gifts, hospitality, and bulk distribution.",
        "image_path": "/images/oem.jpeg",
        "badge": "OEM Available",
    },
]


class CatalogService:
    """Service for reading the product catalog."""

    def __init__(
        self,
        database: Optional[BaseDatabaseService] = None,
        settings: Optional[Settings] = None,
    ):
        self.settings = settings or default_settings
        self._database = database

    @property
    def database(self) -> BaseDatabaseService:
        if self._database is None:
            self._database = get_database_service(self.settings)
        return self._database

    def list_products(self) -> List[Product]:
        """Return the catalog ordered by id, falling back to the built-in list."""
        try:
            rows = self.database.select_data(self.settings.PRODUCTS_TABLE, order_by="id")
        except Exception as e:
            logger.warning(f"Product table unavailable, serving built-in catalog: {str(e)}")
            rows = []

        if not rows:
            rows = FALLBACK_PRODUCTS

        products = []
        for row in rows:
            try:
                products.append(Product(**row))
            except Exception as e:
                logger.warning(f"Skipping malformed product row {row.get('id')}: {str(e)}")
        return products


catalog_service = CatalogService()
