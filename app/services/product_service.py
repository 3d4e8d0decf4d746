"""Services for the product catalog.

This module serves the static product catalog shown on the website.
"""

from typing import Optional, List
import logging

from app.models.product import Product, ProductList
from app.utils.constants import PRODUCT_CATALOG, product_route, viewer_route

logger = logging.getLogger(__name__)


class ProductService:
    """Service for the product catalog."""

    def __init__(self, catalog: Optional[List[dict]] = None):
        """Initialize the product service.

        Args:
            catalog: Raw product entries, defaults to the built-in catalog
        """
        entries = catalog if catalog is not None else PRODUCT_CATALOG
        self.products = [self._build_product(entry) for entry in entries]

    def _build_product(self, entry: dict) -> Product:
        product_id = entry["id"]
        viewer_path = None
        if entry.get("has_viewer") and not entry.get("disabled"):
            viewer_path = viewer_route(product_id)
        return Product(
            **entry,
            path=product_route(product_id),
            viewer_path=viewer_path,
        )

    async def get_products(self, available: Optional[bool] = None) -> ProductList:
        """List the catalog in display order.

        Args:
            available: When set, keep only available (True) or upcoming (False) products

        Returns:
            The matching products
        """
        products = self.products
        if available is not None:
            products = [p for p in products if p.disabled != available]
        logger.info(f"Listing products:[available:{available}][count:{len(products)}]")
        return ProductList(products=products, count=len(products))

    async def get_product(self, product_id: str) -> Optional[Product]:
        """Retrieve a product by id.

        Args:
            product_id: Slug of the product

        Returns:
            The product, or None when the id is unknown
        """
        for product in self.products:
            if product.id == product_id:
                return product
        return None

    def viewer_available(self, product: Product) -> bool:
        return product.has_viewer and not product.disabled


product_service = ProductService()
