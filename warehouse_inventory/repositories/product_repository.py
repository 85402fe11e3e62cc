# warehouse_inventory/repositories/product_repository.py
from typing import Optional

from warehouse_inventory.models import Product
from warehouse_inventory.repositories.base import BaseRepository


class ProductRepository(BaseRepository[Product]):
    """Lookups for products by SKU."""

    model = Product

    def find_by_sku(self, sku: str) -> Optional[Product]:
        """Get a product by SKU.

        Args:
            sku: Stock keeping unit

        Returns:
            Product object or None if not found
        """
        return self.session.query(Product).filter(Product.sku == sku).first()

    def exists_by_sku(self, sku: str) -> bool:
        return self.session.query(
            self.session.query(Product).filter(Product.sku == sku).exists()
        ).scalar()
