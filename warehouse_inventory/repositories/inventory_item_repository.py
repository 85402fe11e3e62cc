# warehouse_inventory/repositories/inventory_item_repository.py
from typing import List, Optional, Union

from warehouse_inventory.models import InventoryItem, Product, Warehouse
from warehouse_inventory.repositories.base import BaseRepository


def _entity_id(value):
    # Accept either a mapped entity or its id
    return getattr(value, 'id', value)


class InventoryItemRepository(BaseRepository[InventoryItem]):
    """Stock rows, one per (warehouse, product) pair."""

    model = InventoryItem

    def find_by_warehouse_and_product(
        self,
        warehouse: Union[Warehouse, int],
        product: Union[Product, int]
    ) -> Optional[InventoryItem]:
        """Get the stock row for a product in a warehouse.

        Args:
            warehouse: Warehouse or warehouse ID
            product: Product or product ID

        Returns:
            InventoryItem object or None if the product is not stocked there
        """
        return self.session.query(InventoryItem).filter(
            InventoryItem.warehouse_id == _entity_id(warehouse),
            InventoryItem.product_id == _entity_id(product)
        ).first()

    def find_by_warehouse(self, warehouse: Union[Warehouse, int]) -> List[InventoryItem]:
        """Get all stock rows of a warehouse, in no particular order."""
        return self.session.query(InventoryItem).filter(
            InventoryItem.warehouse_id == _entity_id(warehouse)
        ).all()
