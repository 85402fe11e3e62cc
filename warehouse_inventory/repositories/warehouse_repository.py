# warehouse_inventory/repositories/warehouse_repository.py
from typing import Optional

from warehouse_inventory.models import Warehouse
from warehouse_inventory.repositories.base import BaseRepository


class WarehouseRepository(BaseRepository[Warehouse]):
    """Lookups for warehouses by their unique name."""

    model = Warehouse

    def find_by_name(self, name: str) -> Optional[Warehouse]:
        """Get a warehouse by name.

        Args:
            name: Warehouse name

        Returns:
            Warehouse object or None if not found
        """
        return self.session.query(Warehouse).filter(Warehouse.name == name).first()

    def exists_by_name(self, name: str) -> bool:
        return self.session.query(
            self.session.query(Warehouse).filter(Warehouse.name == name).exists()
        ).scalar()
