# warehouse_inventory/repositories/order_repository.py
from datetime import datetime
from typing import List

from sqlalchemy import func

from warehouse_inventory.models import Order, OrderStatus, OrderType
from warehouse_inventory.repositories.base import BaseRepository


class OrderRepository(BaseRepository[Order]):
    """Orders and, through cascade, their items."""

    model = Order

    def find_by_type_and_created_at_between(
        self,
        order_type: OrderType,
        start: datetime,
        end: datetime
    ) -> List[Order]:
        """Get orders of a type created within a closed time range.

        Args:
            order_type: Order type to match
            start: Earliest creation time, inclusive
            end: Latest creation time, inclusive

        Returns:
            List of order objects, in no particular order
        """
        return self.session.query(Order).filter(
            Order.type == order_type,
            Order.created_at.between(start, end)
        ).all()

    def count_by_status(self, status: OrderStatus) -> int:
        return self.session.query(func.count(Order.id)).filter(Order.status == status).scalar()
