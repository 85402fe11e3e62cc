from .base import BaseRepository
from .warehouse_repository import WarehouseRepository
from .product_repository import ProductRepository
from .inventory_item_repository import InventoryItemRepository
from .order_repository import OrderRepository
from .user_repository import UserRepository

__all__ = [
    'BaseRepository',
    'WarehouseRepository',
    'ProductRepository',
    'InventoryItemRepository',
    'OrderRepository',
    'UserRepository'
]
