# warehouse_inventory/models.py
from datetime import datetime, timezone
import enum

from sqlalchemy import (
    Column, Integer, String, DateTime, Boolean, ForeignKey, Enum, UniqueConstraint, TypeDecorator, event, inspect
)
from sqlalchemy.orm import declarative_base, relationship

from warehouse_inventory.exceptions import ConstraintViolationError

Base = declarative_base()

ENUM_LENGTH = 40


def utcnow():
    """Current UTC time as a naive datetime, the form stored in every timestamp column."""
    return datetime.now(timezone.utc).replace(tzinfo=None)


def to_utc_naive(value):
    """Convert an aware datetime to naive UTC. Naive values are taken to be UTC already."""
    if value is None or value.tzinfo is None:
        return value
    return value.astimezone(timezone.utc).replace(tzinfo=None)


class UTCDateTime(TypeDecorator):
    """DateTime column holding naive UTC.

    Aware values, whether written or used as query bounds, are shifted to UTC
    before they reach the database.
    """

    impl = DateTime
    cache_ok = True

    def process_bind_param(self, value, dialect):
        return to_utc_naive(value)


class _LookupEnum(enum.Enum):

    def __str__(self):
        """Return the string value of the enum."""
        return self.value

    @classmethod
    def from_string(cls, value: str):
        """Create an enum member from its value or name, case-insensitively.

        Raises:
            ValueError if the string matches no member
        """
        normalized = (value or '').strip().upper()
        for member in cls:
            if member.value == normalized or member.name == normalized:
                return member
        valid = ', '.join(member.value for member in cls)
        raise ValueError(f"Invalid {cls.__name__}: {value}. Valid values are: {valid}")


class WarehouseType(_LookupEnum):
    MAIN = 'MAIN'
    REGIONAL = 'REGIONAL'
    DISTRIBUTION_CENTER = 'DISTRIBUTION_CENTER'
    STORE = 'STORE'

class ProductCategory(_LookupEnum):
    ELECTRONICS = 'ELECTRONICS'
    FOOD = 'FOOD'
    CLOTHING = 'CLOTHING'
    HOUSEHOLD = 'HOUSEHOLD'
    OTHER = 'OTHER'

class Role(_LookupEnum):
    """User roles.

    Values:
        ADMIN: Full access, manages users and warehouses
        MANAGER: Approves orders for the warehouses they run
        EMPLOYEE: Creates orders and records stock counts
    """
    ADMIN = 'ADMIN'
    MANAGER = 'MANAGER'
    EMPLOYEE = 'EMPLOYEE'

class OrderType(_LookupEnum):
    INBOUND = 'INBOUND'      # Goods received into a destination warehouse
    OUTBOUND = 'OUTBOUND'    # Goods shipped out of a source warehouse
    TRANSFER = 'TRANSFER'    # Movement between two warehouses

class OrderStatus(_LookupEnum):
    PENDING = 'PENDING'
    APPROVED = 'APPROVED'
    REJECTED = 'REJECTED'
    COMPLETED = 'COMPLETED'
    CANCELLED = 'CANCELLED'


def _enum_column(enum_class, **kwargs):
    # Stored as text so new members need no schema change
    return Column(Enum(enum_class, native_enum=False, length=ENUM_LENGTH), **kwargs)


class Warehouse(Base):
    __tablename__ = 'warehouses'

    id = Column(Integer, primary_key=True)
    name = Column(String(120), nullable=False, unique=True)
    location = Column(String(255))
    type = _enum_column(WarehouseType, nullable=False)

    inventory_items = relationship("InventoryItem", back_populates="warehouse")

    def __repr__(self):
        return f"<Warehouse(id={self.id}, name='{self.name}', type={self.type})>"

class Product(Base):
    __tablename__ = 'products'

    id = Column(Integer, primary_key=True)
    sku = Column(String(150), nullable=False, unique=True)
    name = Column(String(200), nullable=False)
    category = _enum_column(ProductCategory, nullable=False)
    active = Column(Boolean, nullable=False, default=True)

    inventory_items = relationship("InventoryItem", back_populates="product")

    def __repr__(self):
        return f"<Product(id={self.id}, sku='{self.sku}', active={self.active})>"

class User(Base):
    __tablename__ = 'users'

    id = Column(Integer, primary_key=True)
    username = Column(String(100), nullable=False, unique=True)
    password_hash = Column(String(255), nullable=False)
    email = Column(String(150), nullable=False, unique=True)
    role = _enum_column(Role, nullable=False)
    active = Column(Boolean, nullable=False, default=True)
    created_at = Column(UTCDateTime, nullable=False, default=utcnow)

    def __repr__(self):
        return f"<User(id={self.id}, username='{self.username}', role={self.role})>"

class InventoryItem(Base):
    """Stock level of one product in one warehouse."""
    __tablename__ = 'inventory_items'

    id = Column(Integer, primary_key=True)
    warehouse_id = Column(Integer, ForeignKey('warehouses.id'), nullable=False)
    product_id = Column(Integer, ForeignKey('products.id'), nullable=False)
    quantity = Column(Integer, nullable=False, default=0)

    warehouse = relationship("Warehouse", back_populates="inventory_items")
    product = relationship("Product", back_populates="inventory_items")

    __table_args__ = (
        UniqueConstraint('warehouse_id', 'product_id', name='uq_inventory_warehouse_product'),
    )

    def __repr__(self):
        return (f"<InventoryItem(id={self.id}, warehouse_id={self.warehouse_id}, "
                f"product_id={self.product_id}, quantity={self.quantity})>")

class Order(Base):
    __tablename__ = 'orders'

    id = Column(Integer, primary_key=True)
    type = _enum_column(OrderType, nullable=False)
    status = _enum_column(OrderStatus, nullable=False, default=OrderStatus.PENDING)

    source_warehouse_id = Column(Integer, ForeignKey('warehouses.id'))
    destination_warehouse_id = Column(Integer, ForeignKey('warehouses.id'))
    created_by_user_id = Column(Integer, ForeignKey('users.id'), nullable=False)
    approved_by_user_id = Column(Integer, ForeignKey('users.id'))

    created_at = Column(UTCDateTime, nullable=False, default=utcnow, index=True)
    approved_at = Column(UTCDateTime)
    completed_at = Column(UTCDateTime)

    source_warehouse = relationship("Warehouse", foreign_keys=[source_warehouse_id])
    destination_warehouse = relationship("Warehouse", foreign_keys=[destination_warehouse_id])
    created_by = relationship("User", foreign_keys=[created_by_user_id])
    approved_by = relationship("User", foreign_keys=[approved_by_user_id])

    # Lines live and die with their order
    items = relationship(
        "OrderItem",
        back_populates="order",
        cascade="all, delete-orphan",
        order_by="OrderItem.id"
    )

    def __repr__(self):
        return f"<Order(id={self.id}, type={self.type}, status={self.status}, created_at={self.created_at})>"

class OrderItem(Base):
    __tablename__ = 'order_items'

    id = Column(Integer, primary_key=True)
    order_id = Column(Integer, ForeignKey('orders.id', ondelete='CASCADE'), nullable=False)
    product_id = Column(Integer, ForeignKey('products.id'), nullable=False)
    quantity = Column(Integer, nullable=False)

    order = relationship("Order", back_populates="items")
    product = relationship("Product")

    def __repr__(self):
        return f"<OrderItem(id={self.id}, order_id={self.order_id}, product_id={self.product_id}, quantity={self.quantity})>"


def _reject_created_at_change(target, value, oldvalue, initiator):
    # Detached rows with an identity key still map to a stored row
    state = inspect(target)
    stored = state.persistent or (state.detached and state.key is not None)
    if stored and isinstance(oldvalue, datetime) and to_utc_naive(value) != to_utc_naive(oldvalue):
        raise ConstraintViolationError(
            f"{type(target).__name__}.created_at cannot be changed once persisted",
            details={'entity': type(target).__name__, 'id': target.id}
        )

for _model in (Order, User):
    event.listen(_model.created_at, 'set', _reject_created_at_change, active_history=True)
