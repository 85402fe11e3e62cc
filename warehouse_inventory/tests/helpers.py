"""
Shared fixtures for the warehouse inventory tests.
"""
import unittest

from sqlalchemy.orm import sessionmaker

from warehouse_inventory.db import build_engine
from warehouse_inventory.models import (
    Base, Warehouse, WarehouseType, Product, ProductCategory, User, Role, Order, OrderType
)


class InventoryTestCase(unittest.TestCase):
    """Runs each test against a fresh in-memory SQLite schema."""

    def setUp(self):
        """Set up test fixtures."""
        self.engine = build_engine('sqlite://')
        Base.metadata.create_all(self.engine)
        self.session = sessionmaker(bind=self.engine)()

    def tearDown(self):
        """Tear down test fixtures."""
        self.session.close()
        Base.metadata.drop_all(self.engine)
        self.engine.dispose()

    def make_warehouse(self, name='Central', warehouse_type=WarehouseType.MAIN, location='Rotterdam'):
        warehouse = Warehouse(name=name, type=warehouse_type, location=location)
        self.session.add(warehouse)
        self.session.commit()
        return warehouse

    def make_product(self, sku='ABC-1', name='Widget', category=ProductCategory.HOUSEHOLD):
        product = Product(sku=sku, name=name, category=category)
        self.session.add(product)
        self.session.commit()
        return product

    def make_user(self, username='jdoe', email='jdoe@example.com', role=Role.EMPLOYEE):
        user = User(username=username, email=email, password_hash='x' * 60, role=role)
        self.session.add(user)
        self.session.commit()
        return user

    def new_order(self, user, order_type=OrderType.INBOUND, status=None, created_at=None):
        order = Order(type=order_type, created_by=user)
        if status is not None:
            order.status = status
        if created_at is not None:
            order.created_at = created_at
        return order
