# retail_store/services/order_service.py
from datetime import datetime
from typing import List, Optional

from retail_store.config import config
from retail_store.db.connection import DatabaseConnection
from retail_store.exceptions import OrderError, ValidationError
from retail_store.logging_setup import get_logger
from retail_store.services.product_service import ProductService
from retail_store.services.store_service import StoreService
from retail_store.session import UserSession

log = get_logger('orders')

RECENT_ORDERS_SQL = (
    "SELECT o.ordernumber, o.storeid, s.name AS storename, o.productname, o.unitsordered, o.ordertime "
    "FROM orders o JOIN store s ON s.storeid = o.storeid "
    "WHERE o.customerid = :user_id "
    "ORDER BY o.ordertime DESC, o.ordernumber DESC LIMIT :limit"
)

class OrderService:
    """Service for placing and reviewing customer orders."""

    def __init__(self, db: DatabaseConnection, rules: Optional[dict] = None):
        """Initialize the order service.

        Args:
            db: Open database connection
            rules: Business rules, defaults to configuration
        """
        self.db = db
        self.rules = rules or config.business_rules
        self.stores = StoreService(db, self.rules)
        self.products = ProductService(db, self.rules)

    def place_order(self, session: UserSession, store_id: int, product_name: str,
                    units_ordered: int) -> int:
        """Place an order and take the units out of the store's inventory.

        The inventory decrement and the order row are two separate
        statements. Validation happens before either is written, and the
        decrement only applies while enough units remain.

        Args:
            session: Logged-in user placing the order
            store_id: Store to order from, must be within the nearby radius
            product_name: Product to order
            units_ordered: Number of units, must be positive

        Returns:
            The new order number

        Raises:
            ValidationError: If the number of units is not positive
            OrderError: If the store is out of range or stock is insufficient
            NotFoundError: If the store does not sell the product
        """
        if units_ordered <= 0:
            raise ValidationError("Amount ordered must be greater than zero")

        if not self.stores.is_store_nearby(session, store_id):
            raise OrderError(
                f"Store {store_id} is too far or does not exist. "
                f"Please select a store within {self.rules['nearby_radius']:g} miles."
            )

        available = self.products.get_product_units(store_id, product_name)
        if units_ordered > available:
            raise OrderError(
                f"Store {store_id} only has {available} units of '{product_name}'",
                details={'requested': units_ordered, 'available': available}
            )

        # Stock can change between the check above and this statement
        reserved = self.db.execute_update(
            "UPDATE product SET numberofunits = numberofunits - :units "
            "WHERE storeid = :store_id AND productname = :product_name "
            "AND numberofunits >= :units",
            {'units': units_ordered, 'store_id': store_id, 'product_name': product_name}
        )
        if reserved == 0:
            raise OrderError(
                f"Store {store_id} no longer has {units_ordered} units of '{product_name}'",
                details={'requested': units_ordered}
            )

        rows = self.db.execute_and_return(
            "INSERT INTO orders (customerid, storeid, productname, unitsordered, ordertime) "
            "VALUES (:customer_id, :store_id, :product_name, :units, :order_time) "
            "RETURNING ordernumber",
            {
                'customer_id': session.user_id,
                'store_id': store_id,
                'product_name': product_name,
                'units': units_ordered,
                'order_time': datetime.now().replace(microsecond=0)
            }
        )
        order_number = int(rows[0][0])

        log.info(f"Order {order_number}: user {session.user_id} ordered {units_ordered} "
                 f"x '{product_name}' from store {store_id}")
        return order_number

    def get_recent_orders(self, session: UserSession) -> List[List[str]]:
        """The user's most recent orders, newest first."""
        return self.db.execute_and_return(
            RECENT_ORDERS_SQL,
            {'user_id': session.user_id, 'limit': self.rules['recent_limit']}
        )

    def view_recent_orders(self, session: UserSession) -> int:
        """Print the user's most recent orders."""
        return self.db.execute_and_print(
            RECENT_ORDERS_SQL,
            {'user_id': session.user_id, 'limit': self.rules['recent_limit']}
        )
