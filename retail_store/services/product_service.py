# retail_store/services/product_service.py
from datetime import datetime
from typing import List, Optional

from retail_store.config import config
from retail_store.db.connection import DatabaseConnection
from retail_store.exceptions import NotFoundError, ValidationError
from retail_store.logging_setup import get_logger
from retail_store.models import UserType
from retail_store.services.store_service import StoreService
from retail_store.session import UserSession

log = get_logger('products')

RECENT_UPDATES_SQL = (
    "SELECT pu.updatenumber, pu.storeid, pu.productname, u.name AS manager, pu.updatedon "
    "FROM productupdates pu "
    "JOIN store s ON s.storeid = pu.storeid "
    "JOIN users u ON u.userid = pu.managerid"
)

class ProductService:
    """Service for product inventory operations."""

    def __init__(self, db: DatabaseConnection, rules: Optional[dict] = None):
        """Initialize the product service.

        Args:
            db: Open database connection
            rules: Business rules, defaults to configuration
        """
        self.db = db
        self.rules = rules or config.business_rules
        self.stores = StoreService(db, self.rules)

    def get_products(self, store_id: int) -> List[List[str]]:
        """Get the product records (name, units, price) of a store."""
        return self.db.execute_and_return(
            "SELECT productname, numberofunits, priceperunit FROM product "
            "WHERE storeid = :store_id ORDER BY productname",
            {'store_id': store_id}
        )

    def view_products(self, store_id: int) -> int:
        """Print the product list of a store; returns the number of products."""
        return self.db.execute_and_print(
            "SELECT productname, numberofunits, priceperunit FROM product "
            "WHERE storeid = :store_id ORDER BY productname",
            {'store_id': store_id}
        )

    def get_product_units(self, store_id: int, product_name: str) -> int:
        """Get the number of units a store holds of a product.

        Raises:
            NotFoundError: If the store does not carry the product
        """
        rows = self.db.execute_and_return(
            "SELECT numberofunits FROM product WHERE storeid = :store_id AND productname = :product_name",
            {'store_id': store_id, 'product_name': product_name}
        )
        if not rows:
            raise NotFoundError(f"Store {store_id} does not sell '{product_name}'")
        return int(rows[0][0])

    def update_product(self, session: UserSession, store_id: int, product_name: str,
                       number_of_units: int, price_per_unit: int) -> None:
        """Update units and price of a product in a store the manager manages.

        The change is recorded in ``productupdates``.

        Args:
            session: Logged-in user, must be a manager
            store_id: Store ID
            product_name: Product to update
            number_of_units: New number of units
            price_per_unit: New price per unit

        Raises:
            AuthorizationError: If the user is not the manager of the store
            NotFoundError: If the store or product does not exist
            ValidationError: If units or price are negative
        """
        session.require(UserType.MANAGER)
        if number_of_units < 0 or price_per_unit < 0:
            raise ValidationError("Units and price cannot be negative")

        self.stores.require_managed_store(session, store_id)
        self.get_product_units(store_id, product_name)

        self.db.execute_update(
            "UPDATE product SET numberofunits = :units, priceperunit = :price "
            "WHERE storeid = :store_id AND productname = :product_name",
            {
                'units': number_of_units,
                'price': price_per_unit,
                'store_id': store_id,
                'product_name': product_name
            }
        )
        self.db.execute_update(
            "INSERT INTO productupdates (managerid, storeid, productname, updatedon) "
            "VALUES (:manager_id, :store_id, :product_name, :updated_on)",
            {
                'manager_id': session.user_id,
                'store_id': store_id,
                'product_name': product_name,
                'updated_on': datetime.now().replace(microsecond=0)
            }
        )
        log.info(f"Manager {session.user_id} updated '{product_name}' at store {store_id}: "
                 f"{number_of_units} units at {price_per_unit}")

    def get_recent_updates(self, session: UserSession) -> List[List[str]]:
        """Most recent product updates visible to the user.

        Managers see updates for the stores they manage, admins see all.
        """
        sql, params = self._recent_updates_query(session)
        return self.db.execute_and_return(sql, params)

    def view_recent_updates(self, session: UserSession) -> int:
        """Print the most recent product updates visible to the user."""
        sql, params = self._recent_updates_query(session)
        return self.db.execute_and_print(sql, params)

    def _recent_updates_query(self, session: UserSession):
        session.require(UserType.MANAGER, UserType.ADMIN)
        params = {'limit': self.rules['recent_limit']}
        sql = RECENT_UPDATES_SQL
        if session.is_manager:
            sql += " WHERE s.managerid = :user_id"
            params['user_id'] = session.user_id
        sql += " ORDER BY pu.updatedon DESC, pu.updatenumber DESC LIMIT :limit"
        return sql, params
