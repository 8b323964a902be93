# retail_store/services/reporting_service.py
from typing import List, Optional

from retail_store.config import config
from retail_store.db.connection import DatabaseConnection
from retail_store.models import UserType
from retail_store.services.store_service import StoreService
from retail_store.session import UserSession

POPULAR_PRODUCTS_SQL = (
    "SELECT p.productname, COUNT(o.ordernumber) AS times_ordered "
    "FROM orders o "
    "JOIN product p ON p.storeid = o.storeid AND p.productname = o.productname "
    "WHERE o.storeid = :store_id "
    "GROUP BY p.productname "
    "ORDER BY times_ordered DESC, p.productname "
    "LIMIT :limit"
)

POPULAR_CUSTOMERS_SQL = (
    "SELECT u.userid, u.name, COUNT(o.ordernumber) AS orders_placed "
    "FROM orders o "
    "JOIN users u ON u.userid = o.customerid "
    "WHERE o.storeid = :store_id "
    "GROUP BY u.userid, u.name "
    "ORDER BY orders_placed DESC, u.userid "
    "LIMIT :limit"
)

class ReportingService:
    """Store-level reports for managers."""

    def __init__(self, db: DatabaseConnection, rules: Optional[dict] = None):
        self.db = db
        self.rules = rules or config.business_rules
        self.stores = StoreService(db, self.rules)

    def _report_params(self, session: UserSession, store_id: int) -> dict:
        session.require(UserType.MANAGER)
        self.stores.require_managed_store(session, store_id)
        return {'store_id': store_id, 'limit': self.rules['top_limit']}

    def get_popular_products(self, session: UserSession, store_id: int) -> List[List[str]]:
        """Top products of a managed store by number of orders.

        Returns:
            Records of (productname, times_ordered), most ordered first
        """
        return self.db.execute_and_return(POPULAR_PRODUCTS_SQL, self._report_params(session, store_id))

    def view_popular_products(self, session: UserSession, store_id: int) -> int:
        params = self._report_params(session, store_id)
        print(f"\nTop {params['limit']} products from Store {store_id}: ")
        return self.db.execute_and_print(POPULAR_PRODUCTS_SQL, params)

    def get_popular_customers(self, session: UserSession, store_id: int) -> List[List[str]]:
        """Top customers of a managed store by number of orders placed.

        Returns:
            Records of (userid, name, orders_placed), most orders first
        """
        return self.db.execute_and_return(POPULAR_CUSTOMERS_SQL, self._report_params(session, store_id))

    def view_popular_customers(self, session: UserSession, store_id: int) -> int:
        params = self._report_params(session, store_id)
        print(f"\nYour top {params['limit']} customers from Store {store_id}: ")
        return self.db.execute_and_print(POPULAR_CUSTOMERS_SQL, params)
