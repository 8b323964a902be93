# retail_store/services/supply_service.py
from typing import Optional

from retail_store.config import config
from retail_store.db.connection import DatabaseConnection
from retail_store.exceptions import NotFoundError, ValidationError
from retail_store.logging_setup import get_logger
from retail_store.models import UserType
from retail_store.services.product_service import ProductService
from retail_store.services.store_service import StoreService
from retail_store.session import UserSession

log = get_logger('supply')

class SupplyService:
    """Service for product supply requests from a store to a warehouse."""

    def __init__(self, db: DatabaseConnection, rules: Optional[dict] = None):
        self.db = db
        self.rules = rules or config.business_rules
        self.stores = StoreService(db, self.rules)
        self.products = ProductService(db, self.rules)

    def require_warehouse(self, warehouse_id: int) -> None:
        """Raise NotFoundError unless the warehouse exists."""
        if self.db.execute_count(
            "SELECT warehouseid FROM warehouse WHERE warehouseid = :warehouse_id",
            {'warehouse_id': warehouse_id}
        ) == 0:
            raise NotFoundError(f"Warehouse {warehouse_id} does not exist")

    def place_supply_request(self, session: UserSession, store_id: int, product_name: str,
                             units_requested: int, warehouse_id: int) -> int:
        """Request units of a product from a warehouse for a managed store.

        The request is recorded in ``productsupplyrequests`` and the units
        are added to the store's inventory as a separate statement.

        Args:
            session: Logged-in user, must manage the store
            store_id: Store receiving the supply
            product_name: Product to restock
            units_requested: Number of units, must be positive
            warehouse_id: Warehouse supplying the units

        Returns:
            The new request number

        Raises:
            AuthorizationError: If the user does not manage the store
            NotFoundError: If the store, product or warehouse does not exist
            ValidationError: If the number of units is not positive
        """
        session.require(UserType.MANAGER)
        if units_requested <= 0:
            raise ValidationError("Units requested must be greater than zero")

        self.stores.require_managed_store(session, store_id)
        self.products.get_product_units(store_id, product_name)
        self.require_warehouse(warehouse_id)

        rows = self.db.execute_and_return(
            "INSERT INTO productsupplyrequests "
            "(managerid, warehouseid, storeid, productname, unitsrequested) "
            "VALUES (:manager_id, :warehouse_id, :store_id, :product_name, :units) "
            "RETURNING requestnumber",
            {
                'manager_id': session.user_id,
                'warehouse_id': warehouse_id,
                'store_id': store_id,
                'product_name': product_name,
                'units': units_requested
            }
        )
        request_number = int(rows[0][0])

        self.db.execute_update(
            "UPDATE product SET numberofunits = numberofunits + :units "
            "WHERE storeid = :store_id AND productname = :product_name",
            {'units': units_requested, 'store_id': store_id, 'product_name': product_name}
        )

        log.info(f"Supply request {request_number}: {units_requested} x '{product_name}' "
                 f"from warehouse {warehouse_id} to store {store_id}")
        return request_number
