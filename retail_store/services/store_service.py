# retail_store/services/store_service.py
from typing import List, Optional

from retail_store.config import config
from retail_store.db.connection import DatabaseConnection
from retail_store.exceptions import AuthorizationError, NotFoundError
from retail_store.session import UserSession

NEARBY_STORES_SQL = (
    "SELECT s.storeid, s.name, "
    "calculate_distance(u.latitude, u.longitude, s.latitude, s.longitude) AS distance "
    "FROM store s, users u "
    "WHERE u.userid = :user_id "
    "AND calculate_distance(u.latitude, u.longitude, s.latitude, s.longitude) < :radius"
)

class StoreService:
    """Service for store lookups and the nearby-store rule."""

    def __init__(self, db: DatabaseConnection, rules: Optional[dict] = None):
        self.db = db
        self.rules = rules or config.business_rules

    @property
    def radius(self) -> float:
        return self.rules['nearby_radius']

    def get_nearby_stores(self, session: UserSession) -> List[List[str]]:
        """Stores strictly closer than the configured radius to the user.

        Returns:
            Records of (storeid, name, distance), nearest first
        """
        return self.db.execute_and_return(
            NEARBY_STORES_SQL + " ORDER BY distance, s.storeid",
            {'user_id': session.user_id, 'radius': self.radius}
        )

    def view_stores(self, session: UserSession) -> int:
        """Print the stores within the radius; returns the number printed."""
        return self.db.execute_and_print(
            NEARBY_STORES_SQL + " ORDER BY distance, s.storeid",
            {'user_id': session.user_id, 'radius': self.radius}
        )

    def is_store_nearby(self, session: UserSession, store_id: int) -> bool:
        """Whether the store exists and lies within the radius of the user."""
        return self.db.execute_count(
            NEARBY_STORES_SQL + " AND s.storeid = :store_id",
            {'user_id': session.user_id, 'radius': self.radius, 'store_id': store_id}
        ) > 0

    def get_store(self, store_id: int) -> List[str]:
        """Get a store record (storeid, name, managerid).

        Raises:
            NotFoundError: If the store does not exist
        """
        rows = self.db.execute_and_return(
            "SELECT storeid, name, managerid FROM store WHERE storeid = :store_id",
            {'store_id': store_id}
        )
        if not rows:
            raise NotFoundError(f"Store {store_id} does not exist")
        return rows[0]

    def require_managed_store(self, session: UserSession, store_id: int) -> List[str]:
        """Get a store the logged-in manager manages.

        Raises:
            NotFoundError: If the store does not exist
            AuthorizationError: If the user is not the store's manager
        """
        store = self.get_store(store_id)
        if store[2] is None or int(store[2]) != session.user_id:
            raise AuthorizationError(f"You do not manage store {store_id}")
        return store

    def get_product_names(self, store_id: int) -> List[str]:
        """Names of the products stocked by a store, alphabetically."""
        rows = self.db.execute_and_return(
            "SELECT productname FROM product WHERE storeid = :store_id ORDER BY productname",
            {'store_id': store_id}
        )
        return [row[0] for row in rows]
