# retail_store/services/user_service.py
from typing import Optional

from retail_store.config import config
from retail_store.db.connection import DatabaseConnection
from retail_store.exceptions import AuthenticationError, DatabaseError
from retail_store.logging_setup import get_logger
from retail_store.models import UserType
from retail_store.session import UserSession
from retail_store.utils.validation import require_text

log = get_logger('users')

class UserService:
    """Service for account creation and log in."""

    def __init__(self, db: DatabaseConnection, rules: Optional[dict] = None):
        """Initialize the user service.

        Args:
            db: Open database connection
            rules: Business rules, defaults to configuration
        """
        self.db = db
        self.rules = rules or config.business_rules

    def resolve_user_type(self, access_code: Optional[str]) -> UserType:
        """Map the access code typed at registration to a user type.

        Args:
            access_code: Code typed by the user, anything unknown means customer

        Returns:
            UserType for the new account
        """
        code = (access_code or '').strip()
        if code and code == self.rules['manager_access_code']:
            return UserType.MANAGER
        if code and code == self.rules['admin_access_code']:
            return UserType.ADMIN
        return UserType.CUSTOMER

    def create_user(self, name: str, password: str, latitude: float, longitude: float,
                    access_code: Optional[str] = None) -> UserType:
        """Create a new user.

        Args:
            name: User name
            password: Plaintext password
            latitude: Home latitude
            longitude: Home longitude
            access_code: Optional manager/admin access code

        Returns:
            Type of the created user
        """
        name = require_text(name, 'name')
        password = require_text(password, 'password')
        user_type = self.resolve_user_type(access_code)

        self.db.execute_update(
            "INSERT INTO users (name, password, latitude, longitude, type) "
            "VALUES (:name, :password, :latitude, :longitude, :type)",
            {
                'name': name,
                'password': password,
                'latitude': latitude,
                'longitude': longitude,
                'type': user_type.value
            }
        )
        log.info(f"Created {user_type} account '{name}'")
        return user_type

    def log_in(self, name: str, password: str) -> UserSession:
        """Check log in credentials for an existing user.

        Returns:
            UserSession for the authenticated user

        Raises:
            AuthenticationError: If no user matches the name and password
        """
        rows = self.db.execute_and_return(
            "SELECT userid, name, type FROM users WHERE name = :name AND password = :password",
            {'name': (name or '').strip(), 'password': (password or '').strip()}
        )
        if not rows:
            log.info(f"Failed log in for '{name}'")
            raise AuthenticationError()

        user_id, user_name, raw_type = rows[0]
        try:
            user_type = UserType.from_string(raw_type)
        except ValueError as e:
            raise DatabaseError(str(e))

        log.info(f"User {user_id} logged in as {user_type}")
        return UserSession(int(user_id), user_name, user_type)
