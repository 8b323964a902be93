from dataclasses import dataclass

from retail_store.exceptions import AuthorizationError
from retail_store.models import UserType

@dataclass(frozen=True)
class UserSession:
    """The authenticated user, passed explicitly to every handler."""
    user_id: int
    name: str
    user_type: UserType

    @property
    def is_manager(self) -> bool:
        return self.user_type is UserType.MANAGER

    @property
    def is_admin(self) -> bool:
        return self.user_type is UserType.ADMIN

    def require(self, *allowed: UserType) -> None:
        """Raise AuthorizationError unless the user has one of the given roles."""
        if self.user_type not in allowed:
            raise AuthorizationError(
                details={'user_id': self.user_id, 'user_type': str(self.user_type)}
            )
