class RetailError(Exception):
    """Base exception for Retail Store client errors.

    Subclasses only set ``default_message``, the text shown at the menu
    when the raiser does not give a more specific one.
    """

    default_message = "An error occurred in the Retail Store client"

    def __init__(self, message=None, code=None, details=None):
        """Initialize the exception.

        Args:
            message: Error message, defaults to the class's default message
            code: Error code
            details: Additional error details, such as requested and available units
        """
        self.message = message or self.default_message
        self.code = code
        self.details = details
        super().__init__(self.message)

    def __str__(self):
        if self.code:
            return f"[{self.code}] {self.message}"
        return self.message


class ConfigError(RetailError):
    """Exception raised for configuration errors."""
    default_message = "Configuration error"


class DatabaseError(RetailError):
    """Exception raised for database-related errors."""
    default_message = "Database error"


class ValidationError(RetailError):
    """Exception raised for invalid user input."""
    default_message = "Validation error"


class AuthenticationError(RetailError):
    """Exception raised when credentials do not match a user."""
    default_message = "Invalid user name or password"


class AuthorizationError(RetailError):
    """Exception raised when the logged-in user lacks the required role."""
    default_message = "You do not have access to this."


class NotFoundError(RetailError):
    """Exception raised when a requested resource is not found."""
    default_message = "Resource not found"


class OrderError(RetailError):
    """Exception raised when an order cannot be placed."""
    default_message = "Order could not be placed"
