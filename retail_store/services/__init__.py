from .user_service import UserService
from .store_service import StoreService
from .product_service import ProductService
from .order_service import OrderService
from .reporting_service import ReportingService
from .supply_service import SupplyService

__all__ = [
    'UserService',
    'StoreService',
    'ProductService',
    'OrderService',
    'ReportingService',
    'SupplyService'
]
