# retail_store/models.py
"""Declarative description of the retail database schema.

The production schema lives in PostgreSQL and is owned by the database, not
by this client. These models mirror it so that a local SQLite database (and
the test-suite) can be created with ``Base.metadata.create_all``. Column and
table names are lowercase to match PostgreSQL's folding of unquoted
identifiers used throughout the client's SQL.
"""
from sqlalchemy import Column, Integer, String, Numeric, Date, DateTime, ForeignKey, Index
from sqlalchemy.orm import declarative_base, relationship
import enum

Base = declarative_base()

class UserType(enum.Enum):
    """Values stored in ``users.type``.

    The column is fixed-width in PostgreSQL, so stored values may come back
    blank-padded and in any case; use :meth:`from_string` to compare.
    """
    CUSTOMER = 'customer'
    MANAGER = 'manager'
    ADMIN = 'admin'

    def __str__(self):
        """Return the string value of the enum."""
        return self.value

    @classmethod
    def from_string(cls, value: str) -> 'UserType':
        """Create a UserType from a stored column value.

        Args:
            value: Raw ``users.type`` value, e.g. ``'Manager '``

        Returns:
            UserType enum value

        Raises:
            ValueError if the value is not a known user type
        """
        normalized = ''.join((value or '').split()).lower()
        try:
            return cls(normalized)
        except ValueError:
            raise ValueError(f"Invalid user type: {value!r}. Valid values are: customer, manager, admin")

class User(Base):
    __tablename__ = 'users'

    userid = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(50), nullable=False)
    password = Column(String(11), nullable=False)
    latitude = Column(Numeric(8, 6), nullable=False)
    longitude = Column(Numeric(9, 6), nullable=False)
    type = Column(String(8), nullable=False)

    managed_stores = relationship("Store", back_populates="manager")
    orders = relationship("Order", back_populates="customer")

class Store(Base):
    __tablename__ = 'store'

    storeid = Column(Integer, primary_key=True, autoincrement=False)
    name = Column(String(30), nullable=False)
    latitude = Column(Numeric(8, 6), nullable=False)
    longitude = Column(Numeric(9, 6), nullable=False)
    managerid = Column(Integer, ForeignKey('users.userid'), nullable=False)
    dateestablished = Column(Date)

    manager = relationship("User", back_populates="managed_stores")
    products = relationship("Product", back_populates="store")

class Product(Base):
    __tablename__ = 'product'

    storeid = Column(Integer, ForeignKey('store.storeid'), primary_key=True)
    productname = Column(String(30), primary_key=True)
    numberofunits = Column(Integer, nullable=False)
    priceperunit = Column(Integer, nullable=False)

    store = relationship("Store", back_populates="products")

class Warehouse(Base):
    __tablename__ = 'warehouse'

    warehouseid = Column(Integer, primary_key=True, autoincrement=False)
    area = Column(Numeric(10, 2))
    latitude = Column(Numeric(8, 6), nullable=False)
    longitude = Column(Numeric(9, 6), nullable=False)

class Order(Base):
    __tablename__ = 'orders'

    ordernumber = Column(Integer, primary_key=True, autoincrement=True)
    customerid = Column(Integer, ForeignKey('users.userid'), nullable=False)
    storeid = Column(Integer, ForeignKey('store.storeid'), nullable=False)
    productname = Column(String(30), nullable=False)
    unitsordered = Column(Integer, nullable=False)
    ordertime = Column(DateTime, nullable=False)

    customer = relationship("User", back_populates="orders")

    __table_args__ = (
        Index('idx_orders_customer_time', 'customerid', 'ordertime'),
        Index('idx_orders_store', 'storeid'),
    )

class ProductSupplyRequest(Base):
    __tablename__ = 'productsupplyrequests'

    requestnumber = Column(Integer, primary_key=True, autoincrement=True)
    managerid = Column(Integer, ForeignKey('users.userid'), nullable=False)
    warehouseid = Column(Integer, ForeignKey('warehouse.warehouseid'), nullable=False)
    storeid = Column(Integer, ForeignKey('store.storeid'), nullable=False)
    productname = Column(String(30), nullable=False)
    unitsrequested = Column(Integer, nullable=False)

class ProductUpdate(Base):
    __tablename__ = 'productupdates'

    updatenumber = Column(Integer, primary_key=True, autoincrement=True)
    managerid = Column(Integer, ForeignKey('users.userid'), nullable=False)
    storeid = Column(Integer, ForeignKey('store.storeid'), nullable=False)
    productname = Column(String(30), nullable=False)
    updatedon = Column(DateTime, nullable=False)
