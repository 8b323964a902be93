"""
Interactive menu for the Online Retail Store client.

This module reads menu choices and form fields from the terminal, calls the
services and prints their results. Every menu action runs through
:meth:`RetailCLI.run_action`, which reports failures and returns to the menu.
"""
from typing import Callable, Optional

from retail_store.config import config
from retail_store.db.connection import DatabaseConnection
from retail_store.exceptions import AuthorizationError, RetailError, ValidationError
from retail_store.logging_setup import get_logger
from retail_store.models import UserType
from retail_store.services import (
    UserService,
    StoreService,
    ProductService,
    OrderService,
    ReportingService,
    SupplyService
)
from retail_store.session import UserSession
from retail_store.utils.validation import (
    parse_int,
    parse_positive_int,
    parse_non_negative_int,
    parse_coordinate
)

log = get_logger('cli')

LOG_OUT = 20
EXIT = 9

def greeting():
    print(
        "\n\n*******************************************************\n"
        "              User Interface                           \n"
        "*******************************************************\n"
    )

def print_welcome_menu():
    print("-------------------------")
    print("-- Online Retail Store --")
    print("-------------------------")
    print("1. Create user")
    print("2. Log in")
    print(f"{EXIT}. < EXIT")

def print_main_menu(rules):
    radius = rules["nearby_radius"]
    recent = rules["recent_limit"]
    top = rules["top_limit"]
    print("MAIN MENU")
    print("---------")
    print(f"1. View Stores within {radius:g} miles")
    print("2. View Product List")
    print("3. Place a Order")
    print(f"4. View {recent} recent orders")

    # Manager and admin functions
    print("5. Update Product")
    print(f"6. View {recent} recent Product Updates Info")
    print(f"7. View {top} Popular Items")
    print(f"8. View {top} Popular Customers")
    print("9. Place Product Supply Request to Warehouse")

    print(".........................")
    print(f"{LOG_OUT}. Log out")

class RetailCLI:
    """Menu dispatcher and form prompts."""

    def __init__(self, db: DatabaseConnection, input_func: Callable[[str], str] = input,
                 rules: Optional[dict] = None):
        """Initialize the CLI.

        Args:
            db: Open database connection
            input_func: Prompt reader, ``input`` by default
            rules: Business rules, defaults to configuration
        """
        self.db = db
        self._input = input_func
        self.rules = rules or config.business_rules

        self.users = UserService(db, self.rules)
        self.stores = StoreService(db, self.rules)
        self.products = ProductService(db, self.rules)
        self.orders = OrderService(db, self.rules)
        self.reports = ReportingService(db, self.rules)
        self.supply = SupplyService(db, self.rules)

    # ------------------------------------------------------------------
    # Prompt helpers
    # ------------------------------------------------------------------
    def read_line(self, prompt: str) -> str:
        return self._input(prompt)

    def read_choice(self) -> int:
        """Read a menu choice, asking again until an integer is given."""
        while True:
            try:
                return parse_int(self.read_line("Please make your choice: "), 'choice')
            except ValidationError:
                print("Your input is invalid!")

    def read_int(self, prompt: str, error_message: str, parser: Callable = parse_int) -> int:
        """Read an integer field, asking again until the parser accepts it."""
        while True:
            try:
                return parser(self.read_line(prompt), 'number')
            except ValidationError as e:
                print(error_message)
                log.debug(str(e))

    def read_coordinate(self, prompt: str, field: str) -> float:
        """Read a latitude or longitude, asking again until one is given."""
        while True:
            try:
                return parse_coordinate(self.read_line(prompt), field)
            except ValidationError as e:
                print(str(e))

    def read_product_choice(self, store_id: int) -> Optional[str]:
        """List the store's products as a numbered menu and read one."""
        names = self.stores.get_product_names(store_id)
        if not names:
            print(f"Store {store_id} has no products.\n")
            return None

        for number, name in enumerate(names, start=1):
            print(f"\t{number}. {name}")
        choice = self.read_int("Enter the number of the product you want to update: ",
                               "Not a valid product number")
        if choice < 1 or choice > len(names):
            print("No such product.\n")
            return None
        return names[choice - 1]

    def run_action(self, action: Callable, *args):
        """Run one menu action, reporting failures instead of propagating them."""
        try:
            return action(*args)
        except AuthorizationError as e:
            print(f"{e.message}\n")
            log.info(f"Access denied in {action.__name__}: {e.message}")
        except RetailError as e:
            log.error(str(e))
        except EOFError:
            raise
        except Exception as e:
            log.error(f"Error in {action.__name__}: {e}")
        return None

    # ------------------------------------------------------------------
    # Account handlers
    # ------------------------------------------------------------------
    def create_user(self) -> UserType:
        name = self.read_line("\tEnter name: ")
        password = self.read_line("\tEnter password: ")
        latitude = self.read_coordinate("\tEnter latitude: ", 'latitude')
        longitude = self.read_coordinate("\tEnter longitude: ", 'longitude')
        access_code = self.read_line(
            "\tAre you a Manager or Admin? If yes, please enter the access password or press N if not: "
        )

        user_type = self.users.create_user(name, password, latitude, longitude, access_code)
        if user_type is UserType.MANAGER:
            print("Welcome Manager!")
        elif user_type is UserType.ADMIN:
            print("Welcome Admin!")
        print("User successfully created!")
        return user_type

    def log_in(self) -> UserSession:
        name = self.read_line("\tEnter name: ")
        password = self.read_line("\tEnter password: ")
        session = self.users.log_in(name, password)
        print(f"Welcome, {session.name}!")
        return session

    # ------------------------------------------------------------------
    # Customer handlers
    # ------------------------------------------------------------------
    def view_stores(self, session: UserSession) -> int:
        count = self.stores.view_stores(session)
        if count == 0:
            print(f"No stores within {self.rules['nearby_radius']:g} miles.")
        return count

    def view_products(self, session: UserSession) -> int:
        store_id = self.read_int("Enter Store ID: ", "Not a valid Store ID")
        count = self.products.view_products(store_id)
        if count == 0:
            print(f"No products found for store {store_id}.")
        return count

    def place_order(self, session: UserSession) -> Optional[int]:
        if not self.stores.get_nearby_stores(session):
            print(f"There are no stores within {self.rules['nearby_radius']:g} miles of you.")
            return None

        while True:
            store_id = self.read_int("Enter Store ID: ", "Not a valid Store ID")
            if self.stores.is_store_nearby(session, store_id):
                break
            print(f"That store is too far or does not exist. "
                  f"Please select a store within {self.rules['nearby_radius']:g} miles.")

        product_name = self.read_line("Enter the name of the product: ").strip()
        units = self.read_int("Enter the amount of product you wish to order: ",
                              "Not a valid amount", parse_positive_int)

        order_number = self.orders.place_order(session, store_id, product_name, units)
        print(f"Order successfully placed! Order number: {order_number}")
        return order_number

    def view_recent_orders(self, session: UserSession) -> int:
        count = self.orders.view_recent_orders(session)
        if count == 0:
            print("You have not placed any orders yet.")
        return count

    # ------------------------------------------------------------------
    # Manager and admin handlers
    # ------------------------------------------------------------------
    def update_product(self, session: UserSession) -> Optional[str]:
        session.require(UserType.MANAGER)
        store_id = self.read_int("Enter Store ID: ", "Not a valid Store ID")
        self.stores.require_managed_store(session, store_id)

        product_name = self.read_product_choice(store_id)
        if product_name is None:
            return None

        units = self.read_int(f"Update the number of units of {product_name}: ",
                             "Not a valid amount", parse_non_negative_int)
        price = self.read_int(f"Update the price of {product_name}: ",
                             "Not a valid price", parse_non_negative_int)

        self.products.update_product(session, store_id, product_name, units, price)
        print(f"Successfully updated {product_name} at Store {store_id}\n")
        return product_name

    def view_recent_updates(self, session: UserSession) -> int:
        count = self.products.view_recent_updates(session)
        if count == 0:
            print("No product updates recorded.")
        return count

    def view_popular_products(self, session: UserSession) -> int:
        session.require(UserType.MANAGER)
        store_id = self.read_int("Enter Store ID: ", "Not a valid Store ID")
        count = self.reports.view_popular_products(session, store_id)
        print("\n")
        return count

    def view_popular_customers(self, session: UserSession) -> int:
        session.require(UserType.MANAGER)
        store_id = self.read_int("Enter Store ID: ", "Not a valid Store ID")
        count = self.reports.view_popular_customers(session, store_id)
        print("\n")
        return count

    def place_supply_request(self, session: UserSession) -> int:
        session.require(UserType.MANAGER)
        store_id = self.read_int("Enter Store ID: ", "Not a valid Store ID")
        self.stores.require_managed_store(session, store_id)

        product_name = self.read_line("Enter the name of the product: ").strip()
        units = self.read_int("Enter the number of units needed: ", "Not a valid amount",
                              parse_positive_int)
        warehouse_id = self.read_int("Enter Warehouse ID: ", "Not a valid Warehouse ID")

        request_number = self.supply.place_supply_request(
            session, store_id, product_name, units, warehouse_id
        )
        print(f"Supply request {request_number} placed for {units} units of {product_name}.\n")
        return request_number

    # ------------------------------------------------------------------
    # Menus
    # ------------------------------------------------------------------
    def user_menu(self, session: UserSession) -> None:
        """Main menu of a logged-in user; returns on log out."""
        while True:
            print_main_menu(self.rules)
            choice = self.read_choice()
            if choice == 1:
                self.run_action(self.view_stores, session)
            elif choice == 2:
                self.run_action(self.view_products, session)
            elif choice == 3:
                self.run_action(self.place_order, session)
            elif choice == 4:
                self.run_action(self.view_recent_orders, session)
            elif choice == 5:
                self.run_action(self.update_product, session)
            elif choice == 6:
                self.run_action(self.view_recent_updates, session)
            elif choice == 7:
                self.run_action(self.view_popular_products, session)
            elif choice == 8:
                self.run_action(self.view_popular_customers, session)
            elif choice == 9:
                self.run_action(self.place_supply_request, session)
            elif choice == LOG_OUT:
                log.info(f"User {session.user_id} logged out")
                return
            else:
                print("Unrecognized choice!")

    def run(self) -> None:
        """Welcome menu loop; returns when the user chooses to exit."""
        greeting()
        while True:
            print_welcome_menu()
            session = None
            choice = self.read_choice()
            if choice == 1:
                self.run_action(self.create_user)
            elif choice == 2:
                session = self.run_action(self.log_in)
            elif choice == EXIT:
                return
            else:
                print("Unrecognized choice!")

            if session is not None:
                self.user_menu(session)
