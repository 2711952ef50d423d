"""
Bookstore core command line.

Operator tools over the backend: the catalog snapshot, replenishment
recommendations, a customer's payment history and orders entered on a
customer's behalf.
"""

import argparse
import asyncio
import logging
import sys

import config
from enums.message_entity import MessageEntity
from enums.payment_method import PaymentMethod
from exceptions.order import ManualOrderException
from models.order import CustomerDetailsDTO
from services.cart import CartLedger
from services.catalog import CatalogService
from services.order import OrderService
from services.payment import PaymentService
from services.pricing import PricingService
from services.replenishment import ReplenishmentService
from utils.config_validator import validate_or_exit
from utils.error_handler import handle_service_error
from utils.localizator import Localizator
from utils.logging_config import setup_logging

logger = logging.getLogger(__name__)


async def show_catalog(search: str) -> int:
    catalog = CatalogService(entity=MessageEntity.ADMIN)
    if not await catalog.refresh():
        print(catalog.last_error, file=sys.stderr)
        return 1

    for item in catalog.search(search):
        print(f"{item.id:>8}  {item.title} ({item.author})  "
              f"{PricingService.format_currency(item.price)}  stock {item.stock}")
    return 0


async def show_low_stock() -> int:
    catalog = CatalogService(entity=MessageEntity.ADMIN)
    if not await catalog.refresh():
        print(catalog.last_error, file=sys.stderr)
        return 1

    entries = ReplenishmentService().find_low_stock(catalog.items)
    if not entries:
        print(Localizator.get_text(MessageEntity.ADMIN, "no_low_stock"))
        return 0

    template = Localizator.get_text(MessageEntity.ADMIN, "low_stock_entry")
    for entry in entries:
        print(template.format(**entry.model_dump()))
    return 0


async def show_payments(customer_id: int) -> int:
    payments, error = await PaymentService.list_for_customer(customer_id)
    if error:
        print(error, file=sys.stderr)
        return 1

    if not payments:
        print(Localizator.get_text(MessageEntity.USER, "no_payments"))
        return 0

    for payment in payments:
        amount = PricingService.format_currency(payment.amount) if payment.amount is not None else "-"
        print(f"{payment.id:>8}  {payment.transaction_code or '-'}  {amount}  {payment.status}")
    return 0


def parse_item(value: str) -> tuple[str, int]:
    """`ID` or `ID:QTY` from the command line."""
    item_id, _, quantity = value.partition(":")
    if not item_id or (quantity and not quantity.isdigit()):
        raise argparse.ArgumentTypeError(f"expected ID or ID:QTY, got '{value}'")
    return item_id, int(quantity) if quantity else 1


async def create_order(
    customer_id: int,
    requested: list[tuple[str, int]],
    customer: CustomerDetailsDTO,
    payment_method: PaymentMethod | None,
    notes: str
) -> int:
    catalog = CatalogService(entity=MessageEntity.ADMIN)
    if not await catalog.refresh():
        print(catalog.last_error, file=sys.stderr)
        return 1

    cart = CartLedger()
    for item_id, quantity in requested:
        book = catalog.get(item_id)
        if book is None:
            print(Localizator.get_text(MessageEntity.ADMIN, "error_unknown_book").format(item_id=item_id),
                  file=sys.stderr)
            return 1
        # Same stock ceiling as the storefront: extra copies beyond stock are dropped
        for _ in range(quantity):
            cart.add(book, catalog.stock_of(item_id))

    try:
        order = await OrderService.create_manual_order(cart, customer_id, customer, payment_method, notes)
    except ManualOrderException as e:
        print(handle_service_error(e, MessageEntity.ADMIN), file=sys.stderr)
        return 1

    print(OrderService.confirmation_message(order))
    return 0


def main() -> None:
    parser = argparse.ArgumentParser(
        description="Bookstore order and fulfillment core",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python run.py catalog --search orwell
  python run.py low-stock
  python run.py payments --customer 42
  python run.py order --customer 42 --item 1:2 --item 7 --first-name Thandi \\
      --last-name Mokoena --email thandi@example.com --address "12 Long Street" \\
      --payment-method card
        """
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    catalog_parser = subparsers.add_parser("catalog", help="List the current catalog")
    catalog_parser.add_argument("--search", type=str, default="", help="Filter by title or author")

    subparsers.add_parser("low-stock", help="Show books that need reordering")

    payments_parser = subparsers.add_parser("payments", help="Show a customer's payment history")
    payments_parser.add_argument("--customer", type=int, required=True, help="Customer id")

    order_parser = subparsers.add_parser("order", help="Create an order on a customer's behalf")
    order_parser.add_argument("--customer", type=int, required=True, help="Customer id")
    order_parser.add_argument("--item", type=parse_item, action="append", default=[], metavar="ID[:QTY]",
                              help="Book to order (repeatable)")
    order_parser.add_argument("--first-name", default="")
    order_parser.add_argument("--last-name", default="")
    order_parser.add_argument("--email", default="")
    order_parser.add_argument("--phone", default="")
    order_parser.add_argument("--address", default="", help="Shipping address")
    order_parser.add_argument("--payment-method", type=PaymentMethod.from_string, default=None,
                              help=", ".join(method.value for method in PaymentMethod))
    order_parser.add_argument("--notes", default="", help="Special instructions")

    args = parser.parse_args()

    setup_logging()
    validate_or_exit(config)
    logger.info(f"[CLI] Running '{args.command}' against {config.API_BASE_URL}")

    if args.command == "catalog":
        exit_code = asyncio.run(show_catalog(args.search))
    elif args.command == "low-stock":
        exit_code = asyncio.run(show_low_stock())
    elif args.command == "payments":
        exit_code = asyncio.run(show_payments(args.customer))
    else:
        customer = CustomerDetailsDTO(
            first_name=args.first_name,
            last_name=args.last_name,
            email=args.email,
            phone=args.phone,
            address=args.address
        )
        exit_code = asyncio.run(create_order(args.customer, args.item, customer, args.payment_method, args.notes))

    sys.exit(exit_code)


if __name__ == "__main__":
    main()
