import click

from wds.infrastructure.cli.account_commands import (
    account_reset_password,
    notification_list,
    notification_read_all,
    payment_create_transaction,
    profile_set,
    profile_show,
)
from wds.infrastructure.cli.address_commands import (
    address_add,
    address_delete,
    address_list,
    address_update,
)
from wds.infrastructure.cli.fleet_commands import (
    driver_arrive,
    driver_claim,
    driver_current,
    driver_jobs,
    supplier_prepare,
    supplier_queue,
    supplier_ready,
)
from wds.infrastructure.cli.order_commands import (
    order_confirm_delivery,
    order_history,
    order_place,
    order_show,
)
from wds.infrastructure.cli.product_commands import product_list, product_update
from wds.infrastructure.config import get_settings
from wds.infrastructure.logging_setup import configure_logging


@click.group()
def cli() -> None:
    """WDS: Water Delivery System"""
    configure_logging(get_settings().log_level)


@cli.group()
def order() -> None:
    """Place and track orders."""


@cli.group()
def product() -> None:
    """Manage products."""


@cli.group()
def supplier() -> None:
    """Supplier dashboard."""


@cli.group()
def driver() -> None:
    """Driver app."""


@cli.group()
def profile() -> None:
    """Manage user profiles."""


@cli.group()
def address() -> None:
    """Saved delivery addresses."""


@cli.group()
def notification() -> None:
    """Notification inbox."""


@cli.group()
def payment() -> None:
    """Payment gateway proxy."""


@cli.group()
def account() -> None:
    """Account recovery."""


# Register subcommands
address.add_command(address_add)
address.add_command(address_delete)
address.add_command(address_list)
address.add_command(address_update)
order.add_command(order_confirm_delivery)
order.add_command(order_history)
order.add_command(order_place)
order.add_command(order_show)
product.add_command(product_list)
product.add_command(product_update)
supplier.add_command(supplier_prepare)
supplier.add_command(supplier_queue)
supplier.add_command(supplier_ready)
driver.add_command(driver_arrive)
driver.add_command(driver_claim)
driver.add_command(driver_current)
driver.add_command(driver_jobs)
profile.add_command(profile_set)
profile.add_command(profile_show)
notification.add_command(notification_list)
notification.add_command(notification_read_all)
payment.add_command(payment_create_transaction)
account.add_command(account_reset_password)
