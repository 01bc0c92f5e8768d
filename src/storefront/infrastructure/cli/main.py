import click

from storefront.infrastructure.bootstrap import init_logging
from storefront.infrastructure.cli.cart_commands import (
    cart_add,
    cart_clear,
    cart_remove,
    cart_show,
    cart_update,
)
from storefront.infrastructure.cli.checkout_commands import (
    checkout_process,
    checkout_shipping_quote,
    checkout_validate_address,
)
from storefront.infrastructure.cli.order_commands import order_list, order_show, order_status
from storefront.infrastructure.cli.product_commands import (
    product_categories,
    product_category,
    product_list,
    product_search,
    product_show,
)
from storefront.infrastructure.cli.user_commands import user_register


@click.group()
def cli() -> None:
    """Storefront catalog, carts and checkout."""
    init_logging()


@cli.group()
def product() -> None:
    """Browse the product catalog."""


@cli.group()
def cart() -> None:
    """Manage shopping carts."""


@cli.group()
def checkout() -> None:
    """Place orders."""


@cli.group()
def order() -> None:
    """Inspect and update orders."""


@cli.group()
def user() -> None:
    """Manage users."""


# Register subcommands
product.add_command(product_list)
product.add_command(product_show)
product.add_command(product_search)
product.add_command(product_category)
product.add_command(product_categories)
cart.add_command(cart_show)
cart.add_command(cart_add)
cart.add_command(cart_update)
cart.add_command(cart_remove)
cart.add_command(cart_clear)
checkout.add_command(checkout_process)
checkout.add_command(checkout_shipping_quote)
checkout.add_command(checkout_validate_address)
order.add_command(order_show)
order.add_command(order_list)
order.add_command(order_status)
user.add_command(user_register)
