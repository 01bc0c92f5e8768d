"""CLI commands for the Cart aggregate."""

from __future__ import annotations

import click

from storefront.application.add_to_cart import AddToCartHandler
from storefront.application.clear_cart import ClearCartHandler
from storefront.application.dto import CartView
from storefront.application.remove_cart_item import RemoveCartItemHandler
from storefront.application.show_cart import ShowCartHandler
from storefront.application.update_cart_item import UpdateCartItemHandler
from storefront.domain.exceptions import DomainException
from storefront.infrastructure.bootstrap import cart_enricher, cart_repository


def _display_cart(view: CartView) -> None:
    """Shared formatting for displaying a cart."""
    click.echo(f"Cart {view.id or '-'}  (user={view.user_id})")
    if not view.lines:
        click.echo("Cart is empty.")
        return

    click.echo()
    click.echo(f"  {'Item':<34} {'Product':<28} {'Qty':>5} {'Price':>10}")
    click.echo(f"  {'-'*80}")
    for line in view.lines:
        if line.product is None:
            name, price = f"#{line.product_id} (unavailable)", "-"
        else:
            name, price = line.product.name[:28], str(line.product.price)
        click.echo(f"  {line.item_id:<34} {name:<28} {line.quantity:>5} {price:>10}")
    click.echo(f"  {'-'*80}")


@click.command("show")
@click.option("--user", "user_id", required=True, help="User ID.")
def cart_show(user_id: str) -> None:
    """Show a user's cart with live product data."""
    handler = ShowCartHandler(cart_repository(), cart_enricher())

    try:
        view = handler.handle(user_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    _display_cart(view)


@click.command("add")
@click.option("--user", "user_id", required=True, help="User ID.")
@click.option("--product", "product_id", required=True, help="Catalog product ID.")
@click.option("--quantity", default=1, type=int, show_default=True)
def cart_add(user_id: str, product_id: str, quantity: int) -> None:
    """Add a product to a cart (merges with an existing line)."""
    handler = AddToCartHandler(cart_repository(), cart_enricher())

    try:
        view = handler.handle(user_id, product_id, quantity)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    _display_cart(view)


@click.command("update")
@click.option("--item", "item_id", required=True, help="Cart item ID.")
@click.option("--quantity", required=True, type=int)
def cart_update(item_id: str, quantity: int) -> None:
    """Set the quantity of a cart item."""
    handler = UpdateCartItemHandler(cart_repository(), cart_enricher())

    try:
        view = handler.handle(item_id, quantity)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    _display_cart(view)


@click.command("remove")
@click.option("--item", "item_id", required=True, help="Cart item ID.")
def cart_remove(item_id: str) -> None:
    """Remove an item from its cart."""
    handler = RemoveCartItemHandler(cart_repository(), cart_enricher())

    try:
        view = handler.handle(item_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    _display_cart(view)


@click.command("clear")
@click.option("--user", "user_id", required=True, help="User ID.")
def cart_clear(user_id: str) -> None:
    """Remove every item from a user's cart."""
    handler = ClearCartHandler(cart_repository())

    try:
        handler.handle(user_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo("Cart cleared.")
