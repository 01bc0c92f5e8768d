"""CLI commands for the Order aggregate."""

from __future__ import annotations

import click

from storefront.application.dto import OrderDTO
from storefront.application.list_user_orders import ListUserOrdersHandler
from storefront.application.show_order import ShowOrderHandler
from storefront.application.update_order_status import UpdateOrderStatusHandler
from storefront.domain.exceptions import DomainException
from storefront.infrastructure.bootstrap import order_repository, user_repository


def _display_order(dto: OrderDTO) -> None:
    """Shared formatting for displaying an order."""
    click.echo(f"Order #{dto.id}  (status={dto.status}, payment={dto.payment_status})")
    click.echo(f"User:     {dto.user_id}")
    click.echo(f"Created:  {dto.created_at}")
    if dto.payment_id:
        click.echo(f"Payment:  {dto.payment_id}")
    click.echo()

    click.echo(f"  {'Product':<20} {'Qty':>5} {'Price':>10} {'Total':>10}")
    click.echo(f"  {'-'*47}")
    for item in dto.items:
        click.echo(
            f"  {item.product_id:<20} {item.quantity:>5} {item.price:>10} {item.line_total:>10}"
        )
    click.echo(f"  {'-'*47}")
    click.echo(f"  {'Subtotal':<27} {dto.subtotal:>20}")
    click.echo(f"  {'Shipping':<27} {dto.shipping:>20}")
    click.echo(f"  {'Tax':<27} {dto.tax:>20}")
    click.echo(f"  {'Order Total':<27} {dto.total:>20}")


@click.command("show")
@click.option("--id", "order_id", required=True, type=int, help="Order ID to display.")
def order_show(order_id: int) -> None:
    """Show details of an existing order."""
    handler = ShowOrderHandler(order_repo=order_repository())

    try:
        dto = handler.handle(order_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    _display_order(dto)


@click.command("list")
@click.option("--user", "user_id", required=True, help="User ID.")
@click.option("--page", default=1, type=int, show_default=True)
@click.option("--limit", default=10, type=int, show_default=True)
def order_list(user_id: str, page: int, limit: int) -> None:
    """List a user's orders, newest first."""
    handler = ListUserOrdersHandler(
        order_repo=order_repository(),
        user_repo=user_repository(),
    )

    try:
        result = handler.handle(user_id, page=page, limit=limit)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if not result.orders:
        click.echo("No orders found.")
        return

    click.echo(f"{'ID':<6} {'Status':<10} {'Payment':<8} {'Items':>5} {'Total':>12}  Created")
    click.echo("-" * 66)
    for o in result.orders:
        click.echo(
            f"{o.id:<6} {o.status:<10} {o.payment_status:<8} {len(o.items):>5} "
            f"{o.total:>12}  {o.created_at}"
        )
    pg = result.pagination
    click.echo(f"Page {pg.current_page}/{max(pg.total_pages, 1)}  ({pg.total_items} orders)")


@click.command("status")
@click.option("--id", "order_id", required=True, type=int, help="Order ID to update.")
@click.option(
    "--status",
    required=True,
    help="pending, confirmed, shipped, delivered or cancelled.",
)
def order_status(order_id: int, status: str) -> None:
    """Change the status of an order."""
    handler = UpdateOrderStatusHandler(order_repo=order_repository())

    try:
        dto = handler.handle(order_id, status)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Order #{dto.id} is now {dto.status}.")
