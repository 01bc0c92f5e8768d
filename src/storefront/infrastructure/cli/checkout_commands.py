"""CLI commands for checkout."""

from __future__ import annotations

import json

import click

from storefront.application.checkout_helpers import (
    QuoteShippingHandler,
    ValidateAddressHandler,
)
from storefront.application.dto import CheckoutRequest
from storefront.domain.exceptions import DomainException
from storefront.infrastructure.bootstrap import checkout_handler


@click.command("process")
@click.option(
    "--snapshot",
    required=True,
    type=click.File("r", encoding="utf-8"),
    help="JSON cart snapshot ('-' reads stdin).",
)
def checkout_process(snapshot) -> None:
    """Place an order from a cart snapshot.

    The snapshot holds cart_items (product_id, quantity, price), total,
    shipping_address, billing_address, payment_method and user_id.
    camelCase spellings (cartItems, productId, ...) are accepted too.
    """
    try:
        payload = json.load(snapshot)
    except json.JSONDecodeError as exc:
        raise click.BadParameter(f"Snapshot is not valid JSON: {exc}")

    handler = checkout_handler()

    try:
        receipt = handler.handle(CheckoutRequest.from_payload(payload))
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Order #{receipt.id} recorded  (status={receipt.status})")
    click.echo(f"Payment:  {receipt.payment_status}  {receipt.payment_id or ''}".rstrip())
    click.echo(f"Items:    {receipt.item_count}")
    click.echo(f"Total:    {receipt.total}")


@click.command("shipping-quote")
@click.option("--items", "item_count", required=True, type=int, help="Number of items.")
def checkout_shipping_quote(item_count: int) -> None:
    """Quote the shipping cost for a number of items."""
    try:
        quote = QuoteShippingHandler().handle(item_count)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Base:       {quote.base_cost:>10}")
    click.echo(f"Additional: {quote.additional_cost:>10}")
    click.echo(f"Total:      {quote.total:>10}")


@click.command("validate-address")
@click.option("--street", default="")
@click.option("--city", default="")
@click.option("--state", default="")
@click.option("--zip-code", "zip_code", default="")
@click.option("--country", default="")
def checkout_validate_address(
    street: str, city: str, state: str, zip_code: str, country: str
) -> None:
    """Check that an address has every required field."""
    address = {
        "street": street,
        "city": city,
        "state": state,
        "zip_code": zip_code,
        "country": country,
    }

    try:
        ValidateAddressHandler().handle(address)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo("Address is valid")
