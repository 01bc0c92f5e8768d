"""CLI commands for browsing the external product catalog."""

from __future__ import annotations

import click

from storefront.application.browse_products import BrowseProductsHandler, ProductFilter
from storefront.application.dto import ProductPageDTO
from storefront.application.list_categories import ListCategoriesHandler
from storefront.application.search_products import (
    CategoryProductsHandler,
    SearchProductsHandler,
)
from storefront.application.show_product import ShowProductHandler
from storefront.domain.exceptions import DomainException
from storefront.infrastructure.bootstrap import catalog_gateway


def _display_page(page: ProductPageDTO) -> None:
    if not page.products:
        click.echo("No products found.")
        return

    click.echo(f"{'ID':<6} {'Name':<32} {'Brand':<16} {'Gender':<8} {'Price':>10} {'Stock':>6}")
    click.echo("-" * 83)
    for p in page.products:
        click.echo(
            f"{p.id:<6} {p.name[:32]:<32} {p.brand[:16]:<16} {p.gender:<8} "
            f"{str(p.price):>10} {p.stock:>6}"
        )
    pg = page.pagination
    click.echo(f"Page {pg.current_page}/{max(pg.total_pages, 1)}  ({pg.total_items} products)")


@click.command("list")
@click.option("--page", default=1, type=int, show_default=True)
@click.option("--limit", default=10, type=int, show_default=True)
@click.option("--category", default=None, help="Exact category slug.")
@click.option("--brand", default=None, help="Brand name (case-insensitive).")
@click.option("--gender", default=None, type=click.Choice(["men", "women", "unisex"]))
@click.option("--min-price", default=None, help="Lowest price, inclusive.")
@click.option("--max-price", default=None, help="Highest price, inclusive.")
def product_list(
    page: int,
    limit: int,
    category: str | None,
    brand: str | None,
    gender: str | None,
    min_price: str | None,
    max_price: str | None,
) -> None:
    """List catalog products with optional filters."""
    handler = BrowseProductsHandler(catalog_gateway())
    filters = ProductFilter(
        category=category,
        brand=brand,
        gender=gender,
        min_price=min_price,
        max_price=max_price,
    )

    try:
        result = handler.handle(filters, page=page, limit=limit)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    _display_page(result)


@click.command("show")
@click.option("--id", "product_id", required=True, help="Catalog product ID.")
def product_show(product_id: str) -> None:
    """Show one product."""
    handler = ShowProductHandler(catalog_gateway())

    try:
        p = handler.handle(product_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product #{p.id}  {p.name}")
    click.echo(f"Brand:    {p.brand}")
    click.echo(f"Category: {p.category}  ({p.gender})")
    click.echo(f"Price:    {p.price}")
    click.echo(f"Stock:    {p.stock}  ({'in stock' if p.in_stock else 'out of stock'})")
    click.echo(f"Sizes:    {', '.join(p.sizes)}")
    click.echo(f"Colors:   {', '.join(p.colors)}")


@click.command("search")
@click.argument("query")
@click.option("--page", default=1, type=int, show_default=True)
@click.option("--limit", default=10, type=int, show_default=True)
def product_search(query: str, page: int, limit: int) -> None:
    """Search the catalog."""
    handler = SearchProductsHandler(catalog_gateway())

    try:
        result = handler.handle(query, page=page, limit=limit)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    _display_page(result)


@click.command("category")
@click.argument("category")
@click.option("--page", default=1, type=int, show_default=True)
@click.option("--limit", default=10, type=int, show_default=True)
def product_category(category: str, page: int, limit: int) -> None:
    """List the products of one category."""
    handler = CategoryProductsHandler(catalog_gateway())

    try:
        result = handler.handle(category, page=page, limit=limit)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    _display_page(result)


@click.command("categories")
def product_categories() -> None:
    """List every catalog category."""
    handler = ListCategoriesHandler(catalog_gateway())

    try:
        categories = handler.handle()
    except DomainException as exc:
        raise click.ClickException(str(exc))

    for slug in categories:
        click.echo(slug)
