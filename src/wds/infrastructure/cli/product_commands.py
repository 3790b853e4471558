"""CLI commands for the Product aggregate."""

from __future__ import annotations

import click

from wds.application.list_products import ListProductsHandler
from wds.application.update_product import UpdateProductHandler
from wds.domain.exceptions import DomainException
from wds.infrastructure.bootstrap import product_repository


@click.command("list")
def product_list() -> None:
    """List all products in the catalog."""
    products = ListProductsHandler(product_repo=product_repository()).handle()

    if not products:
        click.echo("No products found.")
        return

    click.echo(f"{'ID':<6} {'Name':<20} {'Unit':<10} {'Price':>12}")
    click.echo("-" * 51)
    for p in products:
        click.echo(f"{p.id:<6} {p.name:<20} {p.unit or '-':<10} {str(p.price):>12}")


@click.command("update")
@click.option("--id", "product_id", required=True, help="Product ID.")
@click.option("--price", required=True, help="New price in rupiah (e.g. 27000).")
def product_update(product_id: str, price: str) -> None:
    """Update a product's price."""
    handler = UpdateProductHandler(product_repo=product_repository())

    try:
        product = handler.handle(product_id=product_id, new_price=price)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product #{product.id} price updated to {product.price}")
