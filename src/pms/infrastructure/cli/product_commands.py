"""CLI commands for the Product aggregate."""

from __future__ import annotations

import click

from pms.application.dto import ProductSpec
from pms.application.product_manager import ProductManager
from pms.domain.exceptions import DomainException
from pms.domain.model.product import Product


def _manager(ctx: click.Context) -> ProductManager:
    return ctx.obj["manager_factory"]()


def _display_product(product: Product) -> None:
    click.echo(f"Product #{product.id}")
    click.echo(f"  Name:        {product.name}")
    click.echo(f"  Price:       {product.price}")
    click.echo(f"  Quantity:    {product.quantity}")
    click.echo(f"  Description: {product.description}")


@click.command("add")
@click.option("--name", required=True, help="Product name.")
@click.option("--price", default=None, help="Price (e.g. 15.00). Defaults to 0.")
@click.option("--quantity", default=None, help="Units in stock. Defaults to 0.")
@click.option("--description", default=None, help="Free-text description.")
@click.pass_context
def product_add(
    ctx: click.Context,
    name: str,
    price: str | None,
    quantity: str | None,
    description: str | None,
) -> None:
    """Add a new product to the catalog."""
    spec = ProductSpec(name=name, price=price, quantity=quantity, description=description)

    try:
        product = _manager(ctx).add_product(spec)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product #{product.id} '{product.name}' added at {product.price}")


@click.command("list")
@click.pass_context
def product_list(ctx: click.Context) -> None:
    """List all products in the catalog."""
    products = _manager(ctx).get_all_products()

    if not products:
        click.echo("No products found.")
        return

    click.echo(f"{'ID':<6} {'Name':<20} {'Price':>10} {'Qty':>6}  Description")
    click.echo("-" * 60)
    for p in products:
        click.echo(
            f"{p.id:<6} {p.name:<20} {str(p.price):>10} {p.quantity.value:>6}  {p.description}"
        )


@click.command("show")
@click.option("--id", "product_id", required=True, type=int, help="Product ID.")
@click.pass_context
def product_show(ctx: click.Context, product_id: int) -> None:
    """Show details of a single product."""
    try:
        product = _manager(ctx).get_product_by_id(product_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    _display_product(product)


@click.command("update")
@click.option("--id", "product_id", required=True, type=int, help="Product ID.")
@click.option("--name", default=None, help="New name.")
@click.option("--price", default=None, help="New price (e.g. 29.99).")
@click.option("--quantity", default=None, help="New stock level.")
@click.option("--description", default=None, help="New description.")
@click.pass_context
def product_update(
    ctx: click.Context,
    product_id: int,
    name: str | None,
    price: str | None,
    quantity: str | None,
    description: str | None,
) -> None:
    """Update a product. Only the options given are changed."""
    spec = ProductSpec(name=name, price=price, quantity=quantity, description=description)
    if spec == ProductSpec():
        raise click.UsageError(
            "Nothing to update; pass at least one of --name, --price, "
            "--quantity or --description."
        )

    try:
        product = _manager(ctx).update_product(product_id, spec)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product #{product.id} updated")
    _display_product(product)


@click.command("delete")
@click.option("--id", "product_id", required=True, type=int, help="Product ID.")
@click.confirmation_option(prompt="Delete this product?")
@click.pass_context
def product_delete(ctx: click.Context, product_id: int) -> None:
    """Remove a product from the catalog."""
    try:
        message = _manager(ctx).delete_product(product_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(message)
