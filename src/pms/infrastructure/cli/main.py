import logging
from functools import partial
from pathlib import Path

import click

from pms.infrastructure import bootstrap
from pms.infrastructure.cli.product_commands import (
    product_add,
    product_delete,
    product_list,
    product_show,
    product_update,
)


@click.group()
@click.option(
    "--data-dir",
    type=click.Path(file_okay=False, path_type=Path),
    envvar=bootstrap.DATA_DIR_ENV,
    default=None,
    help="Directory holding products.json.",
)
@click.option("-v", "--verbose", is_flag=True, default=False, help="Enable debug logging.")
@click.pass_context
def cli(ctx: click.Context, data_dir: Path | None, verbose: bool) -> None:
    """PMS: Product Management Service"""
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")
    # basicConfig is a no-op once the root logger has handlers
    logging.getLogger("pms").setLevel(level)
    ctx.ensure_object(dict)
    # Commands build their ProductManager through this entry; callers embedding
    # the CLI can supply their own factory in ctx.obj
    ctx.obj.setdefault("manager_factory", partial(bootstrap.product_manager, data_dir))


@cli.group()
def product() -> None:
    """Manage products."""


# Register subcommands
product.add_command(product_add)
product.add_command(product_delete)
product.add_command(product_list)
product.add_command(product_show)
product.add_command(product_update)
