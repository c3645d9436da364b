import logging
from pathlib import Path

import click

from warehouse.infrastructure.bootstrap import DATA_DIR
from warehouse.infrastructure.cli.inventory_commands import (
    inventory_demo,
    inventory_increase,
    inventory_remove,
    inventory_seed,
    inventory_show,
)


@click.group()
@click.option(
    "--data-dir",
    type=click.Path(file_okay=False, path_type=Path),
    envvar="WAREHOUSE_DATA_DIR",
    default=DATA_DIR,
    show_default=True,
    help="Directory holding the inventory JSON files.",
)
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging.")
@click.pass_context
def cli(ctx: click.Context, data_dir: Path, verbose: bool) -> None:
    """Warehouse — typed inventory repositories"""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    ctx.obj = data_dir


# Register subcommands
cli.add_command(inventory_demo)
cli.add_command(inventory_increase)
cli.add_command(inventory_remove)
cli.add_command(inventory_seed)
cli.add_command(inventory_show)
