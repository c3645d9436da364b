"""CLI commands for warehouse inventory."""

from __future__ import annotations

from pathlib import Path

import click

from warehouse.application.dto import OperationResult
from warehouse.application.warehouse_manager import WarehouseManager
from warehouse.domain.exceptions import DomainException
from warehouse.domain.model.item import ElectronicItem
from warehouse.domain.repository.inventory_repository import InventoryRepository
from warehouse.infrastructure.bootstrap import (
    load_warehouse,
    save_warehouse,
    warehouse_manager,
)

CATEGORIES = ("electronics", "groceries", "log")

TITLES = {"electronics": "Electronics", "groceries": "Groceries", "log": "Stock log"}


def _repository(manager: WarehouseManager, category: str) -> InventoryRepository:
    if category == "electronics":
        return manager.electronics
    if category == "groceries":
        return manager.groceries
    return manager.stock_log


def _echo_result(result: OperationResult) -> None:
    if not result.ok:
        raise click.ClickException(result.message)
    click.echo(result.message)


@click.command("show")
@click.argument(
    "category", type=click.Choice(CATEGORIES + ("all",)), default="all"
)
@click.pass_obj
def inventory_show(data_dir: Path, category: str) -> None:
    """Show the items in one category, or in all of them."""
    try:
        manager = load_warehouse(data_dir)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    selected = CATEGORIES if category == "all" else (category,)
    for name in selected:
        click.echo(f"{TITLES[name]}:")
        lines = manager.print_all_items(_repository(manager, name))
        if not lines:
            click.echo("  No items found.")
        for line in lines:
            click.echo(line)


@click.command("increase")
@click.option("--category", required=True, type=click.Choice(CATEGORIES))
@click.option("--id", "item_id", required=True, type=int, help="Item ID.")
@click.option("--delta", required=True, type=int, help="Units to add.")
@click.pass_obj
def inventory_increase(data_dir: Path, category: str, item_id: int, delta: int) -> None:
    """Increase the stock of an item."""
    try:
        manager = load_warehouse(data_dir)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    result = manager.increase_stock(_repository(manager, category), item_id, delta)
    if result.ok:
        save_warehouse(manager, data_dir)
    _echo_result(result)


@click.command("remove")
@click.option("--category", required=True, type=click.Choice(CATEGORIES))
@click.option("--id", "item_id", required=True, type=int, help="Item ID.")
@click.pass_obj
def inventory_remove(data_dir: Path, category: str, item_id: int) -> None:
    """Remove an item from a category."""
    try:
        manager = load_warehouse(data_dir)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    result = manager.remove_item_by_id(_repository(manager, category), item_id)
    if result.ok:
        save_warehouse(manager, data_dir)
    _echo_result(result)


@click.command("seed")
@click.pass_obj
def inventory_seed(data_dir: Path) -> None:
    """Overwrite the data files with the sample catalogue."""
    manager = warehouse_manager()
    manager.seed_data()
    save_warehouse(manager, data_dir)
    click.echo(f"Sample data written to {data_dir}")


@click.command("demo")
def inventory_demo() -> None:
    """Walk through every error case on a fresh in-memory warehouse."""
    manager = warehouse_manager()
    manager.seed_data()

    click.echo("Groceries:")
    for line in manager.print_all_items(manager.groceries):
        click.echo(line)

    click.echo("\nElectronics:")
    for line in manager.print_all_items(manager.electronics):
        click.echo(line)

    click.echo("\nStock log:")
    for line in manager.print_all_items(manager.stock_log):
        click.echo(line)

    click.echo("\n-- Error handling --")
    steps = [
        manager.add_item(
            manager.electronics, ElectronicItem(1, "Tablet", 5, "Apple", 12)
        ),
        manager.remove_item_by_id(manager.groceries, 999),
        manager.update_quantity(manager.electronics, 2, -5),
        manager.increase_stock(manager.groceries, 2, 10),
    ]
    for result in steps:
        click.echo(result.message)
