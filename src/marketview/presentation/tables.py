"""Rich rendering for asset lists and detail views"""

from collections.abc import Sequence

from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from marketview.domain.models import Asset, ViewParameters

from .formatting import (
    format_category,
    format_change,
    format_price,
    format_price_change,
    is_positive,
)


def _colour(change_percent: float) -> str:
    return "green" if is_positive(change_percent) else "red"


def _change_markup(change_percent: float) -> str:
    colour = _colour(change_percent)
    return f"[{colour}]{format_change(change_percent)}[/{colour}]"


def asset_table(
    assets: Sequence[Asset],
    title: str = "Assets",
    params: ViewParameters | None = None,
) -> Table:
    """Build a table with one row per asset, in the given order"""
    if params is not None:
        title = (
            f"{title} | filter={params.filter_mode.value} "
            f"sort={params.sort_field.value} {params.sort_direction.value}"
        )
        if params.query:
            title += f" search={params.query!r}"

    table = Table(title=title)
    table.add_column("ID", justify="right", width=4)
    table.add_column("Symbol", style="cyan", width=8)
    table.add_column("Name")
    table.add_column("Category", width=14)
    table.add_column("Price", justify="right")
    table.add_column("Change", justify="right", width=9)

    for asset in assets:
        table.add_row(
            str(asset.id),
            asset.symbol,
            asset.name,
            format_category(asset.category),
            format_price(asset.price),
            _change_markup(asset.change_percent),
        )
    return table


def display_assets(
    assets: Sequence[Asset],
    console: Console,
    title: str = "Assets",
    params: ViewParameters | None = None,
) -> None:
    """Display assets in a formatted table."""
    if not assets:
        console.print("[yellow]No assets match the current view[/yellow]")
        return
    console.print(asset_table(assets, title=title, params=params))


def display_detail(asset: Asset, similar: Sequence[Asset], console: Console) -> None:
    """Display an asset panel followed by its similar assets."""
    colour = _colour(asset.change_percent)
    body = (
        f"[bold]{asset.name}[/bold]  [cyan]{asset.symbol}[/cyan]\n"
        f"Category: {format_category(asset.category)}\n"
        f"Price: {format_price(asset.price)}\n"
        f"Change: {_change_markup(asset.change_percent)}\n"
        f"Price Change: [{colour}]{format_price_change(asset)}[/{colour}]"
    )
    console.print(Panel(body, title=f"Asset {asset.id}", border_style="cyan"))

    if not similar:
        console.print("[yellow]No similar assets[/yellow]")
        return
    console.print(asset_table(similar, title="Similar Assets"))
