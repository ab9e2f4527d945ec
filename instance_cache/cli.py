"""CLI interface for instance-cache demos."""

import logging

import typer
from rich.console import Console
from rich.table import Table

from instance_cache.consts import (
    DEFAULT_COMPUTER_REQUESTS,
    DEFAULT_DATA_REQUESTS,
    DEFAULT_GEO_REQUESTS,
    LOG_FORMAT,
)
from instance_cache.errors import CacheError
from instance_cache.flyweight.computer_factory import ComputerCollection, ComputerFactory
from instance_cache.models.model_cache import CacheStats
from instance_cache.proxy.data_proxy import DataProxy
from instance_cache.proxy.geo_proxy import GeoProxy

app = typer.Typer(
    name="instance-cache",
    help="Shared-instance cache demos - flyweights and caching proxies",
)

console = Console()


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format=LOG_FORMAT,
    )


def _stats_table(stats: CacheStats) -> Table:
    """Build a one-row table summarizing cache statistics."""
    table = Table(title=f"Cache '{stats.name}'")
    table.add_column("Entries", justify="right", style="magenta")
    table.add_column("Hits", justify="right", style="green")
    table.add_column("Misses", justify="right", style="yellow")
    table.add_column("Failures", justify="right", style="red")
    table.add_column("Hit Rate", justify="right")
    table.add_row(
        str(stats.entries),
        str(stats.hits),
        str(stats.misses),
        str(stats.failures),
        f"{stats.hit_rate:.0%}",
    )
    return table


@app.command()
def flyweight(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
) -> None:
    """Build the sample computer inventory and show how many specs it shares."""
    _configure_logging(verbose)

    factory = ComputerFactory()
    computers = ComputerCollection(factory)

    try:
        for make, model, processor, memory, tag in DEFAULT_COMPUTER_REQUESTS:
            computers.add(make, model, processor, memory, tag)
    except CacheError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)

    table = Table(title="Computers")
    table.add_column("Tag", style="cyan")
    table.add_column("Make", style="bold")
    table.add_column("Model", style="blue")
    table.add_column("Processor", style="dim")
    table.add_column("Memory", justify="right")

    for computer in computers.computers():
        table.add_row(computer.tag, computer.make, computer.model, computer.processor, computer.memory)

    console.print(table)
    console.print(f"Computers: {computers.count()}")
    console.print(f"Flyweights: {factory.count()}")


@app.command()
def geo(
    addresses: list[str] = typer.Argument(None, help="Addresses to geocode (default: sample requests)"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
) -> None:
    """Geocode addresses through the caching proxy."""
    _configure_logging(verbose)

    proxy = GeoProxy()
    requests = addresses or DEFAULT_GEO_REQUESTS

    try:
        for address in requests:
            console.print(f"{address}: {proxy.get_lat_lng(address)}")
    except CacheError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)

    console.print(f"\nCache size: {proxy.count()}")
    console.print(f"Geocoder lookups: {proxy.geocoder.lookups}")
    if verbose:
        console.print(_stats_table(proxy.cache.get_stats()))


@app.command()
def data(
    keys: list[str] = typer.Argument(None, help="Keys to read (default: sample requests)"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
) -> None:
    """Read keys through the caching data proxy."""
    _configure_logging(verbose)

    proxy = DataProxy()
    requests = keys or DEFAULT_DATA_REQUESTS

    try:
        for key in requests:
            console.print(f"{key}: {proxy.get_data(key)}")
    except CacheError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)

    console.print(f"\nCache size: {proxy.count()}")
    console.print(f"Store reads: {proxy.store.reads}")
    if verbose:
        console.print(_stats_table(proxy.cache.get_stats()))


if __name__ == "__main__":
    app()
