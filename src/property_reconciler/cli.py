"""CLI interface for Property Reconciler."""

import asyncio
import json
from typing import Any

import typer
from rich.console import Console
from rich.panel import Panel
from rich.progress import Progress, SpinnerColumn, TextColumn
from rich.table import Table

app = typer.Typer(
    name="property-reconciler",
    help="Cross-source property record reconciliation across DORIS, DLR, CERSAI and MCA21",
    add_completion=False,
)
console = Console()


def get_config():
    """Load configuration from environment (and .env)."""
    from dotenv import load_dotenv

    from .config import load_settings
    from .logging import configure_logging

    load_dotenv()
    settings = load_settings()
    configure_logging(settings.log_level)
    return settings


def build_orchestrator(no_latency: bool):
    from .latency import NoLatency
    from .orchestrator import create_orchestrator

    settings = get_config()
    return create_orchestrator(settings, latency=NoLatency() if no_latency else None)


def _parse_params(pairs: list[str] | None) -> dict[str, str]:
    params: dict[str, str] = {}
    for pair in pairs or []:
        key, sep, value = pair.partition("=")
        if not sep or not key.strip():
            console.print(f"[red]Error: expected key=value, got '{pair}'[/red]")
            raise typer.Exit(2)
        params[key.strip()] = value.strip()
    return params


def _print_json(payload: Any) -> None:
    console.print_json(json.dumps(payload, default=str))


@app.command()
def search(
    property_id: str = typer.Option(None, "--property-id", "-p", help="Property ID, e.g. MH1234567"),
    registration_number: str = typer.Option(None, "--registration-number", "-r", help="REG/XX/YYYY/NNNNN"),
    owner_name: str = typer.Option(None, "--owner-name", "-o", help="Owner, borrower or company name"),
    sources: str = typer.Option(None, "--sources", "-s", help="Comma-separated subset of doris,dlr,cersai,mca21"),
    client_id: str = typer.Option("cli", "--client-id", help="Rate-limit bucket"),
    as_json: bool = typer.Option(False, "--json", help="Print the raw response envelope"),
    no_latency: bool = typer.Option(False, "--no-latency", help="Skip simulated portal latency"),
):
    """Search every selected portal and merge the results."""
    params = {
        "propertyId": property_id,
        "registrationNumber": registration_number,
        "ownerName": owner_name,
        "sources": sources,
    }

    async def run():
        async with build_orchestrator(no_latency) as orchestrator:
            if as_json:
                return await orchestrator.search(params, client_id=client_id)
            with Progress(
                SpinnerColumn(),
                TextColumn("[progress.description]{task.description}"),
                console=console,
                transient=True,
            ) as progress:
                task = progress.add_task("Querying portals...", total=None)
                response = await orchestrator.search(params, client_id=client_id)
                progress.update(task, completed=True)
            return response

    response = asyncio.run(run())

    if as_json:
        _print_json(response.to_wire())
    else:
        _display_unified(response)

    if not response.success:
        raise typer.Exit(1)


@app.command()
def portal(
    source: str = typer.Argument(..., help="doris, dlr, cersai or mca21"),
    param: list[str] = typer.Option(None, "--param", "-p", help="Search parameter as key=value (repeatable)"),
    client_id: str = typer.Option("cli", "--client-id", help="Rate-limit bucket"),
    no_latency: bool = typer.Option(False, "--no-latency", help="Skip simulated portal latency"),
):
    """Query a single portal adapter."""
    params = _parse_params(param)

    async def run():
        async with build_orchestrator(no_latency) as orchestrator:
            return await orchestrator.query_source(source, params, client_id=client_id)

    response = asyncio.run(run())
    _print_json(response.to_wire())
    if not response.success:
        raise typer.Exit(1)


@app.command()
def resolve(
    identifier: str = typer.Argument(..., help="Identifier from any portal"),
):
    """Show the equivalent identifiers of a property in every portal."""
    from .config import SOURCE_ORDER
    from .xref import CrossReferenceResolver, infer_source

    get_config()
    resolver = CrossReferenceResolver()
    mapping = resolver.resolve_all(identifier)

    table = Table(title=f"Cross-references for '{identifier}'")
    table.add_column("Source")
    table.add_column("Identifier")
    table.add_column("In dataset")
    for source in SOURCE_ORDER:
        ident = mapping.get(source)
        present = resolver.datasets.has(source, ident)
        table.add_row(source.label, ident or "-", "[green]yes[/green]" if present else "[dim]no[/dim]")
    console.print(table)

    if not resolver.classes_for(identifier):
        console.print(f"[yellow]No mapping known; inferred source {infer_source(identifier).label}[/yellow]")


@app.command()
def merge(
    identifier: str = typer.Argument(..., help="Identifier from any portal"),
    sources: str = typer.Option(None, "--sources", "-s", help="Comma-separated subset of doris,dlr,cersai,mca21"),
):
    """Build the merged canonical record for a property."""
    from .merge import MergeEngine
    from .orchestrator import parse_sources
    from .errors import PortalError
    from .xref import CrossReferenceResolver

    get_config()
    try:
        include = parse_sources(sources.split(",") if sources else None)
    except PortalError as e:
        console.print(f"[red]Error: {e.message}[/red]")
        raise typer.Exit(2)

    result = MergeEngine(CrossReferenceResolver()).merge_with_provenance(identifier, include=include)
    if result.record is None:
        console.print(f"[yellow]No source holds a record for '{identifier}'[/yellow]")
        raise typer.Exit(1)

    console.print(
        Panel(
            f"[bold]Contributing sources:[/bold] {', '.join(result.sources)}",
            title=f"Merged record {identifier}",
        )
    )
    _print_json(result.record.to_wire())


@app.command()
def health():
    """Show version, cache and rate-limit status."""
    from .orchestrator import create_orchestrator

    report = create_orchestrator(get_config()).health()

    table = Table(title="Health")
    table.add_column("Metric")
    table.add_column("Value")
    table.add_row("Status", report["status"])
    table.add_row("Version", report["version"])
    table.add_row("Cache entries", str(report["cache"]["size"]))
    for source, limits in report["rateLimits"].items():
        table.add_row(
            f"{source.upper()} rate limit",
            f"{limits['requestsPerMinute']}/min, burst {limits['burstLimit']}",
        )
    console.print(table)


def _display_unified(response) -> None:
    """Display a unified response as rich tables."""
    status = "[green]success[/green]" if response.success else "[red]no results[/red]"
    console.print(
        Panel(
            f"Request {response.request_id}: {status} "
            f"({response.metadata.successful_sources}/{response.metadata.total_sources} sources, "
            f"{response.metadata.processing_time_ms:.0f} ms)",
            title="Unified Search",
        )
    )

    for entry in response.data:
        records = entry.data if isinstance(entry.data, list) else [entry.data]
        table = Table(title=f"{entry.source}")
        table.add_column("Property ID")
        table.add_column("Registration")
        table.add_column("Owners")
        table.add_column("Address")
        for record in records:
            owners = record.get("ownerDetails") or record.get("borrowerDetails") or []
            owner_names = ", ".join(o.get("name", "") for o in owners) or record.get("companyName", "")
            address = (record.get("propertyDetails") or {}).get("address") or record.get("registeredAddress", "")
            table.add_row(
                record.get("propertyId") or record.get("assetId") or record.get("cinNumber") or "-",
                record.get("registrationNumber") or "-",
                owner_names or "-",
                address or "-",
            )
        console.print(table)

    if response.errors:
        table = Table(title="Errors")
        table.add_column("Source")
        table.add_column("Code")
        table.add_column("Message")
        for err in response.errors:
            table.add_row(err.source or "-", err.code, err.message)
        console.print(table)


if __name__ == "__main__":
    app()
