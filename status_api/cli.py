import asyncio

import typer
from rich.console import Console
from rich.table import Table

from status_api.config import settings
from status_api.core.exceptions import StatusError
from status_api.services.directory import SERVICE_DIRECTORY, lookup_service

console = Console()
cli_app = typer.Typer(name="status-admin", help="Wormly status proxy administrative CLI")

_STATUS_STYLE = {
    "operational": "green",
    "issues": "yellow",
    "warning": "yellow",
    "degraded": "yellow",
    "down": "red",
}


def _run_async(coro):
    """Run async code from sync CLI context."""
    return asyncio.run(coro)


def _client():
    from status_api.services.wormly import create_wormly_client
    return create_wormly_client(settings)


@cli_app.command("status")
def status():
    """Fetch the current status report once and print it."""
    async def _fetch():
        from status_api.services.status import build_status_report
        client = _client()
        try:
            return await build_status_report(client)
        finally:
            await client.close()

    try:
        report = _run_async(_fetch())
    except StatusError as exc:
        console.print(f"[bold red]Failed to fetch status data:[/bold red] {exc}")
        raise typer.Exit(code=1)

    style = _STATUS_STYLE.get(report.overall_status, "white")
    console.print(f"\nOverall: [bold {style}]{report.overall_status}[/bold {style}]  ({report.timestamp})\n")

    if not report.services:
        console.print("[dim]No mapped services found in the Wormly response.[/dim]")
        return

    table = Table(title="Services")
    table.add_column("ID", style="cyan")
    table.add_column("Name")
    table.add_column("Status")
    table.add_column("Uptime %", justify="right")
    table.add_column("Last checked")
    table.add_column("Incident", style="dim")

    for svc in report.services:
        svc_style = _STATUS_STYLE.get(svc.status, "white")
        table.add_row(
            svc.id,
            svc.name,
            f"[{svc_style}]{svc.status}[/{svc_style}]",
            f"{svc.uptime_percentage:.1f}",
            svc.last_checked,
            svc.incident.description if svc.incident else "",
        )
    console.print(table)


@cli_app.command("hosts")
def hosts():
    """List every host Wormly reports and whether it is mapped."""
    async def _fetch():
        from status_api.services.status import host_list
        client = _client()
        try:
            return [h for h in host_list(await client.get_host_status()) if isinstance(h, dict)]
        finally:
            await client.close()

    try:
        host_records = _run_async(_fetch())
    except StatusError as exc:
        console.print(f"[bold red]Failed to fetch Wormly data:[/bold red] {exc}")
        raise typer.Exit(code=1)

    table = Table(title=f"Wormly hosts ({len(host_records)})")
    table.add_column("Host ID", style="cyan")
    table.add_column("Name")
    table.add_column("Mapped to")

    for host in host_records:
        entry = lookup_service(host.get("hostid"))
        table.add_row(str(host.get("hostid")), str(host.get("name", "")), entry.id if entry else "[dim]-[/dim]")
    console.print(table)


@cli_app.command("directory")
def directory():
    """Print the fixed service directory."""
    table = Table(title=f"Service directory ({len(SERVICE_DIRECTORY)})")
    table.add_column("Host ID", style="cyan")
    table.add_column("Service ID")
    table.add_column("Name")
    table.add_column("Description", style="dim")

    for host_id, entry in SERVICE_DIRECTORY.items():
        table.add_row(host_id, entry.id, entry.name, entry.description)
    console.print(table)


@cli_app.command("serve")
def serve(
    host: str = typer.Option(None, "--host", help="Bind address (defaults to HOST)"),
    port: int = typer.Option(None, "--port", help="Listening port (defaults to PORT)"),
):
    """Run the status API under uvicorn."""
    import uvicorn

    uvicorn.run(
        "status_api.main:app",
        host=host or settings.host,
        port=port or settings.port,
        reload=not settings.is_production,
    )


if __name__ == "__main__":
    cli_app()
