"""Statusboard CLI entry point."""

from __future__ import annotations

import asyncio
from pathlib import Path

import typer
from rich.console import Console
from rich.table import Table

app = typer.Typer(
    name="statusboard",
    help="Statusboard — service status dashboard",
    no_args_is_help=True,
)
console = Console()


@app.command()
def status(
    path: Path | None = typer.Option(None, "--path", "-p", help="Path to .statusboard.yaml"),
) -> None:
    """Check every configured service once and print the results."""
    from statusboard.config.loader import load_config
    from statusboard.registry.manager import ServiceManager

    try:
        config = load_config(path=path)
        manager = ServiceManager.from_config(config)
    except FileNotFoundError as exc:
        console.print(f"[red]{exc}[/red]")
        raise typer.Exit(1)
    except ValueError as exc:
        console.print(f"[red]{exc}[/red]")
        raise typer.Exit(1)

    asyncio.run(manager.update_all_status())

    table = Table(title=config.statusboard.title)
    table.add_column("Service", style="bold")
    table.add_column("URL")
    table.add_column("Status")
    table.add_column("Last checked")
    table.add_column("Error")

    for s in manager.get_services():
        style = "green" if s.status.label == "online" else "red"
        checked = s.last_checked.astimezone().strftime("%Y-%m-%d %H:%M:%S") if s.last_checked else "—"
        table.add_row(s.name, s.url or "—", f"[{style}]{s.status.label}[/{style}]", checked, s.last_error or "")

    console.print(table)


@app.command()
def serve(
    host: str | None = typer.Option(None, help="Bind host (default: server.host from config)"),
    port: int | None = typer.Option(None, help="Bind port (default: server.port from config)"),
    log_level: str = typer.Option("info", help="Uvicorn log level"),
) -> None:
    """Start the Statusboard API server and serve the dashboard page."""
    import uvicorn

    from statusboard.config.loader import load_config
    from statusboard.config.models import ServerConfig

    try:
        server = load_config().server
    except (FileNotFoundError, ValueError):
        server = ServerConfig()

    bind_host = host or server.host
    bind_port = port or server.port
    console.print(f"[bold]Statusboard[/bold] starting on http://{bind_host}:{bind_port}")
    uvicorn.run("statusboard.api.app:app", host=bind_host, port=bind_port, log_level=log_level, reload=False)


config_app = typer.Typer(name="config", help="Configuration commands")
app.add_typer(config_app)


@config_app.command("validate")
def config_validate(
    path: Path | None = typer.Option(None, "--path", "-p", help="Path to .statusboard.yaml"),
) -> None:
    """Validate configuration file."""
    from urllib.parse import urlparse

    import yaml

    from statusboard.checkers import create_checker
    from statusboard.config.loader import load_config

    errors: list[str] = []
    warnings: list[str] = []
    try:
        config = load_config(path=path)
        console.print("[green]✓[/green] YAML parses correctly")
        console.print("[green]✓[/green] Pydantic validation passes")
    except FileNotFoundError as exc:
        console.print(f"[red]✗ {exc}[/red]")
        raise typer.Exit(1)
    except yaml.YAMLError as exc:
        console.print(f"[red]✗ YAML parsing failed: {exc}[/red]")
        raise typer.Exit(1)
    except ValueError as exc:
        console.print("[green]✓[/green] YAML parses correctly")
        console.print(f"[red]✗ Pydantic validation failed: {exc}[/red]")
        raise typer.Exit(1)

    for entry in config.services:
        checker = entry.checker
        if checker is None:
            warnings.append(f"Service '{entry.name}': no checker, status will never change")
            continue
        try:
            create_checker(checker, service_url=entry.url)
        except ValueError as exc:
            errors.append(f"Service '{entry.name}': {exc}")
            continue
        if checker.type == "http":
            parsed = urlparse(checker.url or entry.url)
            if not parsed.scheme or not parsed.netloc:
                errors.append(f"Service '{entry.name}': invalid URL '{checker.url or entry.url}'")
        elif checker.type == "ping" and not checker.host:
            errors.append(f"Service '{entry.name}': ping checker needs a host")
        elif checker.type == "command" and not checker.process_name:
            errors.append(f"Service '{entry.name}': command checker needs a process_name")

    if not errors:
        console.print(f"[green]✓[/green] {len(config.services)} service(s) configured")
        console.print("[green]✓[/green] All checkers are valid")
        for w in warnings:
            console.print(f"[yellow]! {w}[/yellow]")
        console.print("\n[green bold]Configuration is valid.[/green bold]")
    else:
        for err in errors:
            console.print(f"[red]✗ {err}[/red]")
        console.print(f"\n[red bold]{len(errors)} validation error(s) found.[/red bold]")
        raise typer.Exit(1)


@config_app.command("show")
def config_show(
    path: Path | None = typer.Option(None, "--path", "-p", help="Path to .statusboard.yaml"),
) -> None:
    """Print resolved configuration."""
    from statusboard.config.loader import load_config

    try:
        config = load_config(path=path)
    except FileNotFoundError as exc:
        console.print(f"[red]{exc}[/red]")
        raise typer.Exit(1)
    except ValueError as exc:
        console.print(f"[red]{exc}[/red]")
        raise typer.Exit(1)

    console.print(f"[bold]{config.statusboard.name}[/bold] v{config.statusboard.version}\n")

    console.print("[bold]Server:[/bold]")
    console.print(f"  Bind: {config.server.host}:{config.server.port}")
    interval = f"every {config.refresh.interval}s" if config.refresh.interval else "on demand"
    mode = "concurrent" if config.refresh.concurrent else "serial"
    console.print(f"  Refresh: {interval}, {mode}\n")

    console.print("[bold]Services:[/bold]")
    for entry in config.services:
        console.print(f"  {entry.name}: {entry.description or '—'}" + (f" @ {entry.url}" if entry.url else ""))
        checker = entry.checker
        if checker is None:
            console.print("    Checker: none")
        elif checker.type == "http":
            console.print(f"    Checker: http {checker.url or entry.url} (timeout {checker.timeout}s)")
        elif checker.type == "ping":
            console.print(f"    Checker: ping {checker.host}")
        else:
            console.print(f"    Checker: {checker.type} {checker.process_name} (timeout {checker.timeout}s)")


def main() -> None:
    app()
