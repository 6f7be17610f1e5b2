"""Command line entry point: ``user-registry``."""

from pathlib import Path

import typer
from rich.console import Console

from user_registry.runtime.config.config_template import load_config

console = Console()

app = typer.Typer(
    help="User Registry API - operational commands",
    no_args_is_help=True,
    rich_markup_mode="rich",
)


@app.command(name="init-db")
def init_db(
    config_file: Path | None = typer.Option(
        None, "--config", "-c", help="Path to config.yaml"
    ),
) -> None:
    """Create the database tables."""
    from user_registry.core.services.database.db_session import DbSessionService

    config = load_config(config_file)
    service = DbSessionService(config.database)
    try:
        service.create_all()
    finally:
        service.dispose()
    console.print("[bold green]Database initialized[/bold green]")


@app.command()
def serve(
    host: str | None = typer.Option(None, help="Host to bind (default from config)"),
    port: int | None = typer.Option(None, help="Port to bind (default from config)"),
    reload: bool = typer.Option(False, help="Enable auto-reload on code changes"),
) -> None:
    """Start the HTTP server with uvicorn."""
    import uvicorn

    config = load_config()
    bind_host = host or config.app.host
    bind_port = port or config.app.port
    console.print(
        f"[bold green]Starting User Registry API on {bind_host}:{bind_port}[/bold green]"
    )
    uvicorn.run(
        "user_registry.api.http.app:create_app",
        factory=True,
        host=bind_host,
        port=bind_port,
        reload=reload,
    )


def main() -> None:
    app()


if __name__ == "__main__":
    main()
