"""Users service CLI application using Typer.

Provides command-line utilities for running the API and preparing the
database.
"""

import asyncio

import typer
import uvicorn
from rich.console import Console

from users_config.settings import get_settings
from users_identity.infrastructure.persistence.sqlalchemy import create_schema
from users_service.presentation.api.dependencies import get_engine

app = typer.Typer(
    name="users-service",
    help="Users service - registration, login and lookup API",
    no_args_is_help=True,
)
console = Console()


@app.command("serve")
def serve(
    host: str | None = typer.Option(None, help="Bind address (default: API_HOST)"),
    port: int | None = typer.Option(None, help="Port (default: APP_PORT)"),
) -> None:
    """Run the HTTP API with uvicorn."""
    settings = get_settings()
    bind_host = host or settings.api_host
    bind_port = port or settings.app_port

    console.print(
        f"[bold green]Starting {settings.app_name}[/bold green] "
        f"on {bind_host}:{bind_port} "
        f"[dim](storage: {settings.storage_backend})[/dim]",
    )
    uvicorn.run(
        "users_service.presentation.api.app:app",
        host=bind_host,
        port=bind_port,
        log_config=None,
    )


@app.command("init-db")
def init_db() -> None:
    """Create the users table on the configured database."""
    settings = get_settings()
    if settings.database_url is None:
        console.print(
            "[red]DATABASE_CONNECTION_STRING is not set.[/red] "
            "Configure it in the environment or config/.env.",
        )
        raise typer.Exit(code=1)

    async def _init() -> None:
        engine = get_engine()
        try:
            await create_schema(engine)
        finally:
            await engine.dispose()

    asyncio.run(_init())
    console.print("[green]Database schema initialized.[/green]")


def cli() -> None:
    """Entry point for the CLI application."""
    app()


if __name__ == "__main__":
    cli()
