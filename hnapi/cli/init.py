"""Init command implementation."""

from pathlib import Path

import typer
from rich.console import Console

from ..config import ClientConfig, ConfigModel, LoggingConfig, save_config
from ..config.models import DEFAULT_BASE_URL
from .output import fail

console = Console()


def init_command(
    ctx: typer.Context,
    base_url: str = typer.Option(DEFAULT_BASE_URL, "--base-url", help="API root, including the version path"),
    log_level: str = typer.Option("WARNING", "--log-level", help="Log level for the hn command"),
    force: bool = typer.Option(False, "--force", "-f", help="Overwrite an existing config file"),
) -> None:
    """Write a config file with the given settings."""
    config_path: Path = ctx.obj.config_path

    if config_path.exists() and not force:
        console.print(f"[yellow]Config already exists: {config_path} (use --force to overwrite)[/yellow]")
        raise typer.Exit(1)

    try:
        config = ConfigModel(
            api=ClientConfig(base_url=base_url),
            logging=LoggingConfig(level=log_level),
        )
    except ValueError as e:
        fail(e, prefix="Invalid config")

    save_config(config, config_path)
    console.print(f"✅ Created config: {config_path}")
