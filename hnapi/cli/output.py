"""Shared helpers for CLI commands."""

from typing import Any, NoReturn

import typer
from pydantic import BaseModel
from rich.console import Console

from ..api import HNClient
from ..config import Config

console = Console()
err_console = Console(stderr=True)


def make_client(ctx: typer.Context) -> HNClient:
    """Build a client from the config loaded by the app callback."""
    config: Config = ctx.obj
    try:
        client_config = config.get_client_config()
    except ValueError as e:
        fail(e, prefix="Invalid config")
    return HNClient(client_config)


def print_result(result: Any) -> None:
    """Pretty-print a model or plain JSON value."""
    if isinstance(result, BaseModel):
        result = result.model_dump(mode="json")
    console.print_json(data=result, indent=2, highlight=False)


def fail(error: Exception, prefix: str = "An error occurred") -> NoReturn:
    """Report an error and exit with status 1."""
    err_console.print(
        f"{prefix}: {error}", style="red", markup=False, highlight=False, soft_wrap=True
    )
    raise typer.Exit(1)
