"""Main CLI application."""

from pathlib import Path
from typing import Optional

import typer
from dotenv import load_dotenv

# Load .env file if it exists
load_dotenv()

from ..config import Config
from ..log import setup_logging
from .feeds import maxitem_command, stories_command, updates_command
from .items import (
    comment_command,
    item_command,
    poll_command,
    pollopt_command,
    story_command,
    user_command,
)
from .init import init_command
from .output import fail

app = typer.Typer(
    name="hn",
    help="Query the Hacker News API",
    no_args_is_help=True,
)


@app.callback()
def main(
    ctx: typer.Context,
    config_path: Optional[Path] = typer.Option(
        None,
        "--config",
        "-c",
        help="Config file (default: ~/.config/hnapi/config.yaml)",
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log requests to stderr"),
) -> None:
    """Query the Hacker News API."""
    config = Config(config_path)
    ctx.obj = config

    # init may be replacing a broken file, so do not read it here
    if ctx.invoked_subcommand == "init":
        setup_logging("DEBUG" if verbose else "WARNING")
        return

    try:
        level = "DEBUG" if verbose else config.config.logging.level
    except ValueError as e:
        fail(e, prefix="Invalid config")
    setup_logging(level)


# Register commands
app.command("init")(init_command)
app.command("item")(item_command)
app.command("story")(story_command)
app.command("comment")(comment_command)
app.command("poll")(poll_command)
app.command("pollopt")(pollopt_command)
app.command("user")(user_command)
app.command("stories")(stories_command)
app.command("maxitem")(maxitem_command)
app.command("updates")(updates_command)


if __name__ == "__main__":
    app()
