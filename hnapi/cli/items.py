"""Item commands."""

from typing import Callable

import typer

from ..api import HNClient
from ..errors import HNAPIError
from .output import fail, make_client, print_result


def _show(ctx: typer.Context, fetch: Callable[[HNClient], object]) -> None:
    with make_client(ctx) as client:
        try:
            result = fetch(client)
        except HNAPIError as e:
            fail(e)
    print_result(result)


def item_command(
    ctx: typer.Context,
    item_id: int = typer.Option(..., "--id", "-i", help="Id of an item"),
) -> None:
    """Get an item (story, comment, poll or poll option) by id."""
    _show(ctx, lambda client: client.item_by_id(item_id))


def story_command(
    ctx: typer.Context,
    item_id: int = typer.Option(..., "--id", "-i", help="Id of a story, job or ask item"),
) -> None:
    """Get a story by id; fails if the item is not a story."""
    _show(ctx, lambda client: client.story_by_id(item_id))


def comment_command(
    ctx: typer.Context,
    item_id: int = typer.Option(..., "--id", "-i", help="Id of a comment"),
) -> None:
    """Get a comment by id; fails if the item is not a comment."""
    _show(ctx, lambda client: client.comment_by_id(item_id))


def poll_command(
    ctx: typer.Context,
    item_id: int = typer.Option(..., "--id", "-i", help="Id of a poll"),
) -> None:
    """Get a poll by id; fails if the item is not a poll."""
    _show(ctx, lambda client: client.poll_by_id(item_id))


def pollopt_command(
    ctx: typer.Context,
    item_id: int = typer.Option(..., "--id", "-i", help="Id of a poll option"),
) -> None:
    """Get a poll option by id; fails if the item is not a poll option."""
    _show(ctx, lambda client: client.poll_opt_by_id(item_id))


def user_command(
    ctx: typer.Context,
    user_id: str = typer.Option(..., "--id", "-u", help="Handle of a user"),
) -> None:
    """Get a user's profile by handle."""
    _show(ctx, lambda client: client.user_by_id(user_id))
