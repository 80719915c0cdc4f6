"""Story list, max item and update feed commands."""

from enum import Enum
from typing import Optional

import typer

from ..api import StoryList
from ..errors import HNAPIError
from .output import fail, make_client, print_result


class Category(str, Enum):
    """Short names for the ranked story lists."""

    top = "top"
    new = "new"
    best = "best"
    show = "show"
    job = "job"


def stories_command(
    ctx: typer.Context,
    category: Category = typer.Argument(Category.top, help="Which story list to fetch"),
    limit: Optional[int] = typer.Option(
        None,
        "--limit",
        "-n",
        help="Only print the first N ids",
        min=1,
    ),
) -> None:
    """Get the ids of a ranked story list."""
    with make_client(ctx) as client:
        try:
            ids = client.top_ids(StoryList[category.name.upper()])
        except HNAPIError as e:
            fail(e)

    if limit is not None:
        ids = ids[:limit]
    print_result(ids)


def maxitem_command(ctx: typer.Context) -> None:
    """Get the current max item id."""
    with make_client(ctx) as client:
        try:
            max_id = client.max_id()
        except HNAPIError as e:
            fail(e)
    print_result(max_id)


def updates_command(ctx: typer.Context) -> None:
    """Get the latest changed items and profiles."""
    with make_client(ctx) as client:
        try:
            update = client.updates()
        except HNAPIError as e:
            fail(e)
    print_result({"items": sorted(update.items), "profiles": sorted(update.profiles)})
