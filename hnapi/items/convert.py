"""Narrow a generic Item into one of the typed variants."""

from typing import AbstractSet, Type, TypeVar

from ..errors import TypeMismatch
from ..models import (
    COMMENT_ITEM,
    POLL_ITEM,
    POLLOPT_ITEM,
    STORY_TYPES,
    Comment,
    Item,
    ItemModel,
    Poll,
    PollOpt,
    Story,
)

V = TypeVar("V", bound=ItemModel)


def _narrow(item: Item, accepted: AbstractSet[str], model: Type[V]) -> V:
    if item.type not in accepted:
        raise TypeMismatch(accepted, item.type)
    fields = item.model_dump(include=set(model.model_fields))
    return model.model_validate(fields)


def to_story(item: Item) -> Story:
    """Convert an Item into a Story. Accepts story, job and ask items."""
    return _narrow(item, STORY_TYPES, Story)


def to_comment(item: Item) -> Comment:
    """Convert an Item into a Comment."""
    return _narrow(item, {COMMENT_ITEM}, Comment)


def to_poll(item: Item) -> Poll:
    """Convert an Item into a Poll."""
    return _narrow(item, {POLL_ITEM}, Poll)


def to_poll_opt(item: Item) -> PollOpt:
    """Convert an Item into a PollOpt."""
    return _narrow(item, {POLLOPT_ITEM}, PollOpt)
