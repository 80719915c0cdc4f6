"""Data models for the Hacker News API."""

from .base import HNModel, ItemModel
from .item import (
    ASK_ITEM,
    COMMENT_ITEM,
    JOB_ITEM,
    POLL_ITEM,
    POLLOPT_ITEM,
    STORY_ITEM,
    STORY_TYPES,
    Item,
)
from .update import Update
from .user import User
from .variants import Comment, Poll, PollOpt, Story, Variant

__all__ = [
    "HNModel",
    "ItemModel",
    "Item",
    "Story",
    "Comment",
    "Poll",
    "PollOpt",
    "Variant",
    "User",
    "Update",
    "STORY_ITEM",
    "JOB_ITEM",
    "ASK_ITEM",
    "COMMENT_ITEM",
    "POLL_ITEM",
    "POLLOPT_ITEM",
    "STORY_TYPES",
]
